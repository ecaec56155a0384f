"""
Data models for book search.

Defines immutable dataclasses for scanned fragments, books, search results
and reports, plus conversion to and from the JSON interchange layout
(Title/ISBN/Content/Page/Line/Text, SearchTerm/Results).
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, Tuple

from ..core import InvalidInputError


@dataclass(frozen=True)
class Fragment:
    """
    One scanned line of text.

    Attributes:
        page: Page number as printed in the source.
        line: Line number within the page.
        text: Scanned text; None when the scan produced nothing.
    """
    page: int
    line: int
    text: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Fragment":
        """Build a fragment from a {"Page", "Line", "Text"} record."""
        if not isinstance(data, Mapping):
            raise InvalidInputError(
                f"Fragment record must be a mapping, got {type(data).__name__}"
            )

        return cls(
            page=data.get("Page"),
            line=data.get("Line"),
            text=data.get("Text")
        )

    def to_dict(self) -> Dict[str, Any]:
        return {"Page": self.page, "Line": self.line, "Text": self.text}


@dataclass(frozen=True)
class Book:
    """
    A scanned work identified by its ISBN.

    Attributes:
        isbn: Unique identifier, used verbatim; None when the record has none.
        title: Informational only, never matched against.
        content: Ordered fragments; None when the book has no scanned text.
    """
    isbn: Optional[str]
    title: str = ""
    content: Optional[Tuple[Fragment, ...]] = None

    def __post_init__(self):
        if self.content is not None and not isinstance(self.content, tuple):
            object.__setattr__(self, "content", tuple(self.content))

    @property
    def has_content(self) -> bool:
        return bool(self.content)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Book":
        """
        Build a book from a {"Title", "ISBN", "Content"} record.

        A missing ISBN stays None. Content that is not a list is treated as
        absent, and entries of the list that are not fragment records are
        dropped; neither can ever match.

        Raises:
            InvalidInputError: If the record itself is not a mapping.
        """
        if not isinstance(data, Mapping):
            raise InvalidInputError(
                f"Book record must be a mapping, got {type(data).__name__}"
            )

        raw_content = data.get("Content")
        content = None

        if isinstance(raw_content, (list, tuple)):
            content = tuple(
                Fragment.from_dict(item) for item in raw_content
                if isinstance(item, Mapping)
            )

        return cls(
            isbn=data.get("ISBN"),
            title=data.get("Title") or "",
            content=content
        )

    def to_dict(self) -> Dict[str, Any]:
        content = None
        if self.content is not None:
            content = [fragment.to_dict() for fragment in self.content]
        return {"Title": self.title, "ISBN": self.isbn, "Content": content}


@dataclass(frozen=True)
class SearchResult:
    """A single match: where in which book the term was found."""
    isbn: Optional[str]
    page: int
    line: int

    def to_dict(self) -> Dict[str, Any]:
        return {"ISBN": self.isbn, "Page": self.page, "Line": self.line}


@dataclass(frozen=True)
class SearchReport:
    """
    Output of one search.

    Attributes:
        search_term: The term exactly as given, None included.
        results: Matches in book order, then fragment order.
    """
    search_term: Optional[str]
    results: Tuple[SearchResult, ...] = field(default_factory=tuple)

    def __post_init__(self):
        if not isinstance(self.results, tuple):
            object.__setattr__(self, "results", tuple(self.results))

    @property
    def total_results(self) -> int:
        return len(self.results)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "SearchTerm": self.search_term,
            "Results": [result.to_dict() for result in self.results]
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "SearchReport":
        """Rebuild a report from its {"SearchTerm", "Results"} record."""
        results = tuple(
            SearchResult(isbn=item["ISBN"], page=item["Page"], line=item["Line"])
            for item in data.get("Results") or []
        )
        return cls(search_term=data.get("SearchTerm"), results=results)
