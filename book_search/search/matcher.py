"""
Exact substring matcher over scanned books.

Walks every book in order, keeps the fragments whose text contains the
search term (case-sensitive, no pattern syntax) and tags each with the
book's ISBN. Missing content, missing text and a missing term all degrade
to "no match"; only a books argument that is not a sequence of book
records is an error.
"""

from collections.abc import Iterable, Mapping
from typing import Any, Iterator, List, Optional

from ..core import get_logger, InvalidInputError
from .models import Book, Fragment, SearchReport, SearchResult

logger = get_logger(__name__)


def fragment_matches(fragment: Fragment, search_term: Optional[str]) -> bool:
    """
    Test whether a fragment's text contains the search term.

    An empty term is contained in every present text.
    """
    if not isinstance(search_term, str):
        return False

    text = fragment.text
    if not isinstance(text, str):
        return False

    return search_term in text


def search(search_term: Optional[str], books: Iterable) -> SearchReport:
    """
    Find every fragment containing the search term.

    Args:
        search_term: Term to look for, echoed unchanged in the report.
        books: Books in the order results should be reported. Mappings in
            the JSON interchange layout are accepted too.

    Returns:
        SearchReport with one SearchResult per matching fragment.

    Raises:
        InvalidInputError: If books is not iterable or yields something
            that is not a book record.
    """
    results: List[SearchResult] = []
    book_count = 0

    for book in _iter_books(books, search_term):
        book_count += 1

        if not book.has_content:
            continue

        for fragment in book.content:
            if fragment_matches(fragment, search_term):
                results.append(
                    SearchResult(isbn=book.isbn, page=fragment.page, line=fragment.line)
                )

    logger.debug(
        f"Search {search_term!r}: {len(results)} results across {book_count} books"
    )

    return SearchReport(search_term=search_term, results=tuple(results))


def count_matches(search_term: Optional[str], books: Iterable) -> int:
    """Count matching fragments across all books."""
    return sum(
        1
        for book in _iter_books(books, search_term)
        if book.has_content
        for fragment in book.content
        if fragment_matches(fragment, search_term)
    )


def _iter_books(books: Any, search_term: Optional[str]) -> Iterator[Book]:
    """Yield Book instances, coercing interchange mappings."""
    if isinstance(books, (str, bytes)) or not isinstance(books, Iterable):
        raise InvalidInputError(
            f"Books must be an iterable of book records, got {type(books).__name__}",
            query=search_term
        )

    for index, book in enumerate(books):
        if isinstance(book, Book):
            yield book
        elif isinstance(book, Mapping):
            yield Book.from_dict(book)
        else:
            raise InvalidInputError(
                f"Book at index {index} is not a book record: {type(book).__name__}",
                query=search_term,
                details={"index": index}
            )


if __name__ == "__main__":
    sample = Book(
        isbn="9780000528531",
        title="Twenty Thousand Leagues Under the Sea",
        content=(
            Fragment(31, 8, "now simply went on by her own momentum.  The dark-"),
            Fragment(31, 9, "ness was then profound; and however good the Canadian's"),
            Fragment(31, 10, "eyes were, I asked myself how he had managed to see, and"),
        )
    )

    for term in ["the", "The", "Canadian's", "now simply went on by her own", None]:
        report = search(term, [sample])
        print(f"{term!r:35} -> {[(r.page, r.line) for r in report.results]}")
