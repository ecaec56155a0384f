"""
Tests for search data models.

Tests Fragment, Book, SearchResult and SearchReport dataclasses and their
JSON interchange conversion.
"""

import dataclasses
import pytest

from book_search.core.exceptions import InvalidInputError
from book_search.search.models import Book, Fragment, SearchReport, SearchResult


class TestFragment:
    """Tests for Fragment dataclass."""

    def test_text_is_optional(self):
        """Test that text defaults to None."""
        fragment = Fragment(page=1, line=2)

        assert fragment.text is None

    def test_is_immutable(self):
        """Test that fragments cannot be modified."""
        fragment = Fragment(page=1, line=2, text="x")

        with pytest.raises(dataclasses.FrozenInstanceError):
            fragment.text = "y"

    def test_from_dict_missing_text(self):
        """Test that a record without Text yields text=None."""
        fragment = Fragment.from_dict({"Page": 3, "Line": 4})

        assert fragment == Fragment(page=3, line=4, text=None)

    def test_from_dict_rejects_non_mapping(self):
        """Test that a non-mapping fragment record is rejected."""
        with pytest.raises(InvalidInputError):
            Fragment.from_dict(["Page", 1])


class TestBook:
    """Tests for Book dataclass."""

    def test_content_list_becomes_tuple(self):
        """Test that list content is frozen into a tuple."""
        book = Book(isbn="1", content=[Fragment(1, 1, "a")])

        assert isinstance(book.content, tuple)
        assert book.has_content

    def test_content_defaults_to_absent(self):
        """Test that content defaults to None."""
        book = Book(isbn="1")

        assert book.content is None
        assert book.has_content is False

    def test_from_dict(self, twenty_leagues_records):
        """Test building a book from the interchange layout."""
        book = Book.from_dict(twenty_leagues_records[0])

        assert book.isbn == "9780000528531"
        assert book.title == "Twenty Thousand Leagues Under the Sea"
        assert len(book.content) == 3
        assert book.content[1] == Fragment(
            page=31, line=9, text="ness was then profound; and however good the Canadian's"
        )

    def test_from_dict_null_content(self):
        """Test that null or missing Content yields an absent content."""
        assert Book.from_dict({"ISBN": "1", "Content": None}).content is None
        assert Book.from_dict({"ISBN": "1"}).content is None

    def test_from_dict_missing_title(self):
        """Test that a missing title becomes an empty string."""
        assert Book.from_dict({"ISBN": "1"}).title == ""

    def test_from_dict_missing_isbn(self):
        """Test that a missing ISBN is kept as None."""
        book = Book.from_dict({"Title": "x", "Content": []})

        assert book.isbn is None
        assert book.content == ()

    def test_from_dict_string_content_is_absent(self):
        """Test that content which is not a list is treated as absent."""
        assert Book.from_dict({"ISBN": "1", "Content": "text"}).content is None

    def test_from_dict_drops_non_record_fragments(self):
        """Test that null and scalar entries in Content are dropped."""
        book = Book.from_dict({
            "ISBN": "1",
            "Content": [None, {"Page": 1, "Line": 1, "Text": "a"}, "b"]
        })

        assert book.content == (Fragment(page=1, line=1, text="a"),)

    def test_from_dict_rejects_non_mapping(self):
        """Test that a book record that is not a mapping is rejected."""
        with pytest.raises(InvalidInputError):
            Book.from_dict(["ISBN", "1"])

    def test_to_dict_round_trip(self, twenty_leagues_records):
        """Test that to_dict reproduces the interchange record."""
        book = Book.from_dict(twenty_leagues_records[0])

        assert book.to_dict() == twenty_leagues_records[0]


class TestSearchReport:
    """Tests for SearchReport dataclass."""

    def test_results_default_empty(self):
        """Test that results default to an empty tuple, never None."""
        report = SearchReport(search_term="x")

        assert report.results == ()
        assert report.total_results == 0

    def test_results_list_becomes_tuple(self):
        """Test that list results are frozen into a tuple."""
        report = SearchReport(search_term="x", results=[SearchResult("1", 2, 3)])

        assert report.results == (SearchResult("1", 2, 3),)

    def test_from_dict(self):
        """Test rebuilding a report from its JSON record."""
        data = {
            "SearchTerm": "the",
            "Results": [{"ISBN": "9780000528531", "Page": 31, "Line": 9}]
        }

        report = SearchReport.from_dict(data)

        assert report.search_term == "the"
        assert report.results == (SearchResult("9780000528531", 31, 9),)
        assert report.to_dict() == data
