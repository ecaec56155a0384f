"""
Search module for exact term lookup in scanned books.

Provides the data models, the substring matcher and report export.
"""

from .models import Fragment, Book, SearchResult, SearchReport
from .matcher import search, fragment_matches, count_matches
from .exporter import report_to_json, write_report, format_report_table

__all__ = [
    "Fragment",
    "Book",
    "SearchResult",
    "SearchReport",
    "search",
    "fragment_matches",
    "count_matches",
    "report_to_json",
    "write_report",
    "format_report_table"
]
