"""
Results list component for displaying search results.

Renders one row per match with the book, location and the matching line,
plus pagination and a JSON download of the report.
"""

import streamlit as st
from typing import Dict, List, Sequence, Tuple

from ...search import Book, SearchReport, SearchResult, report_to_json
from ..state import get_state, set_state


def render_results(
    results: Sequence[SearchResult],
    books: List[Book],
    show_text: bool = True,
    context_length: int = 80
) -> None:
    """
    Render a page of search results as a table.

    Args:
        results: The results to display.
        books: Loaded books, used to look up titles and line text.
        show_text: Whether to include the matching line.
        context_length: Maximum characters of line text shown.
    """
    if not results:
        return

    titles, texts = _build_lookups(books)

    rows = []
    for result in results:
        row = {
            "ISBN": result.isbn,
            "Title": titles.get(result.isbn, ""),
            "Page": result.page,
            "Line": result.line,
        }
        if show_text:
            text = texts.get((result.isbn, result.page, result.line)) or ""
            row["Text"] = _truncate(text, context_length)
        rows.append(row)

    st.dataframe(rows, use_container_width=True, hide_index=True)


def render_download(report: SearchReport) -> None:
    """Offer the report as a JSON download."""
    st.download_button(
        "Download JSON report",
        data=report_to_json(report),
        file_name="search_report.json",
        mime="application/json"
    )


def render_pagination(total_results: int, results_per_page: int) -> None:
    """
    Render pagination controls.

    Args:
        total_results: Total number of matching results.
        results_per_page: Number of results per page.
    """
    if total_results <= results_per_page:
        return

    total_pages = (total_results + results_per_page - 1) // results_per_page
    current_page = get_state("current_page", 1)

    col1, col2, col3 = st.columns([1, 2, 1])

    with col1:
        if st.button("Previous", disabled=current_page <= 1):
            set_state("current_page", current_page - 1)
            st.rerun()

    with col2:
        st.markdown(
            f"<div style='text-align:center'>Page {current_page} of {total_pages}</div>",
            unsafe_allow_html=True
        )

    with col3:
        if st.button("Next", disabled=current_page >= total_pages):
            set_state("current_page", current_page + 1)
            st.rerun()


def _build_lookups(books: List[Book]) -> Tuple[Dict[str, str], Dict[tuple, str]]:
    """Map ISBN to title and (isbn, page, line) to text."""
    titles = {}
    texts = {}

    for book in books:
        titles.setdefault(book.isbn, book.title)
        for fragment in book.content or ():
            texts.setdefault((book.isbn, fragment.page, fragment.line), fragment.text)

    return titles, texts


def _truncate(text: str, max_length: int, suffix: str = "...") -> str:
    if len(text) <= max_length:
        return text
    return text[:max(max_length - len(suffix), 0)] + suffix
