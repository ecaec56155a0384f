"""
Search bar component for Book Search.

Provides the main search input and submit functionality.
"""

import streamlit as st
from typing import Tuple

from ...search import SearchReport
from ..state import get_state, set_state, clear_search_state


def render_search_bar() -> Tuple[str, bool]:
    """
    Render the search input bar.

    Returns:
        Tuple of (search_term, was_submitted).
    """
    col1, col2 = st.columns([5, 1])

    with col1:
        term = st.text_input(
            "Search",
            value=get_state("search_term", ""),
            placeholder="Exact text to find...",
            key="search_input",
            label_visibility="collapsed"
        )

    with col2:
        submitted = st.button(
            "Search",
            type="primary",
            use_container_width=True
        )

    term_changed = term != get_state("search_term", "") and term != ""

    if term_changed:
        clear_search_state()
        set_state("search_term", term)

    return term, submitted or term_changed


def render_search_header(report: SearchReport) -> None:
    """Render the result count for a report."""
    col1, col2 = st.columns([2, 3])

    with col1:
        st.markdown(f"**{report.total_results:,}** matches")

    with col2:
        st.caption(f"Term: \"{report.search_term}\"")


def render_no_results(search_term: str) -> None:
    """Display no results message with suggestions."""
    st.info(f"No line contains \"{search_term}\"")

    with st.expander("Suggestions"):
        st.markdown("""
        - Check the capitalisation, matching is case-sensitive
        - Try a shorter term, words split by a hyphen across lines will not match
        """)
