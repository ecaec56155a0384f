"""
Sidebar component for Book Search.

Lets the user choose and load a corpus and shows what is loaded.
"""

import streamlit as st
from pathlib import Path

from ...core import get_logger, CorpusError
from ...corpus import CorpusLoader
from ..state import get_state, set_state, clear_search_state

logger = get_logger(__name__)


def render_sidebar(default_corpus: Path) -> None:
    """
    Render the sidebar with corpus selection and statistics.

    Args:
        default_corpus: Path pre-filled in the corpus input.
    """
    with st.sidebar:
        st.title("Book Search")

        st.subheader("Corpus")
        corpus_path = st.text_input(
            "JSON file, PDF or directory",
            value=get_state("corpus_path") or str(default_corpus)
        )

        if st.button("Load corpus", use_container_width=True):
            _load_corpus(corpus_path)

        error = get_state("corpus_error")
        if error:
            st.error(error)

        st.divider()

        st.subheader("Statistics")
        _render_statistics()

        st.divider()

        _render_help()


def _load_corpus(corpus_path: str) -> None:
    """Load books into session state."""
    set_state("corpus_path", corpus_path)

    with st.spinner("Loading corpus..."):
        try:
            books = CorpusLoader().load(corpus_path)
        except CorpusError as e:
            logger.error(f"Corpus load failed: {e.message}")
            set_state("books", [])
            set_state("corpus_error", e.message)
        else:
            set_state("books", books)
            set_state("corpus_error", None)

    clear_search_state()


def _render_statistics() -> None:
    """Display counts for the loaded corpus."""
    books = get_state("books", [])
    fragment_count = sum(len(book.content or ()) for book in books)

    col1, col2 = st.columns(2)

    with col1:
        st.metric("Books", f"{len(books):,}")

    with col2:
        st.metric("Lines", f"{fragment_count:,}")


def _render_help() -> None:
    with st.expander("Search help"):
        st.markdown("""
        - Matching is **case-sensitive**: `The` does not find `the`
        - The term is matched literally, punctuation included
        - Phrases match only when the words are adjacent on one scanned line
        """)
