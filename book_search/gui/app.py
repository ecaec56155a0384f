"""
Main Streamlit application for Book Search.

Entry point that assembles the sidebar, search bar and results table.

Note: This file is run directly by Streamlit, so it needs to
set up the Python path before importing other modules.
"""

import argparse
import sys
from pathlib import Path

# Add project root to path for imports when run directly by Streamlit
_project_root = Path(__file__).parent.parent.parent
if str(_project_root) not in sys.path:
    sys.path.insert(0, str(_project_root))

import streamlit as st  # noqa: E402

from book_search.core import get_config, get_logger, setup_logging_from_config  # noqa: E402
from book_search.search import search  # noqa: E402

from book_search.gui.state import init_state, get_state, set_state, get_pagination_state  # noqa: E402
from book_search.gui.components import (  # noqa: E402
    render_sidebar,
    render_search_bar,
    render_search_header,
    render_no_results,
    render_results,
    render_pagination,
    render_download,
)

logger = get_logger(__name__)


def parse_app_args(argv=None):
    """
    Parse the options scripts/run_app.py forwards after "--".

    Unknown options are ignored so Streamlit's own flags never break the app.
    """
    parser = argparse.ArgumentParser(add_help=False)
    parser.add_argument("--corpus", type=str)
    parser.add_argument("--config", type=str)

    args, _ = parser.parse_known_args(argv)
    return args


def main():
    """Main application entry point."""
    args = parse_app_args(sys.argv[1:])

    config = get_config(Path(args.config) if args.config else None)
    setup_logging_from_config()

    st.set_page_config(
        page_title=config.gui.page_title,
        layout="wide",
        initial_sidebar_state="expanded"
    )

    init_state()

    render_sidebar(args.corpus or config.paths.data_directory)

    st.title(config.gui.page_title)

    term, submitted = render_search_bar()

    if submitted and (term or config.search.allow_empty_term):
        _execute_search(term)

    _render_results_section(config)


def _execute_search(term: str) -> None:
    """Run the search over the loaded books and store the report."""
    books = get_state("books", [])

    if not books:
        st.warning("Load a corpus from the sidebar first.")
        return

    report = search(term, books)
    set_state("search_report", report)

    logger.info(f"Search '{term}': {report.total_results} results")


def _render_results_section(config) -> None:
    """Render the search results section."""
    report = get_state("search_report")

    if report is None:
        st.markdown("Load a corpus, then type an exact word or phrase to locate it.")
        return

    render_search_header(report)

    if not report.results:
        render_no_results(report.search_term)
        return

    per_page = config.gui.results_per_page
    pagination = get_pagination_state(per_page)
    page_results = report.results[pagination["offset"]:pagination["offset"] + per_page]

    st.divider()

    render_results(
        page_results,
        get_state("books", []),
        show_text=config.gui.show_fragment_text,
        context_length=config.search.context_length
    )

    render_pagination(report.total_results, per_page)

    render_download(report)


if __name__ == "__main__":
    main()
