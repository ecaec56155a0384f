"""
Streamlit session state management.

Provides helpers for initializing, reading, and updating
session state values used across the application.
"""

import streamlit as st
from typing import Any, Dict


DEFAULT_STATE = {
    "search_term": "",
    "search_report": None,
    "corpus_path": "",
    "books": [],
    "corpus_error": None,
    "current_page": 1,
}


def init_state() -> None:
    """
    Initialize session state with default values.

    Only sets values that don't already exist, preserving
    state across reruns.
    """
    for key, default_value in DEFAULT_STATE.items():
        if key not in st.session_state:
            st.session_state[key] = default_value


def get_state(key: str, default: Any = None) -> Any:
    """Get a value from session state."""
    return st.session_state.get(key, default)


def set_state(key: str, value: Any) -> None:
    """Set a value in session state."""
    st.session_state[key] = value


def clear_search_state() -> None:
    """Reset search-related state to defaults."""
    set_state("search_report", None)
    set_state("current_page", 1)


def get_pagination_state(results_per_page: int) -> Dict[str, int]:
    """
    Get pagination-related state.

    Returns:
        Dictionary with current_page, results_per_page, and offset.
    """
    current_page = get_state("current_page", 1)
    offset = (current_page - 1) * results_per_page

    return {
        "current_page": current_page,
        "results_per_page": results_per_page,
        "offset": offset
    }
