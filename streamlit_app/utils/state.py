"""
Directory State Management Module.

This module wraps Streamlit's session_state for the directory page. The
filter widgets write their values into session_state; current_criteria()
turns them into an explicit FilterCriteria so the catalog filter itself
never reads UI state.

Session state keys:
- `search_term`: free-text query (bound to the search box)
- `category_filter`, `method_filter`, `cuisine_filter`: select box values ("all" = no constraint)
- `champion`: champion Recipe picked for this session (None for an empty catalog)
- `quick_terms`: quick punch terms picked for this session
- `session_started_at`: time.time() of the first run, drives tagline/placeholder rotation

# NOTE: The champion and quick punches are picked once per session (on the
    first run), matching "once per load" in a browser tab.
"""

import time
from typing import List, Optional, Sequence

import streamlit as st

from catalog.featured import pick_featured_recipe, pick_quick_terms
from catalog.models import ALL, FilterCriteria, Recipe

SEARCH_KEY = "search_term"
CATEGORY_KEY = "category_filter"
METHOD_KEY = "method_filter"
CUISINE_KEY = "cuisine_filter"
CHAMPION_KEY = "champion"
QUICK_TERMS_KEY = "quick_terms"
STARTED_AT_KEY = "session_started_at"


def init_state() -> None:
    """
    Ensure every directory key exists in session state.

    Call this at the start of the page, before any widget bound to these keys
    is created.
    """
    defaults = {
        SEARCH_KEY: "",
        CATEGORY_KEY: ALL,
        METHOD_KEY: ALL,
        CUISINE_KEY: ALL,
        STARTED_AT_KEY: time.time(),
    }
    for key, value in defaults.items():
        if key not in st.session_state:
            st.session_state[key] = value


def current_criteria() -> FilterCriteria:
    """
    Build the active FilterCriteria from session state.

    Returns:
        FilterCriteria with the current search text and select box values
    """
    init_state()
    return FilterCriteria(
        query=st.session_state[SEARCH_KEY] or "",
        category=st.session_state[CATEGORY_KEY],
        method=st.session_state[METHOD_KEY],
        cuisine=st.session_state[CUISINE_KEY],
    )


def elapsed_seconds() -> float:
    """Seconds since this session's first run."""
    init_state()
    return time.time() - st.session_state[STARTED_AT_KEY]


def set_search_term(term: str) -> None:
    """Set the search text. Use as an on_click callback (before widgets render)."""
    st.session_state[SEARCH_KEY] = term


def clear_search() -> None:
    st.session_state[SEARCH_KEY] = ""


def reset_filters() -> None:
    """Clear the search text and every select box filter."""
    st.session_state[SEARCH_KEY] = ""
    st.session_state[CATEGORY_KEY] = ALL
    st.session_state[METHOD_KEY] = ALL
    st.session_state[CUISINE_KEY] = ALL


def get_champion(recipes: Sequence[Recipe]) -> Optional[Recipe]:
    """
    Get this session's champion recipe, picking it on first call.

    Returns:
        Champion recipe, or None for an empty catalog
    """
    if CHAMPION_KEY not in st.session_state:
        st.session_state[CHAMPION_KEY] = pick_featured_recipe(recipes)
    return st.session_state[CHAMPION_KEY]


def get_quick_terms(candidates: Sequence[str], count: int) -> List[str]:
    """Get this session's quick punch terms, sampling them on first call."""
    if QUICK_TERMS_KEY not in st.session_state:
        st.session_state[QUICK_TERMS_KEY] = pick_quick_terms(candidates, count)
    return st.session_state[QUICK_TERMS_KEY]
