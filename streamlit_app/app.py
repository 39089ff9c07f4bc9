"""
Brooklyn Food Fight - Streamlit Recipe Directory.

This is the Streamlit entry point. It renders the whole directory on one page:
- Title with the recipe count and a rotating tagline
- Search box (rotating placeholder) and category / method / cuisine filters
- Quick punch buttons and the champion recipe
- Chapters of matching recipes, numbered, in curated order
- A detail dialog linking to the full recipe document

Every rerun rebuilds FilterCriteria from session state and calls the pure
catalog.search.search_catalog(); nothing about the result is stored.

Run with:
    streamlit run streamlit_app/app.py
"""

import sys
from html import escape
from pathlib import Path

# Ensure the streamlit_app directory is in the Python path
# This allows imports to work regardless of how the app is run
streamlit_app_dir = Path(__file__).parent
if str(streamlit_app_dir) not in sys.path:
    sys.path.insert(0, str(streamlit_app_dir))

# Add project root to path so we can import api.config and catalog
project_root = streamlit_app_dir.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

# Import config early to load .env file before any other code accesses environment variables
import api.config  # noqa: F401

import streamlit as st

from api.config import CatalogConfig
from catalog.dataset import get_categories, get_cuisines, get_methods
from catalog.featured import quick_term_candidates
from catalog.links import build_recipe_link
from catalog.models import ALL, Recipe
from catalog.rotation import TAGLINE_INTERVAL_SECONDS, current_placeholder, current_tagline
from catalog.search import count_grouped, matched_ingredients, search_catalog
from utils.catalog_data import get_catalog, get_settings
from utils.state import (
    CATEGORY_KEY,
    CUISINE_KEY,
    METHOD_KEY,
    SEARCH_KEY,
    clear_search,
    current_criteria,
    elapsed_seconds,
    get_champion,
    get_quick_terms,
    init_state,
    reset_filters,
    set_search_term,
)
from ui.styles import load_global_styles
from ui.layout import chapter_header, page_header, render_footer, results_indicator
from ui.feedback import show_empty_state, show_warning

# Page configuration - must be called before any other Streamlit commands
st.set_page_config(
    page_title="Brooklyn Food Fight",
    page_icon="🥊",
    layout="centered",
    initial_sidebar_state="auto",
)

init_state()
load_global_styles()

recipes = get_catalog()
settings = get_settings()


@st.fragment(run_every=TAGLINE_INTERVAL_SECONDS)
def render_title(total: int) -> None:
    """Title block; re-runs on its own timer so the tagline rotates."""
    page_header("BROOKLYN FOOD FIGHT", f"{total} {current_tagline(elapsed_seconds())}")


def axis_label(all_label: str):
    """format_func for filter select boxes: show 'all' as a friendly label."""
    return lambda value: all_label if value == ALL else value


@st.dialog("Recipe")
def recipe_dialog(recipe: Recipe) -> None:
    """Detail view: name, cuisine/category, ingredients and the document link."""
    eyebrow = escape(recipe.cuisine or recipe.chapter)
    st.markdown(f'<div class="eyebrow-text">{eyebrow}</div>', unsafe_allow_html=True)
    st.markdown(f"### {recipe.display_name}")

    details = [d for d in (recipe.chapter, recipe.cooking_method) if d]
    if details:
        st.caption(" · ".join(details))

    if recipe.ingredients:
        st.markdown("**Ingredients:** " + ", ".join(recipe.ingredients))

    col_open, col_close = st.columns([2, 1])
    with col_open:
        link = build_recipe_link(recipe)
        if link:
            st.link_button("View Full Recipe →", link, type="primary", use_container_width=True)
        else:
            st.caption("No document linked for this recipe.")
    with col_close:
        if st.button("Close", key="dialog_close", use_container_width=True):
            st.rerun()


render_title(len(recipes))

if not recipes:
    show_warning(
        "No recipes loaded.",
        hint=f"Check that the dataset exists at {CatalogConfig.get_data_path()} (RECIPE_DATA_PATH).",
    )
    st.stop()

# Search box + clear
col_search, col_clear = st.columns([6, 1])
with col_search:
    st.text_input(
        "Search recipes",
        key=SEARCH_KEY,
        placeholder=current_placeholder(elapsed_seconds()),
        label_visibility="collapsed",
    )
with col_clear:
    if st.session_state[SEARCH_KEY]:
        st.button("×", key="clear_search", on_click=clear_search, use_container_width=True)

# Filter axes
col_category, col_method, col_cuisine = st.columns(3)
with col_category:
    st.selectbox(
        "Category",
        options=[ALL] + get_categories(recipes, settings.category_order),
        key=CATEGORY_KEY,
        format_func=axis_label("All chapters"),
    )
with col_method:
    st.selectbox(
        "Method",
        options=[ALL] + get_methods(recipes),
        key=METHOD_KEY,
        format_func=axis_label("Any method"),
    )
with col_cuisine:
    st.selectbox(
        "Cuisine",
        options=[ALL] + get_cuisines(recipes),
        key=CUISINE_KEY,
        format_func=axis_label("Any cuisine"),
    )

# Quick punches
quick_terms = get_quick_terms(
    quick_term_candidates(recipes, CatalogConfig.get_quick_term_source()),
    CatalogConfig.get_quick_term_count(),
)
if quick_terms:
    st.markdown('<div class="eyebrow-text">Quick punches:</div>', unsafe_allow_html=True)
    active_term = st.session_state[SEARCH_KEY].strip().lower()
    for col, term in zip(st.columns(len(quick_terms)), quick_terms):
        with col:
            st.button(
                term,
                key=f"quick_{term}",
                on_click=set_search_term,
                args=(term,),
                type="primary" if term.lower() == active_term else "secondary",
                use_container_width=True,
            )

# Champion
champion = get_champion(recipes)
if champion is not None:
    st.markdown(
        '<div class="bff-champion"><span class="bff-champion-label">🏆 Champion</span></div>',
        unsafe_allow_html=True,
    )
    if st.button(f"{champion.display_name} →", key="champion"):
        recipe_dialog(champion)

# Results
criteria = current_criteria()
grouped = search_catalog(recipes, criteria, settings)

if criteria.query.strip():
    results_indicator(count_grouped(grouped), criteria.query.strip())

for chapter_number, (chapter, chapter_recipes) in enumerate(grouped.items(), start=1):
    chapter_header(chapter_number, chapter, len(chapter_recipes))
    for index, recipe in enumerate(chapter_recipes, start=1):
        label = f"{index:02d}   {recipe.display_name}"
        if recipe.cuisine:
            label += f"   ·   {recipe.cuisine}"
        if st.button(label, key=f"recipe_{chapter_number}_{index}", use_container_width=True):
            recipe_dialog(recipe)
        hits = matched_ingredients(recipe, criteria.query)
        if hits:
            st.caption("Matched: " + ", ".join(hits))

if not grouped:
    show_empty_state(
        "No knockout found",
        "Try a different punch",
        action_label="Reset filters",
        action_key="reset_filters",
        on_action=reset_filters,
    )

render_footer()
