"""
Layout primitives for the directory page.

Provides the title block, results indicator, chapter headers and footer.
User-supplied text (the search query, dataset strings) is HTML-escaped
before it goes into raw markdown.
"""

from datetime import date
from html import escape
from typing import Optional

import streamlit as st


def plural(count: int, word: str = "recipe") -> str:
    """Return '1 recipe' / '3 recipes'."""
    return f"{count} {word if count == 1 else word + 's'}"


def page_header(title: str, tagline: Optional[str] = None) -> None:
    """
    Render the centered page title with an optional tagline below it.

    Args:
        title: Main page title
        tagline: Optional tagline (e.g. "42 Recipes Ready to Rumble")
    """
    st.markdown(f'<div class="bff-title">{escape(title)}</div>', unsafe_allow_html=True)
    if tagline:
        st.markdown(f'<div class="bff-tagline">{escape(tagline)}</div>', unsafe_allow_html=True)


def results_indicator(count: int, query: str) -> None:
    """
    Render the "N recipes throwing punches with <query>" line.

    Args:
        count: Number of matching recipes
        query: Active search text
    """
    noun = "recipe" if count == 1 else "recipes"
    st.markdown(
        f'<div class="bff-results"><b>{count}</b> {noun} throwing punches with '
        f'<b>"{escape(query)}"</b></div>',
        unsafe_allow_html=True,
    )


def chapter_header(number: int, title: str, count: int) -> None:
    """
    Render a numbered chapter header.

    Args:
        number: 1-based chapter position in the current result
        title: Chapter (category) name
        count: Number of recipes shown in the chapter
    """
    st.markdown(
        f'<div class="bff-chapter">'
        f'<span class="bff-chapter-number">{number:02d}</span>'
        f'<span class="bff-chapter-title">{escape(title)}</span>'
        f'<span class="bff-chapter-count">{plural(count)}</span>'
        f'</div>',
        unsafe_allow_html=True,
    )


def render_footer() -> None:
    """Render the footer line with the current year."""
    st.markdown(
        f'<div class="bff-footer">Brooklyn Food Fight © {date.today().year} '
        f'· Where Every Meal is a Main Event</div>',
        unsafe_allow_html=True,
    )
