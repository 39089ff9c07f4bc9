"""
UI Styling and Components Module.

This module provides global CSS styling and reusable layout components
for the Brooklyn Food Fight Streamlit app.
"""

from ui.styles import load_global_styles
from ui.layout import page_header, results_indicator, chapter_header, render_footer
from ui.feedback import show_empty_state, show_warning

__all__ = [
    "load_global_styles",
    "page_header",
    "results_indicator",
    "chapter_header",
    "render_footer",
    "show_empty_state",
    "show_warning",
]
