"""
Global CSS Styling for the Brooklyn Food Fight directory.

This module provides load_global_styles() to inject the directory's look:
bold black headings, red accents, square buttons and numbered list rows.
"""

import streamlit as st


def load_global_styles() -> None:
    """
    Inject global CSS styles for the directory.

    This function:
    - Sets heavy, tight headings and the red title color
    - Narrows the content column to a single readable list
    - Squares off buttons (quick punches, recipe rows)
    - Styles chapter headers, champion banner and footer
    """
    css = """
    <style>
        /* Narrow single-column layout */
        .main .block-container {
            max-width: 48rem !important;
            padding-top: 1.5rem !important;
            padding-bottom: 2.5rem !important;
        }

        h1, h2, h3 {
            font-weight: 900 !important;
            letter-spacing: -0.02em !important;
        }

        /* Title */
        .bff-title {
            text-align: center;
            font-size: 2.5rem;
            font-weight: 900;
            color: #dc2626;
            margin-bottom: 0;
        }

        .bff-tagline {
            text-align: center;
            font-size: 0.8rem;
            color: #9ca3af;
            text-transform: uppercase;
            letter-spacing: 0.2em;
            min-height: 1.25rem;
            margin-bottom: 1rem;
        }

        /* Buttons - square, bold, uppercase */
        .stButton > button {
            border-radius: 0 !important;
            border: 2px solid #e5e7eb !important;
            font-weight: 700 !important;
            text-transform: uppercase !important;
            letter-spacing: 0.05em !important;
        }

        .stButton > button:hover {
            border-color: #111827 !important;
            color: #111827 !important;
        }

        /* Eyebrow text (small, uppercase, muted) */
        .eyebrow-text {
            font-size: 0.75rem !important;
            font-weight: 700 !important;
            text-transform: uppercase !important;
            letter-spacing: 0.1em !important;
            color: #9ca3af !important;
        }

        /* Champion banner */
        .bff-champion {
            border-left: 2px solid #dc2626;
            padding: 0.25rem 0 0.25rem 1rem;
            margin: 0.5rem 0 1rem 0;
        }

        .bff-champion-label {
            font-size: 0.75rem;
            font-weight: 700;
            text-transform: uppercase;
            letter-spacing: 0.1em;
            color: #dc2626;
        }

        /* Search results indicator */
        .bff-results {
            background: #f9fafb;
            border-top: 2px solid #e5e7eb;
            border-bottom: 2px solid #e5e7eb;
            padding: 0.75rem 1rem;
            margin-bottom: 1.5rem;
            font-size: 0.9rem;
        }

        /* Chapter header */
        .bff-chapter {
            display: flex;
            align-items: baseline;
            gap: 1rem;
            border-bottom: 2px solid #111827;
            padding-bottom: 0.5rem;
            margin: 2rem 0 0.75rem 0;
        }

        .bff-chapter-number {
            font-family: monospace;
            font-size: 0.85rem;
            color: #9ca3af;
        }

        .bff-chapter-title {
            font-size: 1.5rem;
            font-weight: 900;
            text-transform: uppercase;
            color: #111827;
        }

        .bff-chapter-count {
            font-size: 0.75rem;
            color: #9ca3af;
            text-transform: uppercase;
            letter-spacing: 0.1em;
        }

        /* Highlighted ingredient matches */
        .bff-match {
            background: #fee2e2;
            padding: 0 0.25rem;
        }

        /* Footer */
        .bff-footer {
            border-top: 2px solid #e5e7eb;
            margin-top: 4rem;
            padding: 2rem 0;
            text-align: center;
            font-size: 0.75rem;
            text-transform: uppercase;
            letter-spacing: 0.1em;
            color: #9ca3af;
        }
    </style>
    """
    st.markdown(css, unsafe_allow_html=True)
