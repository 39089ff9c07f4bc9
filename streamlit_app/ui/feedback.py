"""
Standardized feedback utilities for empty and warning states.

Provides reusable components so "nothing to show" is always rendered as a
friendly message rather than an error.
"""

from typing import Callable, Optional
import streamlit as st


def show_warning(message: str, hint: Optional[str] = None) -> None:
    """
    Display a standardized warning message with optional hint.

    Args:
        message: Main message to display
        hint: Optional hint text to help users resolve the issue
    """
    st.warning(f"⚠️ {message}")
    if hint:
        st.caption(f"💡 {hint}")


def show_empty_state(
    title: str,
    subtitle: Optional[str] = None,
    action_label: Optional[str] = None,
    action_key: Optional[str] = None,
    on_action: Optional[Callable[[], None]] = None,
) -> None:
    """
    Display a standardized empty state with an optional action button.

    Args:
        title: Main empty state title
        subtitle: Optional subtitle/description text
        action_label: Optional label for an action button
        action_key: Widget key for the action button
        on_action: Callback run when the action button is clicked
    """
    st.markdown("<div style='text-align:center;font-size:3rem'>🥊</div>", unsafe_allow_html=True)
    st.markdown(f"<h3 style='text-align:center'>{title}</h3>", unsafe_allow_html=True)
    if subtitle:
        st.markdown(f'<div class="eyebrow-text" style="text-align:center">{subtitle}</div>', unsafe_allow_html=True)

    if action_label:
        st.button(action_label, key=action_key, on_click=on_action, use_container_width=True)
