"""
Rotating header taglines and search placeholders.

Both rotate on a fixed timer with no relation to filtering. The current item
is derived from elapsed time, so any caller that re-renders periodically
(e.g. a Streamlit fragment with run_every) shows the right one.
"""

from typing import Sequence, TypeVar

T = TypeVar("T")

TAGLINES = [
    "Recipes Ready to Rumble",
    "Where Flavor Throws the First Punch",
    "Your Kitchen. Your Ring.",
    "No Recipe Left Standing",
    "Knockout Dishes Only",
]

PLACEHOLDERS = [
    "Search for 'chocolate'...",
    "Try 'Japanese'...",
    "Looking for 'eggs'...",
    "Craving 'pasta'...",
    "How about 'chicken'...",
]

TAGLINE_INTERVAL_SECONDS = 3.0
PLACEHOLDER_INTERVAL_SECONDS = 2.5


def rotating_item(items: Sequence[T], interval_seconds: float, elapsed_seconds: float) -> T:
    """
    Return the item showing after elapsed_seconds.

    The first item shows for the first interval, then the next one, wrapping
    around at the end.

    Raises:
        ValueError: If items is empty or interval_seconds is not positive

    Examples:
        >>> rotating_item(["a", "b", "c"], 3.0, 0)
        'a'
        >>> rotating_item(["a", "b", "c"], 3.0, 7.5)
        'c'
        >>> rotating_item(["a", "b", "c"], 3.0, 9.0)
        'a'
    """
    if not items:
        raise ValueError("items must not be empty")
    if interval_seconds <= 0:
        raise ValueError("interval_seconds must be positive")

    ticks = int(max(elapsed_seconds, 0) // interval_seconds)
    return items[ticks % len(items)]


def current_tagline(elapsed_seconds: float) -> str:
    return rotating_item(TAGLINES, TAGLINE_INTERVAL_SECONDS, elapsed_seconds)


def current_placeholder(elapsed_seconds: float) -> str:
    return rotating_item(PLACEHOLDERS, PLACEHOLDER_INTERVAL_SECONDS, elapsed_seconds)
