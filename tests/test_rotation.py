"""
Tests for tagline and placeholder rotation.
"""

import pytest

from catalog.rotation import (
    PLACEHOLDERS,
    TAGLINES,
    current_placeholder,
    current_tagline,
    rotating_item,
)


class TestRotatingItem:
    """Test cases for elapsed-time rotation."""

    @pytest.mark.parametrize(
        "elapsed,expected",
        [
            (0, "a"),
            (2.99, "a"),
            (3.0, "b"),
            (7.5, "c"),
            (9.0, "a"),
            (-5, "a"),
        ],
    )
    def test_rotation(self, elapsed, expected):
        """Test that items advance once per interval and wrap around."""
        assert rotating_item(["a", "b", "c"], 3.0, elapsed) == expected

    def test_empty_items(self):
        """Test that rotating nothing is rejected."""
        with pytest.raises(ValueError):
            rotating_item([], 3.0, 1.0)

    def test_non_positive_interval(self):
        """Test that a zero interval is rejected."""
        with pytest.raises(ValueError):
            rotating_item(["a"], 0, 1.0)

    def test_tagline_schedule(self):
        """Test that taglines change every three seconds."""
        assert current_tagline(0) == TAGLINES[0]
        assert current_tagline(3.1) == TAGLINES[1]
        assert current_tagline(3.0 * len(TAGLINES)) == TAGLINES[0]

    def test_placeholder_schedule(self):
        """Test that placeholders change every two and a half seconds."""
        assert current_placeholder(2.4) == PLACEHOLDERS[0]
        assert current_placeholder(2.5) == PLACEHOLDERS[1]
