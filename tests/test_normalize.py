"""
Tests for raw record normalization.

This module tests catalog.normalize, which resolves the dataset's field
fallback chains once per record and degrades malformed values to defaults.
"""

import pytest

from catalog.normalize import clean_ingredients, clean_text, normalize_recipe, normalize_recipes


class TestCleanText:
    """Test cases for scalar coercion."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("  Soup  ", "Soup"),
            (None, ""),
            (12, "12"),
            (1.5, "1.5"),
            (True, ""),
            (["Soup"], ""),
            ({"name": "Soup"}, ""),
        ],
    )
    def test_clean_text(self, value, expected):
        """Test that values become stripped strings or ''."""
        assert clean_text(value) == expected


class TestCleanIngredients:
    """Test cases for ingredient list coercion."""

    def test_drops_blank_and_invalid_items(self):
        """Test that blank, null and non-text items are dropped."""
        assert clean_ingredients([" miso ", "", None, {"x": 1}, "tofu"]) == ["miso", "tofu"]

    def test_bare_string(self):
        """Test that a single string becomes a one-item list."""
        assert clean_ingredients("eggs") == ["eggs"]

    def test_missing_or_wrong_type(self):
        """Test that missing or non-list values become []."""
        assert clean_ingredients(None) == []
        assert clean_ingredients(42) == []
        assert clean_ingredients({"a": "b"}) == []


class TestNormalizeRecipe:
    """Test cases for the full record mapping."""

    def test_full_record(self):
        """Test a complete record maps field by field."""
        recipe = normalize_recipe({
            "id": "r1",
            "file_id": "abc123",
            "name": "Miso Ramen",
            "category": "Soup",
            "cuisine_style": "Japanese",
            "cooking_method": "Simmer",
            "ingredients": ["miso", "noodles"],
            "content_preview": "Rich broth.",
            "file_type": "Google Doc",
        })
        assert recipe.id == "r1"
        assert recipe.file_id == "abc123"
        assert recipe.name == "Miso Ramen"
        assert recipe.display_name == "Miso Ramen"
        assert recipe.category == "Soup"
        assert recipe.cuisine == "Japanese"
        assert recipe.cooking_method == "Simmer"
        assert recipe.ingredients == ["miso", "noodles"]
        assert recipe.content_preview == "Rich broth."
        assert recipe.file_type == "Google Doc"

    def test_title_fallback(self):
        """Test that 'title' is used when 'name' is missing or blank."""
        assert normalize_recipe({"title": "Bok Choy"}).name == "Bok Choy"
        assert normalize_recipe({"name": "  ", "title": "Bok Choy"}).name == "Bok Choy"
        assert normalize_recipe({"name": "Ramen", "title": "Other"}).name == "Ramen"

    def test_untitled_fallback(self):
        """Test that a record with neither name nor title displays as 'Untitled'."""
        recipe = normalize_recipe({"category": "Soup"})
        assert recipe.name == ""
        assert recipe.display_name == "Untitled"

    def test_id_fallback(self):
        """Test that id falls back to file_id."""
        recipe = normalize_recipe({"file_id": "abc123"})
        assert recipe.id == "abc123"
        assert recipe.key == "abc123"

    def test_uncategorized_fallback(self):
        """Test that a missing or blank category stays empty and its chapter is 'Uncategorized'."""
        for raw in ({}, {"category": None}, {"category": "  "}):
            recipe = normalize_recipe(raw)
            assert recipe.category == ""
            assert recipe.chapter == "Uncategorized"

    def test_cuisine_fallback(self):
        """Test that cuisine_style wins over cuisine."""
        assert normalize_recipe({"cuisine": "Italian"}).cuisine == "Italian"
        assert normalize_recipe({"cuisine_style": "Sicilian", "cuisine": "Italian"}).cuisine == "Sicilian"

    @pytest.mark.parametrize("method", ["Unknown", "unknown", " UNKNOWN "])
    def test_unknown_method_is_absent(self, method):
        """Test that the 'Unknown' sentinel is stored as empty."""
        assert normalize_recipe({"cooking_method": method}).cooking_method == ""

    def test_empty_record_never_raises(self):
        """Test that an empty record yields a recipe with safe defaults."""
        recipe = normalize_recipe({})
        assert recipe.id == ""
        assert recipe.cuisine == ""
        assert recipe.ingredients == []
        assert recipe.content_preview == ""
        assert recipe.file_type == ""

    def test_malformed_values(self):
        """Test that wrongly typed values degrade instead of failing."""
        recipe = normalize_recipe({
            "name": ["not", "a", "string"],
            "category": 7,
            "ingredients": "eggs",
            "content_preview": {"text": "x"},
        })
        assert recipe.display_name == "Untitled"
        assert recipe.category == "7"
        assert recipe.ingredients == ["eggs"]
        assert recipe.content_preview == ""

    def test_normalize_recipes_keeps_order(self):
        """Test that records are normalized in order and the input is untouched."""
        records = [{"name": "B"}, {"name": "A"}]
        recipes = normalize_recipes(records)
        assert [r.name for r in recipes] == ["B", "A"]
        assert records == [{"name": "B"}, {"name": "A"}]
