"""
Tests for dataset loading and facet helpers.

Loading never raises: unusable files produce an empty catalog.
"""

import json
import logging
from pathlib import Path

import pytest

from catalog.dataset import find_recipe, get_categories, get_cuisines, get_methods, load_recipes

PROJECT_ROOT = Path(__file__).resolve().parent.parent


def write_json(path, data):
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


@pytest.fixture
def dataset_path(tmp_path):
    return write_json(tmp_path / "recipe_database.json", [
        {"file_id": "a1", "name": "Miso Soup", "category": "Soup", "cuisine_style": "Japanese",
         "cooking_method": "Simmer", "ingredients": ["miso", "tofu"]},
        {"file_id": "b2", "title": "Steak Frites", "category": "Meat", "cuisine": "French",
         "cooking_method": "Pan-fry"},
        {"id": "c3", "name": "Kale Caesar", "category": "Salad", "cooking_method": "Unknown"},
        {"name": "Latkes"},
    ])


class TestLoadRecipes:
    """Test cases for load_recipes."""

    def test_loads_and_normalizes(self, dataset_path):
        """Test that every record is loaded in order and normalized."""
        recipes = load_recipes(dataset_path)
        assert [r.display_name for r in recipes] == ["Miso Soup", "Steak Frites", "Kale Caesar", "Latkes"]
        assert recipes[1].cuisine == "French"
        assert recipes[2].cooking_method == ""
        assert recipes[3].category == ""
        assert recipes[3].chapter == "Uncategorized"

    def test_accepts_string_path(self, dataset_path):
        """Test that a str path works as well as a Path."""
        assert len(load_recipes(str(dataset_path))) == 4

    def test_missing_file(self, tmp_path, caplog):
        """Test that a missing file yields an empty catalog and a warning."""
        with caplog.at_level(logging.WARNING, logger="catalog.dataset"):
            assert load_recipes(tmp_path / "nope.json") == []
        assert "not found" in caplog.text

    def test_invalid_json(self, tmp_path):
        """Test that invalid JSON yields an empty catalog."""
        path = tmp_path / "broken.json"
        path.write_text("[{not json", encoding="utf-8")
        assert load_recipes(path) == []

    def test_invalid_utf8(self, tmp_path, caplog):
        """Test that a file that is not valid UTF-8 yields an empty catalog and a warning."""
        path = tmp_path / "latin1.json"
        path.write_bytes(b'[{"name": "Cr\xe8me br\xfbl\xe9e"}]')
        with caplog.at_level(logging.WARNING, logger="catalog.dataset"):
            assert load_recipes(path) == []
        assert "Could not read recipe dataset" in caplog.text

    def test_top_level_not_a_list(self, tmp_path):
        """Test that a JSON object at the top level yields an empty catalog."""
        assert load_recipes(write_json(tmp_path / "obj.json", {"recipes": []})) == []

    def test_skips_non_object_entries(self, tmp_path):
        """Test that entries which are not objects are skipped."""
        path = write_json(tmp_path / "mixed.json", [{"name": "Ok"}, "oops", 3, None, {"name": "Also ok"}])
        assert [r.name for r in load_recipes(path)] == ["Ok", "Also ok"]

    def test_bundled_sample_dataset(self):
        """Test that the sample dataset shipped with the project loads."""
        recipes = load_recipes(PROJECT_ROOT / "data" / "recipe_database.json")
        assert len(recipes) > 0
        assert any(r.display_name == "Untitled" for r in recipes)


class TestFacets:
    """Test cases for the filter value helpers."""

    def test_categories_in_display_order(self, dataset_path):
        """Test that categories follow the curated order, extras alphabetically."""
        recipes = load_recipes(dataset_path)
        assert get_categories(recipes, ["Salad", "Soup", "Meat"]) == ["Salad", "Soup", "Meat", "Uncategorized"]
        assert get_categories(recipes) == ["Meat", "Salad", "Soup", "Uncategorized"]

    def test_methods_exclude_unknown(self, dataset_path):
        """Test that methods are sorted and never include the unknown sentinel."""
        assert get_methods(load_recipes(dataset_path)) == ["Pan-fry", "Simmer"]

    def test_cuisines(self, dataset_path):
        """Test that cuisines are distinct, non-empty and sorted."""
        assert get_cuisines(load_recipes(dataset_path)) == ["French", "Japanese"]


class TestFindRecipe:
    """Test cases for recipe lookup."""

    def test_by_id_or_file_id(self, dataset_path):
        """Test lookup by file_id-derived id and by explicit id."""
        recipes = load_recipes(dataset_path)
        assert find_recipe(recipes, "b2").name == "Steak Frites"
        assert find_recipe(recipes, "c3").name == "Kale Caesar"

    def test_unknown_or_blank(self, dataset_path):
        """Test that unknown and blank identifiers find nothing."""
        recipes = load_recipes(dataset_path)
        assert find_recipe(recipes, "zzz") is None
        assert find_recipe(recipes, "") is None
