"""
Tests for environment configuration.
"""

from pathlib import Path

import pytest

from api.config import DEFAULT_DATA_PATH, MAX_QUICK_TERM_COUNT, CatalogConfig, get_search_settings
from catalog.models import DEFAULT_CATEGORY_ORDER, SEARCHABLE_FIELDS


class TestCatalogConfig:
    """Test cases for CatalogConfig getters."""

    def test_defaults(self, monkeypatch):
        """Test the defaults when nothing is set."""
        for var in ("RECIPE_DATA_PATH", "CATEGORY_ORDER", "SEARCH_FIELDS", "QUICK_TERM_COUNT", "QUICK_TERM_SOURCE"):
            monkeypatch.delenv(var, raising=False)

        assert CatalogConfig.get_data_path() == DEFAULT_DATA_PATH
        assert CatalogConfig.get_category_order() == DEFAULT_CATEGORY_ORDER
        assert CatalogConfig.get_search_fields() == SEARCHABLE_FIELDS
        assert CatalogConfig.get_quick_term_count() == 4
        assert CatalogConfig.get_quick_term_source() == "fixed"

    def test_data_path(self, monkeypatch, tmp_path):
        """Test that RECIPE_DATA_PATH overrides the dataset location."""
        monkeypatch.setenv("RECIPE_DATA_PATH", str(tmp_path / "r.json"))
        assert CatalogConfig.get_data_path() == Path(tmp_path / "r.json")

    def test_category_order(self, monkeypatch):
        """Test comma-separated and alphabetical chapter order."""
        monkeypatch.setenv("CATEGORY_ORDER", "Soup, Meat ,,Pasta")
        assert CatalogConfig.get_category_order() == ("Soup", "Meat", "Pasta")

        monkeypatch.setenv("CATEGORY_ORDER", "Alphabetical")
        assert CatalogConfig.get_category_order() is None

    def test_search_fields(self, monkeypatch):
        """Test that unknown search fields are ignored."""
        monkeypatch.setenv("SEARCH_FIELDS", "name, Ingredients, calories")
        assert CatalogConfig.get_search_fields() == ("name", "ingredients")

        monkeypatch.setenv("SEARCH_FIELDS", "calories")
        assert CatalogConfig.get_search_fields() == SEARCHABLE_FIELDS

    def test_quick_term_count(self, monkeypatch):
        """Test that invalid counts fall back to the default."""
        monkeypatch.setenv("QUICK_TERM_COUNT", "6")
        assert CatalogConfig.get_quick_term_count() == 6

        for bad in ("zero", "0", "-2"):
            monkeypatch.setenv("QUICK_TERM_COUNT", bad)
            assert CatalogConfig.get_quick_term_count() == 4

    @pytest.mark.parametrize("value,expected", [("10", 10), ("11", 10), ("200", 10), ("1", 1)])
    def test_quick_term_count_capped(self, monkeypatch, value, expected):
        """Test that the count stays within the range /featured accepts."""
        monkeypatch.setenv("QUICK_TERM_COUNT", value)
        assert CatalogConfig.get_quick_term_count() == expected
        assert expected <= MAX_QUICK_TERM_COUNT

    def test_quick_term_source(self, monkeypatch):
        """Test that only known sources are accepted."""
        monkeypatch.setenv("QUICK_TERM_SOURCE", "Ranked")
        assert CatalogConfig.get_quick_term_source() == "ranked"

        monkeypatch.setenv("QUICK_TERM_SOURCE", "magic")
        assert CatalogConfig.get_quick_term_source() == "fixed"

    def test_get_search_settings(self, monkeypatch):
        """Test that SearchSettings reflects the environment."""
        monkeypatch.setenv("SEARCH_FIELDS", "name")
        monkeypatch.setenv("CATEGORY_ORDER", "alphabetical")
        settings = get_search_settings()
        assert settings.search_fields == ("name",)
        assert settings.category_order is None
