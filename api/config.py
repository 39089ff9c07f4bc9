"""
Configuration management for the Brooklyn Food Fight recipe directory.

This module centralizes environment variable loading from the .env file at the
project root. It should be imported early in both the API (api/main.py) and the
frontend (streamlit_app/app.py) so .env is loaded before anything reads the
environment.

In production .env does not exist; load_dotenv() then no-ops and the platform
environment variables are used instead.

Environment Variables:
- RECIPE_DATA_PATH: Optional, path to the recipe dataset JSON
  (defaults to data/recipe_database.json at the project root)
- CATEGORY_ORDER: Optional, comma-separated chapter order shown first.
  "alphabetical" disables the curated order. Defaults to the curated chapters.
- SEARCH_FIELDS: Optional, comma-separated fields the text query searches
  (name, cuisine, category, content_preview, ingredients). Defaults to all.
- QUICK_TERM_COUNT: Optional, number of quick punch terms, 1 to 10 (default: 4)
- QUICK_TERM_SOURCE: Optional, "fixed" (common ingredients list, default) or
  "ranked" (most used ingredients in the dataset)
"""

import logging
import os
from pathlib import Path
from typing import Optional, Tuple

from dotenv import load_dotenv

from catalog.featured import DEFAULT_QUICK_TERM_COUNT
from catalog.models import DEFAULT_CATEGORY_ORDER, SEARCHABLE_FIELDS, SearchSettings

logger = logging.getLogger(__name__)

# api/config.py -> api/ -> project root
PROJECT_ROOT = Path(__file__).resolve().parent.parent
DEFAULT_DATA_PATH = PROJECT_ROOT / "data" / "recipe_database.json"

ALPHABETICAL_ORDER = "alphabetical"
QUICK_TERM_SOURCES = ("fixed", "ranked")
# Upper bound shared with the /featured count parameter
MAX_QUICK_TERM_COUNT = 10


def load_env_file() -> None:
    """
    Load environment variables from .env file at project root.

    Safe to call multiple times. Existing environment variables take
    precedence over values in .env (override=False).
    """
    load_dotenv(PROJECT_ROOT / ".env", override=False)


# Load .env file on module import
load_env_file()


def _split_csv(value: str) -> Tuple[str, ...]:
    return tuple(part.strip() for part in value.split(",") if part.strip())


class CatalogConfig:
    """Configuration for the recipe catalog."""

    @staticmethod
    def get_data_path() -> Path:
        """
        Get the recipe dataset path.

        Returns:
            Path from RECIPE_DATA_PATH, or data/recipe_database.json at the project root
        """
        value = os.getenv("RECIPE_DATA_PATH", "").strip()
        return Path(value) if value else DEFAULT_DATA_PATH

    @staticmethod
    def get_category_order() -> Optional[Tuple[str, ...]]:
        """
        Get the curated chapter order.

        Returns:
            Tuple of chapter names, or None for purely alphabetical chapters
        """
        value = os.getenv("CATEGORY_ORDER", "").strip()
        if not value:
            return DEFAULT_CATEGORY_ORDER
        if value.lower() == ALPHABETICAL_ORDER:
            return None
        return _split_csv(value)

    @staticmethod
    def get_search_fields() -> Tuple[str, ...]:
        """
        Get the fields searched by the text query.

        Unknown field names are ignored. If nothing valid remains, all
        searchable fields are used.
        """
        value = os.getenv("SEARCH_FIELDS", "").strip()
        if not value:
            return SEARCHABLE_FIELDS

        fields = tuple(f for f in _split_csv(value.lower()) if f in SEARCHABLE_FIELDS)
        ignored = set(_split_csv(value.lower())) - set(fields)
        if ignored:
            logger.warning(f"Ignoring unknown SEARCH_FIELDS entries: {sorted(ignored)}")
        return tuple(dict.fromkeys(fields)) or SEARCHABLE_FIELDS

    @staticmethod
    def get_quick_term_count() -> int:
        """
        Get the number of quick punch terms.

        Returns:
            Integer between 1 and MAX_QUICK_TERM_COUNT (default: 4).
            Larger values are capped; invalid or non-positive values use the default.
        """
        value = os.getenv("QUICK_TERM_COUNT", "").strip()
        try:
            count = int(value)
        except ValueError:
            return DEFAULT_QUICK_TERM_COUNT
        if count <= 0:
            return DEFAULT_QUICK_TERM_COUNT
        return min(count, MAX_QUICK_TERM_COUNT)

    @staticmethod
    def get_quick_term_source() -> str:
        """
        Get where quick punch terms come from.

        Returns:
            "fixed" (default) or "ranked"
        """
        value = os.getenv("QUICK_TERM_SOURCE", "").strip().lower()
        return value if value in QUICK_TERM_SOURCES else "fixed"


def get_search_settings() -> SearchSettings:
    """Build SearchSettings from the environment."""
    return SearchSettings(
        search_fields=CatalogConfig.get_search_fields(),
        category_order=CatalogConfig.get_category_order(),
    )
