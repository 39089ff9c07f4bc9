"""
Recipe catalog access for the Streamlit frontend.

The dataset is loaded once per Streamlit server process (st.cache_resource)
and shared read-only by every session. Search settings come from the same
environment configuration the API uses.
"""

from typing import List

import streamlit as st

from api.config import CatalogConfig, get_search_settings
from catalog.dataset import load_recipes
from catalog.models import Recipe, SearchSettings


@st.cache_resource(show_spinner=False)
def _load_catalog(data_path: str) -> List[Recipe]:
    return load_recipes(data_path)


def get_catalog() -> List[Recipe]:
    """
    Get all recipes in dataset order.

    Returns:
        Normalized recipes (empty if the dataset could not be read)
    """
    return _load_catalog(str(CatalogConfig.get_data_path()))


def get_settings() -> SearchSettings:
    """Get search fields and chapter order from the environment."""
    return get_search_settings()
