"""
Utility modules for the Streamlit frontend.

This package contains:
- catalog_data: Cached access to the recipe catalog and search settings
- state: Session state helpers for search, filters, champion and quick punches
"""
