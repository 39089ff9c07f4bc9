"""
Recipe and filter models for the recipe directory.

This module defines the canonical record shape used throughout the catalog.
Raw dataset records are mapped into Recipe exactly once at load time (see
catalog.normalize), so matching and display code never has to repeat the
"use field A, else field B, else a default" checks.

FilterCriteria and SearchSettings are plain values owned by the caller
(Streamlit session state, API query parameters). The filter functions in
catalog.search are pure functions of these values.
"""

from typing import List, Optional, Tuple

from pydantic import BaseModel, Field, ConfigDict

# Value used on every filter axis to mean "no constraint"
ALL = "all"

UNTITLED = "Untitled"
UNCATEGORIZED = "Uncategorized"

# Fields that can take part in free-text search
SEARCHABLE_FIELDS: Tuple[str, ...] = (
    "name",
    "cuisine",
    "category",
    "content_preview",
    "ingredients",
)

# Curated chapter order for the directory
DEFAULT_CATEGORY_ORDER: Tuple[str, ...] = (
    "Breakfasty",
    "Vegetables",
    "Salad",
    "Pasta",
    "Pizza",
    "Rice-Pulses",
    "Soup",
    "Seafood",
    "Poultry",
    "Meat",
    "Dessert-Baking",
    "Condiments",
    "Cocktails/Spirits",
)


class Recipe(BaseModel):
    """
    Canonical recipe record.

    Every text field is already stripped and never None. Optional fields
    that were absent in the raw record are empty strings.
    """
    id: str = Field("", description="Display key (raw 'id', else 'file_id')")
    file_id: str = Field("", description="Document store identifier used for the external link")
    name: str = Field("", description="Recipe name (raw 'name', else 'title'); empty when neither is present")
    category: str = Field("", description="Category as found in the dataset; empty when absent")
    cuisine: str = Field("", description="Cuisine style (raw 'cuisine_style', else 'cuisine')")
    cooking_method: str = Field("", description="Cooking method; the 'Unknown' sentinel is stored as empty")
    ingredients: List[str] = Field(default_factory=list, description="Ingredient names in dataset order")
    content_preview: str = Field("", description="Free-text excerpt, searched but not displayed in full")
    file_type: str = Field("", description="Document type tag, e.g. 'Google Doc' or 'PDF'")

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "id": "1a2b3c",
                "file_id": "1a2b3c",
                "name": "Miso Ramen",
                "category": "Soup",
                "cuisine": "Japanese",
                "cooking_method": "Simmer",
                "ingredients": ["miso", "noodles", "scallions"],
                "content_preview": "A quick weeknight ramen...",
                "file_type": "Google Doc",
            }
        }
    )

    @property
    def display_name(self) -> str:
        """Name shown in the directory, falling back to 'Untitled'."""
        return self.name or UNTITLED

    @property
    def chapter(self) -> str:
        """Chapter the recipe is grouped under, falling back to 'Uncategorized'."""
        return self.category or UNCATEGORIZED

    @property
    def key(self) -> str:
        """Identifier used to look the recipe up again (id, else file_id)."""
        return self.id or self.file_id


class FilterCriteria(BaseModel):
    """
    Active filter state for one search.

    Each axis holds either a concrete value or "all". Empty strings and None
    are accepted as "all" as well, so callers can pass unset form values through.
    """
    query: str = Field("", description="Free-text query; empty means no text filter")
    category: Optional[str] = Field(ALL, description="Category to keep, or 'all'")
    method: Optional[str] = Field(ALL, description="Cooking method to keep, or 'all'")
    cuisine: Optional[str] = Field(ALL, description="Cuisine to keep, or 'all'")

    model_config = ConfigDict(frozen=True)

    def is_default(self) -> bool:
        """True when no axis constrains the result."""
        return (
            not self.query.strip()
            and is_unconstrained(self.category)
            and is_unconstrained(self.method)
            and is_unconstrained(self.cuisine)
        )


class SearchSettings(BaseModel):
    """
    Search configuration: which fields the query looks at, and chapter order.

    category_order=None means purely alphabetical chapters.
    """
    search_fields: Tuple[str, ...] = Field(SEARCHABLE_FIELDS, description="Fields the text query is matched against")
    category_order: Optional[Tuple[str, ...]] = Field(
        DEFAULT_CATEGORY_ORDER,
        description="Chapters shown first, in this order; remaining chapters follow alphabetically",
    )

    model_config = ConfigDict(frozen=True)


def is_unconstrained(value: Optional[str]) -> bool:
    """Return True if a filter axis value means 'no constraint'."""
    if value is None:
        return True
    value = value.strip()
    return not value or value.lower() == ALL
