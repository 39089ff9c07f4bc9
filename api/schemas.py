"""
Pydantic schemas for FastAPI responses.

This module defines the response models of the read-only catalog API. They
keep the JSON contract stable and drive the generated API documentation.

The schemas include:
- RecipeOut: One recipe with its display name and external link
- ChapterOut: One category and its matching recipes
- SearchResponse: Grouped search result with counts
- FacetsResponse: Values available for the filter dropdowns
- FeaturedResponse: Champion recipe and quick punch terms

# NOTE: RecipeOut is built from catalog.models.Recipe via recipe_to_out().
    The canonical record lives in catalog.models; these schemas only shape output.
"""

from typing import List, Optional

from pydantic import BaseModel, Field, ConfigDict

from catalog.links import build_recipe_link
from catalog.models import Recipe


class RecipeOut(BaseModel):
    """
    Public recipe representation.

    Adds the derived display_name and link fields to the canonical Recipe.
    """
    id: str = Field(..., description="Display key (id, else file_id)")
    name: str = Field(..., description="Recipe name as found in the dataset (may be empty)")
    display_name: str = Field(..., description="Name to display ('Untitled' when the recipe has no name)")
    category: str = Field(..., description="Chapter the recipe belongs to")
    cuisine: str = Field("", description="Cuisine style")
    cooking_method: str = Field("", description="Cooking method (empty when unknown)")
    ingredients: List[str] = Field(default_factory=list, description="Ingredient names")
    file_type: str = Field("", description="Document type tag")
    link: Optional[str] = Field(None, description="URL of the full recipe document, if any")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": "1a2b3c",
                "name": "Miso Ramen",
                "display_name": "Miso Ramen",
                "category": "Soup",
                "cuisine": "Japanese",
                "cooking_method": "Simmer",
                "ingredients": ["miso", "noodles"],
                "file_type": "Google Doc",
                "link": "https://docs.google.com/document/d/1a2b3c/edit",
            }
        }
    )


class ChapterOut(BaseModel):
    """One chapter (category) of a search result."""
    category: str = Field(..., description="Category name")
    count: int = Field(..., ge=1, description="Number of matching recipes in this chapter")
    recipes: List[RecipeOut] = Field(..., description="Matching recipes in dataset order")


class SearchResponse(BaseModel):
    """
    Response model for the recipe search endpoint.

    Chapters are in display order; chapters without matches are omitted.
    """
    total: int = Field(..., ge=0, description="Number of recipes in the catalog")
    count: int = Field(..., ge=0, description="Number of recipes matching the filters")
    chapters: List[ChapterOut] = Field(default_factory=list, description="Matching recipes grouped by category")


class FacetsResponse(BaseModel):
    """Filter values available in the catalog."""
    categories: List[str] = Field(default_factory=list, description="Categories in display order")
    methods: List[str] = Field(default_factory=list, description="Cooking methods, sorted")
    cuisines: List[str] = Field(default_factory=list, description="Cuisines, sorted")


class FeaturedResponse(BaseModel):
    """Randomly picked champion recipe and quick punch terms."""
    champion: Optional[RecipeOut] = Field(None, description="Champion recipe (null for an empty catalog)")
    quick_terms: List[str] = Field(default_factory=list, description="Quick punch search terms")


def recipe_to_out(recipe: Recipe) -> RecipeOut:
    """
    Convert a canonical Recipe to its public representation.

    Args:
        recipe: Canonical recipe

    Returns:
        RecipeOut with display_name and link filled in
    """
    return RecipeOut(
        id=recipe.key,
        name=recipe.name,
        display_name=recipe.display_name,
        category=recipe.chapter,
        cuisine=recipe.cuisine,
        cooking_method=recipe.cooking_method,
        ingredients=list(recipe.ingredients),
        file_type=recipe.file_type,
        link=build_recipe_link(recipe),
    )
