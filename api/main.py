"""
FastAPI application for the Brooklyn Food Fight recipe catalog.

This module exposes the catalog as a read-only JSON API:
- GET /recipes: Search and filter recipes, grouped by chapter
- GET /recipes/{recipe_id}: Get one recipe with its document link
- GET /facets: Get the values available for the category/method/cuisine filters
- GET /featured: Get a random champion recipe and quick punch terms
- GET /health: Health check

The dataset is read once per process on first use and never modified.

Run the API with:
    uvicorn api.main:app --reload

Access API documentation at:
    http://localhost:8000/docs (Swagger UI)
    http://localhost:8000/redoc (ReDoc)
"""

# Import config early to load .env file before any other code accesses environment variables
import api.config  # noqa: F401

import time
from typing import List, Optional

from fastapi import Depends, FastAPI, HTTPException, Query, status

from api.config import MAX_QUICK_TERM_COUNT, CatalogConfig, get_search_settings
from api.schemas import (
    ChapterOut,
    FacetsResponse,
    FeaturedResponse,
    RecipeOut,
    SearchResponse,
    recipe_to_out,
)
from catalog.dataset import find_recipe, get_categories, get_cuisines, get_methods, load_recipes
from catalog.featured import pick_featured_recipe, pick_quick_terms, quick_term_candidates
from catalog.models import ALL, FilterCriteria, Recipe, SearchSettings
from catalog.search import count_grouped, search_catalog

# Track app start time for uptime calculation
_APP_START_TIME = time.time()

APP_NAME = "Brooklyn Food Fight API"
APP_VERSION = "1.0.0"
APP_DESCRIPTION = "Read-only API for browsing and searching the Brooklyn Food Fight recipe directory"

app = FastAPI(
    title=APP_NAME,
    description=APP_DESCRIPTION,
    version=APP_VERSION,
    openapi_tags=[
        {
            "name": "recipes",
            "description": "Search, filter and look up recipes.",
        },
        {
            "name": "health",
            "description": "Health check and monitoring endpoints.",
        },
    ],
)

# Process-local catalog, loaded on first request
_CATALOG: Optional[List[Recipe]] = None


def get_recipes() -> List[Recipe]:
    """
    Get the recipe catalog, loading it on first use.

    Returns:
        Normalized recipes (empty if the dataset could not be read)
    """
    global _CATALOG
    if _CATALOG is None:
        _CATALOG = load_recipes(CatalogConfig.get_data_path())
    return _CATALOG


def get_settings() -> SearchSettings:
    """Get search settings from the environment."""
    return get_search_settings()


@app.get(
    "/recipes",
    response_model=SearchResponse,
    tags=["recipes"],
    summary="Search and filter recipes",
    description="Case-insensitive text search across name, cuisine, category, preview and ingredients, "
                "combined with category, cooking method and cuisine filters. Results are grouped by chapter.",
)
def search_recipes(
    q: str = Query("", max_length=200, description="Free-text query (empty: no text filter)"),
    category: str = Query(ALL, description="Category to keep, or 'all'"),
    method: str = Query(ALL, description="Cooking method to keep, or 'all'"),
    cuisine: str = Query(ALL, description="Cuisine to keep, or 'all'"),
    recipes: List[Recipe] = Depends(get_recipes),
    settings: SearchSettings = Depends(get_settings),
) -> SearchResponse:
    """
    Search the catalog.

    Args:
        q: Free-text query
        category: Category filter ('all' for no constraint)
        method: Cooking method filter ('all' for no constraint)
        cuisine: Cuisine filter ('all' for no constraint)

    Returns:
        SearchResponse with catalog total, match count and chapters in display order.
        No matches is a normal response with count 0 and no chapters.
    """
    criteria = FilterCriteria(query=q, category=category, method=method, cuisine=cuisine)
    grouped = search_catalog(recipes, criteria, settings)

    chapters = [
        ChapterOut(
            category=chapter,
            count=len(items),
            recipes=[recipe_to_out(r) for r in items],
        )
        for chapter, items in grouped.items()
    ]

    return SearchResponse(
        total=len(recipes),
        count=count_grouped(grouped),
        chapters=chapters,
    )


@app.get(
    "/recipes/{recipe_id}",
    response_model=RecipeOut,
    tags=["recipes"],
    summary="Get a recipe",
)
def get_recipe(
    recipe_id: str,
    recipes: List[Recipe] = Depends(get_recipes),
) -> RecipeOut:
    """
    Get one recipe by id or file_id.

    Raises:
        HTTPException 404: If no recipe has this identifier
    """
    recipe = find_recipe(recipes, recipe_id)
    if recipe is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Recipe '{recipe_id}' not found",
        )
    return recipe_to_out(recipe)


@app.get(
    "/facets",
    response_model=FacetsResponse,
    tags=["recipes"],
    summary="Get filter values",
)
def get_facets(
    recipes: List[Recipe] = Depends(get_recipes),
    settings: SearchSettings = Depends(get_settings),
) -> FacetsResponse:
    """Get the categories, cooking methods and cuisines present in the catalog."""
    return FacetsResponse(
        categories=get_categories(recipes, settings.category_order),
        methods=get_methods(recipes),
        cuisines=get_cuisines(recipes),
    )


@app.get(
    "/featured",
    response_model=FeaturedResponse,
    tags=["recipes"],
    summary="Get champion recipe and quick punches",
    description="Randomly picks a champion recipe and a few quick punch terms. Every call picks again.",
)
def get_featured(
    count: Optional[int] = Query(None, ge=1, le=MAX_QUICK_TERM_COUNT, description="Number of quick punch terms (default from config)"),
    recipes: List[Recipe] = Depends(get_recipes),
) -> FeaturedResponse:
    """
    Pick the champion recipe and quick punch terms.

    Args:
        count: Number of quick punch terms (default: QUICK_TERM_COUNT)

    Returns:
        FeaturedResponse; champion is null for an empty catalog
    """
    count = count or CatalogConfig.get_quick_term_count()
    candidates = quick_term_candidates(recipes, CatalogConfig.get_quick_term_source())
    champion = pick_featured_recipe(recipes)

    return FeaturedResponse(
        champion=recipe_to_out(champion) if champion is not None else None,
        quick_terms=pick_quick_terms(candidates, count),
    )


@app.get("/health", tags=["health"])
def health(recipes: List[Recipe] = Depends(get_recipes)):
    """
    Health check endpoint for monitoring and status checks.

    Returns:
        Dictionary with status, API metadata, uptime and the number of loaded recipes.
        Always returns 200 OK if the endpoint is reachable; an empty catalog is not an error.
    """
    uptime_seconds = int(time.time() - _APP_START_TIME)

    return {
        "status": "ok",
        "name": APP_NAME,
        "version": APP_VERSION,
        "uptime_seconds": uptime_seconds,
        "recipe_count": len(recipes),
    }


@app.get("/")
def root():
    """
    Root endpoint providing API information.

    Returns:
        Dictionary with API name and version
    """
    return {
        "name": APP_NAME,
        "version": APP_VERSION,
        "description": APP_DESCRIPTION,
        "docs": "/docs",
    }
