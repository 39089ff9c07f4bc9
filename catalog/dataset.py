"""
Recipe dataset loading and facet helpers.

The dataset is a static JSON array of recipe objects produced by an external
preparation step. It is read once per process and normalized into Recipe
objects; after that it is treated as immutable.

Loading never raises: a missing or unreadable file, invalid JSON, or a
top-level value that is not a list all produce an empty catalog (with a
warning in the log), and individual entries that are not objects are skipped.
"""

import json
import logging
from pathlib import Path
from typing import List, Optional, Sequence, Union

from catalog.models import Recipe
from catalog.normalize import normalize_recipe
from catalog.search import order_categories

logger = logging.getLogger(__name__)


def load_recipes(path: Union[str, Path]) -> List[Recipe]:
    """
    Load and normalize the recipe dataset.

    Args:
        path: Path to the dataset JSON file

    Returns:
        List of Recipe objects in dataset order (empty if the file is unusable)
    """
    path = Path(path)

    try:
        with path.open("r", encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError:
        logger.warning("Recipe dataset not found at %s, starting with an empty catalog", path)
        return []
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
        logger.warning("Could not read recipe dataset %s: %s", path, exc)
        return []

    if not isinstance(data, list):
        logger.warning(
            "Recipe dataset %s should contain a JSON array, got %s",
            path,
            type(data).__name__,
        )
        return []

    recipes: List[Recipe] = []
    for index, record in enumerate(data):
        if not isinstance(record, dict):
            logger.debug("Skipping dataset entry %d: not an object", index)
            continue
        recipes.append(normalize_recipe(record))

    logger.info("Loaded %d recipes from %s", len(recipes), path)
    return recipes


def get_categories(
    recipes: Sequence[Recipe],
    category_order: Optional[Sequence[str]] = None,
) -> List[str]:
    """
    Get the distinct categories in display order.

    Returns:
        Categories ordered like the directory chapters (see order_categories)
    """
    return order_categories((r.chapter for r in recipes), category_order)


def get_methods(recipes: Sequence[Recipe]) -> List[str]:
    """
    Get the distinct cooking methods across all recipes.

    Returns:
        Sorted list of non-empty cooking methods
    """
    return sorted({r.cooking_method for r in recipes if r.cooking_method})


def get_cuisines(recipes: Sequence[Recipe]) -> List[str]:
    """
    Get the distinct cuisines across all recipes.

    Returns:
        Sorted list of non-empty cuisines
    """
    return sorted({r.cuisine for r in recipes if r.cuisine})


def find_recipe(recipes: Sequence[Recipe], recipe_id: str) -> Optional[Recipe]:
    """Find a recipe by id or file_id; None if no recipe has that identifier."""
    recipe_id = (recipe_id or "").strip()
    if not recipe_id:
        return None
    for recipe in recipes:
        if recipe_id in (recipe.id, recipe.file_id):
            return recipe
    return None
