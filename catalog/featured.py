"""
Champion recipe and quick-punch shortcut terms.

On every load the directory highlights one random "champion" recipe and
offers a few random "quick punch" terms that act as one-click searches.
The picks have no correctness requirement beyond being drawn from the
supplied candidates; pass a random.Random to make them reproducible.
"""

import random
from typing import Dict, List, Optional, Sequence

from catalog.models import Recipe

DEFAULT_QUICK_TERM_COUNT = 4

# Common cooking ingredients offered as quick punches
COMMON_INGREDIENTS = [
    "Chicken", "Beef", "Pork", "Salmon", "Shrimp", "Tofu",
    "Lamb", "Clams", "Eggs", "Ginger", "Lemon",
    "Pasta", "Rice", "Noodles", "Pizza", "Pancakes", "Potato",
    "Tomato", "Mushroom", "Spinach", "Broccoli", "Carrot",
    "Cauliflower", "Zucchini", "Bok Choy", "Squash",
    "Cheese", "Miso", "Chocolate", "Strawberries",
]


def pick_featured_recipe(
    recipes: Sequence[Recipe],
    rng: Optional[random.Random] = None,
) -> Optional[Recipe]:
    """
    Pick the champion recipe.

    Args:
        recipes: Full recipe collection
        rng: Optional random generator (default: module-level random)

    Returns:
        One recipe from the collection, or None if it is empty
    """
    if not recipes:
        return None
    rng = rng or random
    return rng.choice(list(recipes))


def rank_ingredient_terms(recipes: Sequence[Recipe], limit: int = 30) -> List[str]:
    """
    Rank ingredient names by how many recipes use them.

    Names are compared case-insensitively; the first spelling seen is the one
    returned. Ties keep first-appearance order. An ingredient listed twice in
    the same recipe counts once.

    Args:
        recipes: Recipes to scan
        limit: Maximum number of terms to return

    Returns:
        Most frequent ingredient names, most frequent first
    """
    counts: Dict[str, int] = {}
    spelling: Dict[str, str] = {}

    for recipe in recipes:
        seen_in_recipe = set()
        for ingredient in recipe.ingredients:
            key = ingredient.lower()
            if key in seen_in_recipe:
                continue
            seen_in_recipe.add(key)
            spelling.setdefault(key, ingredient)
            counts[key] = counts.get(key, 0) + 1

    # sorted() is stable, so ties stay in first-appearance order
    ranked = sorted(counts, key=lambda key: counts[key], reverse=True)
    return [spelling[key] for key in ranked[:max(limit, 0)]]


def pick_quick_terms(
    candidates: Sequence[str],
    count: int = DEFAULT_QUICK_TERM_COUNT,
    rng: Optional[random.Random] = None,
) -> List[str]:
    """
    Sample quick-punch terms from a candidate list.

    Duplicate candidates are collapsed first, so the result never repeats a
    term. When there are fewer candidates than requested, all of them are
    returned in random order.

    Args:
        candidates: Candidate terms (e.g. COMMON_INGREDIENTS or rank_ingredient_terms())
        count: Number of terms wanted
        rng: Optional random generator (default: module-level random)

    Returns:
        List of distinct terms drawn from candidates
    """
    unique = list(dict.fromkeys(c for c in candidates if c))
    if count <= 0 or not unique:
        return []
    rng = rng or random
    return rng.sample(unique, min(count, len(unique)))


def quick_term_candidates(
    recipes: Sequence[Recipe],
    source: str = "fixed",
    limit: int = 30,
) -> List[str]:
    """
    Get the candidate list quick punches are sampled from.

    Args:
        recipes: Full recipe collection (used by the "ranked" source)
        source: "fixed" for COMMON_INGREDIENTS, "ranked" for the dataset's most used ingredients
        limit: Maximum number of ranked candidates

    Returns:
        Candidate terms. A "ranked" source over a dataset without ingredients
        falls back to COMMON_INGREDIENTS.
    """
    if source == "ranked":
        ranked = rank_ingredient_terms(recipes, limit=limit)
        if ranked:
            return ranked
    return list(COMMON_INGREDIENTS)
