"""
In-memory search and grouping over the recipe catalog.

This module is the filtering core of the directory:
- Matches a free-text query against several recipe fields (inclusive OR)
- Applies the category, cooking method and cuisine filters (AND across axes)
- Groups the surviving recipes by category in display order

All functions are pure. The recipe list is never mutated, and an empty
result is returned as data (an empty dict), never signalled as an error.

Search flow: Streamlit / GET /recipes -> search_catalog() -> filter_recipes() -> group_by_category()
"""

from typing import Dict, Iterable, List, Optional, Sequence

from catalog.models import (
    FilterCriteria,
    Recipe,
    SearchSettings,
    SEARCHABLE_FIELDS,
    is_unconstrained,
)

# Grouped result: category -> recipes in original relative order
GroupedRecipes = Dict[str, List[Recipe]]


def _field_texts(recipe: Recipe, field: str) -> List[str]:
    """Return the searchable text values for one field of a recipe."""
    if field == "ingredients":
        return recipe.ingredients
    return [getattr(recipe, field, "") or ""]


def matches_query(
    recipe: Recipe,
    query: str,
    fields: Sequence[str] = SEARCHABLE_FIELDS,
) -> bool:
    """
    Check whether a recipe matches a free-text query.

    The query matches if ANY enabled field contains it as a case-insensitive
    substring. The query is used as typed, surrounding spaces included. For
    ingredients, any single ingredient containing the query is enough. An
    empty or whitespace-only query matches every recipe.

    Args:
        recipe: Recipe to check
        query: Free-text query
        fields: Field names to search (subset of SEARCHABLE_FIELDS)

    Returns:
        True if the recipe should be included for this query

    Examples:
        >>> r = Recipe(name="Miso Ramen", category="Soup", ingredients=["miso", "noodles"])
        >>> matches_query(r, "NOODLE")
        True
        >>> matches_query(r, "steak")
        False
    """
    query = query or ""
    if not query.strip():
        return True

    needle = query.lower()
    for field in fields:
        for text in _field_texts(recipe, field):
            if needle in text.lower():
                return True
    return False


def _axis_matches(value: str, wanted: Optional[str]) -> bool:
    if is_unconstrained(wanted):
        return True
    return value.lower() == wanted.strip().lower()


def matches_criteria(
    recipe: Recipe,
    criteria: FilterCriteria,
    fields: Sequence[str] = SEARCHABLE_FIELDS,
) -> bool:
    """
    Check a recipe against every active filter axis.

    Text query AND category AND cooking method AND cuisine. Axes set to
    "all" (or left empty) do not constrain the result. Axis values are
    compared case-insensitively against the normalized recipe fields. The
    category axis uses the chapter, so "Uncategorized" selects recipes without
    a category, and a recipe whose cooking method was "Unknown" never matches
    a method filter.
    """
    return (
        _axis_matches(recipe.chapter, criteria.category)
        and _axis_matches(recipe.cooking_method, criteria.method)
        and _axis_matches(recipe.cuisine, criteria.cuisine)
        and matches_query(recipe, criteria.query, fields)
    )


def filter_recipes(
    recipes: Iterable[Recipe],
    criteria: FilterCriteria,
    settings: Optional[SearchSettings] = None,
) -> List[Recipe]:
    """
    Return the recipes that satisfy all active criteria, in input order.

    Args:
        recipes: Full recipe collection (not modified)
        criteria: Active filter state
        settings: Search configuration (default: SearchSettings())

    Returns:
        New list with the matching recipes
    """
    settings = settings or SearchSettings()
    return [
        recipe for recipe in recipes
        if matches_criteria(recipe, criteria, settings.search_fields)
    ]


def order_categories(
    categories: Iterable[str],
    category_order: Optional[Sequence[str]] = None,
) -> List[str]:
    """
    Put categories in display order.

    Categories named in category_order come first, in that order (only those
    actually present). All remaining categories follow alphabetically.

    Examples:
        >>> order_categories(["Meat", "Aperitifs", "Soup", "Zakuski"], ["Soup", "Salad", "Meat"])
        ['Soup', 'Meat', 'Aperitifs', 'Zakuski']
        >>> order_categories(["Meat", "Soup"])
        ['Meat', 'Soup']
    """
    present = list(dict.fromkeys(categories))
    present_set = set(present)

    ordered: List[str] = []
    for category in category_order or ():
        if category in present_set and category not in ordered:
            ordered.append(category)

    listed = set(ordered)
    ordered.extend(sorted(c for c in present if c not in listed))
    return ordered


def group_by_category(
    recipes: Iterable[Recipe],
    category_order: Optional[Sequence[str]] = None,
) -> GroupedRecipes:
    """
    Group recipes by category in display order.

    Within a category, recipes keep their relative order from the input.
    Categories without recipes never appear in the result.

    Args:
        recipes: Recipes to group
        category_order: Optional curated chapter order (see order_categories)

    Returns:
        Dict mapping category name to its recipes, iterating in display order
    """
    groups: GroupedRecipes = {}
    for recipe in recipes:
        groups.setdefault(recipe.chapter, []).append(recipe)

    return {
        category: groups[category]
        for category in order_categories(groups, category_order)
    }


def search_catalog(
    recipes: Sequence[Recipe],
    criteria: Optional[FilterCriteria] = None,
    settings: Optional[SearchSettings] = None,
) -> GroupedRecipes:
    """
    Filter the catalog and group the result by category.

    This is the main entry point used by both the Streamlit directory and the
    API. With default criteria the result holds every recipe (identity view).
    If nothing matches the result is an empty dict; presenting an empty state
    is up to the caller.

    Args:
        recipes: Full recipe collection (not modified)
        criteria: Active filter state (default: no constraints)
        settings: Search fields and chapter order (default: SearchSettings())

    Returns:
        Dict mapping category name to matching recipes, in display order

    Examples:
        >>> recipes = [
        ...     Recipe(name="Miso Ramen", category="Soup", ingredients=["miso", "noodles"]),
        ...     Recipe(name="Steak Frites", category="Meat", ingredients=["steak", "potato"]),
        ...     Recipe(name="Miso Soup", category="Soup", ingredients=["miso", "tofu"]),
        ... ]
        >>> grouped = search_catalog(recipes, FilterCriteria(query="miso"))
        >>> {c: [r.name for r in rs] for c, rs in grouped.items()}
        {'Soup': ['Miso Ramen', 'Miso Soup']}
    """
    criteria = criteria or FilterCriteria()
    settings = settings or SearchSettings()
    matching = filter_recipes(recipes, criteria, settings)
    return group_by_category(matching, settings.category_order)


def count_grouped(grouped: GroupedRecipes) -> int:
    """Total number of recipes across all categories of a grouped result."""
    return sum(len(items) for items in grouped.values())


def matched_ingredients(recipe: Recipe, query: str) -> List[str]:
    """
    Return the ingredients that contain the query, for highlighting.

    Returns an empty list for an empty query.

    Examples:
        >>> matched_ingredients(Recipe(ingredients=["white miso", "tofu", "miso paste"]), "Miso")
        ['white miso', 'miso paste']
    """
    query = query or ""
    if not query.strip():
        return []
    needle = query.lower()
    return [item for item in recipe.ingredients if needle in item.lower()]
