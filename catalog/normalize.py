"""
Normalization of raw dataset records into canonical Recipe objects.

The static dataset is produced by an external preparation step and its
records are not uniform: some carry "name", others "title"; cuisine may be
"cuisine_style" or "cuisine"; optional fields may be missing, null, or of
the wrong type. This module resolves all of that once per record:

- name: name -> title -> ""
- id: id -> file_id -> ""
- category: category -> "" (recipe.chapter shows "Uncategorized" for display)
- cuisine: cuisine_style -> cuisine -> ""
- cooking_method: "Unknown" is treated as absent
- ingredients: list of non-empty strings (a bare string becomes a one-item list)

Normalization never raises; anything unusable degrades to an empty value.
"""

from typing import Any, Dict, Iterable, List

from catalog.models import Recipe

# Sentinel the dataset uses when the cooking method could not be determined
UNKNOWN_METHOD = "unknown"


def clean_text(value: Any) -> str:
    """
    Convert a raw field value to a stripped string.

    Examples:
        >>> clean_text("  Soup ")
        'Soup'
        >>> clean_text(None)
        ''
        >>> clean_text(42)
        '42'
        >>> clean_text({"nested": True})
        ''
    """
    if value is None or isinstance(value, bool):
        return ""
    if isinstance(value, str):
        return value.strip()
    if isinstance(value, (int, float)):
        return str(value)
    return ""


def first_text(raw: Dict[str, Any], *keys: str) -> str:
    """Return the first non-empty text value among keys, or ''."""
    for key in keys:
        text = clean_text(raw.get(key))
        if text:
            return text
    return ""


def clean_ingredients(value: Any) -> List[str]:
    """
    Convert a raw ingredients value to a list of non-empty strings.

    Examples:
        >>> clean_ingredients(["miso", " ", None, "tofu"])
        ['miso', 'tofu']
        >>> clean_ingredients("eggs")
        ['eggs']
        >>> clean_ingredients(None)
        []
    """
    if isinstance(value, str):
        value = [value]
    if not isinstance(value, (list, tuple)):
        return []
    cleaned = (clean_text(item) for item in value)
    return [item for item in cleaned if item]


def clean_method(value: Any) -> str:
    method = clean_text(value)
    if method.lower() == UNKNOWN_METHOD:
        return ""
    return method


def normalize_recipe(raw: Dict[str, Any]) -> Recipe:
    """
    Map one raw dataset record to a canonical Recipe.

    Args:
        raw: Record as it appears in the dataset JSON

    Returns:
        Recipe with every fallback chain already resolved
    """
    return Recipe(
        id=first_text(raw, "id", "file_id"),
        file_id=clean_text(raw.get("file_id")),
        name=first_text(raw, "name", "title"),
        category=first_text(raw, "category"),
        cuisine=first_text(raw, "cuisine_style", "cuisine"),
        cooking_method=clean_method(raw.get("cooking_method")),
        ingredients=clean_ingredients(raw.get("ingredients")),
        content_preview=clean_text(raw.get("content_preview")),
        file_type=clean_text(raw.get("file_type")),
    )


def normalize_recipes(records: Iterable[Dict[str, Any]]) -> List[Recipe]:
    """Normalize records in order. The input is not modified."""
    return [normalize_recipe(record) for record in records]
