"""
External document links for recipes.

Full recipes live in Google Drive. Google Docs open in the document editor;
PDFs and every other file type open in the generic Drive file viewer. Building
the URL is pure string formatting; opening it is left to the browser.
"""

from typing import Optional

from catalog.models import Recipe

GOOGLE_DOC_FILE_TYPE = "Google Doc"

DOC_LINK_TEMPLATE = "https://docs.google.com/document/d/{file_id}/edit"
FILE_LINK_TEMPLATE = "https://drive.google.com/file/d/{file_id}/view"


def build_link(file_id: str, file_type: Optional[str] = None) -> Optional[str]:
    """
    Build the viewing URL for a document.

    Args:
        file_id: Document store identifier
        file_type: Optional type tag; only "Google Doc" selects the editor template

    Returns:
        URL string, or None if file_id is empty

    Examples:
        >>> build_link("abc123", "Google Doc")
        'https://docs.google.com/document/d/abc123/edit'
        >>> build_link("abc123", "PDF")
        'https://drive.google.com/file/d/abc123/view'
    """
    file_id = (file_id or "").strip()
    if not file_id:
        return None

    if (file_type or "").strip() == GOOGLE_DOC_FILE_TYPE:
        return DOC_LINK_TEMPLATE.format(file_id=file_id)
    return FILE_LINK_TEMPLATE.format(file_id=file_id)


def build_recipe_link(recipe: Recipe) -> Optional[str]:
    """Build the viewing URL for a recipe (file_id, else id), or None."""
    return build_link(recipe.file_id or recipe.id, recipe.file_type)
