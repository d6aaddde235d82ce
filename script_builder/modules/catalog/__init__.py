"""Public exports for the action catalog."""

from .data import CATALOG, CATALOG_VERSION
from .exceptions import ActionNotFoundError, CatalogError
from .service import ALL_CATEGORIES, ActionCatalog, undeclared_variables, unlisted_placeholders

__all__ = [
    "ALL_CATEGORIES",
    "ActionCatalog",
    "ActionNotFoundError",
    "CATALOG",
    "CATALOG_VERSION",
    "CatalogError",
    "undeclared_variables",
    "unlisted_placeholders",
]
