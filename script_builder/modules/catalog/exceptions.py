"""Catalog specific exceptions."""


class CatalogError(Exception):
    """Base class for action catalog errors."""


class ActionNotFoundError(CatalogError):
    """Raised when no template carries the requested name."""
