"""
Domain-specific exceptions for catalog app.

These exceptions represent business rule violations and should be
caught in views and converted to appropriate HTTP responses.
"""


class CatalogServiceError(Exception):
    """Base exception for all catalog service errors."""
    pass


class DuplicateProductError(CatalogServiceError):
    """Raised when a product with the same normalized name already exists."""
    pass


class ForeignWorkspaceReferenceError(CatalogServiceError):
    """Raised when a referenced category, brand or store belongs to another workspace."""
    pass
