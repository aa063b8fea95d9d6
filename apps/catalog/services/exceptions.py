"""Domain-specific exceptions for catalog services."""


class CatalogServiceError(Exception):
    """Base exception for catalog services."""
    pass


class ItemNotFoundError(CatalogServiceError):
    """Raised when an item does not exist."""
    pass


class DuplicateItemError(CatalogServiceError):
    """Raised when an item name matches an existing item too closely."""

    def __init__(self, message, existing=None, similarity=None):
        super().__init__(message)
        self.existing = existing
        self.similarity = similarity


class ItemInUseError(CatalogServiceError):
    """Raised when deleting an item that recycling transactions reference."""
    pass


class UnknownItemError(CatalogServiceError):
    """Raised when a basket references item ids missing from the catalog."""

    def __init__(self, message, item_ids=None):
        super().__init__(message)
        self.item_ids = item_ids or []
