"""Services for catalog business logic."""

from .exceptions import (
    CatalogServiceError,
    ItemNotFoundError,
    DuplicateItemError,
    ItemInUseError,
    UnknownItemError,
)
from .item_management import (
    list_active_items,
    list_items,
    get_item,
    get_items_by_ids,
    create_item,
    update_item,
    delete_item,
)
from .item_matching import (
    normalize_text,
    find_similar_item,
    EXACT_MATCH_THRESHOLD,
)

__all__ = [
    # Exceptions
    'CatalogServiceError',
    'ItemNotFoundError',
    'DuplicateItemError',
    'ItemInUseError',
    'UnknownItemError',
    # Item Management
    'list_active_items',
    'list_items',
    'get_item',
    'get_items_by_ids',
    'create_item',
    'update_item',
    'delete_item',
    # Item Matching
    'normalize_text',
    'find_similar_item',
    'EXACT_MATCH_THRESHOLD',
]
