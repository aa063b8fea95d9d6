"""Services for recycling business logic."""

from .exceptions import (
    RecyclingServiceError,
    EmptyBasketError,
    QuantityTooLargeError,
    SessionNotFoundError,
    SessionOwnershipError,
    SessionRecordingError,
)
from .quantities import (
    normalize_quantity,
    display_quantity,
    normalize_basket,
    GRAMS_PER_KILOGRAM,
    MAX_STORED_QUANTITY,
)
from .session_recording import (
    get_owned_session,
    create_session,
    update_session,
    delete_session,
)
from .transaction_queries import (
    list_centre_transactions,
)

__all__ = [
    # Exceptions
    'RecyclingServiceError',
    'EmptyBasketError',
    'QuantityTooLargeError',
    'SessionNotFoundError',
    'SessionOwnershipError',
    'SessionRecordingError',
    # Quantities
    'normalize_quantity',
    'display_quantity',
    'normalize_basket',
    'GRAMS_PER_KILOGRAM',
    'MAX_STORED_QUANTITY',
    # Session Recording
    'get_owned_session',
    'create_session',
    'update_session',
    'delete_session',
    # Transaction Queries
    'list_centre_transactions',
]
