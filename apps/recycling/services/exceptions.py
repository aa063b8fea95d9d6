"""Domain-specific exceptions for recycling services."""


class RecyclingServiceError(Exception):
    """Base exception for recycling services."""
    pass


class EmptyBasketError(RecyclingServiceError):
    """Raised when no basket line has a quantity above zero."""
    pass


class SessionNotFoundError(RecyclingServiceError):
    """Raised when a session does not exist."""
    pass


class SessionOwnershipError(RecyclingServiceError):
    """Raised when a centre touches a session recorded by another centre."""
    pass


class SessionRecordingError(RecyclingServiceError):
    """Raised when writing a session or its transactions fails in the store."""
    pass


class QuantityTooLargeError(RecyclingServiceError):
    """Raised when a normalized quantity does not fit the stored integer."""
    pass
