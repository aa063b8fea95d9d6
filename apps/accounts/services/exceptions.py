"""Domain-specific exceptions for accounts services."""


class AccountsServiceError(Exception):
    """Base exception for accounts services."""
    pass


class UserRegistrationError(AccountsServiceError):
    """Raised when user registration fails."""
    pass


class InvalidCredentialsError(AccountsServiceError):
    """Raised when authentication credentials are invalid."""
    pass


class InactiveAccountError(AccountsServiceError):
    """Raised when account is deactivated."""
    pass


class UserNotFoundError(AccountsServiceError):
    """Raised when user does not exist."""
    pass


class DuplicateEmailError(AccountsServiceError):
    """Raised when another profile already uses the email."""
    pass


class SelfDeletionError(AccountsServiceError):
    """Raised when an admin tries to delete their own profile."""
    pass


class RecyclerNotFoundError(AccountsServiceError):
    """Raised when no profile carries the given member code."""
    pass


class NotARecyclerError(AccountsServiceError):
    """Raised when a member code belongs to a non-recycler profile."""

    def __init__(self, message, role=None):
        super().__init__(message)
        self.role = role


class ProfileInUseError(AccountsServiceError):
    """Raised when deleting a profile that still owns history."""
    pass
