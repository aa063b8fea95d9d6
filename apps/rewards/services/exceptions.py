"""Domain-specific exceptions for rewards services."""


class RewardsServiceError(Exception):
    """Base exception for rewards services."""
    pass


class LedgerImmutableError(RewardsServiceError):
    """Raised when an existing ledger entry would be changed or removed."""
    pass


class InvalidLedgerChangeError(RewardsServiceError):
    """Raised for a zero change or an adjustment that overdraws the balance."""
    pass


class VoucherNotFoundError(RewardsServiceError):
    """Raised when a voucher does not exist."""
    pass


class VoucherUnavailableError(RewardsServiceError):
    """Raised when redeeming a missing or inactive voucher."""
    pass


class InsufficientPointsError(RewardsServiceError):
    """Raised when the balance is lower than the voucher cost."""

    def __init__(self, message, current_points=0, required_points=0):
        super().__init__(message)
        self.current_points = current_points
        self.required_points = required_points


class VoucherInUseError(RewardsServiceError):
    """Raised when deleting a voucher that has been redeemed."""
    pass
