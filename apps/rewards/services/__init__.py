"""Services for points ledger, vouchers and redemption."""

from .exceptions import (
    RewardsServiceError,
    LedgerImmutableError,
    InvalidLedgerChangeError,
    VoucherNotFoundError,
    VoucherUnavailableError,
    InsufficientPointsError,
    VoucherInUseError,
)
from .ledger import (
    get_balance,
    list_entries,
    record_ledger_entry,
    adjust_points,
)
from .redemption import (
    redeem_voucher,
    list_redemptions,
)
from .voucher_management import (
    list_active_vouchers,
    list_vouchers,
    get_voucher,
    create_voucher,
    update_voucher,
    delete_voucher,
)

__all__ = [
    # Exceptions
    'RewardsServiceError',
    'LedgerImmutableError',
    'InvalidLedgerChangeError',
    'VoucherNotFoundError',
    'VoucherUnavailableError',
    'InsufficientPointsError',
    'VoucherInUseError',
    # Ledger
    'get_balance',
    'list_entries',
    'record_ledger_entry',
    'adjust_points',
    # Redemption
    'redeem_voucher',
    'list_redemptions',
    # Voucher Management
    'list_active_vouchers',
    'list_vouchers',
    'get_voucher',
    'create_voucher',
    'update_voucher',
    'delete_voucher',
]
