"""
Voucher redemption.

The voucher check, balance check, redemption row and debiting ledger
entry all happen in one database transaction while the user's profile
row is locked. Two concurrent redemptions by the same user therefore
see each other's debit and the balance cannot go negative.
"""

import logging
from uuid import UUID

from django.core.exceptions import ValidationError
from django.db import transaction
from django.db.models import QuerySet

from ..models import Voucher, VoucherRedemption, LedgerSource, RedemptionStatus
from .exceptions import VoucherUnavailableError, InsufficientPointsError
from .ledger import get_balance, record_ledger_entry, lock_profile


logger = logging.getLogger(__name__)


@transaction.atomic
def redeem_voucher(*, user, voucher_id: UUID) -> tuple:
    """
    Spend points on a voucher.

    Args:
        user: Profile redeeming the voucher
        voucher_id: Voucher UUID

    Returns:
        (VoucherRedemption, new_balance)

    Raises:
        VoucherUnavailableError: If the voucher is missing or inactive
        InsufficientPointsError: If the balance is below the cost;
            nothing is written
    """
    try:
        voucher = Voucher.objects.get(id=voucher_id)
    except (Voucher.DoesNotExist, ValidationError):
        voucher = None

    if voucher is None or not voucher.is_active:
        raise VoucherUnavailableError("Voucher not found or inactive.")

    locked_user = lock_profile(user.id)
    current_points = get_balance(user_id=locked_user.id)

    if current_points < voucher.points_cost:
        logger.info(
            "Redemption refused for %s: %d points, voucher %s costs %d",
            locked_user.id, current_points, voucher.id, voucher.points_cost
        )
        raise InsufficientPointsError(
            "Not enough points.",
            current_points=current_points,
            required_points=voucher.points_cost
        )

    redemption = VoucherRedemption.objects.create(
        user=locked_user,
        voucher=voucher,
        points_spent=voucher.points_cost,
        status=RedemptionStatus.REDEEMED,
    )
    record_ledger_entry(
        user=locked_user,
        change=-voucher.points_cost,
        source=LedgerSource.VOUCHER_REDEEM,
        reason=f"Redeemed {voucher.name}",
    )

    new_balance = current_points - voucher.points_cost
    logger.info(
        "User %s redeemed voucher %s for %d points (balance %d)",
        locked_user.id, voucher.id, voucher.points_cost, new_balance
    )
    return redemption, new_balance


def list_redemptions(*, user_id: UUID) -> QuerySet:
    """Redemptions of a user, newest first."""
    return (
        VoucherRedemption.objects
        .filter(user_id=user_id)
        .select_related('voucher')
        .order_by('-created_at')
    )
