"""
Points ledger service.

The balance is always recomputed from the ledger. Callers that need a
balance that cannot change underneath them (redemption, negative
adjustments) lock the profile row first with ``lock_profile``.
"""

import logging
from uuid import UUID

from django.contrib.auth import get_user_model
from django.core.exceptions import ValidationError
from django.db import transaction
from django.db.models import QuerySet, Sum

from apps.accounts.services import UserNotFoundError
from ..models import PointsLedgerEntry, LedgerSource
from .exceptions import InvalidLedgerChangeError

User = get_user_model()

logger = logging.getLogger(__name__)


def get_balance(*, user_id: UUID) -> int:
    """Sum of ``change`` over the user's ledger entries, 0 when there are none."""
    total = (
        PointsLedgerEntry.objects
        .filter(user_id=user_id)
        .aggregate(total=Sum('change'))['total']
    )
    return total or 0


def list_entries(*, user_id: UUID) -> QuerySet:
    """Ledger entries of a user, newest first."""
    return PointsLedgerEntry.objects.filter(user_id=user_id).order_by('-created_at')


def lock_profile(user_id: UUID) -> User:
    """Lock the profile row so balance checks for this user run one at a time."""
    try:
        return User.objects.select_for_update().get(id=user_id)
    except (User.DoesNotExist, ValidationError):
        raise UserNotFoundError(f"User {user_id} not found")


def record_ledger_entry(
    *,
    user: User,
    change: int,
    source: str,
    reason: str = ''
) -> PointsLedgerEntry:
    """
    Append an entry to the ledger.

    Raises:
        InvalidLedgerChangeError: If change is zero
    """
    if change == 0:
        raise InvalidLedgerChangeError("Ledger change must be non-zero")

    entry = PointsLedgerEntry.objects.create(
        user=user,
        change=change,
        source=source,
        reason=reason,
    )
    logger.debug("Ledger %s: %+d (%s)", user.id, change, source)
    return entry


@transaction.atomic
def adjust_points(
    *,
    acting_user: User,
    user_id: UUID,
    change: int,
    reason: str
) -> tuple:
    """
    Credit or debit a user's points by hand.

    Args:
        acting_user: Admin performing the adjustment
        user_id: Profile whose points change
        change: Signed, non-zero number of points
        reason: Free text stored on the entry

    Returns:
        (entry, new_balance)

    Raises:
        UserNotFoundError: If the profile doesn't exist
        InvalidLedgerChangeError: If change is zero or would overdraw
    """
    user = lock_profile(user_id)
    balance = get_balance(user_id=user.id)

    if balance + change < 0:
        raise InvalidLedgerChangeError(
            f"Adjustment of {change} would take the balance below zero (current: {balance})"
        )

    entry = record_ledger_entry(
        user=user,
        change=change,
        source=LedgerSource.ADMIN_ADJUSTMENT,
        reason=reason,
    )

    logger.info(
        "Admin %s adjusted points of %s by %+d: %s",
        acting_user.id, user.id, change, reason
    )
    return entry, balance + change
