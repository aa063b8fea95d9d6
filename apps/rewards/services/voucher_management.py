"""Voucher CRUD operations service."""

import logging
from uuid import UUID

from django.core.exceptions import ValidationError
from django.db import transaction
from django.db.models import ProtectedError, QuerySet

from ..models import Voucher
from .exceptions import VoucherNotFoundError, VoucherInUseError


logger = logging.getLogger(__name__)


def list_active_vouchers() -> QuerySet:
    """Active vouchers, cheapest first."""
    return Voucher.objects.filter(is_active=True).order_by('points_cost', 'name')


def list_vouchers() -> QuerySet:
    return Voucher.objects.all().order_by('points_cost', 'name')


def get_voucher(*, voucher_id: UUID) -> Voucher:
    """
    Get voucher by ID.

    Raises:
        VoucherNotFoundError: If voucher doesn't exist
    """
    try:
        return Voucher.objects.get(id=voucher_id)
    except (Voucher.DoesNotExist, ValidationError):
        raise VoucherNotFoundError(f"Voucher {voucher_id} not found")


@transaction.atomic
def create_voucher(
    *,
    name: str,
    points_cost: int,
    description: str = '',
    is_active: bool = True
) -> Voucher:
    voucher = Voucher.objects.create(
        name=name,
        description=description,
        points_cost=points_cost,
        is_active=is_active,
    )
    logger.info("Voucher %s created: %s for %d points", voucher.id, name, points_cost)
    return voucher


@transaction.atomic
def update_voucher(*, voucher_id: UUID, data: dict) -> Voucher:
    """
    Update an existing voucher.

    Changing ``points_cost`` does not touch past redemptions; they keep the
    cost they were redeemed at.

    Raises:
        VoucherNotFoundError: If voucher doesn't exist
    """
    try:
        voucher = Voucher.objects.select_for_update().get(id=voucher_id)
    except (Voucher.DoesNotExist, ValidationError):
        raise VoucherNotFoundError(f"Voucher {voucher_id} not found")

    allowed_fields = ['name', 'description', 'points_cost', 'is_active']
    for field, value in data.items():
        if field in allowed_fields:
            setattr(voucher, field, value)

    voucher.save()
    logger.info("Voucher %s updated", voucher.id)
    return voucher


@transaction.atomic
def delete_voucher(*, voucher_id: UUID) -> None:
    """
    Delete a voucher nobody has redeemed.

    Raises:
        VoucherNotFoundError: If voucher doesn't exist
        VoucherInUseError: If the voucher has redemptions
    """
    voucher = get_voucher(voucher_id=voucher_id)

    try:
        voucher.delete()
    except ProtectedError:
        raise VoucherInUseError(
            f"Voucher '{voucher.name}' has been redeemed; deactivate it instead"
        )

    logger.info("Voucher %s deleted", voucher_id)
