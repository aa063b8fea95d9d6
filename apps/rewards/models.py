from django.db import models
from django.core.validators import MinValueValidator
import uuid


class LedgerSource(models.TextChoices):
    RECYCLING = 'recycling', 'Recycling'
    VOUCHER_REDEEM = 'voucher_redeem', 'Voucher Redemption'
    ADMIN_ADJUSTMENT = 'admin_adjustment', 'Admin Adjustment'


class RedemptionStatus(models.TextChoices):
    REDEEMED = 'redeemed', 'Redeemed'


class PointsLedgerQuerySet(models.QuerySet):
    """Bulk updates and deletes are refused like their single-row versions."""

    def update(self, **kwargs):
        from .services.exceptions import LedgerImmutableError
        raise LedgerImmutableError("Ledger entries cannot be modified")

    def delete(self):
        from .services.exceptions import LedgerImmutableError
        raise LedgerImmutableError("Ledger entries cannot be deleted")

    def wipe(self):
        """Remove entries outright. Only for resetting sample data."""
        return super().delete()


class PointsLedgerEntry(models.Model):
    """
    Append-only record of a change to a user's points.

    The balance of a user is the sum of ``change`` over their entries and
    is never stored. Entries cannot be edited or deleted once written.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user = models.ForeignKey(
        'accounts.User',
        on_delete=models.PROTECT,
        related_name='ledger_entries'
    )
    change = models.IntegerField()
    source = models.CharField(max_length=20, choices=LedgerSource.choices)
    reason = models.CharField(max_length=255, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    objects = PointsLedgerQuerySet.as_manager()

    class Meta:
        db_table = 'points_ledger'
        indexes = [
            models.Index(fields=['user', 'created_at'], name='ledger_user_created_idx'),
        ]
        ordering = ['-created_at']
        verbose_name_plural = 'points ledger entries'

    def __str__(self):
        return f"{self.user_id}: {self.change:+d} ({self.source})"

    def save(self, *args, **kwargs):
        if not self._state.adding:
            from .services.exceptions import LedgerImmutableError
            raise LedgerImmutableError("Ledger entries cannot be modified")
        super().save(*args, **kwargs)

    def delete(self, *args, **kwargs):
        from .services.exceptions import LedgerImmutableError
        raise LedgerImmutableError("Ledger entries cannot be deleted")


class Voucher(models.Model):
    """A reward recyclers can buy with points."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=200)
    description = models.TextField(blank=True)
    points_cost = models.PositiveIntegerField(validators=[MinValueValidator(1)])
    is_active = models.BooleanField(default=True, db_index=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'vouchers'
        ordering = ['points_cost', 'name']

    def __str__(self):
        return f"{self.name} ({self.points_cost} pts)"


class VoucherRedemption(models.Model):
    """A voucher bought by a user; ``points_spent`` is the cost at that time."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user = models.ForeignKey(
        'accounts.User',
        on_delete=models.PROTECT,
        related_name='voucher_redemptions'
    )
    voucher = models.ForeignKey(
        Voucher,
        on_delete=models.PROTECT,
        related_name='redemptions'
    )
    points_spent = models.PositiveIntegerField()
    status = models.CharField(
        max_length=20,
        choices=RedemptionStatus.choices,
        default=RedemptionStatus.REDEEMED
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'voucher_redemptions'
        indexes = [
            models.Index(fields=['user', 'created_at'], name='redemptions_user_created_idx'),
        ]
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.user_id} redeemed {self.voucher_id} for {self.points_spent}"
