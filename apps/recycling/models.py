from django.db import models
from django.core.validators import MinValueValidator
import uuid


class RecyclingSession(models.Model):
    """One visit of a recycler to a collection centre, recorded by staff."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    recycler = models.ForeignKey(
        'accounts.User',
        on_delete=models.PROTECT,
        related_name='recycling_sessions'
    )
    # The centre_staff profile that recorded the session owns it
    collection_centre = models.ForeignKey(
        'accounts.User',
        on_delete=models.PROTECT,
        related_name='recorded_sessions'
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'recycling_sessions'
        indexes = [
            models.Index(fields=['collection_centre', 'created_at'], name='sessions_centre_created_idx'),
            models.Index(fields=['recycler', 'created_at'], name='sessions_recycler_created_idx'),
        ]
        ordering = ['-created_at']

    def __str__(self):
        return f"Session {self.id} ({self.recycler_id} at {self.collection_centre_id})"


class RecyclingTransaction(models.Model):
    """
    One item line of a session.

    ``quantity`` is grams for weight items and whole units otherwise.
    ``recycler`` and ``collection_centre`` are copied from the session so
    that listings and analytics do not need the join.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    session = models.ForeignKey(
        RecyclingSession,
        on_delete=models.CASCADE,
        related_name='transactions'
    )
    recycler = models.ForeignKey(
        'accounts.User',
        on_delete=models.PROTECT,
        related_name='recycling_transactions'
    )
    collection_centre = models.ForeignKey(
        'accounts.User',
        on_delete=models.PROTECT,
        related_name='recorded_transactions'
    )
    item = models.ForeignKey(
        'catalog.RecyclableItem',
        on_delete=models.PROTECT,
        related_name='transactions'
    )
    quantity = models.PositiveIntegerField(validators=[MinValueValidator(1)])
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'recycling_transactions'
        indexes = [
            models.Index(fields=['collection_centre', 'created_at'], name='tx_centre_created_idx'),
            models.Index(fields=['recycler', 'created_at'], name='tx_recycler_created_idx'),
            models.Index(fields=['created_at'], name='tx_created_idx'),
        ]
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.item_id} x {self.quantity} (session {self.session_id})"
