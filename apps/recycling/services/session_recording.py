"""
Recording, replacing and deleting recycling sessions.

A session and its transaction rows are always written in one database
transaction. If any insert fails nothing is left behind and the caller
gets a ``SessionRecordingError`` carrying the store's message.
"""

import logging
from typing import Iterable, List, Tuple
from uuid import UUID

from django.core.exceptions import ValidationError
from django.db import transaction, DatabaseError

from apps.accounts.models import User
from apps.accounts.services import get_recycler
from apps.catalog.models import RecyclableItem
from apps.catalog.services import get_items_by_ids
from ..models import RecyclingSession, RecyclingTransaction
from .exceptions import (
    EmptyBasketError,
    SessionNotFoundError,
    SessionOwnershipError,
    SessionRecordingError,
)
from .quantities import normalize_basket


logger = logging.getLogger(__name__)

EMPTY_BASKET_MESSAGE = 'At least one item with quantity > 0 is required'


def _prepare_lines(lines: Iterable[dict]) -> List[Tuple[RecyclableItem, int]]:
    lines = list(lines)
    items = get_items_by_ids(item_ids=[line['item_id'] for line in lines])
    normalized = normalize_basket(lines=lines, items=items)
    if not normalized:
        raise EmptyBasketError(EMPTY_BASKET_MESSAGE)
    return normalized


def _build_transactions(session: RecyclingSession, lines) -> List[RecyclingTransaction]:
    return [
        RecyclingTransaction(
            session=session,
            recycler_id=session.recycler_id,
            collection_centre_id=session.collection_centre_id,
            item=item,
            quantity=quantity,
        )
        for item, quantity in lines
    ]


def get_owned_session(*, centre: User, session_id: UUID) -> RecyclingSession:
    """
    Get a session the given centre is allowed to change.

    Raises:
        SessionNotFoundError: If the session doesn't exist
        SessionOwnershipError: If another centre recorded it
    """
    try:
        session = RecyclingSession.objects.get(id=session_id)
    except (RecyclingSession.DoesNotExist, ValidationError):
        raise SessionNotFoundError('Session not found')

    if session.collection_centre_id != centre.id:
        logger.warning(
            "Centre %s tried to modify session %s owned by %s",
            centre.id, session.id, session.collection_centre_id
        )
        raise SessionOwnershipError('Forbidden')

    return session


def create_session(
    *,
    centre: User,
    recycler_id: UUID,
    lines: Iterable[dict]
) -> RecyclingSession:
    """
    Record a recycler's visit.

    Args:
        centre: Staff profile recording the visit
        recycler_id: Profile id of the recycler
        lines: ``{'item_id', 'quantity'}`` dicts, quantities as entered

    Returns:
        The created RecyclingSession

    Raises:
        RecyclerNotFoundError: If the recycler doesn't exist
        NotARecyclerError: If the profile is not a recycler
        UnknownItemError: If a line references an unknown item
        EmptyBasketError: If no line has a quantity above zero
        SessionRecordingError: If the store rejects the writes
    """
    recycler = get_recycler(recycler_id=recycler_id)
    normalized = _prepare_lines(lines)

    try:
        with transaction.atomic():
            session = RecyclingSession.objects.create(
                recycler=recycler,
                collection_centre=centre,
            )
            RecyclingTransaction.objects.bulk_create(
                _build_transactions(session, normalized)
            )
    except DatabaseError as e:
        logger.error(
            "Rolled back session for recycler %s at centre %s: %s",
            recycler.id, centre.id, e
        )
        raise SessionRecordingError(f"Failed to create transactions: {e}")

    logger.info(
        "Session %s recorded by centre %s for recycler %s with %d line(s)",
        session.id, centre.id, recycler.id, len(normalized)
    )
    return session


def update_session(
    *,
    centre: User,
    session_id: UUID,
    lines: Iterable[dict]
) -> RecyclingSession:
    """
    Replace all transactions of a session.

    Existing rows are deleted and the new basket inserted in one database
    transaction, so a failure leaves the old rows in place.

    Raises:
        SessionNotFoundError: If the session doesn't exist
        SessionOwnershipError: If another centre recorded it
        UnknownItemError: If a line references an unknown item
        EmptyBasketError: If no line has a quantity above zero
        SessionRecordingError: If the store rejects the writes
    """
    session = get_owned_session(centre=centre, session_id=session_id)
    normalized = _prepare_lines(lines)

    try:
        with transaction.atomic():
            session.transactions.all().delete()
            RecyclingTransaction.objects.bulk_create(
                _build_transactions(session, normalized)
            )
            session.save(update_fields=['updated_at'])
    except DatabaseError as e:
        logger.error("Rolled back update of session %s: %s", session.id, e)
        raise SessionRecordingError(f"Failed to update transactions: {e}")

    logger.info(
        "Session %s replaced by centre %s with %d line(s)",
        session.id, centre.id, len(normalized)
    )
    return session


@transaction.atomic
def delete_session(*, centre: User, session_id: UUID) -> None:
    """
    Delete a session and its transactions.

    Raises:
        SessionNotFoundError: If the session doesn't exist
        SessionOwnershipError: If another centre recorded it
    """
    session = get_owned_session(centre=centre, session_id=session_id)

    deleted, _ = session.transactions.all().delete()
    session.delete()

    logger.info(
        "Session %s deleted by centre %s (%d transaction(s))",
        session_id, centre.id, deleted
    )
