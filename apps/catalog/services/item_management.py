"""Catalog CRUD operations service."""

import logging
from typing import Dict, Iterable, Optional

from django.db import transaction
from django.db.models import ProtectedError, QuerySet

from ..models import RecyclableItem, MeasurementType
from .exceptions import (
    ItemNotFoundError,
    DuplicateItemError,
    ItemInUseError,
    UnknownItemError,
)
from .item_matching import find_similar_item


logger = logging.getLogger(__name__)


def list_active_items() -> QuerySet:
    """Catalog as offered to centre staff and recyclers."""
    return RecyclableItem.objects.filter(is_active=True)


def list_items(*, include_inactive: bool = True) -> QuerySet:
    queryset = RecyclableItem.objects.all()
    if not include_inactive:
        queryset = queryset.filter(is_active=True)
    return queryset


def get_item(*, item_id: int) -> RecyclableItem:
    """
    Get item by ID.

    Raises:
        ItemNotFoundError: If item doesn't exist
    """
    try:
        return RecyclableItem.objects.get(id=item_id)
    except (RecyclableItem.DoesNotExist, ValueError):
        raise ItemNotFoundError(f"Item {item_id} not found")


def get_items_by_ids(*, item_ids: Iterable[int]) -> Dict[int, RecyclableItem]:
    """
    Resolve a set of item ids to items.

    Returns:
        Mapping of id to RecyclableItem

    Raises:
        UnknownItemError: If any id is missing from the catalog
    """
    wanted = set(item_ids)
    items = RecyclableItem.objects.in_bulk(list(wanted))
    missing = sorted(wanted - set(items))
    if missing:
        raise UnknownItemError(
            f"Unknown item id(s): {', '.join(str(i) for i in missing)}",
            item_ids=missing
        )
    return items


def _check_duplicate(name: str, exclude_id: Optional[int] = None) -> None:
    match = find_similar_item(name=name, exclude_id=exclude_id)
    if match:
        existing, similarity = match
        raise DuplicateItemError(
            f"Item '{name}' is too similar to existing item '{existing.name}'",
            existing=existing,
            similarity=similarity
        )


@transaction.atomic
def create_item(
    *,
    name: str,
    measurement_type: str = MeasurementType.COUNT,
    icon_url: str = '',
    is_active: bool = True
) -> RecyclableItem:
    """
    Create a catalog item.

    Raises:
        DuplicateItemError: If the name matches an existing item
    """
    _check_duplicate(name)

    item = RecyclableItem.objects.create(
        name=name,
        measurement_type=measurement_type,
        icon_url=icon_url,
        is_active=is_active
    )

    logger.info("Catalog item %s created: %s (%s)", item.id, item.name, item.measurement_type)
    return item


@transaction.atomic
def update_item(*, item_id: int, data: dict) -> RecyclableItem:
    """
    Update an existing item.

    Args:
        item_id: Item id
        data: Fields to update

    Raises:
        ItemNotFoundError: If item doesn't exist
        DuplicateItemError: If the new name matches another item
    """
    try:
        item = RecyclableItem.objects.select_for_update().get(id=item_id)
    except (RecyclableItem.DoesNotExist, ValueError):
        raise ItemNotFoundError(f"Item {item_id} not found")

    if 'name' in data and data['name'] != item.name:
        _check_duplicate(data['name'], exclude_id=item.id)

    allowed_fields = ['name', 'measurement_type', 'icon_url', 'is_active']
    for field, value in data.items():
        if field in allowed_fields:
            setattr(item, field, value)

    item.save()
    logger.info("Catalog item %s updated", item.id)
    return item


@transaction.atomic
def delete_item(*, item_id: int) -> None:
    """
    Delete an item that no transaction references.

    Raises:
        ItemNotFoundError: If item doesn't exist
        ItemInUseError: If transactions reference the item
    """
    item = get_item(item_id=item_id)

    try:
        with transaction.atomic():
            item.delete()
    except ProtectedError:
        raise ItemInUseError(
            f"Item '{item.name}' has recorded transactions; deactivate it instead"
        )

    logger.info("Catalog item %s deleted", item_id)
