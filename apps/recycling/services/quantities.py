"""
Quantity conversion between what staff enter and what is stored.

Weight items are entered in kilograms and stored as whole grams. Count
items are stored as whole units. Both round half up, so ``0.0005`` kg
becomes 1 g and ``2.5`` bottles become 3.
"""

from decimal import Decimal, ROUND_HALF_UP
from typing import Dict, Iterable, List, Tuple, Union

from apps.catalog.models import RecyclableItem
from .exceptions import QuantityTooLargeError


GRAMS_PER_KILOGRAM = 1000

# Largest value a PositiveIntegerField holds on every supported backend
MAX_STORED_QUANTITY = 2147483647

Number = Union[int, float, Decimal, str]


def _to_decimal(value: Number) -> Decimal:
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def normalize_quantity(item: RecyclableItem, quantity: Number) -> int:
    """
    Convert an entered quantity to the stored integer.

    >>> normalize_quantity(newspaper, 2.5)
    2500

    Raises:
        QuantityTooLargeError: If the result exceeds ``MAX_STORED_QUANTITY``
    """
    value = _to_decimal(quantity)
    if item.is_weight_based:
        value = value * GRAMS_PER_KILOGRAM
    if value > MAX_STORED_QUANTITY:
        raise QuantityTooLargeError(
            f"Quantity {quantity} for {item.name} is too large"
        )
    return int(value.quantize(Decimal('1'), rounding=ROUND_HALF_UP))


def display_quantity(item: RecyclableItem, stored: int) -> Union[int, float]:
    """Convert a stored quantity back to kilograms or units."""
    if item.is_weight_based:
        return stored / GRAMS_PER_KILOGRAM
    return stored


def normalize_basket(
    *,
    lines: Iterable[dict],
    items: Dict[int, RecyclableItem]
) -> List[Tuple[RecyclableItem, int]]:
    """
    Normalize basket lines, dropping those that end up at zero.

    Args:
        lines: ``{'item_id': int, 'quantity': Number}`` dicts
        items: Catalog items keyed by id

    Returns:
        (item, stored_quantity) pairs with stored_quantity > 0, in input order
    """
    normalized = []
    for line in lines:
        item = items[line['item_id']]
        stored = normalize_quantity(item, line['quantity'])
        if stored > 0:
            normalized.append((item, stored))
    return normalized
