"""Read side of recycling transactions for centre staff."""

from collections import defaultdict
from typing import Optional
from uuid import UUID

from django.db.models import Sum

from apps.accounts.models import User
from apps.catalog.models import RecyclableItem
from ..models import RecyclingTransaction
from .quantities import display_quantity


def _totals_by_item(queryset) -> dict:
    """
    Display totals per item name.

    Summed in stored units and converted once, so kilogram totals do not
    accumulate float error.
    """
    rows = queryset.order_by().values('item_id').annotate(stored=Sum('quantity'))
    items = RecyclableItem.objects.in_bulk([row['item_id'] for row in rows])

    totals = defaultdict(int)
    for row in rows:
        item = items[row['item_id']]
        totals[item.name] += display_quantity(item, row['stored'])
    return dict(totals)


def list_centre_transactions(
    *,
    centre: User,
    recycler_id: Optional[UUID] = None
) -> dict:
    """
    Transactions recorded by a centre, newest first.

    Args:
        centre: Staff profile whose transactions to list
        recycler_id: Restrict the listing to one recycler

    Returns:
        {
            'transactions': QuerySet (select_related item and recycler),
            'centre_totals': {item name: display total} over all of the
                centre's transactions,
            'recycler_totals': same for ``recycler_id``, or None
        }
    """
    centre_qs = RecyclingTransaction.objects.filter(collection_centre=centre)

    transactions = centre_qs.select_related('item', 'recycler').order_by('-created_at')
    recycler_totals = None

    if recycler_id:
        recycler_qs = centre_qs.filter(recycler_id=recycler_id)
        transactions = transactions.filter(recycler_id=recycler_id)
        recycler_totals = _totals_by_item(recycler_qs)

    return {
        'transactions': transactions,
        'centre_totals': _totals_by_item(centre_qs),
        'recycler_totals': recycler_totals,
    }
