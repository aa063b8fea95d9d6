"""
Analytics Module
=================

Read-only aggregation of recycling transactions for the admin dashboard
and its CSV export.

Classes:
    AnalyticsQueries: Static methods for the analytics endpoints.

Example:
    Getting the weekly overview::

        from apps.analytics.analytics import AnalyticsQueries

        overview = AnalyticsQueries.transaction_overview(range_key='7d')
        for day in overview['trendData']:
            print(day['name'], day['volume'], day['transactions'])

Note:
    Volumes are sums of the stored quantity, so weight items count in
    grams and count items in units. Only ``exportData`` rows carry the
    converted ``displayQuantity``.
"""

from datetime import timedelta

from django.conf import settings
from django.db.models import Sum, Count
from django.db.models.functions import TruncDate
from django.utils import timezone

from apps.accounts.models import User, Role
from apps.recycling.models import RecyclingTransaction
from apps.recycling.services import display_quantity
from .exceptions import InvalidRangeError


RANGE_DAYS = {
    '7d': 7,
    '30d': 30,
    'all': None,
}

DEFAULT_RANGE = '7d'

NEW_USER_WINDOW_DAYS = 7


def _centre_name(full_name, email):
    return full_name or email or 'Unknown Centre'


class AnalyticsQueries:
    """
    Aggregation queries for the admin analytics endpoints.

    Methods:
        transactions_in_range: Transactions created inside a range window.
        transaction_overview: Trend, material, centre and export data.
        dashboard_stats: Headline counters for the admin dashboard.

    Note:
        All methods return plain dictionaries or lists, not Django objects,
        making them suitable for JSON serialization in API responses.
    """

    @staticmethod
    def range_start(range_key=DEFAULT_RANGE, now=None):
        """
        Start of the window for a range key.

        Args:
            range_key (str): One of ``7d``, ``30d``, ``all``.
            now (datetime, optional): Reference time, defaults to now.

        Returns:
            datetime | None: None for ``all``.

        Raises:
            InvalidRangeError: If the key is unknown.
        """
        if range_key not in RANGE_DAYS:
            raise InvalidRangeError(
                f"Invalid range: '{range_key}'. Valid options: {', '.join(RANGE_DAYS)}"
            )

        days = RANGE_DAYS[range_key]
        if days is None:
            return None
        return (now or timezone.now()) - timedelta(days=days)

    @staticmethod
    def transactions_in_range(range_key=DEFAULT_RANGE, now=None):
        start = AnalyticsQueries.range_start(range_key, now=now)
        queryset = RecyclingTransaction.objects.all()
        if start is not None:
            queryset = queryset.filter(created_at__gte=start)
        return queryset

    @staticmethod
    def transaction_overview(range_key=DEFAULT_RANGE, now=None):
        """
        Aggregate transactions created in the window.

        Args:
            range_key (str): ``7d`` (default), ``30d`` or ``all``.
            now (datetime, optional): Reference time, defaults to now.

        Returns:
            dict: A dictionary containing:
                - trendData (list): ``{name: 'YYYY-MM-DD', volume,
                  transactions}`` per calendar day, ascending.
                - materialData (list): ``{name, value}`` per item name,
                  largest first.
                - centreData (list): ``{name, value}`` per collection
                  centre, largest first, cut at ``ANALYTICS_TOP_CENTRES``.
                - exportData (list): one flattened row per transaction,
                  oldest first.

        Raises:
            InvalidRangeError: If the key is unknown.

        Example:
            ::

                overview = AnalyticsQueries.transaction_overview('30d')
                top_centre = overview['centreData'][0]['name']
        """
        queryset = AnalyticsQueries.transactions_in_range(range_key, now=now).order_by()

        # A. By calendar day
        trend_rows = (
            queryset
            .annotate(day=TruncDate('created_at'))
            .values('day')
            .annotate(volume=Sum('quantity'), transactions=Count('id'))
            .order_by('day')
        )
        trend_data = [
            {
                'name': row['day'].isoformat(),
                'volume': row['volume'] or 0,
                'transactions': row['transactions'],
            }
            for row in trend_rows
        ]

        # B. By material
        material_rows = (
            queryset
            .values('item__name')
            .annotate(value=Sum('quantity'))
            .order_by('-value', 'item__name')
        )
        material_data = [
            {'name': row['item__name'], 'value': row['value'] or 0}
            for row in material_rows
        ]

        # C. By centre, top N
        centre_rows = (
            queryset
            .values(
                'collection_centre_id',
                'collection_centre__full_name',
                'collection_centre__email',
            )
            .annotate(value=Sum('quantity'))
            .order_by('-value', 'collection_centre__full_name')
        )[:settings.ANALYTICS_TOP_CENTRES]
        centre_data = [
            {
                'name': _centre_name(
                    row['collection_centre__full_name'],
                    row['collection_centre__email'],
                ),
                'value': row['value'] or 0,
            }
            for row in centre_rows
        ]

        # D. Flattened rows for export
        export_rows = (
            queryset
            .select_related('item', 'collection_centre', 'recycler')
            .order_by('created_at')
        )
        export_data = [
            {
                'id': str(tx.id),
                'date': tx.created_at.isoformat(),
                'material': tx.item.name,
                'centre': _centre_name(
                    tx.collection_centre.full_name,
                    tx.collection_centre.email,
                ),
                'recycler': tx.recycler.public_id,
                'quantity': tx.quantity,
                'displayQuantity': display_quantity(tx.item, tx.quantity),
            }
            for tx in export_rows
        ]

        return {
            'trendData': trend_data,
            'materialData': material_data,
            'centreData': centre_data,
            'exportData': export_data,
        }

    @staticmethod
    def dashboard_stats(now=None):
        """
        Headline counters for the admin dashboard.

        Returns:
            dict: ``users`` (all profiles), ``transactions`` (all
            recycling transactions) and ``newUsers`` (non-admin profiles
            created in the last 7 days).
        """
        since = (now or timezone.now()) - timedelta(days=NEW_USER_WINDOW_DAYS)

        return {
            'users': User.objects.count(),
            'transactions': RecyclingTransaction.objects.count(),
            'newUsers': (
                User.objects
                .exclude(role=Role.ADMIN)
                .filter(created_at__gte=since)
                .count()
            ),
        }
