"""
Serializers for analytics app.

Input Serializers:
    AnalyticsRangeSerializer - Validates the ``range`` query parameter

Response Serializers:
    AnalyticsOverviewSerializer - Trend, material, centre and export data
    DashboardStatsSerializer - Headline counters
"""

from rest_framework import serializers

from .analytics import RANGE_DAYS, DEFAULT_RANGE


# =============================================================================
# Input Serializers (Query Parameter Validation)
# =============================================================================

class AnalyticsRangeSerializer(serializers.Serializer):
    """
    Validate the reporting window.

    Query Parameters:
        range (str): ``7d`` (default), ``30d`` or ``all``
    """

    range = serializers.ChoiceField(
        choices=list(RANGE_DAYS),
        default=DEFAULT_RANGE,
        error_messages={
            'invalid_choice': 'Invalid range: "{input}". Valid options: 7d, 30d, all',
        }
    )


# =============================================================================
# Response Serializers (API Documentation)
# =============================================================================

class TrendPointSerializer(serializers.Serializer):
    name = serializers.CharField(help_text='Calendar day (YYYY-MM-DD)')
    volume = serializers.IntegerField(help_text='Sum of stored quantities')
    transactions = serializers.IntegerField()


class NamedValueSerializer(serializers.Serializer):
    name = serializers.CharField()
    value = serializers.IntegerField()


class ExportRowSerializer(serializers.Serializer):
    id = serializers.UUIDField()
    date = serializers.DateTimeField()
    material = serializers.CharField()
    centre = serializers.CharField()
    recycler = serializers.CharField(help_text='Recycler member code')
    quantity = serializers.IntegerField(help_text='Stored quantity (grams or units)')
    displayQuantity = serializers.FloatField(help_text='kg for weight items, units otherwise')


class AnalyticsOverviewSerializer(serializers.Serializer):
    trendData = TrendPointSerializer(many=True)
    materialData = NamedValueSerializer(many=True)
    centreData = NamedValueSerializer(many=True)
    exportData = ExportRowSerializer(many=True)


class DashboardStatsSerializer(serializers.Serializer):
    users = serializers.IntegerField()
    transactions = serializers.IntegerField()
    newUsers = serializers.IntegerField()


class ErrorSerializer(serializers.Serializer):
    error = serializers.CharField()
