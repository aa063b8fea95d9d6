"""
Domain exceptions for analytics app.

Exception Hierarchy:
    AnalyticsServiceError (base)
    └── InvalidRangeError

Usage:
    from apps.analytics.exceptions import InvalidRangeError

    if range_key not in RANGE_DAYS:
        raise InvalidRangeError(f"Invalid range: {range_key}")
"""


class AnalyticsServiceError(Exception):
    """
    Base exception for all analytics service errors.

    Views can catch it to turn any analytics failure into a 400:

        try:
            data = AnalyticsQueries.transaction_overview(range_key)
        except AnalyticsServiceError as e:
            return Response({'error': str(e)}, status=400)
    """

    pass


class InvalidRangeError(AnalyticsServiceError):
    """
    Raised when the reporting range is not one of 7d, 30d, all.

    Example:
        raise InvalidRangeError("Invalid range: '90d'. Valid options: 7d, 30d, all")
    """

    pass
