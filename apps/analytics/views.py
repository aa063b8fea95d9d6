from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework import status
from drf_spectacular.utils import extend_schema, OpenApiParameter
from drf_spectacular.types import OpenApiTypes
from apps.accounts.permissions import IsAdminRole
from .analytics import AnalyticsQueries
from .serializers import (
    AnalyticsRangeSerializer,
    AnalyticsOverviewSerializer,
    DashboardStatsSerializer,
    ErrorSerializer,
)
from .exceptions import AnalyticsServiceError


@extend_schema(
    parameters=[
        OpenApiParameter('range', OpenApiTypes.STR, description="'7d', '30d' or 'all'", default='7d'),
    ],
    responses={
        200: AnalyticsOverviewSerializer,
        400: ErrorSerializer,
        403: ErrorSerializer,
    },
    description="Transaction trend, material breakdown, top centres and export rows.",
    tags=['admin'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated, IsAdminRole])
def transaction_overview(request):
    """Aggregated recycling analytics - thin HTTP handler."""
    query_serializer = AnalyticsRangeSerializer(data=request.query_params)
    query_serializer.is_valid(raise_exception=True)

    try:
        data = AnalyticsQueries.transaction_overview(
            range_key=query_serializer.validated_data['range']
        )
    except AnalyticsServiceError as e:
        return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

    return Response(data)


@extend_schema(
    responses={
        200: DashboardStatsSerializer,
        403: ErrorSerializer,
    },
    description="User, transaction and new user counters.",
    tags=['admin'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated, IsAdminRole])
def dashboard_stats(request):
    return Response(AnalyticsQueries.dashboard_stats())
