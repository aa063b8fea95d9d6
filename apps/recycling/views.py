from rest_framework import status, serializers
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, OpenApiParameter
from drf_spectacular.types import OpenApiTypes
from apps.accounts.permissions import IsCentreStaff
from apps.accounts.serializers import MemberCodeSerializer, RecyclerSummarySerializer
from apps.accounts.services import (
    lookup_recycler as lookup_recycler_service,
    RecyclerNotFoundError,
    NotARecyclerError,
)
from apps.catalog.services import UnknownItemError
from .serializers import (
    BasketSerializer,
    CreateSessionSerializer,
    TransactionFilterSerializer,
    RecyclingTransactionSerializer,
    CreateSessionResponseSerializer,
    TransactionListResponseSerializer,
    LookupRecyclerResponseSerializer,
)
from .services import (
    create_session as create_session_service,
    update_session,
    delete_session,
    list_centre_transactions,
    EmptyBasketError,
    QuantityTooLargeError,
    SessionNotFoundError,
    SessionOwnershipError,
    SessionRecordingError,
)


class ErrorResponseSerializer(serializers.Serializer):
    error = serializers.CharField()


class SuccessResponseSerializer(serializers.Serializer):
    success = serializers.BooleanField()


def _service_error_response(exc):
    """Map recycling and lookup service errors to responses."""
    if isinstance(exc, RecyclerNotFoundError):
        return Response({'error': str(exc)}, status=status.HTTP_404_NOT_FOUND)
    if isinstance(exc, NotARecyclerError):
        return Response({'error': str(exc), 'role': exc.role}, status=status.HTTP_400_BAD_REQUEST)
    if isinstance(exc, SessionNotFoundError):
        return Response({'error': str(exc)}, status=status.HTTP_404_NOT_FOUND)
    if isinstance(exc, SessionOwnershipError):
        return Response({'error': str(exc)}, status=status.HTTP_403_FORBIDDEN)
    if isinstance(exc, SessionRecordingError):
        return Response({'error': str(exc)}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)
    return Response({'error': str(exc)}, status=status.HTTP_400_BAD_REQUEST)


@extend_schema(
    request=CreateSessionSerializer,
    responses={
        201: CreateSessionResponseSerializer,
        400: ErrorResponseSerializer,
        401: ErrorResponseSerializer,
        403: ErrorResponseSerializer,
        404: ErrorResponseSerializer,
        500: ErrorResponseSerializer,
    },
    description="Record a recycling session. Weight items are entered in kg.",
    tags=['staff'],
)
@api_view(['POST'])
@permission_classes([IsAuthenticated, IsCentreStaff])
def create_session(request):
    """Record a recycler's visit for the calling centre."""
    serializer = CreateSessionSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    try:
        session = create_session_service(
            centre=request.user,
            recycler_id=serializer.validated_data['recycler_id'],
            lines=serializer.validated_data['items'],
        )
    except (
        RecyclerNotFoundError,
        NotARecyclerError,
        UnknownItemError,
        EmptyBasketError,
        QuantityTooLargeError,
        SessionRecordingError,
    ) as e:
        return _service_error_response(e)

    return Response({
        'success': True,
        'sessionId': session.id,
        'message': 'Recycling session created successfully',
    }, status=status.HTTP_201_CREATED)


@extend_schema(
    parameters=[
        OpenApiParameter('recyclerId', OpenApiTypes.UUID, description='Only this recycler'),
    ],
    responses={200: TransactionListResponseSerializer},
    description="Transactions recorded by the calling centre, newest first.",
    tags=['staff'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated, IsCentreStaff])
def centre_transactions(request):
    """List the calling centre's transactions with per-item totals."""
    filter_serializer = TransactionFilterSerializer(data=request.query_params)
    filter_serializer.is_valid(raise_exception=True)

    result = list_centre_transactions(
        centre=request.user,
        recycler_id=filter_serializer.validated_data.get('recycler_id'),
    )

    return Response({
        'transactions': RecyclingTransactionSerializer(result['transactions'], many=True).data,
        'centreTotals': result['centre_totals'],
        'recyclerTotals': result['recycler_totals'],
    })


@extend_schema(
    methods=['PATCH'],
    request=BasketSerializer,
    responses={
        200: SuccessResponseSerializer,
        400: ErrorResponseSerializer,
        403: ErrorResponseSerializer,
        404: ErrorResponseSerializer,
        500: ErrorResponseSerializer,
    },
    description="Replace all items of a session recorded by the calling centre.",
    tags=['staff'],
)
@extend_schema(
    methods=['DELETE'],
    responses={
        200: SuccessResponseSerializer,
        403: ErrorResponseSerializer,
        404: ErrorResponseSerializer,
    },
    description="Delete a session and its transactions.",
    tags=['staff'],
)
@api_view(['PATCH', 'DELETE'])
@permission_classes([IsAuthenticated, IsCentreStaff])
def session_detail(request, session_id):
    """Edit or delete one session."""
    if request.method == 'DELETE':
        try:
            delete_session(centre=request.user, session_id=session_id)
        except (SessionNotFoundError, SessionOwnershipError) as e:
            return _service_error_response(e)
        return Response({'success': True})

    serializer = BasketSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    try:
        update_session(
            centre=request.user,
            session_id=session_id,
            lines=serializer.validated_data['items'],
        )
    except (
        SessionNotFoundError,
        SessionOwnershipError,
        UnknownItemError,
        EmptyBasketError,
        QuantityTooLargeError,
        SessionRecordingError,
    ) as e:
        return _service_error_response(e)

    return Response({'success': True})


@extend_schema(
    request=MemberCodeSerializer,
    responses={
        200: LookupRecyclerResponseSerializer,
        400: ErrorResponseSerializer,
        404: ErrorResponseSerializer,
    },
    description="Resolve a recycler's member code.",
    tags=['staff'],
)
@api_view(['POST'])
@permission_classes([IsAuthenticated, IsCentreStaff])
def lookup_recycler(request):
    """Find a recycler by member code."""
    serializer = MemberCodeSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    try:
        profile = lookup_recycler_service(member_code=serializer.validated_data['member_code'])
    except (RecyclerNotFoundError, NotARecyclerError) as e:
        return _service_error_response(e)

    return Response({'profile': RecyclerSummarySerializer(profile).data})
