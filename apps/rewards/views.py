from rest_framework import status, viewsets, serializers
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, extend_schema_view, inline_serializer
from apps.accounts.permissions import IsAdminRole
from apps.accounts.services import UserNotFoundError
from .serializers import (
    VoucherSerializer,
    LedgerEntrySerializer,
    VoucherRedemptionSerializer,
    VoucherCreateSerializer,
    VoucherUpdateSerializer,
    RedeemVoucherSerializer,
    PointsAdjustmentSerializer,
    RedeemResponseSerializer,
    PointsResponseSerializer,
    PointsAdjustmentResponseSerializer,
)
from .services import (
    get_balance,
    list_entries,
    adjust_points as adjust_points_service,
    redeem_voucher,
    list_redemptions,
    list_active_vouchers,
    list_vouchers,
    get_voucher,
    create_voucher,
    update_voucher,
    delete_voucher,
    InvalidLedgerChangeError,
    VoucherNotFoundError,
    VoucherUnavailableError,
    InsufficientPointsError,
    VoucherInUseError,
)


class ErrorResponseSerializer(serializers.Serializer):
    error = serializers.CharField()


@extend_schema(
    responses={200: inline_serializer(
        name='VoucherListResponse',
        fields={'vouchers': VoucherSerializer(many=True)},
    )},
    description="Active vouchers ordered by points cost.",
    tags=['vouchers'],
)
@api_view(['GET'])
@permission_classes([AllowAny])
def vouchers(request):
    """List redeemable vouchers."""
    return Response({'vouchers': VoucherSerializer(list_active_vouchers(), many=True).data})


@extend_schema(
    request=RedeemVoucherSerializer,
    responses={
        201: RedeemResponseSerializer,
        400: ErrorResponseSerializer,
        401: ErrorResponseSerializer,
    },
    description="Redeem a voucher with the caller's points.",
    tags=['vouchers'],
)
@api_view(['POST'])
@permission_classes([IsAuthenticated])
def redeem(request):
    """Spend points on a voucher."""
    serializer = RedeemVoucherSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    try:
        redemption, new_balance = redeem_voucher(
            user=request.user,
            voucher_id=serializer.validated_data['voucher_id'],
        )
    except VoucherUnavailableError as e:
        return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)
    except InsufficientPointsError as e:
        return Response(
            {'error': str(e), 'currentPoints': e.current_points},
            status=status.HTTP_400_BAD_REQUEST
        )

    return Response({
        'redemption': VoucherRedemptionSerializer(redemption).data,
        'newBalance': new_balance,
    }, status=status.HTTP_201_CREATED)


@extend_schema(
    responses={200: PointsResponseSerializer},
    description="Caller's point balance and ledger entries, newest first.",
    tags=['points'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def my_points(request):
    """Ledger-derived balance of the caller."""
    return Response({
        'totalPoints': get_balance(user_id=request.user.id),
        'entries': LedgerEntrySerializer(list_entries(user_id=request.user.id), many=True).data,
    })


@extend_schema(
    responses={200: inline_serializer(
        name='RedemptionListResponse',
        fields={'redemptions': VoucherRedemptionSerializer(many=True)},
    )},
    description="Caller's voucher redemptions, newest first.",
    tags=['vouchers'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def my_redemptions(request):
    redemptions = list_redemptions(user_id=request.user.id)
    return Response({'redemptions': VoucherRedemptionSerializer(redemptions, many=True).data})


@extend_schema(
    request=PointsAdjustmentSerializer,
    responses={
        201: PointsAdjustmentResponseSerializer,
        400: ErrorResponseSerializer,
        404: ErrorResponseSerializer,
    },
    description="Credit or debit a user's points. Debits cannot overdraw.",
    tags=['admin'],
)
@api_view(['POST'])
@permission_classes([IsAuthenticated, IsAdminRole])
def adjust_points(request):
    """Admin points adjustment."""
    serializer = PointsAdjustmentSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    try:
        entry, new_balance = adjust_points_service(
            acting_user=request.user,
            **serializer.validated_data
        )
    except UserNotFoundError as e:
        return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
    except InvalidLedgerChangeError as e:
        return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

    return Response({
        'entry': LedgerEntrySerializer(entry).data,
        'newBalance': new_balance,
    }, status=status.HTTP_201_CREATED)


@extend_schema_view(
    list=extend_schema(responses={200: VoucherSerializer(many=True)}, tags=['admin']),
    retrieve=extend_schema(responses={200: VoucherSerializer}, tags=['admin']),
    create=extend_schema(
        request=VoucherCreateSerializer,
        responses={201: VoucherSerializer},
        tags=['admin'],
    ),
    update=extend_schema(
        request=VoucherUpdateSerializer,
        responses={200: VoucherSerializer, 404: ErrorResponseSerializer},
        tags=['admin'],
    ),
    partial_update=extend_schema(
        request=VoucherUpdateSerializer,
        responses={200: VoucherSerializer, 404: ErrorResponseSerializer},
        tags=['admin'],
    ),
    destroy=extend_schema(
        responses={204: None, 404: ErrorResponseSerializer, 409: ErrorResponseSerializer},
        tags=['admin'],
    ),
)
class VoucherViewSet(viewsets.ViewSet):
    """
    Admin voucher management.

    list: All vouchers including inactive ones
    create: Add a voucher
    retrieve: Get one voucher
    update / partial_update: Change name, description, cost or active flag
    destroy: Delete a voucher that was never redeemed
    """

    permission_classes = [IsAuthenticated, IsAdminRole]

    def list(self, request):
        return Response(VoucherSerializer(list_vouchers(), many=True).data)

    def retrieve(self, request, pk=None):
        try:
            voucher = get_voucher(voucher_id=pk)
        except VoucherNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        return Response(VoucherSerializer(voucher).data)

    def create(self, request):
        serializer = VoucherCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        voucher = create_voucher(**serializer.validated_data)
        return Response(VoucherSerializer(voucher).data, status=status.HTTP_201_CREATED)

    def update(self, request, pk=None):
        serializer = VoucherUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            voucher = update_voucher(voucher_id=pk, data=serializer.validated_data)
        except VoucherNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)

        return Response(VoucherSerializer(voucher).data)

    def partial_update(self, request, pk=None):
        return self.update(request, pk=pk)

    def destroy(self, request, pk=None):
        try:
            delete_voucher(voucher_id=pk)
        except VoucherNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except VoucherInUseError as e:
            return Response({'error': str(e)}, status=status.HTTP_409_CONFLICT)

        return Response(status=status.HTTP_204_NO_CONTENT)
