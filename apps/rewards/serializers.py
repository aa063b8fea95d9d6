from rest_framework import serializers
from .models import PointsLedgerEntry, Voucher, VoucherRedemption


# =============================================================================
# Output Serializers
# =============================================================================

class VoucherSerializer(serializers.ModelSerializer):

    class Meta:
        model = Voucher
        fields = [
            'id',
            'name',
            'description',
            'points_cost',
            'is_active',
            'created_at',
            'updated_at',
        ]
        read_only_fields = fields


class LedgerEntrySerializer(serializers.ModelSerializer):

    class Meta:
        model = PointsLedgerEntry
        fields = ['id', 'change', 'source', 'reason', 'created_at']
        read_only_fields = fields


class VoucherRedemptionSerializer(serializers.ModelSerializer):
    """Redemption with the voucher name for history listings."""

    user_id = serializers.UUIDField(read_only=True)
    voucher_id = serializers.UUIDField(read_only=True)
    voucher_name = serializers.CharField(source='voucher.name', read_only=True)

    class Meta:
        model = VoucherRedemption
        fields = [
            'id',
            'user_id',
            'voucher_id',
            'voucher_name',
            'points_spent',
            'status',
            'created_at',
        ]
        read_only_fields = fields


# =============================================================================
# Input Serializers
# =============================================================================

class VoucherCreateSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=200)
    description = serializers.CharField(required=False, allow_blank=True, default='')
    points_cost = serializers.IntegerField(min_value=1)
    is_active = serializers.BooleanField(default=True)


class VoucherUpdateSerializer(serializers.Serializer):
    """Admin voucher update. All fields optional."""

    name = serializers.CharField(max_length=200, required=False)
    description = serializers.CharField(required=False, allow_blank=True)
    points_cost = serializers.IntegerField(min_value=1, required=False)
    is_active = serializers.BooleanField(required=False)


class RedeemVoucherSerializer(serializers.Serializer):
    voucherId = serializers.UUIDField(source='voucher_id', error_messages={
        'required': 'Missing voucherId in body.',
        'null': 'Missing voucherId in body.',
    })


class PointsAdjustmentSerializer(serializers.Serializer):
    """Admin credit or debit of a user's points."""

    userId = serializers.UUIDField(source='user_id')
    change = serializers.IntegerField()
    reason = serializers.CharField(max_length=255)

    def validate_change(self, value):
        if value == 0:
            raise serializers.ValidationError("Change must be non-zero.")
        return value


class RedeemResponseSerializer(serializers.Serializer):
    redemption = VoucherRedemptionSerializer()
    newBalance = serializers.IntegerField()


class PointsResponseSerializer(serializers.Serializer):
    totalPoints = serializers.IntegerField()
    entries = LedgerEntrySerializer(many=True)


class PointsAdjustmentResponseSerializer(serializers.Serializer):
    entry = LedgerEntrySerializer()
    newBalance = serializers.IntegerField()
