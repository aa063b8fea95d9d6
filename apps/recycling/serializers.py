from decimal import Decimal

from rest_framework import serializers
from apps.accounts.serializers import RecyclerSummarySerializer
from .models import RecyclingTransaction
from .services import display_quantity


# Two thousand tonnes in grams still fits the stored integer
MAX_BASKET_QUANTITY = Decimal('2000000')


# =============================================================================
# Input Serializers
# =============================================================================

class BasketLineSerializer(serializers.Serializer):
    """One ``{itemId, quantity}`` line as entered by staff (kg for weight items)."""

    itemId = serializers.IntegerField(source='item_id', min_value=1)
    quantity = serializers.DecimalField(
        max_digits=None,
        decimal_places=None,
        min_value=Decimal('0'),
        max_value=MAX_BASKET_QUANTITY
    )


class BasketSerializer(serializers.Serializer):
    """Replacement basket for an existing session."""

    items = BasketLineSerializer(many=True, error_messages={
        'required': 'Items array is required',
        'not_a_list': 'Items array is required',
    })


class CreateSessionSerializer(BasketSerializer):
    """Validate a new session."""

    recyclerId = serializers.UUIDField(source='recycler_id', error_messages={
        'required': 'Recycler ID is required',
        'null': 'Recycler ID is required',
    })


class TransactionFilterSerializer(serializers.Serializer):
    recyclerId = serializers.UUIDField(source='recycler_id', required=False)


# =============================================================================
# Output Serializers
# =============================================================================

class RecyclingTransactionSerializer(serializers.ModelSerializer):
    """Transaction row with the quantity converted back for display."""

    session_id = serializers.UUIDField(read_only=True)
    item_id = serializers.IntegerField(read_only=True)
    item_name = serializers.CharField(source='item.name', read_only=True)
    recycler_id = serializers.UUIDField(read_only=True)
    collection_centre_id = serializers.UUIDField(read_only=True)
    recycler = RecyclerSummarySerializer(read_only=True)
    displayQuantity = serializers.SerializerMethodField(method_name='get_display_quantity')

    class Meta:
        model = RecyclingTransaction
        fields = [
            'id',
            'session_id',
            'item_id',
            'item_name',
            'recycler_id',
            'collection_centre_id',
            'quantity',
            'displayQuantity',
            'recycler',
            'created_at',
        ]
        read_only_fields = fields

    def get_display_quantity(self, obj) -> float:
        return display_quantity(obj.item, obj.quantity)


class CreateSessionResponseSerializer(serializers.Serializer):
    success = serializers.BooleanField()
    sessionId = serializers.UUIDField()
    message = serializers.CharField()


class TransactionListResponseSerializer(serializers.Serializer):
    transactions = RecyclingTransactionSerializer(many=True)
    centreTotals = serializers.DictField(child=serializers.FloatField())
    recyclerTotals = serializers.DictField(child=serializers.FloatField(), allow_null=True)


class LookupRecyclerResponseSerializer(serializers.Serializer):
    profile = RecyclerSummarySerializer()
