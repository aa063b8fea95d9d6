from rest_framework import serializers
from .models import RecyclableItem, MeasurementType


class RecyclableItemSerializer(serializers.ModelSerializer):
    """Catalog item as shown to staff and recyclers."""

    is_weight_based = serializers.BooleanField(read_only=True)

    class Meta:
        model = RecyclableItem
        fields = [
            'id',
            'name',
            'measurement_type',
            'is_weight_based',
            'icon_url',
            'is_active',
            'created_at',
            'updated_at',
        ]
        read_only_fields = fields


class RecyclableItemCreateSerializer(serializers.Serializer):
    """Validate admin item creation."""

    name = serializers.CharField(max_length=100)
    measurement_type = serializers.ChoiceField(
        choices=MeasurementType.choices,
        default=MeasurementType.COUNT
    )
    icon_url = serializers.URLField(max_length=500, required=False, allow_blank=True, default='')
    is_active = serializers.BooleanField(default=True)

    def validate_name(self, value):
        if not value.strip():
            raise serializers.ValidationError("Item name cannot be empty.")
        return value.strip()


class RecyclableItemUpdateSerializer(RecyclableItemCreateSerializer):
    """Admin item update. All fields optional."""

    name = serializers.CharField(max_length=100, required=False)
    measurement_type = serializers.ChoiceField(choices=MeasurementType.choices, required=False)
    icon_url = serializers.URLField(max_length=500, required=False, allow_blank=True)
    is_active = serializers.BooleanField(required=False)
