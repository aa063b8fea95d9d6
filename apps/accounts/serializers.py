from rest_framework import serializers
from django.contrib.auth.password_validation import validate_password
from .models import User, Role


# =============================================================================
# Output Serializers
# =============================================================================

class ProfileSerializer(serializers.ModelSerializer):
    """Basic profile serializer."""

    class Meta:
        model = User
        fields = [
            'id',
            'email',
            'full_name',
            'role',
            'public_id',
            'created_at',
        ]
        read_only_fields = fields


class MeSerializer(serializers.ModelSerializer):
    """Profile of the caller with the ledger-derived point total."""

    points_total = serializers.SerializerMethodField()

    class Meta:
        model = User
        fields = [
            'id',
            'email',
            'full_name',
            'role',
            'public_id',
            'points_total',
            'created_at',
        ]
        read_only_fields = fields

    def get_points_total(self, obj) -> int:
        from apps.rewards.services import get_balance
        return get_balance(user_id=obj.id)


class RecyclerSummarySerializer(serializers.ModelSerializer):
    """What centre staff see after a member code lookup."""

    class Meta:
        model = User
        fields = ['id', 'public_id', 'full_name', 'role']
        read_only_fields = fields


class AdminUserSerializer(serializers.ModelSerializer):
    """Profile as listed in the admin user management screen."""

    last_sign_in_at = serializers.DateTimeField(source='last_login', read_only=True)

    class Meta:
        model = User
        fields = [
            'id',
            'email',
            'full_name',
            'role',
            'public_id',
            'is_active',
            'created_at',
            'updated_at',
            'last_sign_in_at',
        ]
        read_only_fields = fields


# =============================================================================
# Input Serializers
# =============================================================================

class UserRegistrationSerializer(serializers.Serializer):
    """Validate self registration input."""

    email = serializers.EmailField()
    password = serializers.CharField(
        write_only=True,
        validators=[validate_password],
        style={'input_type': 'password'}
    )
    password_confirm = serializers.CharField(
        write_only=True,
        style={'input_type': 'password'}
    )
    full_name = serializers.CharField(max_length=150, required=False, allow_blank=True, default='')

    def validate(self, attrs):
        """Validate password confirmation."""
        if attrs['password'] != attrs['password_confirm']:
            raise serializers.ValidationError({
                'password_confirm': 'Passwords do not match'
            })
        return attrs


class UserLoginSerializer(serializers.Serializer):
    """Serializer for user login."""

    email = serializers.EmailField(required=True)
    password = serializers.CharField(
        required=True,
        write_only=True,
        style={'input_type': 'password'}
    )


class ProfileUpdateSerializer(serializers.Serializer):
    """Self-service profile update. Role is deliberately absent."""

    full_name = serializers.CharField(max_length=150, allow_blank=True)


class MemberCodeSerializer(serializers.Serializer):
    """Validate a member code lookup."""

    memberCode = serializers.CharField(
        source='member_code',
        max_length=32,
        trim_whitespace=True,
        error_messages={
            'required': 'Member code is required',
            'blank': 'Member code is required',
        }
    )


class AdminUserFilterSerializer(serializers.Serializer):
    """Query parameters for the admin user list."""

    role = serializers.ChoiceField(choices=Role.choices, required=False)


class AdminUserCreateSerializer(serializers.Serializer):
    """Admin creation of a profile with any role."""

    email = serializers.EmailField()
    password = serializers.CharField(
        write_only=True,
        min_length=8,
        style={'input_type': 'password'}
    )
    full_name = serializers.CharField(max_length=150, required=False, allow_blank=True, default='')
    role = serializers.ChoiceField(choices=Role.choices, default=Role.RECYCLER)


class AdminUserUpdateSerializer(serializers.Serializer):
    """Admin update of email, name and role. All fields optional."""

    email = serializers.EmailField(required=False)
    full_name = serializers.CharField(max_length=150, required=False, allow_blank=True)
    role = serializers.ChoiceField(choices=Role.choices, required=False)
