from rest_framework import status, viewsets, serializers
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from rest_framework_simplejwt.tokens import RefreshToken
from drf_spectacular.utils import extend_schema, extend_schema_view, OpenApiParameter
from drf_spectacular.types import OpenApiTypes
from .serializers import (
    ProfileSerializer,
    MeSerializer,
    AdminUserSerializer,
    UserRegistrationSerializer,
    UserLoginSerializer,
    ProfileUpdateSerializer,
    AdminUserFilterSerializer,
    AdminUserCreateSerializer,
    AdminUserUpdateSerializer,
)
from .permissions import IsAdminRole
from .services import (
    register_user,
    authenticate_user,
    list_profiles,
    get_profile,
    create_profile,
    update_profile,
    delete_profile,
    update_own_profile,
    UserRegistrationError,
    InvalidCredentialsError,
    InactiveAccountError,
    UserNotFoundError,
    DuplicateEmailError,
    SelfDeletionError,
    ProfileInUseError,
)


# Response serializers for API documentation
class TokensResponseSerializer(serializers.Serializer):
    refresh = serializers.CharField()
    access = serializers.CharField()


class AuthResponseSerializer(serializers.Serializer):
    message = serializers.CharField()
    user = ProfileSerializer()
    tokens = TokensResponseSerializer()


class MeResponseSerializer(serializers.Serializer):
    user = MeSerializer()


class ErrorResponseSerializer(serializers.Serializer):
    error = serializers.CharField()


def _tokens_for(user):
    refresh = RefreshToken.for_user(user)
    return {
        'refresh': str(refresh),
        'access': str(refresh.access_token),
    }


@extend_schema(
    request=UserRegistrationSerializer,
    responses={
        201: AuthResponseSerializer,
        400: ErrorResponseSerializer,
    },
    description="Register a recycler profile and receive JWT tokens.",
    tags=['auth'],
)
@api_view(['POST'])
@permission_classes([AllowAny])
def register(request):
    """Register a new recycler."""
    serializer = UserRegistrationSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    data = serializer.validated_data.copy()
    data.pop('password_confirm', None)

    try:
        user = register_user(**data)
    except UserRegistrationError as e:
        return Response(
            {'error': str(e)},
            status=status.HTTP_400_BAD_REQUEST
        )

    return Response({
        'message': 'Registration successful.',
        'user': ProfileSerializer(user).data,
        'tokens': _tokens_for(user),
    }, status=status.HTTP_201_CREATED)


@extend_schema(
    request=UserLoginSerializer,
    responses={
        200: AuthResponseSerializer,
        400: ErrorResponseSerializer,
        401: ErrorResponseSerializer,
        403: ErrorResponseSerializer,
    },
    description="Authenticate with email and password to receive JWT tokens.",
    tags=['auth'],
)
@api_view(['POST'])
@permission_classes([AllowAny])
def login(request):
    """Login with email and password."""
    serializer = UserLoginSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    try:
        user = authenticate_user(
            email=serializer.validated_data['email'],
            password=serializer.validated_data['password'],
        )
    except InvalidCredentialsError as e:
        return Response({'error': str(e)}, status=status.HTTP_401_UNAUTHORIZED)
    except InactiveAccountError as e:
        return Response({'error': str(e)}, status=status.HTTP_403_FORBIDDEN)

    return Response({
        'message': 'Login successful.',
        'user': ProfileSerializer(user).data,
        'tokens': _tokens_for(user),
    })


@extend_schema(
    methods=['GET'],
    responses={200: MeResponseSerializer},
    description="Get the caller's profile with the ledger-derived point total.",
    tags=['profile'],
)
@extend_schema(
    methods=['PATCH'],
    request=ProfileUpdateSerializer,
    responses={200: MeResponseSerializer, 400: ErrorResponseSerializer},
    description="Update the caller's name. Role cannot be changed here.",
    tags=['profile'],
)
@api_view(['GET', 'PATCH'])
@permission_classes([IsAuthenticated])
def me(request):
    """Current profile."""
    user = request.user

    if request.method == 'PATCH':
        serializer = ProfileUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        user = update_own_profile(user=user, full_name=serializer.validated_data['full_name'])

    return Response({'user': MeSerializer(user).data})


@extend_schema_view(
    list=extend_schema(
        parameters=[OpenApiParameter('role', OpenApiTypes.STR, description='Filter by role')],
        responses={200: AdminUserSerializer(many=True)},
        tags=['admin'],
    ),
    retrieve=extend_schema(responses={200: AdminUserSerializer}, tags=['admin']),
    create=extend_schema(
        request=AdminUserCreateSerializer,
        responses={201: AdminUserSerializer, 409: ErrorResponseSerializer},
        tags=['admin'],
    ),
    update=extend_schema(
        request=AdminUserUpdateSerializer,
        responses={200: AdminUserSerializer, 404: ErrorResponseSerializer},
        tags=['admin'],
    ),
    partial_update=extend_schema(
        request=AdminUserUpdateSerializer,
        responses={200: AdminUserSerializer, 404: ErrorResponseSerializer},
        tags=['admin'],
    ),
    destroy=extend_schema(
        responses={204: None, 400: ErrorResponseSerializer, 409: ErrorResponseSerializer},
        tags=['admin'],
    ),
)
class AdminUserViewSet(viewsets.ViewSet):
    """
    Admin user management.

    list: All profiles, newest first (optional ?role=)
    create: Create a profile with any role
    retrieve: Get one profile
    update / partial_update: Change email, name or role
    destroy: Delete a profile without history
    """

    permission_classes = [IsAuthenticated, IsAdminRole]

    def list(self, request):
        filter_serializer = AdminUserFilterSerializer(data=request.query_params)
        filter_serializer.is_valid(raise_exception=True)

        profiles = list_profiles(role=filter_serializer.validated_data.get('role'))
        return Response(AdminUserSerializer(profiles, many=True).data)

    def retrieve(self, request, pk=None):
        try:
            profile = get_profile(user_id=pk)
        except UserNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        return Response(AdminUserSerializer(profile).data)

    def create(self, request):
        serializer = AdminUserCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            profile = create_profile(**serializer.validated_data)
        except DuplicateEmailError as e:
            return Response({'error': str(e)}, status=status.HTTP_409_CONFLICT)

        return Response(AdminUserSerializer(profile).data, status=status.HTTP_201_CREATED)

    def update(self, request, pk=None):
        serializer = AdminUserUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            profile = update_profile(user_id=pk, **serializer.validated_data)
        except UserNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except DuplicateEmailError as e:
            return Response({'error': str(e)}, status=status.HTTP_409_CONFLICT)

        return Response(AdminUserSerializer(profile).data)

    def partial_update(self, request, pk=None):
        return self.update(request, pk=pk)

    def destroy(self, request, pk=None):
        try:
            delete_profile(acting_user=request.user, user_id=pk)
        except UserNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except SelfDeletionError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)
        except ProfileInUseError as e:
            return Response({'error': str(e)}, status=status.HTTP_409_CONFLICT)

        return Response(status=status.HTTP_204_NO_CONTENT)
