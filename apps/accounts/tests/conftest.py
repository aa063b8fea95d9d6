import pytest
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User, Role


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def user(db):
    """Create and return a recycler."""
    return User.objects.create_user(
        email='testuser@example.com',
        password='TestPass123!',
        full_name='Test User',
    )


@pytest.fixture
def user_inactive(db):
    """Create and return an inactive recycler."""
    return User.objects.create_user(
        email='inactive@example.com',
        password='TestPass123!',
        full_name='Inactive User',
        is_active=False,
    )


@pytest.fixture
def staff_user(db):
    """Create and return a collection centre profile."""
    return User.objects.create_user(
        email='centre@example.com',
        password='TestPass123!',
        full_name='Central Collection Centre',
        role=Role.CENTRE_STAFF,
    )


@pytest.fixture
def admin_user(db):
    """Create and return an admin profile."""
    return User.objects.create_user(
        email='admin@example.com',
        password='AdminPass123!',
        full_name='Admin',
        role=Role.ADMIN,
    )


def _client_for(user):
    client = APIClient()
    refresh = RefreshToken.for_user(user)
    client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return client


@pytest.fixture
def authenticated_client(user):
    """Return an API client authenticated as the recycler."""
    return _client_for(user)


@pytest.fixture
def staff_client(staff_user):
    """Return an API client authenticated as centre staff."""
    return _client_for(staff_user)


@pytest.fixture
def admin_client(admin_user):
    """Return an API client authenticated as an admin."""
    return _client_for(admin_user)
