import pytest
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User, Role
from apps.catalog.models import RecyclableItem


def _client_for(user):
    client = APIClient()
    refresh = RefreshToken.for_user(user)
    client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return client


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def recycler(db):
    return User.objects.create_user(
        email='recycler@example.com',
        password='TestPass123!',
        full_name='Rita Recycler',
    )


@pytest.fixture
def admin_user(db):
    return User.objects.create_user(
        email='admin@example.com',
        password='AdminPass123!',
        full_name='Admin',
        role=Role.ADMIN,
    )


@pytest.fixture
def centre(db):
    return User.objects.create_user(
        email='centre@example.com',
        password='TestPass123!',
        full_name='Central Collection Centre',
        role=Role.CENTRE_STAFF,
    )


@pytest.fixture
def recycler_client(recycler):
    return _client_for(recycler)


@pytest.fixture
def admin_client(admin_user):
    return _client_for(admin_user)


@pytest.fixture
def newspaper(db):
    """Seeded weight item (id 3)."""
    return RecyclableItem.objects.get(id=3)


@pytest.fixture
def plastic_bottle(db):
    """Seeded count item (id 1)."""
    return RecyclableItem.objects.get(id=1)
