import pytest
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User, Role
from apps.catalog.models import RecyclableItem
from apps.recycling.services import create_session


def _client_for(user):
    client = APIClient()
    refresh = RefreshToken.for_user(user)
    client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return client


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def centre(db):
    """Collection centre that records sessions."""
    return User.objects.create_user(
        email='north@example.com',
        password='TestPass123!',
        full_name='North Centre',
        role=Role.CENTRE_STAFF,
    )


@pytest.fixture
def other_centre(db):
    return User.objects.create_user(
        email='south@example.com',
        password='TestPass123!',
        full_name='South Centre',
        role=Role.CENTRE_STAFF,
    )


@pytest.fixture
def recycler(db):
    return User.objects.create_user(
        email='alice@example.com',
        password='TestPass123!',
        full_name='Alice Recycler',
    )


@pytest.fixture
def other_recycler(db):
    return User.objects.create_user(
        email='bob@example.com',
        password='TestPass123!',
        full_name='Bob Recycler',
    )


@pytest.fixture
def centre_client(centre):
    return _client_for(centre)


@pytest.fixture
def other_centre_client(other_centre):
    return _client_for(other_centre)


@pytest.fixture
def recycler_client(recycler):
    return _client_for(recycler)


@pytest.fixture
def newspaper(db):
    """Weight item, entered in kg."""
    return RecyclableItem.objects.get(id=3)


@pytest.fixture
def plastic_bottle(db):
    """Count item."""
    return RecyclableItem.objects.get(id=1)


@pytest.fixture
def session(centre, recycler, newspaper, plastic_bottle):
    """A session recorded by ``centre``: 2.5 kg newspaper and 4 bottles."""
    return create_session(
        centre=centre,
        recycler_id=recycler.id,
        lines=[
            {'item_id': newspaper.id, 'quantity': '2.5'},
            {'item_id': plastic_bottle.id, 'quantity': 4},
        ],
    )
