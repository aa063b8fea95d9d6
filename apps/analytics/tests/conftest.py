import pytest
from datetime import timedelta
from django.utils import timezone
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User, Role
from apps.catalog.models import RecyclableItem
from apps.recycling.models import RecyclingSession, RecyclingTransaction


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


# =============================================================================
# Users
# =============================================================================

@pytest.fixture
def analytics_admin(db):
    return User.objects.create_user(
        email='analytics_admin@example.com',
        password='AdminPass123!',
        full_name='Analytics Admin',
        role=Role.ADMIN,
    )


@pytest.fixture
def north_centre(db):
    return User.objects.create_user(
        email='north@example.com',
        password='TestPass123!',
        full_name='North Centre',
        role=Role.CENTRE_STAFF,
    )


@pytest.fixture
def south_centre(db):
    """Centre without a name; analytics falls back to its email."""
    return User.objects.create_user(
        email='south@example.com',
        password='TestPass123!',
        role=Role.CENTRE_STAFF,
    )


@pytest.fixture
def analytics_recycler(db):
    return User.objects.create_user(
        email='recycler@example.com',
        password='TestPass123!',
        full_name='Analytics Recycler',
    )


@pytest.fixture
def admin_client(analytics_admin):
    client = APIClient()
    refresh = RefreshToken.for_user(analytics_admin)
    client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return client


@pytest.fixture
def staff_client(north_centre):
    client = APIClient()
    refresh = RefreshToken.for_user(north_centre)
    client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return client


# =============================================================================
# Transactions
# =============================================================================

@pytest.fixture
def record_transaction(analytics_recycler):
    """
    Factory writing one transaction ``days_ago`` days in the past.

    Quantities are stored values (grams for weight items).
    """
    def _record(*, centre, item_id, quantity, days_ago=0):
        session = RecyclingSession.objects.create(
            recycler=analytics_recycler,
            collection_centre=centre,
        )
        tx = RecyclingTransaction.objects.create(
            session=session,
            recycler=analytics_recycler,
            collection_centre=centre,
            item=RecyclableItem.objects.get(id=item_id),
            quantity=quantity,
        )
        created_at = timezone.now() - timedelta(days=days_ago)
        RecyclingTransaction.objects.filter(id=tx.id).update(created_at=created_at)
        tx.refresh_from_db()
        return tx

    return _record


@pytest.fixture
def analytics_transactions(record_transaction, north_centre, south_centre):
    """
    Transactions spread over time:
        1 day ago:   North, 3 plastic bottles; North, 2500 g newspaper
        3 days ago:  South, 1200 g cardboard
        10 days ago: North, 10 glass
        40 days ago: South, 7 aluminium tins
    """
    return [
        record_transaction(centre=north_centre, item_id=1, quantity=3, days_ago=1),
        record_transaction(centre=north_centre, item_id=3, quantity=2500, days_ago=1),
        record_transaction(centre=south_centre, item_id=5, quantity=1200, days_ago=3),
        record_transaction(centre=north_centre, item_id=4, quantity=10, days_ago=10),
        record_transaction(centre=south_centre, item_id=2, quantity=7, days_ago=40),
    ]
