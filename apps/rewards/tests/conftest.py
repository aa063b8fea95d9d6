import pytest
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User, Role
from apps.rewards.models import Voucher, LedgerSource
from apps.rewards.services import record_ledger_entry


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
        email='alice@example.com',
        password='TestPass123!',
        full_name='Alice Recycler',
    )


@pytest.fixture
def admin_user(db):
    return User.objects.create_user(
        email='admin@example.com',
        password='AdminPass123!',
        role=Role.ADMIN,
    )


@pytest.fixture
def recycler_client(recycler):
    return _client_for(recycler)


@pytest.fixture
def admin_client(admin_user):
    return _client_for(admin_user)


@pytest.fixture
def funded_recycler(recycler):
    """Recycler with 150 points from two recycling credits."""
    record_ledger_entry(user=recycler, change=100, source=LedgerSource.RECYCLING)
    record_ledger_entry(user=recycler, change=50, source=LedgerSource.RECYCLING)
    return recycler


@pytest.fixture
def drink_voucher(db):
    return Voucher.objects.create(
        name='Free Hot Drink',
        description='One hot drink at a partner cafe',
        points_cost=100,
    )


@pytest.fixture
def cinema_voucher(db):
    return Voucher.objects.create(name='Cinema Ticket', points_cost=500)


@pytest.fixture
def retired_voucher(db):
    return Voucher.objects.create(name='Old Tote Bag', points_cost=10, is_active=False)
