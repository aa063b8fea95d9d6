import pytest
from django.urls import reverse
from rest_framework import status
from apps.rewards.models import PointsLedgerEntry, Voucher, VoucherRedemption
from apps.rewards.services import get_balance, redeem_voucher


@pytest.mark.django_db
class TestVoucherList:
    """Tests for GET /api/vouchers/"""

    def test_public_active_vouchers(self, api_client, drink_voucher, cinema_voucher, retired_voucher):
        response = api_client.get(reverse('rewards:voucher-list'))

        assert response.status_code == status.HTTP_200_OK
        names = [v['name'] for v in response.data['vouchers']]
        assert names == ['Free Hot Drink', 'Cinema Ticket']


@pytest.mark.django_db
class TestRedeem:
    """Tests for POST /api/vouchers/redeem/"""

    def test_redeem(self, recycler_client, funded_recycler, drink_voucher):
        response = recycler_client.post(
            reverse('rewards:redeem'),
            {'voucherId': str(drink_voucher.id)},
            format='json'
        )

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['newBalance'] == 50
        assert response.data['redemption']['voucher_name'] == 'Free Hot Drink'
        assert response.data['redemption']['points_spent'] == 100
        assert VoucherRedemption.objects.filter(user=funded_recycler).count() == 1

    def test_not_enough_points(self, recycler_client, funded_recycler, cinema_voucher):
        response = recycler_client.post(
            reverse('rewards:redeem'),
            {'voucherId': str(cinema_voucher.id)},
            format='json'
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['error'] == 'Not enough points.'
        assert response.data['currentPoints'] == 150
        assert VoucherRedemption.objects.count() == 0
        assert PointsLedgerEntry.objects.filter(user=funded_recycler).count() == 2

    def test_inactive_voucher(self, recycler_client, funded_recycler, retired_voucher):
        response = recycler_client.post(
            reverse('rewards:redeem'),
            {'voucherId': str(retired_voucher.id)},
            format='json'
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['error'] == 'Voucher not found or inactive.'

    def test_missing_voucher_id(self, recycler_client):
        response = recycler_client.post(reverse('rewards:redeem'), {}, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['error'] == 'Missing voucherId in body.'

    def test_requires_auth(self, api_client, drink_voucher):
        response = api_client.post(
            reverse('rewards:redeem'),
            {'voucherId': str(drink_voucher.id)},
            format='json'
        )

        assert response.status_code == status.HTTP_401_UNAUTHORIZED


@pytest.mark.django_db
class TestMyPointsAndRedemptions:

    def test_points(self, recycler_client, funded_recycler, drink_voucher):
        redeem_voucher(user=funded_recycler, voucher_id=drink_voucher.id)

        response = recycler_client.get(reverse('rewards:my-points'))

        assert response.status_code == status.HTTP_200_OK
        assert response.data['totalPoints'] == 50
        assert len(response.data['entries']) == 3
        assert sum(e['change'] for e in response.data['entries']) == 50

    def test_points_without_history(self, recycler_client):
        response = recycler_client.get(reverse('rewards:my-points'))

        assert response.data == {'totalPoints': 0, 'entries': []}

    def test_redemptions(self, recycler_client, funded_recycler, drink_voucher):
        redeem_voucher(user=funded_recycler, voucher_id=drink_voucher.id)

        response = recycler_client.get(reverse('rewards:my-redemptions'))

        assert len(response.data['redemptions']) == 1
        assert response.data['redemptions'][0]['voucher_id'] == str(drink_voucher.id)


@pytest.mark.django_db
class TestAdjustPoints:
    """Tests for POST /api/admin/points/adjust/"""

    def test_credit(self, admin_client, recycler):
        response = admin_client.post(reverse('rewards:adjust-points'), {
            'userId': str(recycler.id),
            'change': 25,
            'reason': 'Welcome bonus',
        }, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['newBalance'] == 25
        assert response.data['entry']['source'] == 'admin_adjustment'
        assert get_balance(user_id=recycler.id) == 25

    def test_overdraw(self, admin_client, funded_recycler):
        response = admin_client.post(reverse('rewards:adjust-points'), {
            'userId': str(funded_recycler.id),
            'change': -200,
            'reason': 'Correction',
        }, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert get_balance(user_id=funded_recycler.id) == 150

    def test_zero_change(self, admin_client, recycler):
        response = admin_client.post(reverse('rewards:adjust-points'), {
            'userId': str(recycler.id),
            'change': 0,
            'reason': 'Nothing',
        }, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'change' in response.data['details']

    def test_unknown_user(self, admin_client):
        response = admin_client.post(reverse('rewards:adjust-points'), {
            'userId': '00000000-0000-0000-0000-000000000000',
            'change': 5,
            'reason': 'Bonus',
        }, format='json')

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_non_admin_forbidden(self, recycler_client, recycler):
        response = recycler_client.post(reverse('rewards:adjust-points'), {
            'userId': str(recycler.id),
            'change': 1000,
            'reason': 'Free points',
        }, format='json')

        assert response.status_code == status.HTTP_403_FORBIDDEN
        assert get_balance(user_id=recycler.id) == 0


@pytest.mark.django_db
class TestAdminVouchers:
    """Tests for /api/admin/vouchers/"""

    def test_list_includes_inactive(self, admin_client, drink_voucher, retired_voucher):
        response = admin_client.get(reverse('rewards:admin-voucher-list'))

        assert response.status_code == status.HTTP_200_OK
        assert len(response.data) == 2

    def test_create(self, admin_client):
        response = admin_client.post(reverse('rewards:admin-voucher-list'), {
            'name': 'Bus Pass',
            'points_cost': 250,
        }, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert Voucher.objects.get(name='Bus Pass').is_active is True

    def test_zero_cost_rejected(self, admin_client):
        response = admin_client.post(reverse('rewards:admin-voucher-list'), {
            'name': 'Free Lunch',
            'points_cost': 0,
        }, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_deactivate(self, admin_client, drink_voucher):
        response = admin_client.patch(
            reverse('rewards:admin-voucher-detail', kwargs={'pk': drink_voucher.id}),
            {'is_active': False},
            format='json'
        )

        assert response.status_code == status.HTTP_200_OK
        drink_voucher.refresh_from_db()
        assert drink_voucher.is_active is False

    def test_delete_unused(self, admin_client, cinema_voucher):
        response = admin_client.delete(
            reverse('rewards:admin-voucher-detail', kwargs={'pk': cinema_voucher.id})
        )

        assert response.status_code == status.HTTP_204_NO_CONTENT
        assert not Voucher.objects.filter(id=cinema_voucher.id).exists()

    def test_delete_redeemed(self, admin_client, funded_recycler, drink_voucher):
        redeem_voucher(user=funded_recycler, voucher_id=drink_voucher.id)

        response = admin_client.delete(
            reverse('rewards:admin-voucher-detail', kwargs={'pk': drink_voucher.id})
        )

        assert response.status_code == status.HTTP_409_CONFLICT
        assert Voucher.objects.filter(id=drink_voucher.id).exists()

    def test_non_admin_forbidden(self, recycler_client):
        response = recycler_client.get(reverse('rewards:admin-voucher-list'))

        assert response.status_code == status.HTTP_403_FORBIDDEN
