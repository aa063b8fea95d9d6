import pytest
from django.test import override_settings
from django.urls import reverse
from rest_framework import status
from apps.accounts.models import User, Role
from apps.rewards.models import PointsLedgerEntry, LedgerSource


# =============================================================================
# Registration Tests
# =============================================================================

@pytest.mark.django_db
class TestRegistration:
    """Tests for POST /api/auth/register/"""

    def test_register_success(self, api_client):
        """Successfully register a new recycler."""
        url = reverse('accounts:register')
        data = {
            'email': 'newuser@example.com',
            'password': 'SecurePass123!',
            'password_confirm': 'SecurePass123!',
            'full_name': 'New User',
        }
        response = api_client.post(url, data)

        assert response.status_code == status.HTTP_201_CREATED
        assert 'access' in response.data['tokens']
        assert 'refresh' in response.data['tokens']
        assert response.data['user']['role'] == Role.RECYCLER
        assert len(response.data['user']['public_id']) == 6

    def test_register_ignores_role(self, api_client):
        """Self registration always creates a recycler."""
        url = reverse('accounts:register')
        data = {
            'email': 'sneaky@example.com',
            'password': 'SecurePass123!',
            'password_confirm': 'SecurePass123!',
            'role': 'admin',
        }
        response = api_client.post(url, data)

        assert response.status_code == status.HTTP_201_CREATED
        assert User.objects.get(email='sneaky@example.com').role == Role.RECYCLER

    def test_register_duplicate_email(self, api_client, user):
        """Cannot register with existing email."""
        url = reverse('accounts:register')
        data = {
            'email': user.email.upper(),
            'password': 'SecurePass123!',
            'password_confirm': 'SecurePass123!',
        }
        response = api_client.post(url, data)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'error' in response.data

    def test_register_password_mismatch(self, api_client):
        """Registration fails when passwords don't match."""
        url = reverse('accounts:register')
        data = {
            'email': 'mismatch@example.com',
            'password': 'SecurePass123!',
            'password_confirm': 'DifferentPass123!',
        }
        response = api_client.post(url, data)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['error'] == 'Passwords do not match'
        assert 'password_confirm' in response.data['details']

    def test_register_weak_password(self, api_client):
        """Registration fails with weak password."""
        url = reverse('accounts:register')
        data = {
            'email': 'weak@example.com',
            'password': '123',
            'password_confirm': '123',
        }
        response = api_client.post(url, data)

        assert response.status_code == status.HTTP_400_BAD_REQUEST


# =============================================================================
# Login Tests
# =============================================================================

@pytest.mark.django_db
class TestLogin:
    """Tests for POST /api/auth/login/"""

    def test_login_success(self, api_client, user):
        url = reverse('accounts:login')
        response = api_client.post(url, {
            'email': 'testuser@example.com',
            'password': 'TestPass123!',
        })

        assert response.status_code == status.HTTP_200_OK
        assert 'access' in response.data['tokens']
        assert response.data['user']['email'] == user.email

    def test_login_email_case_insensitive(self, api_client, user):
        url = reverse('accounts:login')
        response = api_client.post(url, {
            'email': 'TestUser@Example.com',
            'password': 'TestPass123!',
        })

        assert response.status_code == status.HTTP_200_OK

    def test_login_wrong_password(self, api_client, user):
        url = reverse('accounts:login')
        response = api_client.post(url, {
            'email': 'testuser@example.com',
            'password': 'WrongPass123!',
        })

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert 'error' in response.data

    def test_login_unknown_email(self, api_client, db):
        url = reverse('accounts:login')
        response = api_client.post(url, {
            'email': 'nobody@example.com',
            'password': 'TestPass123!',
        })

        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_login_inactive_user(self, api_client, user_inactive):
        url = reverse('accounts:login')
        response = api_client.post(url, {
            'email': 'inactive@example.com',
            'password': 'TestPass123!',
        })

        assert response.status_code == status.HTTP_403_FORBIDDEN


# =============================================================================
# Me Tests
# =============================================================================

@pytest.mark.django_db
class TestMe:
    """Tests for GET/PATCH /api/me/"""

    def test_me_requires_auth(self, api_client):
        response = api_client.get(reverse('accounts:me'))

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert 'error' in response.data

    def test_me_returns_profile_with_points(self, authenticated_client, user):
        PointsLedgerEntry.objects.create(user=user, change=120, source=LedgerSource.RECYCLING)
        PointsLedgerEntry.objects.create(user=user, change=-50, source=LedgerSource.VOUCHER_REDEEM)

        response = authenticated_client.get(reverse('accounts:me'))

        assert response.status_code == status.HTTP_200_OK
        profile = response.data['user']
        assert profile['email'] == user.email
        assert profile['public_id'] == user.public_id
        assert profile['role'] == Role.RECYCLER
        assert profile['points_total'] == 70

    def test_me_points_zero_without_ledger(self, authenticated_client):
        response = authenticated_client.get(reverse('accounts:me'))

        assert response.data['user']['points_total'] == 0

    def test_update_name(self, authenticated_client, user):
        response = authenticated_client.patch(
            reverse('accounts:me'),
            {'full_name': 'Renamed'},
            format='json'
        )

        assert response.status_code == status.HTTP_200_OK
        user.refresh_from_db()
        assert user.full_name == 'Renamed'

    def test_role_cannot_be_changed(self, authenticated_client, user):
        """Role is not editable through the self-service endpoint."""
        response = authenticated_client.patch(
            reverse('accounts:me'),
            {'full_name': 'Still Recycler', 'role': 'admin'},
            format='json'
        )

        assert response.status_code == status.HTTP_200_OK
        user.refresh_from_db()
        assert user.role == Role.RECYCLER


# =============================================================================
# Dev Header Authentication Tests
# =============================================================================

@pytest.mark.django_db
class TestDevUserHeader:
    """x-user-id identifies the caller only when explicitly enabled."""

    @override_settings(ALLOW_DEV_USER_HEADER=True)
    def test_header_authenticates_when_enabled(self, api_client, user):
        response = api_client.get(reverse('accounts:me'), HTTP_X_USER_ID=str(user.id))

        assert response.status_code == status.HTTP_200_OK
        assert response.data['user']['id'] == str(user.id)

    @override_settings(ALLOW_DEV_USER_HEADER=False)
    def test_header_ignored_when_disabled(self, api_client, user):
        response = api_client.get(reverse('accounts:me'), HTTP_X_USER_ID=str(user.id))

        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    @override_settings(ALLOW_DEV_USER_HEADER=True)
    def test_header_with_invalid_id(self, api_client, db):
        response = api_client.get(reverse('accounts:me'), HTTP_X_USER_ID='not-a-uuid')

        assert response.status_code in (status.HTTP_401_UNAUTHORIZED, status.HTTP_403_FORBIDDEN)


# =============================================================================
# Admin User Management Tests
# =============================================================================

@pytest.mark.django_db
class TestAdminUsers:
    """Tests for /api/admin/users/"""

    def test_list_requires_admin(self, authenticated_client, staff_client):
        url = reverse('accounts:admin-user-list')

        assert authenticated_client.get(url).status_code == status.HTTP_403_FORBIDDEN
        assert staff_client.get(url).status_code == status.HTTP_403_FORBIDDEN

    def test_list_newest_first(self, admin_client, admin_user, user, staff_user):
        response = admin_client.get(reverse('accounts:admin-user-list'))

        assert response.status_code == status.HTTP_200_OK
        emails = [row['email'] for row in response.data]
        assert set(emails) == {admin_user.email, user.email, staff_user.email}
        created = [row['created_at'] for row in response.data]
        assert created == sorted(created, reverse=True)

    def test_list_filter_by_role(self, admin_client, user, staff_user):
        response = admin_client.get(
            reverse('accounts:admin-user-list'),
            {'role': Role.CENTRE_STAFF}
        )

        assert response.status_code == status.HTTP_200_OK
        assert [row['email'] for row in response.data] == [staff_user.email]

    def test_list_invalid_role(self, admin_client):
        response = admin_client.get(reverse('accounts:admin-user-list'), {'role': 'wizard'})

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_create_staff_profile(self, admin_client):
        response = admin_client.post(reverse('accounts:admin-user-list'), {
            'email': 'east@example.com',
            'password': 'EastPass123!',
            'full_name': 'East Centre',
            'role': Role.CENTRE_STAFF,
        }, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        created = User.objects.get(email='east@example.com')
        assert created.role == Role.CENTRE_STAFF
        assert created.check_password('EastPass123!')

    def test_create_duplicate_email(self, admin_client, user):
        response = admin_client.post(reverse('accounts:admin-user-list'), {
            'email': user.email,
            'password': 'Whatever123!',
        }, format='json')

        assert response.status_code == status.HTTP_409_CONFLICT

    def test_update_role(self, admin_client, user):
        url = reverse('accounts:admin-user-detail', kwargs={'pk': user.id})
        response = admin_client.patch(url, {'role': Role.CENTRE_STAFF}, format='json')

        assert response.status_code == status.HTTP_200_OK
        assert response.data['role'] == Role.CENTRE_STAFF
        user.refresh_from_db()
        assert user.role == Role.CENTRE_STAFF

    def test_update_missing_user(self, admin_client):
        url = reverse('accounts:admin-user-detail', kwargs={'pk': '00000000-0000-0000-0000-000000000000'})
        response = admin_client.patch(url, {'full_name': 'Ghost'}, format='json')

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_retrieve_malformed_id(self, admin_client):
        url = reverse('accounts:admin-user-detail', kwargs={'pk': 'not-a-uuid'})
        response = admin_client.get(url)

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_delete_user(self, admin_client, user):
        url = reverse('accounts:admin-user-detail', kwargs={'pk': user.id})
        response = admin_client.delete(url)

        assert response.status_code == status.HTTP_204_NO_CONTENT
        assert not User.objects.filter(id=user.id).exists()

    def test_cannot_delete_self(self, admin_client, admin_user):
        url = reverse('accounts:admin-user-detail', kwargs={'pk': admin_user.id})
        response = admin_client.delete(url)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert User.objects.filter(id=admin_user.id).exists()

    def test_cannot_delete_user_with_history(self, admin_client, user):
        PointsLedgerEntry.objects.create(user=user, change=10, source=LedgerSource.ADMIN_ADJUSTMENT)
        url = reverse('accounts:admin-user-detail', kwargs={'pk': user.id})

        response = admin_client.delete(url)

        assert response.status_code == status.HTTP_409_CONFLICT
        assert User.objects.filter(id=user.id).exists()
