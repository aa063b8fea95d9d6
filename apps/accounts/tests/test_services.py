import pytest
from apps.accounts.models import User, Role, PUBLIC_ID_ALPHABET
from apps.accounts.services import (
    register_user,
    authenticate_user,
    lookup_recycler,
    get_recycler,
    update_profile,
    delete_profile,
    UserRegistrationError,
    InvalidCredentialsError,
    InactiveAccountError,
    RecyclerNotFoundError,
    NotARecyclerError,
    SelfDeletionError,
    DuplicateEmailError,
)


@pytest.mark.django_db
class TestPublicId:
    """Member codes are generated on create."""

    def test_public_id_format(self, user):
        assert len(user.public_id) == 6
        assert all(char in PUBLIC_ID_ALPHABET for char in user.public_id)

    def test_public_id_unique(self, db):
        users = [
            User.objects.create_user(email=f'u{i}@example.com', password='x')
            for i in range(20)
        ]
        assert len({u.public_id for u in users}) == 20

    def test_public_id_stable_on_save(self, user):
        code = user.public_id
        user.full_name = 'Changed'
        user.save()
        user.refresh_from_db()
        assert user.public_id == code


@pytest.mark.django_db
class TestRegisterUser:

    def test_creates_recycler(self):
        user = register_user(email='new@example.com', password='SecurePass123!', full_name='New')

        assert user.role == Role.RECYCLER
        assert user.check_password('SecurePass123!')

    def test_duplicate_email_rejected(self, user):
        with pytest.raises(UserRegistrationError):
            register_user(email='TESTUSER@example.com', password='SecurePass123!')


@pytest.mark.django_db
class TestLookupRecycler:
    """Member code lookup used by centre staff."""

    def test_found(self, user):
        assert lookup_recycler(member_code=user.public_id) == user

    def test_trimmed_and_case_insensitive(self, user):
        assert lookup_recycler(member_code=f'  {user.public_id.lower()} ') == user

    def test_unknown_code(self, db):
        with pytest.raises(RecyclerNotFoundError):
            lookup_recycler(member_code='ZZZZZZ')

    def test_blank_code(self, db):
        with pytest.raises(RecyclerNotFoundError):
            lookup_recycler(member_code='   ')

    def test_not_a_recycler(self, staff_user):
        with pytest.raises(NotARecyclerError) as exc_info:
            lookup_recycler(member_code=staff_user.public_id)

        assert exc_info.value.role == Role.CENTRE_STAFF
        assert "not a recycler" in str(exc_info.value)

    def test_get_recycler_rejects_staff(self, staff_user):
        with pytest.raises(NotARecyclerError):
            get_recycler(recycler_id=staff_user.id)

    def test_get_recycler_missing(self, db):
        with pytest.raises(RecyclerNotFoundError):
            get_recycler(recycler_id='00000000-0000-0000-0000-000000000000')


@pytest.mark.django_db
class TestAdminProfileServices:

    def test_update_only_given_fields(self, user):
        updated = update_profile(user_id=user.id, role=Role.CENTRE_STAFF)

        assert updated.role == Role.CENTRE_STAFF
        assert updated.full_name == 'Test User'

    def test_update_email_conflict(self, user, staff_user):
        with pytest.raises(DuplicateEmailError):
            update_profile(user_id=user.id, email=staff_user.email)

    def test_self_deletion_refused(self, admin_user):
        with pytest.raises(SelfDeletionError):
            delete_profile(acting_user=admin_user, user_id=str(admin_user.id))


@pytest.mark.django_db
class TestAuthenticateUser:

    def test_stamps_last_login(self, user):
        assert user.last_login is None

        authenticated = authenticate_user(email='TestUser@Example.com', password='TestPass123!')

        assert authenticated.id == user.id
        user.refresh_from_db()
        assert user.last_login is not None

    def test_unknown_email_and_wrong_password_look_alike(self, user):
        with pytest.raises(InvalidCredentialsError) as unknown:
            authenticate_user(email='nobody@example.com', password='TestPass123!')
        with pytest.raises(InvalidCredentialsError) as wrong:
            authenticate_user(email='testuser@example.com', password='WrongPass123!')

        assert str(unknown.value) == str(wrong.value)

    def test_inactive_reported_only_with_right_password(self, user_inactive):
        with pytest.raises(InvalidCredentialsError):
            authenticate_user(email='inactive@example.com', password='WrongPass123!')

        with pytest.raises(InactiveAccountError):
            authenticate_user(email='inactive@example.com', password='TestPass123!')
