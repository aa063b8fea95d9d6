"""Password login for every role."""

from django.db import transaction
from django.contrib.auth import get_user_model
from django.utils import timezone

from .exceptions import InvalidCredentialsError, InactiveAccountError

User = get_user_model()


@transaction.atomic
def authenticate_user(*, email: str, password: str) -> User:
    """
    Check a login attempt and stamp ``last_login``.

    The email is matched case-insensitively. Unknown emails and wrong
    passwords produce the same error, so callers cannot tell which
    addresses have a profile. A deactivated profile is only reported once
    the password is right; the login view answers it with 403, the other
    failures with 401.

    ``last_login`` is shown as ``last_sign_in_at`` in the admin user list.

    Raises:
        InvalidCredentialsError: Unknown email or wrong password
        InactiveAccountError: Profile deactivated by an admin
    """
    try:
        user = User.objects.select_for_update().get(email__iexact=email)
    except User.DoesNotExist:
        raise InvalidCredentialsError("Invalid email or password")

    if not user.check_password(password):
        raise InvalidCredentialsError("Invalid email or password")

    if not user.is_active:
        raise InactiveAccountError("Account is deactivated")

    user.last_login = timezone.now()
    user.save(update_fields=['last_login'])

    return user
