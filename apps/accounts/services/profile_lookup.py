"""Resolve recycler member codes to profiles."""

from django.contrib.auth import get_user_model
from django.core.exceptions import ValidationError

from ..models import Role
from .exceptions import RecyclerNotFoundError, NotARecyclerError

User = get_user_model()


def lookup_recycler(*, member_code: str) -> User:
    """
    Find the recycler a member code belongs to.

    The code is trimmed and matched case-insensitively.

    Raises:
        RecyclerNotFoundError: If no profile has this code
        NotARecyclerError: If the profile exists but is not a recycler
    """
    code = (member_code or '').strip()
    if not code:
        raise RecyclerNotFoundError("Member code not found")

    try:
        profile = User.objects.get(public_id__iexact=code)
    except (User.DoesNotExist, ValidationError):
        raise RecyclerNotFoundError("Member code not found")

    if profile.role != Role.RECYCLER:
        raise NotARecyclerError(
            f"This member code belongs to a user with role '{profile.role or 'unknown'}', not a recycler.",
            role=profile.role
        )

    return profile


def get_recycler(*, recycler_id) -> User:
    """
    Fetch a recycler profile by id.

    Raises:
        RecyclerNotFoundError: If the profile doesn't exist
        NotARecyclerError: If the profile is not a recycler
    """
    try:
        profile = User.objects.get(id=recycler_id)
    except (User.DoesNotExist, ValidationError):
        raise RecyclerNotFoundError("Recycler not found")

    if profile.role != Role.RECYCLER:
        raise NotARecyclerError(
            f"User {recycler_id} has role '{profile.role}', not a recycler.",
            role=profile.role
        )

    return profile
