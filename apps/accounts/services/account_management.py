"""Account management service - admin CRUD over profiles."""

import logging
from typing import Optional
from uuid import UUID

from django.core.exceptions import ValidationError
from django.db import transaction
from django.db.models import ProtectedError, QuerySet
from django.contrib.auth import get_user_model

from ..models import Role
from .exceptions import (
    UserNotFoundError,
    DuplicateEmailError,
    SelfDeletionError,
    ProfileInUseError,
)

User = get_user_model()

logger = logging.getLogger(__name__)


def list_profiles(*, role: Optional[str] = None) -> QuerySet:
    """
    List profiles, newest first.

    Args:
        role: Optional role filter (admin/centre_staff/recycler)

    Returns:
        QuerySet of User
    """
    queryset = User.objects.all().order_by('-created_at')
    if role:
        queryset = queryset.filter(role=role)
    return queryset


def get_profile(*, user_id: UUID) -> User:
    try:
        return User.objects.get(id=user_id)
    except (User.DoesNotExist, ValidationError):
        raise UserNotFoundError(f"User {user_id} not found")


@transaction.atomic
def create_profile(
    *,
    email: str,
    password: str,
    full_name: str = '',
    role: str = Role.RECYCLER
) -> User:
    """
    Create a profile with any role (admin only).

    Raises:
        DuplicateEmailError: If the email is already used
    """
    if User.objects.filter(email__iexact=email).exists():
        raise DuplicateEmailError("A profile with this email already exists")

    user = User.objects.create_user(
        email=email,
        password=password,
        full_name=full_name,
        role=role,
    )
    logger.info("Admin created %s profile %s", role, user.id)
    return user


@transaction.atomic
def update_profile(
    *,
    user_id: UUID,
    email: Optional[str] = None,
    full_name: Optional[str] = None,
    role: Optional[str] = None
) -> User:
    """
    Update email, name or role of a profile (admin only).

    Only provided fields are changed.

    Raises:
        UserNotFoundError: If the profile doesn't exist
        DuplicateEmailError: If the new email belongs to another profile
    """
    try:
        user = User.objects.select_for_update().get(id=user_id)
    except (User.DoesNotExist, ValidationError):
        raise UserNotFoundError(f"User {user_id} not found")

    update_fields = []

    if email is not None and email.lower() != user.email.lower():
        if User.objects.filter(email__iexact=email).exclude(id=user.id).exists():
            raise DuplicateEmailError("A profile with this email already exists")
        user.email = User.objects.normalize_email(email)
        update_fields.append('email')

    if full_name is not None:
        user.full_name = full_name
        update_fields.append('full_name')

    if role is not None and role != user.role:
        logger.info("Role of %s changed from %s to %s", user.id, user.role, role)
        user.role = role
        update_fields.append('role')

    if update_fields:
        update_fields.append('updated_at')
        user.save(update_fields=update_fields)

    return user


@transaction.atomic
def delete_profile(*, acting_user: User, user_id: UUID) -> None:
    """
    Delete a profile (admin only).

    Profiles that own recycling history, redemptions or ledger entries are
    protected by their foreign keys; deactivate those instead.

    Raises:
        UserNotFoundError: If the profile doesn't exist
        SelfDeletionError: If an admin tries to delete themself
        ProfileInUseError: If the profile is still referenced
    """
    if str(acting_user.id) == str(user_id):
        raise SelfDeletionError("You cannot delete your own profile")

    user = get_profile(user_id=user_id)

    try:
        user.delete()
    except ProtectedError:
        raise ProfileInUseError(
            "Profile has recycling or points history; deactivate it instead"
        )

    logger.info("Admin %s deleted profile %s", acting_user.id, user_id)


def update_own_profile(*, user: User, full_name: str) -> User:
    """Self-service update; only the name is editable, never the role."""
    user.full_name = full_name
    user.save(update_fields=['full_name', 'updated_at'])
    return user
