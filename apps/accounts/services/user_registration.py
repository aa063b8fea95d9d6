"""User registration service."""

import logging

from django.db import transaction, IntegrityError
from django.contrib.auth import get_user_model

from ..models import Role
from .exceptions import UserRegistrationError

User = get_user_model()

logger = logging.getLogger(__name__)


@transaction.atomic
def register_user(
    *,
    email: str,
    password: str,
    full_name: str = ""
) -> User:
    """
    Register a new recycler profile.

    The profile receives a fresh member code (``public_id``). Self
    registration always yields the recycler role; staff and admin profiles
    are created through the admin user management endpoints.

    Args:
        email: User's email address
        password: User's password (will be hashed)
        full_name: Optional full name

    Returns:
        Created User instance

    Raises:
        UserRegistrationError: If the email is taken or the insert fails
    """
    if User.objects.filter(email__iexact=email).exists():
        raise UserRegistrationError("A profile with this email already exists")

    try:
        user = User.objects.create_user(
            email=email,
            password=password,
            full_name=full_name,
            role=Role.RECYCLER,
        )
    except IntegrityError as e:
        raise UserRegistrationError(f"Registration failed: {str(e)}")

    logger.info("Registered recycler %s with member code %s", user.id, user.public_id)
    return user
