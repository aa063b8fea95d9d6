"""Services for accounts business logic."""

from .exceptions import (
    AccountsServiceError,
    UserRegistrationError,
    InvalidCredentialsError,
    InactiveAccountError,
    UserNotFoundError,
    DuplicateEmailError,
    SelfDeletionError,
    ProfileInUseError,
    RecyclerNotFoundError,
    NotARecyclerError,
)
from .user_registration import register_user
from .user_authentication import authenticate_user
from .account_management import (
    list_profiles,
    get_profile,
    create_profile,
    update_profile,
    delete_profile,
    update_own_profile,
)
from .profile_lookup import lookup_recycler, get_recycler

__all__ = [
    # Exceptions
    'AccountsServiceError',
    'UserRegistrationError',
    'InvalidCredentialsError',
    'InactiveAccountError',
    'UserNotFoundError',
    'DuplicateEmailError',
    'SelfDeletionError',
    'ProfileInUseError',
    'RecyclerNotFoundError',
    'NotARecyclerError',
    # Services
    'register_user',
    'authenticate_user',
    'list_profiles',
    'get_profile',
    'create_profile',
    'update_profile',
    'delete_profile',
    'update_own_profile',
    'lookup_recycler',
    'get_recycler',
]
