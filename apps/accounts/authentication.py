"""
Development-only authentication from the ``x-user-id`` header.

During local development front ends may identify the caller with a raw
profile id header. The class is inert unless ``ALLOW_DEV_USER_HEADER``
is enabled, so production deployments only accept JWT or session auth.
"""
import uuid

from django.conf import settings
from rest_framework.authentication import BaseAuthentication
from rest_framework.exceptions import AuthenticationFailed

from .models import User


class DevUserHeaderAuthentication(BaseAuthentication):
    """Authenticate the request as the profile named by ``x-user-id``."""

    header = 'HTTP_X_USER_ID'

    def authenticate(self, request):
        if not getattr(settings, 'ALLOW_DEV_USER_HEADER', False):
            return None

        raw_id = request.META.get(self.header)
        if not raw_id:
            return None

        try:
            user_id = uuid.UUID(raw_id.strip())
        except ValueError:
            raise AuthenticationFailed('Invalid x-user-id header.')

        try:
            user = User.objects.get(id=user_id, is_active=True)
        except User.DoesNotExist:
            raise AuthenticationFailed('Unknown user in x-user-id header.')

        return (user, None)
