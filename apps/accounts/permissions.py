"""
Role-based permission classes.

Roles live on the profile (``User.role``). Admin endpoints require the
admin role; staff endpoints require the centre_staff role.

Usage:
    @api_view(['POST'])
    @permission_classes([IsAuthenticated, IsCentreStaff])
    def create_session(request):
        ...
"""
from rest_framework.permissions import BasePermission

from .models import Role


class IsAdminRole(BasePermission):
    """Allow only profiles with the admin role."""

    message = 'Admin privileges are required.'

    def has_permission(self, request, view):
        user = request.user
        return bool(user and user.is_authenticated and user.role == Role.ADMIN)


class IsCentreStaff(BasePermission):
    """Allow only collection centre staff."""

    message = 'Only collection centre staff can perform this action.'

    def has_permission(self, request, view):
        user = request.user
        return bool(user and user.is_authenticated and user.role == Role.CENTRE_STAFF)
