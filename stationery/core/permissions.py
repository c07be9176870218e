"""Role-based permissions for the lecturer and staff dashboards"""
import logging

from rest_framework.permissions import BasePermission

logger = logging.getLogger('stationery.core')


class IsStaffRole(BasePermission):
    """Academic support staff (or superusers) only"""
    message = 'Only academic support staff can perform this action.'

    def has_permission(self, request, view):
        user = request.user
        allowed = bool(user and user.is_authenticated and user.is_staff_role)
        if user and user.is_authenticated and not allowed:
            logger.warning(f"User {user.email} ({user.role}) denied access to {request.method} {request.path}")
        return allowed
