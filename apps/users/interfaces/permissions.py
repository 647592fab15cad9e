"""
User-type permissions.
"""
from rest_framework.permissions import BasePermission


class IsProducer(BasePermission):
    """Allow only authenticated producer accounts."""

    message = 'Access denied'

    def has_permission(self, request, view):
        user = request.user
        return bool(user and user.is_authenticated and getattr(user, 'is_producer', False))
