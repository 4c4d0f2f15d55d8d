"""
Core permission classes.

The system has a single role flag (``admin`` / ``user``).  Every resource
route requires a session; user management additionally requires the
``admin`` role.
"""

from rest_framework.permissions import IsAuthenticated

from accounts.models import UserRole
from accounts.sessions import SessionManager


class IsAdminRole(IsAuthenticated):
    """
    Allow only authenticated users whose role is ``admin``.

    Anonymous callers fail the inherited check (401); authenticated
    non-admins are refused with 403.

    The role is read from the user snapshot cached in the session at
    login, so a role change takes effect at the caller's next login.
    Sessions without a snapshot for the authenticated user fall back to
    the user row.
    """

    message = "Admin access required."

    def has_permission(self, request, view) -> bool:
        if not super().has_permission(request, view):
            return False

        snapshot = SessionManager.cached_user(request._request)
        if snapshot and snapshot.get("id") == str(request.user.pk):
            return snapshot.get("role") == UserRole.ADMIN
        return getattr(request.user, "is_admin", False)
