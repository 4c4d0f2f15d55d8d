"""
Session-cookie authentication for the API.

DRF's stock ``SessionAuthentication`` answers 403 to anonymous callers
because it does not emit a ``WWW-Authenticate`` challenge.  The API
contract distinguishes "not logged in" (401) from "logged in but not
allowed" (403), so this subclass supplies a challenge and additionally
enforces the fixed session lifetime recorded at login.
"""

from __future__ import annotations

from rest_framework.authentication import SessionAuthentication

from accounts.sessions import SessionManager


class CookieSessionAuthentication(SessionAuthentication):
    """
    Authenticate from the server-side session referenced by the
    ``police.sid`` cookie.

    CSRF is enforced for authenticated unsafe requests, exactly as in the
    parent class.
    """

    def authenticate(self, request):
        if SessionManager.is_expired(request._request):
            SessionManager.end(request._request)
            return None
        return super().authenticate(request)

    def authenticate_header(self, request) -> str:
        return 'Session realm="api"'
