"""
Session manager.

Wraps Django's session framework, which keeps a keyed session table with
an expiry column (``django_session``).  A session is issued on login,
carries the user's id plus a cached snapshot whose role is read by
``core.permissions.IsAdminRole``, and is destroyed on logout.

The lifetime is fixed from issuance: ``SESSION_SAVE_EVERY_REQUEST`` is
off and the issue time is recorded in the session itself, so activity
never extends it.
"""

from __future__ import annotations

import logging
from typing import Any

from django.conf import settings
from django.contrib.auth import login as django_login
from django.contrib.auth import logout as django_logout
from django.http import HttpRequest
from django.utils import timezone

logger = logging.getLogger(__name__)

SESSION_USER_KEY = "user"
SESSION_ISSUED_AT_KEY = "issued_at"


class SessionManager:
    """Issue, inspect and destroy cookie-keyed server-side sessions."""

    @staticmethod
    def start(request: HttpRequest, user) -> None:
        """
        Log *user* in on *request*.

        ``django.contrib.auth.login`` rotates the session key (preventing
        fixation) and fires ``user_logged_in``, which stamps
        ``last_login``.
        """
        django_login(request, user)
        request.session[SESSION_USER_KEY] = SessionManager.snapshot(user)
        request.session[SESSION_ISSUED_AT_KEY] = timezone.now().timestamp()
        logger.info("Session issued for user %s", user.pk)

    @staticmethod
    def end(request: HttpRequest) -> None:
        user_id = request.session.get("_auth_user_id")
        django_logout(request)
        if user_id is not None:
            logger.info("Session destroyed for user %s", user_id)

    @staticmethod
    def snapshot(user) -> dict[str, Any]:
        return {
            "id": str(user.pk),
            "username": user.username,
            "role": user.role,
        }

    @staticmethod
    def cached_user(request: HttpRequest) -> dict[str, Any] | None:
        return request.session.get(SESSION_USER_KEY)

    @staticmethod
    def is_expired(request: HttpRequest) -> bool:
        issued_at = request.session.get(SESSION_ISSUED_AT_KEY)
        if issued_at is None:
            return False
        age = timezone.now().timestamp() - float(issued_at)
        return age > settings.SESSION_COOKIE_AGE
