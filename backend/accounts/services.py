"""
Accounts Service Layer.

This module is the **single source of truth** for all business logic
within the ``accounts`` app.  Views must remain *thin*: they validate
input through serializers, call a service method, and return the
result wrapped in a DRF ``Response``.

Architecture
------------
- ``AuthenticationService``    — username-or-email login, logout.
- ``UserRegistrationService``  — new-user creation flow.
- ``PasswordResetService``     — forgot-password / reset-password.
- ``UserService``              — admin user listing and deletion.
- ``ProfileService``           — the session user's own profile.
"""

from __future__ import annotations

import logging
import secrets
from typing import Any

from django.conf import settings
from django.contrib.auth import authenticate as django_authenticate
from django.contrib.auth import get_user_model
from django.db import IntegrityError, transaction
from django.db.models import Q, QuerySet
from django.http import HttpRequest

from core.constants import PROTECTED_USER_ID
from core.domain.exceptions import (
    AuthenticationRequired,
    Conflict,
    DomainError,
    PermissionDenied,
)
from core.domain.store import ResourceStore

from .models import PasswordResetToken, UserRole
from .sessions import SessionManager

User = get_user_model()
logger = logging.getLogger(__name__)

RESET_TOKEN_BYTES = 32
FORGOT_PASSWORD_MESSAGE = "If the username exists, a reset token has been generated."


def _lookup(identifier: str) -> Q:
    return Q(username=identifier) | Q(email__iexact=identifier)


# ═══════════════════════════════════════════════════════════════════
#  Authentication Service
# ═══════════════════════════════════════════════════════════════════


class AuthenticationService:
    """
    Verifies credentials and opens / closes the server-side session.
    """

    @staticmethod
    def login(request: HttpRequest, username: str, password: str) -> User:
        """
        Authenticate ``username`` (or e-mail) + ``password`` and start a
        session on ``request``.

        Raises
        ------
        AuthenticationRequired
            Unknown identifier or wrong password (401).  The two cases
            are indistinguishable to the caller.
        PermissionDenied
            The credentials are correct but the account is deactivated
            (403).
        """
        user = django_authenticate(request, username=username, password=password)

        if user is None:
            inactive = User.objects.filter(_lookup(username), is_active=False).first()
            if inactive is not None and inactive.check_password(password):
                logger.warning("Login refused for deactivated user %s", inactive.pk)
                raise PermissionDenied("Account is deactivated.")
            logger.warning("Failed login attempt for %r", username)
            raise AuthenticationRequired("Invalid credentials.")

        SessionManager.start(request, user)
        logger.info("User %s logged in", user.pk)
        return user

    @staticmethod
    def logout(request: HttpRequest) -> None:
        SessionManager.end(request)


# ═══════════════════════════════════════════════════════════════════
#  Registration Service
# ═══════════════════════════════════════════════════════════════════


class UserRegistrationService:
    """Creates accounts from ``POST /auth/register``."""

    @staticmethod
    def register_user(validated_data: dict[str, Any]) -> User:
        """
        Create a new user with the ``user`` role.

        The password is hashed by ``create_user``; registration does not
        open a session.

        Raises
        ------
        core.domain.exceptions.Conflict
            If the username or e-mail is already taken.
        """
        data = dict(validated_data)
        password = data.pop("password")
        data.pop("role", None)

        conflicts = []
        if User.objects.filter(username=data["username"]).exists():
            conflicts.append("username")
        if User.objects.filter(email__iexact=data["email"]).exists():
            conflicts.append("email")
        if conflicts:
            raise Conflict(
                f"The following field(s) already exist: {', '.join(conflicts)}."
            )

        try:
            with transaction.atomic():
                user = User.objects.create_user(
                    password=password,
                    role=UserRole.USER,
                    **data,
                )
        except IntegrityError as exc:
            raise Conflict("Username or email already exists.") from exc

        logger.info("Registered user %s (%s)", user.pk, user.username)
        return user


# ═══════════════════════════════════════════════════════════════════
#  Password Reset Service
# ═══════════════════════════════════════════════════════════════════


class PasswordResetService:
    """
    Two-step password recovery.

    ``request_reset`` answers the same message whether or not the
    identifier matches an account.  The token itself is only returned in
    the response body while ``PASSWORD_RESET_EXPOSE_TOKEN`` is on (no
    mail transport is configured); for unknown identifiers a random token
    that was never stored is returned so the two answers look alike.
    """

    @staticmethod
    def request_reset(username: str) -> dict[str, str]:
        token = secrets.token_hex(RESET_TOKEN_BYTES)
        user = User.objects.filter(_lookup(username), is_active=True).first()

        if user is not None:
            with transaction.atomic():
                user.password_reset_tokens.all().delete()
                PasswordResetToken.objects.create(user=user, token=token)
            logger.info("Password reset token issued for user %s", user.pk)
        else:
            logger.info("Password reset requested for unknown identifier %r", username)

        payload = {"message": FORGOT_PASSWORD_MESSAGE}
        if settings.PASSWORD_RESET_EXPOSE_TOKEN:
            payload["token"] = token
        return payload

    @staticmethod
    def reset_password(token: str, password: str) -> None:
        """
        Redeem ``token`` and set ``password`` on its owner.

        Raises ``DomainError`` (400) for unknown or expired tokens.  The
        token is consumed on success.
        """
        try:
            reset = PasswordResetToken.objects.select_related("user").get(token=token)
        except PasswordResetToken.DoesNotExist:
            raise DomainError("Invalid or expired reset token.")

        if reset.is_expired:
            reset.delete()
            raise DomainError("Invalid or expired reset token.")

        user = reset.user
        with transaction.atomic():
            user.set_password(password)
            user.save(update_fields=["password"])
            user.password_reset_tokens.all().delete()
        logger.info("Password reset completed for user %s", user.pk)


# ═══════════════════════════════════════════════════════════════════
#  User Management
# ═══════════════════════════════════════════════════════════════════


class UserService(ResourceStore):
    """Admin-only listing, lookup and deletion of accounts."""

    model = User
    label = "User"

    @classmethod
    def filter_queryset(cls, qs: QuerySet, filters: dict[str, Any]) -> QuerySet:
        role = filters.get("role")
        if role:
            qs = qs.filter(role=role)

        is_active = filters.get("is_active")
        if is_active is not None:
            qs = qs.filter(is_active=is_active)

        search = filters.get("search")
        if search:
            qs = qs.filter(
                Q(username__icontains=search)
                | Q(email__icontains=search)
                | Q(first_name__icontains=search)
                | Q(last_name__icontains=search)
                | Q(badge_number__icontains=search)
            )
        return qs

    @classmethod
    def delete(cls, pk: Any) -> None:
        if str(pk) == str(PROTECTED_USER_ID):
            raise DomainError("Cannot delete admin account.")
        super().delete(pk)


class ProfileService:
    """Self-service profile edits for the session user."""

    @staticmethod
    def update_profile(user: User, validated_data: dict[str, Any]) -> User:
        email = validated_data.get("email")
        if email and User.objects.filter(email__iexact=email).exclude(pk=user.pk).exists():
            raise Conflict("The following field(s) already exist: email.")
        return UserService.update(user, validated_data)
