"""
Accounts app serializers.

Contains all Request and Response serializers for the accounts API.
Serializers handle field definitions, read/write constraints, and
basic validation.  **No business logic** lives here — all domain
rules are delegated to ``services.py``.

The ``password`` column is never part of any response serializer.
"""

from __future__ import annotations

from typing import Any

from django.contrib.auth import get_user_model
from rest_framework import serializers

from core.serializers import TimeStampedSerializer

from .models import UserRole

User = get_user_model()

PASSWORD_MIN_LENGTH = 8


# ═══════════════════════════════════════════════════════════════════
#  Authentication Serializers
# ═══════════════════════════════════════════════════════════════════


class LoginRequestSerializer(serializers.Serializer):
    """
    Accepts login credentials.

    ``username`` may hold either the account's username or its e-mail
    address.
    """

    username = serializers.CharField(
        max_length=254,
        help_text="Username or e-mail address.",
    )
    password = serializers.CharField(
        write_only=True,
        style={"input_type": "password"},
        help_text="User account password.",
    )


class RegisterRequestSerializer(serializers.Serializer):
    """
    Validates new-user registration data.

    Required fields: username, email, password, confirmPassword.
    New accounts always receive the ``user`` role; only an administrator
    can grant ``admin``.
    """

    username = serializers.RegexField(
        r"^[\w.@+-]+\Z",
        max_length=150,
        error_messages={"invalid": "Username may contain only letters, digits and @/./+/-/_."},
    )
    email = serializers.EmailField()
    password = serializers.CharField(
        write_only=True,
        min_length=PASSWORD_MIN_LENGTH,
        style={"input_type": "password"},
        help_text=f"Minimum {PASSWORD_MIN_LENGTH} characters.",
    )
    confirmPassword = serializers.CharField(
        write_only=True,
        required=False,
        style={"input_type": "password"},
        help_text="Must match 'password' when supplied.",
    )
    firstName = serializers.CharField(source="first_name", max_length=150, required=False, allow_blank=True)
    lastName = serializers.CharField(source="last_name", max_length=150, required=False, allow_blank=True)
    badgeNumber = serializers.CharField(source="badge_number", max_length=50, required=False, allow_blank=True)
    department = serializers.CharField(max_length=100, required=False, allow_blank=True)
    position = serializers.CharField(max_length=100, required=False, allow_blank=True)
    phone = serializers.CharField(max_length=30, required=False, allow_blank=True)

    def validate(self, attrs: dict[str, Any]) -> dict[str, Any]:
        confirm = attrs.pop("confirmPassword", None)
        if confirm is not None and confirm != attrs["password"]:
            raise serializers.ValidationError(
                {"confirmPassword": "Passwords do not match."}
            )
        return attrs


class ForgotPasswordSerializer(serializers.Serializer):
    username = serializers.CharField(max_length=254)


class ResetPasswordSerializer(serializers.Serializer):
    token = serializers.CharField(max_length=64)
    password = serializers.CharField(
        write_only=True,
        min_length=PASSWORD_MIN_LENGTH,
        style={"input_type": "password"},
    )


# ═══════════════════════════════════════════════════════════════════
#  User Serializers
# ═══════════════════════════════════════════════════════════════════


class UserSerializer(TimeStampedSerializer):
    """
    External representation of a user.

    Used on every path that returns a user: login, registration,
    ``/auth/me``, profile update and the admin user list.
    """

    firstName = serializers.CharField(source="first_name", read_only=True)
    lastName = serializers.CharField(source="last_name", read_only=True)
    isActive = serializers.BooleanField(source="is_active", read_only=True)
    lastLogin = serializers.DateTimeField(source="last_login", read_only=True)
    badgeNumber = serializers.CharField(source="badge_number", read_only=True)

    class Meta:
        model = User
        fields = [
            *TimeStampedSerializer.COMMON_FIELDS,
            "username",
            "email",
            "firstName",
            "lastName",
            "role",
            "isActive",
            "lastLogin",
            "badgeNumber",
            "department",
            "position",
            "phone",
        ]
        read_only_fields = fields


class ProfileUpdateSerializer(serializers.Serializer):
    """
    Fields a user may change on their own profile via ``PUT /profile``.

    Role, activation state, username and password are not editable here.
    """

    email = serializers.EmailField(required=False)
    firstName = serializers.CharField(source="first_name", max_length=150, required=False, allow_blank=True)
    lastName = serializers.CharField(source="last_name", max_length=150, required=False, allow_blank=True)
    badgeNumber = serializers.CharField(source="badge_number", max_length=50, required=False, allow_blank=True)
    department = serializers.CharField(max_length=100, required=False, allow_blank=True)
    position = serializers.CharField(max_length=100, required=False, allow_blank=True)
    phone = serializers.CharField(max_length=30, required=False, allow_blank=True)


class UserFilterSerializer(serializers.Serializer):
    """Query parameters accepted by ``GET /users``."""

    role = serializers.ChoiceField(choices=UserRole.choices, required=False)
    isActive = serializers.BooleanField(source="is_active", required=False, allow_null=True, default=None)
    search = serializers.CharField(required=False, max_length=255, allow_blank=False)
