"""
Accounts app models.

Defines a custom User model that extends Django's ``AbstractUser`` with a
single role flag (``admin`` / ``user``) and the officer profile fields
used across the records system, plus the single-use tokens issued by the
forgot-password flow.
"""

from datetime import timedelta

from django.conf import settings
from django.contrib.auth.models import AbstractUser
from django.db import models
from django.utils import timezone

from core.models import TimeStampedModel


class UserRole(models.TextChoices):
    """The only authorization distinction the system makes."""

    ADMIN = "admin", "Administrator"
    USER = "user", "User"


class User(TimeStampedModel, AbstractUser):
    """
    Custom user model for the police records system.

    Registration requires at minimum: username, email and password.
    ``username`` and ``email`` are both unique; login accepts either one
    together with the password.  Passwords are always stored as salted
    hashes via ``set_password``.

    ``last_login`` is maintained by Django on every successful login.
    """

    email = models.EmailField(
        unique=True,
        verbose_name="Email Address",
    )
    role = models.CharField(
        max_length=10,
        choices=UserRole.choices,
        default=UserRole.USER,
        db_index=True,
        verbose_name="Role",
    )

    # ── Officer profile ──────────────────────────────────────────────
    badge_number = models.CharField(
        max_length=50,
        blank=True,
        default="",
        verbose_name="Badge Number",
    )
    department = models.CharField(
        max_length=100,
        blank=True,
        default="",
        verbose_name="Department",
    )
    position = models.CharField(
        max_length=100,
        blank=True,
        default="",
        verbose_name="Position",
    )
    phone = models.CharField(
        max_length=30,
        blank=True,
        default="",
        verbose_name="Phone",
    )

    # Fields required when creating a superuser via CLI
    REQUIRED_FIELDS = ["email"]

    class Meta:
        verbose_name = "User"
        verbose_name_plural = "Users"
        ordering = ["id"]

    def __str__(self):
        return f"{self.username} ({self.get_role_display()})"

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN


def _reset_token_expiry():
    return timezone.now() + timedelta(seconds=settings.PASSWORD_RESET_TOKEN_TTL)


class PasswordResetToken(TimeStampedModel):
    """
    Single-use token issued by ``POST /auth/forgot-password``.

    Deleted as soon as it is redeemed; expired tokens are rejected.
    """

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="password_reset_tokens",
        verbose_name="User",
    )
    token = models.CharField(
        max_length=64,
        unique=True,
        verbose_name="Token",
    )
    expires_at = models.DateTimeField(
        default=_reset_token_expiry,
        verbose_name="Expires At",
    )

    class Meta:
        verbose_name = "Password Reset Token"
        verbose_name_plural = "Password Reset Tokens"

    def __str__(self):
        return f"Reset token for {self.user_id}"

    @property
    def is_expired(self) -> bool:
        return timezone.now() >= self.expires_at
