"""
Custom authentication backend for username-or-email login.

Allows users to authenticate using either their ``username`` or their
``email`` together with their ``password``.  Credentials are verified
exclusively through Django's salted-hash ``check_password``; there is no
alternative comparison path for any account.

This backend is registered in ``settings.AUTHENTICATION_BACKENDS`` so
that Django's ``authenticate()`` call dispatches to it.
"""

from __future__ import annotations

from django.contrib.auth import get_user_model
from django.contrib.auth.backends import ModelBackend
from django.db.models import Q

User = get_user_model()


class UsernameOrEmailBackend(ModelBackend):
    """
    Authenticate against ``username`` or ``email``.

    When ``django.contrib.auth.authenticate(username=..., password=...)``
    is called, this backend resolves the user by matching the supplied
    value against both unique fields.
    """

    def authenticate(self, request, username=None, password=None, **kwargs):
        """
        Resolve the user by *username* (or e-mail) and verify *password*.

        Returns
        -------
        User | None
            The authenticated user, or ``None`` on failure.
        """
        if username is None or password is None:
            return None

        try:
            user = User.objects.get(Q(username=username) | Q(email__iexact=username))
        except User.DoesNotExist:
            # Run the default password hasher to mitigate timing attacks
            User().set_password(password)
            return None
        except User.MultipleObjectsReturned:
            return None

        if user.check_password(password) and self.user_can_authenticate(user):
            return user
        return None
