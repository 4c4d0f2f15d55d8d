"""
Root conftest.py — shared fixtures for the entire test suite.

Provides:
  - ``api_client`` fixture returning a DRF ``APIClient``.
  - ``create_user`` factory fixture for creating test users.
  - ``admin_user`` fixture: the built-in administrator (id 1).
  - ``auth_client`` factory returning a client logged in through
    ``POST /api/auth/login`` (session cookie).
"""

from __future__ import annotations

import pytest
from rest_framework.test import APIClient

DEFAULT_PASSWORD = "TestPass123!"


@pytest.fixture()
def api_client() -> APIClient:
    """Unauthenticated DRF test client."""
    return APIClient()


@pytest.fixture()
def create_user(db):
    """
    Factory fixture that creates a user with sensible defaults.

    Usage::

        def test_something(create_user):
            user = create_user(username="alice")
            admin = create_user(username="boss", role="admin")
    """
    from accounts.models import User, UserRole

    _counter = 0

    def _factory(
        *,
        username: str | None = None,
        password: str = DEFAULT_PASSWORD,
        email: str | None = None,
        role: str = UserRole.USER,
        is_active: bool = True,
        **kwargs,
    ) -> User:
        nonlocal _counter
        _counter += 1
        if username is None:
            username = f"testuser{_counter}"
        if email is None:
            email = f"{username}@test.local"

        return User.objects.create_user(
            username=username,
            password=password,
            email=email,
            role=role,
            is_active=is_active,
            **kwargs,
        )

    return _factory


@pytest.fixture()
def admin_user(create_user):
    """The protected administrator account (primary key 1)."""
    return create_user(id=1, username="admin", email="admin@police.gov", role="admin")


@pytest.fixture()
def auth_client():
    """
    Returns a helper that logs ``user`` in over HTTP and hands back the
    client carrying the ``police.sid`` cookie.

    Usage::

        def test_protected(auth_client, create_user):
            client = auth_client(create_user())
            resp = client.get("/api/cases")
            assert resp.status_code == 200
    """

    def _make(user, password: str = DEFAULT_PASSWORD) -> APIClient:
        client = APIClient()
        response = client.post(
            "/api/auth/login",
            {"username": user.username, "password": password},
            format="json",
        )
        assert response.status_code == 200, response.content
        return client

    return _make
