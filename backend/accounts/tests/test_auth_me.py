"""
Integration tests — current user and own profile.

Endpoints under test:  GET /api/auth/me   (named URL: accounts:me)
                       PUT /api/profile   (named URL: accounts:profile)
"""

from __future__ import annotations

from django.contrib.auth import get_user_model
from django.test import TestCase, override_settings
from django.urls import reverse
from django.utils.dateparse import parse_datetime
from rest_framework import status
from rest_framework.test import APIClient

from accounts.sessions import SESSION_ISSUED_AT_KEY, SESSION_USER_KEY

User = get_user_model()

_PASSWORD = "Str0ng!Pass99"


class TestCurrentUser(TestCase):

    @classmethod
    def setUpTestData(cls):
        cls.admin = User.objects.create_user(
            id=1, username="admin", email="admin@police.gov",
            password="AdminPass123!", role="admin",
        )
        cls.user = User.objects.create_user(
            username="me_user", email="me_user@police.gov", password=_PASSWORD,
        )

    def setUp(self):
        self.client = APIClient()

    def _login(self):
        response = self.client.post(
            reverse("accounts:login"),
            {"username": "me_user", "password": _PASSWORD},
            format="json",
        )
        self.assertEqual(response.status_code, status.HTTP_200_OK)

    def test_me_without_session_returns_401(self):
        response = self.client.get(reverse("accounts:me"))
        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)
        self.assertIn("message", response.json())

    def test_me_returns_session_user_not_admin(self):
        self._login()
        response = self.client.get(reverse("accounts:me"))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        user = response.json()["user"]
        self.assertEqual(user["id"], str(self.user.pk))
        self.assertEqual(user["username"], "me_user")
        self.assertNotIn("password", user)

    def test_session_caches_user_snapshot(self):
        self._login()
        session = self.client.session

        self.assertEqual(
            session[SESSION_USER_KEY],
            {"id": str(self.user.pk), "username": "me_user", "role": "user"},
        )
        self.assertIn(SESSION_ISSUED_AT_KEY, session)

    @override_settings(SESSION_COOKIE_AGE=60)
    def test_session_older_than_ttl_is_rejected(self):
        self._login()
        session = self.client.session
        session[SESSION_ISSUED_AT_KEY] = session[SESSION_ISSUED_AT_KEY] - 120
        session.save()

        response = self.client.get(reverse("accounts:me"))

        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)


class TestProfileUpdate(TestCase):

    @classmethod
    def setUpTestData(cls):
        cls.user = User.objects.create_user(
            username="profile_user", email="profile_user@police.gov",
            password=_PASSWORD, department="Patrol",
        )
        User.objects.create_user(
            username="taken", email="taken@police.gov", password=_PASSWORD,
        )

    def setUp(self):
        self.client = APIClient()
        self.url = reverse("accounts:profile")

    def _login(self):
        self.client.post(
            reverse("accounts:login"),
            {"username": "profile_user", "password": _PASSWORD},
            format="json",
        )

    def test_profile_requires_session(self):
        response = self.client.put(self.url, {"department": "CID"}, format="json")
        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)

    def test_profile_update_merges_submitted_fields(self):
        self._login()
        before = self.client.get(reverse("accounts:me")).json()["user"]

        response = self.client.put(
            self.url, {"position": "Sergeant", "phone": "+1-555-0101"}, format="json"
        )

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        user = response.json()["user"]
        self.assertNotIn("password", user)
        self.assertEqual(user["position"], "Sergeant")
        self.assertEqual(user["phone"], "+1-555-0101")
        self.assertEqual(user["department"], "Patrol")
        self.assertEqual(user["createdAt"], before["createdAt"])
        self.assertGreater(
            parse_datetime(user["updatedAt"]), parse_datetime(before["updatedAt"])
        )

    def test_profile_cannot_change_role(self):
        self._login()
        self.client.put(self.url, {"role": "admin"}, format="json")
        self.user.refresh_from_db()
        self.assertEqual(self.user.role, "user")

    def test_profile_email_conflict_returns_409(self):
        self._login()
        response = self.client.put(self.url, {"email": "taken@police.gov"}, format="json")
        self.assertEqual(response.status_code, status.HTTP_409_CONFLICT)
