"""
Integration tests — account registration.

Endpoint under test:  POST /api/auth/register  (named URL: accounts:register)
Expected status:      201 Created, body {"user": {...}}
"""

from __future__ import annotations

from django.contrib.auth import get_user_model
from django.test import TestCase
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APIClient

User = get_user_model()


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _registration_payload(**overrides) -> dict:
    payload = {
        "username": "officer_jane",
        "email": "jane@police.gov",
        "password": "Sup3rSecret!",
        "confirmPassword": "Sup3rSecret!",
        "firstName": "Jane",
        "lastName": "Doe",
        "badgeNumber": "B-2040",
        "department": "Traffic",
    }
    payload.update(overrides)
    return payload


class TestRegistration(TestCase):

    def setUp(self):
        self.client = APIClient()
        self.url = reverse("accounts:register")

    def test_register_creates_user_with_user_role(self):
        response = self.client.post(self.url, _registration_payload(), format="json")

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        user = response.json()["user"]
        self.assertEqual(user["username"], "officer_jane")
        self.assertEqual(user["role"], "user")
        self.assertEqual(user["firstName"], "Jane")
        self.assertEqual(user["department"], "Traffic")
        self.assertTrue(user["isActive"])
        self.assertNotIn("password", user)
        self.assertEqual(user["createdAt"], user["updatedAt"])

    def test_password_is_stored_hashed(self):
        self.client.post(self.url, _registration_payload(), format="json")

        stored = User.objects.get(username="officer_jane")
        self.assertNotEqual(stored.password, "Sup3rSecret!")
        self.assertTrue(stored.check_password("Sup3rSecret!"))

    def test_role_in_payload_is_ignored(self):
        response = self.client.post(
            self.url, _registration_payload(role="admin"), format="json"
        )
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(User.objects.get(username="officer_jane").role, "user")

    def test_register_does_not_log_in(self):
        self.client.post(self.url, _registration_payload(), format="json")
        response = self.client.get(reverse("accounts:me"))
        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)

    def test_duplicate_username_returns_409(self):
        self.client.post(self.url, _registration_payload(), format="json")
        response = self.client.post(
            self.url, _registration_payload(email="other@police.gov"), format="json"
        )
        self.assertEqual(response.status_code, status.HTTP_409_CONFLICT)
        self.assertIn("username", response.json()["message"])

    def test_duplicate_email_returns_409(self):
        self.client.post(self.url, _registration_payload(), format="json")
        response = self.client.post(
            self.url,
            _registration_payload(username="someone_else", email="JANE@police.gov"),
            format="json",
        )
        self.assertEqual(response.status_code, status.HTTP_409_CONFLICT)
        self.assertIn("email", response.json()["message"])

    def test_mismatched_confirmation_returns_400(self):
        response = self.client.post(
            self.url, _registration_payload(confirmPassword="different!"), format="json"
        )
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn("confirmPassword", response.json()["errors"])

    def test_short_password_returns_400(self):
        response = self.client.post(
            self.url,
            _registration_payload(password="short", confirmPassword="short"),
            format="json",
        )
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn("password", response.json()["errors"])

    def test_missing_required_fields_return_400(self):
        response = self.client.post(self.url, {"username": "x"}, format="json")
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        errors = response.json()["errors"]
        self.assertIn("email", errors)
        self.assertIn("password", errors)
        self.assertFalse(User.objects.exists())
