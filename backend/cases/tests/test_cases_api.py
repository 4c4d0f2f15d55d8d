"""
Integration tests — /api/cases CRUD.

Covers the shared resource pipeline end to end through the cases
endpoints: round trip, partial merge, timestamps, delete and the
session gate.
"""

from __future__ import annotations


from django.contrib.auth import get_user_model
from django.test import TestCase
from django.urls import reverse
from django.utils.dateparse import parse_datetime
from rest_framework import status
from rest_framework.test import APIClient

from cases.models import Case

User = get_user_model()

_PASSWORD = "Str0ng!Pass99"

_CASE_PAYLOAD = {
    "title": "Burglary at Main Street",
    "description": "Shop window broken overnight.",
    "status": "Under Investigation",
    "priority": "High",
    "location": "12 Main Street",
    "assignedOfficer": "Sgt. Njoroge",
}


class CaseApiTestCase(TestCase):

    @classmethod
    def setUpTestData(cls):
        cls.user = User.objects.create_user(
            username="case_officer", email="case_officer@police.gov", password=_PASSWORD,
        )

    def setUp(self):
        self.client = APIClient()
        self.client.post(
            reverse("accounts:login"),
            {"username": "case_officer", "password": _PASSWORD},
            format="json",
        )
        self.list_url = reverse("case-list")

    def _create(self, **overrides):
        payload = {**_CASE_PAYLOAD, **overrides}
        response = self.client.post(self.list_url, payload, format="json")
        self.assertEqual(response.status_code, status.HTTP_201_CREATED, response.content)
        return response.json()["case"]

    # ── Create / read ────────────────────────────────────────────────

    def test_create_then_read_round_trip(self):
        created = self._create()

        response = self.client.get(reverse("case-detail", args=[created["id"]]))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        fetched = response.json()["case"]
        for field, value in _CASE_PAYLOAD.items():
            self.assertEqual(fetched[field], value, field)
        self.assertIsInstance(fetched["id"], str)
        self.assertEqual(fetched["createdAt"], fetched["updatedAt"])
        self.assertEqual(fetched, created)

    def test_create_generates_case_number_and_records_creator(self):
        created = self._create()
        self.assertRegex(created["caseNumber"], r"^CASE-\d{4}-[A-Z0-9]{6}$")
        self.assertEqual(created["createdById"], str(self.user.pk))

    def test_create_applies_defaults(self):
        response = self.client.post(self.list_url, {"title": "Minimal"}, format="json")

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        case = response.json()["case"]
        self.assertEqual(case["status"], "Open")
        self.assertEqual(case["priority"], "Medium")
        self.assertEqual(case["description"], "")

    def test_create_without_title_returns_400(self):
        response = self.client.post(self.list_url, {"description": "no title"}, format="json")
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn("title", response.json()["errors"])
        self.assertFalse(Case.objects.exists())

    def test_duplicate_case_number_returns_409(self):
        self._create(caseNumber="CASE-2024-AAAAAA")
        response = self.client.post(
            self.list_url, {**_CASE_PAYLOAD, "caseNumber": "CASE-2024-AAAAAA"}, format="json"
        )
        self.assertEqual(response.status_code, status.HTTP_409_CONFLICT)
        self.assertIn("message", response.json())

    def test_list_in_insertion_order(self):
        first = self._create(title="First")
        second = self._create(title="Second")

        response = self.client.get(self.list_url)

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        ids = [c["id"] for c in response.json()["cases"]]
        self.assertEqual(ids, [first["id"], second["id"]])

    def test_list_filters(self):
        self._create(title="Stolen bicycle", status="Open")
        self._create(title="Armed robbery", status="Closed")

        closed = self.client.get(self.list_url, {"status": "closed"}).json()["cases"]
        self.assertEqual([c["title"] for c in closed], ["Armed robbery"])

        found = self.client.get(self.list_url, {"search": "bicycle"}).json()["cases"]
        self.assertEqual([c["title"] for c in found], ["Stolen bicycle"])

    def test_trailing_slash_is_optional(self):
        self.assertEqual(self.client.get("/api/cases").status_code, status.HTTP_200_OK)
        self.assertEqual(self.client.get("/api/cases/").status_code, status.HTTP_200_OK)

    # ── Update ───────────────────────────────────────────────────────

    def test_put_merges_only_submitted_fields(self):
        created = self._create()

        response = self.client.put(
            reverse("case-detail", args=[created["id"]]),
            {"status": "Closed"},
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        updated = response.json()["case"]
        self.assertEqual(updated["status"], "Closed")
        for field in ("title", "description", "priority", "location", "assignedOfficer", "caseNumber"):
            self.assertEqual(updated[field], created[field], field)
        self.assertEqual(updated["id"], created["id"])
        self.assertEqual(updated["createdAt"], created["createdAt"])
        self.assertGreater(
            parse_datetime(updated["updatedAt"]), parse_datetime(created["updatedAt"])
        )

    def test_successive_updates_strictly_increase_updated_at(self):
        created = self._create()
        url = reverse("case-detail", args=[created["id"]])

        stamps = [parse_datetime(created["updatedAt"])]
        for priority in ("Low", "High", "Urgent"):
            body = self.client.patch(url, {"priority": priority}, format="json").json()
            stamps.append(parse_datetime(body["case"]["updatedAt"]))

        self.assertEqual(stamps, sorted(set(stamps)))

    def test_update_unknown_case_returns_404(self):
        response = self.client.patch(reverse("case-detail", args=[9999]), {"status": "x"}, format="json")
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

    def test_update_cannot_change_id_or_created_at(self):
        created = self._create()
        response = self.client.put(
            reverse("case-detail", args=[created["id"]]),
            {"id": "777", "createdAt": "2001-01-01T00:00:00Z", "title": "Renamed"},
            format="json",
        )
        body = response.json()["case"]
        self.assertEqual(body["id"], created["id"])
        self.assertEqual(body["createdAt"], created["createdAt"])
        self.assertEqual(body["title"], "Renamed")

    # ── Delete ───────────────────────────────────────────────────────

    def test_delete_then_read_returns_404(self):
        created = self._create()
        url = reverse("case-detail", args=[created["id"]])

        response = self.client.delete(url)

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.json(), {"message": "Case deleted successfully"})
        self.assertEqual(self.client.get(url).status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(self.client.delete(url).status_code, status.HTTP_404_NOT_FOUND)


class CaseAuthGateTestCase(TestCase):

    def test_every_route_requires_a_session(self):
        client = APIClient()
        checks = [
            client.get(reverse("case-list")),
            client.post(reverse("case-list"), {"title": "x"}, format="json"),
            client.get(reverse("case-detail", args=[1])),
            client.put(reverse("case-detail", args=[1]), {}, format="json"),
            client.delete(reverse("case-detail", args=[1])),
        ]
        for response in checks:
            self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)
            self.assertIn("message", response.json())
