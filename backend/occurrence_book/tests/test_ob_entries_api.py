"""
Integration tests — /api/ob-entries.

Focus: OB-number generation, the derived ``dateTime`` / ``date`` /
``time`` values, legacy-row defaults and the status enum.
"""

from __future__ import annotations

import pytest
from django.utils.dateparse import parse_datetime

from core.constants import OB_OFFICER_PLACEHOLDER
from occurrence_book.models import OBEntry

pytestmark = pytest.mark.django_db

LIST_URL = "/api/ob-entries"


@pytest.fixture()
def client(create_user, auth_client):
    return auth_client(create_user(username="desk_officer"))


def _create(client, **payload):
    body = {"description": "Lost wallet reported", **payload}
    response = client.post(LIST_URL, body, format="json")
    assert response.status_code == 201, response.content
    return response.json()["obEntry"]


class TestCreate:

    def test_defaults(self, client):
        entry = _create(client)

        assert entry["obNumber"].startswith("OB-")
        assert entry["type"] == "Incident"
        assert entry["status"] == "Pending"
        assert entry["officer"] == OB_OFFICER_PLACEHOLDER
        assert entry["dateTime"]
        assert entry["date"] == entry["dateTime"][:10]
        assert entry["time"] == entry["dateTime"][11:16]
        assert entry["recordingOfficerId"] is not None

    def test_date_and_time_collapse_into_date_time(self, client):
        entry = _create(client, date="2024-03-05", time="14:30")

        assert entry["date"] == "2024-03-05"
        assert entry["time"] == "14:30"
        assert parse_datetime(entry["dateTime"]).isoformat().startswith("2024-03-05T14:30:00")

    def test_date_time_wins_over_parts(self, client):
        entry = _create(
            client, dateTime="2023-12-31T23:15:00Z", date="2020-01-01", time="08:00",
        )
        assert entry["date"] == "2023-12-31"
        assert entry["time"] == "23:15"

    def test_round_trip(self, client):
        payload = {
            "type": "Traffic",
            "description": "Minor collision",
            "reportedBy": "J. Mwangi",
            "officer": "PC Otieno",
            "location": "Kenyatta Ave",
            "details": "No injuries",
            "status": "Approved",
        }
        created = _create(client, **payload)

        fetched = client.get(f"{LIST_URL}/{created['id']}").json()["obEntry"]

        for field, value in payload.items():
            assert fetched[field] == value
        assert fetched["createdAt"] == fetched["updatedAt"]

    def test_invalid_status_returns_400(self, client):
        response = client.post(LIST_URL, {"status": "Lost"}, format="json")
        assert response.status_code == 400
        assert "status" in response.json()["errors"]


class TestUpdate:

    def test_time_only_update_keeps_date(self, client):
        created = _create(client, date="2024-03-05", time="14:30")

        response = client.patch(f"{LIST_URL}/{created['id']}", {"time": "09:05"}, format="json")

        entry = response.json()["obEntry"]
        assert entry["date"] == "2024-03-05"
        assert entry["time"] == "09:05"
        assert entry["description"] == created["description"]

    def test_status_update(self, client):
        created = _create(client)
        response = client.put(f"{LIST_URL}/{created['id']}", {"status": "Completed"}, format="json")
        assert response.status_code == 200
        assert response.json()["obEntry"]["status"] == "Completed"


class TestLegacyRows:

    def test_blank_officer_and_status_are_rendered_with_defaults(self, client):
        entry = OBEntry.objects.create(ob_number="OB-2020-LEGACY", officer="", status="")

        body = client.get(f"{LIST_URL}/{entry.pk}").json()["obEntry"]

        assert body["officer"] == OB_OFFICER_PLACEHOLDER
        assert body["status"] == "Pending"


class TestListAndDelete:

    def test_filters(self, client):
        _create(client, type="Traffic", status="Approved")
        _create(client, type="Theft", description="Phone snatched")

        approved = client.get(LIST_URL, {"status": "Approved"}).json()["obEntries"]
        assert [e["type"] for e in approved] == ["Traffic"]

        theft = client.get(LIST_URL, {"type": "theft"}).json()["obEntries"]
        assert [e["description"] for e in theft] == ["Phone snatched"]

        search = client.get(LIST_URL, {"search": "snatched"}).json()["obEntries"]
        assert len(search) == 1

    def test_date_range_filter(self, client):
        _create(client, date="2024-01-10", time="10:00")
        _create(client, date="2024-02-10", time="10:00")

        january = client.get(
            LIST_URL, {"dateFrom": "2024-01-01", "dateTo": "2024-01-31"}
        ).json()["obEntries"]
        assert [e["date"] for e in january] == ["2024-01-10"]

    def test_delete(self, client):
        created = _create(client)
        response = client.delete(f"{LIST_URL}/{created['id']}")
        assert response.status_code == 200
        assert response.json() == {"message": "OB entry deleted successfully"}
        assert client.get(f"{LIST_URL}/{created['id']}").status_code == 404
