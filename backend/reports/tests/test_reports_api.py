"""
Integration tests — /api/reports.

Focus: the closed ``type`` / ``status`` / ``priority`` sets, numbering,
advisory references and list filters.
"""

from __future__ import annotations

import pytest
from django.utils.dateparse import parse_datetime

from reports.models import Report

pytestmark = pytest.mark.django_db

LIST_URL = "/api/reports"


def detail_url(pk):
    return f"/api/reports/{pk}"


@pytest.fixture()
def officer(create_user):
    return create_user(username="report_writer")


@pytest.fixture()
def client(officer, auth_client):
    return auth_client(officer)


def _create(client, **payload):
    body = {"title": "Night patrol summary", "type": "Incident", **payload}
    response = client.post(LIST_URL, body, format="json")
    assert response.status_code == 201, response.content
    return response.json()["report"]


class TestCreate:

    def test_defaults_and_numbering(self, client, officer):
        report = _create(client)

        assert report["reportNumber"].startswith("RPT-")
        assert report["status"] == "Pending"
        assert report["priority"] == "Medium"
        assert report["content"] == ""
        assert report["requestedBy"] == str(officer.pk)
        assert report["caseId"] is None
        assert report["createdAt"] == report["updatedAt"]

    def test_round_trip_with_references(self, client):
        payload = {
            "title": "Evidence chain report",
            "content": "Chain of custody for exhibit A.",
            "type": "Case Summary",
            "status": "Approved",
            "priority": "Urgent",
            "caseId": "12",
            "obId": 7,
            "evidenceId": "99",
        }
        created = _create(client, **payload)

        fetched = client.get(detail_url(created["id"])).json()["report"]

        assert fetched == created
        assert fetched["type"] == "Case Summary"
        assert fetched["caseId"] == "12"
        assert fetched["obId"] == "7"
        assert fetched["evidenceId"] == "99"

    @pytest.mark.parametrize(
        "field, value",
        [("status", "Archived"), ("priority", "Critical"), ("type", "Memo")],
    )
    def test_out_of_set_values_are_rejected(self, client, field, value):
        body = {"title": "Bad enum", "type": "Incident", field: value}

        response = client.post(LIST_URL, body, format="json")

        assert response.status_code == 400
        assert field in response.json()["errors"]
        assert not Report.objects.exists()

    def test_type_is_required(self, client):
        response = client.post(LIST_URL, {"title": "No type"}, format="json")
        assert response.status_code == 400
        assert "type" in response.json()["errors"]

    def test_reference_must_be_numeric(self, client):
        response = client.post(
            LIST_URL, {"title": "Bad ref", "type": "Evidence", "caseId": "abc"}, format="json",
        )
        assert response.status_code == 400
        assert "caseId" in response.json()["errors"]

    @pytest.mark.parametrize("field", ["caseId", "obId", "evidenceId"])
    def test_reference_beyond_integer_range_returns_400(self, client, field):
        response = client.post(
            LIST_URL, {"title": "Huge ref", "type": "Incident", field: 10**20}, format="json",
        )
        assert response.status_code == 400
        assert field in response.json()["errors"]
        assert not Report.objects.exists()


class TestUpdateDelete:

    def test_status_update_keeps_other_fields(self, client):
        report = _create(client, priority="High")

        response = client.patch(detail_url(report["id"]), {"status": "Completed"}, format="json")

        assert response.status_code == 200
        updated = response.json()["report"]
        assert updated["status"] == "Completed"
        assert updated["priority"] == "High"
        assert updated["createdAt"] == report["createdAt"]
        assert parse_datetime(updated["updatedAt"]) > parse_datetime(report["updatedAt"])

    def test_update_with_invalid_priority_returns_400(self, client):
        report = _create(client)
        response = client.put(detail_url(report["id"]), {"priority": "Whenever"}, format="json")
        assert response.status_code == 400
        assert Report.objects.get(pk=report["id"]).priority == "Medium"

    def test_delete(self, client):
        report = _create(client)

        response = client.delete(detail_url(report["id"]))

        assert response.status_code == 200
        assert response.json() == {"message": "Report deleted successfully"}
        assert client.get(detail_url(report["id"])).status_code == 404


class TestList:

    def test_filters(self, client):
        _create(client, title="Burglary report", type="Incident", priority="High")
        _create(client, title="Warrant for search", type="Warranty", status="Approved")

        def titles(**params):
            response = client.get(LIST_URL, params)
            assert response.status_code == 200
            return [r["title"] for r in response.json()["reports"]]

        assert titles() == ["Burglary report", "Warrant for search"]
        assert titles(type="Warranty") == ["Warrant for search"]
        assert titles(status="Approved") == ["Warrant for search"]
        assert titles(priority="High") == ["Burglary report"]
        assert titles(search="burglary") == ["Burglary report"]

    def test_unknown_filter_value_returns_400(self, client):
        response = client.get(LIST_URL, {"status": "Lost"})
        assert response.status_code == 400

    def test_requires_session(self, api_client):
        assert api_client.get(LIST_URL).status_code == 401
