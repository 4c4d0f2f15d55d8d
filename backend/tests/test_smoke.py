"""
Smoke tests — verify that Django boots, URL routing resolves, and
the OpenAPI schema renders.

These tests do NOT require real data; they just prove the plumbing
works.
"""

from __future__ import annotations

import pytest
from django.urls import Resolver404, resolve, reverse


# ════════════════════════════════════════════════════════════════════
#  URL Routing Smoke Tests
# ════════════════════════════════════════════════════════════════════

class TestURLRouting:
    """Ensure every resource collection reverses under ``/api/``."""

    EXPECTED_URLS = [
        # (url_name, expected_path)
        ("accounts:login",        "/api/auth/login"),
        ("accounts:me",           "/api/auth/me"),
        ("accounts:user-list",    "/api/users"),
        ("case-list",             "/api/cases"),
        ("ob-entry-list",         "/api/ob-entries"),
        ("evidence-list",         "/api/evidence"),
        ("geofile-list",          "/api/geofiles"),
        ("report-list",           "/api/reports"),
        ("license-plate-list",    "/api/license-plates"),
        ("police-vehicle-list",   "/api/police-vehicles"),
    ]

    @pytest.mark.parametrize("url_name,expected_path", EXPECTED_URLS)
    def test_url_reverses(self, url_name: str, expected_path: str):
        url = reverse(url_name)
        assert url.rstrip("/") == expected_path, (
            f"{url_name} resolved to {url}, expected {expected_path}"
        )

    @pytest.mark.parametrize("url_name,expected_path", EXPECTED_URLS)
    def test_trailing_slash_is_optional(self, url_name: str, expected_path: str):
        assert resolve(expected_path).url_name == url_name.split(":")[-1]
        assert resolve(expected_path + "/").url_name == url_name.split(":")[-1]

    def test_detail_routes_only_match_numeric_ids(self):
        assert resolve("/api/cases/12").url_name == "case-detail"
        with pytest.raises(Resolver404):
            resolve("/api/cases/abc")

    def test_custom_actions_resolve(self):
        assert resolve("/api/geofiles/3/download").url_name == "geofile-download"
        assert resolve("/api/geofiles/search/by-location").url_name == "geofile-search-by-location"
        assert resolve("/api/geofiles/3/link-case/9").url_name == "geofile-link-case"
        assert resolve("/api/license-plates/search/KAA123").url_name == "license-plate-search"
        assert resolve("/api/police-vehicles/4/location").url_name == "police-vehicle-update-location"
        assert resolve("/api/police-vehicles/4/status").url_name == "police-vehicle-update-status"


# ════════════════════════════════════════════════════════════════════
#  OpenAPI Schema
# ════════════════════════════════════════════════════════════════════

@pytest.mark.django_db
class TestSchema:

    def test_schema_renders(self, api_client):
        response = api_client.get("/api/schema/", HTTP_ACCEPT="application/json")

        assert response.status_code == 200
        paths = response.json()["paths"]
        assert "/api/cases" in paths or "/api/cases/" in paths

    def test_unknown_api_route_is_404(self, api_client):
        assert api_client.get("/api/does-not-exist").status_code == 404
