"""
Unit tests for ``core.domain.geo`` and ``core.domain.references``.
"""

from __future__ import annotations

import re

import pytest
from django.utils import timezone

from core.domain.geo import bounding_box, planar_distance_m
from core.domain.references import generate_reference_number


class TestPlanarDistance:

    def test_same_point_is_zero(self):
        assert planar_distance_m(-1.2921, 36.8219, -1.2921, 36.8219) == 0

    def test_one_degree_of_latitude(self):
        assert planar_distance_m(0, 0, 1, 0) == pytest.approx(111_195, rel=1e-3)

    def test_longitude_shrinks_away_from_equator(self):
        at_equator = planar_distance_m(0, 0, 0, 1)
        at_sixty = planar_distance_m(60, 0, 60, 1)
        assert at_sixty == pytest.approx(at_equator / 2, rel=1e-2)

    def test_bounding_box_contains_radius(self):
        lat, lng, radius = -1.2921, 36.8219, 1000
        min_lat, max_lat, min_lng, max_lng = bounding_box(lat, lng, radius)

        assert min_lat < lat < max_lat
        assert min_lng < lng < max_lng
        assert planar_distance_m(lat, lng, max_lat, lng) == pytest.approx(radius, rel=1e-3)
        assert planar_distance_m(lat, lng, lat, max_lng) == pytest.approx(radius, rel=1e-2)


class TestReferenceNumbers:

    def test_format(self):
        number = generate_reference_number("OB")
        assert re.fullmatch(rf"OB-{timezone.now().year}-[A-Z0-9]{{6}}", number)

    def test_custom_length(self):
        assert len(generate_reference_number("RPT", length=10).split("-")[-1]) == 10

    def test_numbers_differ(self):
        numbers = {generate_reference_number("CASE") for _ in range(50)}
        assert len(numbers) == 50
