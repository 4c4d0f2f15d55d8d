"""
Unit tests for ``core.serializers.ReferenceField``.
"""

from __future__ import annotations

import pytest
from rest_framework import serializers

from core.constants import MAX_STORED_INTEGER
from core.serializers import ReferenceField


@pytest.mark.parametrize(
    "raw, expected",
    [(42, 42), ("42", 42), (" 7 ", 7), (MAX_STORED_INTEGER, MAX_STORED_INTEGER)],
)
def test_accepts_positive_identifiers(raw, expected):
    assert ReferenceField().to_internal_value(raw) == expected


@pytest.mark.parametrize(
    "raw",
    [0, -1, True, 1.5, "", "abc", "²", "4²", str(MAX_STORED_INTEGER + 1), MAX_STORED_INTEGER + 1, "9" * 5000],
)
def test_rejects_invalid_identifiers(raw):
    with pytest.raises(serializers.ValidationError):
        ReferenceField().to_internal_value(raw)


def test_renders_as_string():
    assert ReferenceField().to_representation(12) == "12"
    assert ReferenceField().to_representation(None) is None
