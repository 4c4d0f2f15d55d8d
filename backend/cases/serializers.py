"""
Cases app serializers.

``CaseSerializer`` is both the validation table and the response shape
for ``/api/cases``.  External names are camelCase; each field maps to its
snake_case model attribute through ``source``.
"""

from __future__ import annotations

from rest_framework import serializers

from core.serializers import ReferenceField, TimeStampedSerializer

from .models import Case


class CaseSerializer(TimeStampedSerializer):
    caseNumber = serializers.CharField(
        source="case_number",
        max_length=50,
        required=False,
        help_text="Generated as CASE-<year>-<suffix> when omitted.",
    )
    title = serializers.CharField(max_length=255)
    description = serializers.CharField(required=False, allow_blank=True)
    status = serializers.CharField(max_length=50, required=False)
    priority = serializers.CharField(max_length=50, required=False)
    location = serializers.CharField(max_length=255, required=False, allow_blank=True)
    assignedOfficer = serializers.CharField(
        source="assigned_officer", max_length=255, required=False, allow_blank=True,
    )
    createdById = ReferenceField(source="created_by_id", read_only=True)

    class Meta:
        model = Case
        fields = [
            *TimeStampedSerializer.COMMON_FIELDS,
            "caseNumber",
            "title",
            "description",
            "status",
            "priority",
            "location",
            "assignedOfficer",
            "createdById",
        ]


class CaseFilterSerializer(serializers.Serializer):
    """Query parameters accepted by ``GET /cases``."""

    status = serializers.CharField(required=False, max_length=50)
    priority = serializers.CharField(required=False, max_length=50)
    search = serializers.CharField(required=False, max_length=255)
