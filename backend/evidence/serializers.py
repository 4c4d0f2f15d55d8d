"""
Evidence app serializers.
"""

from __future__ import annotations

from rest_framework import serializers

from core.serializers import ReferenceField, TimeStampedSerializer

from .models import Evidence


class EvidenceSerializer(TimeStampedSerializer):
    """
    Validation table and response shape for ``/api/evidence``.

    ``caseId`` accepts a number or a numeric string and is always
    rendered as a string.
    """

    evidenceNumber = serializers.CharField(source="evidence_number", max_length=50, required=False)
    caseId = ReferenceField(source="case_id", required=False, allow_null=True)
    title = serializers.CharField(max_length=255)
    description = serializers.CharField(required=False, allow_blank=True)
    evidenceType = serializers.CharField(
        source="evidence_type", max_length=100, required=False, allow_blank=True,
    )
    location = serializers.CharField(max_length=255, required=False, allow_blank=True)
    collectedBy = serializers.CharField(
        source="collected_by", max_length=255, required=False, allow_blank=True,
    )
    collectedAt = serializers.DateTimeField(source="collected_at", required=False, allow_null=True)
    status = serializers.CharField(max_length=50, required=False)
    registeredById = ReferenceField(source="registered_by_id", read_only=True)

    class Meta:
        model = Evidence
        fields = [
            *TimeStampedSerializer.COMMON_FIELDS,
            "evidenceNumber",
            "caseId",
            "title",
            "description",
            "evidenceType",
            "location",
            "collectedBy",
            "collectedAt",
            "status",
            "registeredById",
        ]


class EvidenceFilterSerializer(serializers.Serializer):
    """Query parameters accepted by ``GET /evidence``."""

    caseId = ReferenceField(source="case_id", required=False)
    evidenceType = serializers.CharField(source="evidence_type", required=False, max_length=100)
    status = serializers.CharField(required=False, max_length=50)
    search = serializers.CharField(required=False, max_length=255)
