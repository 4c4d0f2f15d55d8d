"""
Reports app serializers.

``type``, ``status`` and ``priority`` are closed sets; anything outside
them is rejected with a 400.
"""

from __future__ import annotations

from rest_framework import serializers

from core.serializers import ReferenceField, TimeStampedSerializer

from .models import Report, ReportPriority, ReportStatus, ReportType


class ReportSerializer(TimeStampedSerializer):
    reportNumber = serializers.CharField(source="report_number", max_length=50, required=False)
    title = serializers.CharField(max_length=255)
    content = serializers.CharField(required=False, allow_blank=True)
    type = serializers.ChoiceField(source="report_type", choices=ReportType.choices)
    status = serializers.ChoiceField(choices=ReportStatus.choices, required=False)
    priority = serializers.ChoiceField(choices=ReportPriority.choices, required=False)
    caseId = ReferenceField(source="case_id", required=False, allow_null=True)
    obId = ReferenceField(source="ob_id", required=False, allow_null=True)
    evidenceId = ReferenceField(source="evidence_id", required=False, allow_null=True)
    requestedBy = ReferenceField(source="requested_by_id", read_only=True)

    class Meta:
        model = Report
        fields = [
            *TimeStampedSerializer.COMMON_FIELDS,
            "reportNumber",
            "title",
            "content",
            "type",
            "status",
            "priority",
            "caseId",
            "obId",
            "evidenceId",
            "requestedBy",
        ]


class ReportFilterSerializer(serializers.Serializer):
    """Query parameters accepted by ``GET /reports``."""

    type = serializers.ChoiceField(source="report_type", choices=ReportType.choices, required=False)
    status = serializers.ChoiceField(choices=ReportStatus.choices, required=False)
    priority = serializers.ChoiceField(choices=ReportPriority.choices, required=False)
    caseId = ReferenceField(source="case_id", required=False)
    search = serializers.CharField(required=False, max_length=255)
