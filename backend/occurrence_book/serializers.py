"""
Occurrence book serializers.

Clients may send the moment of an entry either as ``dateTime`` or as a
separate ``date`` and/or ``time``; both collapse into the model's
``recorded_at``.  Responses always carry all three derived values, so an
entry written one way reads back consistently the other way.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

from django.utils import timezone
from rest_framework import serializers

from core.constants import OB_OFFICER_PLACEHOLDER
from core.serializers import ReferenceField, TimeStampedSerializer

from .models import OBEntry, OBStatus

TIME_FORMAT = "%H:%M"


class OBEntrySerializer(TimeStampedSerializer):
    obNumber = serializers.CharField(source="ob_number", max_length=50, required=False)
    type = serializers.CharField(source="entry_type", max_length=100, required=False)
    description = serializers.CharField(required=False, allow_blank=True)
    reportedBy = serializers.CharField(
        source="reported_by", max_length=255, required=False, allow_blank=True,
    )
    officer = serializers.CharField(max_length=255, required=False, allow_blank=True)
    location = serializers.CharField(max_length=255, required=False, allow_blank=True)
    details = serializers.CharField(required=False, allow_blank=True)
    dateTime = serializers.DateTimeField(source="recorded_at", required=False)
    date = serializers.DateField(write_only=True, required=False)
    time = serializers.TimeField(write_only=True, required=False)
    status = serializers.ChoiceField(choices=OBStatus.choices, required=False)
    recordingOfficerId = ReferenceField(source="recording_officer_id", read_only=True)

    class Meta:
        model = OBEntry
        fields = [
            *TimeStampedSerializer.COMMON_FIELDS,
            "obNumber",
            "type",
            "description",
            "reportedBy",
            "officer",
            "location",
            "details",
            "dateTime",
            "date",
            "time",
            "status",
            "recordingOfficerId",
        ]

    def validate(self, attrs: dict[str, Any]) -> dict[str, Any]:
        date = attrs.pop("date", None)
        time = attrs.pop("time", None)
        if "recorded_at" in attrs or (date is None and time is None):
            return attrs

        if self.instance is not None:
            base = timezone.localtime(self.instance.recorded_at)
        else:
            base = timezone.localtime()
        combined = datetime.combine(
            date or base.date(),
            time or base.time().replace(microsecond=0),
        )
        attrs["recorded_at"] = timezone.make_aware(combined)
        return attrs

    def to_representation(self, instance: OBEntry) -> dict[str, Any]:
        data = super().to_representation(instance)
        local = timezone.localtime(instance.recorded_at)
        data["date"] = local.date().isoformat()
        data["time"] = local.strftime(TIME_FORMAT)
        if not data.get("officer"):
            data["officer"] = OB_OFFICER_PLACEHOLDER
        if not data.get("status"):
            data["status"] = OBStatus.PENDING
        return data


class OBEntryFilterSerializer(serializers.Serializer):
    """Query parameters accepted by ``GET /ob-entries``."""

    status = serializers.ChoiceField(choices=OBStatus.choices, required=False)
    type = serializers.CharField(required=False, max_length=100)
    dateFrom = serializers.DateField(source="date_from", required=False)
    dateTo = serializers.DateField(source="date_to", required=False)
    search = serializers.CharField(required=False, max_length=255)
