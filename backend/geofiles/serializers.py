"""
Geofiles app serializers.

Besides the main ``GeofileSerializer`` this module holds the request
shapes of the geofile-specific endpoints (list filters, location search,
add-tags) and the body returned by ``download``.
"""

from __future__ import annotations

from typing import Any

from rest_framework import serializers

from core.constants import DEFAULT_SEARCH_RADIUS_M, MAX_STORED_INTEGER
from core.serializers import (
    CaseInsensitiveChoiceField,
    ReferenceField,
    TimeStampedSerializer,
)

from .models import Geofile, GeofileType

TAG_MAX_LENGTH = 50


class TagListField(serializers.ListField):
    """
    A set of tags.

    Accepts a JSON list or a comma-separated string.  Tags are stripped,
    lower-cased and de-duplicated; blanks are dropped.  Renders the
    related ``GeofileTag`` names in alphabetical order.
    """

    child = serializers.CharField(max_length=255, allow_blank=True)

    def to_internal_value(self, data: Any) -> list[str]:
        if isinstance(data, str):
            data = [data]
        values = super().to_internal_value(data)
        tags = {part.strip().lower() for value in values for part in value.split(",")}
        tags.discard("")
        if any(len(tag) > TAG_MAX_LENGTH for tag in tags):
            raise serializers.ValidationError(
                f"Tags may be at most {TAG_MAX_LENGTH} characters long."
            )
        return sorted(tags)

    def to_representation(self, value: Any) -> list[str]:
        return sorted(tag.name for tag in value.all())


class GeofileSerializer(TimeStampedSerializer):
    filename = serializers.CharField(max_length=255)
    fileUrl = serializers.CharField(source="file_url", max_length=1024, required=False, allow_blank=True)
    filePath = serializers.CharField(source="file_path", max_length=1024, required=False, allow_blank=True)
    fileType = CaseInsensitiveChoiceField(
        source="file_type",
        choices=GeofileType.choices,
        help_text="kml, gpx, shp, geojson, kmz, gml or other (any case).",
    )
    fileSize = serializers.IntegerField(
        source="file_size", min_value=0, max_value=MAX_STORED_INTEGER, required=False, allow_null=True,
    )
    description = serializers.CharField(required=False, allow_blank=True)
    tags = TagListField(required=False)
    accessLevel = serializers.CharField(source="access_level", max_length=50, required=False)
    latitude = serializers.FloatField(min_value=-90, max_value=90, required=False, allow_null=True)
    longitude = serializers.FloatField(min_value=-180, max_value=180, required=False, allow_null=True)
    caseIds = serializers.ListField(
        source="linked_case_ids",
        child=ReferenceField(),
        required=False,
    )
    uploadedById = ReferenceField(source="uploaded_by_id", read_only=True)
    downloadCount = serializers.IntegerField(source="download_count", read_only=True)
    lastAccessedAt = serializers.DateTimeField(source="last_accessed_at", read_only=True)

    class Meta:
        model = Geofile
        fields = [
            *TimeStampedSerializer.COMMON_FIELDS,
            "filename",
            "fileUrl",
            "filePath",
            "fileType",
            "fileSize",
            "description",
            "tags",
            "accessLevel",
            "latitude",
            "longitude",
            "caseIds",
            "uploadedById",
            "downloadCount",
            "lastAccessedAt",
        ]

    def validate_caseIds(self, value: list[int]) -> list[int]:
        return list(dict.fromkeys(value))


class GeofileFilterSerializer(serializers.Serializer):
    """Query parameters accepted by ``GET /geofiles``."""

    search = serializers.CharField(required=False, max_length=255)
    type = CaseInsensitiveChoiceField(source="file_type", choices=GeofileType.choices, required=False)
    tags = TagListField(required=False)
    accessLevel = serializers.CharField(source="access_level", required=False, max_length=50)
    dateFrom = serializers.DateField(source="date_from", required=False)
    dateTo = serializers.DateField(source="date_to", required=False)


class LocationQuerySerializer(serializers.Serializer):
    """Query parameters of ``GET /geofiles/search/by-location``."""

    lat = serializers.FloatField(min_value=-90, max_value=90)
    lng = serializers.FloatField(min_value=-180, max_value=180)
    radius = serializers.FloatField(required=False, default=DEFAULT_SEARCH_RADIUS_M)

    def validate_radius(self, value: float) -> float:
        if value <= 0:
            raise serializers.ValidationError("Radius must be greater than zero.")
        return value


class AddTagsSerializer(serializers.Serializer):
    tags = TagListField(allow_empty=False)

    def validate_tags(self, value: list[str]) -> list[str]:
        if not value:
            raise serializers.ValidationError("At least one non-blank tag is required.")
        return value


class DownloadSerializer(serializers.Serializer):
    """Body of ``GET /geofiles/{id}/download``."""

    downloadUrl = serializers.CharField(source="download_url")
    filename = serializers.CharField()
    fileType = serializers.CharField(source="file_type")
    fileSize = serializers.IntegerField(source="file_size", allow_null=True)
