"""
Occurrence book ViewSets.
"""

from __future__ import annotations

from drf_spectacular.utils import (
    OpenApiParameter,
    extend_schema,
    extend_schema_view,
)

from core.serializers import MessageSerializer
from core.views import ResourceViewSet

from .serializers import OBEntryFilterSerializer, OBEntrySerializer
from .services import OBEntryService


@extend_schema_view(
    list=extend_schema(
        summary="List OB entries",
        parameters=[
            OpenApiParameter(name="status", type=str, location=OpenApiParameter.QUERY, description="Pending, Approved, Completed or Rejected."),
            OpenApiParameter(name="type", type=str, location=OpenApiParameter.QUERY, description="Entry type (case-insensitive)."),
            OpenApiParameter(name="dateFrom", type=str, location=OpenApiParameter.QUERY, description="ISO 8601 date. Entries recorded on or after."),
            OpenApiParameter(name="dateTo", type=str, location=OpenApiParameter.QUERY, description="ISO 8601 date. Entries recorded on or before."),
            OpenApiParameter(name="search", type=str, location=OpenApiParameter.QUERY, description="Free-text search."),
        ],
        tags=["Occurrence Book"],
    ),
    create=extend_schema(
        summary="Record an OB entry",
        description=(
            "The moment of the entry may be given as ``dateTime`` or as "
            "``date`` and/or ``time``; it defaults to now."
        ),
        tags=["Occurrence Book"],
    ),
    retrieve=extend_schema(summary="Retrieve an OB entry", tags=["Occurrence Book"]),
    update=extend_schema(summary="Update an OB entry", tags=["Occurrence Book"]),
    partial_update=extend_schema(summary="Partially update an OB entry", tags=["Occurrence Book"]),
    destroy=extend_schema(summary="Delete an OB entry", responses={200: MessageSerializer}, tags=["Occurrence Book"]),
)
class OBEntryViewSet(ResourceViewSet):
    """/api/ob-entries"""

    serializer_class = OBEntrySerializer
    filter_serializer_class = OBEntryFilterSerializer
    store = OBEntryService
    singular = "obEntry"
    plural = "obEntries"
