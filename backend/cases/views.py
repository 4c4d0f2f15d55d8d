"""
Cases app ViewSets.

Architecture: views are intentionally thin.  ``CaseViewSet`` inherits
the validate → store → normalise → respond pipeline from
``core.views.ResourceViewSet`` and only declares its serializer, store,
envelope keys and schema documentation.
"""

from __future__ import annotations

from drf_spectacular.utils import (
    OpenApiParameter,
    OpenApiResponse,
    extend_schema,
    extend_schema_view,
)

from core.serializers import MessageSerializer
from core.views import ResourceViewSet

from .serializers import CaseFilterSerializer, CaseSerializer
from .services import CaseService


@extend_schema_view(
    list=extend_schema(
        summary="List cases",
        parameters=[
            OpenApiParameter(name="status", type=str, location=OpenApiParameter.QUERY, description="Exact status (case-insensitive)."),
            OpenApiParameter(name="priority", type=str, location=OpenApiParameter.QUERY, description="Exact priority (case-insensitive)."),
            OpenApiParameter(name="search", type=str, location=OpenApiParameter.QUERY, description="Free-text search on number, title, description and location."),
        ],
        tags=["Cases"],
    ),
    create=extend_schema(
        summary="Open a case",
        responses={
            201: CaseSerializer,
            400: OpenApiResponse(description="Validation error."),
            409: OpenApiResponse(description="Case number already exists."),
        },
        tags=["Cases"],
    ),
    retrieve=extend_schema(summary="Retrieve a case", tags=["Cases"]),
    update=extend_schema(summary="Update a case", tags=["Cases"]),
    partial_update=extend_schema(summary="Partially update a case", tags=["Cases"]),
    destroy=extend_schema(summary="Delete a case", responses={200: MessageSerializer}, tags=["Cases"]),
)
class CaseViewSet(ResourceViewSet):
    """/api/cases"""

    serializer_class = CaseSerializer
    filter_serializer_class = CaseFilterSerializer
    store = CaseService
    singular = "case"
    plural = "cases"
