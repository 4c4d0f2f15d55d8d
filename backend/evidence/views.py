"""
Evidence app ViewSets.

Thin views: everything beyond declaring the serializer, store and
envelope keys is inherited from ``core.views.ResourceViewSet``.
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

from .serializers import EvidenceFilterSerializer, EvidenceSerializer
from .services import EvidenceService


@extend_schema_view(
    list=extend_schema(
        summary="List evidence",
        parameters=[
            OpenApiParameter(name="caseId", type=str, location=OpenApiParameter.QUERY, description="Only evidence linked to this case."),
            OpenApiParameter(name="evidenceType", type=str, location=OpenApiParameter.QUERY, description="Evidence type (case-insensitive)."),
            OpenApiParameter(name="status", type=str, location=OpenApiParameter.QUERY, description="Status (case-insensitive)."),
            OpenApiParameter(name="search", type=str, location=OpenApiParameter.QUERY, description="Free-text search."),
        ],
        tags=["Evidence"],
    ),
    create=extend_schema(
        summary="Register evidence",
        responses={
            201: EvidenceSerializer,
            400: OpenApiResponse(description="Validation error."),
        },
        tags=["Evidence"],
    ),
    retrieve=extend_schema(summary="Retrieve evidence", tags=["Evidence"]),
    update=extend_schema(summary="Update evidence", tags=["Evidence"]),
    partial_update=extend_schema(summary="Partially update evidence", tags=["Evidence"]),
    destroy=extend_schema(summary="Delete evidence", responses={200: MessageSerializer}, tags=["Evidence"]),
)
class EvidenceViewSet(ResourceViewSet):
    """/api/evidence"""

    serializer_class = EvidenceSerializer
    filter_serializer_class = EvidenceFilterSerializer
    store = EvidenceService
    singular = "evidence"
    plural = "evidence"
