"""
Reports app ViewSets.
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

from .serializers import ReportFilterSerializer, ReportSerializer
from .services import ReportService


@extend_schema_view(
    list=extend_schema(
        summary="List reports",
        parameters=[
            OpenApiParameter(name="type", type=str, location=OpenApiParameter.QUERY, description="Incident, Case Summary, Evidence, Warranty or Investigation."),
            OpenApiParameter(name="status", type=str, location=OpenApiParameter.QUERY, description="Pending, Approved, Completed or Rejected."),
            OpenApiParameter(name="priority", type=str, location=OpenApiParameter.QUERY, description="Low, Medium, High or Urgent."),
            OpenApiParameter(name="caseId", type=str, location=OpenApiParameter.QUERY, description="Only reports about this case."),
            OpenApiParameter(name="search", type=str, location=OpenApiParameter.QUERY, description="Free-text search on number, title and content."),
        ],
        tags=["Reports"],
    ),
    create=extend_schema(
        summary="File a report",
        responses={
            201: ReportSerializer,
            400: OpenApiResponse(description="Validation error, e.g. unknown status or priority."),
        },
        tags=["Reports"],
    ),
    retrieve=extend_schema(summary="Retrieve a report", tags=["Reports"]),
    update=extend_schema(summary="Update a report", tags=["Reports"]),
    partial_update=extend_schema(summary="Partially update a report", tags=["Reports"]),
    destroy=extend_schema(summary="Delete a report", responses={200: MessageSerializer}, tags=["Reports"]),
)
class ReportViewSet(ResourceViewSet):
    """/api/reports"""

    serializer_class = ReportSerializer
    filter_serializer_class = ReportFilterSerializer
    store = ReportService
    singular = "report"
    plural = "reports"
