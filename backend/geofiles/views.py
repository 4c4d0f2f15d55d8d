"""
Geofiles app ViewSets.

``GeofileViewSet`` inherits standard CRUD from ``ResourceViewSet`` and
adds the geofile-specific endpoints as ``@action`` methods.  Reading a
single geofile stamps its ``lastAccessedAt``.
"""

from __future__ import annotations

from drf_spectacular.types import OpenApiTypes
from drf_spectacular.utils import (
    OpenApiParameter,
    OpenApiResponse,
    extend_schema,
    extend_schema_view,
    inline_serializer,
)
from rest_framework import serializers, status
from rest_framework.decorators import action
from rest_framework.request import Request
from rest_framework.response import Response

from core.serializers import MessageSerializer
from core.views import ResourceViewSet

from .serializers import (
    AddTagsSerializer,
    DownloadSerializer,
    GeofileFilterSerializer,
    GeofileSerializer,
    LocationQuerySerializer,
)
from .services import GeofileService

GeofileActionResponse = inline_serializer(
    name="GeofileActionResponse",
    fields={
        "message": serializers.CharField(),
        "geofile": GeofileSerializer(),
    },
)


@extend_schema_view(
    list=extend_schema(
        summary="List geofiles",
        parameters=[
            OpenApiParameter(name="search", type=str, location=OpenApiParameter.QUERY, description="Partial match on filename or description."),
            OpenApiParameter(name="type", type=str, location=OpenApiParameter.QUERY, description="File type (any case)."),
            OpenApiParameter(name="tags", type=str, location=OpenApiParameter.QUERY, description="Comma-separated; matches geofiles carrying any of the tags."),
            OpenApiParameter(name="accessLevel", type=str, location=OpenApiParameter.QUERY, description="Access level (case-insensitive)."),
            OpenApiParameter(name="dateFrom", type=OpenApiTypes.DATE, location=OpenApiParameter.QUERY, description="Created on or after."),
            OpenApiParameter(name="dateTo", type=OpenApiTypes.DATE, location=OpenApiParameter.QUERY, description="Created on or before."),
        ],
        tags=["Geofiles"],
    ),
    create=extend_schema(
        summary="Register a geofile",
        responses={
            201: GeofileSerializer,
            400: OpenApiResponse(description="Validation error, e.g. unknown file type."),
        },
        tags=["Geofiles"],
    ),
    retrieve=extend_schema(summary="Retrieve a geofile", tags=["Geofiles"]),
    update=extend_schema(summary="Update a geofile", tags=["Geofiles"]),
    partial_update=extend_schema(summary="Partially update a geofile", tags=["Geofiles"]),
    destroy=extend_schema(summary="Delete a geofile", responses={200: MessageSerializer}, tags=["Geofiles"]),
)
class GeofileViewSet(ResourceViewSet):
    """/api/geofiles"""

    serializer_class = GeofileSerializer
    filter_serializer_class = GeofileFilterSerializer
    store = GeofileService
    singular = "geofile"
    plural = "geofiles"

    def retrieve(self, request: Request, pk: str = None) -> Response:
        geofile = self.store.access(pk)
        return Response(self.envelope(geofile), status=status.HTTP_200_OK)

    @extend_schema(
        summary="Download a geofile",
        description="Returns where to fetch the file and counts the download.",
        responses={
            200: DownloadSerializer,
            404: OpenApiResponse(description="Geofile not found."),
        },
        tags=["Geofiles"],
    )
    @action(detail=True, methods=["get"], url_path="download")
    def download(self, request: Request, pk: str = None) -> Response:
        geofile = self.store.download(pk)
        return Response(DownloadSerializer(geofile).data, status=status.HTTP_200_OK)

    @extend_schema(
        summary="Search geofiles by location",
        description="Geofiles within ``radius`` metres (default 1000) of the point, nearest first.",
        parameters=[LocationQuerySerializer],
        responses={
            200: GeofileSerializer(many=True),
            400: OpenApiResponse(description="Missing or out-of-range coordinates."),
        },
        tags=["Geofiles"],
    )
    @action(detail=False, methods=["get"], url_path="search/by-location")
    def search_by_location(self, request: Request) -> Response:
        query = LocationQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)
        geofiles = self.store.search_by_location(
            query.validated_data["lat"],
            query.validated_data["lng"],
            query.validated_data["radius"],
        )
        return Response(self.envelope(geofiles, many=True), status=status.HTTP_200_OK)

    @extend_schema(
        summary="Link a geofile to a case",
        request=None,
        parameters=[
            OpenApiParameter(name="case_id", type=int, location=OpenApiParameter.PATH, description="Case identifier (not checked for existence)."),
        ],
        responses={200: GeofileActionResponse, 404: OpenApiResponse(description="Geofile not found.")},
        tags=["Geofiles"],
    )
    @action(detail=True, methods=["post"], url_path=r"link-case/(?P<case_id>\d+)")
    def link_case(self, request: Request, pk: str = None, case_id: str = None) -> Response:
        geofile = self.store.link_case(pk, int(case_id))
        return Response(
            {"message": "Geofile linked to case successfully", "geofile": self.get_serializer(geofile).data},
            status=status.HTTP_200_OK,
        )

    @extend_schema(
        summary="Add tags to a geofile",
        request=AddTagsSerializer,
        responses={200: GeofileActionResponse, 404: OpenApiResponse(description="Geofile not found.")},
        tags=["Geofiles"],
    )
    @action(detail=True, methods=["post"], url_path="add-tags")
    def add_tags(self, request: Request, pk: str = None) -> Response:
        serializer = AddTagsSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        geofile = self.store.add_tags(pk, serializer.validated_data["tags"])
        return Response(
            {"message": "Tags added successfully", "geofile": self.get_serializer(geofile).data},
            status=status.HTTP_200_OK,
        )
