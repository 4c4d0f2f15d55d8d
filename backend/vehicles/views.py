"""
Vehicles app ViewSets.

``LicensePlateViewSet`` adds the lookup by plate number;
``PoliceVehicleViewSet`` adds the two PATCH shortcuts used by dispatch
to move a vehicle or change its status without sending the whole record.
"""

from __future__ import annotations

from drf_spectacular.utils import (
    OpenApiParameter,
    OpenApiResponse,
    extend_schema,
    extend_schema_view,
)
from rest_framework import status
from rest_framework.decorators import action
from rest_framework.request import Request
from rest_framework.response import Response

from core.serializers import MessageSerializer
from core.views import ResourceViewSet

from .serializers import (
    LicensePlateFilterSerializer,
    LicensePlateSerializer,
    PoliceVehicleFilterSerializer,
    PoliceVehicleSerializer,
    VehicleLocationSerializer,
    VehicleStatusSerializer,
)
from .services import LicensePlateService, PoliceVehicleService


@extend_schema_view(
    list=extend_schema(
        summary="List license plates",
        parameters=[
            OpenApiParameter(name="status", type=str, location=OpenApiParameter.QUERY, description="Status (case-insensitive)."),
            OpenApiParameter(name="search", type=str, location=OpenApiParameter.QUERY, description="Partial match on plate, owner, make or model."),
        ],
        tags=["License Plates"],
    ),
    create=extend_schema(
        summary="Register a license plate",
        responses={
            201: LicensePlateSerializer,
            400: OpenApiResponse(description="Validation error."),
            409: OpenApiResponse(description="Plate already registered."),
        },
        tags=["License Plates"],
    ),
    retrieve=extend_schema(summary="Retrieve a license plate", tags=["License Plates"]),
    update=extend_schema(summary="Update a license plate", tags=["License Plates"]),
    partial_update=extend_schema(summary="Partially update a license plate", tags=["License Plates"]),
    destroy=extend_schema(summary="Delete a license plate", responses={200: MessageSerializer}, tags=["License Plates"]),
)
class LicensePlateViewSet(ResourceViewSet):
    """/api/license-plates"""

    serializer_class = LicensePlateSerializer
    filter_serializer_class = LicensePlateFilterSerializer
    store = LicensePlateService
    singular = "licensePlate"
    plural = "licensePlates"

    @extend_schema(
        summary="Look up a plate by number",
        parameters=[
            OpenApiParameter(name="plate_number", type=str, location=OpenApiParameter.PATH, description="Plate number (any case)."),
        ],
        responses={
            200: LicensePlateSerializer,
            404: OpenApiResponse(description="License plate not found."),
        },
        tags=["License Plates"],
    )
    @action(detail=False, methods=["get"], url_path=r"search/(?P<plate_number>[^/]+)")
    def search(self, request: Request, plate_number: str = None) -> Response:
        plate = self.store.get_by_plate_number(plate_number)
        return Response(self.envelope(plate), status=status.HTTP_200_OK)


@extend_schema_view(
    list=extend_schema(
        summary="List police vehicles",
        parameters=[
            OpenApiParameter(name="status", type=str, location=OpenApiParameter.QUERY, description="available, on_patrol, responding or out_of_service."),
        ],
        tags=["Police Vehicles"],
    ),
    create=extend_schema(
        summary="Add a vehicle to the fleet",
        responses={
            201: PoliceVehicleSerializer,
            400: OpenApiResponse(description="Validation error."),
            409: OpenApiResponse(description="Vehicle number already in use."),
        },
        tags=["Police Vehicles"],
    ),
    retrieve=extend_schema(summary="Retrieve a police vehicle", tags=["Police Vehicles"]),
    update=extend_schema(summary="Update a police vehicle", tags=["Police Vehicles"]),
    partial_update=extend_schema(summary="Partially update a police vehicle", tags=["Police Vehicles"]),
    destroy=extend_schema(summary="Delete a police vehicle", responses={200: MessageSerializer}, tags=["Police Vehicles"]),
)
class PoliceVehicleViewSet(ResourceViewSet):
    """/api/police-vehicles"""

    serializer_class = PoliceVehicleSerializer
    filter_serializer_class = PoliceVehicleFilterSerializer
    store = PoliceVehicleService
    singular = "vehicle"
    plural = "vehicles"

    @extend_schema(
        summary="Update a vehicle's position",
        request=VehicleLocationSerializer,
        responses={
            200: PoliceVehicleSerializer,
            400: OpenApiResponse(description="Location is not a valid [longitude, latitude] pair."),
            404: OpenApiResponse(description="Police vehicle not found."),
        },
        tags=["Police Vehicles"],
    )
    @action(detail=True, methods=["patch"], url_path="location")
    def update_location(self, request: Request, pk: str = None) -> Response:
        serializer = VehicleLocationSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        vehicle = self.store.update_location(
            pk,
            serializer.validated_data["longitude"],
            serializer.validated_data["latitude"],
        )
        return Response(self.envelope(vehicle), status=status.HTTP_200_OK)

    @extend_schema(
        summary="Update a vehicle's status",
        request=VehicleStatusSerializer,
        responses={
            200: PoliceVehicleSerializer,
            400: OpenApiResponse(description="Unknown status."),
            404: OpenApiResponse(description="Police vehicle not found."),
        },
        tags=["Police Vehicles"],
    )
    @action(detail=True, methods=["patch"], url_path="status")
    def update_status(self, request: Request, pk: str = None) -> Response:
        serializer = VehicleStatusSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        vehicle = self.store.update_status(pk, serializer.validated_data["status"])
        return Response(self.envelope(vehicle), status=status.HTTP_200_OK)
