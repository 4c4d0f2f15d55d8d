"""
Vehicles Service Layer.

- ``LicensePlateService``  — plate register with lookup by plate number.
- ``PoliceVehicleService`` — fleet register with direct position and
  status updates.
"""

from __future__ import annotations

import logging
from typing import Any

from django.db.models import Q, QuerySet

from core.domain.exceptions import NotFound
from core.domain.store import ResourceStore

from .models import LicensePlate, PoliceVehicle
from .serializers import normalise_plate_number

logger = logging.getLogger(__name__)


class LicensePlateService(ResourceStore):
    model = LicensePlate
    label = "License plate"

    @classmethod
    def build_defaults(cls, data: dict[str, Any], requesting_user: Any = None) -> dict[str, Any]:
        if requesting_user is not None and requesting_user.is_authenticated:
            return {"added_by_id": requesting_user.pk}
        return {}

    @classmethod
    def filter_queryset(cls, qs: QuerySet, filters: dict[str, Any]) -> QuerySet:
        if filters.get("status"):
            qs = qs.filter(status__iexact=filters["status"])

        search = filters.get("search")
        if search:
            qs = qs.filter(
                Q(plate_number__icontains=search)
                | Q(owner_name__icontains=search)
                | Q(vehicle_make__icontains=search)
                | Q(vehicle_model__icontains=search)
            )
        return qs

    @classmethod
    def get_by_plate_number(cls, plate_number: str) -> LicensePlate:
        """Exact, case-insensitive lookup; ``NotFound`` when unregistered."""
        plate = cls.get_queryset().filter(
            plate_number__iexact=normalise_plate_number(plate_number),
        ).first()
        if plate is None:
            raise NotFound("License plate not found.")
        return plate


class PoliceVehicleService(ResourceStore):
    model = PoliceVehicle
    label = "Police vehicle"

    @classmethod
    def filter_queryset(cls, qs: QuerySet, filters: dict[str, Any]) -> QuerySet:
        if filters.get("status"):
            qs = qs.filter(status=filters["status"])
        return qs

    @classmethod
    def update_location(cls, pk: Any, longitude: float, latitude: float) -> PoliceVehicle:
        vehicle = cls.update(pk, {"longitude": longitude, "latitude": latitude})
        logger.debug("Vehicle %s moved to (%s, %s)", vehicle.pk, longitude, latitude)
        return vehicle

    @classmethod
    def update_status(cls, pk: Any, status: str) -> PoliceVehicle:
        vehicle = cls.update(pk, {"status": status})
        logger.info("Vehicle %s is now %s", vehicle.pk, status)
        return vehicle
