"""
Vehicles app serializers.
"""

from __future__ import annotations

from typing import Any

from rest_framework import serializers

from core.serializers import ReferenceField, TimeStampedSerializer

from .models import LicensePlate, PoliceVehicle, VehicleStatus


def normalise_plate_number(value: str) -> str:
    return value.strip().upper()


# ═══════════════════════════════════════════════════════════════════
#  License plates
# ═══════════════════════════════════════════════════════════════════


class LicensePlateSerializer(TimeStampedSerializer):
    plateNumber = serializers.CharField(source="plate_number", max_length=20)
    ownerName = serializers.CharField(source="owner_name", max_length=255, required=False, allow_blank=True)
    vehicleMake = serializers.CharField(source="vehicle_make", max_length=100, required=False, allow_blank=True)
    vehicleModel = serializers.CharField(source="vehicle_model", max_length=100, required=False, allow_blank=True)
    vehicleColor = serializers.CharField(source="vehicle_color", max_length=50, required=False, allow_blank=True)
    status = serializers.CharField(max_length=50, required=False)
    notes = serializers.CharField(required=False, allow_blank=True)
    addedById = ReferenceField(source="added_by_id", read_only=True)

    class Meta:
        model = LicensePlate
        fields = [
            *TimeStampedSerializer.COMMON_FIELDS,
            "plateNumber",
            "ownerName",
            "vehicleMake",
            "vehicleModel",
            "vehicleColor",
            "status",
            "notes",
            "addedById",
        ]

    def validate_plateNumber(self, value: str) -> str:
        value = normalise_plate_number(value)
        if not value:
            raise serializers.ValidationError("This field may not be blank.")
        return value


class LicensePlateFilterSerializer(serializers.Serializer):
    """Query parameters accepted by ``GET /license-plates``."""

    status = serializers.CharField(required=False, max_length=50)
    search = serializers.CharField(required=False, max_length=255)


# ═══════════════════════════════════════════════════════════════════
#  Police vehicles
# ═══════════════════════════════════════════════════════════════════


class LocationField(serializers.Field):
    """
    ``[longitude, latitude]`` pair backed by the model's ``longitude`` and
    ``latitude`` columns.  Renders ``null`` while no position is known.
    """

    default_error_messages = {
        "invalid": "Invalid location format. Expected [longitude, latitude].",
        "longitude": "Longitude must be between -180 and 180.",
        "latitude": "Latitude must be between -90 and 90.",
    }

    def __init__(self, **kwargs):
        kwargs["source"] = "*"
        super().__init__(**kwargs)

    def to_internal_value(self, data: Any) -> dict[str, float]:
        if not isinstance(data, (list, tuple)) or len(data) != 2:
            self.fail("invalid")
        if any(isinstance(v, bool) or not isinstance(v, (int, float)) for v in data):
            self.fail("invalid")

        longitude, latitude = float(data[0]), float(data[1])
        if not -180 <= longitude <= 180:
            self.fail("longitude")
        if not -90 <= latitude <= 90:
            self.fail("latitude")
        return {"longitude": longitude, "latitude": latitude}

    def to_representation(self, instance: PoliceVehicle) -> list[float] | None:
        return instance.location


class PoliceVehicleSerializer(TimeStampedSerializer):
    vehicleNumber = serializers.CharField(source="vehicle_number", max_length=50)
    make = serializers.CharField(max_length=100, required=False, allow_blank=True)
    model = serializers.CharField(max_length=100, required=False, allow_blank=True)
    plateNumber = serializers.CharField(source="plate_number", max_length=20, required=False, allow_blank=True)
    assignedOfficer = serializers.CharField(
        source="assigned_officer", max_length=255, required=False, allow_blank=True,
    )
    status = serializers.ChoiceField(choices=VehicleStatus.choices, required=False)
    location = LocationField(required=False)

    class Meta:
        model = PoliceVehicle
        fields = [
            *TimeStampedSerializer.COMMON_FIELDS,
            "vehicleNumber",
            "make",
            "model",
            "plateNumber",
            "assignedOfficer",
            "status",
            "location",
        ]

    def validate_plateNumber(self, value: str) -> str:
        return normalise_plate_number(value)


class VehicleLocationSerializer(serializers.Serializer):
    """Body of ``PATCH /police-vehicles/{id}/location``."""

    location = LocationField()


class VehicleStatusSerializer(serializers.Serializer):
    """Body of ``PATCH /police-vehicles/{id}/status``."""

    status = serializers.ChoiceField(
        choices=VehicleStatus.choices,
        error_messages={
            "invalid_choice": (
                "Invalid status. Must be one of: "
                + ", ".join(VehicleStatus.values)
                + "."
            ),
        },
    )


class PoliceVehicleFilterSerializer(serializers.Serializer):
    """Query parameters accepted by ``GET /police-vehicles``."""

    status = serializers.ChoiceField(choices=VehicleStatus.choices, required=False)
