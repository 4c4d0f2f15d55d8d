"""
Vehicles app models.

Two unrelated registers live here:

- ``LicensePlate``   — plates of interest, looked up by plate number.
- ``PoliceVehicle``  — the force's own fleet, with a live status and
  last-known position.
"""

from django.db import models

from core.models import TimeStampedModel


class LicensePlate(TimeStampedModel):
    """
    A registered plate.  ``plate_number`` is stored upper-case without
    surrounding whitespace so lookups are case-insensitive.
    """

    plate_number = models.CharField(
        max_length=20,
        unique=True,
        verbose_name="Plate Number",
    )
    owner_name = models.CharField(max_length=255, blank=True, default="", verbose_name="Owner Name")
    vehicle_make = models.CharField(max_length=100, blank=True, default="", verbose_name="Vehicle Make")
    vehicle_model = models.CharField(max_length=100, blank=True, default="", verbose_name="Vehicle Model")
    vehicle_color = models.CharField(max_length=50, blank=True, default="", verbose_name="Vehicle Color")
    status = models.CharField(
        max_length=50,
        default="Active",
        db_index=True,
        verbose_name="Status",
    )
    notes = models.TextField(blank=True, default="", verbose_name="Notes")
    added_by_id = models.PositiveBigIntegerField(null=True, blank=True, verbose_name="Added By (user id)")

    class Meta:
        verbose_name = "License Plate"
        verbose_name_plural = "License Plates"
        ordering = ["id"]

    def __str__(self):
        return self.plate_number


class VehicleStatus(models.TextChoices):
    AVAILABLE = "available", "Available"
    ON_PATROL = "on_patrol", "On Patrol"
    RESPONDING = "responding", "Responding"
    OUT_OF_SERVICE = "out_of_service", "Out of Service"


class PoliceVehicle(TimeStampedModel):
    """
    A fleet vehicle.

    The position is kept as two columns and exposed to clients as a
    single ``[longitude, latitude]`` pair.
    """

    vehicle_number = models.CharField(
        max_length=50,
        unique=True,
        verbose_name="Vehicle Number",
        help_text="Call sign painted on the vehicle.",
    )
    make = models.CharField(max_length=100, blank=True, default="", verbose_name="Make")
    model = models.CharField(max_length=100, blank=True, default="", verbose_name="Model")
    plate_number = models.CharField(max_length=20, blank=True, default="", verbose_name="Plate Number")
    assigned_officer = models.CharField(max_length=255, blank=True, default="", verbose_name="Assigned Officer")
    status = models.CharField(
        max_length=20,
        choices=VehicleStatus.choices,
        default=VehicleStatus.AVAILABLE,
        db_index=True,
        verbose_name="Status",
    )
    longitude = models.FloatField(null=True, blank=True, verbose_name="Longitude")
    latitude = models.FloatField(null=True, blank=True, verbose_name="Latitude")

    class Meta:
        verbose_name = "Police Vehicle"
        verbose_name_plural = "Police Vehicles"
        ordering = ["id"]

    def __str__(self):
        return f"{self.vehicle_number} ({self.get_status_display()})"

    @property
    def location(self) -> list[float] | None:
        if self.longitude is None or self.latitude is None:
            return None
        return [self.longitude, self.latitude]
