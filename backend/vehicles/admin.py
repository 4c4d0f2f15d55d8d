from django.contrib import admin

from .models import LicensePlate, PoliceVehicle


@admin.register(LicensePlate)
class LicensePlateAdmin(admin.ModelAdmin):
    list_display = ("plate_number", "owner_name", "vehicle_make", "vehicle_model", "status")
    list_filter = ("status",)
    search_fields = ("plate_number", "owner_name")
    readonly_fields = ("created_at", "updated_at")


@admin.register(PoliceVehicle)
class PoliceVehicleAdmin(admin.ModelAdmin):
    list_display = ("vehicle_number", "make", "model", "plate_number", "assigned_officer", "status")
    list_filter = ("status",)
    search_fields = ("vehicle_number", "plate_number", "assigned_officer")
    readonly_fields = ("created_at", "updated_at")
