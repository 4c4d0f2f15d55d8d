"""
URL configuration for the vehicles app.

Endpoint Map
------------
    GET    /license-plates                       → LicensePlateViewSet.list
    POST   /license-plates                       → LicensePlateViewSet.create
    GET    /license-plates/search/{plateNumber}  → LicensePlateViewSet.search
    GET    /license-plates/{id}                  → LicensePlateViewSet.retrieve
    PUT    /license-plates/{id}                  → LicensePlateViewSet.update
    PATCH  /license-plates/{id}                  → LicensePlateViewSet.partial_update
    DELETE /license-plates/{id}                  → LicensePlateViewSet.destroy

    GET    /police-vehicles                      → PoliceVehicleViewSet.list
    POST   /police-vehicles                      → PoliceVehicleViewSet.create
    GET    /police-vehicles/{id}                 → PoliceVehicleViewSet.retrieve
    PUT    /police-vehicles/{id}                 → PoliceVehicleViewSet.update
    PATCH  /police-vehicles/{id}                 → PoliceVehicleViewSet.partial_update
    DELETE /police-vehicles/{id}                 → PoliceVehicleViewSet.destroy
    PATCH  /police-vehicles/{id}/location        → PoliceVehicleViewSet.update_location
    PATCH  /police-vehicles/{id}/status          → PoliceVehicleViewSet.update_status
"""

from django.urls import include, path

from core.routers import OptionalSlashRouter

from .views import LicensePlateViewSet, PoliceVehicleViewSet

router = OptionalSlashRouter()
router.register(r"license-plates", LicensePlateViewSet, basename="license-plate")
router.register(r"police-vehicles", PoliceVehicleViewSet, basename="police-vehicle")

urlpatterns = [
    path("", include(router.urls)),
]
