"""
URL configuration for the evidence app.

Endpoint Map
------------
    GET    /evidence           → EvidenceViewSet.list
    POST   /evidence           → EvidenceViewSet.create
    GET    /evidence/{id}      → EvidenceViewSet.retrieve
    PUT    /evidence/{id}      → EvidenceViewSet.update
    PATCH  /evidence/{id}      → EvidenceViewSet.partial_update
    DELETE /evidence/{id}      → EvidenceViewSet.destroy
"""

from django.urls import include, path

from core.routers import OptionalSlashRouter

from .views import EvidenceViewSet

router = OptionalSlashRouter()
router.register(r"evidence", EvidenceViewSet, basename="evidence")

urlpatterns = [
    path("", include(router.urls)),
]
