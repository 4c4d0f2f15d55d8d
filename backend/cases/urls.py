"""
URL configuration for the cases app.

Included in the project-level ``urls.py`` under ``api/``.
"""

from django.urls import include, path

from core.routers import OptionalSlashRouter

from .views import CaseViewSet

router = OptionalSlashRouter()
router.register(r"cases", CaseViewSet, basename="case")

urlpatterns = [
    path("", include(router.urls)),
]
