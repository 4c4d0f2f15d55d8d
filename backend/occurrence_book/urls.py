from django.urls import include, path

from core.routers import OptionalSlashRouter

from .views import OBEntryViewSet

router = OptionalSlashRouter()
router.register(r"ob-entries", OBEntryViewSet, basename="ob-entry")

urlpatterns = [
    path("", include(router.urls)),
]
