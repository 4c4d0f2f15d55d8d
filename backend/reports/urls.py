from django.urls import include, path

from core.routers import OptionalSlashRouter

from .views import ReportViewSet

router = OptionalSlashRouter()
router.register(r"reports", ReportViewSet, basename="report")

urlpatterns = [
    path("", include(router.urls)),
]
