"""
URL configuration for the geofiles app.

Endpoint Map
------------
    GET    /geofiles                          → GeofileViewSet.list
    POST   /geofiles                          → GeofileViewSet.create
    GET    /geofiles/search/by-location       → GeofileViewSet.search_by_location
    GET    /geofiles/{id}                     → GeofileViewSet.retrieve
    PUT    /geofiles/{id}                     → GeofileViewSet.update
    PATCH  /geofiles/{id}                     → GeofileViewSet.partial_update
    DELETE /geofiles/{id}                     → GeofileViewSet.destroy
    GET    /geofiles/{id}/download            → GeofileViewSet.download
    POST   /geofiles/{id}/link-case/{caseId}  → GeofileViewSet.link_case
    POST   /geofiles/{id}/add-tags            → GeofileViewSet.add_tags
"""

from django.urls import include, path

from core.routers import OptionalSlashRouter

from .views import GeofileViewSet

router = OptionalSlashRouter()
router.register(r"geofiles", GeofileViewSet, basename="geofile")

urlpatterns = [
    path("", include(router.urls)),
]
