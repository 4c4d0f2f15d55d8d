"""
URL configuration for the police_system project.

Every API route lives under ``/api/``; each app contributes its own
router and the routes answer with or without a trailing slash.
"""
from django.contrib import admin
from django.urls import include, path

from drf_spectacular.views import SpectacularAPIView, SpectacularSwaggerView

urlpatterns = [
    path('admin/', admin.site.urls),

    # ── Swagger / OpenAPI schema ─────────────────────────────────────
    path('api/schema/', SpectacularAPIView.as_view(), name='schema'),
    path('api/docs/', SpectacularSwaggerView.as_view(url_name='schema'), name='swagger-ui'),

    # ── App routes ───────────────────────────────────────────────────
    path('api/', include('accounts.urls')),
    path('api/', include('cases.urls')),
    path('api/', include('occurrence_book.urls')),
    path('api/', include('evidence.urls')),
    path('api/', include('geofiles.urls')),
    path('api/', include('reports.urls')),
    path('api/', include('vehicles.urls')),
]
