from django.contrib import admin

from .models import Geofile, GeofileTag


@admin.register(Geofile)
class GeofileAdmin(admin.ModelAdmin):
    list_display = ("id", "filename", "file_type", "access_level",
                    "download_count", "last_accessed_at", "created_at")
    list_filter = ("file_type", "access_level", "tags")
    search_fields = ("filename", "description")
    filter_horizontal = ("tags",)
    readonly_fields = ("download_count", "last_accessed_at", "created_at", "updated_at")


@admin.register(GeofileTag)
class GeofileTagAdmin(admin.ModelAdmin):
    search_fields = ("name",)
