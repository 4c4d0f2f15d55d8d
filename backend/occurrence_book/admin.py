from django.contrib import admin

from .models import OBEntry


@admin.register(OBEntry)
class OBEntryAdmin(admin.ModelAdmin):
    list_display = ("ob_number", "entry_type", "status", "officer", "recorded_at")
    list_filter = ("status", "entry_type")
    search_fields = ("ob_number", "description", "reported_by", "location")
    date_hierarchy = "recorded_at"
    readonly_fields = ("created_at", "updated_at")
