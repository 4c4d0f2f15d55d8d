from django.contrib import admin

from .models import Report


@admin.register(Report)
class ReportAdmin(admin.ModelAdmin):
    list_display = ("report_number", "title", "report_type", "status", "priority", "created_at")
    list_filter = ("report_type", "status", "priority")
    search_fields = ("report_number", "title", "content")
    readonly_fields = ("created_at", "updated_at")
