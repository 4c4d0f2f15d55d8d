from django.contrib import admin

from .models import Evidence


@admin.register(Evidence)
class EvidenceAdmin(admin.ModelAdmin):
    list_display = ("id", "evidence_number", "title", "evidence_type", "case_id",
                    "status", "created_at")
    list_filter = ("evidence_type", "status")
    search_fields = ("evidence_number", "title", "description")
    readonly_fields = ("created_at", "updated_at")
