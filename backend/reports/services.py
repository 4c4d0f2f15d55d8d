"""
Reports Service Layer.
"""

from __future__ import annotations

from typing import Any

from django.db.models import Q, QuerySet

from core.constants import REPORT_NUMBER_PREFIX
from core.domain.references import generate_reference_number
from core.domain.store import ResourceStore

from .models import Report


class ReportService(ResourceStore):
    """Report store: numbering on create plus list filters."""

    model = Report
    label = "Report"

    @classmethod
    def build_defaults(cls, data: dict[str, Any], requesting_user: Any = None) -> dict[str, Any]:
        defaults: dict[str, Any] = {}
        if not data.get("report_number"):
            defaults["report_number"] = generate_reference_number(REPORT_NUMBER_PREFIX)
        if requesting_user is not None and requesting_user.is_authenticated:
            defaults["requested_by_id"] = requesting_user.pk
        return defaults

    @classmethod
    def filter_queryset(cls, qs: QuerySet, filters: dict[str, Any]) -> QuerySet:
        for field in ("report_type", "status", "priority", "case_id"):
            value = filters.get(field)
            if value is not None and value != "":
                qs = qs.filter(**{field: value})

        search = filters.get("search")
        if search:
            qs = qs.filter(
                Q(report_number__icontains=search)
                | Q(title__icontains=search)
                | Q(content__icontains=search)
            )
        return qs
