"""
Cases Service Layer.

``CaseService`` is the case store: the shared ``ResourceStore``
capabilities plus case-number generation and list filters.
"""

from __future__ import annotations

from typing import Any

from django.db.models import Q, QuerySet

from core.constants import CASE_NUMBER_PREFIX
from core.domain.references import generate_reference_number
from core.domain.store import ResourceStore

from .models import Case


class CaseService(ResourceStore):
    model = Case
    label = "Case"

    @classmethod
    def build_defaults(cls, data: dict[str, Any], requesting_user: Any = None) -> dict[str, Any]:
        defaults: dict[str, Any] = {}
        if not data.get("case_number"):
            defaults["case_number"] = generate_reference_number(CASE_NUMBER_PREFIX)
        if requesting_user is not None and requesting_user.is_authenticated:
            defaults["created_by_id"] = requesting_user.pk
        return defaults

    @classmethod
    def filter_queryset(cls, qs: QuerySet, filters: dict[str, Any]) -> QuerySet:
        if filters.get("status"):
            qs = qs.filter(status__iexact=filters["status"])
        if filters.get("priority"):
            qs = qs.filter(priority__iexact=filters["priority"])

        search = filters.get("search")
        if search:
            qs = qs.filter(
                Q(case_number__icontains=search)
                | Q(title__icontains=search)
                | Q(description__icontains=search)
                | Q(location__icontains=search)
            )
        return qs
