"""
Evidence Service Layer.

``EvidenceService`` stores evidence items, numbering them on creation and
filtering them by case, type, status or free text.
"""

from __future__ import annotations

from typing import Any

from django.db.models import Q, QuerySet

from core.constants import EVIDENCE_NUMBER_PREFIX
from core.domain.references import generate_reference_number
from core.domain.store import ResourceStore

from .models import Evidence


class EvidenceService(ResourceStore):
    model = Evidence
    label = "Evidence"

    @classmethod
    def build_defaults(cls, data: dict[str, Any], requesting_user: Any = None) -> dict[str, Any]:
        defaults: dict[str, Any] = {}
        if not data.get("evidence_number"):
            defaults["evidence_number"] = generate_reference_number(EVIDENCE_NUMBER_PREFIX)
        if requesting_user is not None and requesting_user.is_authenticated:
            defaults["registered_by_id"] = requesting_user.pk
        return defaults

    @classmethod
    def filter_queryset(cls, qs: QuerySet, filters: dict[str, Any]) -> QuerySet:
        if filters.get("case_id") is not None:
            qs = qs.filter(case_id=filters["case_id"])
        if filters.get("evidence_type"):
            qs = qs.filter(evidence_type__iexact=filters["evidence_type"])
        if filters.get("status"):
            qs = qs.filter(status__iexact=filters["status"])

        search = filters.get("search")
        if search:
            qs = qs.filter(
                Q(evidence_number__icontains=search)
                | Q(title__icontains=search)
                | Q(description__icontains=search)
                | Q(collected_by__icontains=search)
            )
        return qs
