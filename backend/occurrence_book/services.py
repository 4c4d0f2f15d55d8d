"""
Occurrence book Service Layer.
"""

from __future__ import annotations

from typing import Any

from django.db.models import Q, QuerySet

from core.constants import OB_NUMBER_PREFIX
from core.domain.references import generate_reference_number
from core.domain.store import ResourceStore

from .models import OBEntry


class OBEntryService(ResourceStore):
    """
    Store for occurrence-book entries.

    New entries get an ``OB-<year>-<suffix>`` number unless one is
    supplied, and remember the account that recorded them.
    """

    model = OBEntry
    label = "OB entry"

    @classmethod
    def build_defaults(cls, data: dict[str, Any], requesting_user: Any = None) -> dict[str, Any]:
        defaults: dict[str, Any] = {}
        if not data.get("ob_number"):
            defaults["ob_number"] = generate_reference_number(OB_NUMBER_PREFIX)
        if requesting_user is not None and requesting_user.is_authenticated:
            defaults["recording_officer_id"] = requesting_user.pk
        return defaults

    @classmethod
    def filter_queryset(cls, qs: QuerySet, filters: dict[str, Any]) -> QuerySet:
        if filters.get("status"):
            qs = qs.filter(status=filters["status"])
        if filters.get("type"):
            qs = qs.filter(entry_type__iexact=filters["type"])
        if filters.get("date_from"):
            qs = qs.filter(recorded_at__date__gte=filters["date_from"])
        if filters.get("date_to"):
            qs = qs.filter(recorded_at__date__lte=filters["date_to"])

        search = filters.get("search")
        if search:
            qs = qs.filter(
                Q(ob_number__icontains=search)
                | Q(description__icontains=search)
                | Q(reported_by__icontains=search)
                | Q(location__icontains=search)
                | Q(details__icontains=search)
            )
        return qs
