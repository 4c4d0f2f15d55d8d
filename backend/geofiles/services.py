"""
Geofiles Service Layer.

``GeofileService`` extends the shared store with everything specific to
geofiles:

- tag sets (normalised ``GeofileTag`` rows, "any of" filtering),
- read tracking (``last_accessed_at``) and download counting,
- location search within a radius,
- linking cases and adding tags after creation.
"""

from __future__ import annotations

import logging
from typing import Any

from django.db import transaction
from django.db.models import Q, QuerySet

from core.domain.geo import bounding_box, planar_distance_m
from core.domain.store import ResourceStore

from .models import Geofile, GeofileTag

logger = logging.getLogger(__name__)


class GeofileService(ResourceStore):
    model = Geofile
    label = "Geofile"

    # ── Hooks ────────────────────────────────────────────────────────

    @classmethod
    def get_queryset(cls) -> QuerySet:
        return Geofile.objects.prefetch_related("tags")

    @classmethod
    def build_defaults(cls, data: dict[str, Any], requesting_user: Any = None) -> dict[str, Any]:
        defaults: dict[str, Any] = {"download_count": 0}
        if requesting_user is not None and requesting_user.is_authenticated:
            defaults["uploaded_by_id"] = requesting_user.pk
        return defaults

    @classmethod
    def filter_queryset(cls, qs: QuerySet, filters: dict[str, Any]) -> QuerySet:
        search = filters.get("search")
        if search:
            qs = qs.filter(
                Q(filename__icontains=search) | Q(description__icontains=search)
            )
        if filters.get("file_type"):
            qs = qs.filter(file_type=filters["file_type"])
        if filters.get("tags"):
            qs = qs.filter(tags__name__in=filters["tags"]).distinct()
        if filters.get("access_level"):
            qs = qs.filter(access_level__iexact=filters["access_level"])
        if filters.get("date_from"):
            qs = qs.filter(created_at__date__gte=filters["date_from"])
        if filters.get("date_to"):
            qs = qs.filter(created_at__date__lte=filters["date_to"])
        return qs

    # ── Capabilities ─────────────────────────────────────────────────

    @classmethod
    def create(cls, data: dict[str, Any], *, requesting_user: Any = None) -> Geofile:
        data = dict(data)
        tags = data.pop("tags", None)
        with transaction.atomic():
            geofile = super().create(data, requesting_user=requesting_user)
            if tags:
                geofile.tags.set(cls._resolve_tags(tags))
        return geofile

    @classmethod
    def update(cls, instance_or_pk: Any, data: dict[str, Any]) -> Geofile:
        """Merge submitted fields; a submitted ``tags`` list replaces the set."""
        data = dict(data)
        tags = data.pop("tags", None)
        with transaction.atomic():
            geofile = super().update(instance_or_pk, data)
            if tags is not None:
                geofile.tags.set(cls._resolve_tags(tags))
        return geofile

    # ── Derived operations ───────────────────────────────────────────

    @classmethod
    def access(cls, pk: Any) -> Geofile:
        """Fetch a geofile for reading and stamp ``last_accessed_at``."""
        cls.touch_timestamp(pk, "last_accessed_at")
        return cls.get(pk)

    @classmethod
    def download(cls, pk: Any) -> Geofile:
        """
        Resolve a geofile for download and count the download.

        The counter moves by exactly one per call.
        """
        geofile = cls.get(pk)
        cls.increment_counter(geofile.pk, "download_count")
        logger.info("Geofile %s downloaded", geofile.pk)
        return geofile

    @classmethod
    def search_by_location(cls, lat: float, lng: float, radius_m: float) -> list[Geofile]:
        """
        Geofiles whose point lies within ``radius_m`` metres of
        (``lat``, ``lng``), nearest first.  Geofiles without coordinates
        never match.
        """
        min_lat, max_lat, min_lng, max_lng = bounding_box(lat, lng, radius_m)
        candidates = cls.get_queryset().filter(
            latitude__isnull=False,
            longitude__isnull=False,
            latitude__range=(min_lat, max_lat),
            longitude__range=(min_lng, max_lng),
        )

        matches = []
        for geofile in candidates:
            distance = planar_distance_m(lat, lng, geofile.latitude, geofile.longitude)
            if distance <= radius_m:
                matches.append((distance, geofile.pk, geofile))
        matches.sort(key=lambda match: (match[0], match[1]))
        return [geofile for _, _, geofile in matches]

    @classmethod
    def link_case(cls, pk: Any, case_id: int) -> Geofile:
        """Add ``case_id`` to the geofile's linked cases (set semantics)."""
        geofile = cls.get(pk)
        linked = list(geofile.linked_case_ids or [])
        if case_id not in linked:
            linked.append(case_id)
        geofile = cls.update(geofile, {"linked_case_ids": linked})
        logger.info("Geofile %s linked to case %s", geofile.pk, case_id)
        return geofile

    @classmethod
    def add_tags(cls, pk: Any, tags: list[str]) -> Geofile:
        """Union ``tags`` into the geofile's tag set."""
        geofile = cls.get(pk)
        with transaction.atomic():
            geofile.tags.add(*cls._resolve_tags(tags))
            geofile = cls.update(geofile, {})
        return geofile

    # ── Helpers ──────────────────────────────────────────────────────

    @staticmethod
    def _resolve_tags(names: list[str]) -> list[GeofileTag]:
        return [GeofileTag.objects.get_or_create(name=name)[0] for name in names]
