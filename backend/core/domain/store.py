"""
core.domain.store — The capability shape shared by every resource store.

Each app's service layer subclasses ``ResourceStore`` once per model and
adds its own filters and derived operations.  The base class only knows
how to create, fetch, list, update and delete a row, plus two derived
primitives (counter increment and timestamp touch) that write with a
single ``UPDATE`` statement.

Unique-constraint violations surface as ``Conflict``; any other database
failure during a write surfaces as ``StoreError``.

Usage::

    class ReportService(ResourceStore):
        model = Report
        label = "Report"

        @classmethod
        def filter_queryset(cls, qs, filters):
            status = filters.get("status")
            if status:
                qs = qs.filter(status=status)
            return qs

    report = ReportService.create({"title": "..."}, requesting_user=user)
    ReportService.update(report.pk, {"status": "Approved"})
"""

from __future__ import annotations

import logging
from typing import Any

from django.db import DatabaseError, IntegrityError, models, transaction
from django.db.models import F, QuerySet
from django.utils import timezone

from core.domain.exceptions import Conflict, NotFound, StoreError

logger = logging.getLogger(__name__)


class ResourceStore:
    """
    Persistence capability set for one resource type.

    Subclasses set ``model`` and ``label`` and may override
    ``build_defaults`` (server-side enrichment on create),
    ``filter_queryset`` (list filters) and ``get_queryset``.
    """

    model: type[models.Model]
    label: str = "Resource"

    # ── Hooks ────────────────────────────────────────────────────────

    @classmethod
    def get_queryset(cls) -> QuerySet:
        return cls.model.objects.all()

    @classmethod
    def filter_queryset(cls, qs: QuerySet, filters: dict[str, Any]) -> QuerySet:
        return qs

    @classmethod
    def build_defaults(cls, data: dict[str, Any], requesting_user: Any = None) -> dict[str, Any]:
        """Return server-assigned values merged into ``data`` on create."""
        return {}

    # ── Capabilities ─────────────────────────────────────────────────

    @classmethod
    def create(cls, data: dict[str, Any], *, requesting_user: Any = None) -> models.Model:
        """
        Persist a new row built from validated ``data``.

        Raises ``Conflict`` when a unique column is already taken.
        """
        payload = {**data, **cls.build_defaults(data, requesting_user)}
        try:
            with transaction.atomic():
                instance = cls.model.objects.create(**payload)
        except IntegrityError as exc:
            raise Conflict(cls._conflict_message(exc)) from exc
        except DatabaseError as exc:
            raise cls._store_error("create", exc) from exc

        logger.info("Created %s %s", cls.label, instance.pk)
        return instance

    @classmethod
    def get(cls, pk: Any) -> models.Model:
        try:
            return cls.get_queryset().get(pk=pk)
        except (cls.model.DoesNotExist, ValueError, TypeError):
            raise NotFound(f"{cls.label} with id {pk} not found.")

    @classmethod
    def list(cls, filters: dict[str, Any] | None = None) -> QuerySet:
        """Return every matching row in insertion order."""
        qs = cls.filter_queryset(cls.get_queryset(), filters or {})
        return qs.order_by("pk")

    @classmethod
    def update(cls, instance_or_pk: Any, data: dict[str, Any]) -> models.Model:
        """
        Merge the submitted fields into an existing row.

        Only keys present in ``data`` are written; ``updated_at`` is
        refreshed by ``TimeStampedModel.save``.
        """
        instance = (
            instance_or_pk
            if isinstance(instance_or_pk, cls.model)
            else cls.get(instance_or_pk)
        )
        for field, value in data.items():
            setattr(instance, field, value)

        try:
            with transaction.atomic():
                instance.save(update_fields=list(data.keys()) if data else None)
        except IntegrityError as exc:
            raise Conflict(cls._conflict_message(exc)) from exc
        except DatabaseError as exc:
            raise cls._store_error("update", exc) from exc
        return instance

    @classmethod
    def delete(cls, pk: Any) -> None:
        instance = cls.get(pk)
        try:
            instance.delete()
        except DatabaseError as exc:
            raise cls._store_error("delete", exc) from exc
        logger.info("Deleted %s %s", cls.label, pk)

    # ── Derived operations ───────────────────────────────────────────

    @classmethod
    def increment_counter(cls, pk: Any, field: str, by: int = 1) -> None:
        try:
            updated = cls.model.objects.filter(pk=pk).update(**{field: F(field) + by})
        except DatabaseError as exc:
            raise cls._store_error("increment", exc) from exc
        if not updated:
            raise NotFound(f"{cls.label} with id {pk} not found.")

    @classmethod
    def touch_timestamp(cls, pk: Any, field: str) -> None:
        try:
            updated = cls.model.objects.filter(pk=pk).update(**{field: timezone.now()})
        except DatabaseError as exc:
            raise cls._store_error("touch", exc) from exc
        if not updated:
            raise NotFound(f"{cls.label} with id {pk} not found.")

    # ── Helpers ──────────────────────────────────────────────────────

    @classmethod
    def _conflict_message(cls, exc: IntegrityError) -> str:
        logger.warning("Integrity error on %s: %s", cls.label, exc)
        return f"A {cls.label.lower()} with the same unique value already exists."

    @classmethod
    def _store_error(cls, operation: str, exc: DatabaseError) -> StoreError:
        logger.error("Failed to %s %s: %s", operation, cls.label, exc)
        return StoreError(f"Could not {operation} {cls.label.lower()}.")
