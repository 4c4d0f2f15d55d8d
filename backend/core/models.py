"""
Core app models.

Provides abstract base models and shared utilities used across the project.
"""

from datetime import timedelta

from django.db import models
from django.utils import timezone


class TimeStampedModel(models.Model):
    """
    Abstract base model that provides ``created_at`` and ``updated_at``
    timestamp fields for every concrete child model.

    Both timestamps are stamped from a single clock reading when the row is
    first inserted, so a freshly created record always reports
    ``updated_at == created_at``.  Every later ``save()`` moves
    ``updated_at`` strictly forward and never touches ``created_at``.

    Bulk ``QuerySet.update()`` calls bypass ``save()`` and therefore leave
    ``updated_at`` alone; counters and access timestamps rely on that.
    """

    created_at = models.DateTimeField(
        editable=False,
        db_index=True,
        verbose_name="Created At",
    )
    updated_at = models.DateTimeField(
        editable=False,
        verbose_name="Updated At",
    )

    class Meta:
        abstract = True

    def save(self, *args, **kwargs):
        now = timezone.now()
        if self._state.adding and self.created_at is None:
            self.created_at = now
            self.updated_at = now
        else:
            if self.updated_at is not None and now <= self.updated_at:
                now = self.updated_at + timedelta(microseconds=1)
            self.updated_at = now

            update_fields = kwargs.get("update_fields")
            if update_fields is not None and "updated_at" not in update_fields:
                kwargs["update_fields"] = [*update_fields, "updated_at"]

        super().save(*args, **kwargs)
