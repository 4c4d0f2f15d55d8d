"""
Occurrence book models.

The occurrence book (OB) is the station's timestamped log of everything
reported at the front desk.  Each entry keeps a single canonical
``recorded_at`` timestamp; the ``dateTime`` / ``date`` / ``time`` values
seen by API clients are derived from it.
"""

from django.db import models
from django.utils import timezone

from core.models import TimeStampedModel


class OBStatus(models.TextChoices):
    PENDING = "Pending", "Pending"
    APPROVED = "Approved", "Approved"
    COMPLETED = "Completed", "Completed"
    REJECTED = "Rejected", "Rejected"


class OBEntry(TimeStampedModel):
    """
    One occurrence-book entry.

    ``ob_number`` is generated as ``OB-<year>-<suffix>`` when absent.
    ``recording_officer_id`` is the account that logged the entry
    (advisory, not a foreign key); ``officer`` is the free-text name of
    the officer handling it.
    """

    ob_number = models.CharField(
        max_length=50,
        unique=True,
        verbose_name="OB Number",
    )
    entry_type = models.CharField(
        max_length=100,
        default="Incident",
        verbose_name="Type",
    )
    description = models.TextField(
        blank=True,
        default="",
        verbose_name="Description",
    )
    reported_by = models.CharField(
        max_length=255,
        blank=True,
        default="",
        verbose_name="Reported By",
    )
    officer = models.CharField(
        max_length=255,
        blank=True,
        default="",
        verbose_name="Officer",
    )
    location = models.CharField(
        max_length=255,
        blank=True,
        default="",
        verbose_name="Location",
    )
    details = models.TextField(
        blank=True,
        default="",
        verbose_name="Details",
    )
    recorded_at = models.DateTimeField(
        default=timezone.now,
        db_index=True,
        verbose_name="Recorded At",
    )
    status = models.CharField(
        max_length=20,
        choices=OBStatus.choices,
        default=OBStatus.PENDING,
        blank=True,
        db_index=True,
        verbose_name="Status",
    )
    recording_officer_id = models.PositiveBigIntegerField(
        null=True,
        blank=True,
        verbose_name="Recording Officer (user id)",
    )

    class Meta:
        verbose_name = "OB Entry"
        verbose_name_plural = "OB Entries"
        ordering = ["id"]

    def __str__(self):
        return f"{self.ob_number} ({self.entry_type})"
