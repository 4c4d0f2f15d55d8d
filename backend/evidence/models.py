"""
Evidence app models.

Evidence items are registered against a case by its identifier.  The
link is advisory: the case is not required to exist, and deleting a case
leaves its evidence untouched.
"""

from django.db import models

from core.models import TimeStampedModel


class Evidence(TimeStampedModel):
    """
    A single item of evidence.

    ``evidence_number`` is generated as ``EV-<year>-<suffix>`` when the
    caller does not supply one.
    """

    evidence_number = models.CharField(
        max_length=50,
        unique=True,
        verbose_name="Evidence Number",
    )
    case_id = models.PositiveBigIntegerField(
        null=True,
        blank=True,
        db_index=True,
        verbose_name="Case (id)",
    )
    title = models.CharField(
        max_length=255,
        verbose_name="Title",
    )
    description = models.TextField(
        blank=True,
        default="",
        verbose_name="Description",
    )
    evidence_type = models.CharField(
        max_length=100,
        blank=True,
        default="",
        verbose_name="Evidence Type",
        help_text="Free text, e.g. physical, digital, documentary, biological.",
    )
    location = models.CharField(
        max_length=255,
        blank=True,
        default="",
        verbose_name="Storage / Collection Location",
    )
    collected_by = models.CharField(
        max_length=255,
        blank=True,
        default="",
        verbose_name="Collected By",
    )
    collected_at = models.DateTimeField(
        null=True,
        blank=True,
        verbose_name="Collected At",
    )
    status = models.CharField(
        max_length=50,
        default="Collected",
        verbose_name="Status",
    )
    registered_by_id = models.PositiveBigIntegerField(
        null=True,
        blank=True,
        verbose_name="Registered By (user id)",
    )

    class Meta:
        verbose_name = "Evidence"
        verbose_name_plural = "Evidence"
        ordering = ["id"]

    def __str__(self):
        return f"{self.evidence_number}: {self.title}"
