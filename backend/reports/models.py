"""
Reports app models.

Reports are formal write-ups (incident reports, case summaries, evidence
reports, warrant requests, investigation reports) that move through a
small approval workflow.  They may point at a case, an OB entry and an
evidence item; all three references are advisory.
"""

from django.db import models

from core.models import TimeStampedModel


class ReportType(models.TextChoices):
    INCIDENT = "Incident", "Incident"
    CASE_SUMMARY = "Case Summary", "Case Summary"
    EVIDENCE = "Evidence", "Evidence"
    WARRANTY = "Warranty", "Warranty"
    INVESTIGATION = "Investigation", "Investigation"


class ReportStatus(models.TextChoices):
    PENDING = "Pending", "Pending"
    APPROVED = "Approved", "Approved"
    COMPLETED = "Completed", "Completed"
    REJECTED = "Rejected", "Rejected"


class ReportPriority(models.TextChoices):
    LOW = "Low", "Low"
    MEDIUM = "Medium", "Medium"
    HIGH = "High", "High"
    URGENT = "Urgent", "Urgent"


class Report(TimeStampedModel):
    """
    A police report.

    ``report_number`` is generated as ``RPT-<year>-<suffix>`` when the
    caller does not supply one; ``requested_by_id`` is the account that
    filed it.
    """

    report_number = models.CharField(
        max_length=50,
        unique=True,
        verbose_name="Report Number",
    )
    title = models.CharField(
        max_length=255,
        verbose_name="Title",
    )
    content = models.TextField(
        blank=True,
        default="",
        verbose_name="Content",
    )
    report_type = models.CharField(
        max_length=20,
        choices=ReportType.choices,
        db_index=True,
        verbose_name="Type",
    )
    status = models.CharField(
        max_length=20,
        choices=ReportStatus.choices,
        default=ReportStatus.PENDING,
        db_index=True,
        verbose_name="Status",
    )
    priority = models.CharField(
        max_length=10,
        choices=ReportPriority.choices,
        default=ReportPriority.MEDIUM,
        verbose_name="Priority",
    )

    # ── Advisory references ─────────────────────────────────────────
    case_id = models.PositiveBigIntegerField(null=True, blank=True, verbose_name="Case (id)")
    ob_id = models.PositiveBigIntegerField(null=True, blank=True, verbose_name="OB Entry (id)")
    evidence_id = models.PositiveBigIntegerField(null=True, blank=True, verbose_name="Evidence (id)")
    requested_by_id = models.PositiveBigIntegerField(null=True, blank=True, verbose_name="Requested By (user id)")

    class Meta:
        verbose_name = "Report"
        verbose_name_plural = "Reports"
        ordering = ["id"]

    def __str__(self):
        return f"{self.report_number}: {self.title}"
