"""
Cases app models.

A case is the investigative file that OB entries, evidence and reports
refer to.  Status and priority are free text so that each station can use
its own vocabulary; the defaults mirror the common ``Open`` / ``Medium``.
"""

from django.db import models

from core.models import TimeStampedModel


class Case(TimeStampedModel):
    """
    A police case.

    ``case_number`` is generated as ``CASE-<year>-<suffix>`` when the
    caller does not supply one.  ``created_by_id`` records the account
    that opened the case; it is advisory and is not enforced as a
    foreign key.
    """

    case_number = models.CharField(
        max_length=50,
        unique=True,
        verbose_name="Case Number",
    )
    title = models.CharField(
        max_length=255,
        verbose_name="Case Title",
    )
    description = models.TextField(
        blank=True,
        default="",
        verbose_name="Description",
    )
    status = models.CharField(
        max_length=50,
        default="Open",
        db_index=True,
        verbose_name="Status",
    )
    priority = models.CharField(
        max_length=50,
        default="Medium",
        verbose_name="Priority",
    )
    location = models.CharField(
        max_length=255,
        blank=True,
        default="",
        verbose_name="Location",
    )
    assigned_officer = models.CharField(
        max_length=255,
        blank=True,
        default="",
        verbose_name="Assigned Officer",
    )
    created_by_id = models.PositiveBigIntegerField(
        null=True,
        blank=True,
        verbose_name="Created By (user id)",
    )

    class Meta:
        verbose_name = "Case"
        verbose_name_plural = "Cases"
        ordering = ["id"]

    def __str__(self):
        return f"{self.case_number}: {self.title}"
