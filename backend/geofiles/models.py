"""
Geofiles app models.

A geofile is a *reference* to a geographic data file (KML, GPX,
shapefile, ...) held elsewhere: the API stores its URL or path and its
metadata, never the file contents.
"""

from django.db import models

from core.models import TimeStampedModel


class GeofileType(models.TextChoices):
    KML = "kml", "KML"
    GPX = "gpx", "GPX"
    SHP = "shp", "Shapefile"
    GEOJSON = "geojson", "GeoJSON"
    KMZ = "kmz", "KMZ"
    GML = "gml", "GML"
    OTHER = "other", "Other"


class GeofileTag(models.Model):
    """A normalised (stripped, lower-case) tag shared between geofiles."""

    name = models.CharField(
        max_length=50,
        unique=True,
        verbose_name="Name",
    )

    class Meta:
        verbose_name = "Geofile Tag"
        verbose_name_plural = "Geofile Tags"
        ordering = ["name"]

    def __str__(self):
        return self.name


class Geofile(TimeStampedModel):
    """
    Metadata for one geographic file.

    ``download_count`` only ever grows and ``last_accessed_at`` is
    refreshed on every read; both are written with single ``UPDATE``
    statements and so do not move ``updated_at``.  ``linked_case_ids``
    holds the advisory case references attached via ``link-case``.
    """

    filename = models.CharField(
        max_length=255,
        verbose_name="Filename",
    )
    file_url = models.CharField(
        max_length=1024,
        blank=True,
        default="",
        verbose_name="File URL",
    )
    file_path = models.CharField(
        max_length=1024,
        blank=True,
        default="",
        verbose_name="File Path",
    )
    file_type = models.CharField(
        max_length=10,
        choices=GeofileType.choices,
        db_index=True,
        verbose_name="File Type",
    )
    file_size = models.PositiveBigIntegerField(
        null=True,
        blank=True,
        verbose_name="File Size (bytes)",
    )
    description = models.TextField(
        blank=True,
        default="",
        verbose_name="Description",
    )
    tags = models.ManyToManyField(
        GeofileTag,
        blank=True,
        related_name="geofiles",
        verbose_name="Tags",
    )
    access_level = models.CharField(
        max_length=50,
        default="internal",
        db_index=True,
        verbose_name="Access Level",
    )

    # ── Location ────────────────────────────────────────────────────
    latitude = models.FloatField(
        null=True,
        blank=True,
        verbose_name="Latitude",
    )
    longitude = models.FloatField(
        null=True,
        blank=True,
        verbose_name="Longitude",
    )

    # ── Advisory references ─────────────────────────────────────────
    linked_case_ids = models.JSONField(
        default=list,
        blank=True,
        verbose_name="Linked Case ids",
    )
    uploaded_by_id = models.PositiveBigIntegerField(
        null=True,
        blank=True,
        verbose_name="Uploaded By (user id)",
    )

    # ── Usage ───────────────────────────────────────────────────────
    download_count = models.PositiveIntegerField(
        default=0,
        verbose_name="Download Count",
    )
    last_accessed_at = models.DateTimeField(
        null=True,
        blank=True,
        verbose_name="Last Accessed At",
    )

    class Meta:
        verbose_name = "Geofile"
        verbose_name_plural = "Geofiles"
        ordering = ["id"]
        indexes = [
            models.Index(fields=["latitude", "longitude"], name="geofile_lat_lng_idx"),
        ]

    def __str__(self):
        return f"{self.filename} ({self.file_type})"

    @property
    def download_url(self) -> str:
        return self.file_url or self.file_path
