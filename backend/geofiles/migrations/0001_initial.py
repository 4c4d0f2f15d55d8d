from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="GeofileTag",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("name", models.CharField(max_length=50, unique=True, verbose_name="Name")),
            ],
            options={
                "verbose_name": "Geofile Tag",
                "verbose_name_plural": "Geofile Tags",
                "ordering": ["name"],
            },
        ),
        migrations.CreateModel(
            name="Geofile",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(db_index=True, editable=False, verbose_name="Created At")),
                ("updated_at", models.DateTimeField(editable=False, verbose_name="Updated At")),
                ("filename", models.CharField(max_length=255, verbose_name="Filename")),
                ("file_url", models.CharField(blank=True, default="", max_length=1024, verbose_name="File URL")),
                ("file_path", models.CharField(blank=True, default="", max_length=1024, verbose_name="File Path")),
                ("file_type", models.CharField(choices=[("kml", "KML"), ("gpx", "GPX"), ("shp", "Shapefile"), ("geojson", "GeoJSON"), ("kmz", "KMZ"), ("gml", "GML"), ("other", "Other")], db_index=True, max_length=10, verbose_name="File Type")),
                ("file_size", models.PositiveBigIntegerField(blank=True, null=True, verbose_name="File Size (bytes)")),
                ("description", models.TextField(blank=True, default="", verbose_name="Description")),
                ("access_level", models.CharField(db_index=True, default="internal", max_length=50, verbose_name="Access Level")),
                ("latitude", models.FloatField(blank=True, null=True, verbose_name="Latitude")),
                ("longitude", models.FloatField(blank=True, null=True, verbose_name="Longitude")),
                ("linked_case_ids", models.JSONField(blank=True, default=list, verbose_name="Linked Case ids")),
                ("uploaded_by_id", models.PositiveBigIntegerField(blank=True, null=True, verbose_name="Uploaded By (user id)")),
                ("download_count", models.PositiveIntegerField(default=0, verbose_name="Download Count")),
                ("last_accessed_at", models.DateTimeField(blank=True, null=True, verbose_name="Last Accessed At")),
                ("tags", models.ManyToManyField(blank=True, related_name="geofiles", to="geofiles.geofiletag", verbose_name="Tags")),
            ],
            options={
                "verbose_name": "Geofile",
                "verbose_name_plural": "Geofiles",
                "ordering": ["id"],
                "indexes": [models.Index(fields=["latitude", "longitude"], name="geofile_lat_lng_idx")],
            },
        ),
    ]
