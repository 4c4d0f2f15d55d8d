from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="LicensePlate",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(db_index=True, editable=False, verbose_name="Created At")),
                ("updated_at", models.DateTimeField(editable=False, verbose_name="Updated At")),
                ("plate_number", models.CharField(max_length=20, unique=True, verbose_name="Plate Number")),
                ("owner_name", models.CharField(blank=True, default="", max_length=255, verbose_name="Owner Name")),
                ("vehicle_make", models.CharField(blank=True, default="", max_length=100, verbose_name="Vehicle Make")),
                ("vehicle_model", models.CharField(blank=True, default="", max_length=100, verbose_name="Vehicle Model")),
                ("vehicle_color", models.CharField(blank=True, default="", max_length=50, verbose_name="Vehicle Color")),
                ("status", models.CharField(db_index=True, default="Active", max_length=50, verbose_name="Status")),
                ("notes", models.TextField(blank=True, default="", verbose_name="Notes")),
                ("added_by_id", models.PositiveBigIntegerField(blank=True, null=True, verbose_name="Added By (user id)")),
            ],
            options={
                "verbose_name": "License Plate",
                "verbose_name_plural": "License Plates",
                "ordering": ["id"],
            },
        ),
        migrations.CreateModel(
            name="PoliceVehicle",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(db_index=True, editable=False, verbose_name="Created At")),
                ("updated_at", models.DateTimeField(editable=False, verbose_name="Updated At")),
                ("vehicle_number", models.CharField(help_text="Call sign painted on the vehicle.", max_length=50, unique=True, verbose_name="Vehicle Number")),
                ("make", models.CharField(blank=True, default="", max_length=100, verbose_name="Make")),
                ("model", models.CharField(blank=True, default="", max_length=100, verbose_name="Model")),
                ("plate_number", models.CharField(blank=True, default="", max_length=20, verbose_name="Plate Number")),
                ("assigned_officer", models.CharField(blank=True, default="", max_length=255, verbose_name="Assigned Officer")),
                ("status", models.CharField(choices=[("available", "Available"), ("on_patrol", "On Patrol"), ("responding", "Responding"), ("out_of_service", "Out of Service")], db_index=True, default="available", max_length=20, verbose_name="Status")),
                ("longitude", models.FloatField(blank=True, null=True, verbose_name="Longitude")),
                ("latitude", models.FloatField(blank=True, null=True, verbose_name="Latitude")),
            ],
            options={
                "verbose_name": "Police Vehicle",
                "verbose_name_plural": "Police Vehicles",
                "ordering": ["id"],
            },
        ),
    ]
