import django.utils.timezone
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="OBEntry",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(db_index=True, editable=False, verbose_name="Created At")),
                ("updated_at", models.DateTimeField(editable=False, verbose_name="Updated At")),
                ("ob_number", models.CharField(max_length=50, unique=True, verbose_name="OB Number")),
                ("entry_type", models.CharField(default="Incident", max_length=100, verbose_name="Type")),
                ("description", models.TextField(blank=True, default="", verbose_name="Description")),
                ("reported_by", models.CharField(blank=True, default="", max_length=255, verbose_name="Reported By")),
                ("officer", models.CharField(blank=True, default="", max_length=255, verbose_name="Officer")),
                ("location", models.CharField(blank=True, default="", max_length=255, verbose_name="Location")),
                ("details", models.TextField(blank=True, default="", verbose_name="Details")),
                ("recorded_at", models.DateTimeField(db_index=True, default=django.utils.timezone.now, verbose_name="Recorded At")),
                ("status", models.CharField(blank=True, choices=[("Pending", "Pending"), ("Approved", "Approved"), ("Completed", "Completed"), ("Rejected", "Rejected")], db_index=True, default="Pending", max_length=20, verbose_name="Status")),
                ("recording_officer_id", models.PositiveBigIntegerField(blank=True, null=True, verbose_name="Recording Officer (user id)")),
            ],
            options={
                "verbose_name": "OB Entry",
                "verbose_name_plural": "OB Entries",
                "ordering": ["id"],
            },
        ),
    ]
