from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Report",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(db_index=True, editable=False, verbose_name="Created At")),
                ("updated_at", models.DateTimeField(editable=False, verbose_name="Updated At")),
                ("report_number", models.CharField(max_length=50, unique=True, verbose_name="Report Number")),
                ("title", models.CharField(max_length=255, verbose_name="Title")),
                ("content", models.TextField(blank=True, default="", verbose_name="Content")),
                ("report_type", models.CharField(choices=[("Incident", "Incident"), ("Case Summary", "Case Summary"), ("Evidence", "Evidence"), ("Warranty", "Warranty"), ("Investigation", "Investigation")], db_index=True, max_length=20, verbose_name="Type")),
                ("status", models.CharField(choices=[("Pending", "Pending"), ("Approved", "Approved"), ("Completed", "Completed"), ("Rejected", "Rejected")], db_index=True, default="Pending", max_length=20, verbose_name="Status")),
                ("priority", models.CharField(choices=[("Low", "Low"), ("Medium", "Medium"), ("High", "High"), ("Urgent", "Urgent")], default="Medium", max_length=10, verbose_name="Priority")),
                ("case_id", models.PositiveBigIntegerField(blank=True, null=True, verbose_name="Case (id)")),
                ("ob_id", models.PositiveBigIntegerField(blank=True, null=True, verbose_name="OB Entry (id)")),
                ("evidence_id", models.PositiveBigIntegerField(blank=True, null=True, verbose_name="Evidence (id)")),
                ("requested_by_id", models.PositiveBigIntegerField(blank=True, null=True, verbose_name="Requested By (user id)")),
            ],
            options={
                "verbose_name": "Report",
                "verbose_name_plural": "Reports",
                "ordering": ["id"],
            },
        ),
    ]
