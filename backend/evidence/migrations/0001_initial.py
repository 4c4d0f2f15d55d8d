from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Evidence",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(db_index=True, editable=False, verbose_name="Created At")),
                ("updated_at", models.DateTimeField(editable=False, verbose_name="Updated At")),
                ("evidence_number", models.CharField(max_length=50, unique=True, verbose_name="Evidence Number")),
                ("case_id", models.PositiveBigIntegerField(blank=True, db_index=True, null=True, verbose_name="Case (id)")),
                ("title", models.CharField(max_length=255, verbose_name="Title")),
                ("description", models.TextField(blank=True, default="", verbose_name="Description")),
                ("evidence_type", models.CharField(blank=True, default="", help_text="Free text, e.g. physical, digital, documentary, biological.", max_length=100, verbose_name="Evidence Type")),
                ("location", models.CharField(blank=True, default="", max_length=255, verbose_name="Storage / Collection Location")),
                ("collected_by", models.CharField(blank=True, default="", max_length=255, verbose_name="Collected By")),
                ("collected_at", models.DateTimeField(blank=True, null=True, verbose_name="Collected At")),
                ("status", models.CharField(default="Collected", max_length=50, verbose_name="Status")),
                ("registered_by_id", models.PositiveBigIntegerField(blank=True, null=True, verbose_name="Registered By (user id)")),
            ],
            options={
                "verbose_name": "Evidence",
                "verbose_name_plural": "Evidence",
                "ordering": ["id"],
            },
        ),
    ]
