from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Case",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(db_index=True, editable=False, verbose_name="Created At")),
                ("updated_at", models.DateTimeField(editable=False, verbose_name="Updated At")),
                ("case_number", models.CharField(max_length=50, unique=True, verbose_name="Case Number")),
                ("title", models.CharField(max_length=255, verbose_name="Case Title")),
                ("description", models.TextField(blank=True, default="", verbose_name="Description")),
                ("status", models.CharField(db_index=True, default="Open", max_length=50, verbose_name="Status")),
                ("priority", models.CharField(default="Medium", max_length=50, verbose_name="Priority")),
                ("location", models.CharField(blank=True, default="", max_length=255, verbose_name="Location")),
                ("assigned_officer", models.CharField(blank=True, default="", max_length=255, verbose_name="Assigned Officer")),
                ("created_by_id", models.PositiveBigIntegerField(blank=True, null=True, verbose_name="Created By (user id)")),
            ],
            options={
                "verbose_name": "Case",
                "verbose_name_plural": "Cases",
                "ordering": ["id"],
            },
        ),
    ]
