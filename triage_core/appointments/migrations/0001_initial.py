import uuid

from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Appointment",
            fields=[
                ("created_at", models.DateTimeField(auto_now_add=True, db_index=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("submission_id", models.UUIDField(blank=True, db_index=True, null=True)),
                ("patient_id", models.BigIntegerField(blank=True, db_index=True, null=True)),
                ("actor_id", models.BigIntegerField(blank=True, null=True)),
                ("hospital", models.CharField(max_length=255)),
                ("department", models.CharField(blank=True, default="", max_length=255)),
                ("doctor", models.CharField(blank=True, default="", max_length=255)),
                ("date", models.DateField()),
                ("time", models.TimeField()),
                ("reason", models.TextField(blank=True, default="")),
                ("notes", models.TextField(blank=True, default="")),
                (
                    "status",
                    models.CharField(
                        choices=[("confirmed", "Confirmed"), ("cancelled", "Cancelled")],
                        db_index=True,
                        default="confirmed",
                        max_length=16,
                    ),
                ),
            ],
            options={
                "db_table": "appointments",
                "indexes": [
                    models.Index(fields=["patient_id", "date", "time"], name="appointments_patient_when"),
                    models.Index(fields=["submission_id", "created_at"], name="appointments_sub_created"),
                ],
            },
        ),
    ]
