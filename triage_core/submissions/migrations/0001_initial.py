import uuid

from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Submission",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("patient_id", models.BigIntegerField(blank=True, db_index=True, null=True)),
                ("first_name", models.CharField(max_length=150)),
                ("last_name", models.CharField(max_length=150)),
                ("age", models.PositiveIntegerField()),
                ("gender", models.CharField(max_length=32)),
                ("body_areas", models.JSONField(default=list)),
                ("symptoms", models.JSONField(default=list)),
                (
                    "duration",
                    models.CharField(
                        choices=[
                            ("Less than 24 hours", "Less than 24 hours"),
                            ("1 – 3 days", "1 – 3 days"),
                            ("4 – 7 days", "4 – 7 days"),
                            ("1 – 2 weeks", "1 – 2 weeks"),
                            ("More than 2 weeks", "More than 2 weeks"),
                        ],
                        max_length=32,
                    ),
                ),
                (
                    "severity",
                    models.PositiveSmallIntegerField(
                        choices=[(1, "Mild"), (2, "Moderate"), (3, "Severe"), (4, "Very Severe")]
                    ),
                ),
                ("additional_info", models.TextField(blank=True, default="")),
                (
                    "triage_level",
                    models.CharField(
                        choices=[
                            ("green", "Green (self-care)"),
                            ("amber", "Amber (GP review)"),
                            ("red", "Red (urgent)"),
                        ],
                        db_index=True,
                        max_length=8,
                    ),
                ),
                (
                    "status",
                    models.CharField(
                        choices=[("pending-review", "Pending review"), ("reviewed", "Reviewed")],
                        db_index=True,
                        default="pending-review",
                        max_length=20,
                    ),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True, db_index=True)),
            ],
            options={
                "db_table": "submissions",
                "indexes": [
                    models.Index(fields=["patient_id", "created_at"], name="submissions_patient_created"),
                ],
            },
        ),
    ]
