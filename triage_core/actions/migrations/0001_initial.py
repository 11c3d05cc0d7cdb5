import uuid

from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="GPAction",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("submission_id", models.UUIDField(db_index=True)),
                ("actor_id", models.BigIntegerField(blank=True, db_index=True, null=True)),
                (
                    "action_type",
                    models.CharField(
                        choices=[
                            ("review", "Review"),
                            ("note", "Note"),
                            ("prescribe", "Prescription"),
                            ("refer", "Referral"),
                            ("follow-up", "Follow-up"),
                            ("discharge", "Discharge"),
                        ],
                        max_length=16,
                    ),
                ),
                ("notes", models.TextField(blank=True, default="")),
                ("created_at", models.DateTimeField(auto_now_add=True, db_index=True)),
            ],
            options={
                "db_table": "gp_actions",
                "indexes": [
                    models.Index(fields=["submission_id", "created_at"], name="gp_actions_sub_created"),
                ],
            },
        ),
    ]
