# triage_core/submissions/models.py
from django.core.exceptions import ValidationError
from django.db import models

from triage_core.common.models import UUIDModel
from triage_core.triage.constants import Duration, Severity, TriageLevel


class SubmissionStatus(models.TextChoices):
    PENDING_REVIEW = "pending-review", "Pending review"
    REVIEWED = "reviewed", "Reviewed"


class Submission(UUIDModel):
    """
    A patient's triage case: the symptom report exactly as submitted plus its computed tier.

    The report snapshot and triage_level are the clinical record of what was reported and
    never change. status is the only mutable field.
    """
    MUTABLE_FIELDS = frozenset({"status"})

    # Soft reference to the patient's user id; null for anonymous symptom checks.
    patient_id = models.BigIntegerField(null=True, blank=True, db_index=True)

    first_name = models.CharField(max_length=150)
    last_name = models.CharField(max_length=150)
    age = models.PositiveIntegerField()
    gender = models.CharField(max_length=32)

    body_areas = models.JSONField(default=list)
    symptoms = models.JSONField(default=list)
    duration = models.CharField(max_length=32, choices=Duration.choices)
    severity = models.PositiveSmallIntegerField(choices=Severity.choices)
    additional_info = models.TextField(blank=True, default="")

    triage_level = models.CharField(max_length=8, choices=TriageLevel.choices, db_index=True)
    status = models.CharField(
        max_length=20,
        choices=SubmissionStatus.choices,
        default=SubmissionStatus.PENDING_REVIEW,
        db_index=True,
    )

    created_at = models.DateTimeField(auto_now_add=True, db_index=True)

    class Meta:
        db_table = "submissions"
        indexes = [
            models.Index(fields=["patient_id", "created_at"], name="submissions_patient_created"),
        ]

    def __str__(self) -> str:
        return f"Submission({self.id}, {self.triage_level}, {self.status})"

    def save(self, *args, **kwargs):
        if not self._state.adding:
            update_fields = kwargs.get("update_fields")
            if update_fields is None or not set(update_fields) <= self.MUTABLE_FIELDS:
                raise ValidationError("Submission report is immutable; only status can change.")
        return super().save(*args, **kwargs)

    def delete(self, *args, **kwargs):
        raise ValidationError("Submissions are retained and cannot be deleted.")
