# triage_core/actions/models.py
from django.core.exceptions import ValidationError
from django.db import models

from triage_core.common.models import UUIDModel


class ActionType(models.TextChoices):
    REVIEW = "review", "Review"
    NOTE = "note", "Note"
    PRESCRIBE = "prescribe", "Prescription"
    REFER = "refer", "Referral"
    FOLLOW_UP = "follow-up", "Follow-up"
    DISCHARGE = "discharge", "Discharge"


class GPAction(UUIDModel):
    """
    Append-only audit entry of clinical activity on a submission.
    """
    # Soft references: plain id columns, no database foreign keys.
    submission_id = models.UUIDField(db_index=True)
    actor_id = models.BigIntegerField(null=True, blank=True, db_index=True)

    action_type = models.CharField(max_length=16, choices=ActionType.choices)
    notes = models.TextField(blank=True, default="")

    created_at = models.DateTimeField(auto_now_add=True, db_index=True)

    class Meta:
        db_table = "gp_actions"
        indexes = [
            models.Index(fields=["submission_id", "created_at"], name="gp_actions_sub_created"),
        ]

    def __str__(self) -> str:
        return f"{self.action_type} @ {self.created_at}"

    def save(self, *args, **kwargs):
        if not self._state.adding:
            raise ValidationError("GPAction is immutable and cannot be modified once created.")
        return super().save(*args, **kwargs)

    def delete(self, *args, **kwargs):
        raise ValidationError("GPAction is immutable and cannot be deleted.")
