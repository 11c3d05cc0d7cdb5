# triage_core/appointments/models.py
from django.core.exceptions import ValidationError
from django.db import models

from triage_core.common.models import TimeStampedModel, UUIDModel


class AppointmentStatus(models.TextChoices):
    CONFIRMED = "confirmed", "Confirmed"
    CANCELLED = "cancelled", "Cancelled"


class Appointment(UUIDModel, TimeStampedModel):
    """
    Hospital/specialist booking made by a GP, optionally linked to a submission.
    """
    # Soft references: a booking need not originate from a submission.
    submission_id = models.UUIDField(null=True, blank=True, db_index=True)
    patient_id = models.BigIntegerField(null=True, blank=True, db_index=True)
    actor_id = models.BigIntegerField(null=True, blank=True)

    hospital = models.CharField(max_length=255)
    department = models.CharField(max_length=255, blank=True, default="")
    doctor = models.CharField(max_length=255, blank=True, default="")

    date = models.DateField()
    time = models.TimeField()

    reason = models.TextField(blank=True, default="")
    notes = models.TextField(blank=True, default="")

    status = models.CharField(
        max_length=16,
        choices=AppointmentStatus.choices,
        default=AppointmentStatus.CONFIRMED,
        db_index=True,
    )

    class Meta:
        db_table = "appointments"
        indexes = [
            models.Index(fields=["patient_id", "date", "time"], name="appointments_patient_when"),
            models.Index(fields=["submission_id", "created_at"], name="appointments_sub_created"),
        ]

    def __str__(self) -> str:
        return f"{self.hospital} {self.date} {self.time} ({self.status})"

    def delete(self, *args, **kwargs):
        raise ValidationError("Appointments are retained; cancel instead of deleting.")
