# triage_core/appointments/services.py
from __future__ import annotations

import datetime as dt
import logging
from typing import Optional

from django.utils.dateparse import parse_date, parse_time

from triage_core.actions.models import ActionType, GPAction
from triage_core.appointments.models import Appointment, AppointmentStatus
from triage_core.common.errors import ValidationError
from triage_core.store import get_case_store
from triage_core.store.base import CaseStore

logger = logging.getLogger(__name__)


def _coerce_date(value, field: str = "date") -> dt.date:
    if isinstance(value, dt.datetime):
        return value.date()
    if isinstance(value, dt.date):
        return value
    parsed = None
    if isinstance(value, str) and value.strip():
        try:
            parsed = parse_date(value.strip())
        except ValueError:
            parsed = None
    if parsed is None:
        raise ValidationError({field: ["Enter a valid date (YYYY-MM-DD)."]})
    return parsed


def _coerce_time(value, field: str = "time") -> dt.time:
    if isinstance(value, dt.time):
        return value
    parsed = None
    if isinstance(value, str) and value.strip():
        try:
            parsed = parse_time(value.strip())
        except ValueError:
            parsed = None
    if parsed is None:
        raise ValidationError({field: ["Enter a valid time (HH:MM)."]})
    return parsed


def referral_note(*, hospital: str, department: str, date: dt.date, time: dt.time, reason: str) -> str:
    note = f"Referred to {hospital}"
    if department:
        note += f" – {department}"
    note += f". Appointment: {date.isoformat()} at {time.strftime('%H:%M')}."
    if reason:
        note += f" Reason: {reason}"
    return note


class AppointmentService:
    """
    Appointment write-model operations.

    Notes:
    - Bookings start confirmed; cancel and reschedule are the only lifecycle moves.
    - A booking tied to both a submission and a GP leaves a refer action in the submission's
      log, in the same transaction. That action never reviews the submission.
    """

    @staticmethod
    def book_appointment(
        *,
        hospital: str,
        date,
        time,
        submission_id=None,
        patient_id: Optional[int] = None,
        actor_id: Optional[int] = None,
        department: str = "",
        doctor: str = "",
        reason: str = "",
        notes: str = "",
        store: Optional[CaseStore] = None,
    ) -> Appointment:
        if not isinstance(hospital, str) or not hospital.strip():
            raise ValidationError({"hospital": ["This field is required."]})
        hospital = hospital.strip()
        department = (department or "").strip()
        reason = (reason or "").strip()
        date = _coerce_date(date)
        time = _coerce_time(time)

        store = store or get_case_store()

        with store.atomic():
            if submission_id is not None:
                submission = store.lock_submission(submission_id)
                submission_id = submission.id
                if patient_id is None:
                    patient_id = submission.patient_id

            appointment = Appointment(
                submission_id=submission_id,
                patient_id=patient_id,
                actor_id=actor_id,
                hospital=hospital,
                department=department,
                doctor=(doctor or "").strip(),
                date=date,
                time=time,
                reason=reason,
                notes=notes or "",
                status=AppointmentStatus.CONFIRMED,
            )
            store.insert_appointment(appointment)

            if submission_id is not None and actor_id is not None:
                # Inserted directly: a referral is not a review and must not move status.
                store.insert_action(
                    GPAction(
                        submission_id=submission_id,
                        actor_id=actor_id,
                        action_type=ActionType.REFER,
                        notes=referral_note(
                            hospital=hospital,
                            department=department,
                            date=date,
                            time=time,
                            reason=reason,
                        ),
                    )
                )

        logger.info(
            "appointment booked id=%s submission_id=%s patient_id=%s actor_id=%s",
            appointment.id,
            submission_id,
            patient_id,
            actor_id,
        )
        return appointment

    @staticmethod
    def cancel_appointment(appointment_id, *, store: Optional[CaseStore] = None) -> Appointment:
        store = store or get_case_store()

        with store.atomic():
            appointment = store.get_appointment(appointment_id)
            if appointment.status == AppointmentStatus.CANCELLED:
                return appointment
            appointment = store.update_appointment(appointment.id, status=AppointmentStatus.CANCELLED)

        logger.info("appointment cancelled id=%s", appointment.id)
        return appointment

    @staticmethod
    def reschedule_appointment(appointment_id, date, time, *, store: Optional[CaseStore] = None) -> Appointment:
        """
        Move to a new slot. The result is always confirmed, including from cancelled.
        """
        date = _coerce_date(date)
        time = _coerce_time(time)
        store = store or get_case_store()

        appointment = store.update_appointment(
            appointment_id,
            date=date,
            time=time,
            status=AppointmentStatus.CONFIRMED,
        )

        logger.info("appointment rescheduled id=%s", appointment.id)
        return appointment

    @staticmethod
    def update_appointment(
        appointment_id,
        *,
        status: Optional[str] = None,
        date=None,
        time=None,
        store: Optional[CaseStore] = None,
    ) -> Appointment:
        """
        Partial update.

        date and time together reschedule (status is then confirmed whatever was asked);
        otherwise a status is written, with cancelled going through cancel_appointment.
        """
        if date and time:
            return AppointmentService.reschedule_appointment(appointment_id, date, time, store=store)

        if status:
            if status not in AppointmentStatus.values:
                raise ValidationError({"status": [f"Unknown status: {status!r}."]})
            if status == AppointmentStatus.CANCELLED:
                return AppointmentService.cancel_appointment(appointment_id, store=store)

            store = store or get_case_store()
            appointment = store.update_appointment(appointment_id, status=status)
            logger.info("appointment status set id=%s status=%s", appointment.id, status)
            return appointment

        raise ValidationError("Provide a status, or both date and time.")
