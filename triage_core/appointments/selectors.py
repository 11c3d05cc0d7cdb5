# triage_core/appointments/selectors.py
from __future__ import annotations

from typing import Optional, Sequence

from triage_core.appointments.models import Appointment
from triage_core.store import get_case_store
from triage_core.store.base import CaseStore


class AppointmentSelectors:
    """
    Read-only queries for appointments.
    """

    @staticmethod
    def list_appointments(
        *,
        patient_id: Optional[int] = None,
        submission_id=None,
        store: Optional[CaseStore] = None,
    ) -> Sequence[Appointment]:
        store = store or get_case_store()
        return store.list_appointments(patient_id=patient_id, submission_id=submission_id)

    @staticmethod
    def get_appointment(appointment_id, *, store: Optional[CaseStore] = None) -> Appointment:
        store = store or get_case_store()
        return store.get_appointment(appointment_id)
