# triage_core/store/base.py
"""
Case store contract consumed by the workflow services.

Implementations normalize their backing storage into the canonical Submission, GPAction
and Appointment types. Missing ids raise NotFound; infrastructure failures raise
StoreUnavailable.
"""
from __future__ import annotations

import abc
from contextlib import AbstractContextManager
from datetime import date as date_type, time as time_type
from typing import Optional, Sequence
from uuid import UUID

from triage_core.actions.models import GPAction
from triage_core.appointments.models import Appointment
from triage_core.submissions.models import Submission


class CaseStore(abc.ABC):

    @abc.abstractmethod
    def atomic(self) -> AbstractContextManager:
        """
        Unit of work: everything inside commits together or not at all.
        """

    # -------------------------
    # Submissions
    # -------------------------
    @abc.abstractmethod
    def insert_submission(self, submission: Submission) -> UUID: ...

    @abc.abstractmethod
    def get_submission(self, submission_id) -> Submission: ...

    @abc.abstractmethod
    def lock_submission(self, submission_id) -> Submission:
        """
        Fetch a submission and hold it against concurrent writers until the
        surrounding atomic() block ends.
        """

    @abc.abstractmethod
    def list_submissions(self, *, patient_id: Optional[int] = None) -> Sequence[Submission]:
        """
        Newest first.
        """

    @abc.abstractmethod
    def update_submission_status(self, submission_id, status: str) -> Submission: ...

    # -------------------------
    # GP actions
    # -------------------------
    @abc.abstractmethod
    def insert_action(self, action: GPAction) -> UUID: ...

    @abc.abstractmethod
    def list_actions(self, submission_id) -> Sequence[GPAction]:
        """
        Newest first.
        """

    # -------------------------
    # Appointments
    # -------------------------
    @abc.abstractmethod
    def insert_appointment(self, appointment: Appointment) -> UUID: ...

    @abc.abstractmethod
    def get_appointment(self, appointment_id) -> Appointment: ...

    @abc.abstractmethod
    def list_appointments(
        self,
        *,
        patient_id: Optional[int] = None,
        submission_id=None,
    ) -> Sequence[Appointment]:
        """
        By date/time ascending; createdAt descending when filtered by submission only.
        """

    @abc.abstractmethod
    def update_appointment(
        self,
        appointment_id,
        *,
        status: Optional[str] = None,
        date: Optional[date_type] = None,
        time: Optional[time_type] = None,
    ) -> Appointment:
        """
        Apply the given fields and refresh updated_at.
        """
