# triage_core/store/orm.py
from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Callable, Iterator, Optional, Sequence, TypeVar
from uuid import UUID

from django.core.exceptions import ValidationError as DjangoValidationError
from django.db import InterfaceError, OperationalError, transaction

from triage_core.actions.models import GPAction
from triage_core.appointments.models import Appointment
from triage_core.common.errors import NotFound, StoreUnavailable
from triage_core.store.base import CaseStore
from triage_core.store.retry import RetryPolicy
from triage_core.submissions.models import Submission

logger = logging.getLogger(__name__)

T = TypeVar("T")

TRANSIENT_ERRORS = (OperationalError, InterfaceError)


@contextmanager
def translate_store_errors(operation: str) -> Iterator[None]:
    """
    Database connectivity failures leave this layer as StoreUnavailable.
    """
    try:
        yield
    except TRANSIENT_ERRORS as exc:
        logger.warning("case store failure op=%s error=%s", operation, exc.__class__.__name__)
        raise StoreUnavailable(f"{operation} failed") from exc


def _get_or_404(qs, entity: str, pk):
    try:
        return qs.get(id=pk)
    except (qs.model.DoesNotExist, DjangoValidationError, ValueError):
        # Malformed ids cannot exist either.
        raise NotFound(entity, pk)


class OrmCaseStore(CaseStore):
    """
    Django ORM implementation.

    - Row locks (SELECT ... FOR UPDATE) serialize writers per submission / appointment.
    - Reads outside a transaction are retried per RetryPolicy; writes never are.
    """

    def __init__(self, retry: Optional[RetryPolicy] = None):
        self.retry = retry or RetryPolicy.from_settings()

    # -------------------------
    # Internal helpers
    # -------------------------
    def _read(self, operation: str, fn: Callable[[], T]) -> T:
        def attempt() -> T:
            with translate_store_errors(operation):
                return fn()

        # A failed statement poisons the open transaction; retrying inside it is pointless.
        if transaction.get_connection().in_atomic_block:
            return attempt()
        return self.retry.call(attempt, operation=operation)

    @contextmanager
    def atomic(self) -> Iterator[None]:
        with translate_store_errors("atomic"):
            with transaction.atomic():
                yield

    # -------------------------
    # Submissions
    # -------------------------
    def insert_submission(self, submission: Submission) -> UUID:
        with translate_store_errors("insert_submission"):
            submission.save(force_insert=True)
        return submission.id

    def get_submission(self, submission_id) -> Submission:
        return self._read(
            "get_submission",
            lambda: _get_or_404(Submission.objects.all(), "Submission", submission_id),
        )

    def lock_submission(self, submission_id) -> Submission:
        with translate_store_errors("lock_submission"):
            return _get_or_404(Submission.objects.select_for_update(), "Submission", submission_id)

    def list_submissions(self, *, patient_id: Optional[int] = None) -> Sequence[Submission]:
        def query() -> list[Submission]:
            qs = Submission.objects.all()
            if patient_id is not None:
                qs = qs.filter(patient_id=patient_id)
            return list(qs.order_by("-created_at", "-id"))

        return self._read("list_submissions", query)

    def update_submission_status(self, submission_id, status: str) -> Submission:
        with self.atomic():
            submission = self.lock_submission(submission_id)
            submission.status = status
            with translate_store_errors("update_submission_status"):
                submission.save(update_fields=["status"])
        return submission

    # -------------------------
    # GP actions
    # -------------------------
    def insert_action(self, action: GPAction) -> UUID:
        with translate_store_errors("insert_action"):
            action.save(force_insert=True)
        return action.id

    def list_actions(self, submission_id) -> Sequence[GPAction]:
        return self._read(
            "list_actions",
            lambda: list(GPAction.objects.filter(submission_id=submission_id).order_by("-created_at", "-id")),
        )

    # -------------------------
    # Appointments
    # -------------------------
    def insert_appointment(self, appointment: Appointment) -> UUID:
        with translate_store_errors("insert_appointment"):
            appointment.save(force_insert=True)
        return appointment.id

    def get_appointment(self, appointment_id) -> Appointment:
        return self._read(
            "get_appointment",
            lambda: _get_or_404(Appointment.objects.all(), "Appointment", appointment_id),
        )

    def list_appointments(self, *, patient_id: Optional[int] = None, submission_id=None) -> Sequence[Appointment]:
        def query() -> list[Appointment]:
            qs = Appointment.objects.all()
            if patient_id is not None:
                qs = qs.filter(patient_id=patient_id)
            if submission_id is not None:
                qs = qs.filter(submission_id=submission_id)

            if submission_id is not None and patient_id is None:
                qs = qs.order_by("-created_at", "-id")
            else:
                qs = qs.order_by("date", "time", "id")
            return list(qs)

        return self._read("list_appointments", query)

    def update_appointment(self, appointment_id, *, status=None, date=None, time=None) -> Appointment:
        with self.atomic():
            with translate_store_errors("update_appointment"):
                appointment = _get_or_404(
                    Appointment.objects.select_for_update(), "Appointment", appointment_id
                )

                update_fields = ["updated_at"]
                if date is not None:
                    appointment.date = date
                    update_fields.append("date")
                if time is not None:
                    appointment.time = time
                    update_fields.append("time")
                if status is not None:
                    appointment.status = status
                    update_fields.append("status")

                appointment.save(update_fields=update_fields)
        return appointment
