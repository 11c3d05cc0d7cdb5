# triage_core/submissions/services.py
from __future__ import annotations

import logging
from typing import Optional

from triage_core.common.errors import ValidationError
from triage_core.store import get_case_store
from triage_core.store.base import CaseStore
from triage_core.submissions.models import Submission, SubmissionStatus
from triage_core.submissions.reports import SymptomReport
from triage_core.triage.classifier import classify
from triage_core.triage.constants import Duration, Severity

logger = logging.getLogger(__name__)

DEMOGRAPHIC_FIELDS = ("first_name", "last_name", "gender")


class SubmissionService:
    """
    Submission write-model operations.

    Notes:
    - triage_level is computed here, once, by the classifier and never recomputed.
    - status is the only field that changes after creation.
    """

    # -------------------------
    # Internal helpers
    # -------------------------
    @staticmethod
    def _validate_report(report: SymptomReport) -> None:
        errors: dict[str, list[str]] = {}

        for name in DEMOGRAPHIC_FIELDS:
            value = getattr(report, name)
            if not isinstance(value, str) or not value.strip():
                errors[name] = ["This field is required."]

        age = report.age
        if isinstance(age, bool) or not isinstance(age, int):
            errors["age"] = ["Age must be a whole number."]
        elif age < 0:
            errors["age"] = ["Age cannot be negative."]

        if not report.body_areas:
            errors["body_areas"] = ["Select at least one body area."]
        if not report.symptoms:
            errors["symptoms"] = ["Select at least one symptom."]

        if isinstance(report.severity, bool) or report.severity not in Severity.values:
            errors["severity"] = ["Severity must be between 1 and 4."]
        if report.duration not in Duration.values:
            errors["duration"] = [f"Unknown duration: {report.duration!r}."]

        if errors:
            raise ValidationError(errors)

    # -------------------------
    # Writes
    # -------------------------
    @staticmethod
    def create_submission(
        report: SymptomReport,
        *,
        patient_id: Optional[int] = None,
        store: Optional[CaseStore] = None,
    ) -> Submission:
        SubmissionService._validate_report(report)
        store = store or get_case_store()

        submission = Submission(
            patient_id=patient_id,
            first_name=report.first_name.strip(),
            last_name=report.last_name.strip(),
            age=report.age,
            gender=report.gender.strip(),
            body_areas=list(report.body_areas),
            symptoms=list(report.symptoms),
            duration=report.duration,
            severity=report.severity,
            additional_info=report.additional_info,
            triage_level=classify(report.severity, report.duration),
            status=SubmissionStatus.PENDING_REVIEW,
        )
        store.insert_submission(submission)

        logger.info(
            "submission created id=%s triage_level=%s patient_id=%s",
            submission.id,
            submission.triage_level,
            patient_id,
        )
        return submission

    @staticmethod
    def update_status(submission_id, status: str, *, store: Optional[CaseStore] = None) -> Submission:
        """
        Manual GP override: status is written as given, no transition rules apply.
        """
        if status not in SubmissionStatus.values:
            raise ValidationError({"status": [f"Unknown status: {status!r}."]})

        store = store or get_case_store()
        submission = store.update_submission_status(submission_id, status)

        logger.info("submission status set id=%s status=%s", submission.id, status)
        return submission
