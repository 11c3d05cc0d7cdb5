# triage_core/submissions/selectors.py
from __future__ import annotations

from typing import Optional, Sequence

from triage_core.store import get_case_store
from triage_core.store.base import CaseStore
from triage_core.submissions.models import Submission


class SubmissionSelectors:
    """
    Read-only queries for submissions.
    """

    @staticmethod
    def list_submissions(
        *,
        patient_id: Optional[int] = None,
        store: Optional[CaseStore] = None,
    ) -> Sequence[Submission]:
        store = store or get_case_store()
        return store.list_submissions(patient_id=patient_id)

    @staticmethod
    def get_submission(submission_id, *, store: Optional[CaseStore] = None) -> Submission:
        store = store or get_case_store()
        return store.get_submission(submission_id)
