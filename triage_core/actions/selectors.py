# triage_core/actions/selectors.py
from __future__ import annotations

from typing import Optional, Sequence

from triage_core.actions.models import GPAction
from triage_core.store import get_case_store
from triage_core.store.base import CaseStore


class ActionSelectors:
    @staticmethod
    def list_actions(submission_id, *, store: Optional[CaseStore] = None) -> Sequence[GPAction]:
        """
        Newest first. Unknown submission ids yield an empty list.
        """
        store = store or get_case_store()
        return store.list_actions(submission_id)
