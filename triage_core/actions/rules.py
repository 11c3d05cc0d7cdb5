# triage_core/actions/rules.py
"""
Submission status transitions driven by GP actions.

(action_type, current status) -> new status. Pairs not listed leave the status alone;
reviewed is terminal.
"""
from __future__ import annotations

from triage_core.actions.models import ActionType
from triage_core.submissions.models import SubmissionStatus

TRANSITIONS: dict[tuple[str, str], str] = {
    (ActionType.REVIEW, SubmissionStatus.PENDING_REVIEW): SubmissionStatus.REVIEWED,
}


def next_status(action_type: str, current_status: str) -> str:
    return TRANSITIONS.get((action_type, current_status), current_status)
