# triage_core/actions/services.py
from __future__ import annotations

import logging
from typing import Optional

from triage_core.actions.models import ActionType, GPAction
from triage_core.actions.rules import next_status
from triage_core.common.errors import ValidationError
from triage_core.store import get_case_store
from triage_core.store.base import CaseStore

logger = logging.getLogger(__name__)


class ActionService:
    """
    GP action log writes.

    Recording an action and any status transition it triggers happen in one transaction,
    with the submission row locked so concurrent actions on it are applied one at a time.
    """

    @staticmethod
    def record_action(
        submission_id,
        action_type: str,
        *,
        actor_id: Optional[int] = None,
        notes: str = "",
        store: Optional[CaseStore] = None,
    ) -> GPAction:
        if action_type not in ActionType.values:
            raise ValidationError({"action_type": [f"Unknown action type: {action_type!r}."]})

        store = store or get_case_store()

        with store.atomic():
            submission = store.lock_submission(submission_id)

            action = GPAction(
                submission_id=submission.id,
                actor_id=actor_id,
                action_type=action_type,
                notes=notes or "",
            )
            store.insert_action(action)

            new_status = next_status(action_type, submission.status)
            if new_status != submission.status:
                store.update_submission_status(submission.id, new_status)
                logger.info(
                    "submission status transition id=%s %s->%s",
                    submission.id,
                    submission.status,
                    new_status,
                )

        logger.info(
            "gp action recorded id=%s submission_id=%s action_type=%s actor_id=%s",
            action.id,
            submission.id,
            action_type,
            actor_id,
        )
        return action
