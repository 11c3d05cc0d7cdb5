import uuid
from unittest import mock

import pytest

from triage_core.actions.models import ActionType, GPAction
from triage_core.actions.rules import next_status
from triage_core.actions.selectors import ActionSelectors
from triage_core.actions.services import ActionService
from triage_core.common.errors import NotFound, StoreUnavailable, ValidationError
from triage_core.submissions.models import SubmissionStatus
from triage_core.submissions.selectors import SubmissionSelectors


def test_transition_table():
    assert next_status(ActionType.REVIEW, SubmissionStatus.PENDING_REVIEW) == SubmissionStatus.REVIEWED
    assert next_status(ActionType.REVIEW, SubmissionStatus.REVIEWED) == SubmissionStatus.REVIEWED
    for action_type in ActionType.values:
        if action_type != ActionType.REVIEW:
            assert next_status(action_type, SubmissionStatus.PENDING_REVIEW) == SubmissionStatus.PENDING_REVIEW


@pytest.mark.django_db
def test_review_moves_pending_to_reviewed(submission, gp_user):
    action = ActionService.record_action(submission.id, ActionType.REVIEW, actor_id=gp_user.id, notes="Seen")

    assert action.submission_id == submission.id
    assert action.actor_id == gp_user.id
    assert SubmissionSelectors.get_submission(submission.id).status == SubmissionStatus.REVIEWED


@pytest.mark.django_db
@pytest.mark.parametrize("action_type", [t for t in ActionType.values if t != ActionType.REVIEW])
def test_other_actions_leave_status_alone(submission, action_type):
    ActionService.record_action(submission.id, action_type, notes="x")
    assert SubmissionSelectors.get_submission(submission.id).status == SubmissionStatus.PENDING_REVIEW


@pytest.mark.django_db
def test_second_review_is_logged_and_status_stays_reviewed(submission):
    ActionService.record_action(submission.id, ActionType.REVIEW)
    ActionService.record_action(submission.id, ActionType.REVIEW)

    assert SubmissionSelectors.get_submission(submission.id).status == SubmissionStatus.REVIEWED
    assert GPAction.objects.filter(submission_id=submission.id, action_type=ActionType.REVIEW).count() == 2


@pytest.mark.django_db
def test_unknown_action_type_is_rejected(submission):
    with pytest.raises(ValidationError):
        ActionService.record_action(submission.id, "approve")
    assert GPAction.objects.count() == 0


@pytest.mark.django_db
def test_action_on_missing_submission_is_not_found():
    with pytest.raises(NotFound):
        ActionService.record_action(uuid.uuid4(), ActionType.NOTE)
    assert GPAction.objects.count() == 0


@pytest.mark.django_db
def test_list_actions_newest_first(submission):
    a = ActionService.record_action(submission.id, ActionType.NOTE, notes="first")
    b = ActionService.record_action(submission.id, ActionType.PRESCRIBE, notes="second")

    assert [x.id for x in ActionSelectors.list_actions(submission.id)] == [b.id, a.id]
    assert list(ActionSelectors.list_actions(uuid.uuid4())) == []


@pytest.mark.django_db
def test_actions_are_append_only(submission):
    action = ActionService.record_action(submission.id, ActionType.NOTE, notes="original")

    action.notes = "edited"
    with pytest.raises(ValidationError):
        action.save()
    with pytest.raises(ValidationError):
        action.delete()

    assert GPAction.objects.get(id=action.id).notes == "original"


@pytest.mark.django_db
def test_review_is_rolled_back_when_status_write_fails(submission):
    with mock.patch(
        "triage_core.store.orm.OrmCaseStore.update_submission_status",
        side_effect=StoreUnavailable("update_submission_status failed"),
    ):
        with pytest.raises(StoreUnavailable):
            ActionService.record_action(submission.id, ActionType.REVIEW)

    assert GPAction.objects.count() == 0
    assert SubmissionSelectors.get_submission(submission.id).status == SubmissionStatus.PENDING_REVIEW
