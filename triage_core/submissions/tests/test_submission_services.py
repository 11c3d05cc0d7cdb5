import uuid

import pytest

from triage_core.common.errors import NotFound, ValidationError
from triage_core.submissions.models import Submission, SubmissionStatus
from triage_core.submissions.reports import SymptomReport
from triage_core.submissions.selectors import SubmissionSelectors
from triage_core.submissions.services import SubmissionService
from triage_core.triage.constants import TriageLevel

pytestmark = pytest.mark.django_db


def test_create_classifies_and_starts_pending_review(make_report):
    sub = SubmissionService.create_submission(
        make_report(severity=4, duration="Less than 24 hours"),
        patient_id=42,
    )

    sub.refresh_from_db()
    assert sub.triage_level == TriageLevel.RED
    assert sub.status == SubmissionStatus.PENDING_REVIEW
    assert sub.patient_id == 42
    assert sub.created_at is not None


def test_anonymous_submission_has_no_patient(make_report):
    sub = SubmissionService.create_submission(make_report())
    assert sub.patient_id is None
    assert sub.triage_level == TriageLevel.GREEN


def test_duplicate_areas_and_symptoms_collapse_in_order():
    report = SymptomReport(
        first_name="A",
        last_name="B",
        age=30,
        gender="Other",
        body_areas=("Skin", "Eyes", "Skin"),
        symptoms=("Rash", "Itching", "Rash"),
        duration="1 – 2 weeks",
        severity=1,
    )
    sub = SubmissionService.create_submission(report)
    sub.refresh_from_db()
    assert sub.body_areas == ["Skin", "Eyes"]
    assert sub.symptoms == ["Rash", "Itching"]


@pytest.mark.parametrize(
    "overrides, field",
    [
        ({"body_areas": ()}, "body_areas"),
        ({"symptoms": ()}, "symptoms"),
        ({"first_name": "  "}, "first_name"),
        ({"age": -1}, "age"),
        ({"severity": 5}, "severity"),
        ({"severity": 0}, "severity"),
        ({"duration": "A while"}, "duration"),
    ],
)
def test_invalid_reports_are_rejected_without_persisting(make_report, overrides, field):
    with pytest.raises(ValidationError) as exc:
        SubmissionService.create_submission(make_report(**overrides))

    assert field in exc.value.message_dict
    assert Submission.objects.count() == 0


def test_list_is_newest_first_and_filters_by_patient(make_report):
    first = SubmissionService.create_submission(make_report(), patient_id=1)
    second = SubmissionService.create_submission(make_report(), patient_id=2)
    third = SubmissionService.create_submission(make_report(), patient_id=1)

    assert [s.id for s in SubmissionSelectors.list_submissions()] == [third.id, second.id, first.id]
    assert [s.id for s in SubmissionSelectors.list_submissions(patient_id=1)] == [third.id, first.id]


def test_get_missing_or_malformed_id_raises_not_found():
    with pytest.raises(NotFound):
        SubmissionSelectors.get_submission(uuid.uuid4())
    with pytest.raises(NotFound):
        SubmissionSelectors.get_submission("not-a-uuid")


def test_update_status_overwrites_in_both_directions(submission):
    SubmissionService.update_status(submission.id, SubmissionStatus.REVIEWED)
    assert SubmissionSelectors.get_submission(submission.id).status == SubmissionStatus.REVIEWED

    SubmissionService.update_status(submission.id, SubmissionStatus.PENDING_REVIEW)
    assert SubmissionSelectors.get_submission(submission.id).status == SubmissionStatus.PENDING_REVIEW


def test_update_status_rejects_unknown_status(submission):
    with pytest.raises(ValidationError):
        SubmissionService.update_status(submission.id, "archived")


def test_update_status_missing_submission():
    with pytest.raises(NotFound):
        SubmissionService.update_status(uuid.uuid4(), SubmissionStatus.REVIEWED)


def test_report_fields_are_immutable(submission):
    submission.first_name = "Changed"
    with pytest.raises(ValidationError):
        submission.save()

    with pytest.raises(ValidationError):
        submission.save(update_fields=["first_name", "status"])

    with pytest.raises(ValidationError):
        submission.delete()

    assert Submission.objects.get(id=submission.id).first_name == "Aoife"
