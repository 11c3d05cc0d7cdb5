import uuid

import pytest

from triage_core.submissions.models import Submission

pytestmark = pytest.mark.django_db

URL = "/api/v1/submissions/"


def test_anonymous_can_submit(anon_client, submission_payload):
    r = anon_client.post(URL, submission_payload, format="json")
    assert r.status_code == 201, r.data
    assert r.data["triage_level"] == "red"
    assert r.data["status"] == "pending-review"
    assert r.data["patient_id"] is None


def test_patient_submission_is_linked_to_patient(patient_client, patient_user, submission_payload):
    r = patient_client.post(URL, submission_payload, format="json")
    assert r.status_code == 201, r.data
    assert r.data["patient_id"] == patient_user.id


def test_submit_with_empty_symptoms_is_400(anon_client, submission_payload):
    submission_payload["symptoms"] = []
    r = anon_client.post(URL, submission_payload, format="json")
    assert r.status_code == 400
    assert r.data["error"]["code"] == "validation_error"
    assert "symptoms" in r.data["error"]["details"]
    assert Submission.objects.count() == 0


def test_gp_lists_all_patient_lists_own(gp_client, patient_client, patient_user, make_report):
    from triage_core.submissions.services import SubmissionService

    SubmissionService.create_submission(make_report(), patient_id=patient_user.id)
    SubmissionService.create_submission(make_report(), patient_id=patient_user.id + 100)

    r = gp_client.get(URL)
    assert r.status_code == 200
    assert r.data["count"] == 2

    r = gp_client.get(URL, {"patient_id": patient_user.id})
    assert r.data["count"] == 1

    # patient_id from the query string is ignored for patients
    r = patient_client.get(URL, {"patient_id": patient_user.id + 100})
    assert r.status_code == 200
    assert r.data["count"] == 1
    assert r.data["results"][0]["patient_id"] == patient_user.id


def test_list_requires_authentication(anon_client):
    r = anon_client.get(URL)
    assert r.status_code in (401, 403)


def test_retrieve_and_missing(gp_client, submission):
    r = gp_client.get(f"{URL}{submission.id}/")
    assert r.status_code == 200
    assert r.data["id"] == str(submission.id)

    r = gp_client.get(f"{URL}{uuid.uuid4()}/")
    assert r.status_code == 404
    assert r.data["error"]["code"] == "not_found"


def test_patient_cannot_read_someone_elses_submission(patient_client, submission):
    r = patient_client.get(f"{URL}{submission.id}/")
    assert r.status_code == 403


def test_gp_can_override_status(gp_client, submission):
    r = gp_client.patch(f"{URL}{submission.id}/", {"status": "reviewed"}, format="json")
    assert r.status_code == 200, r.data
    assert r.data["status"] == "reviewed"

    r = gp_client.patch(f"{URL}{submission.id}/", {"status": "closed"}, format="json")
    assert r.status_code == 400


def test_patient_cannot_change_status(patient_client, patient_user, make_report):
    from triage_core.submissions.services import SubmissionService

    own = SubmissionService.create_submission(make_report(), patient_id=patient_user.id)
    r = patient_client.patch(f"{URL}{own.id}/", {"status": "reviewed"}, format="json")
    assert r.status_code == 403


def test_action_log_is_clinician_only(gp_client, patient_client, submission):
    r = gp_client.get(f"{URL}{submission.id}/actions/")
    assert r.status_code == 200
    assert r.data == []

    r = patient_client.get(f"{URL}{submission.id}/actions/")
    assert r.status_code == 403
