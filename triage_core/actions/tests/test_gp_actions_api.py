import uuid

import pytest

pytestmark = pytest.mark.django_db

URL = "/api/v1/gp-actions/"


def test_gp_records_review(gp_client, gp_user, submission):
    r = gp_client.post(
        URL,
        {"submission_id": str(submission.id), "action_type": "review", "notes": "Looks fine"},
        format="json",
    )
    assert r.status_code == 201, r.data
    assert r.data["action_type"] == "review"
    assert r.data["actor_id"] == gp_user.id

    r = gp_client.get(f"/api/v1/submissions/{submission.id}/")
    assert r.data["status"] == "reviewed"


def test_unknown_action_type_is_400(gp_client, submission):
    r = gp_client.post(URL, {"submission_id": str(submission.id), "action_type": "approve"}, format="json")
    assert r.status_code == 400
    assert r.data["error"]["code"] == "validation_error"


def test_missing_submission_is_404(gp_client):
    r = gp_client.post(URL, {"submission_id": str(uuid.uuid4()), "action_type": "note"}, format="json")
    assert r.status_code == 404
    assert r.data["error"]["code"] == "not_found"


def test_patients_cannot_record_actions(patient_client, submission):
    r = patient_client.post(URL, {"submission_id": str(submission.id), "action_type": "review"}, format="json")
    assert r.status_code == 403
    assert r.data["error"]["code"] == "permission_denied"
