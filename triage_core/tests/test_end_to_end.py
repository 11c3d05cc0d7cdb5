import pytest

from triage_core.actions.models import GPAction

pytestmark = pytest.mark.django_db


def test_red_case_booked_then_reviewed(anon_client, gp_client, submission_payload):
    r = anon_client.post("/api/v1/submissions/", submission_payload, format="json")
    assert r.status_code == 201, r.data
    sub = r.data
    assert sub["triage_level"] == "red"
    assert sub["status"] == "pending-review"

    r = gp_client.post(
        "/api/v1/appointments/",
        {"submission_id": sub["id"], "hospital": "St. James's", "date": "2026-03-01", "time": "09:00"},
        format="json",
    )
    assert r.status_code == 201, r.data
    assert r.data["status"] == "confirmed"

    actions = list(GPAction.objects.filter(submission_id=sub["id"]))
    assert len(actions) == 1
    assert actions[0].action_type == "refer"
    assert "St. James's" in actions[0].notes

    r = gp_client.get(f"/api/v1/submissions/{sub['id']}/")
    assert r.data["status"] == "pending-review"

    r = gp_client.post(
        "/api/v1/gp-actions/",
        {"submission_id": sub["id"], "action_type": "review"},
        format="json",
    )
    assert r.status_code == 201, r.data

    listing = gp_client.get("/api/v1/submissions/").data["results"]
    assert [s["status"] for s in listing if s["id"] == sub["id"]] == ["reviewed"]

    # Reading again changes nothing.
    again = gp_client.get("/api/v1/submissions/").data["results"]
    assert again == listing
    assert GPAction.objects.filter(submission_id=sub["id"]).count() == 2


def test_unversioned_alias_serves_the_same_api(anon_client):
    r = anon_client.get("/api/triage/catalog/")
    assert r.status_code == 200
