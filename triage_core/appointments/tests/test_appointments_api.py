import uuid

import pytest

from triage_core.actions.models import GPAction
from triage_core.appointments.services import AppointmentService

pytestmark = pytest.mark.django_db

URL = "/api/v1/appointments/"


def _payload(**overrides):
    data = {"hospital": "St. James's", "date": "2026-03-01", "time": "09:00"}
    data.update(overrides)
    return data


def test_gp_books_with_referral(gp_client, gp_user, submission):
    r = gp_client.post(URL, _payload(submission_id=str(submission.id), reason="Chest pain"), format="json")
    assert r.status_code == 201, r.data
    assert r.data["status"] == "confirmed"
    assert r.data["actor_id"] == gp_user.id
    assert r.data["time"] == "09:00"

    r = gp_client.get(f"/api/v1/submissions/{submission.id}/actions/")
    assert [a["action_type"] for a in r.data] == ["refer"]
    assert r.data[0]["notes"].endswith("Reason: Chest pain")


def test_booking_requires_hospital_date_and_time(gp_client):
    r = gp_client.post(URL, {"hospital": "St. James's"}, format="json")
    assert r.status_code == 400
    assert set(r.data["error"]["details"]) == {"date", "time"}


def test_patient_cannot_book(patient_client):
    r = patient_client.post(URL, _payload(), format="json")
    assert r.status_code == 403


def test_patient_reads_only_own_appointments(patient_client, patient_user):
    mine = AppointmentService.book_appointment(patient_id=patient_user.id, **_payload())
    AppointmentService.book_appointment(patient_id=patient_user.id + 1, **_payload())

    r = patient_client.get(URL)
    assert r.status_code == 200
    assert [a["id"] for a in r.data["results"]] == [str(mine.id)]


def test_gp_filters_by_submission(gp_client, submission):
    AppointmentService.book_appointment(submission_id=submission.id, **_payload())
    AppointmentService.book_appointment(**_payload())

    r = gp_client.get(URL, {"submission_id": str(submission.id)})
    assert r.data["count"] == 1


def test_patch_cancel_then_reschedule(gp_client):
    appt = AppointmentService.book_appointment(**_payload())

    r = gp_client.patch(f"{URL}{appt.id}/", {"status": "cancelled"}, format="json")
    assert r.status_code == 200, r.data
    assert r.data["status"] == "cancelled"

    r = gp_client.patch(f"{URL}{appt.id}/", {"date": "2026-03-05", "time": "11:30"}, format="json")
    assert r.status_code == 200, r.data
    assert r.data["status"] == "confirmed"
    assert r.data["date"] == "2026-03-05"


def test_patch_with_empty_body_is_400(gp_client):
    appt = AppointmentService.book_appointment(**_payload())
    r = gp_client.patch(f"{URL}{appt.id}/", {}, format="json")
    assert r.status_code == 400


def test_cancel_and_reschedule_endpoints(gp_client):
    appt = AppointmentService.book_appointment(**_payload())

    r = gp_client.post(f"{URL}{appt.id}/cancel/")
    assert r.status_code == 200
    r = gp_client.post(f"{URL}{appt.id}/cancel/")
    assert r.status_code == 200
    assert r.data["status"] == "cancelled"

    r = gp_client.post(f"{URL}{appt.id}/reschedule/", {"date": "2026-03-09", "time": "16:00"}, format="json")
    assert r.status_code == 200
    assert r.data["status"] == "confirmed"


def test_unknown_appointment_is_404(gp_client):
    r = gp_client.post(f"{URL}{uuid.uuid4()}/cancel/")
    assert r.status_code == 404
    assert GPAction.objects.count() == 0
