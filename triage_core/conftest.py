# triage_core/conftest.py
import pytest
from django.contrib.auth import get_user_model
from django.contrib.auth.models import Group
from rest_framework.test import APIClient

from triage_core.iam.identity import ROLE_GP, ROLE_PATIENT
from triage_core.submissions.reports import SymptomReport
from triage_core.submissions.services import SubmissionService


def _user_in_group(username: str, group_name: str):
    User = get_user_model()
    user = User.objects.create_user(username=username, password="testpass", is_active=True)
    group, _ = Group.objects.get_or_create(name=group_name)
    user.groups.add(group)
    return user


@pytest.fixture
def gp_user(db):
    return _user_in_group("dr-gp", ROLE_GP)


@pytest.fixture
def patient_user(db):
    return _user_in_group("patient-one", ROLE_PATIENT)


@pytest.fixture
def other_patient_user(db):
    return _user_in_group("patient-two", ROLE_PATIENT)


@pytest.fixture
def gp_client(gp_user):
    c = APIClient()
    c.force_authenticate(user=gp_user)
    return c


@pytest.fixture
def patient_client(patient_user):
    c = APIClient()
    c.force_authenticate(user=patient_user)
    return c


@pytest.fixture
def anon_client():
    return APIClient()


@pytest.fixture
def make_report():
    def _make(**overrides) -> SymptomReport:
        data = {
            "first_name": "Aoife",
            "last_name": "Murphy",
            "age": 34,
            "gender": "Female",
            "body_areas": ("Chest / Lungs",),
            "symptoms": ("Cough", "Shortness of breath"),
            "duration": "4 – 7 days",
            "severity": 2,
            "additional_info": "",
        }
        data.update(overrides)
        return SymptomReport(**data)

    return _make


@pytest.fixture
def submission(db, make_report):
    return SubmissionService.create_submission(make_report())


@pytest.fixture
def submission_payload():
    return {
        "first_name": "Ciarán",
        "last_name": "O'Connor",
        "age": 58,
        "gender": "Male",
        "body_areas": ["Heart / Cardiovascular"],
        "symptoms": ["Chest pain"],
        "duration": "Less than 24 hours",
        "severity": 4,
        "additional_info": "Pain spreads to the left arm.",
    }
