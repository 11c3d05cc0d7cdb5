import pytest
from rest_framework.test import APIClient

from triage_core.triage import catalog

pytestmark = pytest.mark.django_db


def test_catalog_lists_form_vocabulary():
    r = APIClient().get("/api/v1/triage/catalog/")
    assert r.status_code == 200, r.data
    assert "Heart / Cardiovascular" in r.data["body_areas"]
    assert r.data["durations"][0] == "Less than 24 hours"
    assert [s["value"] for s in r.data["severity_levels"]] == [1, 2, 3, 4]


def test_classify_preview():
    r = APIClient().post(
        "/api/v1/triage/classify/",
        {"severity": 4, "duration": "Less than 24 hours"},
        format="json",
    )
    assert r.status_code == 200, r.data
    assert r.data["triage_level"] == "red"


def test_classify_preview_rejects_out_of_range_severity():
    r = APIClient().post(
        "/api/v1/triage/classify/",
        {"severity": 7, "duration": "Less than 24 hours"},
        format="json",
    )
    assert r.status_code == 400
    assert r.data["error"]["code"] == "validation_error"


def test_suggested_symptoms_are_deduplicated():
    suggestions = catalog.suggested_symptoms(["Mental Health", "General / Whole Body"])
    assert suggestions.count("Fatigue") == 1
    assert suggestions[0] == "Anxiety"
