# triage_core/triage/catalog.py
"""
Intake form vocabulary: body areas, per-area symptom suggestions, durations and
severity labels. Submissions are not restricted to these values; the catalog feeds
the intake UI and demo seeding.
"""
from __future__ import annotations

from triage_core.triage.constants import Duration, Severity

BODY_AREAS = [
    "Head / Face",
    "Eyes",
    "Ears / Nose / Throat",
    "Chest / Lungs",
    "Heart / Cardiovascular",
    "Abdomen / Stomach",
    "Back / Spine",
    "Skin",
    "Arms / Hands",
    "Legs / Feet",
    "Urinary / Reproductive",
    "Mental Health",
    "General / Whole Body",
]

COMMON_SYMPTOMS = {
    "Head / Face": ["Headache", "Dizziness", "Migraine", "Jaw pain"],
    "Eyes": ["Blurred vision", "Eye pain", "Red eye", "Itchy eyes"],
    "Ears / Nose / Throat": ["Sore throat", "Earache", "Blocked nose", "Nosebleed", "Difficulty swallowing"],
    "Chest / Lungs": ["Cough", "Shortness of breath", "Wheezing", "Chest tightness"],
    "Heart / Cardiovascular": ["Chest pain", "Palpitations", "Swollen ankles", "High blood pressure"],
    "Abdomen / Stomach": ["Nausea", "Vomiting", "Diarrhoea", "Constipation", "Stomach cramps", "Bloating"],
    "Back / Spine": ["Lower back pain", "Upper back pain", "Neck pain", "Stiffness"],
    "Skin": ["Rash", "Itching", "Swelling", "Bruising", "Wound"],
    "Arms / Hands": ["Joint pain", "Numbness", "Weakness", "Swelling"],
    "Legs / Feet": ["Leg pain", "Swollen legs", "Numbness", "Cramps"],
    "Urinary / Reproductive": ["Painful urination", "Frequent urination", "Blood in urine", "Pelvic pain"],
    "Mental Health": ["Anxiety", "Low mood", "Insomnia", "Stress", "Fatigue"],
    "General / Whole Body": ["Fever", "Fatigue", "Weight loss", "Night sweats", "Loss of appetite"],
}

SEVERITY_DESCRIPTIONS = {
    Severity.MILD: "Noticeable but doesn't affect daily life",
    Severity.MODERATE: "Uncomfortable, affects some activities",
    Severity.SEVERE: "Significant impact on daily life",
    Severity.VERY_SEVERE: "Barely able to carry on normally",
}


def suggested_symptoms(body_areas) -> list[str]:
    """
    Symptom suggestions for the selected areas, de-duplicated in display order.
    """
    seen: dict[str, None] = {}
    for area in body_areas:
        for symptom in COMMON_SYMPTOMS.get(area, []):
            seen.setdefault(symptom, None)
    return list(seen)


def as_dict() -> dict:
    return {
        "body_areas": list(BODY_AREAS),
        "common_symptoms": {area: list(items) for area, items in COMMON_SYMPTOMS.items()},
        "durations": list(Duration.values),
        "severity_levels": [
            {"value": s.value, "label": s.label, "description": SEVERITY_DESCRIPTIONS[s]}
            for s in Severity
        ],
    }
