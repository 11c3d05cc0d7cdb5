# triage_core/submissions/reports.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Tuple


def _unique(values: Iterable[str]) -> Tuple[str, ...]:
    # dict keeps first-seen order
    return tuple(dict.fromkeys(values or ()))


@dataclass(frozen=True)
class SymptomReport:
    """
    What the patient filled in on the intake form.

    body_areas and symptoms behave as sets: duplicates collapse, first-seen order is kept.
    """

    first_name: str
    last_name: str
    age: int
    gender: str
    duration: str
    severity: int
    body_areas: Tuple[str, ...] = field(default_factory=tuple)
    symptoms: Tuple[str, ...] = field(default_factory=tuple)
    additional_info: str = ""

    def __post_init__(self):
        object.__setattr__(self, "body_areas", _unique(self.body_areas))
        object.__setattr__(self, "symptoms", _unique(self.symptoms))
        object.__setattr__(self, "additional_info", self.additional_info or "")
