# triage_core/triage/classifier.py
"""
Rule-based urgency classifier.

Rules, applied in order (later rules override earlier ones):
  1. green by default
  2. amber when severity >= 3 or symptoms have lasted more than 2 weeks
  3. red when severity is 4 and onset is recent (< 24 hours or 1-3 days)

Severity 4 with a chronic duration stays amber: red requires recent onset.
"""
from __future__ import annotations

from triage_core.common.errors import InvalidInput
from triage_core.triage.constants import RECENT_ONSET, Duration, Severity, TriageLevel

_DURATIONS = frozenset(Duration.values)
_SEVERITIES = frozenset(Severity.values)


def _check_domain(severity, duration) -> None:
    # bool is an int subclass; True must not pass as severity 1.
    if isinstance(severity, bool) or not isinstance(severity, int) or severity not in _SEVERITIES:
        raise InvalidInput(f"severity must be an integer in 1..4, got {severity!r}")
    if not isinstance(duration, str) or duration not in _DURATIONS:
        raise InvalidInput(f"unrecognized duration {duration!r}")


def classify(severity: int, duration: str) -> TriageLevel:
    _check_domain(severity, duration)

    level = TriageLevel.GREEN

    if severity >= Severity.SEVERE or duration == Duration.MORE_THAN_TWO_WEEKS:
        level = TriageLevel.AMBER

    if severity == Severity.VERY_SEVERE and duration in RECENT_ONSET:
        level = TriageLevel.RED

    return level
