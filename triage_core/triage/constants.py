# triage_core/triage/constants.py
from django.db import models


class TriageLevel(models.TextChoices):
    GREEN = "green", "Green (self-care)"
    AMBER = "amber", "Amber (GP review)"
    RED = "red", "Red (urgent)"


class Duration(models.TextChoices):
    # Wire values match the intake form verbatim (EN DASH separators).
    LESS_THAN_24_HOURS = "Less than 24 hours", "Less than 24 hours"
    ONE_TO_THREE_DAYS = "1 – 3 days", "1 – 3 days"
    FOUR_TO_SEVEN_DAYS = "4 – 7 days", "4 – 7 days"
    ONE_TO_TWO_WEEKS = "1 – 2 weeks", "1 – 2 weeks"
    MORE_THAN_TWO_WEEKS = "More than 2 weeks", "More than 2 weeks"


class Severity(models.IntegerChoices):
    MILD = 1, "Mild"
    MODERATE = 2, "Moderate"
    SEVERE = 3, "Severe"
    VERY_SEVERE = 4, "Very Severe"


# Onset recent enough for maximal severity to count as acute.
RECENT_ONSET = frozenset({Duration.LESS_THAN_24_HOURS, Duration.ONE_TO_THREE_DAYS})
