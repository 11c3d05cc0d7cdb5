from __future__ import annotations

from rest_framework import serializers

from triage_core.triage.constants import Duration, Severity, TriageLevel


class ClassifyRequestSerializer(serializers.Serializer):
    severity = serializers.ChoiceField(choices=Severity.choices)
    duration = serializers.ChoiceField(choices=Duration.choices)


class ClassifyResponseSerializer(serializers.Serializer):
    triage_level = serializers.ChoiceField(choices=TriageLevel.choices)
