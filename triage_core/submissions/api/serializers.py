# triage_core/submissions/api/serializers.py
from rest_framework import serializers

from triage_core.submissions.models import Submission, SubmissionStatus
from triage_core.submissions.reports import SymptomReport
from triage_core.triage.constants import Duration, Severity


class SubmissionCreateSerializer(serializers.Serializer):
    first_name = serializers.CharField(max_length=150)
    last_name = serializers.CharField(max_length=150)
    age = serializers.IntegerField(min_value=0, max_value=150)
    gender = serializers.CharField(max_length=32)

    body_areas = serializers.ListField(child=serializers.CharField(max_length=100), allow_empty=False)
    symptoms = serializers.ListField(child=serializers.CharField(max_length=200), allow_empty=False)
    duration = serializers.ChoiceField(choices=Duration.choices)
    severity = serializers.ChoiceField(choices=Severity.choices)
    additional_info = serializers.CharField(required=False, allow_blank=True, default="")

    def to_report(self) -> SymptomReport:
        data = self.validated_data
        return SymptomReport(
            first_name=data["first_name"],
            last_name=data["last_name"],
            age=data["age"],
            gender=data["gender"],
            body_areas=tuple(data["body_areas"]),
            symptoms=tuple(data["symptoms"]),
            duration=data["duration"],
            severity=data["severity"],
            additional_info=data.get("additional_info", "") or "",
        )


class SubmissionStatusSerializer(serializers.Serializer):
    status = serializers.ChoiceField(choices=SubmissionStatus.choices)


class SubmissionListQuerySerializer(serializers.Serializer):
    patient_id = serializers.IntegerField(required=False, min_value=1)


class SubmissionSerializer(serializers.ModelSerializer):
    class Meta:
        model = Submission
        fields = [
            "id",
            "patient_id",
            "first_name",
            "last_name",
            "age",
            "gender",
            "body_areas",
            "symptoms",
            "duration",
            "severity",
            "additional_info",
            "triage_level",
            "status",
            "created_at",
        ]
        read_only_fields = fields
