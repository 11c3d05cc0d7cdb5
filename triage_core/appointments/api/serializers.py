# triage_core/appointments/api/serializers.py
from rest_framework import serializers

from triage_core.appointments.models import Appointment, AppointmentStatus


class AppointmentCreateSerializer(serializers.Serializer):
    submission_id = serializers.UUIDField(required=False, allow_null=True)
    patient_id = serializers.IntegerField(required=False, allow_null=True, min_value=1)

    hospital = serializers.CharField(max_length=255)
    department = serializers.CharField(max_length=255, required=False, allow_blank=True, default="")
    doctor = serializers.CharField(max_length=255, required=False, allow_blank=True, default="")

    date = serializers.DateField()
    time = serializers.TimeField()

    reason = serializers.CharField(required=False, allow_blank=True, default="")
    notes = serializers.CharField(required=False, allow_blank=True, default="")


class AppointmentUpdateSerializer(serializers.Serializer):
    status = serializers.ChoiceField(choices=AppointmentStatus.choices, required=False)
    date = serializers.DateField(required=False)
    time = serializers.TimeField(required=False)

    def validate(self, attrs):
        has_slot = "date" in attrs and "time" in attrs
        if not has_slot and "status" not in attrs:
            raise serializers.ValidationError("Provide a status, or both date and time.")
        return attrs


class AppointmentRescheduleSerializer(serializers.Serializer):
    date = serializers.DateField()
    time = serializers.TimeField()


class AppointmentListQuerySerializer(serializers.Serializer):
    patient_id = serializers.IntegerField(required=False, min_value=1)
    submission_id = serializers.UUIDField(required=False)


class AppointmentSerializer(serializers.ModelSerializer):
    time = serializers.TimeField(format="%H:%M")

    class Meta:
        model = Appointment
        fields = [
            "id",
            "submission_id",
            "patient_id",
            "actor_id",
            "hospital",
            "department",
            "doctor",
            "date",
            "time",
            "reason",
            "notes",
            "status",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields
