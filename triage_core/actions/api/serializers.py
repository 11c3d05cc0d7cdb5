# triage_core/actions/api/serializers.py
from rest_framework import serializers

from triage_core.actions.models import ActionType, GPAction


class GPActionCreateSerializer(serializers.Serializer):
    submission_id = serializers.UUIDField()
    action_type = serializers.ChoiceField(choices=ActionType.choices)
    notes = serializers.CharField(required=False, allow_blank=True, default="")


class GPActionSerializer(serializers.ModelSerializer):
    class Meta:
        model = GPAction
        fields = ["id", "submission_id", "actor_id", "action_type", "notes", "created_at"]
        read_only_fields = fields
