# triage_core/actions/api/views.py
from __future__ import annotations

from drf_spectacular.utils import extend_schema
from rest_framework import status, viewsets
from rest_framework.response import Response

from triage_core.actions.api.serializers import GPActionCreateSerializer, GPActionSerializer
from triage_core.actions.models import GPAction
from triage_core.actions.services import ActionService
from triage_core.common.permissions import ClinicianPermission
from triage_core.iam.identity import actor_from_request


class GPActionViewSet(viewsets.ViewSet):
    """
    Append-only: actions are created here and read through submissions/{id}/actions/.
    """
    permission_classes = [ClinicianPermission]
    serializer_class = GPActionSerializer
    queryset = GPAction.objects.none()

    @extend_schema(request=GPActionCreateSerializer, responses={201: GPActionSerializer})
    def create(self, request):
        ser = GPActionCreateSerializer(data=request.data or {})
        ser.is_valid(raise_exception=True)

        actor = actor_from_request(request)
        gp_action = ActionService.record_action(
            ser.validated_data["submission_id"],
            ser.validated_data["action_type"],
            actor_id=actor.id,
            notes=ser.validated_data.get("notes", "") or "",
        )
        return Response(GPActionSerializer(gp_action).data, status=status.HTTP_201_CREATED)
