# triage_core/submissions/api/views.py
from __future__ import annotations

from drf_spectacular.utils import OpenApiParameter, extend_schema
from rest_framework import status, viewsets
from rest_framework.decorators import action
from rest_framework.response import Response

from triage_core.actions.api.serializers import GPActionSerializer
from triage_core.actions.selectors import ActionSelectors
from triage_core.common.api.pagination import paginate
from triage_core.common.permissions import ClinicianPermission, SubmissionPermission
from triage_core.iam.identity import ROLE_PATIENT, actor_from_request
from triage_core.submissions.api.serializers import (
    SubmissionCreateSerializer,
    SubmissionListQuerySerializer,
    SubmissionSerializer,
    SubmissionStatusSerializer,
)
from triage_core.submissions.models import Submission
from triage_core.submissions.selectors import SubmissionSelectors
from triage_core.submissions.services import SubmissionService


class SubmissionViewSet(viewsets.ViewSet):
    permission_classes = [SubmissionPermission]
    serializer_class = SubmissionSerializer
    queryset = Submission.objects.none()

    def get_permissions(self):
        if self.action == "action_log":
            return [ClinicianPermission()]
        return super().get_permissions()

    def get_object(self, request, pk) -> Submission:
        submission = SubmissionSelectors.get_submission(pk)
        self.check_object_permissions(request, submission)
        return submission

    @extend_schema(
        parameters=[OpenApiParameter("patient_id", int, required=False)],
        responses={200: SubmissionSerializer(many=True)},
    )
    def list(self, request):
        q = SubmissionListQuerySerializer(data=request.query_params)
        q.is_valid(raise_exception=True)
        patient_id = q.validated_data.get("patient_id")

        actor = actor_from_request(request)
        if actor.role == ROLE_PATIENT:
            # Patients only ever see their own history.
            patient_id = actor.id

        rows = SubmissionSelectors.list_submissions(patient_id=patient_id)
        return paginate(request, rows, SubmissionSerializer)

    @extend_schema(responses={200: SubmissionSerializer})
    def retrieve(self, request, pk=None):
        submission = self.get_object(request, pk)
        return Response(SubmissionSerializer(submission).data, status=status.HTTP_200_OK)

    @extend_schema(request=SubmissionCreateSerializer, responses={201: SubmissionSerializer})
    def create(self, request):
        ser = SubmissionCreateSerializer(data=request.data or {})
        ser.is_valid(raise_exception=True)

        actor = actor_from_request(request)
        patient_id = actor.id if actor and actor.role == ROLE_PATIENT else None

        submission = SubmissionService.create_submission(ser.to_report(), patient_id=patient_id)
        return Response(SubmissionSerializer(submission).data, status=status.HTTP_201_CREATED)

    @extend_schema(request=SubmissionStatusSerializer, responses={200: SubmissionSerializer})
    def partial_update(self, request, pk=None):
        ser = SubmissionStatusSerializer(data=request.data or {})
        ser.is_valid(raise_exception=True)

        submission = self.get_object(request, pk)
        submission = SubmissionService.update_status(submission.id, ser.validated_data["status"])
        return Response(SubmissionSerializer(submission).data, status=status.HTTP_200_OK)

    @extend_schema(responses={200: GPActionSerializer(many=True)})
    @action(detail=True, methods=["get"], url_path="actions", url_name="actions")
    def action_log(self, request, pk=None):
        submission = self.get_object(request, pk)
        rows = ActionSelectors.list_actions(submission.id)
        return Response(GPActionSerializer(rows, many=True).data, status=status.HTTP_200_OK)
