# triage_core/appointments/api/views.py
from __future__ import annotations

from drf_spectacular.utils import OpenApiParameter, extend_schema
from rest_framework import status, viewsets
from rest_framework.decorators import action
from rest_framework.exceptions import PermissionDenied
from rest_framework.response import Response

from triage_core.appointments.api.serializers import (
    AppointmentCreateSerializer,
    AppointmentListQuerySerializer,
    AppointmentRescheduleSerializer,
    AppointmentSerializer,
    AppointmentUpdateSerializer,
)
from triage_core.appointments.models import Appointment
from triage_core.appointments.selectors import AppointmentSelectors
from triage_core.appointments.services import AppointmentService
from triage_core.common.api.pagination import paginate
from triage_core.common.permissions import ClinicianPermission
from triage_core.iam.identity import ROLE_PATIENT, actor_from_request


class AppointmentViewSet(viewsets.ViewSet):
    """
    GPs book and manage appointments; patients can read their own.
    """
    permission_classes = [ClinicianPermission]
    allow_patient_reads = True
    serializer_class = AppointmentSerializer
    queryset = Appointment.objects.none()

    @extend_schema(
        parameters=[
            OpenApiParameter("patient_id", int, required=False),
            OpenApiParameter("submission_id", str, required=False),
        ],
        responses={200: AppointmentSerializer(many=True)},
    )
    def list(self, request):
        q = AppointmentListQuerySerializer(data=request.query_params)
        q.is_valid(raise_exception=True)
        patient_id = q.validated_data.get("patient_id")
        submission_id = q.validated_data.get("submission_id")

        actor = actor_from_request(request)
        if actor.role == ROLE_PATIENT:
            patient_id = actor.id

        rows = AppointmentSelectors.list_appointments(patient_id=patient_id, submission_id=submission_id)
        return paginate(request, rows, AppointmentSerializer)

    @extend_schema(responses={200: AppointmentSerializer})
    def retrieve(self, request, pk=None):
        appointment = AppointmentSelectors.get_appointment(pk)

        actor = actor_from_request(request)
        if actor.role == ROLE_PATIENT and appointment.patient_id != actor.id:
            raise PermissionDenied()

        return Response(AppointmentSerializer(appointment).data, status=status.HTTP_200_OK)

    @extend_schema(request=AppointmentCreateSerializer, responses={201: AppointmentSerializer})
    def create(self, request):
        ser = AppointmentCreateSerializer(data=request.data or {})
        ser.is_valid(raise_exception=True)
        data = ser.validated_data

        actor = actor_from_request(request)
        appointment = AppointmentService.book_appointment(
            hospital=data["hospital"],
            date=data["date"],
            time=data["time"],
            submission_id=data.get("submission_id"),
            patient_id=data.get("patient_id"),
            actor_id=actor.id,
            department=data.get("department", ""),
            doctor=data.get("doctor", ""),
            reason=data.get("reason", ""),
            notes=data.get("notes", ""),
        )
        return Response(AppointmentSerializer(appointment).data, status=status.HTTP_201_CREATED)

    @extend_schema(request=AppointmentUpdateSerializer, responses={200: AppointmentSerializer})
    def partial_update(self, request, pk=None):
        ser = AppointmentUpdateSerializer(data=request.data or {})
        ser.is_valid(raise_exception=True)
        data = ser.validated_data

        appointment = AppointmentService.update_appointment(
            pk,
            status=data.get("status"),
            date=data.get("date"),
            time=data.get("time"),
        )
        return Response(AppointmentSerializer(appointment).data, status=status.HTTP_200_OK)

    @extend_schema(request=None, responses={200: AppointmentSerializer})
    @action(detail=True, methods=["post"], url_path="cancel")
    def cancel(self, request, pk=None):
        appointment = AppointmentService.cancel_appointment(pk)
        return Response(AppointmentSerializer(appointment).data, status=status.HTTP_200_OK)

    @extend_schema(request=AppointmentRescheduleSerializer, responses={200: AppointmentSerializer})
    @action(detail=True, methods=["post"], url_path="reschedule")
    def reschedule(self, request, pk=None):
        ser = AppointmentRescheduleSerializer(data=request.data or {})
        ser.is_valid(raise_exception=True)

        appointment = AppointmentService.reschedule_appointment(
            pk,
            ser.validated_data["date"],
            ser.validated_data["time"],
        )
        return Response(AppointmentSerializer(appointment).data, status=status.HTTP_200_OK)
