# triage_core/triage/api/views.py
from __future__ import annotations

from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from triage_core.triage import catalog
from triage_core.triage.api.serializers import ClassifyRequestSerializer, ClassifyResponseSerializer
from triage_core.triage.classifier import classify


class TriageCatalogView(APIView):
    """
    Intake vocabulary for the symptom form.
    """
    permission_classes = [AllowAny]

    @extend_schema(responses={200: None}, tags=["Triage"])
    def get(self, request):
        return Response(catalog.as_dict(), status=status.HTTP_200_OK)


class TriageClassifyView(APIView):
    """
    Preview the urgency tier for a severity/duration pair. Nothing is persisted.
    """
    permission_classes = [AllowAny]

    @extend_schema(request=ClassifyRequestSerializer, responses={200: ClassifyResponseSerializer}, tags=["Triage"])
    def post(self, request):
        ser = ClassifyRequestSerializer(data=request.data or {})
        ser.is_valid(raise_exception=True)

        level = classify(ser.validated_data["severity"], ser.validated_data["duration"])
        return Response({"triage_level": level.value}, status=status.HTTP_200_OK)
