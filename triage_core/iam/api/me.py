# triage_core/iam/api/me.py

from __future__ import annotations

from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from triage_core.iam.identity import actor_from_request


class MeView(APIView):
    permission_classes = [IsAuthenticated]

    @extend_schema(responses={200: None}, tags=["IAM"])
    def get(self, request):
        actor = actor_from_request(request)
        user = request.user
        return Response(
            {
                "id": actor.id,
                "role": actor.role,
                "username": getattr(user, "username", None),
                "email": getattr(user, "email", None),
                "first_name": getattr(user, "first_name", ""),
                "last_name": getattr(user, "last_name", ""),
            },
            status=status.HTTP_200_OK,
        )
