# triage_core/iam/api/auth.py

from __future__ import annotations

from datetime import timedelta
from typing import Any

from django.conf import settings
from drf_spectacular.utils import extend_schema
from rest_framework import serializers, status
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView
from rest_framework_simplejwt.serializers import TokenObtainPairSerializer, TokenRefreshSerializer


class LoginRequestSerializer(serializers.Serializer):
    username = serializers.CharField()
    password = serializers.CharField()


class TokenPairResponseSerializer(serializers.Serializer):
    access = serializers.CharField()
    refresh = serializers.CharField()


class RefreshRequestSerializer(serializers.Serializer):
    refresh = serializers.CharField(required=False)


def _seconds(value: Any) -> int:
    """
    Convert a JWT lifetime setting into seconds.
    Supports timedelta OR int/float (already seconds).
    """
    if isinstance(value, timedelta):
        return int(value.total_seconds())
    try:
        return int(value)
    except (TypeError, ValueError):
        # 0 means "session cookie"
        return 0


def _cookie_names() -> tuple[str, str]:
    jwt_cfg = getattr(settings, "SIMPLE_JWT", {}) or {}
    return jwt_cfg.get("AUTH_COOKIE", "dd_access"), jwt_cfg.get("AUTH_COOKIE_REFRESH", "dd_refresh")


def _set_auth_cookies(response: Response, *, access: str, refresh: str) -> None:
    jwt_cfg = getattr(settings, "SIMPLE_JWT", {}) or {}
    access_name, refresh_name = _cookie_names()

    access_lifetime = _seconds(jwt_cfg.get("ACCESS_TOKEN_LIFETIME", timedelta(minutes=30)))
    refresh_lifetime = _seconds(jwt_cfg.get("REFRESH_TOKEN_LIFETIME", timedelta(days=14)))

    secure = bool(jwt_cfg.get("AUTH_COOKIE_SECURE", False))
    samesite = jwt_cfg.get("AUTH_COOKIE_SAMESITE", "Lax")

    for name, value, max_age in (
        (access_name, access, access_lifetime),
        (refresh_name, refresh, refresh_lifetime),
    ):
        response.set_cookie(
            name,
            value,
            max_age=max_age,
            httponly=True,
            secure=secure,
            samesite=samesite,
            path="/",
        )


class LoginView(APIView):
    permission_classes = [AllowAny]
    authentication_classes = []

    @extend_schema(request=LoginRequestSerializer, responses={200: TokenPairResponseSerializer}, tags=["IAM"])
    def post(self, request):
        serializer = TokenObtainPairSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        access = serializer.validated_data["access"]
        refresh = serializer.validated_data["refresh"]

        res = Response({"access": access, "refresh": refresh}, status=status.HTTP_200_OK)
        _set_auth_cookies(res, access=access, refresh=refresh)
        return res


class RefreshView(APIView):
    permission_classes = [AllowAny]
    authentication_classes = []

    @extend_schema(request=RefreshRequestSerializer, responses={200: TokenPairResponseSerializer}, tags=["IAM"])
    def post(self, request):
        _, refresh_cookie_name = _cookie_names()
        refresh = request.data.get("refresh") or request.COOKIES.get(refresh_cookie_name)

        serializer = TokenRefreshSerializer(data={"refresh": refresh})
        serializer.is_valid(raise_exception=True)

        access = serializer.validated_data["access"]
        new_refresh = serializer.validated_data.get("refresh", refresh)

        res = Response({"access": access, "refresh": new_refresh}, status=status.HTTP_200_OK)
        _set_auth_cookies(res, access=access, refresh=new_refresh)
        return res


class LogoutView(APIView):
    permission_classes = [IsAuthenticated]

    @extend_schema(request=None, responses={200: None}, tags=["IAM"])
    def post(self, request):
        res = Response({"detail": "logged out"}, status=status.HTTP_200_OK)
        for name in _cookie_names():
            res.delete_cookie(name, path="/")
        return res
