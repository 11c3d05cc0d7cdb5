# triage_core/common/api/exceptions.py

from __future__ import annotations

import logging
import uuid
from typing import Any

from django.core.exceptions import ValidationError as DjangoValidationError
from django.http import Http404
from rest_framework import status
from rest_framework.exceptions import (
    APIException,
    NotAuthenticated,
    NotFound as DRFNotFound,
    PermissionDenied,
    ValidationError,
)
from rest_framework.response import Response
from rest_framework.views import exception_handler as drf_exception_handler

from triage_core.common.errors import NotFound, StoreUnavailable

logger = logging.getLogger(__name__)


def ensure_request_id(request) -> str:
    """
    Ensures request has a stable request_id attribute and returns it.
    Safe to call from middleware and DRF exception handler.
    """
    rid = getattr(request, "request_id", None) if request is not None else None
    if not rid:
        rid = uuid.uuid4().hex
        if request is not None:
            setattr(request, "request_id", rid)
    return rid


def build_error_envelope(*, request=None, code: str, message: str, details: Any = None) -> dict[str, Any]:
    """
    Canonical error envelope. Reusable from Django middleware (JsonResponse) and DRF (Response).
    """
    rid = ensure_request_id(request)
    return {
        "error": {
            "code": code,
            "message": message,
            "details": details,
            "request_id": rid,
        }
    }


class StoreUnavailableError(APIException):
    status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    default_detail = "Case store is temporarily unavailable."
    default_code = "store_unavailable"


def _validation_payload(exc: DjangoValidationError) -> dict:
    if hasattr(exc, "error_dict"):
        return exc.message_dict

    messages = exc.messages
    if len(messages) == 1:
        return {"detail": messages[0]}
    return {"detail": list(messages)}


def _translate_domain_error(exc: Exception) -> Exception:
    """
    Services raise Django/domain errors; the API speaks DRF exceptions.
    """
    if isinstance(exc, DjangoValidationError):
        return ValidationError(_validation_payload(exc))
    if isinstance(exc, NotFound):
        return DRFNotFound(f"{exc.entity} not found.")
    if isinstance(exc, StoreUnavailable):
        logger.warning("case store unavailable: %s", exc)
        return StoreUnavailableError()
    return exc


def _code_for(exc: Exception, http_status: int) -> str:
    if isinstance(exc, ValidationError):
        return "validation_error"
    if isinstance(exc, NotAuthenticated):
        return "not_authenticated"
    if isinstance(exc, PermissionDenied):
        return "permission_denied"
    if isinstance(exc, Http404):
        return "not_found"
    if isinstance(exc, APIException):
        return getattr(exc, "default_code", "api_error") or "api_error"
    if http_status >= 500:
        return "server_error"
    return "error"


def api_exception_handler(exc: Exception, context: dict[str, Any]):
    request = context.get("request")
    exc = _translate_domain_error(exc)
    response = drf_exception_handler(exc, context)

    # Truly unhandled error (InvalidInput lands here: a contract violation, never user input)
    if response is None:
        logger.error(
            "unhandled error request_id=%s",
            ensure_request_id(request),
            exc_info=(type(exc), exc, exc.__traceback__),
        )
        return Response(
            build_error_envelope(
                request=request,
                code="server_error",
                message="Unexpected server error.",
                details=None,
            ),
            status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    http_status = response.status_code
    code = _code_for(exc, http_status)

    data = response.data

    # Message + details rules:
    # 1) If {"detail": "..."} only -> message=detail, details=None
    # 2) If {"detail": "...", ...} -> message=detail, details={...without detail}
    # 3) Otherwise -> message="Request failed.", details=data
    message = "Request failed."
    details = data

    if isinstance(data, dict) and "detail" in data:
        message = str(data.get("detail"))
        rest = {k: v for k, v in data.items() if k != "detail"}
        details = rest or None

    return Response(
        build_error_envelope(
            request=request,
            code=code,
            message=message,
            details=details,
        ),
        status=http_status,
        headers=response.headers,
    )
