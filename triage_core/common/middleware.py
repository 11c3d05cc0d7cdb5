from __future__ import annotations

from django.utils.deprecation import MiddlewareMixin

from triage_core.common.api.exceptions import ensure_request_id
from triage_core.common.logging_utils import bind_request_id, reset_request_id


class RequestIdMiddleware(MiddlewareMixin):
    """
    Stamps every request with a request_id (honouring an inbound X-Request-Id),
    binds it for log records emitted while the request is handled, and echoes it back
    so error envelopes and log lines can be correlated.
    """

    HEADER = "X-Request-Id"
    META_KEY = "HTTP_X_REQUEST_ID"

    def process_request(self, request):
        inbound = (request.META.get(self.META_KEY) or "").strip()
        if inbound:
            request.request_id = inbound[:64]
        request._request_id_token = bind_request_id(ensure_request_id(request))
        return None

    def process_response(self, request, response):
        token = getattr(request, "_request_id_token", None)
        if token is not None:
            reset_request_id(token)
            request._request_id_token = None

        rid = getattr(request, "request_id", None)
        if rid:
            response[self.HEADER] = rid
        return response
