import json
import logging

from django.http import HttpResponse
from django.test import RequestFactory

from triage_core.common.logging_utils import JsonFormatter, RequestIdFilter, bind_request_id, reset_request_id
from triage_core.common.middleware import RequestIdMiddleware


def _record(msg="submission created"):
    return logging.LogRecord("triage_core.test", logging.INFO, __file__, 1, msg, None, None)


def test_filter_stamps_bound_request_id():
    token = bind_request_id("req-1")
    try:
        record = _record()
        assert RequestIdFilter().filter(record) is True
        assert record.request_id == "req-1"
    finally:
        reset_request_id(token)

    record = _record()
    RequestIdFilter().filter(record)
    assert record.request_id is None


def test_records_logged_during_a_request_carry_its_id():
    seen = []

    def view(request):
        record = _record()
        RequestIdFilter().filter(record)
        seen.append(json.loads(JsonFormatter().format(record)))
        return HttpResponse("ok")

    middleware = RequestIdMiddleware(view)
    response = middleware(RequestFactory().get("/api/v1/me/", HTTP_X_REQUEST_ID="req-9"))

    assert response["X-Request-Id"] == "req-9"
    assert seen[0]["request_id"] == "req-9"

    # Nothing leaks into records emitted after the request.
    after = _record()
    RequestIdFilter().filter(after)
    assert after.request_id is None
