from __future__ import annotations

import json
import logging
from contextvars import ContextVar
from datetime import datetime, timezone
from typing import Any, Dict

_request_id: ContextVar[str | None] = ContextVar("request_id", default=None)


def bind_request_id(request_id: str):
    return _request_id.set(request_id)


def reset_request_id(token) -> None:
    _request_id.reset(token)


class RequestIdFilter(logging.Filter):
    """
    Copies the current request id onto every record passing through a handler.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if not getattr(record, "request_id", None):
            record.request_id = _request_id.get()
        return True


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        if isinstance(record.msg, dict):
            data: Dict[str, Any] = dict(record.msg)
        else:
            data = {"message": record.getMessage()}

        data.setdefault("level", record.levelname)
        data.setdefault("logger", record.name)
        data.setdefault("time", datetime.now(timezone.utc).isoformat(timespec="seconds"))

        request_id = getattr(record, "request_id", None)
        if request_id:
            data.setdefault("request_id", request_id)

        if record.exc_info:
            data["exc_info"] = self.formatException(record.exc_info)

        return json.dumps(data, ensure_ascii=False, default=str)
