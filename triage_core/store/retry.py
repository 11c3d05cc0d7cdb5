# triage_core/store/retry.py
from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Callable, TypeVar

from django.conf import settings

from triage_core.common.errors import StoreUnavailable

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class RetryPolicy:
    """
    Retry transient store failures with linear backoff.
    max_attempts=1 disables retrying.
    """
    max_attempts: int = 1
    backoff_seconds: float = 0.0

    @classmethod
    def from_settings(cls) -> "RetryPolicy":
        cfg = getattr(settings, "TRIAGE_CASE_STORE_RETRY", None) or {}
        return cls(
            max_attempts=max(1, int(cfg.get("MAX_ATTEMPTS", 1))),
            backoff_seconds=max(0.0, float(cfg.get("BACKOFF_SECONDS", 0.0))),
        )

    def call(self, fn: Callable[[], T], *, operation: str, sleep: Callable[[float], None] = time.sleep) -> T:
        attempt = 1
        while True:
            try:
                return fn()
            except StoreUnavailable:
                if attempt >= self.max_attempts:
                    raise
                logger.warning("retrying store read op=%s attempt=%s", operation, attempt)
                if self.backoff_seconds:
                    sleep(self.backoff_seconds * attempt)
                attempt += 1
