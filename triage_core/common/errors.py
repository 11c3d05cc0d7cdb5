# triage_core/common/errors.py
"""
Error taxonomy for the triage workflow.

- ValidationError: malformed or missing input. We reuse Django's ValidationError so services,
  serializers and the API exception handler all speak the same type.
- NotFound: a referenced id does not exist.
- StoreUnavailable: the case store could not be reached (transient infrastructure failure).
- InvalidInput: the classifier was called outside its domain. A programming error, not user-facing.
"""
from __future__ import annotations

from django.core.exceptions import ValidationError

__all__ = ["ValidationError", "NotFound", "StoreUnavailable", "InvalidInput"]


class NotFound(Exception):
    def __init__(self, entity: str, entity_id):
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"{entity} not found: {entity_id}")


class StoreUnavailable(Exception):
    pass


class InvalidInput(ValueError):
    pass
