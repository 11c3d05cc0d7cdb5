from __future__ import annotations

from django.conf import settings
from django.utils.module_loading import import_string

from triage_core.store.base import CaseStore


def get_case_store() -> CaseStore:
    """
    Instantiate the configured case store (settings.TRIAGE_CASE_STORE).
    """
    store_cls = import_string(settings.TRIAGE_CASE_STORE)
    return store_cls()
