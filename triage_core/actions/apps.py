# triage_core/actions/apps.py
from django.apps import AppConfig


class ActionsConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "triage_core.actions"
