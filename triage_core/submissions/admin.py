# triage_core/submissions/admin.py
from __future__ import annotations

from django.contrib import admin

from triage_core.submissions.models import Submission
from triage_core.submissions.services import SubmissionService


@admin.register(Submission)
class SubmissionAdmin(admin.ModelAdmin):
    list_display = ("id", "patient_id", "last_name", "first_name", "triage_level", "status", "created_at")
    list_filter = ("triage_level", "status")
    search_fields = ("id", "last_name", "first_name")
    ordering = ("-created_at",)

    # Only status is editable after creation.
    readonly_fields = (
        "patient_id",
        "first_name",
        "last_name",
        "age",
        "gender",
        "body_areas",
        "symptoms",
        "duration",
        "severity",
        "additional_info",
        "triage_level",
        "created_at",
    )

    def save_model(self, request, obj, form, change):
        SubmissionService.update_status(obj.id, obj.status)

    def has_add_permission(self, request):
        return False

    def has_delete_permission(self, request, obj=None):
        return False
