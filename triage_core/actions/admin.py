# triage_core/actions/admin.py
from __future__ import annotations

from django.contrib import admin

from triage_core.actions.models import GPAction


@admin.register(GPAction)
class GPActionAdmin(admin.ModelAdmin):
    list_display = ("id", "submission_id", "actor_id", "action_type", "created_at")
    list_filter = ("action_type",)
    search_fields = ("id", "submission_id")
    ordering = ("-created_at",)

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False

    def has_delete_permission(self, request, obj=None):
        return False
