# triage_core/appointments/admin.py
from __future__ import annotations

from django.contrib import admin

from triage_core.appointments.models import Appointment


@admin.register(Appointment)
class AppointmentAdmin(admin.ModelAdmin):
    list_display = ("id", "hospital", "department", "date", "time", "status", "patient_id", "submission_id")
    list_filter = ("status", "hospital")
    search_fields = ("id", "hospital", "doctor", "submission_id")
    ordering = ("date", "time")

    # Links and lifecycle moves go through the booking, cancel and reschedule endpoints.
    readonly_fields = (
        "submission_id",
        "patient_id",
        "actor_id",
        "date",
        "time",
        "status",
        "created_at",
        "updated_at",
    )

    fieldsets = (
        ("Links", {"fields": ("submission_id", "patient_id", "actor_id")}),
        ("Where", {"fields": ("hospital", "department", "doctor")}),
        ("When", {"fields": ("date", "time", "status")}),
        ("Details", {"fields": ("reason", "notes")}),
        ("Audit", {"fields": ("created_at", "updated_at")}),
    )

    def has_add_permission(self, request):
        return False

    def has_delete_permission(self, request, obj=None):
        return False
