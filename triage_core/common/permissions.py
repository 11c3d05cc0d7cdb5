# triage_core/common/permissions.py

from __future__ import annotations

from rest_framework.permissions import BasePermission, SAFE_METHODS

from triage_core.iam.identity import ROLE_ADMIN, ROLE_GP, ROLE_PATIENT, user_roles

CLINICAL_ROLES = {ROLE_ADMIN, ROLE_GP}


def is_clinician(user) -> bool:
    return bool(user_roles(user) & CLINICAL_ROLES)


class SubmissionPermission(BasePermission):
    """
    - create: anyone (anonymous symptom checks are allowed)
    - list/retrieve: clinicians see all, patients see their own (row filtering happens in the view)
    - status overwrite: clinicians only
    """

    message = "You do not have permission to perform this action."

    def has_permission(self, request, view) -> bool:
        if getattr(view, "action", None) == "create":
            return True

        user = request.user
        if not user or not user.is_authenticated:
            return False

        if request.method in SAFE_METHODS:
            return bool(user_roles(user) & (CLINICAL_ROLES | {ROLE_PATIENT}))

        return is_clinician(user)

    def has_object_permission(self, request, view, obj) -> bool:
        if is_clinician(request.user):
            return True
        return request.method in SAFE_METHODS and obj.patient_id == request.user.id


class ClinicianPermission(BasePermission):
    """
    GP-only surfaces: action log and appointment writes.
    Patients may read their own appointments (filtered in the view).
    """

    message = "Only clinic staff can perform this action."

    def has_permission(self, request, view) -> bool:
        user = request.user
        if not user or not user.is_authenticated:
            return False

        if is_clinician(user):
            return True

        allow_patient_reads = getattr(view, "allow_patient_reads", False)
        return allow_patient_reads and request.method in SAFE_METHODS and ROLE_PATIENT in user_roles(user)
