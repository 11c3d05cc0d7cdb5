# triage_core/api/urls.py
from __future__ import annotations

from django.urls import path
from rest_framework.routers import DefaultRouter

from triage_core.actions.api.views import GPActionViewSet
from triage_core.appointments.api.views import AppointmentViewSet
from triage_core.iam.api.auth import LoginView, LogoutView, RefreshView
from triage_core.iam.api.me import MeView
from triage_core.submissions.api.views import SubmissionViewSet
from triage_core.triage.api.views import TriageCatalogView, TriageClassifyView

router = DefaultRouter()

router.register(r"submissions", SubmissionViewSet, basename="submissions")
router.register(r"gp-actions", GPActionViewSet, basename="gp-actions")
router.register(r"appointments", AppointmentViewSet, basename="appointments")

urlpatterns = [
    # Auth + /me
    path("auth/login/", LoginView.as_view(), name="login"),
    path("auth/refresh/", RefreshView.as_view(), name="refresh"),
    path("auth/logout/", LogoutView.as_view(), name="logout"),
    path("me/", MeView.as_view(), name="me"),

    # Symptom form vocabulary + tier preview
    path("triage/catalog/", TriageCatalogView.as_view(), name="triage-catalog"),
    path("triage/classify/", TriageClassifyView.as_view(), name="triage-classify"),

    # Router URLs last (so explicit paths win if ever overlapping)
    *router.urls,
]
