# triage_core/submissions/management/commands/seed_demo_submissions.py
from django.contrib.auth import get_user_model
from django.contrib.auth.models import Group
from django.core.management.base import BaseCommand

from triage_core.iam.identity import ROLE_GP, ROLE_PATIENT
from triage_core.submissions.reports import SymptomReport
from triage_core.submissions.selectors import SubmissionSelectors
from triage_core.submissions.services import SubmissionService
from triage_core.triage.catalog import COMMON_SYMPTOMS
from triage_core.triage.constants import Duration

# (first, last, age, gender, body area, symptom count, duration, severity, info)
DEMO_CASES = [
    ("Aoife", "Murphy", 34, "Female", "Chest / Lungs", 3, Duration.FOUR_TO_SEVEN_DAYS, 3,
     "History of asthma, using inhaler more than usual."),
    ("Ciarán", "O'Connor", 58, "Male", "Heart / Cardiovascular", 2, Duration.LESS_THAN_24_HOURS, 4,
     "Pain spreads to the left arm."),
    ("Niamh", "Kelly", 27, "Female", "Head / Face", 1, Duration.ONE_TO_THREE_DAYS, 1, ""),
    ("Seán", "Byrne", 45, "Male", "Back / Spine", 2, Duration.MORE_THAN_TWO_WEEKS, 2,
     "Worse after long drives."),
    ("Róisín", "Walsh", 71, "Female", "General / Whole Body", 3, Duration.ONE_TO_TWO_WEEKS, 4, ""),
]


class Command(BaseCommand):
    help = "Create demo GP/patient accounts and demo submissions (tiers computed by the classifier)."

    def add_arguments(self, parser):
        parser.add_argument("--password", default="demo-pass-123", help="Password for the demo accounts.")

    def handle(self, *args, **options):
        User = get_user_model()
        password = options["password"]

        accounts = {}
        for username, role in (("demo-gp", ROLE_GP), ("demo-patient", ROLE_PATIENT)):
            user, created = User.objects.get_or_create(username=username, defaults={"is_active": True})
            if created:
                user.set_password(password)
                user.save()
            group, _ = Group.objects.get_or_create(name=role)
            user.groups.add(group)
            accounts[role] = user

        patient = accounts[ROLE_PATIENT]
        if SubmissionSelectors.list_submissions(patient_id=patient.id):
            self.stdout.write("Demo submissions already present; nothing to do.")
            return

        for first, last, age, gender, area, n_symptoms, duration, severity, info in DEMO_CASES:
            report = SymptomReport(
                first_name=first,
                last_name=last,
                age=age,
                gender=gender,
                body_areas=(area,),
                symptoms=tuple(COMMON_SYMPTOMS[area][:n_symptoms]),
                duration=duration.value,
                severity=severity,
                additional_info=info,
            )
            sub = SubmissionService.create_submission(report, patient_id=patient.id)
            self.stdout.write(f"  {sub.id} {first} {last}: {sub.triage_level}")

        self.stdout.write(self.style.SUCCESS(f"Seeded {len(DEMO_CASES)} submissions for patient={patient.id}"))
