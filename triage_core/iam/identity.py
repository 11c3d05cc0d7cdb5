# triage_core/iam/identity.py
"""
Identity context handed to the workflow services.

The services never look at request.user or any global session; views build an Actor
from the authenticated user and pass plain ids down.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Set

# Django auth Group names
ROLE_ADMIN = "ADMIN"
ROLE_GP = "GP"
ROLE_PATIENT = "PATIENT"

# Most privileged first: picks the primary role when a user is in several groups.
ROLE_PRECEDENCE = (ROLE_ADMIN, ROLE_GP, ROLE_PATIENT)


@dataclass(frozen=True)
class Actor:
    id: int
    role: str

    @property
    def is_clinician(self) -> bool:
        return self.role in {ROLE_ADMIN, ROLE_GP}


def user_roles(user) -> Set[str]:
    """
    Resolve roles from Django groups. Superusers are always ADMIN.
    """
    roles: Set[str] = set()

    if not user or not getattr(user, "is_authenticated", False):
        return roles

    if getattr(user, "is_superuser", False):
        roles.add(ROLE_ADMIN)
        return roles

    if hasattr(user, "groups"):
        roles.update(user.groups.values_list("name", flat=True))

    return roles


def actor_for_user(user) -> Optional[Actor]:
    if not user or not getattr(user, "is_authenticated", False):
        return None

    roles = user_roles(user)
    role = next((r for r in ROLE_PRECEDENCE if r in roles), ROLE_PATIENT)
    return Actor(id=user.id, role=role)


def actor_from_request(request) -> Optional[Actor]:
    return actor_for_user(getattr(request, "user", None))
