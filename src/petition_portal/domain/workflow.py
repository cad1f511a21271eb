"""
petition_portal.domain.workflow

Petition workflow rules as seen from the portal.

Responsibilities:
- Map petition statuses onto badge colors.
- Expose the selectable status targets and department options.
- Decide which workflow actions a user may take on a petition.
"""

from __future__ import annotations

import enum

from petition_portal.domain.models import Department, Petition, PetitionStatus, Role, User


class BadgeColor(enum.StrEnum):
    success = "success"
    warning = "warning"
    info = "info"
    default = "default"
    error = "error"
    secondary = "secondary"


URGENT_COLOR = BadgeColor.error
DUPLICATE_COLOR = BadgeColor.secondary

_STATUS_COLORS: dict[str, BadgeColor] = {
    PetitionStatus.resolved: BadgeColor.success,
    PetitionStatus.under_review: BadgeColor.warning,
    PetitionStatus.assigned: BadgeColor.info,
    PetitionStatus.received: BadgeColor.default,
}

STATUS_LABELS: dict[str, str] = {
    PetitionStatus.received: "Received",
    PetitionStatus.assigned: "Assigned",
    PetitionStatus.under_review: "Under Review",
    PetitionStatus.resolved: "Resolved",
}

DEPARTMENT_LABELS: dict[str, str] = {d.value: d.value.capitalize() for d in Department}

# Any status may be selected from any other; ordering rules belong to the API.
TRANSITION_TARGETS: tuple[PetitionStatus, ...] = tuple(PetitionStatus)


def status_color(status: str) -> BadgeColor:
    return _STATUS_COLORS.get(status, BadgeColor.default)


def status_label(status: str) -> str:
    return STATUS_LABELS.get(status, status)


def is_department(value: str) -> bool:
    return value in DEPARTMENT_LABELS


def can_update_status(user: User, petition: Petition) -> bool:
    """
    Officers may update status only for petitions routed to their own department.
    A petition with no department never matches, even for an officer with no department.
    """

    if user.role != Role.officer:
        return False
    if not petition.assigned_department or not user.department:
        return False
    return petition.assigned_department == user.department


def can_assign_department(user: User) -> bool:
    return user.role == Role.admin


def can_create_petition(user: User) -> bool:
    return user.role == Role.citizen


# --- Module Notes -----------------------------------------------------------
# These predicates drive both template rendering (which controls are shown) and the
# view objects (which requests may be issued); the API remains the authority.
