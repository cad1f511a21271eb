"""
petition_portal.domain.models

Domain models shared by the API client, views and templates.

Responsibilities:
- Describe users, petitions, status events and list filters as typed models.
- Map the API's camelCase wire format onto snake_case attributes.
- Model the role-shaped dashboard statistics as a tagged union.
"""

from __future__ import annotations

import enum
from datetime import datetime
from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, field_validator
from pydantic.alias_generators import to_camel


class Role(enum.StrEnum):
    citizen = "citizen"
    admin = "admin"
    officer = "officer"


class PetitionStatus(enum.StrEnum):
    received = "received"
    assigned = "assigned"
    under_review = "under_review"
    resolved = "resolved"


class Department(enum.StrEnum):
    health = "health"
    education = "education"
    transport = "transport"
    housing = "housing"
    environment = "environment"


class WireModel(BaseModel):
    # Accept both the API's camelCase keys and our snake_case attribute names.
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class User(WireModel):
    """
    Authenticated user as supplied by the API at login. The portal never mutates it.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    id: str
    first_name: str = ""
    role: Role
    department: str | None = None

    @field_validator("id", mode="before")
    @classmethod
    def _coerce_id(cls, v: Any) -> str:
        return str(v)


class StatusEvent(WireModel):
    # Status is kept as a raw string so unknown server statuses still render.
    status: str
    remarks: str = ""
    created_at: datetime | None = None


class PetitionSummary(WireModel):
    id: str
    title: str
    status: str

    @field_validator("id", mode="before")
    @classmethod
    def _coerce_id(cls, v: Any) -> str:
        return str(v)


class Petition(PetitionSummary):
    description: str = ""
    urgency: bool = False
    is_duplicate: bool = False
    assigned_department: str | None = None
    created_at: datetime | None = None
    # Newest first, as returned by the API.
    status_history: list[StatusEvent] = Field(default_factory=list)


class PetitionFilter(BaseModel):
    """
    UI-local list filter. Frozen so two filters compare (and hash) by value.
    """

    model_config = ConfigDict(frozen=True)

    status: str = ""
    department: str = ""
    search: str = ""

    def merged(self, **changes: str | None) -> PetitionFilter:
        update = {k: (v or "").strip() for k, v in changes.items() if k in type(self).model_fields}
        return self.model_copy(update=update)

    def to_query_params(self) -> dict[str, str]:
        # Empty fields are omitted entirely; an empty string could match everything upstream.
        return {k: v for k, v in self.model_dump().items() if v}


class StatusCount(WireModel):
    status: str
    count: int = 0


class DepartmentCount(WireModel):
    department: str
    count: int = 0


class CitizenStats(WireModel):
    role: Literal["citizen"] = "citizen"
    my_petitions: list[PetitionSummary] = Field(default_factory=list)
    status_data: list[StatusCount] = Field(default_factory=list)


class AdminStats(WireModel):
    role: Literal["admin"] = "admin"
    total_petitions: int = 0
    urgent_petitions: int = 0
    pending_assignments: int = 0
    department_data: list[DepartmentCount] = Field(default_factory=list)


class OfficerStats(WireModel):
    role: Literal["officer"] = "officer"
    assigned_petitions: list[PetitionSummary] = Field(default_factory=list)
    department_stats: list[StatusCount] = Field(default_factory=list)


DashboardStats = Annotated[CitizenStats | AdminStats | OfficerStats, Field(discriminator="role")]

_stats_adapter: TypeAdapter[CitizenStats | AdminStats | OfficerStats] = TypeAdapter(DashboardStats)


def parse_stats(role: Role, payload: dict[str, Any]) -> CitizenStats | AdminStats | OfficerStats:
    """
    The stats endpoint is polymorphic by caller role but untagged on the wire.
    Tag it with the viewer's role so only one branch can ever be constructed.
    """

    return _stats_adapter.validate_python({**payload, "role": role.value})


# --- Module Notes -----------------------------------------------------------
# Unknown keys are ignored (pydantic default "ignore"); the server-side schema is owned
# by the API, not by this portal.
