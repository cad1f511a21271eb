"""
petition_portal.auth.models

Session identity types.

Responsibilities:
- Define the authenticated session (`Session`) handed explicitly to views.
- Define the resolution state of the session (`SessionState`) consumed by the route guard.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

from petition_portal.domain.models import Role, User


@dataclass(frozen=True, slots=True)
class Session:
    """
    Authenticated portal session: who the user is plus the bearer token for the API.
    """

    user: User
    token: str = field(repr=False)

    @property
    def role(self) -> Role:
        return self.user.role


class SessionStatus(enum.StrEnum):
    resolving = "resolving"
    authenticated = "authenticated"
    anonymous = "anonymous"


@dataclass(frozen=True, slots=True)
class SessionState:
    status: SessionStatus
    session: Session | None = None

    @classmethod
    def resolving(cls) -> SessionState:
        return cls(status=SessionStatus.resolving)

    @classmethod
    def anonymous(cls) -> SessionState:
        return cls(status=SessionStatus.anonymous)

    @classmethod
    def authenticated(cls, session: Session) -> SessionState:
        return cls(status=SessionStatus.authenticated, session=session)


# --- Module Notes -----------------------------------------------------------
# Sessions are created on login and dropped on logout by `web.routers.auth`;
# nothing in the portal keeps a module-level "current user".
