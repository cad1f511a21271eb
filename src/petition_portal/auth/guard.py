"""
petition_portal.auth.guard

Route guard decision.

Responsibilities:
- Decide whether a page renders, shows a loading state, or redirects, given the
  session state and the page's allowed roles.
"""

from __future__ import annotations

import enum
from collections.abc import Iterable

from petition_portal.auth.models import SessionState, SessionStatus

LOGIN_PATH = "/login"
DEFAULT_PATH = "/dashboard"


class GuardOutcome(enum.StrEnum):
    loading = "loading"
    render = "render"
    redirect_login = "redirect_login"
    redirect_default = "redirect_default"


def decide(state: SessionState, required_roles: Iterable[str] | None = None) -> GuardOutcome:
    if state.status == SessionStatus.resolving:
        return GuardOutcome.loading
    if state.session is None:
        return GuardOutcome.redirect_login
    if required_roles is not None and state.session.role not in frozenset(required_roles):
        return GuardOutcome.redirect_default
    return GuardOutcome.render


def redirect_target(outcome: GuardOutcome) -> str | None:
    if outcome == GuardOutcome.redirect_login:
        return LOGIN_PATH
    if outcome == GuardOutcome.redirect_default:
        return DEFAULT_PATH
    return None
