"""
petition_portal.auth.deps

FastAPI dependency functions for sessions and route guarding.

Responsibilities:
- Resolve the session cookie into a `SessionState`.
- Enforce the route guard via a reusable dependency factory.
"""

from __future__ import annotations

from fastapi import Depends, Request

from petition_portal.auth.guard import LOGIN_PATH, GuardOutcome, decide, redirect_target
from petition_portal.auth.models import Session, SessionState
from petition_portal.auth.session import SessionCookieConfig, SessionValidationError, decode_session
from petition_portal.observability.logging import get_logger
from petition_portal.settings import Settings
from petition_portal.web.deps import settings_dep

log = get_logger(__name__)


class GuardRedirect(Exception):
    """
    Raised by guarded dependencies; the app turns it into a 303 redirect.
    """

    def __init__(self, location: str) -> None:
        super().__init__(location)
        self.location = location


def get_session_state(
    request: Request,
    settings: Settings = Depends(settings_dep),
) -> SessionState:
    cookie = request.cookies.get(settings.session_cookie_name)
    if not cookie:
        return SessionState.anonymous()
    try:
        session = decode_session(cfg=SessionCookieConfig.from_settings(settings), cookie=cookie)
    except SessionValidationError as e:
        log.info("session_cookie_rejected", reason=str(e))
        return SessionState.anonymous()
    return SessionState.authenticated(session)


def require_session(*roles: str):
    required = frozenset(roles) if roles else None

    def _dep(state: SessionState = Depends(get_session_state)) -> Session:
        outcome = decide(state, required)
        if outcome != GuardOutcome.render or state.session is None:
            raise GuardRedirect(redirect_target(outcome) or LOGIN_PATH)
        return state.session

    return _dep


# --- Module Notes -----------------------------------------------------------
# Cookie resolution is synchronous, so the guard's "loading" outcome never reaches
# the web tier; it exists for callers that resolve sessions asynchronously.
