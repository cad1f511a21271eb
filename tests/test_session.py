"""
tests.test_session

Session cookie encoding and the route guard decision.
"""

from __future__ import annotations

from datetime import timedelta

import pytest
from fakes import ADMIN, CITIZEN, session_for

from petition_portal.auth.guard import GuardOutcome, decide, redirect_target
from petition_portal.auth.models import SessionState
from petition_portal.auth.session import (
    SessionCookieConfig,
    SessionValidationError,
    decode_session,
    encode_session,
)


def _cfg(**overrides) -> SessionCookieConfig:
    values = {
        "alg": "HS256",
        "issuer": "petition-portal",
        "audience": "petition-portal-web",
        "secret": "test-secret-0123456789abcdef-0123456789",
        "ttl": timedelta(minutes=5),
    }
    values.update(overrides)
    return SessionCookieConfig(**values)


def test_session_cookie_roundtrip_keeps_user_and_token() -> None:
    session = session_for(CITIZEN)
    decoded = decode_session(cfg=_cfg(), cookie=encode_session(cfg=_cfg(), session=session))
    assert decoded == session


@pytest.mark.parametrize(
    "reader",
    [
        _cfg(secret="other-secret-0123456789abcdef-012345678"),
        _cfg(audience="someone-else"),
        _cfg(issuer="someone-else"),
    ],
)
def test_session_cookie_rejects_foreign_tokens(reader: SessionCookieConfig) -> None:
    cookie = encode_session(cfg=_cfg(), session=session_for(CITIZEN))
    with pytest.raises(SessionValidationError):
        decode_session(cfg=reader, cookie=cookie)


def test_session_cookie_expires() -> None:
    cookie = encode_session(cfg=_cfg(ttl=timedelta(seconds=-1)), session=session_for(CITIZEN))
    with pytest.raises(SessionValidationError):
        decode_session(cfg=_cfg(), cookie=cookie)


def test_session_token_is_not_in_repr() -> None:
    assert "tok-citizen" not in repr(session_for(CITIZEN))


@pytest.mark.parametrize(
    ("state", "roles", "outcome"),
    [
        (SessionState.resolving(), None, GuardOutcome.loading),
        (SessionState.resolving(), ["citizen"], GuardOutcome.loading),
        (SessionState.anonymous(), None, GuardOutcome.redirect_login),
        (SessionState.anonymous(), ["citizen"], GuardOutcome.redirect_login),
        (SessionState.authenticated(session_for(CITIZEN)), None, GuardOutcome.render),
        (SessionState.authenticated(session_for(CITIZEN)), ["citizen"], GuardOutcome.render),
        (
            SessionState.authenticated(session_for(ADMIN)),
            ["citizen"],
            GuardOutcome.redirect_default,
        ),
    ],
)
def test_guard_decision(state: SessionState, roles, outcome: GuardOutcome) -> None:
    assert decide(state, roles) == outcome


def test_guard_redirect_targets() -> None:
    assert redirect_target(GuardOutcome.redirect_login) == "/login"
    assert redirect_target(GuardOutcome.redirect_default) == "/dashboard"
    assert redirect_target(GuardOutcome.render) is None
    assert redirect_target(GuardOutcome.loading) is None
