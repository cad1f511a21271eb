"""
petition_portal.auth.session

Signed session cookie helpers.

Responsibilities:
- Encode a `Session` into a short-lived JWT suitable for a cookie.
- Decode and validate the cookie with strict claim requirements (iss/aud/exp/iat/sub).
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from typing import Any

import jwt
from jwt import InvalidTokenError
from pydantic import ValidationError

from petition_portal.auth.models import Session
from petition_portal.domain.models import User
from petition_portal.settings import Settings


@dataclass(frozen=True, slots=True)
class SessionCookieConfig:
    alg: str
    issuer: str
    audience: str
    secret: str
    ttl: timedelta

    @classmethod
    def from_settings(cls, settings: Settings) -> SessionCookieConfig:
        return cls(
            alg=settings.session_alg,
            issuer=settings.session_issuer,
            audience=settings.session_audience,
            secret=settings.session_secret,
            ttl=timedelta(minutes=settings.session_ttl_minutes),
        )


class SessionValidationError(Exception):
    pass


def encode_session(*, cfg: SessionCookieConfig, session: Session) -> str:
    now = datetime.now(tz=UTC)
    payload: dict[str, Any] = {
        "iss": cfg.issuer,
        "aud": cfg.audience,
        "sub": session.user.id,
        "user": session.user.model_dump(mode="json"),
        "api_token": session.token,
        "iat": int(now.timestamp()),
        "exp": int((now + cfg.ttl).timestamp()),
    }
    return jwt.encode(payload, cfg.secret, algorithm=cfg.alg)


def decode_session(*, cfg: SessionCookieConfig, cookie: str) -> Session:
    try:
        payload = jwt.decode(
            cookie,
            cfg.secret,
            algorithms=[cfg.alg],
            issuer=cfg.issuer,
            audience=cfg.audience,
            options={
                "require": ["exp", "iat", "iss", "aud", "sub"],
            },
        )
    except InvalidTokenError as e:
        raise SessionValidationError(str(e)) from e

    token = payload.get("api_token")
    if not isinstance(token, str) or not token:
        raise SessionValidationError("Missing API token")
    try:
        user = User.model_validate(payload.get("user") or {})
    except ValidationError as e:
        raise SessionValidationError("Invalid session user") from e
    if user.id != str(payload["sub"]):
        raise SessionValidationError("Session subject mismatch")
    return Session(user=user, token=token)


# --- Module Notes -----------------------------------------------------------
# The cookie is signed, not encrypted: it carries the upstream API token, so it is
# always set HttpOnly and (in prod) Secure by `web.routers.auth`.
