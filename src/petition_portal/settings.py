"""
petition_portal.settings

Central configuration model (Pydantic Settings).

Responsibilities:
- Provide strongly-typed, env-driven settings for all layers.
- Hide secrets from repr/logging (session signing secret).
- Offer a cached settings instance for dependency injection.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="PETITION_PORTAL_", case_sensitive=False)

    # Environment controls cookie hardening and log verbosity defaults.
    env: Literal["dev", "test", "prod"] = "dev"
    service_name: str = "petition-portal"
    log_level: str = "INFO"

    web_host: str = "0.0.0.0"
    web_port: int = 3000

    # Upstream petition REST API
    api_base_url: str = "http://localhost:3001"
    api_timeout_seconds: float = 10.0

    # Session cookie
    session_cookie_name: str = "petition_session"
    session_alg: str = "HS256"
    session_issuer: str = "petition-portal"
    session_audience: str = "petition-portal-web"
    session_secret: str = Field(default="dev-secret-change-me-at-least-32-bytes", repr=False)
    session_ttl_minutes: int = 8 * 60

    # Pages
    create_redirect_delay_seconds: int = 2

    @property
    def secure_cookies(self) -> bool:
        return self.env == "prod"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    # Cache avoids re-parsing env vars for each request dependency.
    return Settings()


# --- Module Notes -----------------------------------------------------------
# Every other layer receives a Settings instance explicitly; only the web tier
# calls get_settings() directly.
