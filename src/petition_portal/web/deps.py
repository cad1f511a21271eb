"""
petition_portal.web.deps

FastAPI dependency wiring for the web tier.

Responsibilities:
- Provide dependency functions for settings, the shared HTTP client and templates.
- Encapsulate app.state access patterns.
"""

from __future__ import annotations

import httpx
from fastapi import Request
from fastapi.templating import Jinja2Templates

from petition_portal.settings import Settings


def settings_dep(request: Request) -> Settings:
    # Settings are attached in `petition_portal.web.app.create_app`.
    return request.app.state.settings  # type: ignore[attr-defined]


def http_client_dep(request: Request) -> httpx.AsyncClient:
    # The pooled client is created in the app lifespan and closed on shutdown.
    return request.app.state.http  # type: ignore[attr-defined]


def templates_dep(request: Request) -> Jinja2Templates:
    return request.app.state.templates  # type: ignore[attr-defined]
