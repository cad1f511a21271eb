"""
petition_portal.web.app

FastAPI app factory for the petition portal.

Responsibilities:
- Build the FastAPI application and register routers/middleware.
- Create and dispose the pooled HTTP client for the petition API.
- Turn route guard redirects into 303 responses.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from pathlib import Path

import httpx
from fastapi import FastAPI, Request
from fastapi.responses import RedirectResponse
from fastapi.templating import Jinja2Templates

from petition_portal import __version__
from petition_portal.api_client.petitions import create_http_client
from petition_portal.auth.deps import GuardRedirect
from petition_portal.domain import workflow
from petition_portal.observability.logging import configure_logging, get_logger
from petition_portal.observability.middleware import RequestContextMiddleware
from petition_portal.settings import Settings
from petition_portal.web.routers.auth import router as auth_router
from petition_portal.web.routers.dashboard import router as dashboard_router
from petition_portal.web.routers.health import router as health_router
from petition_portal.web.routers.petitions import router as petitions_router

log = get_logger(__name__)

TEMPLATES_DIR = Path(__file__).parent / "templates"


def _templates() -> Jinja2Templates:
    templates = Jinja2Templates(directory=str(TEMPLATES_DIR))
    templates.env.globals.update(
        status_color=workflow.status_color,
        status_label=workflow.status_label,
        urgent_color=workflow.URGENT_COLOR,
        duplicate_color=workflow.DUPLICATE_COLOR,
        status_options=workflow.STATUS_LABELS,
        department_options=workflow.DEPARTMENT_LABELS,
    )
    return templates


def create_app(
    *,
    settings: Settings,
    api_transport: httpx.AsyncBaseTransport | None = None,
) -> FastAPI:
    configure_logging(service_name=settings.service_name, level=settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        log.info("startup", env=settings.env, api_base_url=settings.api_base_url)
        app.state.http = create_http_client(settings, transport=api_transport)
        try:
            yield
        finally:
            await app.state.http.aclose()
            log.info("shutdown")

    app = FastAPI(
        title="Petition Portal",
        version=__version__,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.templates = _templates()

    app.add_middleware(RequestContextMiddleware)
    app.include_router(health_router, tags=["health"])
    app.include_router(auth_router)
    app.include_router(dashboard_router)
    app.include_router(petitions_router)

    @app.exception_handler(GuardRedirect)
    async def _guard_redirect(_: Request, exc: GuardRedirect) -> RedirectResponse:
        return RedirectResponse(url=exc.location, status_code=303)

    return app


# --- Module Notes -----------------------------------------------------------
# App composition stays here; page state lives in `petition_portal.views` and
# workflow rules in `petition_portal.domain`.
