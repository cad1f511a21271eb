"""
petition_portal.web.routers.dashboard

Role-specific landing page.

Responsibilities:
- Serve the dashboard at `/` and `/dashboard` for any signed-in user.
- Load the viewer's statistics and render the branch matching their role.
"""

from __future__ import annotations

import httpx
from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse, Response
from fastapi.templating import Jinja2Templates

from petition_portal.api_client.petitions import PetitionApiClient
from petition_portal.auth.deps import require_session
from petition_portal.auth.models import Session
from petition_portal.views.dashboard import DashboardView
from petition_portal.web.deps import http_client_dep, templates_dep

router = APIRouter(tags=["dashboard"])


@router.get("/", response_class=HTMLResponse)
@router.get("/dashboard", response_class=HTMLResponse)
async def dashboard(
    request: Request,
    session: Session = Depends(require_session()),
    http: httpx.AsyncClient = Depends(http_client_dep),
    templates: Jinja2Templates = Depends(templates_dep),
) -> Response:
    client = PetitionApiClient.for_session(http=http, session=session)
    view = DashboardView(client=client, session=session)
    await view.load()
    return templates.TemplateResponse(
        request, "dashboard.html", {"view": view, "session": session}
    )
