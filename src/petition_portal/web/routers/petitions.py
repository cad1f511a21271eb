"""
petition_portal.web.routers.petitions

Petition pages: list, create, detail and the two workflow actions.

Responsibilities:
- Apply the route guard per page (create is citizen-only).
- Build the page's view object, run it, and render its template.
"""

from __future__ import annotations

import httpx
from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import HTMLResponse, Response
from fastapi.templating import Jinja2Templates
from starlette.status import HTTP_200_OK, HTTP_201_CREATED, HTTP_400_BAD_REQUEST

from petition_portal.api_client.petitions import PetitionApiClient
from petition_portal.auth.deps import require_session
from petition_portal.auth.models import Session
from petition_portal.domain.models import PetitionFilter, Role
from petition_portal.settings import Settings
from petition_portal.views.petition_create import PetitionCreateView
from petition_portal.views.petition_detail import PetitionDetailView
from petition_portal.views.petition_list import PetitionListView
from petition_portal.web.deps import http_client_dep, settings_dep, templates_dep

router = APIRouter(prefix="/petitions", tags=["petitions"])


@router.get("", response_class=HTMLResponse)
async def petition_list(
    request: Request,
    status: str = "",
    department: str = "",
    search: str = "",
    session: Session = Depends(require_session()),
    http: httpx.AsyncClient = Depends(http_client_dep),
    templates: Jinja2Templates = Depends(templates_dep),
) -> Response:
    view = PetitionListView(
        client=PetitionApiClient.for_session(http=http, session=session),
        session=session,
        petition_filter=PetitionFilter().merged(
            status=status, department=department, search=search
        ),
    )
    await view.refresh()
    return templates.TemplateResponse(
        request, "petitions/list.html", {"view": view, "session": session}
    )


@router.get("/create", response_class=HTMLResponse)
async def create_page(
    request: Request,
    session: Session = Depends(require_session(Role.citizen)),
    http: httpx.AsyncClient = Depends(http_client_dep),
    settings: Settings = Depends(settings_dep),
    templates: Jinja2Templates = Depends(templates_dep),
) -> Response:
    view = PetitionCreateView(
        client=PetitionApiClient.for_session(http=http, session=session),
        session=session,
        redirect_delay_seconds=settings.create_redirect_delay_seconds,
    )
    return templates.TemplateResponse(
        request, "petitions/create.html", {"view": view, "session": session}
    )


@router.post("/create", response_class=HTMLResponse)
async def create_petition(
    request: Request,
    title: str = Form(""),
    description: str = Form(""),
    session: Session = Depends(require_session(Role.citizen)),
    http: httpx.AsyncClient = Depends(http_client_dep),
    settings: Settings = Depends(settings_dep),
    templates: Jinja2Templates = Depends(templates_dep),
) -> Response:
    view = PetitionCreateView(
        client=PetitionApiClient.for_session(http=http, session=session),
        session=session,
        redirect_delay_seconds=settings.create_redirect_delay_seconds,
    )
    ok = await view.submit(title=title, description=description)
    return templates.TemplateResponse(
        request,
        "petitions/create.html",
        {"view": view, "session": session},
        status_code=HTTP_201_CREATED if ok else HTTP_400_BAD_REQUEST,
    )


@router.get("/{petition_id}", response_class=HTMLResponse)
async def petition_detail(
    request: Request,
    petition_id: str,
    session: Session = Depends(require_session()),
    http: httpx.AsyncClient = Depends(http_client_dep),
    templates: Jinja2Templates = Depends(templates_dep),
) -> Response:
    view = PetitionDetailView(
        client=PetitionApiClient.for_session(http=http, session=session), session=session
    )
    await view.load(petition_id)
    return _render_detail(request, templates, view, session)


@router.post("/{petition_id}/status", response_class=HTMLResponse)
async def update_status(
    request: Request,
    petition_id: str,
    status: str = Form(...),
    remarks: str = Form(""),
    session: Session = Depends(require_session()),
    http: httpx.AsyncClient = Depends(http_client_dep),
    templates: Jinja2Templates = Depends(templates_dep),
) -> Response:
    view = PetitionDetailView(
        client=PetitionApiClient.for_session(http=http, session=session), session=session
    )
    await view.load(petition_id)
    ok = view.petition is not None and await view.update_status(status=status, remarks=remarks)
    return _render_detail(request, templates, view, session, ok=ok)


@router.post("/{petition_id}/assign", response_class=HTMLResponse)
async def assign_department(
    request: Request,
    petition_id: str,
    department: str = Form(""),
    session: Session = Depends(require_session()),
    http: httpx.AsyncClient = Depends(http_client_dep),
    templates: Jinja2Templates = Depends(templates_dep),
) -> Response:
    view = PetitionDetailView(
        client=PetitionApiClient.for_session(http=http, session=session), session=session
    )
    await view.load(petition_id)
    ok = view.petition is not None and await view.assign_department(department=department)
    return _render_detail(request, templates, view, session, ok=ok)


def _render_detail(
    request: Request,
    templates: Jinja2Templates,
    view: PetitionDetailView,
    session: Session,
    *,
    ok: bool = True,
) -> Response:
    return templates.TemplateResponse(
        request,
        "petitions/detail.html",
        {"view": view, "session": session},
        status_code=HTTP_200_OK if ok else HTTP_400_BAD_REQUEST,
    )
