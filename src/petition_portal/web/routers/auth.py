"""
petition_portal.web.routers.auth

Login and logout pages.

Responsibilities:
- Exchange credentials for an API token and open a session (signed cookie).
- Tear the session down on logout.
"""

from __future__ import annotations

import httpx
from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import HTMLResponse, RedirectResponse, Response
from fastapi.templating import Jinja2Templates
from starlette.status import HTTP_303_SEE_OTHER, HTTP_401_UNAUTHORIZED

from petition_portal.api_client.errors import PetitionApiError
from petition_portal.api_client.petitions import PetitionApiClient
from petition_portal.auth.deps import get_session_state
from petition_portal.auth.guard import DEFAULT_PATH, LOGIN_PATH
from petition_portal.auth.models import SessionState
from petition_portal.auth.session import SessionCookieConfig, encode_session
from petition_portal.observability.logging import get_logger
from petition_portal.settings import Settings
from petition_portal.web.deps import http_client_dep, settings_dep, templates_dep

log = get_logger(__name__)

router = APIRouter(tags=["auth"])

LOGIN_FAILED = "Login failed"


@router.get(LOGIN_PATH, response_class=HTMLResponse)
async def login_page(
    request: Request,
    state: SessionState = Depends(get_session_state),
    templates: Jinja2Templates = Depends(templates_dep),
) -> Response:
    if state.session is not None:
        return RedirectResponse(url=DEFAULT_PATH, status_code=HTTP_303_SEE_OTHER)
    return templates.TemplateResponse(request, "login.html", {"error": None, "email": ""})


@router.post(LOGIN_PATH, response_class=HTMLResponse)
async def login(
    request: Request,
    email: str = Form(...),
    password: str = Form(...),
    http: httpx.AsyncClient = Depends(http_client_dep),
    settings: Settings = Depends(settings_dep),
    templates: Jinja2Templates = Depends(templates_dep),
) -> Response:
    try:
        session = await PetitionApiClient(http=http).login(email=email, password=password)
    except PetitionApiError as e:
        log.info("login_failed", status_code=e.status_code)
        return templates.TemplateResponse(
            request,
            "login.html",
            {"error": e.user_message(LOGIN_FAILED), "email": email},
            status_code=HTTP_401_UNAUTHORIZED,
        )

    cookie = encode_session(cfg=SessionCookieConfig.from_settings(settings), session=session)
    response = RedirectResponse(url=DEFAULT_PATH, status_code=HTTP_303_SEE_OTHER)
    response.set_cookie(
        settings.session_cookie_name,
        cookie,
        max_age=settings.session_ttl_minutes * 60,
        httponly=True,
        secure=settings.secure_cookies,
        samesite="lax",
    )
    log.info("login", user_id=session.user.id, role=session.role)
    return response


@router.post("/logout")
async def logout(
    state: SessionState = Depends(get_session_state),
    settings: Settings = Depends(settings_dep),
) -> Response:
    response = RedirectResponse(url=LOGIN_PATH, status_code=HTTP_303_SEE_OTHER)
    response.delete_cookie(
        settings.session_cookie_name,
        httponly=True,
        secure=settings.secure_cookies,
        samesite="lax",
    )
    if state.session is not None:
        log.info("logout", user_id=state.session.user.id)
    return response
