"""
petition_portal.web.routers.health

Health and readiness endpoints.

Responsibilities:
- Provide liveness probe (`/healthz`).
- Provide readiness probe (`/readyz`): the pooled API client is open.
"""

from __future__ import annotations

import httpx
from fastapi import APIRouter, Depends, HTTPException
from starlette.status import HTTP_503_SERVICE_UNAVAILABLE

from petition_portal.web.deps import http_client_dep

router = APIRouter()


@router.get("/healthz")
async def healthz() -> dict[str, str]:
    return {"status": "ok"}


@router.get("/readyz")
async def readyz(http: httpx.AsyncClient = Depends(http_client_dep)) -> dict[str, str]:
    if http.is_closed:
        raise HTTPException(status_code=HTTP_503_SERVICE_UNAVAILABLE, detail="API client closed")
    return {"status": "ready"}
