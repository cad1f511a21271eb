"""
petition_portal.api_client.petitions

HTTP client for the petition REST API.

Responsibilities:
- Attach the session's bearer token (and the current request id) to every call.
- Call the petition endpoints and parse responses into domain models.
- Raise `PetitionApiError` subclasses for every failure; never retry.
"""

from __future__ import annotations

from typing import Any, TypeVar
from urllib.parse import quote

import httpx
import structlog
from pydantic import BaseModel, ValidationError

from petition_portal.api_client.errors import ApiRejected, ApiTransportError, Unauthorized
from petition_portal.auth.models import Session
from petition_portal.domain.models import Petition, PetitionFilter, User
from petition_portal.observability.logging import get_logger
from petition_portal.settings import Settings

log = get_logger(__name__)

M = TypeVar("M", bound=BaseModel)


def create_http_client(
    settings: Settings, *, transport: httpx.AsyncBaseTransport | None = None
) -> httpx.AsyncClient:
    # One pooled client per process; views borrow it through PetitionApiClient.
    return httpx.AsyncClient(
        base_url=settings.api_base_url.rstrip("/"),
        timeout=settings.api_timeout_seconds,
        transport=transport,
    )


class PetitionApiClient:
    def __init__(self, *, http: httpx.AsyncClient, token: str | None = None) -> None:
        self._http = http
        self._token = token

    @classmethod
    def for_session(cls, *, http: httpx.AsyncClient, session: Session) -> PetitionApiClient:
        return cls(http=http, token=session.token)

    def _headers(self) -> dict[str, str]:
        headers: dict[str, str] = {"Accept": "application/json"}
        if self._token:
            headers["Authorization"] = f"Bearer {self._token}"
        request_id = structlog.contextvars.get_contextvars().get("request_id")
        if request_id:
            headers["x-request-id"] = str(request_id)
        return headers

    async def _request(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, str] | None = None,
        json: dict[str, Any] | None = None,
    ) -> Any:
        try:
            r = await self._http.request(
                method, path, params=params, json=json, headers=self._headers()
            )
        except httpx.HTTPError as e:
            log.warning("petition_api_unreachable", method=method, path=path, error=str(e))
            raise ApiTransportError(str(e) or type(e).__name__) from e

        if r.is_error:
            server_message = _server_message(r)
            log.info(
                "petition_api_rejected",
                method=method,
                path=path,
                status_code=r.status_code,
                server_message=server_message,
            )
            error_cls = Unauthorized if r.status_code in (401, 403) else ApiRejected
            raise error_cls(
                server_message or f"HTTP {r.status_code}",
                status_code=r.status_code,
                server_message=server_message,
            )

        if not r.content:
            return {}
        try:
            return r.json()
        except ValueError as e:
            raise ApiRejected("Invalid JSON from API", status_code=r.status_code) from e

    async def login(self, *, email: str, password: str) -> Session:
        data = await self._request(
            "POST", "/api/auth/login", json={"email": email, "password": password}
        )
        token = data.get("token") if isinstance(data, dict) else None
        if not isinstance(token, str) or not token:
            raise ApiRejected("Login response did not include a token")
        user = _parse(User, data.get("user"))
        return Session(user=user, token=token)

    async def list_petitions(self, petition_filter: PetitionFilter) -> list[Petition]:
        data = await self._request(
            "GET", "/api/petitions", params=petition_filter.to_query_params()
        )
        if not isinstance(data, list):
            raise ApiRejected("Expected a list of petitions")
        return [_parse(Petition, item) for item in data]

    async def get_petition(self, petition_id: str) -> Petition:
        data = await self._request("GET", _petition_path(petition_id))
        return _parse(Petition, data)

    async def create_petition(self, *, title: str, description: str) -> Petition:
        data = await self._request(
            "POST", "/api/petitions", json={"title": title, "description": description}
        )
        return _parse(Petition, data)

    async def update_status(
        self, petition_id: str, *, status: str, remarks: str
    ) -> dict[str, Any]:
        data = await self._request(
            "PUT",
            _petition_path(petition_id, "status"),
            json={"status": status, "remarks": remarks},
        )
        return data if isinstance(data, dict) else {}

    async def assign_department(self, petition_id: str, *, department: str) -> dict[str, Any]:
        data = await self._request(
            "PUT",
            _petition_path(petition_id, "assign"),
            json={"department": department},
        )
        return data if isinstance(data, dict) else {}

    async def get_stats(self) -> dict[str, Any]:
        # Shape depends on the caller's role; see domain.models.parse_stats.
        data = await self._request("GET", "/api/petitions/stats")
        if not isinstance(data, dict):
            raise ApiRejected("Expected a stats object")
        return data


def _petition_path(petition_id: str, *rest: str) -> str:
    # The id is exactly one upstream path segment; dot segments would be resolved away.
    if petition_id in ("", ".", ".."):
        raise ApiRejected(f"Invalid petition id: {petition_id!r}")
    return "/".join(("/api/petitions", quote(petition_id, safe=""), *rest))


def _server_message(r: httpx.Response) -> str | None:
    try:
        body = r.json()
    except ValueError:
        return None
    if isinstance(body, dict):
        msg = body.get("message") or body.get("error")
        if isinstance(msg, str) and msg:
            return msg
    return None


def _parse(model: type[M], data: Any) -> M:
    try:
        return model.model_validate(data)
    except ValidationError as e:
        raise ApiRejected(f"Unexpected {model.__name__} payload from API") from e


# --- Module Notes -----------------------------------------------------------
# There are no retries or backoff: a failed call fails once and the view shows a
# message. Timeouts come from Settings.api_timeout_seconds.
