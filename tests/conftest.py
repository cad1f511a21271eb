"""
tests.conftest

Shared fixtures.

Responsibilities:
- Provide the fake petition API and API clients bound to it.
- Provide a factory that boots the portal app against the fake API.
"""

from __future__ import annotations

from collections.abc import AsyncIterator, Callable
from contextlib import asynccontextmanager

import httpx
import pytest
from fakes import FakePetitionApi, session_for

from petition_portal.api_client.petitions import PetitionApiClient
from petition_portal.auth.session import SessionCookieConfig, encode_session
from petition_portal.domain.models import User
from petition_portal.settings import Settings
from petition_portal.web.app import create_app


@pytest.fixture
def fake_api() -> FakePetitionApi:
    return FakePetitionApi()


@pytest.fixture
def api_client_for(fake_api: FakePetitionApi) -> Callable[[User], PetitionApiClient]:
    def _make(user: User) -> PetitionApiClient:
        http = httpx.AsyncClient(
            transport=httpx.MockTransport(fake_api.handle), base_url="http://api.test"
        )
        return PetitionApiClient.for_session(http=http, session=session_for(user))

    return _make


@pytest.fixture
def settings() -> Settings:
    return Settings(env="test", create_redirect_delay_seconds=2)


@pytest.fixture
def portal(fake_api: FakePetitionApi, settings: Settings):
    @asynccontextmanager
    async def _portal(user: User | None = None) -> AsyncIterator[httpx.AsyncClient]:
        app = create_app(settings=settings, api_transport=httpx.MockTransport(fake_api.handle))
        # httpx ASGITransport does not manage lifespan; enter it explicitly.
        async with app.router.lifespan_context(app):
            transport = httpx.ASGITransport(app=app)
            async with httpx.AsyncClient(
                transport=transport, base_url="http://testserver"
            ) as client:
                if user is not None:
                    cookie = encode_session(
                        cfg=SessionCookieConfig.from_settings(settings),
                        session=session_for(user),
                    )
                    client.cookies.set(settings.session_cookie_name, cookie)
                yield client

    return _portal
