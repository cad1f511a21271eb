"""
petition_portal.views.dashboard

Role-specific dashboard.

Responsibilities:
- Fetch the aggregate statistics and tag them with the viewer's role.
"""

from __future__ import annotations

from pydantic import ValidationError

from petition_portal.api_client.errors import PetitionApiError
from petition_portal.api_client.petitions import PetitionApiClient
from petition_portal.auth.models import Session
from petition_portal.domain.models import AdminStats, CitizenStats, OfficerStats, parse_stats
from petition_portal.observability.logging import get_logger

log = get_logger(__name__)

LOAD_FAILED = "Failed to load dashboard"


class DashboardView:
    def __init__(self, *, client: PetitionApiClient, session: Session) -> None:
        self._client = client
        self._session = session
        self.stats: CitizenStats | AdminStats | OfficerStats | None = None
        self.loading = True
        self.error: str | None = None

    @property
    def greeting(self) -> str:
        return f"Welcome, {self._session.user.first_name}!"

    async def load(self) -> None:
        self.loading = True
        try:
            raw = await self._client.get_stats()
            self.stats = parse_stats(self._session.role, raw)
        except PetitionApiError as e:
            log.warning("dashboard_fetch_failed", error=str(e), status_code=e.status_code)
            self.stats = None
            self.error = e.user_message(LOAD_FAILED)
        except ValidationError as e:
            log.warning("dashboard_stats_invalid", role=self._session.role, errors=e.error_count())
            self.stats = None
            self.error = LOAD_FAILED
        else:
            self.error = None
        finally:
            self.loading = False
