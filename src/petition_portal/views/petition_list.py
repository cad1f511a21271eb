"""
petition_portal.views.petition_list

Filtered petition list.

Responsibilities:
- Hold the list filter and re-fetch only when it changes by value.
- Drop responses that arrive after a newer request was issued.
- Present rows with status/urgency badges.
"""

from __future__ import annotations

from dataclasses import dataclass

from petition_portal.api_client.errors import PetitionApiError
from petition_portal.api_client.petitions import PetitionApiClient
from petition_portal.auth.models import Session
from petition_portal.domain import workflow
from petition_portal.domain.models import Petition, PetitionFilter
from petition_portal.domain.workflow import BadgeColor
from petition_portal.observability.logging import get_logger

log = get_logger(__name__)

FETCH_FAILED = "Failed to fetch petitions"


@dataclass(frozen=True, slots=True)
class PetitionRow:
    id: str
    title: str
    status: str
    status_label: str
    status_color: BadgeColor
    urgent: bool
    department: str
    created_on: str
    href: str

    @classmethod
    def from_petition(cls, p: Petition) -> PetitionRow:
        return cls(
            id=p.id,
            title=p.title,
            status=p.status,
            status_label=workflow.status_label(p.status),
            status_color=workflow.status_color(p.status),
            urgent=p.urgency,
            department=p.assigned_department or "-",
            created_on=p.created_at.date().isoformat() if p.created_at else "-",
            href=f"/petitions/{p.id}",
        )


class PetitionListView:
    def __init__(
        self,
        *,
        client: PetitionApiClient,
        session: Session,
        petition_filter: PetitionFilter | None = None,
    ) -> None:
        self._client = client
        self._session = session
        self.filter = petition_filter or PetitionFilter()
        self.petitions: list[Petition] = []
        self.loading = True
        self.error: str | None = None
        self._seq = 0

    @property
    def can_create(self) -> bool:
        return workflow.can_create_petition(self._session.user)

    @property
    def rows(self) -> list[PetitionRow]:
        return [PetitionRow.from_petition(p) for p in self.petitions]

    async def set_filter(self, **changes: str | None) -> bool:
        new_filter = self.filter.merged(**changes)
        if new_filter == self.filter:
            return False
        self.filter = new_filter
        await self.refresh()
        return True

    async def refresh(self) -> None:
        self._seq += 1
        seq = self._seq
        self.loading = True
        try:
            petitions = await self._client.list_petitions(self.filter)
        except PetitionApiError as e:
            if seq != self._seq:
                log.debug("petition_list_stale_error_dropped", seq=seq, latest=self._seq)
                return
            log.warning("petition_list_fetch_failed", error=str(e), status_code=e.status_code)
            self.petitions = []
            self.error = e.user_message(FETCH_FAILED)
            self.loading = False
            return

        if seq != self._seq:
            # A newer filter was requested while this one was in flight.
            log.debug("petition_list_stale_response_dropped", seq=seq, latest=self._seq)
            return
        self.petitions = petitions
        self.error = None
        self.loading = False
