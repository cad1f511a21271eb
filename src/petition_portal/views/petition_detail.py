"""
petition_portal.views.petition_detail

Petition detail and workflow actions.

Responsibilities:
- Load one petition and seed the status/department edit state from it.
- Gate the officer status update and the admin department assignment.
- Re-read the server's canonical petition after every successful action.
"""

from __future__ import annotations

from petition_portal.api_client.errors import PetitionApiError
from petition_portal.api_client.petitions import PetitionApiClient
from petition_portal.auth.models import Session
from petition_portal.domain import workflow
from petition_portal.domain.models import Petition
from petition_portal.domain.workflow import BadgeColor
from petition_portal.observability.logging import get_logger

log = get_logger(__name__)

FETCH_FAILED = "Failed to fetch petition details"
UPDATE_FAILED = "Failed to update status"
ASSIGN_FAILED = "Failed to assign department"


class PetitionDetailView:
    def __init__(self, *, client: PetitionApiClient, session: Session) -> None:
        self._client = client
        self._session = session
        self.petition_id: str | None = None
        self.petition: Petition | None = None
        self.loading = True
        self.error: str | None = None
        self.notice: str | None = None

        # Edit state, seeded from the loaded petition.
        self.status = ""
        self.department = ""
        self.remarks = ""

    @property
    def can_update_status(self) -> bool:
        return self.petition is not None and workflow.can_update_status(
            self._session.user, self.petition
        )

    @property
    def can_assign_department(self) -> bool:
        return self.petition is not None and workflow.can_assign_department(self._session.user)

    @property
    def assign_enabled(self) -> bool:
        return self.can_assign_department and bool(self.department)

    @property
    def status_color(self) -> BadgeColor:
        return workflow.status_color(self.petition.status if self.petition else "")

    async def load(self, petition_id: str) -> None:
        self.petition_id = petition_id
        self.loading = True
        try:
            petition = await self._client.get_petition(petition_id)
        except PetitionApiError as e:
            log.warning(
                "petition_detail_fetch_failed",
                petition_id=petition_id,
                error=str(e),
                status_code=e.status_code,
            )
            # Never leave a previously loaded petition on screen next to the error.
            self.petition = None
            self.error = e.user_message(FETCH_FAILED)
            self.loading = False
            return

        self.petition = petition
        self.status = petition.status
        self.department = petition.assigned_department or ""
        self.error = None
        self.loading = False

    async def update_status(
        self, *, status: str | None = None, remarks: str | None = None
    ) -> bool:
        if status is not None:
            self.status = status
        if remarks is not None:
            self.remarks = remarks

        if self.petition is None or not self.can_update_status:
            log.warning("petition_status_update_not_permitted", petition_id=self.petition_id)
            return False
        if self.status not in workflow.TRANSITION_TARGETS:
            self.error = f"Unknown status: {self.status}"
            return False

        petition_id = self.petition.id
        try:
            await self._client.update_status(
                petition_id, status=self.status, remarks=self.remarks
            )
        except PetitionApiError as e:
            log.warning(
                "petition_status_update_failed",
                petition_id=petition_id,
                error=str(e),
                status_code=e.status_code,
            )
            self.error = e.user_message(UPDATE_FAILED)
            return False

        log.info("petition_status_updated", petition_id=petition_id, status=self.status)
        self.remarks = ""
        await self.load(petition_id)
        if self.error is not None:
            # Saved upstream, but the page cannot show the result.
            return False
        self.notice = "Status updated"
        return True

    async def assign_department(self, *, department: str | None = None) -> bool:
        if department is not None:
            self.department = department

        if self.petition is None or not self.can_assign_department:
            log.warning("petition_assign_not_permitted", petition_id=self.petition_id)
            return False
        if not self.department:
            # Mirrors the disabled button: nothing is sent without a department.
            return False
        if not workflow.is_department(self.department):
            self.error = f"Unknown department: {self.department}"
            return False

        petition_id = self.petition.id
        try:
            await self._client.assign_department(petition_id, department=self.department)
        except PetitionApiError as e:
            log.warning(
                "petition_assign_failed",
                petition_id=petition_id,
                error=str(e),
                status_code=e.status_code,
            )
            self.error = e.user_message(ASSIGN_FAILED)
            return False

        log.info("petition_assigned", petition_id=petition_id, department=self.department)
        # Status comes from the server's copy; it is not forced to "assigned" locally.
        await self.load(petition_id)
        if self.error is not None:
            return False
        self.notice = "Department assigned"
        return True


# --- Module Notes -----------------------------------------------------------
# Status history is never edited locally; after an action the whole petition is
# re-read, so the history shown is always the server's.
