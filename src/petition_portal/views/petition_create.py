"""
petition_portal.views.petition_create

Petition creation form.

Responsibilities:
- Validate the title/description and submit a new petition.
- Report success with a delayed redirect to the list, or surface the failure.
"""

from __future__ import annotations

from petition_portal.api_client.errors import PetitionApiError
from petition_portal.api_client.petitions import PetitionApiClient
from petition_portal.auth.models import Session
from petition_portal.domain import workflow
from petition_portal.domain.models import Petition
from petition_portal.observability.logging import get_logger

log = get_logger(__name__)

CREATE_FAILED = "Failed to create petition"
CREATED = "Petition created successfully!"
LIST_PATH = "/petitions"


class PetitionCreateView:
    def __init__(
        self,
        *,
        client: PetitionApiClient,
        session: Session,
        redirect_delay_seconds: int = 2,
    ) -> None:
        self._client = client
        self._session = session
        self.redirect_delay_seconds = redirect_delay_seconds
        self.title = ""
        self.description = ""
        self.error: str | None = None
        self.success: str | None = None
        self.created: Petition | None = None
        self.redirect_to: str | None = None

    async def submit(self, *, title: str, description: str) -> bool:
        self.title = title
        self.description = description
        self.error = None
        self.success = None

        if not workflow.can_create_petition(self._session.user):
            self.error = "Only citizens can create petitions"
            return False
        if not title.strip() or not description.strip():
            self.error = "Title and description are required"
            return False

        try:
            created = await self._client.create_petition(
                title=title.strip(), description=description.strip()
            )
        except PetitionApiError as e:
            log.warning("petition_create_failed", error=str(e), status_code=e.status_code)
            self.error = e.user_message(CREATE_FAILED)
            return False

        log.info("petition_created", petition_id=created.id)
        self.created = created
        self.success = CREATED
        self.redirect_to = LIST_PATH
        return True
