"""
petition_portal.api_client.errors

Error taxonomy for petition API calls.

Responsibilities:
- Distinguish transport failures, server rejections and auth rejections.
- Carry the server-provided message (if any) so views can surface it verbatim.
"""

from __future__ import annotations


class PetitionApiError(Exception):
    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        server_message: str | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.server_message = server_message

    def user_message(self, fallback: str) -> str:
        return self.server_message or fallback


class ApiTransportError(PetitionApiError):
    """Network-level failure: the API could not be reached or did not answer."""


class ApiRejected(PetitionApiError):
    """The API answered with a non-2xx status (or an unusable body)."""


class Unauthorized(ApiRejected):
    """401/403 from the API. Handled like any other rejection; no auto-logout."""


# --- Module Notes -----------------------------------------------------------
# Views catch `PetitionApiError` as a whole; the subclasses exist for logging and tests.
