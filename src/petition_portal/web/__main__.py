"""
petition_portal.web.__main__

Entrypoint for running the portal via `python -m petition_portal.web`.

Responsibilities:
- Load settings.
- Create the app.
- Start uvicorn with structlog-compatible logging config.
"""

from __future__ import annotations

import uvicorn

from petition_portal.settings import get_settings
from petition_portal.web.app import create_app


def main() -> None:
    settings = get_settings()
    app = create_app(settings=settings)

    uvicorn.run(
        app,
        host=settings.web_host,
        port=settings.web_port,
        log_config=None,  # structlog
    )


if __name__ == "__main__":
    main()
