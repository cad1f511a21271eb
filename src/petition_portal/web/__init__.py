"""
petition_portal.web

Server-rendered web tier.

Responsibilities:
- FastAPI app factory, page routers and Jinja2 templates.
- Uvicorn entrypoint (`python -m petition_portal.web`).
"""

# Package marker.
