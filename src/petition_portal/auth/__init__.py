"""
petition_portal.auth

Session and access-control package.

Responsibilities:
- Session identity types and their lifecycle (login/logout).
- Signed session cookie helpers.
- Route guard decision and its FastAPI dependencies.
"""

# Package marker.
