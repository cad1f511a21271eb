"""
petition_portal.domain

Domain package.

Responsibilities:
- Typed petition/user models and the portal-side workflow rules.
"""

# Package marker.
