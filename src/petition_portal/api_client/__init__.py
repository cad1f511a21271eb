"""
petition_portal.api_client

Client boundary for the external petition REST API.

Responsibilities:
- Provide a typed async client over the petition endpoints.
- Translate transport and HTTP failures into a small error taxonomy.
"""

# Package marker.
