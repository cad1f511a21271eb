"""
petition_portal.views

Page-level view objects.

Responsibilities:
- Own each page's local state (fetched data, edit state, one error message).
- Call the petition API client and apply workflow rules before issuing requests.
"""

# Package marker; views are imported directly from submodules.
