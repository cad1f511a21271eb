"""
petition_portal.web.routers

Page routers.
"""

# Package marker.
