"""API routers for the REST API."""

from gallerywall.web.routers.layout import router as layout_router
from gallerywall.web.routers.link import router as link_router
from gallerywall.web.routers.templates import router as templates_router
from gallerywall.web.routers.validate import router as validate_router

__all__ = [
    "layout_router",
    "link_router",
    "templates_router",
    "validate_router",
]
