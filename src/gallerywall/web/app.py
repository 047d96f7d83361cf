"""FastAPI application for the gallery wall planner."""

from fastapi import APIRouter, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from gallerywall.web.exceptions import register_exception_handlers
from gallerywall.web.routers import (
    layout_router,
    link_router,
    templates_router,
    validate_router,
)

API_PREFIX = "/api/v1"


def _api_router() -> APIRouter:
    api = APIRouter(prefix=API_PREFIX)
    for router in (layout_router, validate_router, link_router, templates_router):
        api.include_router(router)
    return api


def create_app() -> FastAPI:
    """Build the API app: layout, validation, link and template endpoints
    under ``/api/v1`` plus a ``/health`` check."""
    app = FastAPI(
        title="Gallery Wall Planner API",
        description="Frame positions and hook measurements for picture walls",
        version="1.0.0",
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )
    register_exception_handlers(app)
    app.include_router(_api_router())

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "healthy"}

    return app


app = create_app()
