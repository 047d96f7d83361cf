"""Shareable link endpoints."""

from fastapi import APIRouter

from gallerywall.application.config import (
    config_to_state,
    encode_state,
    load_config_from_dict,
)
from gallerywall.web.schemas.requests import LinkRequest
from gallerywall.web.schemas.responses import LinkSchema

router = APIRouter(prefix="/link", tags=["link"])


@router.post("", response_model=LinkSchema)
async def create_link(request: LinkRequest) -> LinkSchema:
    """Encode a configuration as a query string."""
    state = config_to_state(load_config_from_dict(request.config))
    return LinkSchema(query=encode_state(state))
