"""Layout computation endpoints."""

import logging

from fastapi import APIRouter

from gallerywall.application import LayoutOutput
from gallerywall.application.config import (
    config_to_state,
    decode_state,
    encode_state,
    load_config_from_dict,
)
from gallerywall.infrastructure import JsonExporter
from gallerywall.web.dependencies import ComputeCommandDep
from gallerywall.web.exceptions import LayoutComputationError
from gallerywall.web.schemas.requests import (
    LayoutFromConfigRequest,
    LayoutFromLinkRequest,
)
from gallerywall.web.schemas.responses import ErrorResponseSchema, LayoutOutputSchema

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/layout",
    tags=["layout"],
    responses={422: {"model": ErrorResponseSchema}},
)


def _layout_output_to_schema(output: LayoutOutput) -> LayoutOutputSchema:
    """Convert LayoutOutput to response schema."""
    if not output.is_valid:
        raise LayoutComputationError(output.errors)
    data = JsonExporter().to_dict(output)
    data["link"] = encode_state(output.state)
    return LayoutOutputSchema.model_validate(data)


@router.post("", response_model=LayoutOutputSchema)
async def compute_layout(
    request: LayoutFromConfigRequest,
    command: ComputeCommandDep,
) -> LayoutOutputSchema:
    """Compute frame positions from a configuration.

    Raises:
        ConfigError: If the configuration is invalid (handled by exception handler).
        LayoutComputationError: If the wall cannot hold a layout.
    """
    config = load_config_from_dict(request.config)
    state = config_to_state(config)
    output = command.execute(state, request.unit or config.unit)
    logger.debug(f"Computed {len(output.positions)} positions from configuration")
    return _layout_output_to_schema(output)


@router.post("/from-link", response_model=LayoutOutputSchema)
async def compute_layout_from_link(
    request: LayoutFromLinkRequest,
    command: ComputeCommandDep,
) -> LayoutOutputSchema:
    """Compute frame positions from a shared link.

    Raises:
        ConfigError: If a link value cannot be parsed (handled by exception handler).
        LayoutComputationError: If the wall cannot hold a layout.
    """
    state = decode_state(request.query)
    output = command.execute(state, request.unit)
    return _layout_output_to_schema(output)
