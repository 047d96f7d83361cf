"""Configuration validation endpoints."""

from fastapi import APIRouter

from gallerywall.application.config import (
    ConfigError,
    config_to_state,
    load_config_from_dict,
)
from gallerywall.web.dependencies import ComputeCommandDep
from gallerywall.web.schemas.requests import ConfigValidateRequest
from gallerywall.web.schemas.responses import ValidationResultSchema

router = APIRouter(prefix="/validate", tags=["validate"])


@router.post("", response_model=ValidationResultSchema)
async def validate_configuration(
    request: ConfigValidateRequest,
    command: ComputeCommandDep,
) -> ValidationResultSchema:
    """Validate a gallery wall configuration.

    Schema problems come back as errors; a configuration that loads but
    lays out badly (frames off the wall, too narrow for dual hooks) comes
    back valid with warnings.

    Args:
        request: Request containing configuration to validate.
        command: Injected ComputeLayoutCommand.

    Returns:
        Validation result with errors and warnings.
    """
    try:
        state = config_to_state(load_config_from_dict(request.config))
    except ConfigError as e:
        errors = e.details or [{"path": "", "message": e.message}]
        return ValidationResultSchema(
            is_valid=False,
            errors=[{"path": d.get("path", ""), "message": d["message"]} for d in errors],
        )

    output = command.execute(state)
    return ValidationResultSchema(
        is_valid=output.is_valid,
        errors=[{"path": "wall", "message": e} for e in output.errors],
        warnings=output.warnings,
    )
