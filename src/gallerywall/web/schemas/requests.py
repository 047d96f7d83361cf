"""Pydantic request schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, Field

from gallerywall.domain import Unit


class LayoutFromConfigRequest(BaseModel):
    """Request for computing a layout from a full configuration."""

    config: dict[str, Any] = Field(..., description="Gallery wall configuration JSON")
    unit: Unit | None = Field(
        default=None,
        description="Unit for the response; defaults to the configuration's unit",
    )


class LayoutFromLinkRequest(BaseModel):
    """Request for computing a layout from a shared link."""

    query: str = Field(..., description="Shared link URL or its query string")
    unit: Unit = Field(default=Unit.INCHES, description="Unit for the response")


class ConfigValidateRequest(BaseModel):
    """Request for validating a configuration."""

    config: dict[str, Any] = Field(..., description="Gallery wall configuration JSON")


class LinkRequest(BaseModel):
    """Request for turning a configuration into a shareable query string."""

    config: dict[str, Any] = Field(..., description="Gallery wall configuration JSON")
