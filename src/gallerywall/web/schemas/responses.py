"""Pydantic response schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, Field


class WallSchema(BaseModel):
    """Wall size in the response unit."""

    width: float = Field(..., description="Wall width")
    height: float = Field(..., description="Wall height, floor to ceiling")


class FramePositionSchema(BaseModel):
    """A placed frame and its hook measurements, in the response unit."""

    id: int = Field(..., description="Frame id")
    name: str = Field(..., description="Display name")
    x: float = Field(..., description="Frame left edge from the wall's left edge")
    y: float = Field(..., description="Frame top edge from the ceiling")
    width: float = Field(..., description="Frame width")
    height: float = Field(..., description="Frame height")
    hanging_offset: float = Field(..., description="Frame top edge down to the hook")
    hook_x: float = Field(..., description="Left (or only) hook position")
    hook_x2: float | None = Field(default=None, description="Right hook position")
    hook_y: float = Field(..., description="Hook line from the ceiling")
    hook_gap: float | None = Field(default=None, description="Distance between hooks")
    from_left: float = Field(..., description="Wall left edge to the left hook")
    from_right: float = Field(..., description="Wall right edge to the right hook")
    from_floor: float = Field(..., description="Floor up to the hook line")
    from_ceiling: float = Field(..., description="Ceiling down to the hook line")
    row: int | None = Field(default=None, description="Grid row")
    col: int | None = Field(default=None, description="Grid column")
    authority: str = Field(..., description="Whether the position was computed or stored")
    is_out_of_bounds: bool = Field(default=False, description="Frame extends past the wall")


class LayoutOutputSchema(BaseModel):
    """Response for layout computation."""

    unit: str = Field(..., description="Unit of every length in the response")
    wall: WallSchema = Field(..., description="Wall size")
    layout_type: str = Field(..., description="Layout type")
    hanging_type: str = Field(..., description="Single or dual hooks")
    positions: list[FramePositionSchema] = Field(
        default_factory=list, description="Frame positions in layout order"
    )
    warnings: list[str] = Field(default_factory=list, description="Warning messages")
    link: str = Field(..., description="Query string that reproduces this layout")


class ValidationResultSchema(BaseModel):
    """Response for configuration validation."""

    is_valid: bool = Field(..., description="Whether configuration is valid")
    errors: list[dict[str, Any]] = Field(
        default_factory=list, description="Validation errors"
    )
    warnings: list[str] = Field(default_factory=list, description="Layout warnings")


class LinkSchema(BaseModel):
    """Response for link encoding."""

    query: str = Field(..., description="Query string without the leading '?'")


class TemplateListItemSchema(BaseModel):
    """Single starter configuration in the list."""

    name: str = Field(..., description="Template name")
    description: str = Field(..., description="Template description")


class TemplateListSchema(BaseModel):
    """Response for listing starter configurations."""

    templates: list[TemplateListItemSchema] = Field(
        ..., description="Available templates"
    )


class TemplateContentSchema(BaseModel):
    """Response for template content."""

    name: str = Field(..., description="Template name")
    description: str = Field(..., description="Template description")
    content: dict[str, Any] = Field(..., description="Template configuration content")


class GalleryTemplateSchema(BaseModel):
    """Built-in gallery arrangement."""

    id: str = Field(..., description="Template id")
    name: str = Field(..., description="Display name")
    description: str = Field(..., description="Template description")
    frame_count: int = Field(..., description="Number of frames")
    aspect_ratio: float = Field(..., description="Bounding box width over height")


class GalleryTemplateListSchema(BaseModel):
    """Response for listing gallery templates."""

    templates: list[GalleryTemplateSchema] = Field(
        ..., description="Available gallery templates"
    )


class ErrorResponseSchema(BaseModel):
    """Standard error response."""

    error: str = Field(..., description="Error message")
    error_type: str = Field(..., description="Error type identifier")
    details: list[dict[str, Any]] | dict[str, Any] | None = Field(
        default=None, description="Additional error details"
    )
