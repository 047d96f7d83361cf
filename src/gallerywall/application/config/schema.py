"""Pydantic configuration schema models for gallery wall layouts.

This module defines the configuration schema for JSON-based layout files.
It uses Pydantic v2 for validation and serialization.

Lengths in a configuration file are expressed in the file's ``unit``
(inches by default) and converted to inches by the adapter. Optional
lengths that are left out take the engine defaults, which are in inches
whatever the file's unit.

The enums are reused from the domain layer to keep a single vocabulary.
"""

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from gallerywall.domain.value_objects import (
    Distribution,
    FurnitureAlignment,
    FurnitureVerticalAnchor,
    HangingType,
    HorizontalAnchor,
    Unit,
    VerticalAnchor,
    VerticalTarget,
)

# Supported schema versions for configuration files
# Version 1.0: Initial schema with grid, row and gallery layouts
# Version 1.1: Added furniture anchors and hook/edge vertical targets
SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0", "1.1"})


class WallConfig(BaseModel):
    """Wall dimensions.

    Attributes:
        width: Wall width, must be positive
        height: Wall height (floor to ceiling), must be positive
    """

    model_config = ConfigDict(extra="forbid")

    width: float = Field(..., gt=0)
    height: float = Field(..., gt=0)


class FrameConfig(BaseModel):
    """Size and hanging point shared by every frame of a grid or row.

    Attributes:
        width: Frame width
        height: Frame height
        hanging_offset: Distance from the frame's top edge down to the hook(s)
    """

    model_config = ConfigDict(extra="forbid")

    width: float = Field(..., gt=0)
    height: float = Field(..., gt=0)
    hanging_offset: float = Field(default=0.0, ge=0)

    @model_validator(mode="after")
    def validate_hanging_offset(self) -> "FrameConfig":
        """Ensure the hanging point lies on the frame."""
        if self.hanging_offset > self.height:
            raise ValueError(
                f"hanging_offset ({self.hanging_offset}) cannot exceed "
                f"frame height ({self.height})"
            )
        return self


class HangingConfig(BaseModel):
    """Hanging hardware.

    Attributes:
        type: "single" for one centred hook, "dual" for two hooks
        hook_inset: For dual hanging, distance from each vertical edge to its hook
    """

    model_config = ConfigDict(extra="forbid")

    type: HangingType = HangingType.SINGLE
    hook_inset: float | None = Field(
        default=None, ge=0, description="Defaults to 3 inches"
    )


class AnchorConfig(BaseModel):
    """Where the layout block sits on the wall.

    Attributes:
        vertical: Vertical reference (floor, ceiling, center, furniture)
        vertical_offset: Offset from the vertical reference
        horizontal: Horizontal reference (left, center, right)
        horizontal_offset: Offset from the horizontal reference
        vertical_target: Whether floor/ceiling offsets measure to the hook
            line or to the block's edge
    """

    model_config = ConfigDict(extra="forbid")

    vertical: VerticalAnchor = VerticalAnchor.FLOOR
    vertical_offset: float | None = Field(
        default=None, description="Defaults to 57 inches (gallery eye level)"
    )
    horizontal: HorizontalAnchor = HorizontalAnchor.CENTER
    horizontal_offset: float = 0.0
    vertical_target: VerticalTarget = VerticalTarget.HOOK


class FurnitureConfig(BaseModel):
    """A furniture piece standing on the floor in front of the wall.

    Attributes:
        width: Furniture width
        height: Furniture height
        anchor: Horizontal placement of the furniture on the wall
        offset: Offset for the furniture's horizontal anchor
        alignment: How frames align horizontally to the furniture
        vertical: Vertical reference used with a furniture anchor
    """

    model_config = ConfigDict(extra="forbid")

    width: float = Field(..., gt=0)
    height: float = Field(..., gt=0)
    anchor: HorizontalAnchor = HorizontalAnchor.CENTER
    offset: float = 0.0
    alignment: FurnitureAlignment = FurnitureAlignment.CENTER
    vertical: FurnitureVerticalAnchor = FurnitureVerticalAnchor.ABOVE


class _RegularLayoutFields(BaseModel):
    """Fields shared by grid and row layouts."""

    model_config = ConfigDict(extra="forbid")

    frame: FrameConfig
    h_spacing: float | None = Field(default=None, ge=0)
    v_spacing: float | None = Field(default=None, ge=0)
    h_distribution: Distribution = Distribution.FIXED
    v_distribution: Distribution = Distribution.FIXED


class RowLayoutConfig(_RegularLayoutFields):
    """A single row of identical frames."""

    type: Literal["row"]
    frame_count: int = Field(default=3, ge=1, le=100)


class GridLayoutConfig(_RegularLayoutFields):
    """A grid of identical frames.

    When both ``rows`` and ``cols`` are given and ``frame_count`` is not,
    the grid is filled. When either dimension is missing the engine picks a
    near-square shape.
    """

    type: Literal["grid"]
    frame_count: int | None = Field(default=None, ge=1, le=100)
    rows: int | None = Field(default=None, ge=1, le=20)
    cols: int | None = Field(default=None, ge=1, le=20)

    @model_validator(mode="after")
    def validate_frame_count(self) -> "GridLayoutConfig":
        """A grid needs either a frame count or both dimensions."""
        if self.frame_count is None and (self.rows is None or self.cols is None):
            raise ValueError("frame_count is required unless both rows and cols are set")
        return self

    @property
    def resolved_frame_count(self) -> int:
        if self.frame_count is not None:
            return self.frame_count
        assert self.rows is not None and self.cols is not None
        return self.rows * self.cols


class GalleryFrameConfig(BaseModel):
    """One freeform frame with a stored position.

    Attributes:
        id: Stable identifier; assigned in list order when omitted
        name: Display name; defaults to "Frame N"
        width: Frame width
        height: Frame height
        hanging_offset: Distance from the top edge down to the hook(s)
        x: Left edge measured from the wall's left edge
        y: Top edge measured down from the ceiling
    """

    model_config = ConfigDict(extra="forbid")

    id: int | None = Field(default=None, ge=0)
    name: str | None = None
    width: float = Field(..., gt=0)
    height: float = Field(..., gt=0)
    hanging_offset: float = Field(default=0.0, ge=0)
    x: float = 0.0
    y: float = 0.0

    @model_validator(mode="after")
    def validate_hanging_offset(self) -> "GalleryFrameConfig":
        """Ensure the hanging point lies on the frame."""
        if self.hanging_offset > self.height:
            raise ValueError(
                f"hanging_offset ({self.hanging_offset}) cannot exceed "
                f"frame height ({self.height})"
            )
        return self


class GalleryLayoutConfig(BaseModel):
    """Freeform gallery layout.

    Either list the frames explicitly or name a built-in ``template`` to
    generate them. Listing both is an error.
    """

    model_config = ConfigDict(extra="forbid")

    type: Literal["gallery"]
    frames: list[GalleryFrameConfig] = Field(default_factory=list)
    template: str | None = None
    template_width: float | None = Field(default=None, gt=0)
    gallery_spacing: float | None = Field(default=None, ge=0)
    snap_enabled: bool = False
    snap_tolerance: float | None = Field(default=None, gt=0)

    @field_validator("frames")
    @classmethod
    def validate_unique_ids(cls, v: list[GalleryFrameConfig]) -> list[GalleryFrameConfig]:
        """Reject duplicate explicit frame ids."""
        ids = [frame.id for frame in v if frame.id is not None]
        duplicates = sorted({i for i in ids if ids.count(i) > 1})
        if duplicates:
            raise ValueError(f"Duplicate frame ids: {duplicates}")
        return v

    @model_validator(mode="after")
    def validate_frames_or_template(self) -> "GalleryLayoutConfig":
        """Frames and template are mutually exclusive."""
        if self.frames and self.template is not None:
            raise ValueError("Specify either frames or template, not both")
        return self


LayoutConfig = Annotated[
    Union[GridLayoutConfig, RowLayoutConfig, GalleryLayoutConfig],
    Field(discriminator="type"),
]


class GalleryWallConfiguration(BaseModel):
    """Root configuration model for a gallery wall layout.

    Attributes:
        schema_version: Version string in format "major.minor" (e.g., "1.0")
        unit: Unit of every length in the file, also used for display
        wall: Wall dimensions
        hanging: Hanging hardware
        anchor: Anchor of the layout block
        furniture: Optional furniture piece used by furniture anchors
        layout: Grid, row or gallery layout, selected by ``layout.type``

    Example:
        >>> config = GalleryWallConfiguration(
        ...     schema_version="1.0",
        ...     wall=WallConfig(width=120.0, height=96.0),
        ...     layout=RowLayoutConfig(type="row", frame=FrameConfig(width=12, height=12)),
        ... )
    """

    model_config = ConfigDict(extra="forbid")

    schema_version: str = Field(..., pattern=r"^\d+\.\d+$")
    unit: Unit = Unit.INCHES
    wall: WallConfig
    hanging: HangingConfig = Field(default_factory=HangingConfig)
    anchor: AnchorConfig = Field(default_factory=AnchorConfig)
    furniture: FurnitureConfig | None = Field(
        default=None, description="Furniture piece (optional)"
    )
    layout: LayoutConfig

    @field_validator("schema_version")
    @classmethod
    def validate_supported_version(cls, v: str) -> str:
        """Validate that schema version is supported.

        Newer minor versions within a supported major version are accepted
        for forward compatibility.
        """
        if v in SUPPORTED_VERSIONS:
            return v

        major_version = int(v.split(".")[0])
        supported_majors = {int(sv.split(".")[0]) for sv in SUPPORTED_VERSIONS}
        if major_version in supported_majors:
            return v

        raise ValueError(
            f"Unsupported schema version '{v}'. "
            f"Supported versions: {sorted(SUPPORTED_VERSIONS)}"
        )
