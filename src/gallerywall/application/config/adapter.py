"""Adapter between GalleryWallConfiguration and the domain CalculatorState.

Configuration lengths are in the file's unit; the domain works in inches.
``config_to_state`` converts on the way in and ``state_to_config`` converts
back, so a state can be saved as a configuration file in either unit.
"""

from __future__ import annotations

from gallerywall.application.config.loader import ConfigError
from gallerywall.application.config.schema import (
    AnchorConfig,
    FrameConfig,
    FurnitureConfig,
    GalleryFrameConfig,
    GalleryLayoutConfig,
    GalleryWallConfiguration,
    GridLayoutConfig,
    HangingConfig,
    RowLayoutConfig,
    WallConfig,
)
from gallerywall.domain.entities import GalleryFrame
from gallerywall.domain.services import frames_from_template, get_template
from gallerywall.domain.state import (
    DEFAULT_SNAP_TOLERANCE,
    CalculatorState,
    FreeformLayout,
    Layout,
    RegularLayout,
)
from gallerywall.domain.units import from_display_unit, to_display_unit
from gallerywall.domain.value_objects import (
    AnchorSpec,
    FrameSpec,
    FurnitureSpec,
    HangingSpec,
    LayoutType,
    Unit,
    WallSpec,
)

# Schema version written by state_to_config.
CURRENT_SCHEMA_VERSION = "1.1"


def _frames_from_config(
    configs: list[GalleryFrameConfig], unit: Unit
) -> tuple[GalleryFrame, ...]:
    """Build gallery frames, giving id-less entries the next free ids."""
    next_id = max((c.id for c in configs if c.id is not None), default=-1) + 1
    frames: list[GalleryFrame] = []
    for frame in configs:
        if frame.id is None:
            frame_id = next_id
            next_id += 1
        else:
            frame_id = frame.id
        frames.append(
            GalleryFrame(
                id=frame_id,
                name=frame.name or f"Frame {frame_id + 1}",
                width=from_display_unit(frame.width, unit),
                height=from_display_unit(frame.height, unit),
                hanging_offset=from_display_unit(frame.hanging_offset, unit),
                x=from_display_unit(frame.x, unit),
                y=from_display_unit(frame.y, unit),
            )
        )
    return tuple(frames)


def config_to_state(config: GalleryWallConfiguration) -> CalculatorState:
    """Convert a validated configuration into a calculator state.

    Args:
        config: A validated GalleryWallConfiguration instance

    Returns:
        The CalculatorState in inches.

    Raises:
        ConfigError: If a gallery layout names an unknown template.
    """
    unit = config.unit

    def length(value: float) -> float:
        return from_display_unit(value, unit)

    def optional_length(value: float | None, default: float | None) -> float | None:
        return length(value) if value is not None else default

    wall = WallSpec(width=length(config.wall.width), height=length(config.wall.height))
    hanging_defaults = HangingSpec()
    hanging = HangingSpec(
        type=config.hanging.type,
        hook_inset=optional_length(
            config.hanging.hook_inset, hanging_defaults.hook_inset
        ),
    )

    anchor_defaults = AnchorSpec()
    anchor = AnchorSpec(
        vertical=config.anchor.vertical,
        vertical_offset=optional_length(
            config.anchor.vertical_offset, anchor_defaults.vertical_offset
        ),
        horizontal=config.anchor.horizontal,
        horizontal_offset=length(config.anchor.horizontal_offset),
        vertical_target=config.anchor.vertical_target,
    )

    furniture = None
    if config.furniture is not None:
        furniture = FurnitureSpec(
            width=length(config.furniture.width),
            height=length(config.furniture.height),
            anchor=config.furniture.anchor,
            offset=length(config.furniture.offset),
            alignment=config.furniture.alignment,
            vertical=config.furniture.vertical,
        )

    layout_config = config.layout
    layout: Layout
    if isinstance(layout_config, GalleryLayoutConfig):
        gallery_defaults = FreeformLayout()
        if layout_config.template is not None:
            template = get_template(layout_config.template)
            if template is None:
                raise ConfigError(
                    message=f"Unknown gallery template: {layout_config.template}",
                    error_type="validation",
                    details=[
                        {
                            "path": "layout.template",
                            "message": "Unknown gallery template",
                            "value": layout_config.template,
                        }
                    ],
                )
            frames = frames_from_template(
                template,
                wall,
                anchor,
                width=optional_length(layout_config.template_width, None),
                furniture=furniture,
            )
        else:
            frames = _frames_from_config(layout_config.frames, unit)
        layout = FreeformLayout(
            frames=frames,
            gallery_spacing=optional_length(
                layout_config.gallery_spacing, gallery_defaults.gallery_spacing
            ),
            snap_enabled=layout_config.snap_enabled,
            snap_tolerance=optional_length(
                layout_config.snap_tolerance, DEFAULT_SNAP_TOLERANCE
            ),
        )
    else:
        regular_defaults = RegularLayout()
        frame = layout_config.frame
        if isinstance(layout_config, GridLayoutConfig):
            kind = LayoutType.GRID
            frame_count = layout_config.resolved_frame_count
            grid_rows, grid_cols = layout_config.rows, layout_config.cols
        else:
            kind = LayoutType.ROW
            frame_count = layout_config.frame_count
            grid_rows = grid_cols = None
        layout = RegularLayout(
            kind=kind,
            frame_count=frame_count,
            grid_rows=grid_rows,
            grid_cols=grid_cols,
            frame=FrameSpec(
                width=length(frame.width),
                height=length(frame.height),
                hanging_offset=length(frame.hanging_offset),
            ),
            h_spacing=optional_length(
                layout_config.h_spacing, regular_defaults.h_spacing
            ),
            v_spacing=optional_length(
                layout_config.v_spacing, regular_defaults.v_spacing
            ),
            h_distribution=layout_config.h_distribution,
            v_distribution=layout_config.v_distribution,
        )

    return CalculatorState(
        wall=wall, hanging=hanging, anchor=anchor, furniture=furniture, layout=layout
    )


def state_to_config(
    state: CalculatorState, unit: Unit | str = Unit.INCHES
) -> GalleryWallConfiguration:
    """Convert a calculator state back into a configuration.

    Every length is written explicitly in ``unit``. Selection and drag
    state are not part of a configuration and are dropped.
    """
    unit = Unit(unit)

    def length(value: float) -> float:
        return round(to_display_unit(value, unit), 4)

    layout = state.layout
    if isinstance(layout, FreeformLayout):
        layout_config: GridLayoutConfig | RowLayoutConfig | GalleryLayoutConfig = (
            GalleryLayoutConfig(
                type="gallery",
                frames=[
                    GalleryFrameConfig(
                        id=f.id,
                        name=f.name,
                        width=length(f.width),
                        height=length(f.height),
                        hanging_offset=length(f.hanging_offset),
                        x=length(f.x),
                        y=length(f.y),
                    )
                    for f in layout.frames
                ],
                gallery_spacing=length(layout.gallery_spacing),
                snap_enabled=layout.snap_enabled,
                snap_tolerance=length(layout.snap_tolerance),
            )
        )
    else:
        frame = FrameConfig(
            width=length(layout.frame.width),
            height=length(layout.frame.height),
            hanging_offset=length(layout.frame.hanging_offset),
        )
        common = dict(
            frame=frame,
            h_spacing=length(layout.h_spacing),
            v_spacing=length(layout.v_spacing),
            h_distribution=layout.h_distribution,
            v_distribution=layout.v_distribution,
        )
        if layout.kind is LayoutType.GRID:
            layout_config = GridLayoutConfig(
                type="grid",
                frame_count=layout.frame_count,
                rows=layout.grid_rows,
                cols=layout.grid_cols,
                **common,
            )
        else:
            layout_config = RowLayoutConfig(
                type="row", frame_count=layout.frame_count, **common
            )

    furniture = None
    if state.furniture is not None:
        furniture = FurnitureConfig(
            width=length(state.furniture.width),
            height=length(state.furniture.height),
            anchor=state.furniture.anchor,
            offset=length(state.furniture.offset),
            alignment=state.furniture.alignment,
            vertical=state.furniture.vertical,
        )

    return GalleryWallConfiguration(
        schema_version=CURRENT_SCHEMA_VERSION,
        unit=unit,
        wall=WallConfig(width=length(state.wall.width), height=length(state.wall.height)),
        hanging=HangingConfig(
            type=state.hanging.type, hook_inset=length(state.hanging.hook_inset)
        ),
        anchor=AnchorConfig(
            vertical=state.anchor.vertical,
            vertical_offset=length(state.anchor.vertical_offset),
            horizontal=state.anchor.horizontal,
            horizontal_offset=length(state.anchor.horizontal_offset),
            vertical_target=state.anchor.vertical_target,
        ),
        furniture=furniture,
        layout=layout_config,
    )
