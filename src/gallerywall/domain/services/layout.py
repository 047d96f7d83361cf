"""Layout engine entry point."""

from __future__ import annotations

import logging

from ..entities import FramePosition, GalleryFrame, Placement
from ..state import CalculatorState, FreeformLayout
from ..value_objects import HangingSpec, PlacementAuthority
from .measurement import hook_points, project
from .regular_layout import RegularLayoutBuilder

logger = logging.getLogger(__name__)

__all__ = [
    "calculate_layout_positions",
    "gallery_placement",
]


def gallery_placement(frame: GalleryFrame, hanging: HangingSpec) -> Placement:
    """Derive hook geometry for a stored freeform frame."""
    hook_x, hook_x2 = hook_points(frame.x, frame.width, hanging)
    return Placement(
        id=frame.id,
        name=frame.name,
        x=frame.x,
        y=frame.y,
        width=frame.width,
        height=frame.height,
        hanging_offset=frame.hanging_offset,
        hook_x=hook_x,
        hook_x2=hook_x2,
        hook_y=frame.y + frame.hanging_offset,
        authority=PlacementAuthority.STORED,
    )


def calculate_layout_positions(state: CalculatorState) -> tuple[FramePosition, ...]:
    """Compute every frame position for a calculator state.

    Regular layouts are rebuilt from their configuration on every call;
    freeform frames are taken as stored. Either way each placement is
    projected onto wall measurements. The function is pure: equal states
    give equal results.

    Args:
        state: The complete calculator state.

    Returns:
        Frame positions in layout order (row-major for regular layouts,
        stored order for freeform layouts).
    """
    if isinstance(state.layout, FreeformLayout):
        placements = [gallery_placement(f, state.hanging) for f in state.layout.frames]
    else:
        placements = RegularLayoutBuilder().build(state)

    positions = tuple(project(placement, state.wall) for placement in placements)
    logger.debug(
        f"Computed {len(positions)} positions for {state.layout_type.value} layout"
    )
    return positions
