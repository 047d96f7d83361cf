"""Hook geometry and wall measurement projection.

The projector turns a placement into the distances a person measures on the
wall: from the left and right edges to the hooks, and from the floor and
ceiling to the hook line.
"""

from __future__ import annotations

from ..entities import FramePosition, Placement
from ..value_objects import HangingSpec, HangingType, WallSpec

__all__ = [
    "hook_points",
    "project",
]


def hook_points(x: float, width: float, hanging: HangingSpec) -> tuple[float, float | None]:
    """Compute wall-absolute hook x coordinates for a frame.

    Args:
        x: Frame left edge.
        width: Frame width.
        hanging: Hanging hardware (single or dual hooks).

    Returns:
        ``(hook_x, hook_x2)``. For a single hook ``hook_x`` is the frame's
        centre and ``hook_x2`` is None. For dual hooks they are the left and
        right hooks, each ``hook_inset`` from the nearest vertical edge.
    """
    if hanging.type is HangingType.DUAL:
        return x + hanging.hook_inset, x + width - hanging.hook_inset
    return x + width / 2, None


def project(placement: Placement, wall: WallSpec) -> FramePosition:
    """Project a placement onto wall measurements.

    ``from_left`` is measured to the left hook and ``from_right`` to the
    right hook (the only hook for single hanging), so for dual hanging
    ``from_left + hook_gap + from_right == wall.width``.
    """
    hook_gap = None
    if placement.hook_x2 is not None:
        hook_gap = placement.hook_x2 - placement.hook_x
    rightmost_hook = placement.hook_x2 if placement.hook_x2 is not None else placement.hook_x

    return FramePosition(
        id=placement.id,
        name=placement.name,
        x=placement.x,
        y=placement.y,
        width=placement.width,
        height=placement.height,
        hanging_offset=placement.hanging_offset,
        hook_x=placement.hook_x,
        hook_y=placement.hook_y,
        hook_x2=placement.hook_x2,
        hook_gap=hook_gap,
        from_left=placement.hook_x,
        from_right=wall.width - rightmost_hook,
        from_floor=wall.height - placement.hook_y,
        from_ceiling=placement.hook_y,
        from_top=placement.hook_y,
        row=placement.row,
        col=placement.col,
        authority=placement.authority,
        is_out_of_bounds=not wall.contains(placement.rect),
    )
