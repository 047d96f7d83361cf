"""Anchor resolution: turning an anchor reference into a block origin.

Coordinates are wall coordinates with the origin at the top-left corner of
the wall and y growing downward, so a floor offset is measured up from
``wall.height``.
"""

from __future__ import annotations

import logging

from ..value_objects import (
    AnchorSpec,
    FurnitureAlignment,
    FurnitureSpec,
    FurnitureVerticalAnchor,
    HorizontalAnchor,
    Rect,
    VerticalAnchor,
    VerticalTarget,
    WallSpec,
)

logger = logging.getLogger(__name__)

__all__ = [
    "furniture_rect",
    "resolve_horizontal",
    "resolve_vertical",
    "resolve_block_x",
    "resolve_block_y",
    "resolve_hook_block_y",
]


def resolve_horizontal(
    container_start: float,
    container_size: float,
    block_size: float,
    anchor: HorizontalAnchor | str,
    offset: float,
) -> float:
    """Resolve the left edge of a block inside a horizontal interval.

    ``left`` measures ``offset`` from the interval's left edge, ``right``
    from its right edge, and ``center`` shifts the centred block by
    ``offset``.
    """
    anchor = HorizontalAnchor(anchor)
    if anchor is HorizontalAnchor.LEFT:
        return container_start + offset
    if anchor is HorizontalAnchor.RIGHT:
        return container_start + container_size - block_size - offset
    return container_start + (container_size - block_size) / 2 + offset


def resolve_vertical(
    wall_height: float,
    block_size: float,
    anchor: VerticalAnchor | str,
    offset: float,
) -> float:
    """Resolve the top edge of a block for a floor, ceiling or center anchor.

    Furniture anchors need the furniture rectangle (see resolve_block_y);
    here they are measured from the floor.
    """
    anchor = VerticalAnchor(anchor)
    if anchor is VerticalAnchor.CEILING:
        return offset
    if anchor is VerticalAnchor.CENTER:
        return (wall_height - block_size) / 2 + offset
    return wall_height - block_size - offset


def furniture_rect(wall: WallSpec, furniture: FurnitureSpec) -> Rect:
    """Place a furniture piece on the wall. Furniture stands on the floor."""
    x = resolve_horizontal(
        0.0, wall.width, furniture.width, furniture.anchor, furniture.offset
    )
    return Rect(
        x=x,
        y=wall.height - furniture.height,
        width=furniture.width,
        height=furniture.height,
    )


def resolve_block_x(
    wall: WallSpec,
    block_width: float,
    anchor: AnchorSpec,
    furniture: FurnitureSpec | None = None,
) -> float:
    """Resolve the left edge of a block of known width.

    With a furniture anchor the block is placed relative to the furniture:
    recentred over it (CENTER, and SPAN when called for a fixed block), or
    placed by the stored horizontal anchor inside the furniture's span
    (ANCHOR).
    """
    if anchor.vertical is VerticalAnchor.FURNITURE and furniture is not None:
        rect = furniture_rect(wall, furniture)
        if furniture.alignment is FurnitureAlignment.ANCHOR:
            return resolve_horizontal(
                rect.x,
                rect.width,
                block_width,
                anchor.horizontal,
                anchor.horizontal_offset,
            )
        return rect.center_x - block_width / 2

    return resolve_horizontal(
        0.0, wall.width, block_width, anchor.horizontal, anchor.horizontal_offset
    )


def resolve_block_y(
    wall: WallSpec,
    block_height: float,
    anchor: AnchorSpec,
    furniture: FurnitureSpec | None = None,
) -> float:
    """Resolve the top edge of a block of known height.

    A furniture anchor without a furniture piece falls back to the floor
    rule, measuring from the floor.
    """
    if anchor.vertical is not VerticalAnchor.FURNITURE:
        return resolve_vertical(
            wall.height, block_height, anchor.vertical, anchor.vertical_offset
        )

    if furniture is None:
        logger.debug("Furniture anchor without furniture, using floor rule")
        return resolve_vertical(
            wall.height, block_height, anchor.vertical, anchor.vertical_offset
        )

    furniture_top = wall.height - furniture.height
    if furniture.vertical is FurnitureVerticalAnchor.CEILING:
        return anchor.vertical_offset
    if furniture.vertical is FurnitureVerticalAnchor.CENTER:
        return (furniture_top - block_height) / 2
    return furniture_top - anchor.vertical_offset - block_height


def resolve_hook_block_y(
    wall: WallSpec,
    block_height: float,
    hook_drop: float,
    hook_rise: float,
    anchor: AnchorSpec,
    furniture: FurnitureSpec | None = None,
) -> float:
    """Resolve the top edge of a block whose hook lines are known.

    With a HOOK target, a floor offset is measured to the lowest hook line
    and a ceiling offset to the highest one. Every other case is measured to
    the block's edges as in resolve_block_y.

    Args:
        wall: Wall the block hangs on.
        block_height: Block height from its top edge to its bottom edge.
        hook_drop: Block top edge down to the highest hook line.
        hook_rise: Lowest hook line down to the block's bottom edge.
        anchor: Where the block is anchored on the wall.
        furniture: Furniture piece for furniture anchors.
    """
    if anchor.vertical_target is VerticalTarget.HOOK:
        if anchor.vertical is VerticalAnchor.CEILING:
            return anchor.vertical_offset - hook_drop
        if anchor.vertical is VerticalAnchor.FLOOR:
            return wall.height - anchor.vertical_offset - (block_height - hook_rise)
    return resolve_block_y(wall, block_height, anchor, furniture)
