"""Regular layout builder for grids and rows of identical frames.

Composes the distribution solver and the anchor resolver per axis to place
every frame, then attaches hook geometry from the hanging hardware.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

from ..entities import Placement
from ..state import CalculatorState, RegularLayout
from ..value_objects import (
    Distribution,
    FurnitureAlignment,
    LayoutType,
    VerticalAnchor,
)
from .anchor import furniture_rect, resolve_block_x, resolve_hook_block_y
from .distribution import distribute
from .measurement import hook_points

logger = logging.getLogger(__name__)

__all__ = [
    "GridShape",
    "RegularLayoutBuilder",
    "grid_shape",
]


@dataclass(frozen=True)
class GridShape:
    """Resolved arrangement of a regular layout.

    Attributes:
        rows: Rows actually occupied by frames.
        cols: Columns per row (the last row may be partially filled).
        count: Number of frames placed.
    """

    rows: int
    cols: int
    count: int


def grid_shape(layout: RegularLayout) -> GridShape:
    """Resolve rows and columns for a regular layout.

    A row layout puts every frame in one row. A grid uses the caller's
    rows x cols (capping the count at the grid's capacity), or a
    near-square shape when either dimension is missing.

    Example:
        >>> grid_shape(RegularLayout(kind=LayoutType.GRID, frame_count=7)).rows
        3
    """
    count = max(layout.frame_count, 0)
    if count == 0:
        return GridShape(rows=0, cols=0, count=0)

    if layout.kind is LayoutType.ROW:
        return GridShape(rows=1, cols=count, count=count)

    if layout.grid_rows and layout.grid_cols:
        count = min(count, layout.grid_rows * layout.grid_cols)
        cols = min(layout.grid_cols, count)
    elif layout.grid_cols:
        cols = min(layout.grid_cols, count)
    elif layout.grid_rows:
        cols = math.ceil(count / layout.grid_rows)
    else:
        cols = math.ceil(math.sqrt(count))

    return GridShape(rows=math.ceil(count / cols), cols=cols, count=count)


class RegularLayoutBuilder:
    """Builds placements for grid and row layouts."""

    def build(self, state: CalculatorState) -> list[Placement]:
        """Place every frame of a regular layout.

        Frames are ordered row-major (top to bottom, left to right) and the
        id is the 0-based sequence index.

        Args:
            state: Calculator state whose layout is a RegularLayout.

        Returns:
            Placements in row-major order.
        """
        layout = state.layout
        assert isinstance(layout, RegularLayout)

        shape = grid_shape(layout)
        if shape.count == 0:
            return []

        column_starts = self._column_starts(state, layout, shape)
        row_starts = self._row_starts(state, layout, shape)
        logger.debug(
            f"Regular layout {shape.rows}x{shape.cols} with {shape.count} frames"
        )

        frame = layout.frame
        placements: list[Placement] = []
        for index in range(shape.count):
            row, col = divmod(index, shape.cols)
            x = column_starts[col]
            y = row_starts[row]
            hook_x, hook_x2 = hook_points(x, frame.width, state.hanging)
            placements.append(
                Placement(
                    id=index,
                    name=f"Frame {index + 1}",
                    x=x,
                    y=y,
                    width=frame.width,
                    height=frame.height,
                    hanging_offset=frame.hanging_offset,
                    hook_x=hook_x,
                    hook_x2=hook_x2,
                    hook_y=y + frame.hanging_offset,
                    row=row,
                    col=col,
                )
            )
        return placements

    def _column_starts(
        self, state: CalculatorState, layout: RegularLayout, shape: GridShape
    ) -> tuple[float, ...]:
        """Absolute x of every column's left edge."""
        width = layout.frame.width
        furniture = state.furniture
        spans_furniture = (
            state.anchor.vertical is VerticalAnchor.FURNITURE
            and furniture is not None
            and furniture.alignment is FurnitureAlignment.SPAN
        )

        if spans_furniture and layout.h_distribution is not Distribution.FIXED:
            assert furniture is not None
            rect = furniture_rect(state.wall, furniture)
            result = distribute(
                rect.width, width, shape.cols, layout.h_spacing, layout.h_distribution
            )
            return tuple(rect.x + offset for offset in result.offsets)

        furniture_anchor = (
            state.anchor.vertical is VerticalAnchor.FURNITURE and furniture is not None
        )
        if layout.h_distribution is not Distribution.FIXED and not furniture_anchor:
            result = distribute(
                state.wall.width,
                width,
                shape.cols,
                layout.h_spacing,
                layout.h_distribution,
            )
            return result.offsets

        # Fixed spacing: the anchor places the block.
        result = distribute(0.0, width, shape.cols, layout.h_spacing, Distribution.FIXED)
        origin = resolve_block_x(
            state.wall, result.extent(width), state.anchor, furniture
        )
        return tuple(origin + offset for offset in result.offsets)

    def _row_starts(
        self, state: CalculatorState, layout: RegularLayout, shape: GridShape
    ) -> tuple[float, ...]:
        """Absolute y of every row's top edge."""
        frame = layout.frame
        if layout.v_distribution is not Distribution.FIXED:
            result = distribute(
                state.wall.height,
                frame.height,
                shape.rows,
                layout.v_spacing,
                layout.v_distribution,
            )
            return result.offsets

        result = distribute(
            0.0, frame.height, shape.rows, layout.v_spacing, Distribution.FIXED
        )
        origin = resolve_hook_block_y(
            state.wall,
            result.extent(frame.height),
            hook_drop=frame.hanging_offset,
            hook_rise=frame.height - frame.hanging_offset,
            anchor=state.anchor,
            furniture=state.furniture,
        )
        return tuple(origin + offset for offset in result.offsets)
