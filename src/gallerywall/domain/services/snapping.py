"""Spacing-grid snapping for freeform frames.

Each axis is snapped independently. The moving frame's near and far edges
are compared against reference lines (wall edges, furniture edges and the
edges of frames that are not moving), rounded to the nearest multiple of
the gallery spacing measured from the closest reference, and accepted only
within the snapping tolerance. The frame's centre also snaps exactly onto
the wall's centre line.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence
from dataclasses import dataclass

from ..value_objects import Rect, WallSpec

logger = logging.getLogger(__name__)

__all__ = [
    "AxisReferences",
    "reference_lines",
    "snap_axis",
    "snap_rect",
]


@dataclass(frozen=True)
class AxisReferences:
    """Reference lines and settled frame starts along one axis.

    ``centre`` is the wall's centre line, matched against the frame's centre.
    """

    lines: tuple[float, ...]
    settled_starts: tuple[float, ...] = ()
    centre: float | None = None


def reference_lines(
    wall: WallSpec,
    settled: Sequence[Rect],
    furniture: Rect | None = None,
) -> tuple[AxisReferences, AxisReferences]:
    """Collect snapping references for the x and y axes.

    Args:
        wall: Wall whose edges are always references.
        settled: Rectangles of frames that are not moving.
        furniture: Optional furniture rectangle on the wall.

    Returns:
        ``(x_references, y_references)``.
    """
    xs = {0.0, wall.width}
    ys = {0.0, wall.height}
    obstacles = list(settled)
    if furniture is not None:
        obstacles.append(furniture)
    for rect in obstacles:
        xs.update((rect.x, rect.right))
        ys.update((rect.y, rect.bottom))

    return (
        AxisReferences(
            tuple(sorted(xs)), tuple(rect.x for rect in settled), wall.width / 2
        ),
        AxisReferences(
            tuple(sorted(ys)), tuple(rect.y for rect in settled), wall.height / 2
        ),
    )


def _round_to_spacing(edge: float, reference: float, spacing: float) -> float:
    """Round ``edge`` to ``reference + k * spacing`` for the nearest integer k.

    Halves round toward the reference's lower side so the result is
    deterministic.
    """
    if spacing <= 0:
        return reference
    k = math.ceil((edge - reference) / spacing - 0.5)
    return reference + k * spacing


def _keeps_order(start: float, candidate: float, settled_starts: Sequence[float]) -> bool:
    """True when moving from ``start`` to ``candidate`` crosses no settled start.

    Landing exactly on a settled start is alignment, not a crossing.
    """
    return all((start - other) * (candidate - other) >= 0 for other in settled_starts)


def snap_axis(
    start: float,
    size: float,
    references: AxisReferences,
    spacing: float,
    tolerance: float,
) -> float:
    """Snap one axis of a moving frame.

    Args:
        start: Proposed near-edge coordinate.
        size: Frame size along the axis.
        references: Reference lines for the axis.
        spacing: Gallery spacing used as the snapping grid.
        tolerance: Maximum distance an edge may move when snapping.

    Returns:
        The snapped near-edge coordinate, or ``start`` when no candidate
        qualifies. Ties prefer the smaller resulting coordinate.

    Example:
        >>> snap_axis(14.6, 10.0, AxisReferences((0.0, 12.0)), 2.0, 1.0)
        14.0
    """
    proposals: list[tuple[float, float]] = []
    if references.lines:
        for edge, shift in ((start, 0.0), (start + size, size)):
            nearest = min(references.lines, key=lambda line: (abs(edge - line), line))
            snapped = _round_to_spacing(edge, nearest, spacing)
            proposals.append((abs(snapped - edge), snapped - shift))
    if references.centre is not None:
        middle = start + size / 2
        proposals.append((abs(references.centre - middle), references.centre - size / 2))

    candidates = [
        (distance, candidate)
        for distance, candidate in proposals
        if distance <= tolerance
        and _keeps_order(start, candidate, references.settled_starts)
    ]

    if not candidates:
        return start
    return min(candidates)[1]


def snap_rect(
    rect: Rect,
    wall: WallSpec,
    settled: Sequence[Rect],
    spacing: float,
    tolerance: float,
    furniture: Rect | None = None,
) -> tuple[float, float]:
    """Snap a moving rectangle on both axes.

    Returns:
        The snapped ``(x, y)`` of the rectangle's top-left corner.
    """
    x_refs, y_refs = reference_lines(wall, settled, furniture)
    x = snap_axis(rect.x, rect.width, x_refs, spacing, tolerance)
    y = snap_axis(rect.y, rect.height, y_refs, spacing, tolerance)
    if (x, y) != (rect.x, rect.y):
        logger.debug(f"Snapped ({rect.x}, {rect.y}) to ({x}, {y})")
    return x, y
