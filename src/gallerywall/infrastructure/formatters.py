"""Output formatters and exporters for gallery wall layouts."""

from __future__ import annotations

import json
import math
from typing import Any

from gallerywall.application.dtos import LayoutOutput
from gallerywall.domain import (
    FramePosition,
    Unit,
    VerticalAnchor,
    format_fractional_inches,
    format_measurement,
    format_short,
    to_display_unit,
)
from gallerywall.domain.services import furniture_rect


def _length(value: float, unit: Unit, fractional: bool = False) -> str:
    """Format an inch value in the display unit."""
    if fractional and unit is Unit.INCHES:
        return format_fractional_inches(value)
    return format_measurement(to_display_unit(value, unit), unit)


class MeasurementTableFormatter:
    """Formats the per-frame wall measurements as a table."""

    def format(self, output: LayoutOutput) -> str:
        """Format positions as a table.

        A Hook gap column is added when any frame hangs on two hooks.
        """
        if not output.positions:
            return "No frames to hang."

        unit = output.unit
        has_gap = any(p.hook_gap is not None for p in output.positions)

        header = (
            f"{'Frame':<12} {'Size':<16} {'From left':<12} "
            + (f"{'Hook gap':<10} " if has_gap else "")
            + f"{'From floor':<12} {'From ceiling':<13}"
        )
        lines = [
            "MEASUREMENTS",
            "=" * len(header),
            header,
            "-" * len(header),
        ]

        for position in output.positions:
            size = (
                f"{format_short(to_display_unit(position.width, unit), unit)} x "
                f"{format_short(to_display_unit(position.height, unit), unit)}"
            )
            gap = ""
            if has_gap:
                gap_text = (
                    _length(position.hook_gap, unit) if position.hook_gap is not None else "-"
                )
                gap = f"{gap_text:<10} "
            line = (
                f"{position.name:<12} {size:<16} {_length(position.from_left, unit):<12} "
                f"{gap}{_length(position.from_floor, unit):<12} "
                f"{_length(position.from_ceiling, unit):<13}"
            )
            if position.is_out_of_bounds:
                line += " (off wall)"
            lines.append(line.rstrip())

        lines.append("-" * len(header))
        state = output.state
        lines.append(
            f"Wall: {_length(state.wall.width, unit)} W x "
            f"{_length(state.wall.height, unit)} H, {len(output.positions)} frame(s)"
        )
        return "\n".join(lines)


class HangingInstructionsFormatter:
    """Formats step-by-step hanging instructions.

    Measurements in inches can be rendered as tape-measure fractions
    (``12 3/8"``) instead of decimals.
    """

    def __init__(self, fractional: bool = False) -> None:
        self._fractional = fractional

    def format(self, output: LayoutOutput) -> str:
        """Format hanging instructions for every frame."""
        if not output.positions:
            return "No frames to hang."

        unit = output.unit
        first = output.positions[0]
        from_ceiling = output.state.anchor.vertical is VerticalAnchor.CEILING

        def fmt(value: float) -> str:
            return _length(value, unit, self._fractional)

        lines = ["HOW TO HANG", "=" * 60, ""]
        steps = [
            f"Measure from the left edge of your wall {fmt(first.from_left)} "
            "and make a small mark.",
        ]
        if from_ceiling:
            steps.append(
                f"Measure down from the ceiling {fmt(first.from_ceiling)} at that "
                f"mark. Or measure up from the floor {fmt(first.from_floor)}."
            )
        else:
            steps.append(f"Measure up from the floor {fmt(first.from_floor)} at that mark.")
        if first.hook_gap is not None:
            steps.append(
                f"Mark the second hook {fmt(first.hook_gap)} to the right, "
                "at the same height."
            )
        steps.append("Install your hook or nail at this intersection point.")
        steps.append("Hang your frame by the wire/bracket and adjust until level.")
        remaining = len(output.positions) - 1
        if remaining:
            plural = "s" if remaining > 1 else ""
            steps.append(
                f"Repeat for the remaining {remaining} frame{plural} "
                "using the measurements below."
            )

        for number, step in enumerate(steps, start=1):
            lines.append(f"{number}. {step}")

        if remaining:
            lines.append("")
            lines.append("Hook marks:")
            for position in output.positions:
                vertical = (
                    f"{fmt(position.from_ceiling)} down from the ceiling"
                    if from_ceiling
                    else f"{fmt(position.from_floor)} up from the floor"
                )
                mark = f"  {position.name}: {fmt(position.from_left)} from left, {vertical}"
                if position.hook_gap is not None:
                    mark += f", second hook {fmt(position.hook_gap)} to the right"
                lines.append(mark)

        lines.append("")
        lines.append(
            "Tip: Use a level to ensure your marks are straight. For multiple "
            "frames, a laser level can help maintain alignment across the wall."
        )
        if output.warnings:
            lines.append("")
            lines.append("Warnings:")
            for warning in output.warnings:
                lines.append(f"  - {warning}")
        return "\n".join(lines)


class LayoutDiagramFormatter:
    """Formats ASCII diagrams of the wall with frames and hooks.

    Frames are drawn as boxes, hooks as ``o`` and furniture as ``=``.
    Anything outside the wall is clipped.
    """

    # Terminal cells are roughly twice as tall as they are wide.
    CELL_ASPECT = 0.5

    def format(self, output: LayoutOutput, width: int = 60) -> str:
        """Generate an ASCII diagram of the wall."""
        state = output.state
        wall = state.wall
        scale = (width - 1) / wall.width
        height = max(3, math.ceil(wall.height * scale * self.CELL_ASPECT) + 1)
        y_scale = (height - 1) / wall.height

        grid = [[" " for _ in range(width)] for _ in range(height)]

        def col(x: float) -> int:
            return round(x * scale)

        def row(y: float) -> int:
            return round(y * y_scale)

        if state.furniture is not None:
            rect = furniture_rect(wall, state.furniture)
            for y in range(row(rect.y), row(rect.bottom) + 1):
                for x in range(col(rect.x), col(rect.right) + 1):
                    self._plot(grid, x, y, "=")

        for position in output.positions:
            self._draw_box(
                grid,
                col(position.x),
                row(position.y),
                col(position.x + position.width),
                row(position.y + position.height),
            )
        for position in output.positions:
            hook_row = row(position.hook_y)
            self._plot(grid, col(position.hook_x), hook_row, "o")
            if position.hook_x2 is not None:
                self._plot(grid, col(position.hook_x2), hook_row, "o")

        self._draw_box(grid, 0, 0, width - 1, height - 1)

        unit = output.unit
        lines = ["WALL DIAGRAM", "=" * width, ""]
        lines.extend("".join(cells) for cells in grid)
        lines.append("")
        lines.append(
            f"Wall: {_length(wall.width, unit)} W x {_length(wall.height, unit)} H"
        )
        lines.append(f"Frames: {len(output.positions)}")
        return "\n".join(lines)

    def _plot(self, grid: list[list[str]], x: int, y: int, char: str) -> None:
        if 0 <= y < len(grid) and 0 <= x < len(grid[0]):
            grid[y][x] = char

    def _draw_box(
        self, grid: list[list[str]], x1: int, y1: int, x2: int, y2: int
    ) -> None:
        """Draw a box on the grid, clipping to its bounds."""
        for x in range(x1 + 1, x2):
            self._plot(grid, x, y1, "-")
            self._plot(grid, x, y2, "-")
        for y in range(y1 + 1, y2):
            self._plot(grid, x1, y, "|")
            self._plot(grid, x2, y, "|")
        for x, y in ((x1, y1), (x2, y1), (x1, y2), (x2, y2)):
            self._plot(grid, x, y, "+")


class JsonExporter:
    """Exports layout data as JSON.

    Lengths are converted to the output's display unit and rounded to
    three decimals.
    """

    def export(self, output: LayoutOutput) -> str:
        """Export layout output as JSON string."""
        return json.dumps(self.to_dict(output), indent=2)

    def to_dict(self, output: LayoutOutput) -> dict[str, Any]:
        if not output.is_valid:
            return {"errors": output.errors}

        unit = output.unit
        state = output.state
        return {
            "unit": unit.value,
            "wall": {
                "width": self._convert(state.wall.width, unit),
                "height": self._convert(state.wall.height, unit),
            },
            "layout_type": state.layout_type.value,
            "hanging_type": state.hanging.type.value,
            "positions": [self._format_position(p, unit) for p in output.positions],
            "warnings": list(output.warnings),
        }

    def _convert(self, value: float | None, unit: Unit) -> float | None:
        if value is None:
            return None
        return round(to_display_unit(value, unit), 3)

    def _format_position(self, position: FramePosition, unit: Unit) -> dict[str, Any]:
        """Format a single frame position for JSON output."""
        lengths = (
            "x",
            "y",
            "width",
            "height",
            "hanging_offset",
            "hook_x",
            "hook_x2",
            "hook_y",
            "hook_gap",
            "from_left",
            "from_right",
            "from_floor",
            "from_ceiling",
        )
        data: dict[str, Any] = {"id": position.id, "name": position.name}
        data.update({name: self._convert(getattr(position, name), unit) for name in lengths})
        data["row"] = position.row
        data["col"] = position.col
        data["authority"] = position.authority.value
        data["is_out_of_bounds"] = position.is_out_of_bounds
        return data
