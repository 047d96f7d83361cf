"""Data Transfer Objects for the application layer."""

from __future__ import annotations

from dataclasses import dataclass, field

from gallerywall.domain import CalculatorState, FramePosition, Unit


@dataclass
class LayoutOutput:
    """Output DTO containing the computed layout.

    Attributes:
        state: The calculator state the layout was computed from.
        positions: Frame positions in layout order.
        unit: Display unit for formatters.
        warnings: Non-fatal problems, such as frames hanging off the wall.
        errors: Error messages if the layout could not be computed.
    """

    state: CalculatorState
    positions: tuple[FramePosition, ...] = ()
    unit: Unit = Unit.INCHES
    warnings: list[str] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """Check if the layout was computed successfully."""
        return len(self.errors) == 0

    @property
    def out_of_bounds(self) -> list[FramePosition]:
        return [p for p in self.positions if p.is_out_of_bounds]
