"""Application commands (use cases) for gallery wall layouts."""

from __future__ import annotations

import logging
import math

from gallerywall.domain import (
    CalculatorState,
    FramePosition,
    FreeformLayout,
    HangingType,
    RegularLayout,
    Unit,
    calculate_layout_positions,
)

from .dtos import LayoutOutput

logger = logging.getLogger(__name__)


class ComputeLayoutCommand:
    """Command to compute frame positions and measurements for a state.

    The engine computes through degenerate geometry, so the command only
    refuses states it cannot place at all (a wall without a finite area) and reports
    everything else as warnings.
    """

    def execute(
        self, state: CalculatorState, unit: Unit | str = Unit.INCHES
    ) -> LayoutOutput:
        """Execute the layout computation.

        Args:
            state: Calculator state to lay out.
            unit: Display unit carried through to formatters.

        Returns:
            LayoutOutput with positions, warnings and errors.
        """
        unit = Unit(unit)
        errors = self._validate(state)
        if errors:
            return LayoutOutput(state=state, unit=unit, errors=errors)

        positions = calculate_layout_positions(state)
        warnings = self._warnings(state, positions)
        for warning in warnings:
            logger.debug(f"Layout warning: {warning}")

        return LayoutOutput(
            state=state, positions=positions, unit=unit, warnings=warnings
        )

    def _validate(self, state: CalculatorState) -> list[str]:
        errors: list[str] = []
        if not (math.isfinite(state.wall.width) and state.wall.width > 0):
            errors.append("Wall width must be positive")
        if not (math.isfinite(state.wall.height) and state.wall.height > 0):
            errors.append("Wall height must be positive")
        return errors

    def _warnings(
        self, state: CalculatorState, positions: tuple[FramePosition, ...]
    ) -> list[str]:
        warnings: list[str] = []

        for position in positions:
            if position.is_out_of_bounds:
                warnings.append(f"{position.name} extends beyond the wall")
            if not 0 <= position.hanging_offset <= position.height:
                warnings.append(
                    f"{position.name} hanging offset is outside the frame"
                )
            if (
                state.hanging.type is HangingType.DUAL
                and 2 * state.hanging.hook_inset >= position.width
            ):
                warnings.append(
                    f"{position.name} is too narrow for dual hooks "
                    f"inset {state.hanging.hook_inset:g} from each edge"
                )

        layout = state.layout
        if isinstance(layout, RegularLayout) and len(positions) < layout.frame_count:
            warnings.append(
                f"Grid holds {len(positions)} of {layout.frame_count} frames"
            )
        if isinstance(layout, FreeformLayout) and not layout.frames:
            warnings.append("Gallery layout has no frames")

        return warnings
