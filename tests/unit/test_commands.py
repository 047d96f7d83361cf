"""Unit tests for ComputeLayoutCommand."""

import pytest

from gallerywall.application import ComputeLayoutCommand, LayoutOutput
from gallerywall.domain import (
    CalculatorState,
    FrameSpec,
    FreeformLayout,
    HangingSpec,
    HangingType,
    LayoutType,
    RegularLayout,
    Unit,
    WallSpec,
)


class TestComputeLayoutCommand:
    """Tests for computing layouts with errors and warnings."""

    def test_default_state(self) -> None:
        result = ComputeLayoutCommand().execute(CalculatorState())
        assert isinstance(result, LayoutOutput)
        assert result.is_valid
        assert len(result.positions) == 3
        assert result.warnings == []
        assert result.unit is Unit.INCHES

    def test_unit_string(self) -> None:
        result = ComputeLayoutCommand().execute(CalculatorState(), "cm")
        assert result.unit is Unit.CENTIMETERS

    def test_wall_without_area(self) -> None:
        state = CalculatorState(wall=WallSpec(0.0, 96.0))
        result = ComputeLayoutCommand().execute(state)
        assert not result.is_valid
        assert result.errors == ["Wall width must be positive"]
        assert result.positions == ()

    @pytest.mark.parametrize("width", [float("nan"), float("inf")])
    def test_wall_width_not_finite(self, width: float) -> None:
        state = CalculatorState(wall=WallSpec(width, 96.0))
        result = ComputeLayoutCommand().execute(state)
        assert result.errors == ["Wall width must be positive"]
        assert result.positions == ()

    def test_wall_height_not_finite(self) -> None:
        state = CalculatorState(wall=WallSpec(120.0, float("nan")))
        result = ComputeLayoutCommand().execute(state)
        assert result.errors == ["Wall height must be positive"]

    def test_off_wall_warning(self) -> None:
        state = CalculatorState(
            layout=RegularLayout(frame_count=10, frame=FrameSpec(20.0, 20.0, 2.0)),
        )
        result = ComputeLayoutCommand().execute(state)
        assert result.is_valid
        assert "Frame 1 extends beyond the wall" in result.warnings
        assert result.out_of_bounds[0].name == "Frame 1"
        assert len(result.out_of_bounds) < len(result.positions)

    def test_grid_capacity_warning(self) -> None:
        state = CalculatorState(
            layout=RegularLayout(
                kind=LayoutType.GRID, frame_count=6, grid_rows=2, grid_cols=2
            ),
        )
        result = ComputeLayoutCommand().execute(state)
        assert "Grid holds 4 of 6 frames" in result.warnings

    def test_dual_hooks_too_wide_for_frame(self) -> None:
        state = CalculatorState(
            hanging=HangingSpec(type=HangingType.DUAL, hook_inset=3.0),
            layout=RegularLayout(frame=FrameSpec(5.0, 8.0, 1.0)),
        )
        result = ComputeLayoutCommand().execute(state)
        assert any("too narrow for dual hooks" in w for w in result.warnings)

    def test_hanging_offset_outside_frame(self) -> None:
        state = CalculatorState(layout=RegularLayout(frame=FrameSpec(12.0, 12.0, 14.0)))
        result = ComputeLayoutCommand().execute(state)
        assert "Frame 1 hanging offset is outside the frame" in result.warnings

    def test_empty_gallery_warning(self) -> None:
        state = CalculatorState(layout=FreeformLayout())
        result = ComputeLayoutCommand().execute(state)
        assert result.warnings == ["Gallery layout has no frames"]
