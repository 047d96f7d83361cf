"""Unit tests for hook geometry and measurement projection."""

from gallerywall.domain import (
    CalculatorState,
    FreeformLayout,
    HangingSpec,
    HangingType,
    Placement,
    PlacementAuthority,
    WallSpec,
    calculate_layout_positions,
)
from gallerywall.domain.services import hook_points, project


class TestHookPoints:
    """Tests for hook_points."""

    def test_single_hook_centred(self) -> None:
        assert hook_points(10.0, 20.0, HangingSpec()) == (20.0, None)

    def test_dual_hooks_inset(self) -> None:
        hanging = HangingSpec(type=HangingType.DUAL, hook_inset=3.0)
        assert hook_points(10.0, 20.0, hanging) == (13.0, 27.0)


class TestProject:
    """Tests for projecting a placement onto wall measurements."""

    wall = WallSpec(100.0, 50.0)

    def _placement(self, x: float = 10.0, hook_x2: float | None = None) -> Placement:
        return Placement(
            id=0,
            name="Frame 1",
            x=x,
            y=5.0,
            width=20.0,
            height=10.0,
            hanging_offset=2.0,
            hook_x=x + 10.0,
            hook_y=7.0,
            hook_x2=hook_x2,
        )

    def test_single_hook(self) -> None:
        position = project(self._placement(), self.wall)
        assert position.from_left == 20.0
        assert position.from_right == 80.0
        assert position.from_floor == 43.0
        assert position.from_ceiling == 7.0
        assert position.from_top == position.from_ceiling
        assert position.hook_gap is None
        assert not position.is_out_of_bounds

    def test_dual_hooks_measure_to_outer_hooks(self) -> None:
        placement = Placement(
            id=0,
            name="Frame 1",
            x=10.0,
            y=5.0,
            width=20.0,
            height=10.0,
            hanging_offset=2.0,
            hook_x=13.0,
            hook_y=7.0,
            hook_x2=27.0,
        )
        position = project(placement, self.wall)
        assert position.from_left == 13.0
        assert position.from_right == 73.0
        assert position.hook_gap == 14.0

    def test_off_wall_flagged(self) -> None:
        assert project(self._placement(x=-5.0), self.wall).is_out_of_bounds

    def test_touching_edges_is_on_wall(self) -> None:
        assert not project(self._placement(x=80.0), self.wall).is_out_of_bounds


class TestFreeformPositions:
    """Tests for positions of stored gallery frames."""

    def test_positions_follow_stored_frames(self, gallery_state: CalculatorState) -> None:
        positions = calculate_layout_positions(gallery_state)
        assert [p.x for p in positions] == [10.0, 30.0, 50.0]
        assert all(p.authority is PlacementAuthority.STORED for p in positions)
        assert positions[0].hook_y == 12.0
        assert positions[0].row is None

    def test_dual_hooks_on_gallery_frames(self, gallery_state: CalculatorState) -> None:
        state = CalculatorState(
            wall=gallery_state.wall,
            hanging=HangingSpec(type=HangingType.DUAL, hook_inset=2.0),
            layout=gallery_state.layout,
        )
        position = calculate_layout_positions(state)[0]
        assert (position.hook_x, position.hook_x2) == (12.0, 18.0)

    def test_empty_gallery(self) -> None:
        state = CalculatorState(layout=FreeformLayout())
        assert calculate_layout_positions(state) == ()
