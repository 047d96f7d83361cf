"""Unit tests for freeform gallery editing.

Every operation returns a new state, so these tests check the returned
state and that operations on unknown ids or non-gallery layouts are no-ops.
"""

from dataclasses import replace

import pytest

from gallerywall.domain import (
    CalculatorState,
    FreeformLayout,
    GalleryVAlign,
)
from gallerywall.domain.services import (
    add_frame,
    apply_template,
    arrange_row,
    begin_drag,
    cancel_drag,
    clear_selection,
    end_drag,
    move_frames,
    remove_frame,
    select,
    update_drag,
    update_frame,
)


def _positions(state: CalculatorState) -> dict[int, tuple[float, float]]:
    return {f.id: (f.x, f.y) for f in state.layout.frames}


class TestSelection:
    """Tests for selecting frames."""

    def test_select_replaces_selection(self, gallery_state: CalculatorState) -> None:
        state = select(select(gallery_state, 0), 1)
        assert state.layout.selection.primary == 1
        assert state.layout.selection.selected == {1}

    def test_additive_select_toggles(self, gallery_state: CalculatorState) -> None:
        state = select(gallery_state, 1)
        state = select(state, 2, additive=True)
        assert state.layout.selection.selected == {1, 2}
        assert state.layout.selection.primary == 2

        state = select(state, 1, additive=True)
        assert state.layout.selection.selected == {2}

    def test_unknown_id_is_noop(self, gallery_state: CalculatorState) -> None:
        assert select(gallery_state, 42) is gallery_state

    def test_regular_layout_is_noop(self) -> None:
        state = CalculatorState()
        assert select(state, 0) is state

    def test_clear_selection(self, gallery_state: CalculatorState) -> None:
        state = clear_selection(select(gallery_state, 1))
        assert state.layout.selection.primary is None
        assert state.layout.selection.selected == frozenset()

    def test_input_state_unchanged(self, gallery_state: CalculatorState) -> None:
        select(gallery_state, 1)
        assert gallery_state.layout.selection.primary is None


class TestDrag:
    """Tests for drag gestures."""

    def test_single_frame_follows_pointer(self, gallery_state: CalculatorState) -> None:
        state = begin_drag(gallery_state, 0, 15.0, 15.0)
        state = update_drag(state, 20.0, 25.0)
        assert _positions(state)[0] == (15.0, 20.0)
        assert _positions(state)[1] == (30.0, 10.0)

    def test_updates_do_not_accumulate(self, gallery_state: CalculatorState) -> None:
        """Each update is measured from the gesture start."""
        state = begin_drag(gallery_state, 0, 15.0, 15.0)
        state = update_drag(state, 20.0, 25.0)
        state = update_drag(state, 16.0, 16.0)
        assert _positions(state)[0] == (11.0, 11.0)

    def test_end_drag_keeps_position(self, gallery_state: CalculatorState) -> None:
        state = begin_drag(gallery_state, 0, 0.0, 0.0)
        state = end_drag(update_drag(state, 5.0, 5.0))
        assert state.layout.drag is None
        assert _positions(state)[0] == (15.0, 15.0)

    def test_cancel_drag_restores_origins(self, gallery_state: CalculatorState) -> None:
        state = begin_drag(gallery_state, 0, 0.0, 0.0)
        state = cancel_drag(update_drag(state, 5.0, 5.0))
        assert state.layout.drag is None
        assert _positions(state) == _positions(gallery_state)

    def test_selection_moves_as_group(self, gallery_state: CalculatorState) -> None:
        state = select(gallery_state, 0)
        state = select(state, 1, additive=True)
        state = begin_drag(state, 0, 0.0, 0.0)
        state = update_drag(state, 5.0, -3.0)

        positions = _positions(state)
        assert positions[0] == (15.0, 7.0)
        assert positions[1] == (35.0, 7.0)
        assert positions[2] == (50.0, 10.0)

    def test_frame_outside_selection_moves_alone(
        self, gallery_state: CalculatorState
    ) -> None:
        state = select(select(gallery_state, 0), 1, additive=True)
        state = update_drag(begin_drag(state, 2, 0.0, 0.0), 4.0, 0.0)
        positions = _positions(state)
        assert positions[2] == (54.0, 10.0)
        assert positions[0] == (10.0, 10.0)

    def test_second_begin_cancels_first(self, gallery_state: CalculatorState) -> None:
        state = begin_drag(gallery_state, 0, 0.0, 0.0)
        state = update_drag(state, 5.0, 5.0)
        state = begin_drag(state, 1, 0.0, 0.0)
        assert _positions(state)[0] == (10.0, 10.0)
        assert state.layout.drag.frame_id == 1

    def test_update_without_drag_is_noop(self, gallery_state: CalculatorState) -> None:
        assert update_drag(gallery_state, 5.0, 5.0) is gallery_state
        assert end_drag(gallery_state) is gallery_state
        assert cancel_drag(gallery_state) is gallery_state

    def test_begin_drag_unknown_id_is_noop(self, gallery_state: CalculatorState) -> None:
        assert begin_drag(gallery_state, 9, 0.0, 0.0) is gallery_state


class TestSnappingDrag:
    """Tests for drags with snapping enabled."""

    @pytest.fixture
    def snapping_state(self, gallery_state: CalculatorState) -> CalculatorState:
        layout = replace(
            gallery_state.layout,
            snap_enabled=True,
            gallery_spacing=2.0,
            snap_tolerance=1.0,
        )
        return gallery_state.with_layout(layout)

    def test_lead_frame_snaps_to_spacing(self, snapping_state: CalculatorState) -> None:
        """Dropped 0.4in short of a 2in gap, the frame snaps onto it."""
        state = begin_drag(snapping_state, 0, 0.0, 0.0)
        state = update_drag(state, 9.6, 0.0)
        x, y = _positions(state)[0]
        assert x == pytest.approx(20.0)
        assert y == pytest.approx(10.0)

    def test_group_moves_rigidly(self, snapping_state: CalculatorState) -> None:
        """Only the lead frame snaps; the group keeps its shape."""
        state = select(select(snapping_state, 0), 2, additive=True)
        state = begin_drag(state, 0, 0.0, 0.0)
        state = update_drag(state, 9.6, 0.0)
        positions = _positions(state)
        assert positions[0][0] == pytest.approx(20.0)
        assert positions[2][0] - positions[0][0] == pytest.approx(40.0)
        assert positions[1] == (30.0, 10.0)

    @pytest.mark.parametrize("pointer_x", [-20.4, -19.6])
    def test_aligns_left_edges_from_either_side(
        self, snapping_state: CalculatorState, pointer_x: float
    ) -> None:
        """Frame 2 dropped just beside frame 1's left edge lines up with it."""
        state = begin_drag(snapping_state, 1, 0.0, 0.0)
        state = update_drag(state, pointer_x, 20.0)
        x, y = _positions(state)[1]
        assert x == pytest.approx(10.0)
        assert y == pytest.approx(30.0)

    def test_centre_snaps_to_wall_centre(self, snapping_state: CalculatorState) -> None:
        """Frame 3 dropped 0.4in off centre is centred on the 120in wall."""
        state = begin_drag(snapping_state, 2, 0.0, 0.0)
        state = update_drag(state, 5.4, 20.0)
        assert _positions(state)[2][0] == pytest.approx(55.0)


class TestFrameEditing:
    """Tests for adding, removing, updating and moving frames."""

    def test_add_frame_uses_next_id(self, gallery_state: CalculatorState) -> None:
        state = add_frame(gallery_state)
        frame = state.layout.frames[-1]
        assert frame.id == 3
        assert frame.name == "Frame 4"
        assert (frame.width, frame.height) == (12.0, 16.0)
        assert (frame.x, frame.y) == (35.0, 35.0)

    def test_add_frame_to_empty_gallery(self) -> None:
        state = add_frame(CalculatorState(layout=FreeformLayout()), width=8.0, height=10.0)
        (frame,) = state.layout.frames
        assert frame.id == 0
        assert (frame.x, frame.y) == (20.0, 20.0)

    def test_add_frame_at_position(self, gallery_state: CalculatorState) -> None:
        state = add_frame(gallery_state, name="Mirror", x=70.0, y=12.0)
        frame = state.layout.frames[-1]
        assert frame.name == "Mirror"
        assert (frame.x, frame.y) == (70.0, 12.0)

    def test_remove_frame(self, gallery_state: CalculatorState) -> None:
        state = select(select(gallery_state, 0), 1, additive=True)
        state = remove_frame(state, 1)
        assert [f.id for f in state.layout.frames] == [0, 2]
        assert state.layout.selection.primary is None
        assert state.layout.selection.selected == {0}

    def test_ids_not_reused_after_removal(self, gallery_state: CalculatorState) -> None:
        state = add_frame(remove_frame(gallery_state, 0))
        assert state.layout.frames[-1].id == 3

    def test_remove_dragged_frame_ends_drag(self, gallery_state: CalculatorState) -> None:
        state = begin_drag(gallery_state, 1, 0.0, 0.0)
        state = remove_frame(state, 1)
        assert state.layout.drag is None

    def test_remove_unknown_is_noop(self, gallery_state: CalculatorState) -> None:
        assert remove_frame(gallery_state, 7) is gallery_state

    def test_update_frame(self, gallery_state: CalculatorState) -> None:
        state = update_frame(gallery_state, 0, width=20.0, name="Big")
        frame = state.layout.find(0)
        assert frame.width == 20.0
        assert frame.name == "Big"

    def test_update_frame_rejects_unknown_fields(
        self, gallery_state: CalculatorState
    ) -> None:
        with pytest.raises(ValueError, match="id"):
            update_frame(gallery_state, 0, id=5)

    def test_update_unknown_frame_is_noop(self, gallery_state: CalculatorState) -> None:
        assert update_frame(gallery_state, 9, width=5.0) is gallery_state

    def test_move_frames(self, gallery_state: CalculatorState) -> None:
        state = move_frames(gallery_state, [0, 2, 99], 5.0, -5.0)
        positions = _positions(state)
        assert positions[0] == (15.0, 5.0)
        assert positions[1] == (30.0, 10.0)
        assert positions[2] == (55.0, 5.0)

    def test_move_unknown_frames_is_noop(self, gallery_state: CalculatorState) -> None:
        assert move_frames(gallery_state, [99], 5.0, 5.0) is gallery_state


class TestArrangeRow:
    """Tests for arranging gallery frames in a row."""

    @pytest.fixture
    def mixed_state(self, gallery_state: CalculatorState) -> CalculatorState:
        return update_frame(gallery_state, 1, height=20.0)

    def test_top_aligned(self, mixed_state: CalculatorState) -> None:
        state = arrange_row(mixed_state, GalleryVAlign.TOP)
        positions = _positions(state)
        assert [positions[i][0] for i in range(3)] == [43.0, 55.0, 67.0]
        assert all(positions[i][1] == 37.0 for i in range(3))

    def test_centre_aligned_hooks_at_anchor(self, mixed_state: CalculatorState) -> None:
        """The lowest hook line sits at the floor offset."""
        state = arrange_row(mixed_state, "center")
        frames = state.layout.frames
        assert [f.y for f in frames] == [37.0, 32.0, 37.0]
        lowest_hook = max(f.y + f.hanging_offset for f in frames)
        assert state.wall.height - lowest_hook == 57.0

    def test_bottom_aligned(self, mixed_state: CalculatorState) -> None:
        state = arrange_row(mixed_state, GalleryVAlign.BOTTOM)
        bottoms = {f.y + f.height for f in state.layout.frames}
        assert len(bottoms) == 1

    def test_empty_gallery_is_noop(self) -> None:
        state = CalculatorState(layout=FreeformLayout())
        assert arrange_row(state) is state


class TestApplyTemplate:
    """Tests for replacing frames with a template."""

    def test_replaces_frames(self, gallery_state: CalculatorState) -> None:
        state = select(gallery_state, 0)
        state = apply_template(state, "salon-4")
        assert [f.id for f in state.layout.frames] == [0, 1, 2, 3]
        assert state.layout.selection.primary is None

    def test_unknown_template_is_noop(self, gallery_state: CalculatorState) -> None:
        assert apply_template(gallery_state, "mosaic") is gallery_state

    def test_regular_layout_is_noop(self) -> None:
        state = CalculatorState()
        assert apply_template(state, "triptych") is state
