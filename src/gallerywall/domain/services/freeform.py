"""Freeform (gallery) editing operations.

Every operation takes a CalculatorState and returns a new one. Operations
on a state whose layout is not freeform, or that reference an unknown frame
id, return the state unchanged.

A drag gesture is ``begin_drag`` followed by any number of ``update_drag``
calls and then ``end_drag`` (or ``cancel_drag``). Each update applies the
total pointer delta since the gesture started to the frames' gesture-start
origins, so repeated updates never accumulate error.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import replace

from ..entities import DragState, GalleryFrame, SelectionState
from ..state import CalculatorState, FreeformLayout
from ..value_objects import GalleryVAlign, Rect
from .anchor import furniture_rect, resolve_block_x, resolve_hook_block_y
from .gallery_templates import frames_from_template, get_template
from .snapping import snap_rect

logger = logging.getLogger(__name__)

__all__ = [
    "add_frame",
    "apply_template",
    "arrange_row",
    "begin_drag",
    "cancel_drag",
    "clear_selection",
    "end_drag",
    "move_frames",
    "remove_frame",
    "select",
    "update_drag",
    "update_frame",
]

# Fields update_frame may change.
EDITABLE_FIELDS = frozenset({"name", "width", "height", "hanging_offset", "x", "y"})


def _freeform(state: CalculatorState) -> FreeformLayout | None:
    if isinstance(state.layout, FreeformLayout):
        return state.layout
    return None


def _with(state: CalculatorState, layout: FreeformLayout, **changes) -> CalculatorState:
    return state.with_layout(replace(layout, **changes))


def _place(
    frames: tuple[GalleryFrame, ...], positions: dict[int, tuple[float, float]]
) -> tuple[GalleryFrame, ...]:
    """Move the frames named in ``positions``, keeping order."""
    return tuple(
        frame.moved_to(*positions[frame.id]) if frame.id in positions else frame
        for frame in frames
    )


def select(state: CalculatorState, frame_id: int, additive: bool = False) -> CalculatorState:
    """Select a frame.

    The frame always becomes the primary selection. An additive select
    toggles its membership in the multi-selection; otherwise the
    multi-selection is reset to just this frame.
    """
    layout = _freeform(state)
    if layout is None or layout.find(frame_id) is None:
        return state

    selected = layout.selection.selected
    if additive:
        selected = selected - {frame_id} if frame_id in selected else selected | {frame_id}
    else:
        selected = frozenset({frame_id})

    return _with(
        state,
        layout,
        selection=SelectionState(primary=frame_id, selected=frozenset(selected)),
    )


def clear_selection(state: CalculatorState) -> CalculatorState:
    """Drop the primary selection and the multi-selection."""
    layout = _freeform(state)
    if layout is None:
        return state
    return _with(state, layout, selection=SelectionState())


def begin_drag(
    state: CalculatorState, frame_id: int, pointer_x: float, pointer_y: float
) -> CalculatorState:
    """Start dragging a frame.

    When the frame belongs to a multi-selection the whole selection moves
    with it. A drag already in progress is cancelled first.
    """
    layout = _freeform(state)
    if layout is None or layout.find(frame_id) is None:
        return state

    if layout.drag is not None:
        logger.debug(f"Restarting drag on frame {frame_id}")
        state = cancel_drag(state)
        layout = _freeform(state)
        assert layout is not None

    selected = layout.selection.selected
    if frame_id in selected and len(selected) > 1:
        moving = selected & layout.ids
    else:
        moving = frozenset({frame_id})

    origins = tuple((f.id, f.x, f.y) for f in layout.frames if f.id in moving)
    drag = DragState(
        frame_id=frame_id, start_x=pointer_x, start_y=pointer_y, origins=origins
    )
    return _with(state, layout, drag=drag)


def update_drag(state: CalculatorState, pointer_x: float, pointer_y: float) -> CalculatorState:
    """Move the dragged frames to follow the pointer.

    With snapping enabled only the dragged frame is snapped; the delta it
    actually moved is then applied to every moving frame, so a group keeps
    its shape.
    """
    layout = _freeform(state)
    if layout is None or layout.drag is None:
        return state

    drag = layout.drag
    dx = pointer_x - drag.start_x
    dy = pointer_y - drag.start_y

    if layout.snap_enabled:
        lead = layout.find(drag.frame_id)
        lead_origin = next(
            ((x, y) for frame_id, x, y in drag.origins if frame_id == drag.frame_id),
            None,
        )
        if lead is not None and lead_origin is not None:
            moving = drag.moving_ids
            settled = [f.rect for f in layout.frames if f.id not in moving]
            furniture = (
                furniture_rect(state.wall, state.furniture)
                if state.furniture is not None
                else None
            )
            proposed = Rect(
                lead_origin[0] + dx, lead_origin[1] + dy, lead.width, lead.height
            )
            snapped_x, snapped_y = snap_rect(
                proposed,
                state.wall,
                settled,
                layout.gallery_spacing,
                layout.snap_tolerance,
                furniture,
            )
            dx = snapped_x - lead_origin[0]
            dy = snapped_y - lead_origin[1]

    positions = {frame_id: (x + dx, y + dy) for frame_id, x, y in drag.origins}
    return _with(state, layout, frames=_place(layout.frames, positions))


def end_drag(state: CalculatorState) -> CalculatorState:
    """Finish the gesture, keeping the frames where they are."""
    layout = _freeform(state)
    if layout is None or layout.drag is None:
        return state
    return _with(state, layout, drag=None)


def cancel_drag(state: CalculatorState) -> CalculatorState:
    """Abort the gesture and return moving frames to their origins."""
    layout = _freeform(state)
    if layout is None or layout.drag is None:
        return state
    positions = {frame_id: (x, y) for frame_id, x, y in layout.drag.origins}
    return _with(state, layout, frames=_place(layout.frames, positions), drag=None)


def add_frame(
    state: CalculatorState,
    width: float = 12.0,
    height: float = 16.0,
    hanging_offset: float = 2.0,
    name: str | None = None,
    x: float | None = None,
    y: float | None = None,
) -> CalculatorState:
    """Append a frame with the next free id.

    Without an explicit position, new frames are staggered so they do not
    land exactly on top of each other.
    """
    layout = _freeform(state)
    if layout is None:
        return state

    new_id = max(layout.ids, default=-1) + 1
    frame = GalleryFrame(
        id=new_id,
        name=name if name is not None else f"Frame {new_id + 1}",
        width=width,
        height=height,
        hanging_offset=hanging_offset,
        x=x if x is not None else 20.0 + (new_id * 5) % 60,
        y=y if y is not None else 20.0 + (new_id * 5) % 40,
    )
    return _with(state, layout, frames=layout.frames + (frame,))


def remove_frame(state: CalculatorState, frame_id: int) -> CalculatorState:
    """Remove a frame and forget it in the selection.

    Removing a frame that is part of a running drag ends the drag.
    """
    layout = _freeform(state)
    if layout is None or layout.find(frame_id) is None:
        return state

    selection = layout.selection
    primary = None if selection.primary == frame_id else selection.primary
    drag = layout.drag
    if drag is not None and frame_id in drag.moving_ids:
        drag = None

    return _with(
        state,
        layout,
        frames=tuple(f for f in layout.frames if f.id != frame_id),
        selection=SelectionState(primary=primary, selected=selection.selected - {frame_id}),
        drag=drag,
    )


def update_frame(state: CalculatorState, frame_id: int, **changes) -> CalculatorState:
    """Change a frame's name, size, hanging offset or position.

    Raises:
        ValueError: If a field other than the editable ones is given.
    """
    unknown = set(changes) - EDITABLE_FIELDS
    if unknown:
        raise ValueError(f"Cannot update frame fields: {', '.join(sorted(unknown))}")

    layout = _freeform(state)
    if layout is None or layout.find(frame_id) is None:
        return state

    frames = tuple(
        replace(frame, **changes) if frame.id == frame_id else frame
        for frame in layout.frames
    )
    return _with(state, layout, frames=frames)


def move_frames(
    state: CalculatorState, frame_ids: Iterable[int], dx: float, dy: float
) -> CalculatorState:
    """Translate a set of frames by ``(dx, dy)``. Unknown ids are ignored."""
    layout = _freeform(state)
    if layout is None:
        return state

    ids = set(frame_ids) & layout.ids
    if not ids:
        return state

    positions = {f.id: (f.x + dx, f.y + dy) for f in layout.frames if f.id in ids}
    return _with(state, layout, frames=_place(layout.frames, positions))


def arrange_row(
    state: CalculatorState, v_align: GalleryVAlign | str = GalleryVAlign.CENTER
) -> CalculatorState:
    """Lay every frame out in a single row.

    Frames keep their order and are separated by the gallery spacing. The
    row is placed by the state's anchor, and frames of different heights
    are aligned by their top edges, centres or bottom edges.
    """
    layout = _freeform(state)
    if layout is None or not layout.frames:
        return state

    v_align = GalleryVAlign(v_align)
    row_height = max(f.height for f in layout.frames)
    spacing = layout.gallery_spacing

    relative: dict[int, tuple[float, float]] = {}
    cursor = 0.0
    for frame in layout.frames:
        if v_align is GalleryVAlign.TOP:
            rel_y = 0.0
        elif v_align is GalleryVAlign.BOTTOM:
            rel_y = row_height - frame.height
        else:
            rel_y = (row_height - frame.height) / 2
        relative[frame.id] = (cursor, rel_y)
        cursor += frame.width + spacing
    row_width = cursor - spacing

    hook_lines = [relative[f.id][1] + f.hanging_offset for f in layout.frames]
    origin_x = resolve_block_x(state.wall, row_width, state.anchor, state.furniture)
    origin_y = resolve_hook_block_y(
        state.wall,
        row_height,
        hook_drop=min(hook_lines),
        hook_rise=row_height - max(hook_lines),
        anchor=state.anchor,
        furniture=state.furniture,
    )

    positions = {
        frame_id: (origin_x + rel_x, origin_y + rel_y)
        for frame_id, (rel_x, rel_y) in relative.items()
    }
    return _with(state, layout, frames=_place(layout.frames, positions), drag=None)


def apply_template(
    state: CalculatorState, template_id: str, width: float | None = None
) -> CalculatorState:
    """Replace the frames with a built-in template scaled onto the wall.

    Unknown template ids leave the state unchanged.
    """
    layout = _freeform(state)
    template = get_template(template_id)
    if layout is None or template is None:
        return state

    frames = frames_from_template(
        template, state.wall, state.anchor, width=width, furniture=state.furniture
    )
    logger.debug(f"Applied template {template_id} with {len(frames)} frames")
    return _with(
        state, layout, frames=frames, selection=SelectionState(), drag=None
    )
