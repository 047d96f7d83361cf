"""Domain entities for frame placement."""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from .value_objects import PlacementAuthority, Rect


@dataclass(frozen=True)
class GalleryFrame:
    """A freeform frame whose position is owned by the user.

    Attributes:
        id: Stable identifier for the lifetime of the session.
        name: Display name.
        width: Frame width in inches.
        height: Frame height in inches.
        hanging_offset: Drop from the top edge to the hook line.
        x: Left edge from the wall's left edge.
        y: Top edge from the ceiling.
    """

    id: int
    name: str
    width: float
    height: float
    hanging_offset: float
    x: float
    y: float

    @property
    def rect(self) -> Rect:
        return Rect(self.x, self.y, self.width, self.height)

    def moved_to(self, x: float, y: float) -> GalleryFrame:
        """Return a copy at a new position."""
        return replace(self, x=x, y=y)


@dataclass(frozen=True)
class Placement:
    """Frame geometry and hook coordinates before measurements are projected.

    Hook coordinates are wall-absolute. ``hook_x2`` is only set for dual
    hanging, in which case ``hook_x`` is the left hook.
    """

    id: int
    name: str
    x: float
    y: float
    width: float
    height: float
    hanging_offset: float
    hook_x: float
    hook_y: float
    hook_x2: float | None = None
    row: int | None = None
    col: int | None = None
    authority: PlacementAuthority = PlacementAuthority.COMPUTED

    @property
    def rect(self) -> Rect:
        return Rect(self.x, self.y, self.width, self.height)


@dataclass(frozen=True)
class FramePosition:
    """A placed frame with the wall measurements shown to the user.

    Created fresh on every layout computation; never edited in place.

    Attributes:
        from_left: Wall left edge to the (left) hook.
        from_right: Wall right edge to the (right) hook.
        from_floor: Floor up to the hook line.
        from_ceiling: Ceiling down to the hook line.
        from_top: Same as from_ceiling; kept for drawing code.
        hook_gap: Distance between dual hooks, None for a single hook.
        is_out_of_bounds: True when the frame extends past the wall.
    """

    id: int
    name: str
    x: float
    y: float
    width: float
    height: float
    hanging_offset: float
    hook_x: float
    hook_y: float
    from_left: float
    from_right: float
    from_floor: float
    from_ceiling: float
    from_top: float
    hook_x2: float | None = None
    hook_gap: float | None = None
    row: int | None = None
    col: int | None = None
    authority: PlacementAuthority = PlacementAuthority.COMPUTED
    is_out_of_bounds: bool = False


@dataclass(frozen=True)
class DragState:
    """An in-progress pointer drag.

    ``origins`` records the gesture-start position of every frame moving
    with the gesture, so each update applies the total pointer delta to
    those origins rather than accumulating.
    """

    frame_id: int
    start_x: float
    start_y: float
    origins: tuple[tuple[int, float, float], ...] = ()

    @property
    def moving_ids(self) -> frozenset[int]:
        return frozenset(frame_id for frame_id, _, _ in self.origins)


@dataclass(frozen=True)
class SelectionState:
    """Primary selection plus the multi-select set."""

    primary: int | None = None
    selected: frozenset[int] = field(default_factory=frozenset)
