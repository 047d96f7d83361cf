"""Calculator state: the single input to the layout engine.

The layout is a tagged variant. ``RegularLayout`` frames are always derived
from the configuration, ``FreeformLayout`` frames carry their own stored
positions. Keeping them as separate types keeps the recomputation rules
unambiguous for each layout type.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Union

from .entities import DragState, GalleryFrame, SelectionState
from .value_objects import (
    AnchorSpec,
    Distribution,
    FrameSpec,
    FurnitureSpec,
    HangingSpec,
    LayoutType,
    WallSpec,
)

# Default snapping tolerance in inches.
DEFAULT_SNAP_TOLERANCE = 1.0


@dataclass(frozen=True)
class RegularLayout:
    """Grid or row of identical frames placed by formula.

    Attributes:
        kind: LayoutType.GRID or LayoutType.ROW.
        frame_count: Number of frames to place.
        grid_rows: Rows for a grid; None lets the builder pick a near-square shape.
        grid_cols: Columns for a grid; None lets the builder pick a near-square shape.
        frame: Size and hanging offset shared by every frame.
        h_spacing: Gap between columns for fixed distribution.
        v_spacing: Gap between rows for fixed distribution.
        h_distribution: Horizontal distribution policy.
        v_distribution: Vertical distribution policy.
    """

    kind: LayoutType = LayoutType.ROW
    frame_count: int = 3
    grid_rows: int | None = None
    grid_cols: int | None = None
    frame: FrameSpec = field(default_factory=lambda: FrameSpec(12.0, 12.0, 2.0))
    h_spacing: float = 3.0
    v_spacing: float = 3.0
    h_distribution: Distribution = Distribution.FIXED
    v_distribution: Distribution = Distribution.FIXED


@dataclass(frozen=True)
class FreeformLayout:
    """Independently positioned frames edited by the user."""

    frames: tuple[GalleryFrame, ...] = ()
    gallery_spacing: float = 2.0
    snap_enabled: bool = False
    snap_tolerance: float = DEFAULT_SNAP_TOLERANCE
    selection: SelectionState = field(default_factory=SelectionState)
    drag: DragState | None = None

    @property
    def kind(self) -> LayoutType:
        return LayoutType.GALLERY

    def find(self, frame_id: int) -> GalleryFrame | None:
        """Look up a frame by id."""
        for frame in self.frames:
            if frame.id == frame_id:
                return frame
        return None

    @property
    def ids(self) -> frozenset[int]:
        return frozenset(frame.id for frame in self.frames)


Layout = Union[RegularLayout, FreeformLayout]


@dataclass(frozen=True)
class CalculatorState:
    """Everything the engine needs to place frames on a wall."""

    wall: WallSpec = field(default_factory=lambda: WallSpec(120.0, 96.0))
    hanging: HangingSpec = field(default_factory=HangingSpec)
    anchor: AnchorSpec = field(default_factory=AnchorSpec)
    furniture: FurnitureSpec | None = None
    layout: Layout = field(default_factory=RegularLayout)

    @property
    def layout_type(self) -> LayoutType:
        return self.layout.kind

    @property
    def is_freeform(self) -> bool:
        return isinstance(self.layout, FreeformLayout)

    def with_layout(self, layout: Layout) -> CalculatorState:
        """Return a copy with the layout replaced."""
        return replace(self, layout=layout)
