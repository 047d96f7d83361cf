"""Value objects for the picture hanging domain.

All lengths are stored in inches. The display unit is only applied when a
value is formatted for the user, so none of these types carry a unit.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Unit(str, Enum):
    """Units a length can be displayed in."""

    INCHES = "in"
    CENTIMETERS = "cm"


class LayoutType(str, Enum):
    """Arrangement modes supported by the engine."""

    GRID = "grid"
    ROW = "row"
    GALLERY = "gallery"


class Distribution(str, Enum):
    """How leftover span is shared out between items along one axis."""

    FIXED = "fixed"
    SPACE_BETWEEN = "space-between"
    SPACE_EVENLY = "space-evenly"
    SPACE_AROUND = "space-around"


class VerticalAnchor(str, Enum):
    """Vertical reference a layout block is measured from."""

    FLOOR = "floor"
    CEILING = "ceiling"
    CENTER = "center"
    FURNITURE = "furniture"


class HorizontalAnchor(str, Enum):
    """Horizontal reference a layout block is measured from."""

    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


class VerticalTarget(str, Enum):
    """What a floor or ceiling offset is measured to.

    - HOOK: the hook line of the row nearest the reference
    - EDGE: the block's outer edge (bottom for floor, top for ceiling)
    """

    HOOK = "hook"
    EDGE = "edge"


class HangingType(str, Enum):
    """Hanging hardware layout on the back of a frame."""

    SINGLE = "single"
    DUAL = "dual"


class FurnitureAlignment(str, Enum):
    """How a block is placed horizontally relative to a furniture piece.

    - CENTER: recentre over the furniture, ignoring the horizontal anchor
    - ANCHOR: apply the horizontal anchor inside the furniture's span
    - SPAN: distribute frames across the furniture width
    """

    CENTER = "center"
    ANCHOR = "anchor"
    SPAN = "span"


class FurnitureVerticalAnchor(str, Enum):
    """Vertical placement of a block when anchored to furniture."""

    ABOVE = "above"
    CENTER = "center"
    CEILING = "ceiling"


class PlacementAuthority(str, Enum):
    """Whether a placement was derived by formula or stored by the user."""

    COMPUTED = "computed"
    STORED = "stored"


class GalleryVAlign(str, Enum):
    """Vertical alignment of mixed-height frames arranged in one row."""

    TOP = "top"
    CENTER = "center"
    BOTTOM = "bottom"


@dataclass(frozen=True)
class WallSpec:
    """Wall size in inches."""

    width: float
    height: float

    def contains(self, rect: Rect) -> bool:
        """Check whether a rectangle lies fully on the wall."""
        return (
            rect.x >= 0
            and rect.y >= 0
            and rect.right <= self.width
            and rect.bottom <= self.height
        )


@dataclass(frozen=True)
class FrameSpec:
    """Physical frame size and the drop from its top edge to the hooks."""

    width: float
    height: float
    hanging_offset: float


@dataclass(frozen=True)
class HangingSpec:
    """Hanging hardware shared by every frame in a layout.

    Attributes:
        type: Single centred hook or two symmetric hooks.
        hook_inset: For dual hanging, distance from each vertical frame
            edge to its hook. Ignored for single hanging.
    """

    type: HangingType = HangingType.SINGLE
    hook_inset: float = 3.0


@dataclass(frozen=True)
class AnchorSpec:
    """Where a layout block is pinned on the wall.

    Offsets are signed. Vertical offsets are measured from the chosen
    reference toward the wall's interior.
    """

    vertical: VerticalAnchor = VerticalAnchor.FLOOR
    vertical_offset: float = 57.0
    horizontal: HorizontalAnchor = HorizontalAnchor.CENTER
    horizontal_offset: float = 0.0
    vertical_target: VerticalTarget = VerticalTarget.HOOK


@dataclass(frozen=True)
class FurnitureSpec:
    """A furniture piece standing on the floor against the wall."""

    width: float
    height: float
    anchor: HorizontalAnchor = HorizontalAnchor.CENTER
    offset: float = 0.0
    alignment: FurnitureAlignment = FurnitureAlignment.CENTER
    vertical: FurnitureVerticalAnchor = FurnitureVerticalAnchor.ABOVE


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle in wall coordinates (origin top-left, y down)."""

    x: float
    y: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    @property
    def center_x(self) -> float:
        return self.x + self.width / 2
