"""Domain layer - layout engine and its data model."""

from .entities import DragState, FramePosition, GalleryFrame, Placement, SelectionState
from .services import calculate_layout_positions
from .state import CalculatorState, FreeformLayout, Layout, RegularLayout
from .units import (
    INCH_TO_CM,
    format_fractional_inches,
    format_number,
    format_measurement,
    format_short,
    from_display_unit,
    to_display_unit,
)
from .value_objects import (
    AnchorSpec,
    Distribution,
    FrameSpec,
    FurnitureAlignment,
    FurnitureSpec,
    FurnitureVerticalAnchor,
    GalleryVAlign,
    HangingSpec,
    HangingType,
    HorizontalAnchor,
    LayoutType,
    PlacementAuthority,
    Rect,
    Unit,
    VerticalAnchor,
    VerticalTarget,
    WallSpec,
)

__all__ = [
    "INCH_TO_CM",
    "AnchorSpec",
    "CalculatorState",
    "Distribution",
    "DragState",
    "FramePosition",
    "FrameSpec",
    "FreeformLayout",
    "FurnitureAlignment",
    "FurnitureSpec",
    "FurnitureVerticalAnchor",
    "GalleryFrame",
    "GalleryVAlign",
    "HangingSpec",
    "HangingType",
    "HorizontalAnchor",
    "Layout",
    "LayoutType",
    "Placement",
    "PlacementAuthority",
    "Rect",
    "RegularLayout",
    "SelectionState",
    "Unit",
    "VerticalAnchor",
    "VerticalTarget",
    "WallSpec",
    "calculate_layout_positions",
    "format_fractional_inches",
    "format_number",
    "format_measurement",
    "format_short",
    "from_display_unit",
    "to_display_unit",
]
