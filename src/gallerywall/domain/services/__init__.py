"""Domain services for frame layout.

This package provides the layout engine and its building blocks:
- Distribution of frames along an axis
- Anchor resolution against the wall or a furniture piece
- Regular (grid/row) and freeform (gallery) layouts
- Snapping, gallery templates and measurement projection
"""

from .anchor import (
    furniture_rect,
    resolve_block_x,
    resolve_block_y,
    resolve_horizontal,
    resolve_hook_block_y,
    resolve_vertical,
)
from .distribution import Distributed, distribute
from .freeform import (
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
from .gallery_templates import (
    BUILT_IN_TEMPLATES,
    GalleryTemplate,
    TemplateSlot,
    frames_from_template,
    get_template,
)
from .layout import calculate_layout_positions, gallery_placement
from .measurement import hook_points, project
from .regular_layout import GridShape, RegularLayoutBuilder, grid_shape
from .snapping import AxisReferences, reference_lines, snap_axis, snap_rect

__all__ = [
    # Distribution
    "Distributed",
    "distribute",
    # Anchors
    "furniture_rect",
    "resolve_block_x",
    "resolve_block_y",
    "resolve_horizontal",
    "resolve_hook_block_y",
    "resolve_vertical",
    # Regular layouts
    "GridShape",
    "RegularLayoutBuilder",
    "grid_shape",
    # Freeform editing
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
    # Snapping
    "AxisReferences",
    "reference_lines",
    "snap_axis",
    "snap_rect",
    # Templates
    "BUILT_IN_TEMPLATES",
    "GalleryTemplate",
    "TemplateSlot",
    "frames_from_template",
    "get_template",
    # Measurements
    "calculate_layout_positions",
    "gallery_placement",
    "hook_points",
    "project",
]
