"""Built-in gallery wall templates.

Templates describe frame slots in relative coordinates (0 to 1 on each
axis of the template's bounding box). The aspect ratio turns the relative
box into real proportions when a template is scaled onto a wall.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from ..entities import GalleryFrame
from ..value_objects import AnchorSpec, FurnitureSpec, WallSpec
from .anchor import resolve_block_x, resolve_hook_block_y

logger = logging.getLogger(__name__)

__all__ = [
    "BUILT_IN_TEMPLATES",
    "DEFAULT_WIDTH_RATIO",
    "GalleryTemplate",
    "TemplateSlot",
    "frames_from_template",
    "get_template",
]

# Share of the wall width a template fills when no width is given.
DEFAULT_WIDTH_RATIO = 0.6

# Hanging offset for template frames, capped at half the frame height.
DEFAULT_HANGING_OFFSET = 2.0


@dataclass(frozen=True)
class TemplateSlot:
    """One frame slot, relative to the template's bounding box."""

    x: float
    y: float
    width: float
    height: float


@dataclass(frozen=True)
class GalleryTemplate:
    """A named arrangement of frame slots.

    Attributes:
        id: Identifier used on the command line and in the API.
        name: Display name.
        description: One-line description.
        aspect_ratio: Width divided by height of the bounding box.
        slots: Frame slots in relative coordinates.
    """

    id: str
    name: str
    description: str
    aspect_ratio: float
    slots: tuple[TemplateSlot, ...]

    @property
    def frame_count(self) -> int:
        return len(self.slots)


BUILT_IN_TEMPLATES: tuple[GalleryTemplate, ...] = (
    GalleryTemplate(
        id="triptych",
        name="Triptych",
        description="3 frames in a row, center larger",
        aspect_ratio=2.5,
        slots=(
            TemplateSlot(0.0, 0.15, 0.25, 0.7),
            TemplateSlot(0.3, 0.0, 0.4, 1.0),
            TemplateSlot(0.75, 0.15, 0.25, 0.7),
        ),
    ),
    GalleryTemplate(
        id="staircase",
        name="Staircase",
        description="Diagonal ascending arrangement",
        aspect_ratio=2.0,
        slots=(
            TemplateSlot(0.0, 0.7, 0.22, 0.3),
            TemplateSlot(0.26, 0.5, 0.22, 0.3),
            TemplateSlot(0.52, 0.3, 0.22, 0.3),
            TemplateSlot(0.78, 0.1, 0.22, 0.3),
        ),
    ),
    GalleryTemplate(
        id="salon-4",
        name="Salon (4)",
        description="Asymmetric cluster of 4 frames",
        aspect_ratio=1.4,
        slots=(
            TemplateSlot(0.0, 0.0, 0.45, 0.55),
            TemplateSlot(0.5, 0.0, 0.5, 0.4),
            TemplateSlot(0.0, 0.6, 0.35, 0.4),
            TemplateSlot(0.4, 0.45, 0.6, 0.55),
        ),
    ),
    GalleryTemplate(
        id="salon-6",
        name="Salon (6)",
        description="Asymmetric cluster of 6 frames",
        aspect_ratio=1.6,
        slots=(
            TemplateSlot(0.0, 0.0, 0.3, 0.45),
            TemplateSlot(0.35, 0.0, 0.35, 0.35),
            TemplateSlot(0.75, 0.0, 0.25, 0.5),
            TemplateSlot(0.0, 0.5, 0.25, 0.5),
            TemplateSlot(0.3, 0.4, 0.4, 0.6),
            TemplateSlot(0.75, 0.55, 0.25, 0.45),
        ),
    ),
    GalleryTemplate(
        id="feature-wall",
        name="Feature Wall",
        description="Large center with small sides",
        aspect_ratio=1.8,
        slots=(
            TemplateSlot(0.0, 0.1, 0.18, 0.35),
            TemplateSlot(0.0, 0.55, 0.18, 0.35),
            TemplateSlot(0.22, 0.0, 0.56, 1.0),
            TemplateSlot(0.82, 0.1, 0.18, 0.35),
            TemplateSlot(0.82, 0.55, 0.18, 0.35),
        ),
    ),
)


def get_template(template_id: str) -> GalleryTemplate | None:
    """Look up a built-in template by id."""
    for template in BUILT_IN_TEMPLATES:
        if template.id == template_id:
            return template
    return None


def frames_from_template(
    template: GalleryTemplate,
    wall: WallSpec,
    anchor: AnchorSpec,
    width: float | None = None,
    furniture: FurnitureSpec | None = None,
    first_id: int = 0,
) -> tuple[GalleryFrame, ...]:
    """Scale a template onto a wall and place it with the anchor.

    Args:
        template: Template to scale.
        wall: Target wall.
        anchor: Anchor used to place the template's bounding box.
        width: Bounding box width. Defaults to DEFAULT_WIDTH_RATIO of the
            wall width; the box is shrunk if it would be taller than the wall.
        furniture: Furniture piece for furniture anchors.
        first_id: Id of the first generated frame.

    Returns:
        One GalleryFrame per slot, in slot order.
    """
    block_width = width if width is not None else wall.width * DEFAULT_WIDTH_RATIO
    block_height = block_width / template.aspect_ratio
    if block_height > wall.height:
        block_height = wall.height
        block_width = block_height * template.aspect_ratio

    # Relative placements inside the bounding box.
    relative = []
    for slot in template.slots:
        frame_height = slot.height * block_height
        relative.append(
            (
                slot.x * block_width,
                slot.y * block_height,
                slot.width * block_width,
                frame_height,
                min(DEFAULT_HANGING_OFFSET, frame_height / 2),
            )
        )

    hook_lines = [y + offset for _, y, _, _, offset in relative]
    origin_x = resolve_block_x(wall, block_width, anchor, furniture)
    origin_y = resolve_hook_block_y(
        wall,
        block_height,
        hook_drop=min(hook_lines),
        hook_rise=block_height - max(hook_lines),
        anchor=anchor,
        furniture=furniture,
    )
    logger.debug(
        f"Template {template.id}: {block_width:.2f} x {block_height:.2f} "
        f"at ({origin_x:.2f}, {origin_y:.2f})"
    )

    return tuple(
        GalleryFrame(
            id=first_id + index,
            name=f"Frame {first_id + index + 1}",
            width=frame_width,
            height=frame_height,
            hanging_offset=offset,
            x=origin_x + x,
            y=origin_y + y,
        )
        for index, (x, y, frame_width, frame_height, offset) in enumerate(relative)
    )
