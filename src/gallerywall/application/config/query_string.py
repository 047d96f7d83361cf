"""Shareable layout links.

A calculator state is encoded as a URL query string with short keys, so a
layout can be bookmarked or sent to someone else. Values are in inches and
only settings that differ from the defaults are written. Missing keys decode
to the defaults (a 120 x 96 wall with a row of three 12 x 12 frames hung at
57 inches).

Keys:
    ww, wh      wall width and height
    lt          layout type (grid, row, gallery)
    fc, gr, gc  frame count, grid rows, grid columns
    fw, fh, ho  frame width, height and hanging offset
    ht, hi      hanging type (single, dual) and dual hook inset
    hs, vs      horizontal and vertical spacing
    hd, vd      horizontal and vertical distribution
    at, av, vt  vertical anchor, its offset and target (hook, edge)
    hat, hav    horizontal anchor and its offset
    fuw, fuh    furniture width and height
    fua, fuo    furniture horizontal anchor and offset
    ful, fuv    furniture alignment and vertical anchor
    gs, gf      gallery spacing and gallery frames
    sn, st      gallery snapping flag and tolerance

Gallery frames are written as ``width,height,hanging_offset,x,y`` groups
separated by ``;``.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from enum import Enum
from typing import TypeVar
from urllib.parse import parse_qsl, urlencode, urlsplit

from gallerywall.application.config.loader import ConfigError
from gallerywall.domain.entities import GalleryFrame
from gallerywall.domain.state import CalculatorState, FreeformLayout, RegularLayout
from gallerywall.domain.value_objects import (
    AnchorSpec,
    Distribution,
    FrameSpec,
    FurnitureAlignment,
    FurnitureSpec,
    FurnitureVerticalAnchor,
    HangingSpec,
    HangingType,
    HorizontalAnchor,
    LayoutType,
    VerticalAnchor,
    VerticalTarget,
    WallSpec,
)

logger = logging.getLogger(__name__)

__all__ = [
    "decode_state",
    "encode_state",
]

E = TypeVar("E", bound=Enum)

# Furniture used when a link turns on furniture without sizing it.
DEFAULT_FURNITURE = FurnitureSpec(width=48.0, height=30.0)

FURNITURE_KEYS = ("fuw", "fuh", "fua", "fuo", "ful", "fuv")

# Older links wrote "center" for a single centred hook.
_HANGING_ALIASES = {"center": HangingType.SINGLE.value}


def _num(value: float) -> str:
    """Shortest text that reads back as the same float."""
    text = repr(float(value))
    return text[:-2] if text.endswith(".0") else text


def _put(params: dict[str, str], key: str, value, default) -> None:
    """Write ``value`` under ``key`` unless it equals ``default``."""
    if value == default:
        return
    if isinstance(value, Enum):
        params[key] = value.value
    elif isinstance(value, bool):
        params[key] = "1" if value else "0"
    elif isinstance(value, float):
        params[key] = _num(value)
    else:
        params[key] = str(value)


def encode_state(state: CalculatorState) -> str:
    """Encode a calculator state as a query string (without the ``?``).

    Selection and drag state are not encoded.

    Example:
        >>> encode_state(CalculatorState())
        ''
    """
    params: dict[str, str] = {}
    defaults = CalculatorState()
    regular = RegularLayout()

    _put(params, "ww", state.wall.width, defaults.wall.width)
    _put(params, "wh", state.wall.height, defaults.wall.height)
    _put(params, "lt", state.layout_type, regular.kind)

    layout = state.layout
    if isinstance(layout, FreeformLayout):
        gallery = FreeformLayout()
        _put(params, "gs", layout.gallery_spacing, gallery.gallery_spacing)
        _put(params, "sn", layout.snap_enabled, gallery.snap_enabled)
        _put(params, "st", layout.snap_tolerance, gallery.snap_tolerance)
        if layout.frames:
            params["gf"] = ";".join(
                ",".join(
                    _num(v) for v in (f.width, f.height, f.hanging_offset, f.x, f.y)
                )
                for f in layout.frames
            )
    else:
        _put(params, "fc", layout.frame_count, regular.frame_count)
        _put(params, "gr", layout.grid_rows, regular.grid_rows)
        _put(params, "gc", layout.grid_cols, regular.grid_cols)
        _put(params, "fw", layout.frame.width, regular.frame.width)
        _put(params, "fh", layout.frame.height, regular.frame.height)
        _put(params, "ho", layout.frame.hanging_offset, regular.frame.hanging_offset)
        _put(params, "hs", layout.h_spacing, regular.h_spacing)
        _put(params, "vs", layout.v_spacing, regular.v_spacing)
        _put(params, "hd", layout.h_distribution, regular.h_distribution)
        _put(params, "vd", layout.v_distribution, regular.v_distribution)

    _put(params, "ht", state.hanging.type, defaults.hanging.type)
    _put(params, "hi", state.hanging.hook_inset, defaults.hanging.hook_inset)

    anchor, default_anchor = state.anchor, defaults.anchor
    _put(params, "at", anchor.vertical, default_anchor.vertical)
    _put(params, "av", anchor.vertical_offset, default_anchor.vertical_offset)
    _put(params, "vt", anchor.vertical_target, default_anchor.vertical_target)
    _put(params, "hat", anchor.horizontal, default_anchor.horizontal)
    _put(params, "hav", anchor.horizontal_offset, default_anchor.horizontal_offset)

    furniture = state.furniture
    if furniture is not None:
        # Width is always written so the furniture survives decoding.
        params["fuw"] = _num(furniture.width)
        _put(params, "fuh", furniture.height, DEFAULT_FURNITURE.height)
        _put(params, "fua", furniture.anchor, DEFAULT_FURNITURE.anchor)
        _put(params, "fuo", furniture.offset, DEFAULT_FURNITURE.offset)
        _put(params, "ful", furniture.alignment, DEFAULT_FURNITURE.alignment)
        _put(params, "fuv", furniture.vertical, DEFAULT_FURNITURE.vertical)

    return urlencode(params, safe=",;")


def _fail(key: str, value: str, message: str) -> ConfigError:
    return ConfigError(
        message=f"Invalid value for '{key}': {value!r} ({message})",
        error_type="query_string",
        details=[{"path": key, "message": message, "value": value}],
    )


class _Reader:
    """Typed access to decoded query parameters with defaults."""

    def __init__(self, params: dict[str, str]) -> None:
        self.params = params

    def _get(self, key: str, default, convert: Callable[[str], object], message: str):
        raw = self.params.get(key)
        if raw is None or raw == "":
            return default
        try:
            return convert(raw)
        except ValueError:
            raise _fail(key, raw, message)

    def number(self, key: str, default: float) -> float:
        return self._get(key, default, float, "expected a number")

    def integer(self, key: str, default: int | None) -> int | None:
        value = self._get(key, default, int, "expected an integer")
        if value is not None and value < 1:
            raise _fail(key, self.params[key], "expected a positive integer")
        return value

    def choice(self, key: str, enum: type[E], default: E) -> E:
        choices = ", ".join(member.value for member in enum)
        return self._get(key, default, enum, f"expected one of: {choices}")

    def flag(self, key: str, default: bool) -> bool:
        truthy = {"1": True, "true": True, "0": False, "false": False}

        def convert(raw: str) -> bool:
            if raw.lower() not in truthy:
                raise ValueError(raw)
            return truthy[raw.lower()]

        return self._get(key, default, convert, "expected 1 or 0")


def _decode_frames(raw: str) -> tuple[GalleryFrame, ...]:
    frames: list[GalleryFrame] = []
    for index, group in enumerate(part for part in raw.split(";") if part):
        try:
            width, height, offset, x, y = (float(v) for v in group.split(","))
        except ValueError:
            raise _fail("gf", group, "expected width,height,hanging_offset,x,y")
        frames.append(
            GalleryFrame(
                id=index,
                name=f"Frame {index + 1}",
                width=width,
                height=height,
                hanging_offset=offset,
                x=x,
                y=y,
            )
        )
    return tuple(frames)


def decode_state(query: str) -> CalculatorState:
    """Decode a query string or a full URL into a calculator state.

    Unknown keys are ignored.

    Raises:
        ConfigError: With error_type "query_string" if a value cannot be parsed.
    """
    if "?" in query:
        query = urlsplit(query).query
    params = dict(parse_qsl(query.lstrip("?"), keep_blank_values=True))
    read = _Reader(params)
    defaults = CalculatorState()

    hanging_type = params.get("ht")
    if hanging_type in _HANGING_ALIASES:
        params["ht"] = _HANGING_ALIASES[hanging_type]

    wall = WallSpec(
        width=read.number("ww", defaults.wall.width),
        height=read.number("wh", defaults.wall.height),
    )
    hanging = HangingSpec(
        type=read.choice("ht", HangingType, defaults.hanging.type),
        hook_inset=read.number("hi", defaults.hanging.hook_inset),
    )
    anchor = AnchorSpec(
        vertical=read.choice("at", VerticalAnchor, defaults.anchor.vertical),
        vertical_offset=read.number("av", defaults.anchor.vertical_offset),
        horizontal=read.choice("hat", HorizontalAnchor, defaults.anchor.horizontal),
        horizontal_offset=read.number("hav", defaults.anchor.horizontal_offset),
        vertical_target=read.choice("vt", VerticalTarget, defaults.anchor.vertical_target),
    )

    furniture = None
    if any(key in params for key in FURNITURE_KEYS):
        furniture = FurnitureSpec(
            width=read.number("fuw", DEFAULT_FURNITURE.width),
            height=read.number("fuh", DEFAULT_FURNITURE.height),
            anchor=read.choice("fua", HorizontalAnchor, DEFAULT_FURNITURE.anchor),
            offset=read.number("fuo", DEFAULT_FURNITURE.offset),
            alignment=read.choice("ful", FurnitureAlignment, DEFAULT_FURNITURE.alignment),
            vertical=read.choice("fuv", FurnitureVerticalAnchor, DEFAULT_FURNITURE.vertical),
        )

    regular = RegularLayout()
    layout_type = read.choice("lt", LayoutType, regular.kind)
    layout: RegularLayout | FreeformLayout
    if layout_type is LayoutType.GALLERY:
        gallery = FreeformLayout()
        layout = FreeformLayout(
            frames=_decode_frames(params.get("gf", "")),
            gallery_spacing=read.number("gs", gallery.gallery_spacing),
            snap_enabled=read.flag("sn", gallery.snap_enabled),
            snap_tolerance=read.number("st", gallery.snap_tolerance),
        )
    else:
        layout = RegularLayout(
            kind=layout_type,
            frame_count=read.integer("fc", regular.frame_count) or regular.frame_count,
            grid_rows=read.integer("gr", regular.grid_rows),
            grid_cols=read.integer("gc", regular.grid_cols),
            frame=FrameSpec(
                width=read.number("fw", regular.frame.width),
                height=read.number("fh", regular.frame.height),
                hanging_offset=read.number("ho", regular.frame.hanging_offset),
            ),
            h_spacing=read.number("hs", regular.h_spacing),
            v_spacing=read.number("vs", regular.v_spacing),
            h_distribution=read.choice("hd", Distribution, regular.h_distribution),
            v_distribution=read.choice("vd", Distribution, regular.v_distribution),
        )

    logger.debug(f"Decoded {len(params)} query parameters into a {layout_type.value} layout")
    return CalculatorState(
        wall=wall, hanging=hanging, anchor=anchor, furniture=furniture, layout=layout
    )
