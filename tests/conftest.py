"""Pytest configuration and shared fixtures for gallery wall tests."""

from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from gallerywall.domain import (
    CalculatorState,
    FreeformLayout,
    GalleryFrame,
    WallSpec,
)


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "slow: tests that take a long time to run")


# =============================================================================
# Shared state fixtures
# =============================================================================


def make_frame(
    frame_id: int,
    x: float,
    y: float,
    width: float = 10.0,
    height: float = 10.0,
    hanging_offset: float = 2.0,
) -> GalleryFrame:
    """Build a gallery frame with the default ``Frame N`` name."""
    return GalleryFrame(
        id=frame_id,
        name=f"Frame {frame_id + 1}",
        width=width,
        height=height,
        hanging_offset=hanging_offset,
        x=x,
        y=y,
    )


@pytest.fixture
def frame_factory() -> Callable[..., GalleryFrame]:
    """Return the gallery frame builder."""
    return make_frame


@pytest.fixture
def gallery_state() -> CalculatorState:
    """Freeform state with three 10 x 10 frames in a row on a 120 x 96 wall."""
    return CalculatorState(
        wall=WallSpec(120.0, 96.0),
        layout=FreeformLayout(
            frames=(
                make_frame(0, 10.0, 10.0),
                make_frame(1, 30.0, 10.0),
                make_frame(2, 50.0, 10.0),
            ),
        ),
    )


# =============================================================================
# Configuration fixtures
# =============================================================================


@pytest.fixture
def row_config_data() -> dict[str, Any]:
    """A valid row configuration that lays out without warnings."""
    return {
        "schema_version": "1.1",
        "wall": {"width": 144, "height": 96},
        "layout": {
            "type": "row",
            "frame_count": 3,
            "frame": {"width": 16, "height": 20, "hanging_offset": 3},
            "h_spacing": 4,
        },
    }


@pytest.fixture
def write_config(tmp_path: Path) -> Callable[[Any, str], Path]:
    """Return a helper that writes configuration data to a temporary file.

    Strings are written verbatim so tests can write malformed JSON.
    """

    def _write(data: Any, name: str = "config.json") -> Path:
        path = tmp_path / name
        content = data if isinstance(data, str) else json.dumps(data)
        path.write_text(content, encoding="utf-8")
        return path

    return _write
