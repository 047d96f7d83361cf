"""Unit tests for converting configurations to and from calculator state."""

from typing import Any

import pytest

from gallerywall.application.config import (
    CURRENT_SCHEMA_VERSION,
    ConfigError,
    GalleryLayoutConfig,
    config_to_state,
    load_config_from_dict,
    state_to_config,
)
from gallerywall.domain import (
    CalculatorState,
    FreeformLayout,
    FurnitureSpec,
    HangingType,
    LayoutType,
    RegularLayout,
    Unit,
    VerticalAnchor,
)


def _state(data: dict[str, Any]) -> CalculatorState:
    return config_to_state(load_config_from_dict(data))


class TestConfigToState:
    """Tests for config_to_state."""

    def test_row(self, row_config_data: dict[str, Any]) -> None:
        state = _state(row_config_data)
        layout = state.layout
        assert isinstance(layout, RegularLayout)
        assert layout.kind is LayoutType.ROW
        assert layout.frame.width == 16.0
        assert layout.h_spacing == 4.0
        assert layout.v_spacing == RegularLayout().v_spacing
        assert state.anchor.vertical_offset == 57.0
        assert state.hanging.hook_inset == 3.0

    def test_centimetres_converted_to_inches(self, row_config_data: dict[str, Any]) -> None:
        row_config_data["unit"] = "cm"
        row_config_data["wall"] = {"width": 254, "height": 243.84}
        row_config_data["anchor"] = {"vertical_offset": 127}
        state = _state(row_config_data)
        assert state.wall.width == pytest.approx(100.0)
        assert state.wall.height == pytest.approx(96.0)
        assert state.anchor.vertical_offset == pytest.approx(50.0)

    def test_omitted_lengths_use_inch_defaults(self, row_config_data: dict[str, Any]) -> None:
        """Engine defaults are in inches whatever the file's unit."""
        row_config_data["unit"] = "cm"
        state = _state(row_config_data)
        assert state.anchor.vertical_offset == 57.0
        assert state.hanging.hook_inset == 3.0

    def test_grid_filled_from_dimensions(self, row_config_data: dict[str, Any]) -> None:
        row_config_data["layout"] = {
            "type": "grid",
            "rows": 2,
            "cols": 4,
            "frame": {"width": 10, "height": 12, "hanging_offset": 2},
        }
        layout = _state(row_config_data).layout
        assert layout.kind is LayoutType.GRID
        assert layout.frame_count == 8
        assert (layout.grid_rows, layout.grid_cols) == (2, 4)

    def test_furniture(self, row_config_data: dict[str, Any]) -> None:
        row_config_data["anchor"] = {"vertical": "furniture", "vertical_offset": 8}
        row_config_data["furniture"] = {"width": 84, "height": 34, "alignment": "span"}
        state = _state(row_config_data)
        assert state.anchor.vertical is VerticalAnchor.FURNITURE
        assert state.furniture.width == 84.0
        assert state.furniture.alignment.value == "span"

    def test_gallery_frames_get_ids(self, row_config_data: dict[str, Any]) -> None:
        row_config_data["layout"] = {
            "type": "gallery",
            "frames": [
                {"id": 4, "width": 10, "height": 10, "x": 5, "y": 6},
                {"width": 12, "height": 8, "name": "Mirror"},
            ],
        }
        layout = _state(row_config_data).layout
        assert isinstance(layout, FreeformLayout)
        assert [f.id for f in layout.frames] == [4, 5]
        assert [f.name for f in layout.frames] == ["Frame 5", "Mirror"]
        assert (layout.frames[0].x, layout.frames[0].y) == (5.0, 6.0)

    def test_gallery_from_template(self, row_config_data: dict[str, Any]) -> None:
        row_config_data["layout"] = {
            "type": "gallery",
            "template": "triptych",
            "template_width": 60,
            "snap_enabled": True,
        }
        layout = _state(row_config_data).layout
        assert len(layout.frames) == 3
        assert layout.snap_enabled is True
        right = max(f.x + f.width for f in layout.frames)
        left = min(f.x for f in layout.frames)
        assert right - left == pytest.approx(60.0)

    def test_unknown_template(self, row_config_data: dict[str, Any]) -> None:
        row_config_data["layout"] = {"type": "gallery", "template": "mosaic"}
        with pytest.raises(ConfigError) as exc_info:
            _state(row_config_data)
        assert exc_info.value.error_type == "validation"
        assert exc_info.value.details[0]["path"] == "layout.template"


class TestStateToConfig:
    """Tests for state_to_config."""

    def test_default_state_round_trips(self) -> None:
        config = state_to_config(CalculatorState())
        assert config.schema_version == CURRENT_SCHEMA_VERSION
        assert config_to_state(config) == CalculatorState()

    def test_gallery_state_round_trips(self, gallery_state: CalculatorState) -> None:
        config = state_to_config(gallery_state)
        assert isinstance(config.layout, GalleryLayoutConfig)
        assert config_to_state(config) == gallery_state

    def test_written_in_centimetres(self) -> None:
        state = CalculatorState(furniture=FurnitureSpec(width=50.0, height=30.0))
        config = state_to_config(state, "cm")
        assert config.unit is Unit.CENTIMETERS
        assert config.wall.width == pytest.approx(304.8)
        assert config.furniture.width == pytest.approx(127.0)
        assert config_to_state(config).wall.width == pytest.approx(120.0)

    def test_hanging_written_explicitly(self) -> None:
        state = CalculatorState()
        config = state_to_config(state)
        assert config.hanging.type is HangingType.SINGLE
        assert config.hanging.hook_inset == 3.0
