"""Unit tests for the configuration schema models."""

from typing import Any

import pytest
from pydantic import ValidationError

from gallerywall.application.config import (
    FrameConfig,
    GalleryLayoutConfig,
    GalleryWallConfiguration,
    GridLayoutConfig,
    RowLayoutConfig,
)
from gallerywall.domain import Unit


class TestGalleryWallConfiguration:
    """Tests for the root configuration model."""

    def test_minimal_config(self, row_config_data: dict[str, Any]) -> None:
        config = GalleryWallConfiguration.model_validate(row_config_data)
        assert config.unit is Unit.INCHES
        assert isinstance(config.layout, RowLayoutConfig)
        assert config.anchor.vertical_offset is None
        assert config.furniture is None

    def test_unknown_field_rejected(self, row_config_data: dict[str, Any]) -> None:
        row_config_data["wall"]["depth"] = 4
        with pytest.raises(ValidationError):
            GalleryWallConfiguration.model_validate(row_config_data)

    @pytest.mark.parametrize("version", ["1.0", "1.1", "1.9"])
    def test_supported_versions(self, row_config_data: dict[str, Any], version: str) -> None:
        row_config_data["schema_version"] = version
        config = GalleryWallConfiguration.model_validate(row_config_data)
        assert config.schema_version == version

    @pytest.mark.parametrize("version", ["2.0", "one", "1"])
    def test_unsupported_versions(self, row_config_data: dict[str, Any], version: str) -> None:
        row_config_data["schema_version"] = version
        with pytest.raises(ValidationError):
            GalleryWallConfiguration.model_validate(row_config_data)

    def test_layout_type_selects_model(self, row_config_data: dict[str, Any]) -> None:
        row_config_data["layout"]["type"] = "grid"
        config = GalleryWallConfiguration.model_validate(row_config_data)
        assert isinstance(config.layout, GridLayoutConfig)

    def test_unknown_layout_type(self, row_config_data: dict[str, Any]) -> None:
        row_config_data["layout"]["type"] = "circle"
        with pytest.raises(ValidationError):
            GalleryWallConfiguration.model_validate(row_config_data)

    def test_wall_must_be_positive(self, row_config_data: dict[str, Any]) -> None:
        row_config_data["wall"]["width"] = 0
        with pytest.raises(ValidationError):
            GalleryWallConfiguration.model_validate(row_config_data)


class TestFrameConfig:
    """Tests for FrameConfig."""

    def test_hanging_offset_defaults_to_zero(self) -> None:
        assert FrameConfig(width=10, height=12).hanging_offset == 0.0

    def test_hanging_offset_cannot_exceed_height(self) -> None:
        with pytest.raises(ValidationError, match="cannot exceed"):
            FrameConfig(width=10, height=12, hanging_offset=13)


class TestGridLayoutConfig:
    """Tests for GridLayoutConfig."""

    frame = {"width": 10, "height": 10}

    def test_rows_and_cols_fill_grid(self) -> None:
        config = GridLayoutConfig(type="grid", frame=self.frame, rows=2, cols=3)
        assert config.resolved_frame_count == 6

    def test_frame_count_wins(self) -> None:
        config = GridLayoutConfig(type="grid", frame=self.frame, frame_count=4, rows=2, cols=3)
        assert config.resolved_frame_count == 4

    def test_count_or_both_dimensions_required(self) -> None:
        with pytest.raises(ValidationError, match="frame_count is required"):
            GridLayoutConfig(type="grid", frame=self.frame, rows=2)


class TestGalleryLayoutConfig:
    """Tests for GalleryLayoutConfig."""

    def test_frames_and_template_exclusive(self) -> None:
        with pytest.raises(ValidationError, match="either frames or template"):
            GalleryLayoutConfig(
                type="gallery",
                frames=[{"width": 10, "height": 10}],
                template="triptych",
            )

    def test_duplicate_ids_rejected(self) -> None:
        with pytest.raises(ValidationError, match="Duplicate frame ids"):
            GalleryLayoutConfig(
                type="gallery",
                frames=[
                    {"id": 1, "width": 10, "height": 10},
                    {"id": 1, "width": 12, "height": 10},
                ],
            )

    def test_empty_gallery_allowed(self) -> None:
        config = GalleryLayoutConfig(type="gallery")
        assert config.frames == []
        assert config.template is None
