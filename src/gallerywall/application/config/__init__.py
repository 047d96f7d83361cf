"""Configuration schema, loading and sharing for gallery wall layouts.

Public API:
    - GalleryWallConfiguration: Root configuration model
    - WallConfig, FrameConfig, HangingConfig, AnchorConfig, FurnitureConfig
    - GridLayoutConfig, RowLayoutConfig, GalleryLayoutConfig: Layout variants
    - load_config: Load configuration from a JSON file
    - load_config_from_dict: Load configuration from a dictionary
    - ConfigError: Exception for configuration errors
    - config_to_state / state_to_config: Convert to and from CalculatorState
    - encode_state / decode_state: Query-string links

Example:
    >>> from pathlib import Path
    >>> from gallerywall.application.config import load_config, config_to_state
    >>>
    >>> state = config_to_state(load_config(Path("living-room.json")))
"""

from gallerywall.application.config.adapter import (
    CURRENT_SCHEMA_VERSION,
    config_to_state,
    state_to_config,
)
from gallerywall.application.config.loader import (
    ConfigError,
    load_config,
    load_config_from_dict,
)
from gallerywall.application.config.query_string import decode_state, encode_state
from gallerywall.application.config.schema import (
    SUPPORTED_VERSIONS,
    AnchorConfig,
    FrameConfig,
    FurnitureConfig,
    GalleryFrameConfig,
    GalleryLayoutConfig,
    GalleryWallConfiguration,
    GridLayoutConfig,
    HangingConfig,
    RowLayoutConfig,
    WallConfig,
)

__all__ = [
    "CURRENT_SCHEMA_VERSION",
    "SUPPORTED_VERSIONS",
    "AnchorConfig",
    "ConfigError",
    "FrameConfig",
    "FurnitureConfig",
    "GalleryFrameConfig",
    "GalleryLayoutConfig",
    "GalleryWallConfiguration",
    "GridLayoutConfig",
    "HangingConfig",
    "RowLayoutConfig",
    "WallConfig",
    "config_to_state",
    "decode_state",
    "encode_state",
    "load_config",
    "load_config_from_dict",
    "state_to_config",
]
