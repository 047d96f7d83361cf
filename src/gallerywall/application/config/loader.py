"""Reading layout configuration files.

Every way a file can fail to load (missing, unreadable, not JSON, rejected by
the schema) surfaces as a ConfigError. The error carries a readable message
for the CLI and structured ``details`` for the HTTP API.
"""

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from gallerywall.application.config.schema import GalleryWallConfiguration

logger = logging.getLogger(__name__)


class ConfigError(Exception):
    """A configuration could not be loaded.

    Attributes:
        message: Human readable summary
        error_type: One of file_not_found, permission_denied,
            file_read_error, json_parse, validation, query_string
        path: The file involved, when there is one
        details: Structured entries; line/column for JSON errors, one
            path/message/value entry per field for validation errors
    """

    def __init__(
        self,
        message: str,
        error_type: str = "unknown",
        path: Path | None = None,
        details: list[dict[str, Any]] | None = None,
    ) -> None:
        self.message = message
        self.error_type = error_type
        self.path = path
        self.details = details or []
        super().__init__(message)

    def __str__(self) -> str:
        return self.message


def _dotted(loc: tuple[str | int, ...]) -> str:
    """Render a pydantic error location as a dotted path.

    Examples:
        >>> _dotted(("wall", "width"))
        'wall.width'
        >>> _dotted(("layout", "gallery", "frames", 2, "height"))
        'layout.gallery.frames[2].height'
    """
    parts: list[str] = []
    for segment in loc:
        if isinstance(segment, int):
            parts.append(f"[{segment}]")
        else:
            parts.append(f".{segment}" if parts else str(segment))
    return "".join(parts)


def _field_errors(error: PydanticValidationError) -> list[dict[str, Any]]:
    return [
        {
            "path": _dotted(item["loc"]),
            "message": item["msg"],
            "value": item.get("input"),
            "error_type": item["type"],
        }
        for item in error.errors()
    ]


def _summary(details: list[dict[str, Any]]) -> str:
    out = [f"Invalid configuration ({len(details)} problem(s)):"]
    for detail in details:
        entry = f"  - {detail['path'] or '(root)'}: {detail['message']}"
        value = detail.get("value")
        # Nested objects are too noisy to echo back.
        if value is not None and not isinstance(value, dict):
            entry += f" (got: {value!r})"
        out.append(entry)
    return "\n".join(out)


def _read_json(path: Path) -> Any:
    if not path.exists():
        raise ConfigError(
            f"Config file not found: {path}", error_type="file_not_found", path=path
        )

    try:
        text = path.read_text(encoding="utf-8")
    except PermissionError:
        raise ConfigError(
            f"Cannot read config file (permission denied): {path}",
            error_type="permission_denied",
            path=path,
        )
    except OSError as e:
        raise ConfigError(
            f"Cannot read config file {path}: {e}",
            error_type="file_read_error",
            path=path,
        )

    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise ConfigError(
            f"{path} is not valid JSON (line {e.lineno}, column {e.colno}): {e.msg}",
            error_type="json_parse",
            path=path,
            details=[{"line": e.lineno, "column": e.colno, "message": e.msg}],
        )


def _validate(data: Any, path: Path | None = None) -> GalleryWallConfiguration:
    try:
        return GalleryWallConfiguration.model_validate(data)
    except PydanticValidationError as e:
        details = _field_errors(e)
        logger.debug(f"Configuration rejected: {len(details)} field error(s)")
        raise ConfigError(
            _summary(details), error_type="validation", path=path, details=details
        )


def load_config(path: Path) -> GalleryWallConfiguration:
    """Load and validate a layout configuration file.

    Raises:
        ConfigError: If the file cannot be read, parsed or validated;
            ``error_type`` says which.

    Example:
        >>> try:
        ...     config = load_config(Path("living-room.json"))
        ... except ConfigError as e:
        ...     print(e.error_type, e.message)
    """
    logger.debug(f"Loading config from {path}")
    return _validate(_read_json(path), path)


def load_config_from_dict(data: dict[str, Any]) -> GalleryWallConfiguration:
    """Validate an already parsed configuration, such as an API request body.

    Raises:
        ConfigError: If the data fails validation.
    """
    return _validate(data)
