"""Validate command for layout configuration files.

A file is first loaded against the configuration schema, then laid out so
that layout problems (frames off the wall, hooks that do not fit a frame)
can be reported as warnings.
"""

from pathlib import Path
from typing import Annotated

import typer

from gallerywall.application import ComputeLayoutCommand
from gallerywall.application.config import ConfigError, config_to_state, load_config


def _load_error_lines(error: ConfigError) -> list[str]:
    """Describe a load failure, one line per problem."""
    if error.error_type == "file_not_found":
        return [f"File not found: {error.path}"]
    if error.error_type == "json_parse":
        lines = ["Invalid JSON syntax"]
        lines.extend(
            f"  Line {d.get('line', '?')}, Column {d.get('column', '?')}: "
            f"{d.get('message', 'unknown error')}"
            for d in error.details
        )
        return lines
    if error.error_type != "validation":
        return [error.message]

    lines = []
    for detail in error.details:
        lines.append(f"{detail.get('path') or '(root)'}: {detail.get('message')}")
        value = detail.get("value")
        if value is not None and not isinstance(value, dict):
            lines.append(f"  Value: {value!r}")
    return lines


def _echo_section(title: str, lines: list[str], err: bool = False) -> None:
    typer.echo(title, err=err)
    for line in lines:
        typer.echo(f"  {line}", err=err)
    typer.echo()


def validate_command(
    config_file: Annotated[
        Path,
        typer.Argument(help="Layout configuration file to check"),
    ],
) -> None:
    """Validate a layout configuration file.

    Exit codes:
        0 - the file is valid and lays out cleanly
        1 - the file cannot be used
        2 - the file is valid but the layout has warnings

    Example:
        gallerywall validate living-room.json
    """
    typer.echo(f"Checking {config_file}...")
    typer.echo()

    try:
        config = load_config(config_file)
        state = config_to_state(config)
    except ConfigError as e:
        _echo_section("Errors:", _load_error_lines(e), err=True)
        typer.echo("Validation failed.", err=True)
        raise typer.Exit(code=1)

    result = ComputeLayoutCommand().execute(state, config.unit)
    if not result.is_valid:
        _echo_section("Errors:", result.errors, err=True)
        typer.echo(f"Validation failed: {len(result.errors)} error(s)", err=True)
        raise typer.Exit(code=1)

    if result.warnings:
        _echo_section("Warnings:", result.warnings)
        typer.echo(f"Validation passed with {len(result.warnings)} warning(s)")
        raise typer.Exit(code=2)

    typer.echo("Validation passed. Configuration is valid.")
