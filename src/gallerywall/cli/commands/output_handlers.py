"""Output format handling for the layout command."""

from __future__ import annotations

from pathlib import Path

import typer

from gallerywall.application.dtos import LayoutOutput
from gallerywall.infrastructure import (
    HangingInstructionsFormatter,
    JsonExporter,
    LayoutDiagramFormatter,
    MeasurementTableFormatter,
)

__all__ = [
    "OUTPUT_FORMATS",
    "render_output",
    "write_output",
]

OUTPUT_FORMATS = ("all", "text", "instructions", "diagram", "json")


def render_output(result: LayoutOutput, output_format: str, fractional: bool = False) -> str:
    """Render a layout result in one of OUTPUT_FORMATS.

    ``all`` renders the diagram, the measurement table and the
    instructions, one after the other.
    """
    if output_format == "json":
        return JsonExporter().export(result)
    if output_format == "text":
        return MeasurementTableFormatter().format(result)
    if output_format == "instructions":
        return HangingInstructionsFormatter(fractional=fractional).format(result)
    if output_format == "diagram":
        return LayoutDiagramFormatter().format(result)

    sections = [
        LayoutDiagramFormatter().format(result),
        MeasurementTableFormatter().format(result),
        HangingInstructionsFormatter(fractional=fractional).format(result),
    ]
    return "\n\n".join(sections)


def write_output(content: str, output_file: Path | None) -> None:
    """Echo ``content`` or write it to ``output_file``."""
    if output_file is None:
        typer.echo(content)
        return
    try:
        output_file.write_text(content + "\n", encoding="utf-8")
    except OSError as e:
        typer.echo(f"Error: Could not write file: {e}", err=True)
        raise typer.Exit(code=1)
    typer.echo(f"Wrote {output_file}")
