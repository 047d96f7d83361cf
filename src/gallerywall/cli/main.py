"""Typer CLI for gallery wall layouts."""

import logging
from dataclasses import replace
from pathlib import Path
from typing import Annotated

import typer

from gallerywall.application import ComputeLayoutCommand
from gallerywall.application.config import (
    ConfigError,
    config_to_state,
    decode_state,
    load_config,
)
from gallerywall.cli.commands import link_command, templates_app, validate_command
from gallerywall.cli.commands.output_handlers import (
    OUTPUT_FORMATS,
    render_output,
    write_output,
)
from gallerywall.domain import (
    AnchorSpec,
    CalculatorState,
    Distribution,
    FrameSpec,
    HangingSpec,
    HangingType,
    HorizontalAnchor,
    LayoutType,
    RegularLayout,
    Unit,
    VerticalAnchor,
    VerticalTarget,
    WallSpec,
    from_display_unit,
)

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="gallerywall",
    help="Work out where to put the hooks for a wall of picture frames.",
)

app.command(name="validate")(validate_command)
app.command(name="link")(link_command)
app.add_typer(templates_app, name="templates")


@app.callback()
def main(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable debug logging"),
    ] = False,
) -> None:
    """Plan gallery walls: frame positions, hook marks and measurements."""
    logging.basicConfig(format="%(levelname)s %(name)s: %(message)s")
    logging.getLogger("gallerywall").setLevel(
        logging.DEBUG if verbose else logging.WARNING
    )


def _parse_choice(value: str | None, enum, option: str):
    if value is None:
        return None
    try:
        return enum(value)
    except ValueError:
        choices = ", ".join(member.value for member in enum)
        typer.echo(f"Error: {option} must be one of: {choices}", err=True)
        raise typer.Exit(code=1)


@app.command()
def layout(
    config_file: Annotated[
        Path | None,
        typer.Option("--config", "-c", help="Path to JSON configuration file"),
    ] = None,
    link: Annotated[
        str | None,
        typer.Option("--link", "-l", help="Shared layout link or query string"),
    ] = None,
    wall_width: Annotated[
        float | None,
        typer.Option("--width", "-w", help="Wall width"),
    ] = None,
    wall_height: Annotated[
        float | None,
        typer.Option("--height", "-h", help="Wall height (floor to ceiling)"),
    ] = None,
    layout_type: Annotated[
        str | None,
        typer.Option("--type", "-t", help="Layout type: row, grid"),
    ] = None,
    count: Annotated[
        int | None,
        typer.Option("--count", "-n", help="Number of frames"),
    ] = None,
    rows: Annotated[
        int | None,
        typer.Option("--rows", help="Grid rows"),
    ] = None,
    cols: Annotated[
        int | None,
        typer.Option("--cols", help="Grid columns"),
    ] = None,
    frame_width: Annotated[
        float | None,
        typer.Option("--frame-width", help="Frame width"),
    ] = None,
    frame_height: Annotated[
        float | None,
        typer.Option("--frame-height", help="Frame height"),
    ] = None,
    hanging_offset: Annotated[
        float | None,
        typer.Option("--hanging-offset", help="Frame top edge down to the hook"),
    ] = None,
    spacing: Annotated[
        float | None,
        typer.Option("--spacing", "-s", help="Gap between frames"),
    ] = None,
    h_distribution: Annotated[
        str | None,
        typer.Option(
            "--h-distribution",
            help="Horizontal distribution: fixed, space-between, space-evenly, space-around",
        ),
    ] = None,
    anchor: Annotated[
        str | None,
        typer.Option("--anchor", help="Vertical anchor: floor, ceiling, center"),
    ] = None,
    anchor_offset: Annotated[
        float | None,
        typer.Option("--anchor-offset", help="Distance from the vertical anchor"),
    ] = None,
    align: Annotated[
        str | None,
        typer.Option("--align", help="Horizontal anchor: left, center, right"),
    ] = None,
    align_offset: Annotated[
        float | None,
        typer.Option("--align-offset", help="Distance from the horizontal anchor"),
    ] = None,
    to_edge: Annotated[
        bool,
        typer.Option("--to-edge", help="Measure the anchor offset to the frame edge, not the hook"),
    ] = False,
    hook_inset: Annotated[
        float | None,
        typer.Option("--dual-hooks", help="Hang on two hooks, this far in from each edge"),
    ] = None,
    unit: Annotated[
        str | None,
        typer.Option("--unit", "-u", help="Unit for input flags and output: in, cm"),
    ] = None,
    output_format: Annotated[
        str,
        typer.Option("--format", "-f", help="Output format: all, text, instructions, diagram, json"),
    ] = "all",
    fractional: Annotated[
        bool,
        typer.Option("--fractional", help="Show inches as tape-measure fractions"),
    ] = False,
    output_file: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Write output to this file"),
    ] = None,
) -> None:
    """Compute frame positions and hook measurements.

    The layout comes from a configuration file (--config), a shared link
    (--link), or the flags alone. Wall size flags override the other two
    sources; every other flag only applies when neither is given.

    Examples:
        gallerywall layout --width 120 --height 96 --count 3
        gallerywall layout --type grid --rows 2 --cols 3 --frame-width 16 --frame-height 20
        gallerywall layout --config living-room.json --format instructions
        gallerywall layout --link "?ww=144&fc=5" --unit cm
    """
    if output_format not in OUTPUT_FORMATS:
        typer.echo(
            f"Error: --format must be one of: {', '.join(OUTPUT_FORMATS)}", err=True
        )
        raise typer.Exit(code=1)
    if config_file is not None and link is not None:
        typer.echo("Error: use either --config or --link, not both", err=True)
        raise typer.Exit(code=1)

    display_unit = _parse_choice(unit, Unit, "--unit")

    try:
        if config_file is not None:
            config = load_config(config_file)
            state = config_to_state(config)
            display_unit = display_unit or config.unit
        elif link is not None:
            state = decode_state(link)
        else:
            state = _state_from_flags(
                display_unit or Unit.INCHES,
                layout_type=layout_type,
                count=count,
                rows=rows,
                cols=cols,
                frame_width=frame_width,
                frame_height=frame_height,
                hanging_offset=hanging_offset,
                spacing=spacing,
                h_distribution=h_distribution,
                anchor=anchor,
                anchor_offset=anchor_offset,
                align=align,
                align_offset=align_offset,
                to_edge=to_edge,
                hook_inset=hook_inset,
            )
    except ConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    display_unit = display_unit or Unit.INCHES
    if wall_width is not None or wall_height is not None:
        state = replace(
            state,
            wall=WallSpec(
                width=(
                    from_display_unit(wall_width, display_unit)
                    if wall_width is not None
                    else state.wall.width
                ),
                height=(
                    from_display_unit(wall_height, display_unit)
                    if wall_height is not None
                    else state.wall.height
                ),
            ),
        )

    logger.debug(
        f"Computing {state.layout_type.value} layout on a "
        f"{state.wall.width} x {state.wall.height} in wall"
    )
    result = ComputeLayoutCommand().execute(state, display_unit)
    if not result.is_valid:
        for error in result.errors:
            typer.echo(f"Error: {error}", err=True)
        raise typer.Exit(code=1)

    for warning in result.warnings:
        typer.echo(f"Warning: {warning}", err=True)

    write_output(render_output(result, output_format, fractional), output_file)


def _state_from_flags(
    unit: Unit,
    layout_type: str | None,
    count: int | None,
    rows: int | None,
    cols: int | None,
    frame_width: float | None,
    frame_height: float | None,
    hanging_offset: float | None,
    spacing: float | None,
    h_distribution: str | None,
    anchor: str | None,
    anchor_offset: float | None,
    align: str | None,
    align_offset: float | None,
    to_edge: bool,
    hook_inset: float | None,
) -> CalculatorState:
    """Build a regular-layout state from CLI flags in ``unit``."""
    defaults = CalculatorState()
    regular = RegularLayout()

    def length(value: float | None, default: float) -> float:
        return from_display_unit(value, unit) if value is not None else default

    kind = _parse_choice(layout_type, LayoutType, "--type") or regular.kind
    if kind is LayoutType.GALLERY:
        typer.echo("Error: gallery layouts need a configuration file or link", err=True)
        raise typer.Exit(code=1)

    frame_count = count
    if frame_count is None:
        frame_count = rows * cols if rows and cols else regular.frame_count
    frame = FrameSpec(
        width=length(frame_width, regular.frame.width),
        height=length(frame_height, regular.frame.height),
        hanging_offset=length(hanging_offset, regular.frame.hanging_offset),
    )

    return CalculatorState(
        wall=defaults.wall,
        hanging=(
            HangingSpec(type=HangingType.DUAL, hook_inset=from_display_unit(hook_inset, unit))
            if hook_inset is not None
            else defaults.hanging
        ),
        anchor=AnchorSpec(
            vertical=_parse_choice(anchor, VerticalAnchor, "--anchor")
            or defaults.anchor.vertical,
            vertical_offset=length(anchor_offset, defaults.anchor.vertical_offset),
            horizontal=_parse_choice(align, HorizontalAnchor, "--align")
            or defaults.anchor.horizontal,
            horizontal_offset=length(align_offset, defaults.anchor.horizontal_offset),
            vertical_target=VerticalTarget.EDGE if to_edge else VerticalTarget.HOOK,
        ),
        layout=RegularLayout(
            kind=kind,
            frame_count=frame_count,
            grid_rows=rows if kind is LayoutType.GRID else None,
            grid_cols=cols if kind is LayoutType.GRID else None,
            frame=frame,
            h_spacing=length(spacing, regular.h_spacing),
            v_spacing=length(spacing, regular.v_spacing),
            h_distribution=_parse_choice(h_distribution, Distribution, "--h-distribution")
            or regular.h_distribution,
        ),
    )


if __name__ == "__main__":
    app()
