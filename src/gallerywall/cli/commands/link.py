"""Link command for sharing layouts as URLs."""

from pathlib import Path
from typing import Annotated

import typer

from gallerywall.application.config import (
    ConfigError,
    config_to_state,
    encode_state,
    load_config,
)


def link_command(
    config_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON configuration file"),
    ],
    base_url: Annotated[
        str | None,
        typer.Option("--base-url", help="Prefix the query string with this URL"),
    ] = None,
) -> None:
    """Print a shareable link for a layout configuration.

    The link can be passed back to `gallerywall layout --link`.

    Examples:
        gallerywall link living-room.json
        gallerywall link living-room.json --base-url https://example.com/plan
    """
    try:
        state = config_to_state(load_config(config_file))
    except ConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    query = encode_state(state)
    if base_url is None:
        typer.echo(f"?{query}" if query else "?")
    else:
        typer.echo(f"{base_url}?{query}" if query else base_url)
