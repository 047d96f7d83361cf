"""Templates commands for gallery templates and starter configurations.

This module provides the `templates` command group with subcommands for
listing the built-in gallery templates and starter configurations, and for
initializing a configuration file from a starter.
"""

from pathlib import Path
from typing import Annotated

import typer

from gallerywall.application.templates import TemplateManager, TemplateNotFoundError

templates_app = typer.Typer(
    name="templates",
    help="List gallery templates and create starter configurations.",
)


@templates_app.command(name="list")
def list_templates() -> None:
    """List starter configurations and built-in gallery templates.

    Example:
        gallerywall templates list
    """
    manager = TemplateManager()
    starters = manager.list_templates()
    galleries = manager.list_gallery_templates()

    typer.echo("Starter configurations:")
    typer.echo()
    name_width = max((len(name) for name, _ in starters), default=0)
    for name, description in starters:
        typer.echo(f"  {name:<{name_width}}  - {description}")

    typer.echo()
    typer.echo("Gallery templates (use as layout.template in a gallery layout):")
    typer.echo()
    id_width = max((len(t.id) for t in galleries), default=0)
    for template in galleries:
        typer.echo(
            f"  {template.id:<{id_width}}  - {template.description} "
            f"({template.frame_count} frames)"
        )

    typer.echo()
    typer.echo(
        "Use 'gallerywall templates init <name>' to create a configuration file "
        "from a starter."
    )


@templates_app.command(name="init")
def init_template(
    name: Annotated[
        str,
        typer.Argument(help="Name of the starter configuration"),
    ],
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Output file path (default: <name>.json)"),
    ] = None,
    force: Annotated[
        bool,
        typer.Option("--force", "-f", help="Overwrite existing file"),
    ] = False,
) -> None:
    """Initialize a new configuration file from a starter.

    Examples:
        gallerywall templates init above-sofa
        gallerywall templates init grid --output hallway.json
        gallerywall templates init row --force
    """
    manager = TemplateManager()
    if output is None:
        output = Path(f"{name}.json")

    try:
        manager.init_template(name, output, force=force)
    except TemplateNotFoundError:
        available = ", ".join(n for n, _ in manager.list_templates())
        typer.echo(f"Error: Template not found: {name}", err=True)
        typer.echo(f"Available templates: {available}", err=True)
        raise typer.Exit(code=1)
    except FileExistsError:
        typer.echo(f"Error: File already exists: {output}", err=True)
        typer.echo("Use --force to overwrite.", err=True)
        raise typer.Exit(code=1)
    except OSError as e:
        typer.echo(f"Error: Could not write file: {e}", err=True)
        raise typer.Exit(code=1)

    typer.echo(f"Created: {output}")
