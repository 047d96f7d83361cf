"""CLI command implementations for the gallerywall application.

This package contains subcommands for the gallerywall CLI, including:
- validate: Validate a configuration file
- link: Turn a configuration file into a shareable link
- templates: List gallery templates and create starter configurations
"""

from gallerywall.cli.commands.link import link_command
from gallerywall.cli.commands.templates import templates_app
from gallerywall.cli.commands.validate import validate_command

__all__ = ["link_command", "templates_app", "validate_command"]
