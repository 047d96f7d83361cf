"""Starter configurations and gallery templates.

This package provides bundled starter layout files and a TemplateManager
class for accessing them alongside the built-in gallery templates.
"""

from gallerywall.application.templates.manager import (
    TEMPLATE_METADATA,
    TemplateManager,
    TemplateNotFoundError,
)

__all__ = [
    "TemplateManager",
    "TemplateNotFoundError",
    "TEMPLATE_METADATA",
]
