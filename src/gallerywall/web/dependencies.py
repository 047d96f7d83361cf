"""FastAPI dependency injection for layout services."""

from typing import Annotated

from fastapi import Depends

from gallerywall.application import ComputeLayoutCommand
from gallerywall.application.templates.manager import TemplateManager


def get_compute_command() -> ComputeLayoutCommand:
    """Dependency for ComputeLayoutCommand."""
    return ComputeLayoutCommand()


def get_template_manager() -> TemplateManager:
    """Dependency for TemplateManager."""
    return TemplateManager()


# Type aliases for cleaner endpoint signatures
ComputeCommandDep = Annotated[ComputeLayoutCommand, Depends(get_compute_command)]
TemplateManagerDep = Annotated[TemplateManager, Depends(get_template_manager)]
