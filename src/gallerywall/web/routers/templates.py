"""Template management endpoints."""

import json

from fastapi import APIRouter

from gallerywall.application.templates.manager import TEMPLATE_METADATA
from gallerywall.web.dependencies import TemplateManagerDep
from gallerywall.web.schemas.responses import (
    ErrorResponseSchema,
    GalleryTemplateListSchema,
    GalleryTemplateSchema,
    TemplateContentSchema,
    TemplateListItemSchema,
    TemplateListSchema,
)

router = APIRouter(prefix="/templates", tags=["templates"])


@router.get("", response_model=TemplateListSchema)
async def list_templates(
    manager: TemplateManagerDep,
) -> TemplateListSchema:
    """List all starter configurations.

    Args:
        manager: Injected TemplateManager.

    Returns:
        List of available templates with names and descriptions.
    """
    templates = [
        TemplateListItemSchema(name=name, description=desc)
        for name, desc in manager.list_templates()
    ]
    return TemplateListSchema(templates=templates)


@router.get("/gallery", response_model=GalleryTemplateListSchema)
async def list_gallery_templates(
    manager: TemplateManagerDep,
) -> GalleryTemplateListSchema:
    """List the built-in gallery arrangements."""
    return GalleryTemplateListSchema(
        templates=[
            GalleryTemplateSchema(
                id=template.id,
                name=template.name,
                description=template.description,
                frame_count=template.frame_count,
                aspect_ratio=template.aspect_ratio,
            )
            for template in manager.list_gallery_templates()
        ]
    )


@router.get(
    "/{name}",
    response_model=TemplateContentSchema,
    responses={404: {"model": ErrorResponseSchema}},
)
async def get_template(
    name: str,
    manager: TemplateManagerDep,
) -> TemplateContentSchema:
    """Get the content of a starter configuration.

    Raises:
        TemplateNotFoundError: If template does not exist (handled by exception handler).
    """
    content = json.loads(manager.get_template(name))
    return TemplateContentSchema(
        name=name,
        description=TEMPLATE_METADATA.get(name, ""),
        content=content,
    )
