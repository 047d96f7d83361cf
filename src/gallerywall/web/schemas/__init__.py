"""Pydantic schemas for the REST API."""

from gallerywall.web.schemas.requests import (
    ConfigValidateRequest,
    LayoutFromConfigRequest,
    LayoutFromLinkRequest,
    LinkRequest,
)
from gallerywall.web.schemas.responses import (
    ErrorResponseSchema,
    FramePositionSchema,
    GalleryTemplateListSchema,
    GalleryTemplateSchema,
    LayoutOutputSchema,
    LinkSchema,
    TemplateContentSchema,
    TemplateListItemSchema,
    TemplateListSchema,
    ValidationResultSchema,
    WallSchema,
)

__all__ = [
    # Requests
    "ConfigValidateRequest",
    "LayoutFromConfigRequest",
    "LayoutFromLinkRequest",
    "LinkRequest",
    # Responses
    "ErrorResponseSchema",
    "FramePositionSchema",
    "GalleryTemplateListSchema",
    "GalleryTemplateSchema",
    "LayoutOutputSchema",
    "LinkSchema",
    "TemplateContentSchema",
    "TemplateListItemSchema",
    "TemplateListSchema",
    "ValidationResultSchema",
    "WallSchema",
]
