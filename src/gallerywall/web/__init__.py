"""FastAPI REST API for gallery wall layouts.

This module provides a REST API for computing hook positions, validating
configurations, sharing layouts as links and browsing templates.

Usage:
    uvicorn gallerywall.web:app --reload
"""

from gallerywall.web.app import app, create_app

__all__ = ["app", "create_app"]
