"""Personal site application."""
from __future__ import annotations

from fastapi import FastAPI

from taskapp.core.config import Settings, get_settings
from taskapp.core.logging_setup import setup_logging
from taskapp.routers import site as site_router


def create_site_app(settings: Settings | None = None, *, configure_logging: bool = True) -> FastAPI:
    """Factory compatible with ``uvicorn taskapp.site_app:create_site_app --factory``."""
    settings = settings or get_settings()
    if configure_logging:
        setup_logging(settings.log_level)
    app = FastAPI(title="Personal Site", docs_url=None, redoc_url=None, openapi_url=None)
    app.state.site_dir = settings.site_dir
    app.include_router(site_router.router)
    return app
