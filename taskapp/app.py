"""Task manager application factory."""
from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware

from taskapp.core.config import Settings, get_settings
from taskapp.core.errors import NotFoundError, StorageError
from taskapp.core.logging_setup import setup_logging
from taskapp.db.store import Store
from taskapp.repositories.task_repository import TaskRepository
from taskapp.routers import tasks as tasks_router

logger = logging.getLogger(__name__)


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Inject baseline security headers (CSP, anti clickjacking, referrer policy)."""

    def __init__(self, app, *, enforce_hsts: bool) -> None:
        super().__init__(app)
        self._enforce_hsts = enforce_hsts

    async def dispatch(self, request, call_next):
        response = await call_next(request)
        response.headers.setdefault(
            "Content-Security-Policy",
            "default-src 'self'; style-src 'self' 'unsafe-inline'",
        )
        response.headers.setdefault("X-Frame-Options", "DENY")
        response.headers.setdefault("X-Content-Type-Options", "nosniff")
        response.headers.setdefault("Referrer-Policy", "no-referrer-when-downgrade")
        if self._enforce_hsts:
            response.headers.setdefault("Strict-Transport-Security", "max-age=31536000; includeSubDomains")
        return response


def _error_page(request: Request, status_code: int, message: str) -> HTMLResponse:
    templates: Jinja2Templates = request.app.state.templates
    return templates.TemplateResponse(
        request,
        "error.html",
        {"status_code": status_code, "message": message},
        status_code=status_code,
    )


def install_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(NotFoundError)
    async def not_found_handler(request: Request, exc: NotFoundError):
        logger.debug("404 %s: %s", request.url.path, exc)
        return _error_page(request, 404, "Task not found")

    @app.exception_handler(StorageError)
    async def storage_error_handler(request: Request, exc: StorageError):
        logger.error("Storage failure on %s %s: %s", request.method, request.url.path, exc)
        return _error_page(request, 500, "Something went wrong while talking to the database")

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        message = "Page not found" if exc.status_code == 404 else str(exc.detail)
        return _error_page(request, exc.status_code, message)


def create_app(
    settings: Settings | None = None,
    *,
    store: Store | None = None,
    configure_logging: bool = True,
) -> FastAPI:
    """Factory compatible with ``uvicorn taskapp.app:create_app --factory``."""
    settings = settings or get_settings()
    if configure_logging:
        setup_logging(settings.log_level)

    store = store or Store.from_settings(settings)
    store.create_schema()

    app = FastAPI(title="Task Manager")
    app.state.settings = settings
    app.state.store = store
    app.state.task_repository = TaskRepository(store)
    app.state.templates = Jinja2Templates(directory=settings.templates_dir)

    app.add_middleware(SecurityHeadersMiddleware, enforce_hsts=settings.app_env == "prod")
    install_error_handlers(app)
    app.include_router(tasks_router.router)
    logger.info("Task manager ready (env=%s)", settings.app_env)
    return app
