"""Entry points for the task manager and personal site FastAPI apps."""
from taskapp.app import create_app
from taskapp.site_app import create_site_app

__all__ = ["create_app", "create_site_app"]
