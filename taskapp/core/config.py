"""
Configuration helpers.

Exposes a Settings object that reads environment variables (database URL,
template/site directories, log level) so that routers and the store do not
fetch os.environ directly.
"""

from dataclasses import dataclass
from functools import lru_cache
import os

BASE = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
ROOT = os.path.dirname(BASE)

DEFAULT_DATABASE_URL = "sqlite:///db/task_manager_development.db"


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    app_env: str
    database_url: str
    templates_dir: str
    site_dir: str
    log_level: str
    sql_echo: bool


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    def _bool(value: str | None, default: bool = False) -> bool:
        if value is None:
            return default
        return value.strip().lower() in {"1", "true", "yes", "on"}

    return Settings(
        app_env=(os.getenv("APP_ENV") or "dev").lower(),
        database_url=(os.getenv("DATABASE_URL") or DEFAULT_DATABASE_URL).strip(),
        templates_dir=os.getenv("TEMPLATES_DIR", os.path.join(ROOT, "templates")),
        site_dir=os.getenv("SITE_DIR", os.path.join(ROOT, "personal_site")),
        log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
        sql_echo=_bool(os.getenv("SQL_ECHO"), False),
    )
