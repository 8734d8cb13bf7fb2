"""Engine and statement helpers for the SQL backend."""
from __future__ import annotations

import logging
import os
from typing import Any, Mapping

from sqlalchemy import create_engine, text
from sqlalchemy.engine import make_url
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.pool import NullPool

from taskapp.core.errors import StorageError
from taskapp.db.models import Base

logger = logging.getLogger(__name__)


class Store:
    """
    Durable storage for task rows.

    Each call to ``execute`` checks out a fresh connection and closes it when
    the statement's transaction ends; nothing is pooled or shared between
    requests.
    """

    def __init__(self, url: str, *, echo: bool = False) -> None:
        url = (url or "").strip()
        if not url:
            raise StorageError("DATABASE_URL must be configured to use the SQL backend.")
        self.url = url
        try:
            self.engine = create_engine(url, future=True, echo=echo, poolclass=NullPool)
        except (SQLAlchemyError, ValueError) as exc:
            raise StorageError(f"Invalid database URL: {exc}") from exc

    @classmethod
    def from_settings(cls, settings) -> "Store":
        return cls(settings.database_url, echo=settings.sql_echo)

    def execute(self, statement: Any, params: Mapping[str, Any] | None = None) -> list:
        """
        Run a parameterized statement inside its own transaction.

        ``statement`` is either a SQL string (bound with ``:name`` parameters)
        or a SQLAlchemy Core statement. Returns the result rows as mappings,
        or an empty list for statements that return nothing.
        """
        if isinstance(statement, str):
            statement = text(statement)
        try:
            with self.engine.begin() as conn:
                result = conn.execute(statement, dict(params or {}))
                if not result.returns_rows:
                    return []
                return list(result.mappings().all())
        except SQLAlchemyError as exc:
            logger.error("Statement failed on %s: %s", self._safe_url(), exc, exc_info=True)
            raise StorageError(str(exc)) from exc

    def create_schema(self) -> None:
        """Create missing tables. Existing tables are left untouched."""
        self._ensure_sqlite_dir()
        try:
            Base.metadata.create_all(bind=self.engine)
        except SQLAlchemyError as exc:
            logger.error("Schema bootstrap failed on %s: %s", self._safe_url(), exc)
            raise StorageError(str(exc)) from exc
        logger.info("Schema ready on %s", self._safe_url())

    def dispose(self) -> None:
        self.engine.dispose()

    def _safe_url(self) -> str:
        return make_url(self.url).render_as_string(hide_password=True)

    def _ensure_sqlite_dir(self) -> None:
        url = make_url(self.url)
        if url.get_backend_name() != "sqlite":
            return
        database = url.database or ""
        if not database or database == ":memory:" or database.startswith("file:"):
            return
        parent = os.path.dirname(database)
        if parent:
            os.makedirs(parent, exist_ok=True)
