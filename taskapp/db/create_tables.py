"""Utility script to create the initial database schema."""
from __future__ import annotations

from taskapp.core.config import get_settings
from taskapp.core.errors import StorageError

from .store import Store


def create_all(database_url: str | None = None) -> Store:
    settings = get_settings()
    store = Store(database_url or settings.database_url, echo=settings.sql_echo)
    store.create_schema()
    return store


if __name__ == "__main__":
    try:
        create_all().dispose()
        print("Database tables created successfully.")
    except StorageError as exc:
        raise SystemExit(f"Failed to create tables: {exc}") from exc
