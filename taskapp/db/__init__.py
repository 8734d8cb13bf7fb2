"""Database helpers (store, models)."""

from .models import Base, TaskModel
from .store import Store

__all__ = ["Base", "TaskModel", "Store"]
