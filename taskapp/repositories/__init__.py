"""
Persistence adapters.

Repositories map raw store rows to domain entities. Routers depend on the
repository instance held in ``app.state`` rather than touching the store.
"""

from .task_repository import TaskRepository

__all__ = ["TaskRepository"]
