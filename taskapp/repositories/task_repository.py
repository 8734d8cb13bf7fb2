"""CRUD helpers mapping task rows to Task entities."""
from __future__ import annotations

import logging

from sqlalchemy import delete, func, insert, select, update

from taskapp.core.errors import NotFoundError, ValidationError
from taskapp.db.models import TaskModel
from taskapp.db.store import Store
from taskapp.domain.tasks import Task, check_lengths

logger = logging.getLogger(__name__)

_tasks = TaskModel.__table__


class TaskRepository:
    """Task persistence on top of an explicit Store."""

    def __init__(self, store: Store) -> None:
        self.store = store

    def create(self, title: str, description: str) -> Task:
        self._check(title, description)
        stmt = insert(_tasks).values(title=title, description=description).returning(_tasks.c.id)
        rows = self.store.execute(stmt)
        task = Task(id=int(rows[0]["id"]), title=title, description=description)
        logger.info("Created task %s", task.id)
        return task

    def find_all(self) -> list[Task]:
        rows = self.store.execute(select(_tasks).order_by(_tasks.c.id))
        return [Task.from_row(row) for row in rows]

    def find_by_id(self, task_id: int) -> Task:
        rows = self.store.execute(select(_tasks).where(_tasks.c.id == task_id))
        if not rows:
            raise NotFoundError(task_id)
        return Task.from_row(rows[0])

    def update(self, task_id: int, title: str, description: str) -> Task:
        self._check(title, description)
        stmt = (
            update(_tasks)
            .where(_tasks.c.id == task_id)
            .values(title=title, description=description)
            .returning(_tasks.c.id)
        )
        if not self.store.execute(stmt):
            raise NotFoundError(task_id)
        logger.info("Updated task %s", task_id)
        return self.find_by_id(task_id)

    def delete(self, task_id: int) -> None:
        # Missing ids are not an error
        rows = self.store.execute(delete(_tasks).where(_tasks.c.id == task_id).returning(_tasks.c.id))
        if rows:
            logger.info("Deleted task %s", task_id)
        else:
            logger.debug("Delete of missing task %s ignored", task_id)

    def count(self) -> int:
        rows = self.store.execute(select(func.count().label("total")).select_from(_tasks))
        return int(rows[0]["total"]) if rows else 0

    @staticmethod
    def _check(title: str, description: str) -> None:
        errors = check_lengths(title or "", description or "")
        if errors:
            raise ValidationError(errors)
