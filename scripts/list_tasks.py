#!/usr/bin/env python3
"""
Listar as tarefas cadastradas, em ordem de id.

Uso:
  python scripts/list_tasks.py [--database-url sqlite:///db/task_manager_development.db]
"""
from __future__ import annotations

import argparse
import sys

from taskapp.core.config import get_settings
from taskapp.db.store import Store
from taskapp.repositories.task_repository import TaskRepository


def main() -> None:
    ap = argparse.ArgumentParser(description="Listar tarefas")
    ap.add_argument("--database-url", help="Sobrescreve DATABASE_URL")
    args = ap.parse_args()

    settings = get_settings()
    store = Store(args.database_url or settings.database_url)
    tasks = TaskRepository(store).find_all()
    if not tasks:
        print("Nenhuma tarefa cadastrada.")
        return
    for task in tasks:
        print(f"{task.id:>4}  {task.title}")
        if task.description:
            print(f"      {task.description}")


if __name__ == "__main__":
    try:
        main()
    except Exception as exc:  # pragma: no cover
        sys.stderr.write(f"Erro: {exc}\n")
        raise SystemExit(1)
