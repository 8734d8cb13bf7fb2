#!/usr/bin/env python3
"""
Cadastrar uma nova tarefa diretamente no banco configurado em DATABASE_URL.

Uso:
  python scripts/add_task.py --title "Comprar pao" [--description "padaria da esquina"]
"""
from __future__ import annotations

import argparse
import sys

from taskapp.core.config import get_settings
from taskapp.core.errors import ValidationError
from taskapp.db.store import Store
from taskapp.domain.tasks import TaskForm
from taskapp.repositories.task_repository import TaskRepository


def main() -> None:
    ap = argparse.ArgumentParser(description="Cadastrar tarefa")
    ap.add_argument("--title", required=True, help="Titulo da tarefa (max. 64 caracteres)")
    ap.add_argument("--description", default="", help="Descricao opcional (max. 64 caracteres)")
    ap.add_argument("--database-url", help="Sobrescreve DATABASE_URL")
    args = ap.parse_args()

    try:
        form = TaskForm.from_form({"title": args.title, "description": args.description})
    except ValidationError as exc:
        raise SystemExit(f"Tarefa invalida: {exc}")

    settings = get_settings()
    store = Store(args.database_url or settings.database_url, echo=settings.sql_echo)
    store.create_schema()
    task = TaskRepository(store).create(form.title, form.description)
    print("OK: tarefa cadastrada")
    print(f"  ID: {task.id}")
    print(f"  Titulo: {task.title}")
    if task.description:
        print(f"  Descricao: {task.description}")


if __name__ == "__main__":
    try:
        main()
    except Exception as exc:  # pragma: no cover - uso CLI
        sys.stderr.write(f"Erro: {exc}\n")
        raise SystemExit(1)
