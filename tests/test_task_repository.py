"""
Repository tests against a temporary SQLite database.
"""
from __future__ import annotations

import logging
import sys
from pathlib import Path

import pytest

# Garante que o pacote taskapp seja importável durante os testes locais
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from taskapp.core.errors import NotFoundError, StorageError, ValidationError  # noqa: E402
from taskapp.db.store import Store  # noqa: E402
from taskapp.repositories.task_repository import TaskRepository  # noqa: E402


@pytest.fixture()
def store(tmp_path):
    """Store apontando para um SQLite temporário, com schema criado."""
    db_file = tmp_path / "db" / "tasks.db"
    store = Store(f"sqlite:///{db_file}")
    store.create_schema()
    yield store
    store.dispose()


@pytest.fixture()
def repo(store):
    return TaskRepository(store)


def test_create_then_find_all_lists_task_once(repo):
    created = repo.create("X", "Y")
    tasks = repo.find_all()
    assert [t.id for t in tasks].count(created.id) == 1
    assert len(tasks) == 1
    assert tasks[0].title == "X"


def test_ids_are_unique_and_ascending(repo):
    first = repo.create("first", "")
    second = repo.create("second", "")
    assert first.id != second.id
    assert [t.title for t in repo.find_all()] == ["first", "second"]


def test_deleted_ids_are_not_reused(repo):
    first = repo.create("first", "")
    repo.delete(first.id)
    again = repo.create("again", "")
    assert again.id > first.id


def test_find_by_id_returns_stored_values(repo):
    created = repo.create(title="X", description="Y")
    task = repo.find_by_id(created.id)
    assert task.title == "X"
    assert task.description == "Y"
    assert task.id == created.id


def test_find_by_id_missing_raises(repo):
    with pytest.raises(NotFoundError) as info:
        repo.find_by_id(42)
    assert info.value.task_id == 42


def test_update_overwrites_and_keeps_id(repo):
    created = repo.create("old", "old description")
    updated = repo.update(created.id, "new", "new description")
    assert updated.id == created.id
    task = repo.find_by_id(created.id)
    assert (task.id, task.title, task.description) == (created.id, "new", "new description")


def test_update_missing_raises(repo):
    with pytest.raises(NotFoundError):
        repo.update(7, "title", "description")


def test_delete_then_find_raises(repo):
    created = repo.create("doomed", "")
    repo.delete(created.id)
    with pytest.raises(NotFoundError):
        repo.find_by_id(created.id)


def test_delete_missing_is_noop(repo):
    repo.create("keep", "")
    repo.delete(999)
    assert len(repo.find_all()) == 1


def test_oversized_values_are_rejected(repo):
    with pytest.raises(ValidationError) as info:
        repo.create("t" * 65, "d" * 65)
    assert set(info.value.errors) == {"title", "description"}
    assert repo.find_all() == []

    created = repo.create("t" * 64, "")
    with pytest.raises(ValidationError):
        repo.update(created.id, "ok", "d" * 65)
    assert repo.find_by_id(created.id).title == "t" * 64


def test_count(repo):
    assert repo.count() == 0
    repo.create("a", "")
    repo.create("b", "")
    assert repo.count() == 2


def test_store_execute_accepts_raw_sql(store, repo):
    repo.create("raw", "sql")
    rows = store.execute("SELECT title, description FROM tasks WHERE title = :title", {"title": "raw"})
    assert rows[0]["description"] == "sql"
    assert store.execute("DELETE FROM tasks") == []


def test_store_failure_raises_storage_error(tmp_path):
    # Schema nunca criado: a tabela nao existe
    store = Store(f"sqlite:///{tmp_path / 'empty.db'}")
    with pytest.raises(StorageError):
        TaskRepository(store).find_all()
    store.dispose()


def test_store_requires_url():
    with pytest.raises(StorageError):
        Store("")


def test_create_tables_bootstrap_is_idempotent(tmp_path):
    from taskapp.db.create_tables import create_all

    url = f"sqlite:///{tmp_path / 'nested' / 'boot.db'}"
    store = create_all(url)
    TaskRepository(store).create("survives", "")
    store.dispose()

    store = create_all(url)
    assert [t.title for t in TaskRepository(store).find_all()] == ["survives"]
    store.dispose()


def test_delete_logs_only_when_a_row_is_removed(repo, caplog):
    caplog.set_level(logging.DEBUG, logger="taskapp.repositories.task_repository")
    created = repo.create("logged", "")
    caplog.clear()

    repo.delete(created.id + 100)
    assert not [r for r in caplog.records if r.levelno == logging.INFO]

    repo.delete(created.id)
    infos = [r.getMessage() for r in caplog.records if r.levelno == logging.INFO]
    assert infos == [f"Deleted task {created.id}"]
