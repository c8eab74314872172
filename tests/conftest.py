# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from taskpad.storage.kv_store import MemoryKeyValueStore, SqliteKeyValueStore
from taskpad.tasks.task_store import TaskStore


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with bootstrap and logging setup.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the environment.
    """
    data_dir = tmp_path / "data"
    return SimpleNamespace(
        app_name="taskpad-test",
        log_level="DEBUG",
        log_to_file=False,
        data_dir=data_dir,
        kv_db_path=data_dir / "store.sqlite3",
        tasks_key="tasks",
    )


@pytest.fixture()
def kv() -> MemoryKeyValueStore:
    return MemoryKeyValueStore()


@pytest.fixture()
def store(kv: MemoryKeyValueStore) -> TaskStore:
    return TaskStore(kv)


@pytest.fixture()
def sqlite_kv(tmp_path: Path) -> SqliteKeyValueStore:
    return SqliteKeyValueStore(tmp_path / "store.sqlite3")
