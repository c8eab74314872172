# tests/test_task_api.py

from __future__ import annotations

from datetime import UTC, datetime

from taskpad.tasks.task_api import create_task, get_tasks, save_task, save_tasks, set_task_complete
from taskpad.tasks.task_models import Task
from taskpad.tasks.task_store import TaskStore


def test_save_and_get_tasks(store: TaskStore) -> None:
    tasks = [Task("a"), Task("b")]
    save_tasks(store, tasks)
    assert get_tasks(store) == tasks


def test_save_task_upserts(store: TaskStore) -> None:
    task = Task("a")
    save_task(store, task)
    task.note = "changed"
    save_task(store, task)

    loaded = get_tasks(store)
    assert len(loaded) == 1
    assert loaded[0].note == "changed"


def test_create_task_persists_immediately(store: TaskStore) -> None:
    due = datetime(2031, 6, 1, tzinfo=UTC)
    task = create_task(store, "Dentist", note="10:30", due_date=due)

    assert get_tasks(store) == [task]
    assert task.due_date == due


def test_set_task_complete_round_trip(store: TaskStore) -> None:
    task = create_task(store, "Call mom")

    updated = set_task_complete(store, task.id)
    assert updated is not None
    assert updated.is_complete is True

    stored = get_tasks(store)[0]
    assert stored.is_complete is True
    assert stored.completed_date == updated.completed_date

    set_task_complete(store, task.id, False)
    stored = get_tasks(store)[0]
    assert stored.is_complete is False
    assert stored.completed_date is None


def test_set_task_complete_unknown_id(store: TaskStore) -> None:
    create_task(store, "x")
    assert set_task_complete(store, "no-such-id") is None
    assert len(get_tasks(store)) == 1
