# src/taskpad/tasks/task_api.py

from __future__ import annotations

import logging
from collections.abc import Iterable
from datetime import datetime

from .task_models import Task
from .task_store import TaskStore

logger = logging.getLogger(__name__)


def save_tasks(store: TaskStore, tasks: Iterable[Task]) -> None:
    """Persist the full list, replacing whatever was stored before."""
    store.save_all(tasks)


def get_tasks(store: TaskStore) -> list[Task]:
    return store.load_all()


def save_task(store: TaskStore, task: Task) -> None:
    """
    Convenience helper: insert or update a single task.
    Same as task.save(store).
    """
    store.upsert(task)


def create_task(
    store: TaskStore,
    title: str,
    *,
    note: str | None = None,
    due_date: datetime | None = None,
) -> Task:
    """Build a task with defaults applied and persist it right away."""
    task = Task(title, note=note) if due_date is None else Task(title, note=note, due_date=due_date)
    store.upsert(task)
    logger.info("Created task id=%s", task.id)
    return task


def set_task_complete(store: TaskStore, task_id: str, value: bool = True) -> Task | None:
    """
    Flip the completion flag of a stored task and save it.
    Returns the updated task, or None if no task has that id.
    """
    for task in store.load_all():
        if task.id == task_id:
            task.is_complete = value
            store.upsert(task)
            return task
    logger.warning("set_task_complete: no task with id=%s", task_id)
    return None
