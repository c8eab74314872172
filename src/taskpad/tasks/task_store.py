# src/taskpad/tasks/task_store.py

from __future__ import annotations

import json
import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import StrEnum

from ..core.ports import KeyValueStore
from .task_models import Task, TaskDecodeError

logger = logging.getLogger(__name__)

TASKS_KEY = "tasks"


class LoadStatus(StrEnum):
    LOADED = "loaded"
    MISSING = "missing"  # nothing stored under the key yet
    CORRUPT = "corrupt"  # stored blob could not be decoded
    UNAVAILABLE = "unavailable"  # the key-value store itself failed


@dataclass(frozen=True, slots=True)
class LoadResult:
    status: LoadStatus
    tasks: list[Task] = field(default_factory=list)
    error: Exception | None = None

    @property
    def ok(self) -> bool:
        return self.status in (LoadStatus.LOADED, LoadStatus.MISSING)


@dataclass(frozen=True, slots=True)
class SaveResult:
    ok: bool
    error: Exception | None = None


class TaskStore:
    """
    Task collection persisted as one JSON array under a single key.

    Best-effort persistence:
    - save_all / load_all never raise; failures are logged
    - a failed save leaves the previously stored blob untouched
    - an undecodable blob loads as an empty list (no partial recovery)

    try_save_all / try_load_all return the outcome for callers that want it.

    upsert() is a read-modify-write over the whole collection and assumes a
    single writer; two concurrent upserts can lose one of the updates.
    """

    def __init__(self, kv: KeyValueStore, *, key: str = TASKS_KEY) -> None:
        self._kv = kv
        self._key = key
        logger.info("TaskStore ready key=%s total=%s", self._key, self.count())

    @property
    def key(self) -> str:
        return self._key

    # ---- codec ----

    @staticmethod
    def _encode(tasks: Iterable[Task]) -> bytes:
        payload = [t.to_dict() for t in tasks]
        return json.dumps(payload, ensure_ascii=False, allow_nan=False).encode("utf-8")

    @staticmethod
    def _decode(blob: bytes) -> list[Task]:
        try:
            data = json.loads(blob.decode("utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError) as e:
            raise TaskDecodeError(f"invalid JSON: {e}") from e
        if not isinstance(data, list):
            raise TaskDecodeError(f"expected array, got {type(data).__name__}")
        return [Task.from_dict(item) for item in data]

    # ---- public API ----

    def try_save_all(self, tasks: Iterable[Task]) -> SaveResult:
        try:
            blob = self._encode(tasks)
        except (TypeError, ValueError, AttributeError) as e:
            logger.exception("Failed to encode tasks; keeping previous value under key=%s", self._key)
            return SaveResult(ok=False, error=e)

        try:
            self._kv.set(self._key, blob)
        except Exception as e:
            logger.exception("Failed to write tasks key=%s", self._key)
            return SaveResult(ok=False, error=e)

        logger.debug("Saved tasks key=%s bytes=%d", self._key, len(blob))
        return SaveResult(ok=True)

    def save_all(self, tasks: Iterable[Task]) -> None:
        """Replace the stored collection with `tasks` (order preserved)."""
        self.try_save_all(tasks)

    def try_load_all(self) -> LoadResult:
        try:
            blob = self._kv.get(self._key)
        except Exception as e:
            logger.exception("Failed to read tasks key=%s", self._key)
            return LoadResult(status=LoadStatus.UNAVAILABLE, error=e)

        if blob is None:
            return LoadResult(status=LoadStatus.MISSING)

        try:
            tasks = self._decode(blob)
        except TaskDecodeError as e:
            logger.warning("Stored tasks under key=%s are unreadable (%s); treating as empty", self._key, e)
            return LoadResult(status=LoadStatus.CORRUPT, error=e)

        return LoadResult(status=LoadStatus.LOADED, tasks=tasks)

    def load_all(self) -> list[Task]:
        """Stored tasks in saved order; empty when missing or unreadable."""
        return self.try_load_all().tasks

    def upsert(self, task: Task) -> None:
        """
        Replace the stored task with the same id in place, or append `task`.
        The whole collection is then written back.

        If the store cannot be read, nothing is written. A corrupt blob is
        replaced by a fresh collection.
        """
        loaded = self.try_load_all()
        if loaded.status is LoadStatus.UNAVAILABLE:
            logger.error("Skipping upsert id=%s: stored tasks could not be read", task.id)
            return

        all_tasks = loaded.tasks
        for i, existing in enumerate(all_tasks):
            if existing.id == task.id:
                all_tasks[i] = task
                logger.debug("Task updated id=%s position=%d", task.id, i)
                break
        else:
            all_tasks.append(task)
            logger.debug("Task added id=%s position=%d", task.id, len(all_tasks) - 1)

        self.save_all(all_tasks)

    def count(self) -> int:
        return len(self.load_all())
