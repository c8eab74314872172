# src/taskpad/tasks/task_models.py

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .task_store import TaskStore


class TaskDecodeError(ValueError):
    """A persisted task mapping does not have the expected shape."""


def _now() -> datetime:
    return datetime.now(UTC)


def _new_id() -> str:
    return str(uuid.uuid4()).upper()


def _as_utc_aware(value: datetime) -> datetime:
    # naive timestamps are treated as UTC
    return value if value.tzinfo is not None else value.replace(tzinfo=UTC)


def _dt_to_str(value: Any, key: str) -> str:
    if not isinstance(value, datetime):
        raise TypeError(f"{key}: expected datetime, got {type(value).__name__}")
    return _as_utc_aware(value).isoformat()


def _str_to_dt(raw: Any, key: str) -> datetime:
    if not isinstance(raw, str):
        raise TaskDecodeError(f"{key}: expected ISO-8601 string, got {type(raw).__name__}")
    try:
        dt = datetime.fromisoformat(raw)
    except ValueError as e:
        raise TaskDecodeError(f"{key}: {e}") from e
    return _as_utc_aware(dt)


@dataclass(slots=True, repr=False)
class Task:
    """
    A to-do item.

    Completion state is exposed through two properties:
    - is_complete: read/write flag
    - completed_date: read-only, set to "now" whenever is_complete is assigned True
      and cleared when it is assigned False

    Assigning True to an already completed task re-stamps completed_date.
    """

    title: str
    note: str | None = None
    due_date: datetime = field(default_factory=_now)

    created_date: datetime = field(default_factory=_now, init=False)
    id: str = field(default_factory=_new_id, init=False)

    _is_complete: bool = field(default=False, init=False)
    _completed_date: datetime | None = field(default=None, init=False)

    def __post_init__(self) -> None:
        if isinstance(self.due_date, datetime):
            self.due_date = _as_utc_aware(self.due_date)

    @property
    def is_complete(self) -> bool:
        return self._is_complete

    @is_complete.setter
    def is_complete(self, value: bool) -> None:
        self._is_complete = bool(value)
        self._completed_date = _now() if self._is_complete else None

    @property
    def completed_date(self) -> datetime | None:
        return self._completed_date

    def set_complete(self, value: bool) -> None:
        self.is_complete = value

    def save(self, store: TaskStore) -> None:
        """Insert this task into the store, or replace the stored task with the same id."""
        store.upsert(self)

    # ---- persisted form ----

    def to_dict(self) -> dict[str, Any]:
        """
        Optional fields are omitted when unset.

        Raises TypeError for values from_dict would reject, so a task that
        could not be read back is never written.
        """
        if not isinstance(self.title, str):
            raise TypeError(f"title: expected str, got {type(self.title).__name__}")
        if not isinstance(self.id, str):
            raise TypeError(f"id: expected str, got {type(self.id).__name__}")
        if self.note is not None and not isinstance(self.note, str):
            raise TypeError(f"note: expected str, got {type(self.note).__name__}")
        out: dict[str, Any] = {
            "title": self.title,
            "dueDate": _dt_to_str(self.due_date, "dueDate"),
            "isComplete": self._is_complete,
            "createdDate": _dt_to_str(self.created_date, "createdDate"),
            "id": self.id,
        }
        if self.note is not None:
            out["note"] = self.note
        if self._completed_date is not None:
            out["completedDate"] = _dt_to_str(self._completed_date, "completedDate")
        return out

    @classmethod
    def from_dict(cls, data: Any) -> Task:
        """
        Rebuild a task from its persisted mapping.

        Identity, creation time and completion state are restored as stored;
        completed_date is not re-stamped. isComplete and completedDate are taken
        independently: a stored completed task without a completedDate (or the
        reverse) loads as stored, the same way the original records are read.
        """
        if not isinstance(data, dict):
            raise TaskDecodeError(f"expected object, got {type(data).__name__}")

        for key in ("title", "dueDate", "isComplete", "createdDate", "id"):
            if key not in data:
                raise TaskDecodeError(f"missing key: {key}")

        title = data["title"]
        if not isinstance(title, str):
            raise TaskDecodeError("title: expected string")
        task_id = data["id"]
        if not isinstance(task_id, str):
            raise TaskDecodeError("id: expected string")
        is_complete = data["isComplete"]
        if not isinstance(is_complete, bool):
            raise TaskDecodeError("isComplete: expected boolean")

        note = data.get("note")
        if note is not None and not isinstance(note, str):
            raise TaskDecodeError("note: expected string")

        raw_completed = data.get("completedDate")
        completed_date = None if raw_completed is None else _str_to_dt(raw_completed, "completedDate")

        task = cls(title, note=note, due_date=_str_to_dt(data["dueDate"], "dueDate"))
        task.created_date = _str_to_dt(data["createdDate"], "createdDate")
        task.id = task_id
        task._is_complete = is_complete
        task._completed_date = completed_date
        return task

    def __repr__(self) -> str:
        return f"Task(id={self.id}, title={self.title!r}, is_complete={self._is_complete})"
