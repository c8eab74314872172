# src/taskpad/core/state.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..tasks.task_store import TaskStore
from .ports import KeyValueStore


@dataclass(slots=True)
class AppState:
    """Objects shared by the whole app, wired once in bootstrap."""

    # Settings (or any object with the same attributes, e.g. SimpleNamespace in tests)
    settings: Any

    kv: KeyValueStore
    task_store: TaskStore
