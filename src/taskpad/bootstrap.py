# src/taskpad/bootstrap.py

"""
Bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures local (gitignored) directories exist,
- wires the concrete key-value store into TaskStore and AppState.
"""

from __future__ import annotations

import logging

from .config import get_settings
from .core.state import AppState
from .logging_setup import setup_logging_from_settings
from .storage.kv_store import SqliteKeyValueStore
from .tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    settings.kv_db_path.parent.mkdir(parents=True, exist_ok=True)


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings.

    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    kv = SqliteKeyValueStore(settings.kv_db_path)
    task_store = TaskStore(kv, key=settings.tasks_key)

    logger.info("State ready data_dir=%s key=%s", settings.data_dir, task_store.key)
    return AppState(settings=settings, kv=kv, task_store=task_store)


def init_app(*, settings=None) -> AppState:
    """Configure logging from settings, then build AppState. Call once at startup."""
    if settings is None:
        settings = get_settings()
    setup_logging_from_settings(settings)
    return create_initial_state(settings=settings)
