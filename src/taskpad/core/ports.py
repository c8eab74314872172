# src/taskpad/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the task layer.

TaskStore depends on a Protocol instead of a concrete storage backend.
This keeps the persistence swappable and lets tests supply an in-memory store.
"""

from typing import Protocol


class KeyValueStore(Protocol):
    """
    Persistent byte-blob store addressed by string keys.

    - get returns None when nothing is stored under the key
    - set replaces any previous value
    Implementations may raise on I/O failure; callers decide how to report it.
    """

    def get(self, key: str) -> bytes | None: ...

    def set(self, key: str, value: bytes) -> None: ...
