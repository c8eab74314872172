# tests/test_kv_store.py

from __future__ import annotations

import sqlite3
from pathlib import Path

from taskpad.storage.kv_store import MemoryKeyValueStore, SqliteKeyValueStore


def test_memory_store_get_set() -> None:
    kv = MemoryKeyValueStore()
    assert kv.get("missing") is None
    kv.set("k", b"v1")
    kv.set("k", b"v2")
    assert kv.get("k") == b"v2"
    assert kv.keys() == ["k"]


def test_sqlite_store_get_set_overwrite(sqlite_kv: SqliteKeyValueStore) -> None:
    assert sqlite_kv.get("tasks") is None
    sqlite_kv.set("tasks", b"[]")
    sqlite_kv.set("tasks", b"[1]")
    assert sqlite_kv.get("tasks") == b"[1]"


def test_sqlite_store_keeps_one_row_per_key(sqlite_kv: SqliteKeyValueStore) -> None:
    sqlite_kv.set("a", b"1")
    sqlite_kv.set("a", b"2")
    sqlite_kv.set("b", b"3")

    conn = sqlite3.connect(str(sqlite_kv.db_path))
    try:
        rows = conn.execute("SELECT key FROM kv ORDER BY key").fetchall()
    finally:
        conn.close()
    assert rows == [("a",), ("b",)]


def test_sqlite_store_creates_parent_dirs(tmp_path: Path) -> None:
    db = tmp_path / "nested" / "dir" / "store.sqlite3"
    kv = SqliteKeyValueStore(db)
    kv.set("k", b"\x00\x01binary")
    assert SqliteKeyValueStore(db).get("k") == b"\x00\x01binary"
