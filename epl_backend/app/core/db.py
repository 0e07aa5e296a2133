"""
SQLite database integration and simple migration system.

This module provides the ``Database`` wrapper used by the id allocator
and the entity stores, and ``init_db`` which applies the numbered
migrations below on application start.  Applied versions are recorded
in the ``migrations`` table and new migrations are executed in order.

A ``Database`` holds a single connection for its whole lifetime, which
is what makes ``:memory:`` databases usable.  All access goes through
``transaction()``: it serializes callers with a re-entrant lock and
commits or rolls back only at the outermost level, so an id allocation
and the insert that consumes it commit together.
"""

import logging
import os
import sqlite3
import threading
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

from .errors import StorageError

logger = logging.getLogger(__name__)

MEMORY_DATABASE = ":memory:"


def get_database_path(database_url: str) -> str:
    """Compute the path to the SQLite database file.

    ``:memory:`` and absolute paths are returned unchanged.  Relative
    paths are resolved against the package root.
    """
    if database_url == MEMORY_DATABASE or os.path.isabs(database_url):
        return database_url
    base_dir = Path(__file__).resolve().parent.parent.parent  # epl_backend/
    return str((base_dir / database_url).resolve())


class Database:
    """A single SQLite connection guarded by a re-entrant lock."""

    def __init__(self, path: str) -> None:
        self.path = path
        # The lock below confines the connection to one thread at a time.
        self.connection = sqlite3.connect(path, check_same_thread=False)
        self.connection.row_factory = sqlite3.Row
        self._lock = threading.RLock()
        self._depth = 0

    @contextmanager
    def transaction(self) -> Iterator[sqlite3.Cursor]:
        """Yield a cursor inside a (possibly nested) transaction.

        Nested calls join the enclosing transaction.  When the outermost
        block exits normally the transaction is committed; on any
        exception it is rolled back, and ``sqlite3.Error`` is re-raised
        as ``StorageError``.
        """
        with self._lock:
            self._depth += 1
            outermost = self._depth == 1
            try:
                yield self.connection.cursor()
                if outermost:
                    self.connection.commit()
            except sqlite3.Error as exc:
                if not outermost:
                    raise
                logger.exception("Storage failure on %s, rolling back", self.path)
                try:
                    self.connection.rollback()
                except sqlite3.Error:
                    logger.exception("Rollback failed on %s", self.path)
                raise StorageError(f"Storage failure: {exc}") from exc
            except BaseException:
                if outermost:
                    try:
                        self.connection.rollback()
                    except sqlite3.Error:
                        logger.exception("Rollback failed on %s", self.path)
                raise
            finally:
                self._depth -= 1

    def close(self) -> None:
        with self._lock:
            self.connection.close()


MIGRATIONS: list[tuple[int, str]] = [
    # Migration 1: counter and the first three record tables
    (
        1,
        """
        -- The counter is a single row; its value is the last issued id.
        CREATE TABLE IF NOT EXISTS id_counter (
            id INTEGER PRIMARY KEY CHECK (id = 0),
            value INTEGER NOT NULL
        );
        INSERT OR IGNORE INTO id_counter (id, value) VALUES (0, 0);

        -- Ids are assigned by the counter, never by SQLite, so the
        -- primary keys below are plain INTEGER without AUTOINCREMENT.
        CREATE TABLE IF NOT EXISTS teams (
            id INTEGER PRIMARY KEY,
            name TEXT NOT NULL,
            manager TEXT NOT NULL,
            stadium TEXT NOT NULL
        );

        CREATE TABLE IF NOT EXISTS coaches (
            id INTEGER PRIMARY KEY,
            name TEXT NOT NULL,
            team TEXT NOT NULL
        );

        CREATE TABLE IF NOT EXISTS stadiums (
            id INTEGER PRIMARY KEY,
            name TEXT NOT NULL,
            location TEXT NOT NULL,
            capacity INTEGER NOT NULL
        );
        """,
    ),
    # Migration 2: matches
    (
        2,
        """
        -- match_date is a Unix timestamp in seconds.
        CREATE TABLE IF NOT EXISTS matches (
            id INTEGER PRIMARY KEY,
            home_team TEXT NOT NULL,
            away_team TEXT NOT NULL,
            venue TEXT NOT NULL,
            match_date INTEGER NOT NULL
        );
        """,
    ),
]


def init_db(db: Database) -> int:
    """Apply pending migrations and return the resulting schema version."""
    with db.transaction() as cursor:
        cursor.execute(
            "CREATE TABLE IF NOT EXISTS migrations (version INTEGER PRIMARY KEY)"
        )
        cursor.execute("SELECT MAX(version) AS version FROM migrations")
        row = cursor.fetchone()
        current_version = row["version"] if row and row["version"] is not None else 0

        for version, sql in MIGRATIONS:
            if version > current_version:
                cursor.executescript(sql)
                cursor.execute(
                    "INSERT INTO migrations (version) VALUES (?)", (version,)
                )
                logger.info("Applied migration %s to %s", version, db.path)
                current_version = version
    return current_version
