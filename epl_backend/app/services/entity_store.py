"""
Ordered id -> record storage for one entity kind.

An ``EntityStore`` maps integer ids to records of one pydantic model,
backed by a SQLite table with one column per model field.  The table's
``INTEGER PRIMARY KEY`` keeps rows ordered by id, and iteration is
always ascending by id.

The store does not validate records or allocate ids; that is the job
of the record services.  Every method runs inside
``Database.transaction`` so that a service can group several store
calls (and an id allocation) into one atomic unit.
"""

import sqlite3
from typing import Generic, Iterator, List, Optional, Tuple, Type, TypeVar

from pydantic import BaseModel

from epl_backend.app.core.db import Database

R = TypeVar("R", bound=BaseModel)


class EntityStore(Generic[R]):
    """Persistent ordered mapping from id to record."""

    def __init__(self, db: Database, table: str, record_model: Type[R]) -> None:
        self._db = db
        self.table = table
        self.record_model = record_model
        # Table and column names come from code, never from callers.
        self._columns = list(record_model.model_fields)
        self._fields = [column for column in self._columns if column != "id"]

    def insert(self, record_id: int, record: R) -> Optional[R]:
        """Store ``record`` under ``record_id`` and return the previous value.

        This is an unconditional upsert.  The ``id`` stored is always
        ``record_id``, whatever the ``id`` attribute of ``record`` says.
        """
        values = record.model_dump()
        values["id"] = record_id
        columns = ", ".join(self._columns)
        placeholders = ", ".join("?" for _ in self._columns)
        assignments = ", ".join(f"{field} = excluded.{field}" for field in self._fields)
        with self._db.transaction() as cursor:
            previous = self._fetch(cursor, record_id)
            cursor.execute(
                f"INSERT INTO {self.table} ({columns}) VALUES ({placeholders})"
                f" ON CONFLICT(id) DO UPDATE SET {assignments}",
                [values[column] for column in self._columns],
            )
        return previous

    def get(self, record_id: int) -> Optional[R]:
        with self._db.transaction() as cursor:
            return self._fetch(cursor, record_id)

    def remove(self, record_id: int) -> Optional[R]:
        """Delete the record under ``record_id`` and return it, if any."""
        with self._db.transaction() as cursor:
            previous = self._fetch(cursor, record_id)
            if previous is not None:
                cursor.execute(f"DELETE FROM {self.table} WHERE id = ?", (record_id,))
        return previous

    def items(self) -> Iterator[Tuple[int, R]]:
        """Yield ``(id, record)`` pairs in ascending id order."""
        with self._db.transaction() as cursor:
            rows = cursor.execute(f"SELECT * FROM {self.table} ORDER BY id ASC").fetchall()
        for row in rows:
            yield row["id"], self._row_to_record(row)

    def ids(self) -> List[int]:
        with self._db.transaction() as cursor:
            rows = cursor.execute(f"SELECT id FROM {self.table} ORDER BY id ASC").fetchall()
        return [row["id"] for row in rows]

    def __contains__(self, record_id: object) -> bool:
        if not isinstance(record_id, int):
            return False
        with self._db.transaction() as cursor:
            row = cursor.execute(
                f"SELECT 1 FROM {self.table} WHERE id = ?", (record_id,)
            ).fetchone()
        return row is not None

    def __len__(self) -> int:
        with self._db.transaction() as cursor:
            row = cursor.execute(f"SELECT COUNT(*) AS total FROM {self.table}").fetchone()
        return row["total"]

    def _fetch(self, cursor: sqlite3.Cursor, record_id: int) -> Optional[R]:
        row = cursor.execute(
            f"SELECT * FROM {self.table} WHERE id = ?", (record_id,)
        ).fetchone()
        if row is None:
            return None
        return self._row_to_record(row)

    def _row_to_record(self, row: sqlite3.Row) -> R:
        """Convert a database row to a record instance."""
        return self.record_model(**{column: row[column] for column in self._columns})
