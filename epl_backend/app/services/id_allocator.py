"""
Identity allocator shared by every entity kind.

All kinds draw from one global sequence stored in the ``id_counter``
table, so a team and a coach created one after the other never share
an id, and an id is never issued twice, even after its record is
deleted.
"""

import logging

from epl_backend.app.core.db import Database


class IdAllocator:
    """Issues ids from the persistent counter."""

    def __init__(self, db: Database) -> None:
        self._db = db

    def next_id(self) -> int:
        """Increment the counter and return the new value.

        The first id issued is ``1``.  Inside an enclosing
        ``Database.transaction`` the increment commits (or rolls back)
        together with the rest of that transaction; called on its own it
        is committed before this method returns.
        """
        logger = logging.getLogger(__name__)
        with self._db.transaction() as cursor:
            cursor.execute("UPDATE id_counter SET value = value + 1 WHERE id = 0")
            row = cursor.execute("SELECT value FROM id_counter WHERE id = 0").fetchone()
        logger.debug("Allocated id %s", row["value"])
        return row["value"]

    def peek(self) -> int:
        """Return the last issued id without changing it (``0`` if none)."""
        with self._db.transaction() as cursor:
            row = cursor.execute("SELECT value FROM id_counter WHERE id = 0").fetchone()
        return row["value"]
