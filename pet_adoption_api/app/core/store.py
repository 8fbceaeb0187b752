"""
Keyed record tables.

Each ``RecordTable`` wraps one SQLite table created by the migrations in
``db.py`` and stores plain dictionaries as JSON under a string key.
Tables are independent: nothing here enforces references between them,
so deleting a user or pet leaves adoption records pointing at it.

All methods take the cursor of the caller's ``get_cursor()`` block so
that several reads and writes can share one transaction.
"""

import json
import sqlite3
from typing import Any, Dict, List, Optional

Record = Dict[str, Any]


class RecordTable:
    """Upsert store for one entity type."""

    def __init__(self, name: str) -> None:
        self.name = name

    def insert(self, cursor: sqlite3.Cursor, key: str, value: Record) -> Optional[Record]:
        """Insert or overwrite ``key`` and return the previous value, if any.

        Overwriting keeps the row's original position so ``values`` stays
        in first-insertion order.
        """
        previous = self.get(cursor, key)
        cursor.execute(
            f"""
            INSERT INTO {self.name} (key, value) VALUES (?, ?)
            ON CONFLICT(key) DO UPDATE SET value = excluded.value
            """,
            (key, json.dumps(value)),
        )
        return previous

    def get(self, cursor: sqlite3.Cursor, key: str) -> Optional[Record]:
        row = cursor.execute(
            f"SELECT value FROM {self.name} WHERE key = ?", (key,)
        ).fetchone()
        if row is None:
            return None
        return json.loads(row["value"])

    def values(self, cursor: sqlite3.Cursor) -> List[Record]:
        rows = cursor.execute(
            f"SELECT value FROM {self.name} ORDER BY position ASC"
        ).fetchall()
        return [json.loads(row["value"]) for row in rows]

    def remove(self, cursor: sqlite3.Cursor, key: str) -> bool:
        cursor.execute(f"DELETE FROM {self.name} WHERE key = ?", (key,))
        return cursor.rowcount > 0


users = RecordTable("users")
pets = RecordTable("pets")
shelters = RecordTable("shelters")
adoption_records = RecordTable("adoption_records")
