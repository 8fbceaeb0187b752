"""
Per-entity identifier counters.

Identifiers have the form ``ID-<n>`` where ``n`` counts up from 1
separately for every entity type.  Counters live in the
``id_counters`` table next to the records, so a restarted process
continues where the previous one stopped and an id is never handed out
twice, even after the record that carried it has been deleted.
"""

import sqlite3

USER = "user"
PET = "pet"
SHELTER = "shelter"
ADOPTION = "adoption"


def format_id(counter: int) -> str:
    return f"ID-{counter}"


def next_id(cursor: sqlite3.Cursor, entity: str) -> str:
    """Increment the counter for ``entity`` and return the new identifier.

    Must be called inside a ``get_cursor()`` block; the increment is part
    of the caller's transaction.
    """
    cursor.execute(
        """
        INSERT INTO id_counters (entity, value) VALUES (?, 1)
        ON CONFLICT(entity) DO UPDATE SET value = value + 1
        """,
        (entity,),
    )
    row = cursor.execute(
        "SELECT value FROM id_counters WHERE entity = ?", (entity,)
    ).fetchone()
    return format_id(row["value"])
