from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Optional


@contextmanager
def db_cursor(connection):
    """Run the block in its own transaction: commit on success, roll back and re-raise on error."""
    conn = connection.connect()
    cur = conn.cursor()
    try:
        yield cur
        conn.commit()
    except Exception:
        conn.rollback()
        raise
    finally:
        cur.close()
        conn.close()


def first_value(cur) -> Optional[Any]:
    row = cur.fetchone()
    return row[0] if row else None
