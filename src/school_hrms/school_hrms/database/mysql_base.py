from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Dict, Hashable, Iterable, List, Optional

from .connection import DatabaseConnection


@contextmanager
def db_cursor(conn_factory: DatabaseConnection, *, dictionary: bool = True):
    conn = conn_factory.connect()
    try:
        cur = conn.cursor(dictionary=dictionary)
        try:
            yield conn, cur
            conn.commit()
        finally:
            cur.close()
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


def fetchone(cur) -> Optional[Dict[str, Any]]:
    row = cur.fetchone()
    return row if row else None


def fetchall(cur) -> List[Dict[str, Any]]:
    rows = cur.fetchall()
    return list(rows or [])


def placeholders(count: int) -> str:
    """``%s,%s,...`` for an ``IN (...)`` clause."""
    return ",".join(["%s"] * count)


def group_rows(rows: Iterable[Dict[str, Any]], key: str) -> Dict[Hashable, List[Dict[str, Any]]]:
    """Group child rows of a one-to-many query by their parent key, keeping order."""
    grouped: Dict[Hashable, List[Dict[str, Any]]] = {}
    for row in rows:
        grouped.setdefault(row[key], []).append(row)
    return grouped
