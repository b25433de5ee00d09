"""
Result of an executed query.

Wraps a PyMySQL cursor. Rows are dicts of column name -> value; with the
connection set up by ``tinymysql.core.db.connect`` values are text (or bytes
for binary columns) and NULL is ``None``.
"""

import logging
from collections.abc import Iterator
from typing import Any

from pymysql.cursors import Cursor

_log = logging.getLogger(__name__)


class Result:
    def __init__(self, cursor: Cursor) -> None:
        self._cursor = cursor
        desc = cursor.description
        self.columns: list[str] = [d[0] for d in desc] if desc else []
        # Rows in the result set for SELECT-like statements, affected rows otherwise
        self.row_count: int = cursor.rowcount if cursor.rowcount and cursor.rowcount > 0 else 0
        # AUTO_INCREMENT value of the first inserted row, None when nothing was generated
        self.insert_id: int | None = cursor.lastrowid or None
        self._freed = False

    def fetch_row(self) -> dict[str, Any] | None:
        """Next row, or None when there are no more rows (or no result set)."""
        if self._freed or not self.columns:
            return None
        row = self._cursor.fetchone()
        if row is None:
            return None
        return dict(zip(self.columns, row, strict=True))

    def fetch_column(self, default: Any = None) -> Any:
        """
        First column of the next row, or *default* when there are no more rows.

        Pass a sentinel as *default* to tell a NULL value from the end of data.
        """
        if self._freed or not self.columns:
            return default
        row = self._cursor.fetchone()
        if row is None:
            return default
        return row[0]

    def free(self) -> None:
        """Release the cursor. Safe to call more than once."""
        if self._freed:
            return
        self._freed = True
        try:
            self._cursor.close()
        except Exception:
            _log.warning("Failed to close cursor", exc_info=True)

    def __iter__(self) -> Iterator[dict[str, Any]]:
        while (row := self.fetch_row()) is not None:
            yield row

    def __enter__(self) -> "Result":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.free()
