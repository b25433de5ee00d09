"""
Database: a MySQL connection with placeholder parsing and fetch helpers.

    db = Database({"hostname": "localhost", "username": "root", "database": "blog"})

    db.parse("SELECT * FROM ?n WHERE username=?s AND points>=?i", "users", "nick", 100)
    # SELECT * FROM `users` WHERE username='nick' AND points>=100

    db.get_all("SELECT * FROM products WHERE id IN (?a)", [10, None, 30])
    db.query("INSERT INTO metrics SET ?u", {"rtt": 132.22, "unit": "ms"}).insert_id
    db.get_one("SELECT COUNT(*) FROM places WHERE city=?s", "London")

Placeholders: ?s string, ?i integer, ?n identifier, ?a array, ?u map (for
SET clauses), ?p already parsed query part.
"""

import logging
from collections.abc import Mapping
from typing import Any

import pymysql
from pymysql.connections import Connection

from tinymysql.core.db import ConnectionOptions, connect, error_details, execute, health_check
from tinymysql.engines.sql import QueryTemplater, Result, connection_escaper
from tinymysql.exceptions import QueryError

_log = logging.getLogger(__name__)

_NO_MORE_ROWS = object()


class Database:
    """
    Database(options=None, **kwargs)

    - options: an open PyMySQL Connection to wrap, ConnectionOptions, or a
      mapping of connection options (hostname/host, username/user,
      password/pass, database/db, port, socket, charset).
    - kwargs: extra connection options merged over a mapping.

    Raises DBConnectionError if the connection cannot be opened.
    """

    def __init__(
        self,
        options: Connection | ConnectionOptions | Mapping[str, Any] | None = None,
        **kwargs: Any,
    ) -> None:
        if isinstance(options, Connection):
            self._conn = options
        elif isinstance(options, ConnectionOptions):
            if kwargs:
                raise TypeError("Keyword options cannot be combined with ConnectionOptions")
            self._conn = connect(options)
        else:
            self._conn = connect({**(options or {}), **kwargs})
        self._closed = False
        self._templater = QueryTemplater(connection_escaper(self._conn))

    @property
    def connection(self) -> Connection:
        return self._conn

    @property
    def closed(self) -> bool:
        return self._closed

    def disconnect(self) -> None:
        """Close the connection. The instance is unusable afterwards; repeated calls are no-ops."""
        if self._closed:
            return
        self._closed = True
        try:
            self._conn.close()
        except Exception:
            _log.warning("Failed to close MySQL connection", exc_info=True)

    def health_check(self) -> bool:
        return not self._closed and health_check(self._conn)

    def parse(self, query: str, *params: Any) -> str:
        """Return *query* with placeholders replaced. Raises ParseError."""
        return self._templater.parse(query, *params)

    def query(self, query: str, *params: Any) -> Result:
        """Parse and execute *query*. Raises ParseError or QueryError."""
        sql = self.parse(query, *params)
        if self._closed:
            raise QueryError("Connection is closed")
        _log.debug("Executing SQL: %s", sql)
        try:
            cur = execute(self._conn, sql)
        except pymysql.err.MySQLError as e:
            errno, message = error_details(e)
            raise QueryError(f"[{errno}] {message}", errno) from e
        except UnicodeEncodeError as e:
            raise QueryError(f"Query cannot be encoded as {e.encoding}: {e.reason}") from e
        return Result(cur)

    def get_all(self, query: str, *params: Any) -> list[dict[str, Any]]:
        """All result rows."""
        with self.query(query, *params) as result:
            return list(result)

    def get_row(self, query: str, *params: Any) -> dict[str, Any] | None:
        """First result row, or None if no rows."""
        with self.query(query, *params) as result:
            return result.fetch_row()

    def get_col(self, query: str, *params: Any) -> list[Any]:
        """First column of every result row."""
        column: list[Any] = []
        with self.query(query, *params) as result:
            while (value := result.fetch_column(_NO_MORE_ROWS)) is not _NO_MORE_ROWS:
                column.append(value)
        return column

    def get_one(self, query: str, *params: Any, default: Any = None) -> Any:
        """First column of the first row, or *default* if no rows."""
        with self.query(query, *params) as result:
            return result.fetch_column(default)

    def __enter__(self) -> "Database":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.disconnect()
