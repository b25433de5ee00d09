"""
MySQL connection helpers (PyMySQL).

ConnectionOptions accepts the long and the short option names (hostname/host,
username/user, password/pass, database/db); anything left out falls back to
``settings``. Connections are opened in autocommit mode and without result
type conversion, so row values come back as text.
"""

import logging
from collections.abc import Mapping
from typing import Any

import pymysql
from pydantic import AliasChoices, BaseModel, ConfigDict, Field, ValidationError
from pymysql.charset import charset_by_name
from pymysql.connections import Connection
from pymysql.cursors import Cursor

from tinymysql.core.config import settings
from tinymysql.exceptions import DBConnectionError

_log = logging.getLogger(__name__)


class ConnectionOptions(BaseModel):
    model_config = ConfigDict(extra="ignore")

    hostname: str = Field(
        default_factory=lambda: settings.DB_HOSTNAME,
        validation_alias=AliasChoices("hostname", "host"),
    )
    username: str = Field(
        default_factory=lambda: settings.DB_USERNAME,
        validation_alias=AliasChoices("username", "user"),
    )
    password: str = Field(
        default_factory=lambda: settings.DB_PASSWORD,
        validation_alias=AliasChoices("password", "pass"),
    )
    database: str = Field(
        default_factory=lambda: settings.DB_DATABASE,
        validation_alias=AliasChoices("database", "db"),
    )
    port: int = Field(default_factory=lambda: settings.DB_PORT)
    socket: str | None = Field(default_factory=lambda: settings.DB_SOCKET)
    charset: str = Field(default_factory=lambda: settings.DB_CHARSET)


def error_details(e: pymysql.err.MySQLError) -> tuple[int, str]:
    """Return (errno, message) from a PyMySQL error; errno is 0 when the driver gave none."""
    if len(e.args) >= 2 and isinstance(e.args[0], int):
        return e.args[0], str(e.args[1])
    return 0, str(e)


def _resolve_options(options: ConnectionOptions | Mapping[str, Any] | None) -> ConnectionOptions:
    if isinstance(options, ConnectionOptions):
        return options
    try:
        return ConnectionOptions.model_validate(dict(options or {}))
    except ValidationError as e:
        raise DBConnectionError(f"Invalid connection options: {e}") from e


def connect(options: ConnectionOptions | Mapping[str, Any] | None = None) -> Connection:
    """
    Open a MySQL connection.

    - options: ConnectionOptions or a mapping of option names (short or long);
      None uses the settings defaults only.

    Raises DBConnectionError ("[errno] message") when the charset is unknown or
    the server cannot be reached / rejects the credentials.
    """
    opts = _resolve_options(options)
    if charset_by_name(opts.charset) is None:
        raise DBConnectionError(f"Unknown charset: {opts.charset}")

    _log.debug(
        "Connecting to MySQL %s@%s:%s (database=%r)",
        opts.username,
        opts.socket or opts.hostname,
        opts.port,
        opts.database,
    )
    try:
        return pymysql.connect(
            host=opts.hostname,
            user=opts.username,
            password=opts.password,
            database=opts.database or None,
            port=opts.port,
            unix_socket=opts.socket,
            charset=opts.charset,
            connect_timeout=settings.DB_CONNECT_TIMEOUT,
            autocommit=True,
            conv={},
        )
    except pymysql.err.MySQLError as e:
        errno, message = error_details(e)
        raise DBConnectionError(f"[{errno}] {message}", errno) from e


def execute(conn: Connection, sql: str) -> Cursor:
    """
    Execute a literal SQL string and return the cursor. Caller reads rows or
    rowcount from it and closes it.

    When DB_STATEMENT_TIMEOUT is set, max_execution_time (ms) is applied before
    the statement and reset after it.
    """
    timeout_sec = settings.DB_STATEMENT_TIMEOUT
    use_timeout = timeout_sec is not None and timeout_sec > 0

    if use_timeout:
        with conn.cursor() as cur_set:
            cur_set.execute(f"SET SESSION max_execution_time = {int(timeout_sec * 1000)}")

    cur = conn.cursor()
    try:
        cur.execute(sql)
    except Exception:
        cur.close()
        raise
    finally:
        if use_timeout:
            try:
                with conn.cursor() as cur_reset:
                    cur_reset.execute("SET SESSION max_execution_time = 0")
            except Exception:
                _log.warning("Failed to reset max_execution_time", exc_info=True)

    return cur
