"""
Escapers make a string safe to embed inside single quotes in MySQL.

An escaper is any callable ``(str) -> str``. ``DEFAULT_ESCAPER`` needs no
connection and applies the MySQL backslash rules (NUL, newline, carriage
return, Ctrl-Z, both quotes and backslash). ``connection_escaper`` binds to an
open connection so a server running in ``NO_BACKSLASH_ESCAPES`` mode gets
doubled quotes instead.
"""

from collections.abc import Callable

from pymysql.connections import Connection
from pymysql.constants import SERVER_STATUS
from pymysql.converters import escape_string

Escaper = Callable[[str], str]

DEFAULT_ESCAPER: Escaper = escape_string


def escape_quotes(value: str) -> str:
    """Double single quotes; backslashes are literal under NO_BACKSLASH_ESCAPES."""
    return value.replace("'", "''")


def connection_escaper(conn: Connection) -> Escaper:
    """
    Return an escaper that follows the SQL mode of *conn*.

    The server status is read on every call, since a ``SET sql_mode`` can
    change it. A connection that has not talked to the server yet has no
    status and is escaped with the backslash rules.
    """

    def escape(value: str) -> str:
        status = getattr(conn, "server_status", None) or 0
        if status & SERVER_STATUS.SERVER_STATUS_NO_BACKSLASH_ESCAPES:
            return escape_quotes(value)
        return escape_string(value)

    return escape
