"""
Liveness check for a MySQL connection.
"""

import logging

from pymysql.connections import Connection

from .connect import execute

_log = logging.getLogger(__name__)


def health_check(conn: Connection) -> bool:
    """
    Round-trip ``SELECT 1`` through *conn*, honouring the statement timeout.

    Any failure (closed socket, server gone, timeout) yields False rather
    than an exception, so callers can decide whether to reconnect.
    """
    cur = None
    try:
        cur = execute(conn, "SELECT 1")
        return cur.fetchone() is not None
    except Exception:
        _log.debug("MySQL health check failed", exc_info=True)
        return False
    finally:
        if cur is not None:
            cur.close()
