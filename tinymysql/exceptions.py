"""
Error kinds raised by tinymysql.

- DBConnectionError: opening the connection failed (bad credentials, host, charset).
- ParseError: a query template could not be bound to its parameters.
- QueryError: the server rejected an already-parsed query.
"""


class TinyMySQLError(Exception):
    """Base class for all tinymysql errors."""

    pass


class DBConnectionError(TinyMySQLError):
    """Raised when a connection to the database cannot be established."""

    def __init__(self, message: str, errno: int = 0) -> None:
        super().__init__(message)
        self.errno = errno


class ParseError(TinyMySQLError, ValueError):
    """Raised when placeholders cannot be bound to the given parameters."""

    pass


class QueryError(TinyMySQLError):
    """Raised when the database fails to execute a query."""

    def __init__(self, message: str, errno: int = 0) -> None:
        super().__init__(message)
        self.errno = errno
