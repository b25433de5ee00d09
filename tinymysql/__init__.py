"""
tinymysql: a small MySQL layer with typed query placeholders.

Exports: Database, parse, QueryTemplater, Result, ConnectionOptions and the
error types.
"""

from tinymysql.client import Database
from tinymysql.core.db import ConnectionOptions, connect
from tinymysql.engines.sql import QueryTemplater, Result, parse
from tinymysql.exceptions import DBConnectionError, ParseError, QueryError, TinyMySQLError

__all__ = [
    "Database",
    "ConnectionOptions",
    "connect",
    "QueryTemplater",
    "Result",
    "parse",
    "TinyMySQLError",
    "DBConnectionError",
    "ParseError",
    "QueryError",
]
