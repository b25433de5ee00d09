"""
SQL engine: placeholder templating, escaping and result access.

Exports: QueryTemplater, parse, tokenize, Result.
"""

from tinymysql.engines.sql.escaper import DEFAULT_ESCAPER, Escaper, connection_escaper
from tinymysql.engines.sql.result import Result
from tinymysql.engines.sql.templater import QueryTemplater, parse
from tinymysql.engines.sql.tokenizer import PlaceholderKind, Segment, tokenize

__all__ = [
    "QueryTemplater",
    "parse",
    "tokenize",
    "Segment",
    "PlaceholderKind",
    "Escaper",
    "DEFAULT_ESCAPER",
    "connection_escaper",
    "Result",
]
