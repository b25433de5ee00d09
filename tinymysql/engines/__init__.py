"""
Engines: SQL placeholder templating and result access.
"""

from tinymysql.engines.sql import QueryTemplater, Result, parse

__all__ = [
    "QueryTemplater",
    "Result",
    "parse",
]
