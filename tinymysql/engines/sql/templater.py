"""
Query templater: bind positional parameters to typed placeholders.

    parse("SELECT * FROM ?n WHERE id IN (?a)", "users", [1, 2, 3])
    # SELECT * FROM `users` WHERE id IN ('1', '2', '3')

The templater is stateless; one instance can be shared by any number of
callers as long as its escaper is reentrant.
"""

from typing import Any

from tinymysql.engines.sql.converters import CONVERTERS
from tinymysql.engines.sql.escaper import DEFAULT_ESCAPER, Escaper
from tinymysql.engines.sql.tokenizer import count_placeholders, tokenize
from tinymysql.exceptions import ParseError


class QueryTemplater:
    """Resolves ``?s ?i ?n ?a ?u ?p`` placeholders into a literal SQL string."""

    def __init__(self, escaper: Escaper = DEFAULT_ESCAPER) -> None:
        self._escape = escaper

    def parse(self, template: str, *params: Any) -> str:
        """
        Return *template* with every placeholder replaced by its parameter.

        Raises ParseError when the number of parameters differs from the number
        of placeholders, or on the first parameter its placeholder rejects.
        Nothing is returned in either case.
        """
        if not isinstance(template, str):
            raise ParseError(f"Expected str query template, found {type(template).__name__} instead")

        segments = tokenize(template)
        expected = count_placeholders(segments)
        if expected != len(params):
            raise ParseError(f"Expected {expected} parameters, found {len(params)} instead")

        parts: list[str] = []
        index = 0
        for segment in segments:
            if segment.kind is None:
                parts.append(segment.text)
                continue
            parts.append(CONVERTERS[segment.kind](params[index], self._escape))
            index += 1
        return "".join(parts)


def parse(template: str, *params: Any, escaper: Escaper | None = None) -> str:
    """Parse *template* with a connection-less escaper (or the one given)."""
    return QueryTemplater(escaper or DEFAULT_ESCAPER).parse(template, *params)
