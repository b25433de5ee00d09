"""
Split a query template into literal text and placeholder markers.

A marker is ``?`` followed by one of the kind letters (``s i n a u p``). Any
other ``?`` is literal text. There is no escape syntax for a literal marker:
use a ``?p`` substitution when the marker text itself has to reach the query.
"""

from enum import Enum
from typing import NamedTuple

MARKER_PREFIX = "?"


class PlaceholderKind(str, Enum):
    """Placeholder kinds, valued by their marker text."""

    STRING = "?s"
    INTEGER = "?i"
    IDENTIFIER = "?n"
    ARRAY = "?a"
    MAP = "?u"
    PART = "?p"


_KINDS_BY_LETTER: dict[str, PlaceholderKind] = {kind.value[1]: kind for kind in PlaceholderKind}


class Segment(NamedTuple):
    text: str
    kind: PlaceholderKind | None = None  # None for literal text


def tokenize(template: str) -> list[Segment]:
    """
    Scan *template* once, left to right, and return its segments in order.

    Literal text between markers becomes one segment; each marker becomes its
    own segment carrying its kind. Empty literal segments are omitted.
    """
    segments: list[Segment] = []
    start = 0
    pos = template.find(MARKER_PREFIX)
    while pos != -1:
        kind = _KINDS_BY_LETTER.get(template[pos + 1 : pos + 2])
        if kind is None:
            pos = template.find(MARKER_PREFIX, pos + 1)
            continue
        if pos > start:
            segments.append(Segment(template[start:pos]))
        segments.append(Segment(template[pos : pos + 2], kind))
        start = pos + 2
        pos = template.find(MARKER_PREFIX, start)

    if start < len(template):
        segments.append(Segment(template[start:]))
    return segments


def count_placeholders(segments: list[Segment]) -> int:
    return sum(1 for s in segments if s.kind is not None)
