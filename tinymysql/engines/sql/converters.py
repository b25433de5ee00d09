"""
Conversion rules for query placeholders.

Each rule takes the bound parameter and an escaper and returns the SQL text
that replaces the placeholder, or raises ``ParseError``:

    ?s  string      'escaped'                 None -> NULL
    ?i  integer     digits, truncated         None -> NULL
    ?n  identifier  `name`, backticks doubled
    ?a  array       '1', NULL, 'x'
    ?u  map         `a`='1', `b`=NULL
    ?p  part        inserted verbatim (trusted SQL only)

Scalars are ``str``, ``int``, ``float``, ``bool`` and ``Decimal``.
"""

import math
import re
from collections.abc import Callable, Iterable, Mapping
from decimal import Decimal
from typing import Any

from tinymysql.engines.sql.escaper import Escaper
from tinymysql.engines.sql.tokenizer import PlaceholderKind
from tinymysql.exceptions import ParseError

_SCALAR_TYPES = (str, int, float, Decimal)

# Matched against the text as given: no whitespace, exponent or 0x/0b prefix
_NUMERIC_STRING = re.compile(r"-?[0-9]+(?:\.[0-9]*)?")

_MAX_IDENTIFIER_CODEPOINT = 0xFFFF

# Lone surrogates have no UTF-8 encoding
_SURROGATES = range(0xD800, 0xE000)


def _type_name(value: Any) -> str:
    return type(value).__name__


def _is_scalar(value: Any) -> bool:
    return isinstance(value, _SCALAR_TYPES)


def _plain_number(value: float | Decimal) -> str:
    """Format a finite float or Decimal in positional notation (never ``1e+16``)."""
    if isinstance(value, float):
        if not math.isfinite(value):
            raise ParseError(f"Expected finite number, found {value!r} instead")
        value = Decimal(repr(value))
    elif not value.is_finite():
        raise ParseError(f"Expected finite number, found {value!r} instead")
    return format(value, "f")


def _stringify(value: Any) -> str:
    """String form of a scalar: True -> '1', False -> '', 5000.0 -> '5000'."""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "1" if value else ""
    if isinstance(value, int):
        return str(int(value))
    text = _plain_number(value)
    if isinstance(value, float) and "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def _truncate(text: str) -> str:
    return text.partition(".")[0]


def _pairs(value: Any, label: str) -> list[tuple[Any, Any]]:
    """Key/value pairs of a container; positions are the keys of non-mappings."""
    if isinstance(value, (str, bytes, bytearray)) or not isinstance(value, Iterable):
        raise ParseError(
            f"Expected iterable value for {label} placeholder, found {_type_name(value)} instead"
        )
    if isinstance(value, Mapping):
        return list(value.items())
    return list(enumerate(value))


# ---------------------------------------------------------------------------
# Rules
# ---------------------------------------------------------------------------


def convert_string(value: Any, escape: Escaper) -> str:
    if value is None:
        return "NULL"
    if not _is_scalar(value):
        raise ParseError(
            f"Expected scalar value for string placeholder, found {_type_name(value)} instead"
        )
    return "'" + escape(_stringify(value)) + "'"


def convert_integer(value: Any, escape: Escaper) -> str:
    """
    Integers pass through; floats, Decimals and numeric strings are cut at the
    decimal point without rounding (``-3.99`` -> ``-3``). Digits are kept as
    text, so values wider than 64 bits survive unchanged.
    """
    if value is None:
        return "NULL"
    if isinstance(value, bool):
        raise ParseError("Expected numeric value for integer placeholder, found bool instead")
    if isinstance(value, int):
        return str(int(value))
    if isinstance(value, (float, Decimal)):
        return _truncate(_plain_number(value))
    if isinstance(value, str):
        if _NUMERIC_STRING.fullmatch(value) is None:
            raise ParseError(
                f"Expected numeric value for integer placeholder, found non-numeric string {value!r} instead"
            )
        return _truncate(value)
    raise ParseError(
        f"Expected numeric value for integer placeholder, found {_type_name(value)} instead"
    )


def convert_identifier(value: Any, escape: Escaper) -> str:
    if not _is_scalar(value):
        raise ParseError(
            f"Expected scalar value for identifier placeholder, found {_type_name(value)} instead"
        )
    name = _stringify(value)
    if name == "":
        raise ParseError("Identifier value cannot be empty")
    if any(
        ch == "\0" or ord(ch) > _MAX_IDENTIFIER_CODEPOINT or ord(ch) in _SURROGATES
        for ch in name
    ):
        raise ParseError(f"Identifier contains invalid characters: {name!r}")
    return "`" + name.replace("`", "``") + "`"


def convert_array(value: Any, escape: Escaper) -> str:
    items = [item for _, item in _pairs(value, "array")]
    if not items:
        raise ParseError("Array value cannot be empty")
    return ", ".join(convert_string(item, escape) for item in items)


def convert_map(value: Any, escape: Escaper) -> str:
    pairs = _pairs(value, "map")
    if not pairs:
        raise ParseError("Map value cannot be empty")
    return ", ".join(
        f"{convert_identifier(key, escape)}={convert_string(item, escape)}" for key, item in pairs
    )


def convert_part(value: Any, escape: Escaper) -> str:
    """Raw SQL fragment. ``None`` is rejected; ``''`` and ``False`` give an empty fragment."""
    if not _is_scalar(value):
        raise ParseError(
            f"Expected scalar value for part placeholder, found {_type_name(value)} instead"
        )
    return _stringify(value)


CONVERTERS: dict[PlaceholderKind, Callable[[Any, Escaper], str]] = {
    PlaceholderKind.STRING: convert_string,
    PlaceholderKind.INTEGER: convert_integer,
    PlaceholderKind.IDENTIFIER: convert_identifier,
    PlaceholderKind.ARRAY: convert_array,
    PlaceholderKind.MAP: convert_map,
    PlaceholderKind.PART: convert_part,
}
