"""Conversion between query-string text and typed values.

Parsing functions raise ``CoercionError`` on failure; the extractors in
``searchparams.extraction`` catch it. ``parse_date`` is the exception: an
unparseable date becomes an ``InvalidDate`` value instead of an error,
and callers check ``is_valid_date`` themselves.

Numbers are parsed permissively by default, taking the longest numeric
prefix and ignoring trailing text::

    parse_int("12abc")    # 12
    parse_float("3.5kg")  # 3.5
    parse_int("12abc", strict=True)  # CoercionError
"""

import math
import re
from dataclasses import dataclass
from datetime import UTC, date, datetime, time
from email.utils import parsedate_to_datetime

from searchparams.errors import CoercionError

_INT_PREFIX = re.compile(r"\s*([+-]?)(?:0[xX]([0-9a-fA-F]*)|([0-9]+))")
_FLOAT_PREFIX = re.compile(r"\s*([+-]?(?:Infinity|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?))")
_STRICT_INT = re.compile(r"[+-]?[0-9]+")

_TRUE = "true"
_FALSE = "false"


@dataclass(frozen=True, slots=True)
class InvalidDate:
    """A date value whose source text could not be parsed.

    Returned by date extraction in place of ``None`` so the caller can
    tell "no value" apart from "a value that is not a date".
    """

    raw: str

    @property
    def is_valid(self) -> bool:
        return False

    def __str__(self) -> str:
        return "Invalid Date"


def is_valid_date(value: object) -> bool:
    """Return True if *value* is a real ``date`` or ``datetime``."""
    return isinstance(value, date)


# -- Parsing --


def parse_int(raw: str, *, strict: bool = False) -> int:
    """Parse *raw* as an integer.

    Permissive mode accepts leading whitespace, a sign, an optional
    ``0x`` hex prefix and then as many digits as are present. A ``0x``
    prefix with no hex digit after it is not a number.
    """
    if strict:
        text = raw.strip()
        if not _STRICT_INT.fullmatch(text):
            raise CoercionError(raw, "int", "not an integer")
        return _to_int(raw, text)

    match = _INT_PREFIX.match(raw)
    if match is None:
        raise CoercionError(raw, "int", "no leading digits")
    sign, hex_digits, digits = match.groups()
    if hex_digits == "":
        raise CoercionError(raw, "int", "no hex digits after 0x")
    number = _to_int(raw, hex_digits, 16) if hex_digits else _to_int(raw, digits)
    return -number if sign == "-" else number


def _to_int(raw: str, digits: str, base: int = 10) -> int:
    # int() refuses decimal strings over sys.get_int_max_str_digits()
    try:
        return int(digits, base)
    except ValueError as exc:
        raise CoercionError(raw, "int", str(exc)) from exc


def parse_float(raw: str, *, strict: bool = False) -> float:
    """Parse *raw* as a float.

    Permissive mode takes the longest decimal prefix (``Infinity`` included).
    """
    if strict:
        try:
            return float(raw.strip())
        except ValueError as exc:
            raise CoercionError(raw, "float", str(exc)) from exc

    match = _FLOAT_PREFIX.match(raw)
    if match is None:
        raise CoercionError(raw, "float", "no leading number")
    return float(match.group(1).replace("Infinity", "inf"))


def parse_boolean(raw: str) -> bool:
    """Parse exactly ``"true"`` or ``"false"`` (case-sensitive)."""
    if raw == _TRUE:
        return True
    if raw == _FALSE:
        return False
    raise CoercionError(raw, "bool", 'string must be either "true" or "false"')


def parse_date(raw: str) -> datetime | InvalidDate:
    """Parse *raw* as a date, never raising.

    Accepts ISO 8601 (a bare date is midnight UTC, ``Z`` means UTC) and
    RFC 2822 (``Tue, 15 Nov 1994 08:12:31 GMT``). Anything else comes
    back as ``InvalidDate(raw)``.
    """
    text = raw.strip()
    try:
        return datetime.combine(date.fromisoformat(text), time(), tzinfo=UTC)
    except ValueError:
        pass

    try:
        return datetime.fromisoformat(text)
    except ValueError:
        pass

    try:
        return parsedate_to_datetime(text)
    except (TypeError, ValueError, IndexError, OverflowError):
        return InvalidDate(raw)


# -- Formatting --


def to_param_string(value: object) -> str:
    """Return the canonical query-string form of a typed value.

    ``bool`` renders as ``"true"``/``"false"``, integral floats drop
    their fractional part, dates use ISO 8601.
    """
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return _TRUE if value else _FALSE
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return _format_float(value)
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, InvalidDate):
        return str(value)
    raise CoercionError(repr(value), "query string", f"unsupported type {type(value).__name__}")


def _format_float(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value.is_integer():
        return str(int(value))
    return repr(value)
