"""String helpers: substring tests, number formatting and strict parsing, joining."""

from __future__ import annotations

import enum
import math
import numbers
import re
from decimal import Decimal

__all__ = [
    "StringError",
    "StringConversionError",
    "contains",
    "to_string",
    "parse_int",
    "parse_float",
    "concatenate_strings",
    "filter_strings",
]


class StringError(enum.Enum):
    """Kinds of failure reported by the string helpers."""

    EMPTY = "empty"
    INVALID_FORMAT = "invalid format"
    CONVERSION_ERROR = "conversion error"
    PATTERN_NOT_FOUND = "pattern not found"


class StringConversionError(ValueError):
    """Raised when text cannot be converted to a number."""

    def __init__(self, text, error=StringError.CONVERSION_ERROR):
        super().__init__(f"cannot convert {text!r}: {error.value}")
        self.text = text
        self.error = error


_INT_PATTERN = re.compile(r"-?[0-9]+")

_C_SPACE = "[ \t\n\v\f\r]*"
_HEX_FLOAT = r"[+-]?0[xX](?:[0-9a-fA-F]+\.?[0-9a-fA-F]*|\.[0-9a-fA-F]+)(?:[pP][+-]?[0-9]+)?"
_DEC_FLOAT = r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?"
_SPECIAL_FLOAT = r"[+-]?(?:inf(?:inity)?|nan)"
_HEX_RE = re.compile(_C_SPACE + "(" + _HEX_FLOAT + ")")
_DEC_RE = re.compile(_C_SPACE + "(" + _DEC_FLOAT + ")")
_SPECIAL_RE = re.compile(_C_SPACE + "(" + _SPECIAL_FLOAT + ")", re.IGNORECASE)
_NONZERO_DIGIT = re.compile(r"[1-9a-fA-F]")


def _require_str(value, what):
    if not isinstance(value, str):
        raise TypeError(f"{what} must be a string, not {type(value).__name__}")


def contains(haystack, needle):
    """Return True if ``needle`` occurs anywhere in ``haystack``."""
    _require_str(haystack, "haystack")
    _require_str(needle, "needle")
    return needle in haystack


def _shortest_float(value):
    """Format a float as the shorter of its fixed and scientific shortest forms."""
    if math.isnan(value):
        return "nan" if math.copysign(1.0, value) > 0 else "-nan"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    sign = "-" if math.copysign(1.0, value) < 0 else ""
    if value == 0.0:
        return sign + "0"
    _, digit_tuple, exponent = Decimal(repr(abs(value))).as_tuple()
    digits = "".join(map(str, digit_tuple))
    stripped = digits.rstrip("0")
    exponent += len(digits) - len(stripped)
    digits = stripped
    point = len(digits) + exponent

    if exponent >= 0:
        fixed = digits + "0" * exponent
    elif point > 0:
        fixed = f"{digits[:point]}.{digits[point:]}"
    else:
        fixed = "0." + "0" * (-point) + digits

    sci_exponent = point - 1
    mantissa = digits[0] + (f".{digits[1:]}" if len(digits) > 1 else "")
    exp_sign = "-" if sci_exponent < 0 else "+"
    scientific = f"{mantissa}e{exp_sign}{abs(sci_exponent):02d}"

    return sign + (scientific if len(scientific) < len(fixed) else fixed)


def to_string(value):
    """Return the shortest text form of an integer, bool or float."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, numbers.Integral):
        return str(int(value))
    if isinstance(value, numbers.Real):
        return _shortest_float(float(value))
    raise TypeError(f"expected a number, got {type(value).__name__}")


def parse_int(text):
    """Parse a whole string as a decimal integer.

    Only an optional leading minus sign and ASCII digits are accepted; the
    entire string must be consumed. Raises StringConversionError otherwise.
    """
    _require_str(text, "text")
    if _INT_PATTERN.fullmatch(text) is None:
        raise StringConversionError(text)
    return int(text)


def parse_float(text):
    """Parse a floating-point number from the start of ``text``.

    Leading whitespace is skipped and trailing characters after the number are
    ignored. Decimal, hexadecimal, infinity and NaN forms are recognised.
    Raises StringConversionError when no number is found or the value is out
    of range.
    """
    _require_str(text, "text")
    match = _HEX_RE.match(text)
    if match is not None:
        literal = match.group(1)
        try:
            result = float.fromhex(literal)
        except OverflowError:
            raise StringConversionError(text) from None
        mantissa = literal.split("x", 1)[-1].split("X", 1)[-1]
        mantissa = re.split("[pP]", mantissa)[0]
    else:
        match = _SPECIAL_RE.match(text)
        if match is not None:
            return float(match.group(1))
        match = _DEC_RE.match(text)
        if match is None:
            raise StringConversionError(text)
        literal = match.group(1)
        result = float(literal)
        mantissa = re.split("[eE]", literal)[0]
        if math.isinf(result):
            raise StringConversionError(text)
    if result == 0.0 and _NONZERO_DIGIT.search(mantissa):
        raise StringConversionError(text)
    return result


def concatenate_strings(strings, separator=""):
    """Join the strings of an iterable with ``separator`` between them."""
    _require_str(separator, "separator")
    return separator.join(strings)


def filter_strings(strings, predicate):
    """Return the strings for which ``predicate`` is true, in order."""
    return [item for item in strings if predicate(item)]