"""Number parsing and formatting for SVG attribute values."""

import math
import re
from typing import Optional, Union

# Longest numeric prefix of an attribute value, e.g. "12.5px" -> "12.5"
_LEADING_NUMBER = re.compile(r'\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)')


def parse_float(value: Optional[str]) -> float:
    """
    Parse the leading number of an attribute value.

    Trailing units are ignored ("50px" -> 50.0). Returns NaN when the value is
    missing or does not start with a number.
    """
    if not value:
        return math.nan
    match = _LEADING_NUMBER.match(value)
    if match is None:
        stripped = value.strip()
        if stripped.startswith(('Infinity', '+Infinity')):
            return math.inf
        if stripped.startswith('-Infinity'):
            return -math.inf
        return math.nan
    return float(match.group(1))


def parse_strict(token: str) -> float:
    """Parse a whole token as a number, NaN if it is not one."""
    try:
        return float(token)
    except ValueError:
        return math.nan


def round_half_up(value: float) -> int:
    """Round .5 towards positive infinity (round(2.5) == 3, round(-2.5) == -2)."""
    return math.floor(value + 0.5)


def format_number(value: Union[int, float]) -> str:
    """
    Format a number in its shortest form for an attribute value.

    Integral floats lose their fraction (8.0 -> "8"); other floats use the
    shortest repr that round-trips (4.8 -> "4.8").
    """
    if isinstance(value, bool):
        return 'true' if value else 'false'
    if isinstance(value, float):
        if math.isnan(value):
            return 'NaN'
        if math.isinf(value):
            return 'Infinity' if value > 0 else '-Infinity'
        if value.is_integer():
            return str(int(value))
        return repr(value)
    return str(value)
