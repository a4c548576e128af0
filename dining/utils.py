"""Small helpers: lenient integer parsing, argument checks and a millisecond clock."""

from __future__ import annotations

import re
import time
from collections.abc import Iterable

_LEADING_INT = re.compile(r"[\t\n\v\f\r ]*([+-]?)([0-9]*)")
_INT_BITS = 32


def _wrap_int32(value: int) -> int:
    """Wrap an integer the way a 32-bit signed accumulator would."""
    half = 1 << (_INT_BITS - 1)
    return ((value + half) % (1 << _INT_BITS)) - half


def parse_int(text: str) -> int:
    """Parse a leading integer the way ``atoi`` does.

    Leading whitespace is skipped, one optional sign is accepted and digits
    are read until the first non-digit. Text without digits yields 0.
    """
    match = _LEADING_INT.match(text)
    sign, digits = match.group(1), match.group(2)
    if not digits:
        return 0
    value = int(digits)
    if sign == "-":
        value = -value
    return _wrap_int32(value)


def is_numeric(args: Iterable[str]) -> bool:
    """Return True if every argument is an optional sign followed by digits only."""
    for arg in args:
        body = arg[1:] if arg.startswith(("+", "-")) else arg
        if any(char not in "0123456789" for char in body):
            return False
    return True


def now_ms() -> int:
    """Current wall-clock time in whole milliseconds."""
    return time.time_ns() // 1_000_000