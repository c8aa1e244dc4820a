"""
Identifier parsing.

Path segments, query strings and JSON bodies all carry ids in loose form
("12", 12, 12.0, " 12 "). Everything funnels through parse_int_id.

Dependencies: None
System role: Shared id coercion for request validation
"""

import math
from typing import Any


def parse_int_id(value: Any) -> int | None:
    """
    Parse a loosely typed id into an int.

    Finite numbers and numeric strings are accepted; fractional values are
    truncated toward zero. In strings, digit separators ("1_000") are
    rejected and unsigned 0x/0o/0b literals are read in their base.
    Anything else yields None.

    Args:
        value: Raw id from a path, query string or JSON body

    Returns:
        int | None: Parsed id, or None when the value is not numeric

    Usage:
        parse_int_id("42")   # 42
        parse_int_id("4.9")  # 4
        parse_int_id("0x10") # 16
        parse_int_id("abc")  # None
    """
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        value = value.strip()
        if not value or "_" in value:
            return None
        if value[:2].lower() in ("0x", "0o", "0b"):
            try:
                return int(value, 0)
            except ValueError:
                return None
        try:
            return int(value)
        except ValueError:
            pass
        try:
            value = float(value)
        except ValueError:
            return None
    if isinstance(value, float):
        if not math.isfinite(value):
            return None
        return math.trunc(value)
    return None
