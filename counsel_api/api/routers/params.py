"""
Request parameter parsing shared by routers.

Dependencies: counsel_api.core
System role: Path/query validation producing 400 responses
"""

from counsel_api.core.exceptions import ValidationError
from counsel_api.core.ids import parse_int_id


def require_int_id(value: str | None, name: str) -> int:
    """
    Parse a required id or reject the request.

    Args:
        value: Raw path/query value
        name: Client-facing parameter name used in the error message

    Returns:
        int: Parsed id

    Raises:
        ValidationError: Value is not numeric
    """
    parsed = parse_int_id(value)
    if parsed is None:
        raise ValidationError(f"bad {name}", field=name, details={"value": value})
    return parsed


def paging_value(value: str | None, default: int, name: str) -> int:
    """
    Parse a paging query value.

    Missing, non-numeric and zero values fall back to ``default``.

    Args:
        value: Raw query value
        default: Fallback value
        name: Client-facing parameter name used in the error message

    Returns:
        int: Non-negative paging value

    Raises:
        ValidationError: Value is negative
    """
    parsed = parse_int_id(value)
    if not parsed:
        return default
    if parsed < 0:
        raise ValidationError(f"bad {name}", field=name, details={"value": value})
    return parsed
