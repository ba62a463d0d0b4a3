"""
Input coercion helpers shared by the services

Clients send numbers as JSON numbers or as strings ("4"); these helpers
turn them into Python numbers or raise InvalidRequestError.
"""
import math
from typing import Any, Optional, Union

from app.core.errors import InvalidRequestError


def parse_number(token: str) -> Optional[Union[int, float]]:
    """
    Parse a string as a number

    Returns:
        int for integral values ("38", "38.0"), float for other finite
        values ("37.5"), None when the string is not a finite number
    """
    # float() accepts digit separators ("1_000"); clients do not send them
    if "_" in token:
        return None
    try:
        value = float(token)
    except ValueError:
        return None

    if not math.isfinite(value):
        return None
    if value.is_integer():
        return int(value)
    return value


def coerce_space_count(value: Any, field: str = "spaces") -> int:
    """
    Coerce a space count to a non-negative int

    Accepts ints, integral floats and numeric strings.

    Raises:
        InvalidRequestError: For anything else, including negative counts
    """
    number: Optional[Union[int, float]] = None
    if isinstance(value, bool):
        number = None
    elif isinstance(value, int):
        number = value
    elif isinstance(value, float):
        number = int(value) if math.isfinite(value) and value.is_integer() else None
    elif isinstance(value, str):
        number = parse_number(value.strip())

    if not isinstance(number, int):
        raise InvalidRequestError(f"{field} must be a whole number, got {value!r}")
    if number < 0:
        raise InvalidRequestError(f"{field} cannot be negative, got {value!r}")
    return number


def require_text(value: Any) -> bool:
    """True when value is a non-blank string"""
    return isinstance(value, str) and bool(value.strip())
