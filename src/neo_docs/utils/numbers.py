"""Numeric coercion helpers."""

from typing import Any


def to_natural_number(value: Any) -> int:
    """Coerce a page or limit input to a natural number.

    Positive integers and strings of digits pass through; anything else,
    including zero, negatives, floats and booleans, becomes 1.
    """
    if isinstance(value, bool):
        return 1
    if isinstance(value, str):
        value = value.strip()
        if not value.isdigit():
            return 1
        value = int(value)
    if isinstance(value, int) and value > 0:
        return value
    return 1
