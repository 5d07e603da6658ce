"""
Numeric Parsing

Profile and university records arrive from external stores with untyped
fields ("3.8", 3.8, Decimal("3.80"), None, ""). Every calculator goes
through this one helper so that an unusable value always degrades to
"absent" rather than NaN or zero.
"""

import math
from decimal import Decimal, InvalidOperation
from typing import Any, Optional


def parse_optional_number(value: Any) -> Optional[float]:
    """
    Parse a possibly-missing numeric field.

    Returns:
        The value as a finite float, or None when the value is missing,
        blank, non-numeric, NaN or infinite.
    """
    if value is None or isinstance(value, bool):
        return None

    if isinstance(value, (int, float, Decimal)):
        try:
            number = float(value)
        except (InvalidOperation, OverflowError, ValueError):
            return None
    elif isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        try:
            number = float(text)
        except ValueError:
            return None
    else:
        return None

    if not math.isfinite(number):
        return None
    return number


def round_half_up(value: float) -> int:
    """Round a non-negative number to the nearest integer, halves up."""
    return int(math.floor(value + 0.5))


def is_provided(value: Optional[float]) -> bool:
    """
    Whether a parsed value counts as supplied for rubric activation.

    Zero is a real score (a 0 budget still rules out paid tuition).
    """
    return value is not None
