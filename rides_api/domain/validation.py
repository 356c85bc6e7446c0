"""
Field validation rules for rides.

All functions are pure.  Bounds are inclusive, so ``90`` and ``-180`` are
accepted.  Coordinates must be coerced with :func:`coerce_coordinate` first;
a ``None`` result is never treated as ``0``.
"""

from __future__ import annotations

import math
import re
from typing import Any, Optional

MIN_LATITUDE, MAX_LATITUDE = -90.0, 90.0
MIN_LONGITUDE, MAX_LONGITUDE = -180.0, 180.0

# SQLite INTEGER is a signed 64-bit value.
MAX_INTEGER = 2**63 - 1

# Plain decimal with optional exponent: no "1_0", "nan" or "inf".
_NUMBER_PATTERN = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


def coerce_coordinate(value: Any) -> Optional[float]:
    """Return *value* as a finite float, or ``None`` if it is not numeric."""
    if isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip()
        if not _NUMBER_PATTERN.fullmatch(value):
            return None
    elif not isinstance(value, (int, float)):
        return None

    try:
        number = float(value)
    except (ValueError, OverflowError):
        return None
    if not math.isfinite(number):
        return None
    return number


def is_valid_latitude(value: float) -> bool:
    return MIN_LATITUDE <= value <= MAX_LATITUDE


def is_valid_longitude(value: float) -> bool:
    return MIN_LONGITUDE <= value <= MAX_LONGITUDE


def is_non_empty_text(value: Any) -> bool:
    # No trimming: "  " is a valid name.
    return isinstance(value, str) and len(value) >= 1
