"""
Best-effort numeric conversion for form and query values.

Values that do not look like numbers become NaN instead of raising, so
callers decide what a non-number means for them.
"""
import math
from typing import Optional, Union

Number = Union[int, float]

_PREFIXED_BASES = {"0x": 16, "0o": 8, "0b": 2}


def to_number(value: Optional[str]) -> Number:
    """
    Convert text to a number.

    - None (value not supplied) -> NaN
    - empty or whitespace-only text -> 0
    - decimal, scientific and "Infinity" forms -> float
    - 0x / 0o / 0b prefixed integers -> int
    - anything else -> NaN
    """
    if value is None:
        return math.nan

    text = value.strip()
    if not text:
        return 0

    prefix = text[:2].lower()
    if prefix in _PREFIXED_BASES:
        try:
            return int(text[2:], _PREFIXED_BASES[prefix])
        except ValueError:
            return math.nan

    # float() accepts spellings like "inf", "nan" and "1_000" that are not
    # numbers to a client
    lowered = text.lstrip("+-").lower()
    if "_" in text or lowered in ("inf", "nan"):
        return math.nan

    try:
        return float(text)
    except ValueError:
        return math.nan


def is_falsy_number(value: Number) -> bool:
    """True for NaN and zero"""
    return math.isnan(value) or value == 0


def normalize_number(value: Number) -> Number:
    """Return integral floats as int so they serialize as 30, not 30.0"""
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value
