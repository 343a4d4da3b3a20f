"""
Numeric coercion for user-entered quantities and rates.

The engine never rejects a business input: anything that is missing,
non-numeric, non-finite or negative becomes 0 (or the given default).
"""

import math


def to_number(value, default: float = 0.0) -> float:
    """Parse a non-negative finite number. Handles strings like '10', ' 10.5 '."""
    if value is None or isinstance(value, bool):
        return default
    try:
        number = float(str(value).strip())
    except (ValueError, TypeError):
        return default
    if not math.isfinite(number) or number < 0:
        return default
    return number


def to_optional_number(value):
    """Like to_number, but an absent value stays None (used for per-line overrides)."""
    if value is None or (isinstance(value, str) and not value.strip()):
        return None
    return to_number(value)
