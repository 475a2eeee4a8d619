"""
mapping.coercion - Loose numeric coercion and "no value" detection.

Raw EAV values arrive as strings.  Numeric coercion is permissive: the
longest numeric prefix is used and anything unparsable becomes zero,
so "12abc" → 12 and "abc" → 0.  This is not input validation.
"""

from __future__ import annotations

import math
import re
from typing import Any

_NUMERIC_PREFIX = re.compile(r"^\s*([+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?)")


def to_float(value: Any) -> float:
    if value is None:
        return 0.0
    if isinstance(value, (bool, int, float)):
        return float(value)
    match = _NUMERIC_PREFIX.match(str(value))
    return float(match.group(1)) if match else 0.0


def to_int(value: Any) -> int:
    if value is None:
        return 0
    if isinstance(value, (bool, int)):
        return int(value)
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else 0
    match = _NUMERIC_PREFIX.match(str(value))
    if not match:
        return 0
    number = match.group(1)
    if any(c in number for c in ".eE"):
        # "1.9" → 1, "1e3" → 1000
        parsed = float(number)
        return int(parsed) if math.isfinite(parsed) else 0
    return int(number)


def is_empty(value: Any, keep_zero: bool = False) -> bool:
    """
    True when a normalized value carries nothing worth indexing.

    None, False, "" and empty containers are always empty.  Numeric
    zero and the string "0" are empty unless keep_zero is set.
    """
    if value is None or value is False:
        return True
    if isinstance(value, str):
        return value == "" or (value == "0" and not keep_zero)
    if isinstance(value, (int, float)):
        return value == 0 and not keep_zero
    if isinstance(value, (list, tuple, dict, set, frozenset)):
        return len(value) == 0
    return False
