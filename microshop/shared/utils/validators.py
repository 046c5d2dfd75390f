"""
Lenient parsing of query string parameters
"""

import math
import re
from typing import Optional

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")
_LEADING_NUMBER = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def parse_limit(value: Optional[str]) -> Optional[int]:
    """
    Parse a result limit from its leading integer

    "10" and "10abc" give 10; absent or non-numeric values give None,
    meaning no limit.
    """
    if value is None:
        return None
    match = _LEADING_INT.match(value)
    if not match:
        return None
    return int(match.group(1))


def parse_number(value: Optional[str]) -> Optional[float]:
    """Parse a numeric bound from its leading number, None when absent or non-numeric"""
    if value is None:
        return None
    match = _LEADING_NUMBER.match(value)
    if not match:
        return None
    number = float(match.group(1))
    return number if math.isfinite(number) else None


def apply_limit(records: list, limit: Optional[int]) -> list:
    """Truncate to the first ``limit`` records"""
    if limit is None:
        return records
    return records[:max(limit, 0)]
