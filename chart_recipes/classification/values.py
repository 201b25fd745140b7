"""Lenient value parsing shared by the detectors.

Sampled cell values arrive as whatever the source produced: ints, floats,
numeric strings, strings with trailing units. These helpers read the leading
number out of a value the way a spreadsheet would, and return ``None`` when
there is none.
"""

from __future__ import annotations

import math
import re
from typing import Any

_LEADING_FLOAT = re.compile(r"^\s*([-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?)")
_LEADING_INT = re.compile(r"^\s*([-+]?\d+)")


def parse_float(value: Any) -> float | None:
    """Return the leading float in ``value``, or ``None``.

    Booleans are not numbers here. NaN and infinities are rejected.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        result = float(value)
    else:
        match = _LEADING_FLOAT.match(str(value))
        if match is None:
            return None
        result = float(match.group(1))
    if math.isnan(result) or math.isinf(result):
        return None
    return result


def parse_leading_int(value: Any) -> int | None:
    """Return the leading integer in ``value`` (``"2024-01-15"`` → 2024), or ``None``."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return None if math.isnan(value) or math.isinf(value) else int(value)
    match = _LEADING_INT.match(str(value))
    return int(match.group(1)) if match else None


def numeric_sample(values: list[Any]) -> list[float]:
    """Parse every value with ``parse_float`` and drop the failures."""
    parsed = (parse_float(v) for v in values)
    return [v for v in parsed if v is not None]
