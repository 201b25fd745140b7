"""
Temporal column detection helpers, called by the classifier's temporal rules.

Decision order (first match wins)
---------------------------------
    1. EXACT      : squashed name is a canonical temporal name
                    (``created_at``, ``timestamp`` …)             → temporal
    2. DECLARED   : declared type is ``date``                      → temporal
    3. EXCLUSION  : name holds a financial / aggregation / metric /
                    identifier term (``revenue``, ``count`` …)    → NOT temporal
    4. INCLUSION  : name matches a time-unit, ``_date`` suffix,
                    ``date_`` prefix or "created … at" pattern    → temporal
    5. VALUES     : > match_ratio of the first ``sample_size``
                    non-null values look like dates, quarters
                    or years                                      → temporal

Exclusion always beats inclusion and the value fallback:
``total_spend_date`` is a money column that happens to mention a date.
"""

from __future__ import annotations

from typing import Any

from chart_recipes.classification.patterns import (
    TEMPORAL_EXACT_SQUASHED,
    TEMPORAL_EXCLUSION_PATTERNS,
    TEMPORAL_INCLUSION_PATTERNS,
    TEMPORAL_VALUE_PATTERNS,
    YEAR_RANGE,
    squash_name,
)
from chart_recipes.classification.values import parse_leading_int

DEFAULT_SAMPLE_SIZE = 20


def is_exact_temporal_name(name: str) -> bool:
    return squash_name(name) in TEMPORAL_EXACT_SQUASHED


def temporal_exclusion(name: str) -> str | None:
    """Return the exclusion group that rules ``name`` out, or ``None``."""
    normalized = name.lower().strip()
    for group, pattern in TEMPORAL_EXCLUSION_PATTERNS.items():
        if pattern.search(normalized):
            return group
    return None


def matches_temporal_inclusion(name: str) -> bool:
    normalized = name.lower().strip()
    return any(p.search(normalized) for p in TEMPORAL_INCLUSION_PATTERNS)


def looks_like_temporal_value(value: Any) -> bool:
    """True for date strings, quarter codes, month names and years in range."""
    text = str(value).strip()
    if any(p.match(text) for p in TEMPORAL_VALUE_PATTERNS):
        return True
    year = parse_leading_int(value)
    return year is not None and YEAR_RANGE[0] <= year <= YEAR_RANGE[1]


def temporal_value_ratio(values: tuple[Any, ...] | list[Any], sample_size: int = DEFAULT_SAMPLE_SIZE) -> float:
    """Fraction of the first ``sample_size`` non-null values that look temporal.

    Nulls are dropped *after* slicing, so a sample padded with ``None`` is
    judged on fewer values. Returns 0.0 when nothing is left.
    """
    sample = [v for v in list(values)[:sample_size] if v is not None]
    if not sample:
        return 0.0
    matches = sum(1 for v in sample if looks_like_temporal_value(v))
    return matches / len(sample)

