"""
Geographic column detection with contextual name analysis.

Pattern-matching alone produces many false positives on business schemas
(``order_status``, ``server_location``, ``app_region``). Detection therefore
reads the name as a set of word tokens and weighs the context around any
ambiguous term.

Decision order (first match wins)
---------------------------------
    1. KEYWORD     : any token (or adjacent token pair) is an unambiguous
                     geographic keyword                          → geographic
    2. AMBIGUOUS   : name holds an ambiguous term (state, city, region …)
         2a. non-geo context word present (email, order …)  → not by name
         2b. geo qualifier present (shipping, customer …)   → geographic
         2c. full name is a canonical pattern (city, billing_…) → geographic
    3. VALUES      : ≥ min samples and a geo hint in the name (coord, gps …)
         3a. numeric values in latitude range with a latitude name
         3b. numeric values in longitude range with a longitude name
         3c. any sampled value is a postal code
         3d. country-code name and every sampled value is an ISO code

``analyze_geographic`` reports the same decision with a confidence,
reasoning lines and naming suggestions for display.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import StrEnum

from chart_recipes.classification.patterns import (
    COUNTRY_CODE_NAME_PATTERN,
    GEO_AMBIGUOUS_TERMS,
    GEO_CANONICAL_NAME_PATTERNS,
    GEO_HINT_WORDS,
    GEO_KEYWORDS,
    GEO_NON_CONTEXT_WORDS,
    GEO_QUALIFIERS,
    ISO_COUNTRY_VALUE_PATTERN,
    LATITUDE_NAME_PATTERN,
    LATITUDE_RANGE,
    LONGITUDE_NAME_PATTERN,
    LONGITUDE_RANGE,
    POSTAL_VALUE_PATTERN,
    keyword_candidates,
    tokenize_name,
)
from chart_recipes.classification.values import numeric_sample
from chart_recipes.models.column import Column
from chart_recipes.taxonomy.recipe_taxonomy import DeclaredType

logger = logging.getLogger(__name__)

DEFAULT_SAMPLE_SIZE = 50
DEFAULT_MIN_VALUE_SAMPLES = 5


class GeographicSubtype(StrEnum):
    """Coarse kind of geographic data, inferred from the column name."""

    COORDINATES = "coordinates"
    ADDRESS = "address"
    POSTAL = "postal"
    ADMINISTRATIVE = "administrative"
    IDENTIFIER = "identifier"
    UNKNOWN = "unknown"


@dataclass
class GeographicAnalysis:
    """Explained geographic decision for one column.

    Attributes:
        is_geographic: ``confidence > 0.5``.
        confidence:    0.0–1.0 strength of the geographic reading.
        reasoning:     Ordered explanation lines.
        suggestions:   Renaming / data-format hints for the user.
        subtype:       Kind of geographic data; ``None`` unless geographic.
    """

    is_geographic: bool
    confidence:    float
    reasoning:     list[str] = field(default_factory=list)
    suggestions:   list[str] = field(default_factory=list)
    subtype:       GeographicSubtype | None = None


# ── Name-based detection ──────────────────────────────────────────────────────

def geographic_by_name(name: str) -> bool:
    """Rules 1–2: decide from the column name alone."""
    tokens = tokenize_name(name)
    if any(c in GEO_KEYWORDS for c in keyword_candidates(tokens)):
        return True

    if not any(t in GEO_AMBIGUOUS_TERMS for t in tokens):
        return False
    if any(t in GEO_NON_CONTEXT_WORDS for t in tokens):
        return False
    if any(t in GEO_QUALIFIERS for t in tokens):
        return True
    return is_canonical_geographic_name(name)


def is_canonical_geographic_name(name: str) -> bool:
    normalized = name.lower().strip()
    return any(p.search(normalized) for p in GEO_CANONICAL_NAME_PATTERNS)


def has_geo_hint(name: str) -> bool:
    normalized = name.lower().strip()
    return any(hint in normalized for hint in GEO_HINT_WORDS)


# ── Value-based detection ─────────────────────────────────────────────────────

def geographic_by_values(
    column: Column,
    sample_size: int = DEFAULT_SAMPLE_SIZE,
    min_value_samples: int = DEFAULT_MIN_VALUE_SAMPLES,
) -> bool:
    """Rule 3: confirm a geo-hinted name from the sampled values."""
    if len(column.values) < min_value_samples:
        return False
    name = column.name.lower().strip()
    if not has_geo_hint(name):
        return False

    sample = list(column.values[:sample_size])

    if column.declared_type == DeclaredType.NUMERIC:
        numbers = numeric_sample(sample)
        if numbers:
            lo, hi = min(numbers), max(numbers)
            if (
                LATITUDE_RANGE[0] <= lo and hi <= LATITUDE_RANGE[1]
                and LATITUDE_NAME_PATTERN.search(name)
            ):
                return True
            if (
                LONGITUDE_RANGE[0] <= lo and hi <= LONGITUDE_RANGE[1]
                and LONGITUDE_NAME_PATTERN.search(name)
            ):
                return True

    if any(v is not None and POSTAL_VALUE_PATTERN.match(str(v)) for v in sample):
        return True

    if COUNTRY_CODE_NAME_PATTERN.match(name) and all(
        v is not None and ISO_COUNTRY_VALUE_PATTERN.match(str(v)) for v in sample
    ):
        return True

    return False


# ── Diagnostics ───────────────────────────────────────────────────────────────

def analyze_geographic(
    column: Column,
    sample_size: int = DEFAULT_SAMPLE_SIZE,
    min_value_samples: int = DEFAULT_MIN_VALUE_SAMPLES,
) -> GeographicAnalysis:
    """Explain the geographic reading of ``column`` with a confidence score.

    Confidence levels:
        0.95  explicit keyword
        0.80  ambiguous term with a geo qualifier, or values confirm a hint
        0.70  ambiguous term matching a canonical name pattern
        0.30  ambiguous term without context
        0.10  ambiguous term with a non-geographic context word
    """
    normalized = column.name.lower().strip()
    tokens = tokenize_name(normalized)
    reasoning: list[str] = []
    suggestions: list[str] = []
    confidence = 0.0

    keywords = [c for c in keyword_candidates(tokens) if c in GEO_KEYWORDS]
    if keywords:
        confidence = 0.95
        reasoning.append(f"Contains explicit geographic keywords: {', '.join(keywords)}")

    ambiguous = [t for t in tokens if t in GEO_AMBIGUOUS_TERMS]
    if ambiguous:
        reasoning.append(f"Contains potentially geographic terms: {', '.join(ambiguous)}")
        non_geo = [t for t in tokens if t in GEO_NON_CONTEXT_WORDS]
        qualifiers = [t for t in tokens if t in GEO_QUALIFIERS]

        if non_geo:
            confidence = 0.1
            reasoning.append(f"Non-geographic context detected: {', '.join(non_geo)}")
            suggestions.append("Consider renaming if this is actually geographic data")
        elif qualifiers:
            confidence = 0.8
            reasoning.append(f"Geographic qualifiers present: {', '.join(qualifiers)}")
        elif is_canonical_geographic_name(normalized):
            confidence = 0.7
            reasoning.append("Matches common geographic naming pattern")
        else:
            confidence = 0.3
            reasoning.append("Ambiguous term without clear context")
            suggestions.append(
                "Add geographic qualifier (e.g., customer_location, shipping_address)"
            )

    if has_geo_hint(normalized) and len(column.values) >= min_value_samples:
        reasoning.append("Column name suggests geographic data, checking values...")
        if geographic_by_values(column, sample_size=sample_size, min_value_samples=min_value_samples):
            confidence = max(confidence, 0.8)
            reasoning.append("Values confirm geographic nature")
        else:
            reasoning.append("Values do not confirm geographic nature")
            suggestions.append("Verify data format matches geographic standards")

    is_geo = confidence > 0.5
    if not is_geo and ambiguous:
        suggestions.append("If this is geographic data, consider using more specific naming")

    logger.debug(
        "Geographic analysis for %s: confidence=%.2f", column.name, confidence
    )
    return GeographicAnalysis(
        is_geographic=is_geo,
        confidence=confidence,
        reasoning=reasoning,
        suggestions=suggestions,
        subtype=geographic_subtype(column.name) if is_geo else None,
    )


def geographic_subtype(name: str) -> GeographicSubtype:
    """Guess what kind of geographic data a column holds from its name."""
    normalized = name.lower()

    if LATITUDE_NAME_PATTERN.search(normalized) or LONGITUDE_NAME_PATTERN.search(normalized):
        return GeographicSubtype.COORDINATES
    if "address" in normalized or "street" in normalized:
        return GeographicSubtype.ADDRESS
    if "postal" in normalized or "zip" in normalized:
        return GeographicSubtype.POSTAL
    if any(term in normalized for term in ("country", "state", "province")):
        return GeographicSubtype.ADMINISTRATIVE
    if "id" in normalized or "code" in normalized:
        return GeographicSubtype.IDENTIFIER
    return GeographicSubtype.UNKNOWN
