"""
Pattern library: every regex, keyword set, and numeric threshold the
column classifier relies on.

Nothing in here makes a decision; the detectors in ``geographic.py``,
``temporal.py`` and ``classifier.py`` combine these constants into ordered
rules. Keeping them in one module means a misclassification can be traced to
a single named constant.

Groups
------
  Geographic  — keyword / ambiguous / context / qualifier / hint word sets,
                canonical name patterns, coordinate and code value patterns.
  Temporal    — exact names, inclusion and exclusion name patterns,
                value patterns.
  Categorical — short value patterns typical of enumerations.
  Ranges      — coordinate, year and Unix-epoch ranges.
  Cardinality — unique-count and unique-ratio thresholds.

This module has NO imports from any other ``chart_recipes`` package.
"""

from __future__ import annotations

import re

# ── Name tokenization ─────────────────────────────────────────────────────────

NAME_TOKEN_SPLIT = re.compile(r"[_\s\-.]+")


def tokenize_name(name: str) -> list[str]:
    """Lower-case ``name`` and split it into non-empty word tokens."""
    return [t for t in NAME_TOKEN_SPLIT.split(name.lower().strip()) if t]


def keyword_candidates(tokens: list[str]) -> list[str]:
    """Single tokens plus ``_``-joined adjacent pairs (``zip``, ``code`` → ``zip_code``)."""
    pairs = [f"{a}_{b}" for a, b in zip(tokens, tokens[1:])]
    return tokens + pairs


# ── Geographic ────────────────────────────────────────────────────────────────

GEO_KEYWORDS: frozenset[str] = frozenset({
    "latitude", "longitude", "lat", "lng", "lon",
    "postal_code", "zip_code", "zipcode", "postcode",
    "country_code", "country_iso", "state_code", "province_code",
    "x_coord", "y_coord", "coord_x", "coord_y",
    "fips_code", "geoname_id", "place_id",
})
"""Unambiguous geographic terms. Two-word entries match adjacent name tokens."""

GEO_AMBIGUOUS_TERMS: frozenset[str] = frozenset({
    "state", "location", "address", "city", "country", "region",
    "area", "zone", "district", "territory", "place",
})
"""Terms that are geographic only in the right context."""

GEO_NON_CONTEXT_WORDS: frozenset[str] = frozenset({
    "email", "ip", "mac", "memory", "application", "app",
    "order", "process", "machine", "server", "network",
    "connection", "session", "user", "account", "system",
    "database", "file", "document", "record", "status",
    "error", "exception", "log", "debug", "test",
})
"""Co-occurring words that mark an ambiguous term as non-geographic."""

GEO_QUALIFIERS: frozenset[str] = frozenset({
    "shipping", "billing", "delivery", "mailing",
    "customer", "client", "store", "branch", "office",
    "warehouse", "facility", "site", "venue",
    "home", "work", "business", "residential",
    "origin", "destination", "pickup", "dropoff",
})
"""Co-occurring words that confirm an ambiguous term is geographic."""

GEO_HINT_WORDS: frozenset[str] = frozenset({
    "coord", "geo", "map", "spatial", "cartesian",
    "mercator", "utm", "wgs84", "gps", "navigation",
})
"""Substrings that unlock value-based geographic detection."""

GEO_CANONICAL_NAME_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"^(address|city|state|country)$", re.IGNORECASE),
    re.compile(r"^(full_address|street_address)$", re.IGNORECASE),
    re.compile(r"^(home_|work_|billing_|shipping_)", re.IGNORECASE),
    re.compile(r"_(address|city|state|country)$", re.IGNORECASE),
)

LATITUDE_NAME_PATTERN = re.compile(r"(lat|latitude|y_coord)", re.IGNORECASE)
LONGITUDE_NAME_PATTERN = re.compile(r"(lng|lon|longitude|x_coord)", re.IGNORECASE)
COUNTRY_CODE_NAME_PATTERN = re.compile(
    r"^(country_code|nation_code|iso_country|country_iso)$", re.IGNORECASE
)

POSTAL_VALUE_PATTERN = re.compile(r"^\d{5}(-\d{4})?$|^[A-Z]\d[A-Z] \d[A-Z]\d$")
"""US ZIP / ZIP+4 or Canadian postal code."""

ISO_COUNTRY_VALUE_PATTERN = re.compile(r"^[A-Z]{2,3}$")

POSTAL_ID_NAME_PATTERN = re.compile(
    r"^(postal_code|zip_code|zipcode|postcode|fips_code)$", re.IGNORECASE
)
"""Numeric columns with these names are geographic when values are mostly unique."""

# ── Temporal ──────────────────────────────────────────────────────────────────

TEMPORAL_EXACT_NAMES: frozenset[str] = frozenset({
    "date", "datetime", "timestamp", "time",
    "created_at", "updated_at", "deleted_at",
    "created_date", "updated_date", "modified_date",
    "start_date", "end_date", "due_date",
    "birth_date", "hire_date", "termination_date",
    "publication_date", "expiry_date", "expiration_date",
})


def squash_name(name: str) -> str:
    """Lower-case ``name`` with ``_`` and ``-`` removed (``Created-At`` → ``createdat``)."""
    return re.sub(r"[_\-]", "", name.lower().strip())


TEMPORAL_EXACT_SQUASHED: frozenset[str] = frozenset(squash_name(n) for n in TEMPORAL_EXACT_NAMES)

TEMPORAL_INCLUSION_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"^(year|month|day|week|quarter)$", re.IGNORECASE),
    re.compile(r"_(date|time|timestamp|at)$", re.IGNORECASE),
    re.compile(r"^(date|time|timestamp)_", re.IGNORECASE),
    re.compile(
        r"\b(created|updated|modified|deleted|published|expired)\b.*\b(at|on|date|time)\b",
        re.IGNORECASE,
    ),
)

TEMPORAL_EXCLUSION_PATTERNS: dict[str, re.Pattern[str]] = {
    "financial":   re.compile(r"spend|cost|price|amount|revenue|profit|budget|expense", re.IGNORECASE),
    "aggregation": re.compile(r"count|total|sum|avg|average|mean|median", re.IGNORECASE),
    "metric":      re.compile(r"score|rating|rank|percent|ratio", re.IGNORECASE),
    "identifier":  re.compile(r"(^|_)id($|_)|code|number|num$", re.IGNORECASE),
}
"""Name patterns that are never temporal. Exclusion beats inclusion."""

TEMPORAL_VALUE_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"^\d{4}-\d{2}-\d{2}$"),
    re.compile(r"^\d{4}/\d{2}/\d{2}$"),
    re.compile(r"^\d{1,2}[-/]\d{1,2}[-/]\d{2,4}$"),
    re.compile(r"^\d{4}-\d{2}-\d{2}[T ]\d{2}:\d{2}:\d{2}"),
    re.compile(r"^(Jan|Feb|Mar|Apr|May|Jun|Jul|Aug|Sep|Oct|Nov|Dec)", re.IGNORECASE),
    re.compile(r"^Q[1-4]\s?\d{4}$"),
    re.compile(r"^\d{4}Q[1-4]$"),
)

# ── Categorical ───────────────────────────────────────────────────────────────

CATEGORY_VALUE_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"^(yes|no|true|false|y|n|t|f)$", re.IGNORECASE),
    re.compile(r"^(active|inactive|enabled|disabled|on|off)$", re.IGNORECASE),
    re.compile(r"^(high|medium|low|small|large|xl|xxl)$", re.IGNORECASE),
    re.compile(r"^(new|old|pending|approved|rejected|cancelled)$", re.IGNORECASE),
    re.compile(r"^[A-Z]{1,3}$"),
)

# ── Ranges ────────────────────────────────────────────────────────────────────

LATITUDE_RANGE: tuple[float, float] = (-90.0, 90.0)
LONGITUDE_RANGE: tuple[float, float] = (-180.0, 180.0)
YEAR_RANGE: tuple[int, int] = (1900, 2100)
UNIX_EPOCH_RANGE: tuple[float, float] = (1_000_000_000, 10_000_000_000)
"""Seconds since 1970: roughly Sep 2001 through Nov 2286."""

# ── Cardinality ───────────────────────────────────────────────────────────────

LOW_CATEGORICAL_UNIQUE = 50
MEDIUM_CATEGORICAL_UNIQUE = 200
LOW_UNIQUENESS_RATIO = 0.7
MEDIUM_UNIQUENESS_RATIO = 0.5
HIGH_UNIQUENESS_GEOGRAPHIC = 0.8
