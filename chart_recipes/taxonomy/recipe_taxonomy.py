"""
Recipe taxonomy: the enumerations every other package speaks in.

Three vocabularies describe a recommendation:
  - ``DeclaredType``   — the *input*: what the caller says a column holds.
  - ``IngredientType`` — the *meaning*: what the classifier decided it holds.
  - ``ChartType``      — the *output*: which visualization a recipe produces.

Chart families
--------------
Several scoring and filtering rules apply to groups of chart types rather
than a single one. The family sets below are the canonical definition of
those groups; rules must reference them instead of re-listing chart types.

This module has NO imports from any other ``chart_recipes`` package.
"""

from enum import StrEnum


class DeclaredType(StrEnum):
    """Column type as supplied by the surrounding application."""

    NUMERIC = "numeric"
    DATE = "date"
    CATEGORICAL = "categorical"
    TEXT = "text"


class IngredientType(StrEnum):
    """Semantic category assigned to a column by the classifier."""

    TEMPORAL = "temporal"
    """Dates, timestamps, years, quarters — anything that orders on a timeline."""

    NUMERIC = "numeric"
    """Measurable quantities suitable for axes and aggregation."""

    CATEGORICAL = "categorical"
    """Low-cardinality labels that split data into groups."""

    GEOGRAPHIC = "geographic"
    """Coordinates, addresses, postal codes, administrative regions."""

    TEXTUAL = "textual"
    """Free text or high-cardinality strings; least specific classification."""


class ChartType(StrEnum):
    """Visualization kinds a recipe can produce."""

    # ── Time series ───────────────────────────────────────────────────────────
    LINE = "line"
    AREA = "area"

    # ── Categorical comparison ────────────────────────────────────────────────
    BAR = "bar"
    PIE = "pie"
    TREEMAP = "treemap"
    STACKED_BAR = "stackedbar"

    # ── Distribution & correlation ────────────────────────────────────────────
    HISTOGRAM = "histogram"
    SCATTER = "scatter"
    HEATMAP = "heatmap"

    # ── Geographic ────────────────────────────────────────────────────────────
    MAP = "map"
    MAP3D = "map3d"

    # ── Three-dimensional ─────────────────────────────────────────────────────
    BAR3D = "bar3d"
    SCATTER3D = "scatter3d"
    SURFACE3D = "surface3d"

    # ── Relationships ─────────────────────────────────────────────────────────
    NETWORK = "network"
    NETWORK3D = "network3d"

    # ── Single metric ─────────────────────────────────────────────────────────
    KPI = "kpi"


# ── Chart families ────────────────────────────────────────────────────────────

THREE_D_CHART_TYPES: frozenset[ChartType] = frozenset({
    ChartType.SCATTER3D, ChartType.SURFACE3D, ChartType.BAR3D,
})
"""3D charts that need a reasonably large dataset to read well."""

NETWORK_CHART_TYPES: frozenset[ChartType] = frozenset({
    ChartType.NETWORK, ChartType.NETWORK3D,
})

MAP_CHART_TYPES: frozenset[ChartType] = frozenset({
    ChartType.MAP, ChartType.MAP3D,
})

COMPLEX_CHART_TYPES: frozenset[ChartType] = frozenset({
    ChartType.TREEMAP, ChartType.HEATMAP, ChartType.SURFACE3D, ChartType.NETWORK3D,
})
"""Charts that look empty or confusing when fed very simple data."""

NUMERIC_DECLARED_TYPES: frozenset[DeclaredType] = frozenset({
    DeclaredType.DATE, DeclaredType.NUMERIC,
})
"""Declared types the caller can only assign with schema knowledge; boosts potency."""
