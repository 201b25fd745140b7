"""
Per-chart-type bonus and penalty tables.

Every chart-specific constant the scoring engine uses lives here as data,
keyed by ``ChartType``. The engine contains no ``if chart_type == …`` branches
for these terms; to retune a chart, edit its rows.

Tables
------
COMPLEXITY_TARGETS     : chart sophistication 0.2 (pie) … 1.0 (surface3d);
                         charts not listed use ``ScoringConfig.default_complexity_target``.
OVERCROWDING_TOLERANCE : per-extra-ingredient penalty for charts that handle
                         extra dimensions well; others use the config default.
SIZE_PREFERENCES       : bonus by data-size bucket (small / medium / large).
DIVERSITY_BONUS        : bonus by number of distinct ingredient types, for
                         multi-dimensional charts.
COMBINATION_BONUSES    : per-chart "perfect combination" type-count rules.
PAIRING_BONUSES        : type-pair synergies shared by a family of charts.

The pie chart's perfect-combination term is computed by the pie handler, not
by a row here.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from chart_recipes.taxonomy.recipe_taxonomy import ChartType, IngredientType

_T = IngredientType.TEMPORAL
_N = IngredientType.NUMERIC
_C = IngredientType.CATEGORICAL
_G = IngredientType.GEOGRAPHIC


@dataclass(frozen=True)
class SizePreference:
    """Bonus (or penalty when negative) per data-size bucket."""

    small:  float
    medium: float
    large:  float


@dataclass(frozen=True)
class CombinationRule:
    """Bonus when ingredient type counts meet every minimum.

    Attributes:
        minimums:    ``{type: minimum count}``; all must hold.
        bonus:       Added to the score when the rule holds.
        exact_total: When set, the total ingredient count must equal this.
    """

    minimums:    Mapping[IngredientType, int]
    bonus:       float
    exact_total: int | None = None

    def matches(self, counts: Counter[IngredientType], total: int) -> bool:
        if self.exact_total is not None and total != self.exact_total:
            return False
        return all(counts[t] >= n for t, n in self.minimums.items())


@dataclass(frozen=True)
class PairingRule:
    """Bonus when both ``types`` are present, for any chart in ``charts``."""

    types:  frozenset[IngredientType]
    charts: frozenset[ChartType]
    bonus:  float

    def matches(self, chart_type: ChartType, counts: Counter[IngredientType]) -> bool:
        return chart_type in self.charts and all(counts[t] >= 1 for t in self.types)


@dataclass(frozen=True)
class DiversityRule:
    """Bonus by distinct-type count for multi-dimensional charts."""

    charts:       frozenset[ChartType]
    three_plus:   float
    two:          float

    def bonus(self, chart_type: ChartType, distinct_types: int) -> float:
        if chart_type not in self.charts:
            return 0.0
        if distinct_types >= 3:
            return self.three_plus
        if distinct_types >= 2:
            return self.two
        return 0.0


COMPLEXITY_TARGETS: Mapping[ChartType, float] = MappingProxyType({
    # Simple
    ChartType.PIE:       0.2,
    ChartType.BAR:       0.3,
    ChartType.LINE:      0.3,
    # Medium
    ChartType.HISTOGRAM: 0.4,
    ChartType.SCATTER:   0.5,
    ChartType.AREA:      0.5,
    ChartType.HEATMAP:   0.6,
    # Complex
    ChartType.TREEMAP:   0.7,
    ChartType.NETWORK:   0.8,
    ChartType.SCATTER3D: 0.9,
    ChartType.NETWORK3D: 0.95,
    ChartType.SURFACE3D: 1.0,
})

OVERCROWDING_TOLERANCE: Mapping[ChartType, float] = MappingProxyType({
    ChartType.NETWORK:   0.02,
    ChartType.TREEMAP:   0.025,
    ChartType.HEATMAP:   0.03,
    ChartType.SCATTER3D: 0.035,
    ChartType.SURFACE3D: 0.04,
})

SIZE_PREFERENCES: Mapping[ChartType, SizePreference] = MappingProxyType({
    ChartType.PIE:       SizePreference(small=0.1,   medium=0.05, large=-0.1),
    ChartType.TREEMAP:   SizePreference(small=0.0,   medium=0.08, large=0.1),
    ChartType.NETWORK:   SizePreference(small=0.05,  medium=0.1,  large=0.05),
    ChartType.HEATMAP:   SizePreference(small=-0.05, medium=0.08, large=0.12),
    ChartType.HISTOGRAM: SizePreference(small=-0.1,  medium=0.05, large=0.1),
    ChartType.SCATTER3D: SizePreference(small=-0.05, medium=0.05, large=0.08),
    ChartType.SURFACE3D: SizePreference(small=-0.1,  medium=0.0,  large=0.1),
})

DIVERSITY_BONUS = DiversityRule(
    charts=frozenset({ChartType.SCATTER, ChartType.HEATMAP, ChartType.SCATTER3D, ChartType.NETWORK}),
    three_plus=0.1,
    two=0.05,
)

COMBINATION_BONUSES: Mapping[ChartType, CombinationRule] = MappingProxyType({
    ChartType.HISTOGRAM: CombinationRule({_N: 1}, 0.15, exact_total=1),
    ChartType.SCATTER3D: CombinationRule({_N: 3}, 0.12),
    ChartType.SURFACE3D: CombinationRule({_N: 2, _C: 1}, 0.1),
    ChartType.BAR3D:     CombinationRule({_C: 1, _N: 1}, 0.08),
    ChartType.NETWORK:   CombinationRule({_C: 2}, 0.15),
    ChartType.NETWORK3D: CombinationRule({_C: 2, _N: 1}, 0.12),
    ChartType.TREEMAP:   CombinationRule({_C: 2, _N: 1}, 0.1),
    ChartType.MAP3D:     CombinationRule({_G: 1, _N: 1}, 0.12),
    ChartType.LINE:      CombinationRule({_T: 1, _N: 1}, 0.1),
    ChartType.AREA:      CombinationRule({_T: 1, _N: 1, _C: 1}, 0.08),
})

PAIRING_BONUSES: tuple[PairingRule, ...] = (
    PairingRule(
        frozenset({_T, _N}),
        frozenset({ChartType.LINE, ChartType.AREA, ChartType.SCATTER}),
        0.08,
    ),
    PairingRule(
        frozenset({_G, _N}),
        frozenset({ChartType.MAP, ChartType.MAP3D, ChartType.HEATMAP}),
        0.1,
    ),
    PairingRule(
        frozenset({_C, _N}),
        frozenset({ChartType.BAR, ChartType.PIE, ChartType.TREEMAP}),
        0.06,
    ),
)


@dataclass(frozen=True)
class ScoringTables:
    """Bundle of every chart-keyed table, injectable into ``ScoringEngine``."""

    complexity_targets:     Mapping[ChartType, float] = field(default_factory=lambda: COMPLEXITY_TARGETS)
    overcrowding_tolerance: Mapping[ChartType, float] = field(default_factory=lambda: OVERCROWDING_TOLERANCE)
    size_preferences:       Mapping[ChartType, SizePreference] = field(default_factory=lambda: SIZE_PREFERENCES)
    diversity_bonus:        DiversityRule = DIVERSITY_BONUS
    combination_bonuses:    Mapping[ChartType, CombinationRule] = field(default_factory=lambda: COMBINATION_BONUSES)
    pairing_bonuses:        tuple[PairingRule, ...] = PAIRING_BONUSES


DEFAULT_TABLES = ScoringTables()
