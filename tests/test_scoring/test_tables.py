"""
Tests for chart_recipes/scoring/tables.py — the chart-keyed data tables.
"""

from __future__ import annotations

from collections import Counter

import pytest

from chart_recipes.scoring.tables import (
    COMBINATION_BONUSES,
    COMPLEXITY_TARGETS,
    DEFAULT_TABLES,
    DIVERSITY_BONUS,
    PAIRING_BONUSES,
    CombinationRule,
    PairingRule,
)
from chart_recipes.taxonomy.recipe_taxonomy import ChartType, IngredientType

T = IngredientType.TEMPORAL
N = IngredientType.NUMERIC
C = IngredientType.CATEGORICAL


class TestTables:
    def test_complexity_targets_in_unit_range(self):
        assert all(0.0 <= v <= 1.0 for v in COMPLEXITY_TARGETS.values())

    def test_tables_are_read_only(self):
        with pytest.raises(TypeError):
            COMPLEXITY_TARGETS[ChartType.KPI] = 0.1  # type: ignore[index]

    def test_pie_has_no_combination_row(self):
        assert ChartType.PIE not in COMBINATION_BONUSES

    def test_default_bundle_points_at_module_tables(self):
        assert DEFAULT_TABLES.complexity_targets is COMPLEXITY_TARGETS
        assert DEFAULT_TABLES.pairing_bonuses is PAIRING_BONUSES


class TestCombinationRule:
    def test_minimums(self):
        rule = CombinationRule({C: 2, N: 1}, 0.1)
        assert rule.matches(Counter([C, C, N]), 3)
        assert not rule.matches(Counter([C, N]), 2)

    def test_exact_total(self):
        rule = CombinationRule({N: 1}, 0.15, exact_total=1)
        assert rule.matches(Counter([N]), 1)
        assert not rule.matches(Counter([N, C]), 2)


class TestPairingRule:
    def test_requires_chart_and_both_types(self):
        rule = PairingRule(frozenset({T, N}), frozenset({ChartType.LINE}), 0.08)
        assert rule.matches(ChartType.LINE, Counter([T, N]))
        assert not rule.matches(ChartType.BAR, Counter([T, N]))
        assert not rule.matches(ChartType.LINE, Counter([T]))

    @pytest.mark.parametrize(
        "chart_type, expected",
        [
            (ChartType.BAR, 0.06),
            (ChartType.PIE, 0.06),
            (ChartType.TREEMAP, 0.06),
            (ChartType.STACKED_BAR, 0.0),
        ],
    )
    def test_categorical_numeric_pairing(self, chart_type, expected):
        counts = Counter([C, N])
        bonus = sum(p.bonus for p in PAIRING_BONUSES if p.matches(chart_type, counts))
        assert bonus == pytest.approx(expected)


class TestDiversityRule:
    @pytest.mark.parametrize("distinct, expected", [(1, 0.0), (2, 0.05), (3, 0.1), (5, 0.1)])
    def test_scatter(self, distinct, expected):
        assert DIVERSITY_BONUS.bonus(ChartType.SCATTER, distinct) == expected

    def test_unlisted_chart(self):
        assert DIVERSITY_BONUS.bonus(ChartType.LINE, 4) == 0.0
