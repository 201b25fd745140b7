"""
Tests for chart_recipes/taxonomy/recipe_taxonomy.py.

Covers:
  - Enum string values (they appear in JSON output and config).
  - Chart family sets reference real chart types and stay consistent with
    the default catalog.
"""

from __future__ import annotations

import pytest

from chart_recipes.recipes.catalog import DEFAULT_CATALOG
from chart_recipes.taxonomy.recipe_taxonomy import (
    COMPLEX_CHART_TYPES,
    MAP_CHART_TYPES,
    NETWORK_CHART_TYPES,
    NUMERIC_DECLARED_TYPES,
    THREE_D_CHART_TYPES,
    ChartType,
    DeclaredType,
    IngredientType,
)


class TestEnums:
    def test_ingredient_types(self):
        assert [t.value for t in IngredientType] == [
            "temporal", "numeric", "categorical", "geographic", "textual",
        ]

    def test_declared_types(self):
        assert {t.value for t in DeclaredType} == {"numeric", "date", "categorical", "text"}

    def test_chart_type_count(self):
        assert len(ChartType) == 17

    def test_string_comparison(self):
        assert ChartType.STACKED_BAR == "stackedbar"
        assert IngredientType("geographic") is IngredientType.GEOGRAPHIC

    def test_unknown_value_rejected(self):
        with pytest.raises(ValueError):
            ChartType("bubble")


class TestChartFamilies:
    @pytest.mark.parametrize(
        "family",
        [THREE_D_CHART_TYPES, NETWORK_CHART_TYPES, MAP_CHART_TYPES, COMPLEX_CHART_TYPES],
    )
    def test_every_family_member_has_a_recipe(self, family):
        catalog_types = {r.chart_type for r in DEFAULT_CATALOG}
        assert family <= catalog_types

    def test_three_d_and_map_families_disjoint(self):
        assert not THREE_D_CHART_TYPES & MAP_CHART_TYPES

    def test_numeric_declared_types(self):
        assert NUMERIC_DECLARED_TYPES == {DeclaredType.DATE, DeclaredType.NUMERIC}
