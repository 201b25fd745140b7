"""
Tests for chart_recipes/recipes/catalog.py.

What we test
------------
- DEFAULT_CATALOG holds 17 recipes, one per chart type, in catalog order.
- Construction rejects duplicate ids.
- get() and by_chart_type() lookups.
- Requirement tuples keep repeated types.
"""

from __future__ import annotations

import pytest

from chart_recipes.models.recipe import Recipe, RequiredIngredients
from chart_recipes.recipes.catalog import DEFAULT_CATALOG, DEFAULT_RECIPES, RecipeCatalog
from chart_recipes.taxonomy.recipe_taxonomy import ChartType, IngredientType


def _recipe(recipe_id: str, chart_type: ChartType = ChartType.BAR) -> Recipe:
    return Recipe(
        id=recipe_id,
        name=recipe_id.title(),
        chart_type=chart_type,
        reasoning="test recipe",
        required_ingredients=RequiredIngredients(primary=(IngredientType.CATEGORICAL,)),
    )


class TestDefaultCatalog:
    def test_size(self):
        assert len(DEFAULT_CATALOG) == 17

    def test_covers_every_chart_type_once(self):
        chart_types = [r.chart_type for r in DEFAULT_CATALOG]
        assert sorted(chart_types) == sorted(ChartType)

    def test_line_listed_before_area(self):
        ids = [r.id for r in DEFAULT_CATALOG]
        assert ids.index("temporal-essence-line") < ids.index("multi-dimensional-area")
        assert ids[0] == "temporal-essence-line"

    def test_every_recipe_explains_itself(self):
        for recipe in DEFAULT_CATALOG:
            assert recipe.reasoning
            assert recipe.effects

    def test_scatter3d_counts_repeated_numeric(self):
        recipe = DEFAULT_CATALOG.get("scatter-3d-constellation")
        assert recipe.required_ingredients.optimal_count == 3

    def test_kpi_has_no_secondary(self):
        recipe = DEFAULT_CATALOG.get("kpi-crystal-formation")
        assert recipe.required_ingredients.secondary is None

    def test_recipes_property_matches_iteration(self):
        assert DEFAULT_CATALOG.recipes == tuple(DEFAULT_CATALOG) == DEFAULT_RECIPES


class TestCustomCatalog:
    def test_duplicate_ids_rejected(self):
        with pytest.raises(ValueError, match="Duplicate recipe ids"):
            RecipeCatalog([_recipe("bar-one"), _recipe("bar-one")])

    def test_duplicate_chart_types_allowed(self):
        catalog = RecipeCatalog([_recipe("bar-one"), _recipe("bar-two")])
        assert len(catalog.by_chart_type(ChartType.BAR)) == 2

    def test_get_unknown_id(self):
        with pytest.raises(KeyError):
            DEFAULT_CATALOG.get("no-such-recipe")

    def test_empty_catalog(self):
        catalog = RecipeCatalog([])
        assert len(catalog) == 0
        assert catalog.by_chart_type(ChartType.PIE) == []
