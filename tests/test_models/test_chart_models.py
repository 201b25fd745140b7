"""
Tests for chart_recipes/models/ (Column, Dataset, Ingredient, Recipe).

What we test
------------
- Boundary validation raises pydantic.ValidationError on malformed input.
- Models are frozen.
- Column cardinality helpers (None counts as a value, unhashable values).
- Dataset column lookup.
"""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from chart_recipes.models.column import Column, Dataset
from chart_recipes.models.ingredient import Ingredient
from chart_recipes.models.recipe import Recipe, RequiredIngredients
from chart_recipes.taxonomy.recipe_taxonomy import ChartType, DeclaredType, IngredientType


# ── Column / Dataset ──────────────────────────────────────────────────────────

class TestColumn:
    def test_empty_name_rejected(self):
        with pytest.raises(ValidationError):
            Column(name="  ", declared_type=DeclaredType.TEXT)

    def test_declared_type_from_string(self):
        col = Column(name="x", declared_type="numeric")
        assert col.declared_type == DeclaredType.NUMERIC

    def test_unknown_declared_type_rejected(self):
        with pytest.raises(ValidationError):
            Column(name="x", declared_type="money")

    def test_frozen(self):
        col = Column(name="x", declared_type=DeclaredType.TEXT)
        with pytest.raises(ValidationError):
            col.name = "y"

    def test_unique_count_includes_none(self):
        col = Column(name="x", declared_type=DeclaredType.TEXT, values=("a", None, "a", None))
        assert col.unique_value_count == 2
        assert col.unique_ratio == pytest.approx(0.5)
        assert col.non_null_values == ["a", "a"]

    def test_non_null_cardinality(self):
        col = Column(name="x", declared_type=DeclaredType.TEXT, values=("a", None, "b", "a"))
        assert col.non_null_unique_count == 2
        assert col.non_null_unique_ratio == pytest.approx(2 / 3)

    def test_non_null_cardinality_all_missing(self):
        col = Column(name="x", declared_type=DeclaredType.TEXT, values=(None, None))
        assert col.non_null_unique_count == 0
        assert col.non_null_unique_ratio == 0.0

    def test_unhashable_values(self):
        col = Column(name="x", declared_type=DeclaredType.TEXT, values=([1], [1], {"a": 1}))
        assert col.unique_value_count == 2

    def test_ratio_without_values(self):
        assert Column(name="x", declared_type=DeclaredType.TEXT).unique_ratio == 0.0


class TestDataset:
    def test_column_lookup(self, sales_dataset):
        assert sales_dataset.column("revenue").declared_type == DeclaredType.NUMERIC

    def test_unknown_column(self, sales_dataset):
        with pytest.raises(KeyError, match="nope"):
            sales_dataset.column("nope")

    def test_negative_row_count_rejected(self):
        with pytest.raises(ValidationError):
            Dataset(columns=(), row_count=-1)


# ── Ingredient ────────────────────────────────────────────────────────────────

class TestIngredient:
    @pytest.mark.parametrize("potency", [-0.1, 1.01])
    def test_potency_out_of_range(self, potency):
        with pytest.raises(ValidationError):
            Ingredient(source_column="x", type=IngredientType.NUMERIC, potency=potency)

    def test_negative_unique_count(self):
        with pytest.raises(ValidationError):
            Ingredient(source_column="x", type=IngredientType.NUMERIC, potency=0.5, unique_value_count=-1)

    def test_defaults(self):
        ing = Ingredient(source_column="x", type=IngredientType.NUMERIC, potency=0.5)
        assert ing.unique_value_count == 0
        assert ing.properties == ()
        assert not ing.is_overridden


# ── Recipe ────────────────────────────────────────────────────────────────────

class TestRecipe:
    def _required(self) -> RequiredIngredients:
        return RequiredIngredients(primary=(IngredientType.NUMERIC,))

    def test_empty_primary_rejected(self):
        with pytest.raises(ValidationError):
            RequiredIngredients(primary=())

    def test_empty_secondary_rejected(self):
        with pytest.raises(ValidationError):
            RequiredIngredients(primary=(IngredientType.NUMERIC,), secondary=())

    def test_optimal_count(self):
        req = RequiredIngredients(
            primary=(IngredientType.CATEGORICAL,),
            secondary=(IngredientType.CATEGORICAL, IngredientType.NUMERIC),
            optional=(IngredientType.TEMPORAL,),
        )
        assert req.optimal_count == 3

    @pytest.mark.parametrize("recipe_id", ["Bad_Id", "bad id", "-bad", ""])
    def test_id_must_be_kebab_case(self, recipe_id):
        with pytest.raises(ValidationError):
            Recipe(
                id=recipe_id, name="x", chart_type=ChartType.BAR,
                reasoning="r", required_ingredients=self._required(),
            )

    def test_blank_reasoning_rejected(self):
        with pytest.raises(ValidationError):
            Recipe(
                id="ok-id", name="x", chart_type=ChartType.BAR,
                reasoning="   ", required_ingredients=self._required(),
            )

    def test_reasoning_stripped(self):
        recipe = Recipe(
            id="ok-id", name="x", chart_type="histogram",
            reasoning="  shows spread  ", required_ingredients=self._required(),
        )
        assert recipe.reasoning == "shows spread"
        assert recipe.chart_type == ChartType.HISTOGRAM
