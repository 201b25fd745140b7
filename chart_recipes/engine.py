"""
Recipe engine facade: the public entry point for chart recommendations.

Usage
-----
    from chart_recipes.engine import RecipeEngine
    from chart_recipes.config import load_config

    engine = RecipeEngine(load_config())
    ingredients = engine.analyze_ingredients(dataset.columns)
    for scored in engine.find_compatible_recipes(ingredients):
        print(scored.recipe.name, scored.confidence)

Module-level functions (``classify``, ``find_best_recipe`` …) are bound to a
default engine built from ``AppConfig()`` defaults and ``DEFAULT_CATALOG``;
they never read config files or the environment.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence

from chart_recipes.classification import classifier, geographic
from chart_recipes.config import AppConfig
from chart_recipes.models.column import Column, Dataset
from chart_recipes.models.ingredient import Ingredient
from chart_recipes.models.recipe import Recipe
from chart_recipes.recipes.catalog import DEFAULT_CATALOG, RecipeCatalog
from chart_recipes.recommendations import validation
from chart_recipes.recommendations.aggregator import RecommendationAggregator, ScoredRecipe
from chart_recipes.recommendations.session import BrewResult, analyze_selection
from chart_recipes.recommendations.validation import CombinationValidation
from chart_recipes.scoring.engine import ScoreComponents, ScoringEngine
from chart_recipes.scoring.tables import DEFAULT_TABLES, ScoringTables
from chart_recipes.taxonomy.recipe_taxonomy import IngredientType


class RecipeEngine:
    """Classifier, scoring engine and aggregator wired to one configuration."""

    def __init__(
        self,
        config: AppConfig | None = None,
        catalog: RecipeCatalog = DEFAULT_CATALOG,
        tables: ScoringTables = DEFAULT_TABLES,
    ) -> None:
        self.config = config or AppConfig()
        self.catalog = catalog
        self.scoring = ScoringEngine(self.config.scoring, tables)
        self.aggregator = RecommendationAggregator(catalog, self.scoring, self.config.recommend)

    # ── Classification ────────────────────────────────────────────────────────

    def classify(self, column: Column) -> Ingredient:
        return classifier.classify(column, self.config.classifier)

    def explain(self, column: Column) -> classifier.ClassificationTrace:
        return classifier.explain_classification(column, self.config.classifier)

    def analyze_ingredients(self, columns: Iterable[Column]) -> list[Ingredient]:
        return classifier.analyze_ingredients(columns, self.config.classifier)

    def analyze_geographic(self, column: Column) -> geographic.GeographicAnalysis:
        return geographic.analyze_geographic(
            column,
            sample_size=self.config.classifier.value_sample_size,
            min_value_samples=self.config.classifier.min_geo_value_samples,
        )

    # ── Scoring and recommendations ───────────────────────────────────────────

    def score_recipe(self, recipe: Recipe, ingredients: Sequence[Ingredient]) -> float:
        return self.scoring.score_recipe(recipe, ingredients)

    def score_components(self, recipe: Recipe, ingredients: Sequence[Ingredient]) -> ScoreComponents:
        return self.scoring.score_components(recipe, ingredients)

    def find_best_recipe(self, ingredients: Sequence[Ingredient]) -> ScoredRecipe | None:
        return self.aggregator.find_best_recipe(ingredients)

    def find_compatible_recipes(self, ingredients: Sequence[Ingredient]) -> list[ScoredRecipe]:
        return self.aggregator.find_compatible_recipes(ingredients)

    def validate_ingredient_combination(
        self, ingredients: Sequence[Ingredient]
    ) -> CombinationValidation:
        return validation.validate_ingredient_combination(ingredients)

    def pie_advice(self, ingredients: Sequence[Ingredient]) -> list[str]:
        """Pie alternatives for a selection with slices to draw; [] otherwise."""
        if not any(i.type == IngredientType.CATEGORICAL for i in ingredients):
            return []
        return self.scoring.pie_handler.recommendations(ingredients)

    def analyze_selection(
        self,
        dataset: Dataset,
        selected_columns: Sequence[str],
        overrides: Mapping[str, IngredientType] | None = None,
    ) -> BrewResult:
        return analyze_selection(dataset, selected_columns, self, overrides)


_default_engine = RecipeEngine()

classify = _default_engine.classify
analyze_ingredients = _default_engine.analyze_ingredients
score_recipe = _default_engine.score_recipe
find_best_recipe = _default_engine.find_best_recipe
find_compatible_recipes = _default_engine.find_compatible_recipes
validate_ingredient_combination = _default_engine.validate_ingredient_combination
