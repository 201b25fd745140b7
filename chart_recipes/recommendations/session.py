"""
Brew session: recommend charts for a user's column selection.

The whole dataset is classified once; the selection then picks ingredients
by column name, in the order the user chose them.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from chart_recipes.classification.classifier import override_ingredient_type
from chart_recipes.models.column import Dataset
from chart_recipes.models.ingredient import Ingredient
from chart_recipes.recommendations.aggregator import ScoredRecipe
from chart_recipes.recommendations.validation import CombinationValidation
from chart_recipes.taxonomy.recipe_taxonomy import IngredientType

if TYPE_CHECKING:
    from chart_recipes.engine import RecipeEngine

logger = logging.getLogger(__name__)


@dataclass
class BrewResult:
    """Everything a caller needs to present recommendations for a selection.

    Attributes:
        ingredients: Selected ingredients, in selection order.
        recipes:     Ranked compatible recipes for the selection.
        best_recipe: Unfiltered argmax over the catalog, or ``None``.
        validation:  Combination shape check for the selection.
        pie_advice:  Alternatives to a pie when the selection fits one poorly.
    """

    ingredients: list[Ingredient]
    recipes:     list[ScoredRecipe]
    best_recipe: ScoredRecipe | None
    validation:  CombinationValidation
    pie_advice:  list[str] = field(default_factory=list)

    @property
    def can_brew(self) -> bool:
        """True when the selection is well-shaped and at least one recipe fits."""
        return self.validation.is_valid and bool(self.recipes)


def analyze_selection(
    dataset: Dataset,
    selected_columns: Sequence[str],
    engine: RecipeEngine,
    overrides: Mapping[str, IngredientType] | None = None,
) -> BrewResult:
    """Classify ``dataset`` and recommend charts for ``selected_columns``.

    Args:
        overrides: User corrections, column name to ingredient type. Applied
            after classification and before scoring.

    Raises:
        KeyError: If a selected or overridden name is not a column of ``dataset``.
    """
    by_name = {i.source_column: i for i in engine.analyze_ingredients(dataset.columns)}
    unknown = [name for name in selected_columns if name not in by_name]
    if unknown:
        raise KeyError(f"Unknown column(s) in selection: {unknown}")

    overrides = overrides or {}
    unknown = [name for name in overrides if name not in by_name]
    if unknown:
        raise KeyError(f"Unknown column(s) in overrides: {unknown}")
    for name, new_type in overrides.items():
        if by_name[name].type != new_type:
            logger.info("Overriding %s: %s -> %s", name, by_name[name].type.value, new_type.value)
            by_name[name] = override_ingredient_type(by_name[name], new_type)

    selected = [by_name[name] for name in selected_columns]
    result = BrewResult(
        ingredients=selected,
        recipes=engine.find_compatible_recipes(selected),
        best_recipe=engine.find_best_recipe(selected),
        validation=engine.validate_ingredient_combination(selected),
        pie_advice=engine.pie_advice(selected),
    )
    logger.debug(
        "Selection %s: %d recipes, can_brew=%s",
        list(selected_columns), len(result.recipes), result.can_brew,
    )
    return result
