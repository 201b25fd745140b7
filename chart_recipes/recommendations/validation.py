"""Ingredient combination sanity check, independent of recipe scoring."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from chart_recipes.models.ingredient import Ingredient
from chart_recipes.taxonomy.recipe_taxonomy import IngredientType


@dataclass
class CombinationValidation:
    """Shape problems with an ingredient selection.

    ``issues[k]`` and ``suggestions[k]`` describe the same problem.
    """

    issues:      list[str] = field(default_factory=list)
    suggestions: list[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.issues

    def add(self, issue: str, suggestion: str) -> None:
        self.issues.append(issue)
        self.suggestions.append(suggestion)


def validate_ingredient_combination(ingredients: Sequence[Ingredient]) -> CombinationValidation:
    """Flag selections that are unlikely to make a meaningful chart.

    Checks:
      - fewer than 2 ingredients;
      - more than 2 ingredients, all of the same type;
      - temporal or categorical data with no numeric ingredient to measure.
    """
    result = CombinationValidation()
    types = {i.type for i in ingredients}

    if len(ingredients) < 2:
        result.add(
            "Need at least 2 ingredients for a proper recipe",
            "Add another data column to create a visualization",
        )

    if len(types) == 1 and len(ingredients) > 2:
        result.add(
            "Too many ingredients of the same type may create chaos",
            "Try mixing different types of data columns",
        )

    if types & {IngredientType.TEMPORAL, IngredientType.CATEGORICAL} and IngredientType.NUMERIC not in types:
        result.add(
            "Missing numeric essence for proper measurement",
            "Add a numeric column to provide values for visualization",
        )

    return result
