"""
Flat dict records for machine-readable CLI output.

Records contain only JSON-native values (str, float, int, bool, list, None)
so ``json.dumps`` needs no custom encoder.
"""

from __future__ import annotations

from dataclasses import asdict
from typing import Any

from chart_recipes.models.ingredient import Ingredient
from chart_recipes.recommendations.aggregator import ScoredRecipe
from chart_recipes.recommendations.session import BrewResult


def ingredient_record(ingredient: Ingredient) -> dict[str, Any]:
    return ingredient.model_dump(mode="json")


def scored_recipe_record(scored: ScoredRecipe) -> dict[str, Any]:
    """One recommendation with its score breakdown flattened alongside."""
    components = asdict(scored.components)
    components.pop("rejected")
    return {
        "id":         scored.recipe.id,
        "name":       scored.recipe.name,
        "chart_type": scored.chart_type.value,
        "confidence": round(scored.confidence, 4),
        "reasoning":  scored.recipe.reasoning,
        "components": {k: round(v, 4) for k, v in components.items()},
    }


def brew_result_record(result: BrewResult) -> dict[str, Any]:
    return {
        "ingredients": [ingredient_record(i) for i in result.ingredients],
        "recipes":     [scored_recipe_record(s) for s in result.recipes],
        "best_recipe": scored_recipe_record(result.best_recipe) if result.best_recipe else None,
        "validation": {
            "is_valid":    result.validation.is_valid,
            "issues":      list(result.validation.issues),
            "suggestions": list(result.validation.suggestions),
        },
        "pie_advice": list(result.pie_advice),
        "can_brew": result.can_brew,
    }
