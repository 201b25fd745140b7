"""
Pie chart validation, synergy, advice and filtering.

A pie needs exactly one categorical dimension (the slices) and at least one
numeric value. The slice count is read from the FIRST categorical ingredient.

Validation score
----------------
    no categorical                    → invalid, score 0
    no numeric                        → invalid, score 0
    >1 categorical                    → −0.3 + issue
    1 categorical + 1 numeric, 2 total → +0.2
    1 categorical + 1 numeric, extras  → +0.1
    slices >12                        → −0.15 + issue
    slices >8                         → −0.05 + issue
    slices ≥3                         → +0.1

The score may be negative; ``synergy_bonus`` floors it at zero.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from chart_recipes.config import ScoringConfig
from chart_recipes.models.ingredient import Ingredient
from chart_recipes.taxonomy.recipe_taxonomy import IngredientType


@dataclass
class PieValidation:
    """Result of checking an ingredient set against pie chart requirements."""

    is_valid: bool
    score:    float
    issues:   list[str] = field(default_factory=list)


class PieChartHandler:
    """Pie-specific rules, parameterised by ``ScoringConfig``."""

    def __init__(self, config: ScoringConfig | None = None) -> None:
        self.config = config or ScoringConfig()

    def validate(self, ingredients: Sequence[Ingredient]) -> PieValidation:
        cfg = self.config
        categorical = [i for i in ingredients if i.type == IngredientType.CATEGORICAL]
        numeric = [i for i in ingredients if i.type == IngredientType.NUMERIC]
        issues: list[str] = []
        score = 0.0

        if not categorical:
            issues.append("Pie charts require categorical data for slices")
            return PieValidation(is_valid=False, score=0.0, issues=issues)

        if len(categorical) > 1:
            issues.append(
                f"Too many categorical dimensions ({len(categorical)}). "
                "Pie charts work best with a single dimension"
            )
            score += cfg.pie_multi_categorical_penalty

        if not numeric:
            issues.append("Pie charts require numeric data for slice values")
            return PieValidation(is_valid=False, score=0.0, issues=issues)

        if len(categorical) == 1 and len(numeric) == 1:
            score += cfg.pie_perfect_bonus if len(ingredients) == 2 else cfg.pie_good_bonus

        slices = categorical[0].unique_value_count
        if slices > cfg.pie_many_slices_threshold:
            issues.append(
                f"Too many categories ({slices}). Pie charts are hard to read "
                f"with more than {cfg.pie_many_slices_threshold} slices"
            )
            score += cfg.pie_many_slices_penalty
        elif slices > cfg.pie_some_slices_threshold:
            issues.append(
                f"Many categories ({slices}). Consider a bar chart for better readability"
            )
            score += cfg.pie_some_slices_penalty
        elif slices >= cfg.pie_min_good_slices:
            score += cfg.pie_good_slices_bonus

        return PieValidation(is_valid=True, score=score, issues=issues)

    def synergy_bonus(self, ingredients: Sequence[Ingredient]) -> float:
        return max(0.0, self.validate(ingredients).score)

    def recommendations(self, ingredients: Sequence[Ingredient]) -> list[str]:
        """Plain-language alternatives when the data fits a pie poorly."""
        categorical = [i for i in ingredients if i.type == IngredientType.CATEGORICAL]
        numeric = [i for i in ingredients if i.type == IngredientType.NUMERIC]
        advice: list[str] = []

        if len(categorical) > 1:
            advice.append("Consider a stacked bar chart to show multiple categorical dimensions")
        if categorical and categorical[0].unique_value_count > self.config.pie_some_slices_threshold:
            advice.append("Consider a bar chart for better readability with many categories")
        if len(numeric) > 1:
            advice.append(
                "Pie charts show a single numeric value. Consider a scatter or bubble "
                "chart for multiple metrics"
            )
        if any(i.type == IngredientType.TEMPORAL for i in ingredients):
            advice.append("Time-based data works better in line or area charts to show trends")
        return advice

    def should_filter(self, ingredients: Sequence[Ingredient], dataset_size: int) -> bool:
        """True when a pie should be dropped from the recommendation list.

        Args:
            ingredients:  The selected ingredients.
            dataset_size: Sum of ``unique_value_count`` over ``ingredients``.
        """
        cfg = self.config
        validation = self.validate(ingredients)
        if not validation.is_valid:
            return True
        if len(validation.issues) > cfg.pie_filter_max_issues:
            return True
        if dataset_size < cfg.pie_filter_min_data_size:
            return True
        categorical = [i for i in ingredients if i.type == IngredientType.CATEGORICAL]
        return bool(categorical) and categorical[0].unique_value_count > cfg.pie_filter_max_slices
