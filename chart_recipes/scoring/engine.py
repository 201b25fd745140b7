"""
Recipe scoring: rates a recipe against an ingredient set on [0, 1].

Score formula (applied in order, clamped once at the end)
---------------------------------------------------------
    a. primary gate     every primary type present, else 0
    b. primary          + primary_score (0.4)
    c. secondary        no secondary declared → + secondary_score (0.4)
                        declared, 0 matched   → 0
                        pie                   → + pie validation score
                                                 (invalid pie → 0)
                        otherwise             → + 0.4 + matched/len(secondary) * 0.2
    d. synergy          diversity + perfect combination + type pairings
    e. size             per-chart bonus by Σ unique_value_count bucket
    f. complexity       (avg_potency + distinct_types / 5) / 2 vs chart target;
                        match = 1 − |score − target|; >0.8 → +0.08, >0.6 → +0.04
    g. quality          avg_potency >0.8 → +0.1, >0.6 → +0.05, <0.3 → −0.05
    h. overcrowding     − min(excess * tolerance, 0.25), excess measured
                        against len(primary) + len(secondary)
    i. clamp            [0, 1]

Containment is by type only: "a numeric is present" satisfies every
``numeric`` entry in the requirement tuples, however many there are.

The engine is a pure function of (recipe, ingredients, config, tables):
identical inputs always give the identical score.
"""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Sequence
from dataclasses import dataclass

from chart_recipes.config import ScoringConfig
from chart_recipes.models.ingredient import Ingredient
from chart_recipes.models.recipe import Recipe
from chart_recipes.scoring.pie import PieChartHandler
from chart_recipes.scoring.tables import DEFAULT_TABLES, ScoringTables
from chart_recipes.taxonomy.recipe_taxonomy import ChartType, IngredientType

logger = logging.getLogger(__name__)


def _clamp(value: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, value))


@dataclass
class ScoreComponents:
    """Every term of one recipe score.

    Attributes:
        primary:        Base score for satisfying the primary gate.
        secondary:      Secondary base plus matched-fraction bonus.
        pie_adjustment: Pie validation score (pie recipes only, may be negative).
        synergy:        Diversity, perfect-combination and pairing bonuses.
        size:           Data-size preference bonus (may be negative).
        complexity:     Complexity-match bonus.
        quality:        Average-potency bonus or penalty.
        overcrowding:   Penalty for ingredients beyond the recipe's ideal count.
        rejected:       Reason the recipe was gated out, or ``None``.
    """

    primary:        float = 0.0
    secondary:      float = 0.0
    pie_adjustment: float = 0.0
    synergy:        float = 0.0
    size:           float = 0.0
    complexity:     float = 0.0
    quality:        float = 0.0
    overcrowding:   float = 0.0
    rejected:       str | None = None

    @property
    def total(self) -> float:
        """Clamped score in [0, 1]; 0 for a rejected recipe."""
        if self.rejected is not None:
            return 0.0
        return _clamp(
            self.primary
            + self.pie_adjustment
            + self.secondary
            + self.synergy
            + self.size
            + self.complexity
            + self.quality
            - self.overcrowding,
            0.0, 1.0,
        )


def dataset_size(ingredients: Sequence[Ingredient]) -> int:
    """Data-point estimate used for size buckets and filters."""
    return sum(i.unique_value_count for i in ingredients)


class ScoringEngine:
    """Scores recipes with injected constants and per-chart tables."""

    def __init__(
        self,
        config: ScoringConfig | None = None,
        tables: ScoringTables = DEFAULT_TABLES,
        pie_handler: PieChartHandler | None = None,
    ) -> None:
        self.config = config or ScoringConfig()
        self.tables = tables
        self.pie_handler = pie_handler or PieChartHandler(self.config)

    def score_recipe(self, recipe: Recipe, ingredients: Sequence[Ingredient]) -> float:
        return self.score_components(recipe, ingredients).total

    def score_components(
        self, recipe: Recipe, ingredients: Sequence[Ingredient]
    ) -> ScoreComponents:
        """Compute every score term for ``recipe`` against ``ingredients``."""
        cfg = self.config
        if not ingredients:
            return ScoreComponents(rejected="no ingredients")

        present = {i.type for i in ingredients}
        required = recipe.required_ingredients

        # ── a/b. Primary gate ─────────────────────────────────────────────────
        missing = [t.value for t in required.primary if t not in present]
        if missing:
            return self._reject(recipe, f"missing primary {missing}")
        components = ScoreComponents(primary=cfg.primary_score)

        # ── c. Secondary ──────────────────────────────────────────────────────
        if required.secondary is None:
            components.secondary = cfg.secondary_score
        else:
            matches = sum(1 for t in required.secondary if t in present)
            if matches == 0:
                return self._reject(recipe, "no secondary ingredients match")
            if recipe.chart_type == ChartType.PIE:
                validation = self.pie_handler.validate(ingredients)
                if not validation.is_valid:
                    return self._reject(recipe, f"pie invalid: {validation.issues}")
                components.pie_adjustment = validation.score
            fraction = matches / len(required.secondary)
            components.secondary = cfg.secondary_score + fraction * cfg.secondary_match_bonus

        # ── d–h. Bonuses and penalties ────────────────────────────────────────
        avg_potency = sum(i.potency for i in ingredients) / len(ingredients)
        components.synergy = self._synergy(recipe.chart_type, ingredients)
        components.size = self._size_bonus(recipe.chart_type, dataset_size(ingredients))
        components.complexity = self._complexity_bonus(
            recipe.chart_type, avg_potency, len(present)
        )
        components.quality = self._quality_bonus(avg_potency)
        components.overcrowding = self._overcrowding_penalty(
            recipe.chart_type, len(ingredients) - required.optimal_count
        )
        return components

    # ── Terms ─────────────────────────────────────────────────────────────────

    def _reject(self, recipe: Recipe, reason: str) -> ScoreComponents:
        logger.debug("Recipe %s rejected: %s", recipe.id, reason)
        return ScoreComponents(rejected=reason)

    def _synergy(self, chart_type: ChartType, ingredients: Sequence[Ingredient]) -> float:
        counts: Counter[IngredientType] = Counter(i.type for i in ingredients)
        bonus = self.tables.diversity_bonus.bonus(chart_type, len(counts))

        if chart_type == ChartType.PIE:
            bonus += self.pie_handler.synergy_bonus(ingredients)
        else:
            rule = self.tables.combination_bonuses.get(chart_type)
            if rule is not None and rule.matches(counts, len(ingredients)):
                bonus += rule.bonus

        for pairing in self.tables.pairing_bonuses:
            if pairing.matches(chart_type, counts):
                bonus += pairing.bonus
        return bonus

    def _size_bonus(self, chart_type: ChartType, size: int) -> float:
        preference = self.tables.size_preferences.get(chart_type)
        if preference is None:
            return 0.0
        if size < self.config.data_size_small:
            return preference.small
        if size < self.config.data_size_medium:
            return preference.medium
        return preference.large

    def _complexity_bonus(
        self, chart_type: ChartType, avg_potency: float, distinct_types: int
    ) -> float:
        cfg = self.config
        data_complexity = (avg_potency + distinct_types / 5) / 2
        target = self.tables.complexity_targets.get(chart_type, cfg.default_complexity_target)
        match = 1 - abs(data_complexity - target)
        if match > cfg.complexity_high_match:
            return cfg.complexity_bonus_high
        if match > cfg.complexity_medium_match:
            return cfg.complexity_bonus_medium
        return 0.0

    def _quality_bonus(self, avg_potency: float) -> float:
        cfg = self.config
        if avg_potency > cfg.quality_high_threshold:
            return cfg.quality_bonus_high
        if avg_potency > cfg.quality_medium_threshold:
            return cfg.quality_bonus_medium
        if avg_potency < cfg.quality_low_threshold:
            return cfg.quality_penalty_low
        return 0.0

    def _overcrowding_penalty(self, chart_type: ChartType, excess: int) -> float:
        if excess <= 0:
            return 0.0
        tolerance = self.tables.overcrowding_tolerance.get(
            chart_type, self.config.overcrowding_default_tolerance
        )
        return min(excess * tolerance, self.config.overcrowding_penalty_max)
