"""
Recommendation aggregator: scores the whole catalog and ranks the survivors.

Pipeline (``find_compatible_recipes``)
--------------------------------------
1. Empty ingredient set → ``[]``.
2. Score every catalog recipe.
3. Drop confidence ≤ ``min_confidence`` (0.1).
4. Stable sort by confidence, descending; ties keep catalog order.
5. Post-filters by chart family:
     pie                          → PieChartHandler.should_filter
     scatter3d / surface3d / bar3d, size < 100      → keep if > 0.7
     network / network3d, < 2 categorical           → drop
     map / map3d, no geographic ingredient          → keep if > 0.8
     treemap / heatmap / surface3d / network3d,
       ≤ 2 ingredients and size < 50                → keep if > 0.6
6. De-duplicate by chart type; the highest confidence wins.
7. Truncate to ``max_results`` (12).

"size" is Σ ``unique_value_count`` over the ingredients.
"""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Sequence
from dataclasses import dataclass

from chart_recipes.config import RecommendConfig
from chart_recipes.models.ingredient import Ingredient
from chart_recipes.models.recipe import Recipe
from chart_recipes.recipes.catalog import DEFAULT_CATALOG, RecipeCatalog
from chart_recipes.scoring.engine import ScoreComponents, ScoringEngine, dataset_size
from chart_recipes.taxonomy.recipe_taxonomy import (
    COMPLEX_CHART_TYPES,
    MAP_CHART_TYPES,
    NETWORK_CHART_TYPES,
    THREE_D_CHART_TYPES,
    ChartType,
    IngredientType,
)

logger = logging.getLogger(__name__)


@dataclass
class ScoredRecipe:
    """A catalog recipe paired with its confidence for one ingredient set.

    Attributes:
        recipe:     The catalog entry.
        confidence: Clamped score in [0, 1].
        components: Per-term breakdown behind ``confidence``.
    """

    recipe:     Recipe
    confidence: float
    components: ScoreComponents

    @property
    def chart_type(self) -> ChartType:
        return self.recipe.chart_type


class RecommendationAggregator:
    """Runs the scoring engine across a catalog and filters the results."""

    def __init__(
        self,
        catalog: RecipeCatalog = DEFAULT_CATALOG,
        engine: ScoringEngine | None = None,
        config: RecommendConfig | None = None,
    ) -> None:
        self.catalog = catalog
        self.engine = engine or ScoringEngine()
        self.config = config or RecommendConfig()

    def score_all(self, ingredients: Sequence[Ingredient]) -> list[ScoredRecipe]:
        """Score every recipe in catalog order, rejected ones included."""
        scored = []
        for recipe in self.catalog:
            components = self.engine.score_components(recipe, ingredients)
            scored.append(ScoredRecipe(recipe, components.total, components))
        return scored

    def find_best_recipe(self, ingredients: Sequence[Ingredient]) -> ScoredRecipe | None:
        """Highest-scoring recipe, or ``None`` when every score is 0.

        No post-filters apply. Among equal scores the first in catalog
        order wins.
        """
        best: ScoredRecipe | None = None
        for candidate in self.score_all(ingredients):
            if candidate.confidence > (best.confidence if best else 0.0):
                best = candidate
        logger.debug(
            "Best recipe for %d ingredients: %s",
            len(ingredients), best.recipe.id if best else None,
        )
        return best

    def find_compatible_recipes(self, ingredients: Sequence[Ingredient]) -> list[ScoredRecipe]:
        """Ranked, filtered, de-duplicated recommendations."""
        if not ingredients:
            return []

        candidates = [
            s for s in self.score_all(ingredients)
            if s.confidence > self.config.min_confidence
        ]
        candidates.sort(key=lambda s: s.confidence, reverse=True)

        size = dataset_size(ingredients)
        counts: Counter[IngredientType] = Counter(i.type for i in ingredients)
        filtered = [s for s in candidates if self._passes_filters(s, ingredients, size, counts)]

        result = _dedupe_by_chart_type(filtered)[: self.config.max_results]
        logger.debug(
            "Compatible recipes: %d scored above threshold, %d after filtering, %d returned",
            len(candidates), len(filtered), len(result),
        )
        return result

    def _passes_filters(
        self,
        scored: ScoredRecipe,
        ingredients: Sequence[Ingredient],
        size: int,
        counts: Counter[IngredientType],
    ) -> bool:
        cfg = self.config
        chart_type = scored.chart_type

        if chart_type == ChartType.PIE:
            return not self.engine.pie_handler.should_filter(ingredients, size)

        if chart_type in THREE_D_CHART_TYPES and size < cfg.three_d_small_data_size:
            return scored.confidence > cfg.three_d_min_confidence

        if chart_type in NETWORK_CHART_TYPES and counts[IngredientType.CATEGORICAL] < 2:
            return False

        if chart_type in MAP_CHART_TYPES and not counts[IngredientType.GEOGRAPHIC]:
            return scored.confidence > cfg.map_without_geo_min_confidence

        if (
            chart_type in COMPLEX_CHART_TYPES
            and len(ingredients) <= cfg.complex_max_ingredients
            and size < cfg.complex_small_data_size
        ):
            return scored.confidence > cfg.complex_min_confidence

        return True


def _dedupe_by_chart_type(ranked: list[ScoredRecipe]) -> list[ScoredRecipe]:
    """Keep the first (highest-confidence) entry per chart type.

    ``ranked`` must already be sorted descending.
    """
    seen: set[ChartType] = set()
    unique: list[ScoredRecipe] = []
    for scored in ranked:
        if scored.chart_type in seen:
            continue
        seen.add(scored.chart_type)
        unique.append(scored)
    return unique
