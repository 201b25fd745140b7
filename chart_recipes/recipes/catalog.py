"""
Recipe catalog — the static list of chart templates.

``RecipeCatalog`` wraps an immutable tuple of ``Recipe`` objects and is
injected into the scoring engine and aggregator at construction. Tests build
small custom catalogs; production code uses ``DEFAULT_CATALOG``.

Catalog order matters: ``find_best_recipe`` keeps the FIRST recipe among
equal scores, so the more conventional chart of a family is listed first
(line before area, bar before pie).

Validation contract (enforced at construction):
  - Every recipe has a non-empty ``primary`` (enforced by the model).
  - Recipe ids are unique.
  - ``chart_type`` need NOT be unique; the aggregator de-duplicates.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from chart_recipes.models.recipe import Recipe, RequiredIngredients
from chart_recipes.taxonomy.recipe_taxonomy import ChartType, IngredientType

_T = IngredientType.TEMPORAL
_N = IngredientType.NUMERIC
_C = IngredientType.CATEGORICAL
_G = IngredientType.GEOGRAPHIC


class RecipeCatalog:
    """Read-only, ordered collection of recipes."""

    def __init__(self, recipes: Iterable[Recipe]) -> None:
        self._recipes: tuple[Recipe, ...] = tuple(recipes)
        seen: set[str] = set()
        duplicates: list[str] = []
        for recipe in self._recipes:
            if recipe.id in seen:
                duplicates.append(recipe.id)
            seen.add(recipe.id)
        if duplicates:
            raise ValueError(f"Duplicate recipe ids in catalog: {sorted(set(duplicates))}")

    def __iter__(self) -> Iterator[Recipe]:
        return iter(self._recipes)

    def __len__(self) -> int:
        return len(self._recipes)

    @property
    def recipes(self) -> tuple[Recipe, ...]:
        return self._recipes

    def get(self, recipe_id: str) -> Recipe:
        """Return the recipe with ``recipe_id``.

        Raises:
            KeyError: If no recipe has that id.
        """
        for recipe in self._recipes:
            if recipe.id == recipe_id:
                return recipe
        raise KeyError(f"Unknown recipe id '{recipe_id}'.")

    def by_chart_type(self, chart_type: ChartType) -> list[Recipe]:
        return [r for r in self._recipes if r.chart_type == chart_type]


def _recipe(
    recipe_id: str,
    name: str,
    chart_type: ChartType,
    reasoning: str,
    primary: tuple[IngredientType, ...],
    secondary: tuple[IngredientType, ...] | None = None,
    optional: tuple[IngredientType, ...] = (),
    effects: tuple[str, ...] = (),
) -> Recipe:
    return Recipe(
        id=recipe_id,
        name=name,
        chart_type=chart_type,
        reasoning=reasoning,
        required_ingredients=RequiredIngredients(
            primary=primary, secondary=secondary, optional=optional,
        ),
        effects=effects,
    )


DEFAULT_RECIPES: tuple[Recipe, ...] = (
    # ── Temporal ──────────────────────────────────────────────────────────────
    _recipe(
        "temporal-essence-line", "Temporal Essence Line", ChartType.LINE,
        "Time-based data flows naturally through line visualizations, revealing trends and patterns",
        primary=(_T,), secondary=(_N,),
        effects=("Shows trends over time", "Reveals seasonal patterns", "Highlights growth cycles"),
    ),
    _recipe(
        "multi-dimensional-area", "Multi-dimensional Area", ChartType.AREA,
        "Stacked areas show how parts contribute to the whole over time",
        primary=(_T,), secondary=(_N,), optional=(_C,),
        effects=("Shows cumulative effects", "Reveals composition changes", "Stacks contributions"),
    ),
    # ── Categorical ───────────────────────────────────────────────────────────
    _recipe(
        "categorical-power-bar", "Categorical Power Bar", ChartType.BAR,
        "Categories naturally separate into distinct bars, perfect for comparisons",
        primary=(_C,), secondary=(_N,),
        effects=("Compares categories clearly", "Ranks performance", "Shows distribution"),
    ),
    _recipe(
        "proportional-pie", "Proportional Pie", ChartType.PIE,
        "When categories form a complete whole, pie charts reveal proportional relationships",
        primary=(_C,), secondary=(_N,),
        effects=("Shows parts of whole", "Reveals proportions", "Highlights dominance"),
    ),
    _recipe(
        "hierarchy-treemap", "Hierarchy Treemap", ChartType.TREEMAP,
        "Nested categorical data forms natural hierarchies perfect for treemap visualization",
        primary=(_C,), secondary=(_N,), optional=(_C,),
        effects=("Shows hierarchical structure", "Reveals size relationships", "Nested proportions"),
    ),
    # ── Distribution ──────────────────────────────────────────────────────────
    _recipe(
        "histogram-transmutation", "Histogram Transmutation", ChartType.HISTOGRAM,
        "Single numeric column reveals its distribution through frequency binning",
        primary=(_N,),
        effects=("Shows data distribution", "Reveals frequency patterns", "Identifies data clusters"),
    ),
    # ── Correlation ───────────────────────────────────────────────────────────
    _recipe(
        "correlation-scatter", "Correlation Scatter", ChartType.SCATTER,
        "Two numeric dimensions create clear correlation landscapes",
        primary=(_N,), secondary=(_N,),
        effects=("Reveals correlations", "Shows clusters", "Identifies outliers"),
    ),
    _recipe(
        "heatmap-intensity-fusion", "Heatmap Intensity Fusion", ChartType.HEATMAP,
        "Two categorical dimensions with numeric intensity create heatmap matrices",
        primary=(_C,), secondary=(_C, _N),
        effects=("Shows intensity patterns", "Reveals correlation matrices", "Heat distribution"),
    ),
    # ── Geographic ────────────────────────────────────────────────────────────
    _recipe(
        "geographic-map", "Geographic Map", ChartType.MAP,
        "Geographic coordinates unlock spatial visualization",
        primary=(_G,), secondary=(_N,),
        effects=("Shows spatial patterns", "Reveals geographic trends", "Maps distributions"),
    ),
    _recipe(
        "geographic-3d-elevation", "Geographic 3D Elevation", ChartType.MAP3D,
        "Geographic data with elevation values creates immersive 3D terrain",
        primary=(_G,), secondary=(_N,), optional=(_N,),
        effects=("3D spatial visualization", "Elevation mapping", "Terrain analysis"),
    ),
    # ── 3D ────────────────────────────────────────────────────────────────────
    _recipe(
        "bar-3d-formation", "3D Bar Formation", ChartType.BAR3D,
        "Three-dimensional bar charts add depth and perspective to categorical comparisons",
        primary=(_C,), secondary=(_N,), optional=(_N,),
        effects=("3D categorical comparison", "Multi-dimensional bars", "Depth perception"),
    ),
    _recipe(
        "scatter-3d-constellation", "3D Scatter Constellation", ChartType.SCATTER3D,
        "Three numeric dimensions create 3D scatter constellation patterns",
        primary=(_N,), secondary=(_N, _N),
        effects=("3D correlation patterns", "Multi-dimensional clusters", "Space visualization"),
    ),
    _recipe(
        "surface-3d-weaving", "3D Surface Weaving", ChartType.SURFACE3D,
        "Three numeric dimensions weave together to form continuous 3D surfaces",
        primary=(_N,), secondary=(_N, _N),
        effects=("3D surface modeling", "Continuous landscapes", "Mathematical surfaces"),
    ),
    # ── Relationships ─────────────────────────────────────────────────────────
    _recipe(
        "network-connection", "Network Connection", ChartType.NETWORK,
        "Categorical relationships form natural network connections and hierarchies",
        primary=(_C,), secondary=(_C,), optional=(_N,),
        effects=("Shows relationships", "Network topology", "Connection strength"),
    ),
    _recipe(
        "network-3d-constellation", "3D Network Constellation", ChartType.NETWORK3D,
        "Multi-dimensional categorical relationships create immersive 3D networks",
        primary=(_C,), secondary=(_C,), optional=(_N,),
        effects=("3D network visualization", "Spatial relationships", "Network galaxies"),
    ),
    # ── KPI ───────────────────────────────────────────────────────────────────
    _recipe(
        "kpi-crystal-formation", "KPI Crystal Formation", ChartType.KPI,
        "Key numeric indicators crystallize into performance visualizations",
        primary=(_N,), optional=(_C,),
        effects=("Key metric display", "Performance indicators", "Status tiles"),
    ),
    # ── Advanced combinations ─────────────────────────────────────────────────
    _recipe(
        "stacked-bar-amplification", "Stacked Bar Amplification", ChartType.STACKED_BAR,
        "Multiple categorical dimensions with numeric values create stacked comparisons",
        primary=(_C,), secondary=(_C, _N),
        effects=("Stacked comparisons", "Multi-dimensional analysis", "Category breakdowns"),
    ),
)

DEFAULT_CATALOG = RecipeCatalog(DEFAULT_RECIPES)
