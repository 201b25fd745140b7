"""
ASCII terminal formatters for CLI commands.

All formatters accept engine results and return plain multi-line strings
suitable for ``typer.echo()``.

No third-party dependencies (no ``rich``, no ``colorama``).
"""

from __future__ import annotations

from collections.abc import Sequence

from chart_recipes.classification.classifier import ClassificationTrace
from chart_recipes.classification.geographic import GeographicAnalysis
from chart_recipes.models.ingredient import Ingredient
from chart_recipes.recipes.catalog import RecipeCatalog
from chart_recipes.recommendations.aggregator import ScoredRecipe
from chart_recipes.recommendations.validation import CombinationValidation


# ── Ingredients ───────────────────────────────────────────────────────────────


def format_ingredient_table(
    ingredients: Sequence[Ingredient],
    traces: Sequence[ClassificationTrace] | None = None,
    labels: Sequence[str] | None = None,
) -> str:
    """Format classified columns as an ASCII table.

    Args:
        ingredients: Classifier output, one per column.
        traces:      Optional per-column traces; adds a "Rule" column.
        labels:      Optional per-column display labels; adds a "Label" column.

    Returns:
        Multi-line string.
    """
    lines: list[str] = []
    lines.append("")
    lines.append("=== Ingredients ===")

    if not ingredients:
        lines.append("  (no columns)")
        return "\n".join(lines)

    header = f"  {'Column':<28}  {'Type':<12}  {'Potency':>7}  {'Unique':>6}"
    if traces is not None:
        header += f"  {'Rule':<26}"
    if labels is not None:
        header += f"  {'Label':<40}"
    lines.append(header)
    lines.append("  " + "-" * (len(header) - 2))

    for idx, ing in enumerate(ingredients):
        row = (
            f"  {ing.source_column[:28]:<28}  {ing.type.value:<12}  "
            f"{ing.potency:>7.2f}  {ing.unique_value_count:>6}"
        )
        if traces is not None:
            row += f"  {traces[idx].rule:<26}"
        if labels is not None:
            row += f"  {labels[idx]}"
        lines.append(row)

    return "\n".join(lines)


def format_geographic_notes(
    analyses: Sequence[tuple[str, GeographicAnalysis]],
) -> str:
    """Format geographic reasoning for columns whose name or values hint at a place.

    Columns with no geographic signal at all (empty reasoning) are skipped.

    Example::

        === Geographic Notes ===
          shipping_state: geographic (administrative), confidence 80%
            - Contains potentially geographic terms: state
            - Geographic qualifiers present: shipping
    """
    lines: list[str] = []
    lines.append("")
    lines.append("=== Geographic Notes ===")

    shown = [(name, analysis) for name, analysis in analyses if analysis.reasoning]
    if not shown:
        lines.append("  (no geographic signals)")
        return "\n".join(lines)

    for name, analysis in shown:
        if analysis.is_geographic:
            subtype = analysis.subtype.value if analysis.subtype else "unknown"
            verdict = f"geographic ({subtype})"
        else:
            verdict = "not geographic"
        lines.append(f"  {name}: {verdict}, confidence {analysis.confidence:.0%}")
        for reason in analysis.reasoning:
            lines.append(f"    - {reason}")
        for suggestion in analysis.suggestions:
            lines.append(f"    -> {suggestion}")

    return "\n".join(lines)


# ── Recommendations ───────────────────────────────────────────────────────────


def format_recommendations_table(
    recipes: Sequence[ScoredRecipe],
    validation: CombinationValidation | None = None,
    pie_advice: Sequence[str] = (),
) -> str:
    """Format ranked recommendations, then any combination issues and pie advice.

    Example::

        Rank  Recipe                           Chart         Confidence
        ---------------------------------------------------------------
           1  Temporal Essence Line            line                100%

    Returns:
        Multi-line string.
    """
    lines: list[str] = []
    lines.append("")
    lines.append("=== Recommended Charts ===")

    if not recipes:
        lines.append("  (no compatible recipes for these columns)")
    else:
        header = f"  {'Rank':>4}  {'Recipe':<32}  {'Chart':<12}  {'Confidence':>10}"
        lines.append(header)
        lines.append("  " + "-" * (len(header) - 2))
        for rank, scored in enumerate(recipes, start=1):
            lines.append(
                f"  {rank:>4}  {scored.recipe.name[:32]:<32}  "
                f"{scored.chart_type.value:<12}  {scored.confidence:>10.0%}"
            )

    if validation is not None and not validation.is_valid:
        lines.append("")
        lines.append("  Combination issues:")
        for issue, suggestion in zip(validation.issues, validation.suggestions):
            lines.append(f"    [WARN] {issue}")
            lines.append(f"           -> {suggestion}")

    if pie_advice:
        lines.append("")
        lines.append("  Pie chart advice:")
        for advice in pie_advice:
            lines.append(f"    - {advice}")

    return "\n".join(lines)


# ── Catalog ───────────────────────────────────────────────────────────────────


def format_catalog_table(catalog: RecipeCatalog) -> str:
    """Format every catalog recipe with its ingredient requirements."""
    lines: list[str] = []
    lines.append("")
    lines.append(f"=== Recipe Catalog ({len(catalog)} recipes) ===")
    header = f"  {'Id':<28}  {'Chart':<12}  {'Primary':<14}  {'Secondary':<24}"
    lines.append(header)
    lines.append("  " + "-" * (len(header) - 2))

    for recipe in catalog:
        required = recipe.required_ingredients
        primary = "+".join(t.value for t in required.primary)
        secondary = "+".join(t.value for t in required.secondary) if required.secondary else "-"
        lines.append(
            f"  {recipe.id:<28}  {recipe.chart_type.value:<12}  "
            f"{primary:<14}  {secondary:<24}"
        )

    return "\n".join(lines)
