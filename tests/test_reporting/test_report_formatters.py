"""
Tests for chart_recipes/reporting/formatters.py.

Formatters return plain multi-line ASCII strings; tests check structure and
key content rather than exact spacing.
"""

from __future__ import annotations

import pytest

from chart_recipes.classification.classifier import ClassificationTrace
from chart_recipes.classification.geographic import GeographicAnalysis, GeographicSubtype
from chart_recipes.recipes.catalog import DEFAULT_CATALOG, RecipeCatalog
from chart_recipes.recommendations.aggregator import ScoredRecipe
from chart_recipes.recommendations.validation import CombinationValidation
from chart_recipes.reporting.formatters import (
    format_catalog_table,
    format_geographic_notes,
    format_ingredient_table,
    format_recommendations_table,
)
from chart_recipes.scoring.engine import ScoreComponents
from chart_recipes.taxonomy.recipe_taxonomy import IngredientType


@pytest.fixture
def scored_line() -> ScoredRecipe:
    return ScoredRecipe(
        recipe=DEFAULT_CATALOG.get("temporal-essence-line"),
        confidence=0.875,
        components=ScoreComponents(primary=0.4, secondary=0.475),
    )


class TestIngredientTable:
    def test_rows(self, make_ingredient):
        text = format_ingredient_table([
            make_ingredient(IngredientType.NUMERIC, potency=0.85, unique=12, name="revenue"),
        ])
        assert "=== Ingredients ===" in text
        assert "revenue" in text
        assert "numeric" in text
        assert "0.85" in text
        assert "Rule" not in text

    def test_trace_column(self, make_ingredient):
        ing = make_ingredient(IngredientType.TEMPORAL, name="created_at")
        trace = ClassificationTrace(column="created_at", type=IngredientType.TEMPORAL, rule="temporal_exact_name")
        text = format_ingredient_table([ing], [trace])
        assert "Rule" in text
        assert "temporal_exact_name" in text

    def test_label_column(self, make_ingredient):
        ing = make_ingredient(IngredientType.NUMERIC, name="revenue")
        text = format_ingredient_table([ing], labels=["Sacred Metrics of revenue"])
        assert "Label" in text
        assert "Sacred Metrics of revenue" in text
        assert "Rule" not in text

    def test_empty(self):
        assert "(no columns)" in format_ingredient_table([])


class TestGeographicNotes:
    def test_geographic_column(self):
        analysis = GeographicAnalysis(
            is_geographic=True,
            confidence=0.8,
            reasoning=["Contains potentially geographic terms: state",
                       "Geographic qualifiers present: shipping"],
            subtype=GeographicSubtype.ADMINISTRATIVE,
        )
        text = format_geographic_notes([("shipping_state", analysis)])
        assert "=== Geographic Notes ===" in text
        assert "shipping_state: geographic (administrative), confidence 80%" in text
        assert "    - Geographic qualifiers present: shipping" in text

    def test_rejected_column_shows_suggestions(self):
        analysis = GeographicAnalysis(
            is_geographic=False,
            confidence=0.1,
            reasoning=["Non-geographic context detected: server"],
            suggestions=["Consider renaming if this is actually geographic data"],
        )
        text = format_geographic_notes([("server_location", analysis)])
        assert "server_location: not geographic, confidence 10%" in text
        assert "-> Consider renaming" in text

    def test_columns_without_signal_skipped(self):
        text = format_geographic_notes([("revenue", GeographicAnalysis(False, 0.0))])
        assert "revenue" not in text
        assert "(no geographic signals)" in text


class TestRecommendationsTable:
    def test_rank_and_percentage(self, scored_line):
        text = format_recommendations_table([scored_line])
        assert "Temporal Essence Line" in text
        assert "88%" in text
        assert "   1  " in text

    def test_empty(self):
        assert "no compatible recipes" in format_recommendations_table([])

    def test_issues_listed(self, scored_line):
        validation = CombinationValidation()
        validation.add("Need at least 2 ingredients for a proper recipe", "Add another data column")
        text = format_recommendations_table([scored_line], validation)
        assert "[WARN] Need at least 2 ingredients" in text
        assert "-> Add another data column" in text

    def test_valid_combination_prints_no_issues(self, scored_line):
        text = format_recommendations_table([scored_line], CombinationValidation())
        assert "[WARN]" not in text

    def test_pie_advice_listed(self, scored_line):
        text = format_recommendations_table(
            [scored_line], CombinationValidation(), ["Consider a bar chart for better readability"]
        )
        assert "Pie chart advice:" in text
        assert "    - Consider a bar chart for better readability" in text

    def test_no_pie_advice_section_by_default(self, scored_line):
        assert "Pie chart advice" not in format_recommendations_table([scored_line])


class TestCatalogTable:
    def test_lists_every_recipe(self):
        text = format_catalog_table(DEFAULT_CATALOG)
        assert f"({len(DEFAULT_CATALOG)} recipes)" in text
        for recipe in DEFAULT_CATALOG:
            assert recipe.id in text

    def test_requirements_rendered(self):
        catalog = RecipeCatalog([DEFAULT_CATALOG.get("heatmap-intensity-fusion"),
                                 DEFAULT_CATALOG.get("histogram-transmutation")])
        lines = format_catalog_table(catalog).splitlines()
        heatmap = next(line for line in lines if "heatmap-intensity-fusion" in line)
        histogram = next(line for line in lines if "histogram-transmutation" in line)
        assert "categorical+numeric" in heatmap
        assert histogram.rstrip().endswith("-")
