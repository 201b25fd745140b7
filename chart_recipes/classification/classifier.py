"""
Column classifier: turns a raw ``Column`` into an ``Ingredient``.

Classification is an ordered table of named rules evaluated with early exit.
Each rule returns an ``IngredientType`` or ``None`` (no opinion). The table
IS the precedence — to change behaviour, reorder or edit rows, and the
per-rule tests in ``tests/test_classification/test_classifier.py`` show
exactly which rows moved.

Rule table
----------
    #   rule                       fires when                              → type
    1   geographic_name            keyword, or qualified ambiguous term    geographic
    2   geographic_values          geo-hinted name, values confirm         geographic
    3   temporal_exact_name        canonical temporal name                 temporal
    4   temporal_declared          declared ``date``                       temporal
    5   temporal_name_pattern      inclusion pattern, no exclusion         temporal
    6   temporal_values            >80% temporal-looking values, no excl.  temporal
    7   numeric_postal_identifier  numeric, postal/id name, >80% unique    geographic
    8   numeric_year_range         numeric, all integers in [1900, 2100]   temporal
    9   numeric_unix_epoch         numeric, values in [1e9, 1e10]          temporal
    10  numeric_declared           declared ``numeric``                    numeric
    11  categorical_declared       declared ``categorical``                categorical
    12  text_low_cardinality       ≤50 unique and ratio < 0.7              categorical
    13  text_coded_values          ≤200 unique, ratio < 0.5, coded values  categorical
    14  textual_fallback           always                                  textual

Potency
-------
    potency = clamp(0.5 + min(0.3, unique_ratio * 0.3)
                        + (0.2 if declared in {date, numeric} else 0), 0, 1)
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Optional

from chart_recipes.classification import geographic, temporal
from chart_recipes.classification.patterns import (
    CATEGORY_VALUE_PATTERNS,
    HIGH_UNIQUENESS_GEOGRAPHIC,
    LOW_CATEGORICAL_UNIQUE,
    LOW_UNIQUENESS_RATIO,
    MEDIUM_CATEGORICAL_UNIQUE,
    MEDIUM_UNIQUENESS_RATIO,
    POSTAL_ID_NAME_PATTERN,
    UNIX_EPOCH_RANGE,
    YEAR_RANGE,
)
from chart_recipes.classification.values import numeric_sample
from chart_recipes.config import ClassifierConfig
from chart_recipes.models.column import Column
from chart_recipes.models.ingredient import Ingredient
from chart_recipes.taxonomy.recipe_taxonomy import (
    NUMERIC_DECLARED_TYPES,
    DeclaredType,
    IngredientType,
)

logger = logging.getLogger(__name__)

RuleFn = Callable[[Column, ClassifierConfig], Optional[IngredientType]]


@dataclass(frozen=True)
class ClassificationRule:
    """One row of the classification table."""

    name:        str
    description: str
    apply:       RuleFn


@dataclass(frozen=True)
class ClassificationTrace:
    """Which rule decided a column's type."""

    column: str
    type:   IngredientType
    rule:   str


# ── Rules ─────────────────────────────────────────────────────────────────────

def _geographic_name(column: Column, cfg: ClassifierConfig) -> IngredientType | None:
    if geographic.geographic_by_name(column.name):
        return IngredientType.GEOGRAPHIC
    return None


def _geographic_values(column: Column, cfg: ClassifierConfig) -> IngredientType | None:
    if geographic.geographic_by_values(
        column,
        sample_size=cfg.value_sample_size,
        min_value_samples=cfg.min_geo_value_samples,
    ):
        return IngredientType.GEOGRAPHIC
    return None


def _temporal_exact_name(column: Column, cfg: ClassifierConfig) -> IngredientType | None:
    return IngredientType.TEMPORAL if temporal.is_exact_temporal_name(column.name) else None


def _temporal_declared(column: Column, cfg: ClassifierConfig) -> IngredientType | None:
    return IngredientType.TEMPORAL if column.declared_type == DeclaredType.DATE else None


def _temporal_name_pattern(column: Column, cfg: ClassifierConfig) -> IngredientType | None:
    if temporal.temporal_exclusion(column.name) is not None:
        return None
    return IngredientType.TEMPORAL if temporal.matches_temporal_inclusion(column.name) else None


def _temporal_values(column: Column, cfg: ClassifierConfig) -> IngredientType | None:
    if temporal.temporal_exclusion(column.name) is not None:
        return None
    ratio = temporal.temporal_value_ratio(column.values, cfg.temporal_sample_size)
    return IngredientType.TEMPORAL if ratio > cfg.temporal_match_ratio else None


def _numeric_postal_identifier(column: Column, cfg: ClassifierConfig) -> IngredientType | None:
    if column.declared_type != DeclaredType.NUMERIC or not column.values:
        return None
    if not POSTAL_ID_NAME_PATTERN.match(column.name.strip()):
        return None
    if column.unique_ratio > HIGH_UNIQUENESS_GEOGRAPHIC:
        return IngredientType.GEOGRAPHIC
    return None


def _numeric_year_range(column: Column, cfg: ClassifierConfig) -> IngredientType | None:
    if column.declared_type != DeclaredType.NUMERIC:
        return None
    numbers = numeric_sample(list(column.values[:cfg.temporal_sample_size]))
    if not numbers:
        return None
    if (
        YEAR_RANGE[0] <= min(numbers) and max(numbers) <= YEAR_RANGE[1]
        and all(n.is_integer() for n in numbers)
    ):
        return IngredientType.TEMPORAL
    return None


def _numeric_unix_epoch(column: Column, cfg: ClassifierConfig) -> IngredientType | None:
    if column.declared_type != DeclaredType.NUMERIC:
        return None
    numbers = numeric_sample(list(column.values[:cfg.temporal_sample_size]))
    if numbers and UNIX_EPOCH_RANGE[0] <= min(numbers) and max(numbers) <= UNIX_EPOCH_RANGE[1]:
        return IngredientType.TEMPORAL
    return None


def _numeric_declared(column: Column, cfg: ClassifierConfig) -> IngredientType | None:
    return IngredientType.NUMERIC if column.declared_type == DeclaredType.NUMERIC else None


def _categorical_declared(column: Column, cfg: ClassifierConfig) -> IngredientType | None:
    return IngredientType.CATEGORICAL if column.declared_type == DeclaredType.CATEGORICAL else None


def _text_low_cardinality(column: Column, cfg: ClassifierConfig) -> IngredientType | None:
    # Missing cells are not a category.
    unique = column.non_null_unique_count
    if unique == 0:
        return None
    if unique <= LOW_CATEGORICAL_UNIQUE and column.non_null_unique_ratio < LOW_UNIQUENESS_RATIO:
        return IngredientType.CATEGORICAL
    return None


def _text_coded_values(column: Column, cfg: ClassifierConfig) -> IngredientType | None:
    unique = column.non_null_unique_count
    if unique == 0:
        return None
    if not (
        unique <= MEDIUM_CATEGORICAL_UNIQUE
        and column.non_null_unique_ratio < MEDIUM_UNIQUENESS_RATIO
    ):
        return None
    sample = column.values[:cfg.value_sample_size]
    if any(
        v is not None and p.match(str(v)) for v in sample for p in CATEGORY_VALUE_PATTERNS
    ):
        return IngredientType.CATEGORICAL
    return None


def _textual_fallback(column: Column, cfg: ClassifierConfig) -> IngredientType | None:
    return IngredientType.TEXTUAL


CLASSIFICATION_RULES: tuple[ClassificationRule, ...] = (
    ClassificationRule("geographic_name", "Geographic keyword or qualified ambiguous term", _geographic_name),
    ClassificationRule("geographic_values", "Geo-hinted name confirmed by sampled values", _geographic_values),
    ClassificationRule("temporal_exact_name", "Canonical temporal column name", _temporal_exact_name),
    ClassificationRule("temporal_declared", "Declared as a date column", _temporal_declared),
    ClassificationRule("temporal_name_pattern", "Temporal name pattern with no exclusion term", _temporal_name_pattern),
    ClassificationRule("temporal_values", "Sampled values look like dates", _temporal_values),
    ClassificationRule("numeric_postal_identifier", "Mostly-unique postal or FIPS codes", _numeric_postal_identifier),
    ClassificationRule("numeric_year_range", "Whole numbers within the year range", _numeric_year_range),
    ClassificationRule("numeric_unix_epoch", "Numbers within the Unix epoch range", _numeric_unix_epoch),
    ClassificationRule("numeric_declared", "Declared as a numeric column", _numeric_declared),
    ClassificationRule("categorical_declared", "Declared as a categorical column", _categorical_declared),
    ClassificationRule("text_low_cardinality", "Few distinct text values", _text_low_cardinality),
    ClassificationRule("text_coded_values", "Moderate cardinality with coded values", _text_coded_values),
    ClassificationRule("textual_fallback", "Least specific classification", _textual_fallback),
)


# ── Public API ────────────────────────────────────────────────────────────────

def explain_classification(
    column: Column,
    config: ClassifierConfig | None = None,
    rules: Iterable[ClassificationRule] = CLASSIFICATION_RULES,
) -> ClassificationTrace:
    """Run the rule table and report which rule fired first."""
    cfg = config or ClassifierConfig()
    for rule in rules:
        result = rule.apply(column, cfg)
        if result is not None:
            return ClassificationTrace(column=column.name, type=result, rule=rule.name)
    return ClassificationTrace(column=column.name, type=IngredientType.TEXTUAL, rule="textual_fallback")


def classify_type(column: Column, config: ClassifierConfig | None = None) -> IngredientType:
    return explain_classification(column, config).type


def compute_potency(column: Column) -> float:
    """Quality score from value diversity and declared-type confidence."""
    potency = 0.5
    if column.values:
        potency += min(column.unique_ratio * 0.3, 0.3)
    if column.declared_type in NUMERIC_DECLARED_TYPES:
        potency += 0.2
    return max(0.0, min(1.0, potency))


_TYPE_PROPERTIES: dict[IngredientType, tuple[str, ...]] = {
    IngredientType.TEMPORAL:    ("Flows through time", "Reveals trends", "Shows patterns"),
    IngredientType.NUMERIC:     ("Quantifiable", "Measurable", "Aggregatable"),
    IngredientType.CATEGORICAL: ("Distinct categories", "Groupable", "Comparable"),
    IngredientType.GEOGRAPHIC:  ("Spatial awareness", "Location binding", "Mappable"),
    IngredientType.TEXTUAL:     ("Descriptive", "Free-form", "Searchable"),
}


def ingredient_properties(column: Column, ingredient_type: IngredientType) -> tuple[str, ...]:
    """Diversity tag followed by the type's descriptive tags."""
    if column.values:
        unique = column.unique_value_count
        if unique > 100:
            diversity = "Highly diverse"
        elif unique > 10:
            diversity = "Moderately diverse"
        else:
            diversity = "Limited variety"
    else:
        diversity = "No sample"
    return (diversity, *_TYPE_PROPERTIES[ingredient_type])


def classify(column: Column, config: ClassifierConfig | None = None) -> Ingredient:
    """Classify one column into an ``Ingredient``."""
    trace = explain_classification(column, config)
    logger.debug("Classified %s as %s via %s", column.name, trace.type, trace.rule)
    return Ingredient(
        source_column=column.name,
        type=trace.type,
        potency=compute_potency(column),
        unique_value_count=column.unique_value_count,
        properties=ingredient_properties(column, trace.type),
    )


def analyze_ingredients(
    columns: Iterable[Column],
    config: ClassifierConfig | None = None,
) -> list[Ingredient]:
    """Classify every column, preserving order."""
    ingredients = [classify(c, config) for c in columns]
    logger.debug(
        "Analyzed %d ingredients: %s",
        len(ingredients), [i.type.value for i in ingredients],
    )
    return ingredients


def override_ingredient_type(ingredient: Ingredient, new_type: IngredientType) -> Ingredient:
    """Return a copy of ``ingredient`` with a user-chosen type.

    Properties are re-derived for the new type; the diversity tag is kept.
    """
    diversity = ingredient.properties[:1]
    return ingredient.model_copy(
        update={
            "type": new_type,
            "properties": (*diversity, *_TYPE_PROPERTIES[new_type]),
            "is_overridden": True,
        }
    )
