"""
Ingredient model — a column after semantic classification.

An ``Ingredient`` is created once by the classifier and never mutated. A
user correction (``override_ingredient_type``) produces a *new* ingredient
with ``is_overridden=True`` rather than editing the original.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, field_validator

from chart_recipes.taxonomy.recipe_taxonomy import IngredientType


class Ingredient(BaseModel):
    """A classified column, ready for recipe scoring.

    Attributes:
        source_column: Name of the column this ingredient was derived from.
        type: Semantic ``IngredientType`` assigned by the classifier.
        potency: Quality score in [0.0, 1.0] from value diversity and
            declared-type confidence.
        unique_value_count: Distinct values in the sampled column data.
        properties: Descriptive tags (diversity + type traits) for display.
        is_overridden: ``True`` when the type was set by the user rather
            than the classifier.
    """

    model_config = ConfigDict(frozen=True)

    source_column: str
    type: IngredientType
    potency: float
    unique_value_count: int = 0
    properties: tuple[str, ...] = ()
    is_overridden: bool = False

    @field_validator("potency")
    @classmethod
    def validate_potency_range(cls, v: float) -> float:
        if not 0.0 <= v <= 1.0:
            raise ValueError(f"potency must be in [0.0, 1.0], got {v}.")
        return v

    @field_validator("unique_value_count")
    @classmethod
    def validate_unique_count(cls, v: int) -> int:
        if v < 0:
            raise ValueError(f"unique_value_count must be non-negative, got {v}.")
        return v
