"""
Recipe models — static chart templates and their ingredient requirements.

A ``Recipe`` says which ingredient shapes a chart type needs:

  primary   — ALL listed types must be present (hard gate).
  secondary — at least one listed type must be present; partial credit
              scales with the fraction matched.
  optional  — documentation only; never affects scoring.

Requirement lists are tuples, not sets: a repeated type (``scatter3d`` lists
``numeric`` twice in ``secondary``) raises the recipe's ideal ingredient
count, which the overcrowding penalty measures against.
"""

from __future__ import annotations

import re

from pydantic import BaseModel, ConfigDict, field_validator

from chart_recipes.taxonomy.recipe_taxonomy import ChartType, IngredientType

_RECIPE_ID_RE = re.compile(r"^[a-z0-9]+(-[a-z0-9]+)*$")


class RequiredIngredients(BaseModel):
    """Ingredient requirements for one recipe.

    Attributes:
        primary: Types that must all be present. Never empty.
        secondary: Types of which at least one must be present, or ``None``
            when the recipe has no secondary requirement.
        optional: Informational extras shown to the user.
    """

    model_config = ConfigDict(frozen=True)

    primary: tuple[IngredientType, ...]
    secondary: tuple[IngredientType, ...] | None = None
    optional: tuple[IngredientType, ...] = ()

    @field_validator("primary")
    @classmethod
    def validate_primary_not_empty(cls, v: tuple[IngredientType, ...]) -> tuple[IngredientType, ...]:
        if not v:
            raise ValueError("primary ingredients must not be empty.")
        return v

    @field_validator("secondary")
    @classmethod
    def validate_secondary_not_empty(
        cls, v: tuple[IngredientType, ...] | None
    ) -> tuple[IngredientType, ...] | None:
        # An empty tuple would make the secondary gate unsatisfiable.
        if v is not None and not v:
            raise ValueError("secondary ingredients must be None or non-empty.")
        return v

    @property
    def optimal_count(self) -> int:
        """Ideal number of ingredients: ``len(primary) + len(secondary)``."""
        return len(self.primary) + len(self.secondary or ())


class Recipe(BaseModel):
    """A chart-type template in the recipe catalog.

    Attributes:
        id: Unique kebab-case slug, e.g. ``"temporal-essence-line"``.
        name: Human-readable recipe name.
        chart_type: Visualization this recipe produces.
        reasoning: Why the chart suits the required ingredients.
        required_ingredients: Primary / secondary / optional requirements.
        effects: Short statements of what the chart reveals.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    chart_type: ChartType
    reasoning: str
    required_ingredients: RequiredIngredients
    effects: tuple[str, ...] = ()

    @field_validator("id")
    @classmethod
    def validate_id_format(cls, v: str) -> str:
        if not _RECIPE_ID_RE.match(v):
            raise ValueError(
                f"Recipe id '{v}' must be lowercase kebab-case (e.g. 'categorical-power-bar')."
            )
        return v

    @field_validator("reasoning")
    @classmethod
    def validate_reasoning_not_empty(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("reasoning must not be empty.")
        return v.strip()
