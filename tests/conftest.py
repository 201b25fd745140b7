"""
Shared pytest fixtures for the Chart Recipe Engine test suite.

Provides:
  - ``make_column`` / ``make_ingredient``: factories for domain objects with
    sensible defaults, so each test states only what it cares about.
  - ``sales_dataset``: a small mixed-type ``Dataset``.
  - ``clean_env``: removes ``CHART_RECIPES_*`` variables for config tests.
"""

from __future__ import annotations

import os
from typing import Any, Callable

import pytest

from chart_recipes.models.column import Column, Dataset
from chart_recipes.models.ingredient import Ingredient
from chart_recipes.taxonomy.recipe_taxonomy import DeclaredType, IngredientType


# ── Factories ─────────────────────────────────────────────────────────────────

@pytest.fixture
def make_column() -> Callable[..., Column]:
    """Return a factory: ``make_column(name, declared_type, values=())``."""

    def _make(
        name: str,
        declared_type: DeclaredType = DeclaredType.TEXT,
        values: tuple[Any, ...] | list[Any] = (),
    ) -> Column:
        return Column(name=name, declared_type=declared_type, values=tuple(values))

    return _make


@pytest.fixture
def make_ingredient() -> Callable[..., Ingredient]:
    """Return a factory: ``make_ingredient(type, potency=0.7, unique=10)``."""
    counter = {"n": 0}

    def _make(
        ingredient_type: IngredientType,
        potency: float = 0.7,
        unique: int = 10,
        name: str | None = None,
    ) -> Ingredient:
        counter["n"] += 1
        return Ingredient(
            source_column=name or f"{ingredient_type.value}_{counter['n']}",
            type=ingredient_type,
            potency=potency,
            unique_value_count=unique,
        )

    return _make


# ── Sample data ───────────────────────────────────────────────────────────────

@pytest.fixture
def sales_dataset() -> Dataset:
    """Five-row sales table: date, numeric, categorical, geographic, free text."""
    return Dataset(
        columns=(
            Column(
                name="order_date",
                declared_type=DeclaredType.DATE,
                values=("2024-01-01", "2024-01-02", "2024-01-03", "2024-01-04", "2024-01-05"),
            ),
            Column(
                name="revenue",
                declared_type=DeclaredType.NUMERIC,
                values=(120.5, 98.0, 143.25, 87.5, 110.0),
            ),
            Column(
                name="category",
                declared_type=DeclaredType.CATEGORICAL,
                values=("A", "B", "C", "A", "B"),
            ),
            Column(
                name="shipping_city",
                declared_type=DeclaredType.TEXT,
                values=("Austin", "Denver", "Austin", "Boston", "Denver"),
            ),
            Column(
                name="notes",
                declared_type=DeclaredType.TEXT,
                values=("late", "gift wrap", "ok", "rush order", "fragile"),
            ),
        ),
        row_count=5,
    )


# ── Environment ───────────────────────────────────────────────────────────────

@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    """Strip every ``CHART_RECIPES_*`` variable from the environment."""
    for key in list(os.environ):
        if key.startswith("CHART_RECIPES_"):
            monkeypatch.delenv(key, raising=False)
    return monkeypatch
