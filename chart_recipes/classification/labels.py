"""Cosmetic display labels for ingredients.

Labels are presentation only. They take an explicit ``random.Random`` so the
caller decides whether they vary between runs, and nothing in the scoring
path ever reads them.
"""

from __future__ import annotations

import random

from chart_recipes.taxonomy.recipe_taxonomy import IngredientType

LABEL_PREFIXES: dict[IngredientType, tuple[str, ...]] = {
    IngredientType.TEMPORAL: (
        "Temporal Crystals of", "Chronos Essence of", "Time Spirits of",
        "Eternal Flows of", "Temporal Vortex of",
    ),
    IngredientType.NUMERIC: (
        "Mystical Numbers of", "Quantified Essence of", "Numerical Aura of",
        "Sacred Metrics of", "Dimensional Power of",
    ),
    IngredientType.CATEGORICAL: (
        "Categorical Gems of", "Classification Runes of", "Sorting Stones of",
        "Essence Clusters of", "Category Crystals of",
    ),
    IngredientType.GEOGRAPHIC: (
        "Spatial Coordinates of", "Geographic Compass of", "Location Crystals of",
        "Terrain Essence of", "Cartographic Magic of",
    ),
    IngredientType.TEXTUAL: (
        "Textual Scrolls of", "Word Essence of", "Script Magic of",
        "Linguistic Aura of", "Semantic Crystals of",
    ),
}


def display_label(column_name: str, ingredient_type: IngredientType, rng: random.Random) -> str:
    """Return e.g. ``"Sacred Metrics of revenue"`` using a prefix drawn from ``rng``."""
    prefix = rng.choice(LABEL_PREFIXES[ingredient_type])
    return f"{prefix} {column_name}"
