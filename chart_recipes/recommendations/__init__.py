"""
Recommendation pipeline: turns ingredients into ranked chart recipes.

Modules
-------
aggregator : ScoredRecipe dataclass + RecommendationAggregator
             (score → threshold → sort → post-filter → dedupe → truncate).
validation : CombinationValidation + validate_ingredient_combination(),
             a lightweight shape check independent of scoring.
session    : BrewResult + analyze_selection() — classify a dataset, keep the
             user's selected columns and recommend for them.
"""
