"""
Recipe scoring: rates how well one ingredient set suits one recipe.

Modules
-------
tables : per-chart bonus and penalty tables (complexity, overcrowding,
         data-size, diversity, perfect combinations, pairings).
pie    : PieChartHandler. Pie charts need exactly one categorical dimension
         and a sensible slice count, so they get their own validation.
engine : ScoreComponents dataclass + ScoringEngine. Pure functions of their
         inputs, no I/O.
"""
