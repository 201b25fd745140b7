"""
Column classification: raw columns in, typed ingredients out.

Modules
-------
patterns   : Regexes, keyword sets and thresholds — no decisions.
values     : Lenient numeric parsing of sampled cell values.
geographic : Contextual geographic detection + explained analysis.
temporal   : Temporal detection with exclusion-beats-inclusion precedence.
classifier : Ordered rule table, potency, ``classify()`` / ``analyze_ingredients()``.
labels     : Cosmetic display labels (explicit RNG, never scored).
"""
