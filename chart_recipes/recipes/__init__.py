"""
Recipe catalog: the static chart templates the engine scores.

Modules
-------
catalog : ``RecipeCatalog`` (immutable, validated) + ``DEFAULT_CATALOG``.
"""
