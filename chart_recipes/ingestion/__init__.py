"""
Ingestion layer: builds ``Dataset`` objects from files on disk.

Submodules:
  csv_loader — header-row CSV → Dataset with inferred declared types
"""
