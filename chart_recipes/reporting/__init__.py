"""
chart_recipes.reporting — terminal tables and JSON records for CLI output.

It does NOT compute anything: every function formats results the engine
already produced.

Modules:
  formatters — ASCII terminal table formatters for Typer CLI commands.
  export     — flat dict records for ``--json`` output.
"""
