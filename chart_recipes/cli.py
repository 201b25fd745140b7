"""
Chart Recipe Engine — CLI entry point.

All commands follow this pattern:
  1. Load ``AppConfig`` via ``load_config()``.
  2. Configure logging.
  3. Load and validate inputs.
  4. Classify / score.
  5. Report result to stdout (ASCII table, or JSON with ``--json``).

Install and run::

    pip install -e .
    chart-recipes --help
    chart-recipes validate-config
    chart-recipes catalog
    chart-recipes classify data/sales.csv --explain
    chart-recipes classify data/sales.csv --labels --seed 7
    chart-recipes recommend data/sales.csv --columns order_date,revenue --top 5
    chart-recipes recommend data/sales.csv --override store_id=categorical
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import List, Optional

import typer

app = typer.Typer(
    name="chart-recipes",
    help="Chart Recipe Engine — recommend chart types for tabular data.",
    add_completion=False,
)


# ── Helpers ───────────────────────────────────────────────────────────────────

def _load_config_or_exit(config_path: Optional[str] = None):
    """Load AppConfig, printing a friendly error and exiting on failure."""
    from pydantic import ValidationError

    from chart_recipes.config import load_config

    try:
        cfg_path = Path(config_path) if config_path else None
        return load_config(cfg_path)
    except FileNotFoundError as exc:
        typer.echo(f"[ERROR] {exc}", err=True)
        raise typer.Exit(code=1)
    except (ValidationError, ValueError) as exc:
        typer.echo(f"[ERROR] Config validation failed: {exc}", err=True)
        raise typer.Exit(code=1)


def _configure_logging(config):
    """Set up logging from config."""
    from chart_recipes.utils.logging import configure_logging
    configure_logging(config.logging)


def _load_dataset_or_exit(file: Path, sample_size: int):
    """Load a CSV dataset, printing a friendly error and exiting on failure."""
    from chart_recipes.ingestion.csv_loader import load_dataset_csv

    try:
        return load_dataset_csv(file, sample_size=sample_size)
    except (FileNotFoundError, ValueError) as exc:
        typer.echo(f"[ERROR] {exc}", err=True)
        raise typer.Exit(code=1)


def _parse_overrides_or_exit(values: Optional[List[str]]) -> dict:
    """Parse repeated ``column=type`` options into an override mapping."""
    from chart_recipes.taxonomy.recipe_taxonomy import IngredientType

    overrides = {}
    for value in values or []:
        name, sep, type_name = value.partition("=")
        if not sep or not name.strip():
            typer.echo(f"[ERROR] Invalid --override '{value}': expected column=type", err=True)
            raise typer.Exit(code=1)
        try:
            overrides[name.strip()] = IngredientType(type_name.strip().lower())
        except ValueError:
            valid = ", ".join(t.value for t in IngredientType)
            typer.echo(
                f"[ERROR] Invalid --override '{value}': type must be one of {valid}", err=True
            )
            raise typer.Exit(code=1)
    return overrides


# ── Commands ──────────────────────────────────────────────────────────────────

@app.command("recommend")
def recommend(
    file: Path = typer.Argument(..., help="CSV file with a header row."),
    top: Optional[int] = typer.Option(
        None, "--top", help="Maximum recipes to show (default from config).",
    ),
    min_confidence: Optional[float] = typer.Option(
        None, "--min-confidence", help="Drop recipes at or below this confidence.",
    ),
    columns: Optional[str] = typer.Option(
        None, "--columns", help="Comma-separated column selection (default: all columns).",
    ),
    override: Optional[List[str]] = typer.Option(
        None, "--override", help="Force a column's type, as column=type. Repeatable.",
    ),
    as_json: bool = typer.Option(False, "--json", help="Print results as JSON."),
    sample_size: int = typer.Option(1000, "--sample-size", help="Rows sampled per column."),
    config_path: Optional[str] = typer.Option(None, "--config", help="Path to TOML config file."),
) -> None:
    """Recommend chart recipes for the columns of a CSV file.

    Exits with code 1 if the file cannot be read, a selected or overridden
    column does not exist, or an override names an unknown type.
    """
    from pydantic import ValidationError

    from chart_recipes.config import RecommendConfig
    from chart_recipes.engine import RecipeEngine
    from chart_recipes.reporting.export import brew_result_record
    from chart_recipes.reporting.formatters import (
        format_ingredient_table,
        format_recommendations_table,
    )

    config = _load_config_or_exit(config_path)
    _configure_logging(config)

    overrides = {}
    if top is not None:
        overrides["max_results"] = top
    if min_confidence is not None:
        overrides["min_confidence"] = min_confidence
    if overrides:
        try:
            recommend_cfg = RecommendConfig(**{**config.recommend.model_dump(), **overrides})
        except ValidationError as exc:
            typer.echo(f"[ERROR] Invalid option: {exc}", err=True)
            raise typer.Exit(code=1)
        config = config.model_copy(update={"recommend": recommend_cfg})

    dataset = _load_dataset_or_exit(file, sample_size)
    selection = (
        [c.strip() for c in columns.split(",") if c.strip()]
        if columns else dataset.column_names
    )

    type_overrides = _parse_overrides_or_exit(override)

    engine = RecipeEngine(config)
    try:
        result = engine.analyze_selection(dataset, selection, type_overrides)
    except KeyError as exc:
        typer.echo(f"[ERROR] {exc.args[0]}", err=True)
        raise typer.Exit(code=1)

    if as_json:
        typer.echo(json.dumps(brew_result_record(result), indent=2))
        return

    typer.echo(f"Dataset: {file.name} ({dataset.row_count} rows)")
    typer.echo(format_ingredient_table(result.ingredients))
    typer.echo(format_recommendations_table(result.recipes, result.validation, result.pie_advice))
    if result.best_recipe is not None:
        typer.echo("")
        typer.echo(f"  Best recipe: {result.best_recipe.recipe.name}")
        typer.echo(f"    {result.best_recipe.recipe.reasoning}")
    typer.echo("")
    typer.echo("[OK] Ready to brew." if result.can_brew else "[WARN] Nothing to brew yet.")


@app.command("classify")
def classify(
    file: Path = typer.Argument(..., help="CSV file with a header row."),
    explain: bool = typer.Option(
        False, "--explain", help="Show which rule decided each type, plus geographic reasoning.",
    ),
    labels: bool = typer.Option(False, "--labels", help="Add a display label per column."),
    seed: int = typer.Option(0, "--seed", help="Random seed for display labels."),
    sample_size: int = typer.Option(1000, "--sample-size", help="Rows sampled per column."),
    config_path: Optional[str] = typer.Option(None, "--config", help="Path to TOML config file."),
) -> None:
    """Classify every column of a CSV file into an ingredient type."""
    import random

    from chart_recipes.classification.labels import display_label
    from chart_recipes.engine import RecipeEngine
    from chart_recipes.reporting.formatters import (
        format_geographic_notes,
        format_ingredient_table,
    )

    config = _load_config_or_exit(config_path)
    _configure_logging(config)

    dataset = _load_dataset_or_exit(file, sample_size)
    engine = RecipeEngine(config)
    ingredients = engine.analyze_ingredients(dataset.columns)
    traces = [engine.explain(c) for c in dataset.columns] if explain else None
    display = None
    if labels:
        rng = random.Random(seed)
        display = [display_label(i.source_column, i.type, rng) for i in ingredients]

    typer.echo(f"Dataset: {file.name} ({dataset.row_count} rows)")
    typer.echo(format_ingredient_table(ingredients, traces, display))
    if explain:
        typer.echo(format_geographic_notes(
            [(c.name, engine.analyze_geographic(c)) for c in dataset.columns]
        ))


@app.command("catalog")
def catalog() -> None:
    """List every recipe in the built-in catalog."""
    from chart_recipes.recipes.catalog import DEFAULT_CATALOG
    from chart_recipes.reporting.formatters import format_catalog_table

    typer.echo(format_catalog_table(DEFAULT_CATALOG))


@app.command("validate-config")
def validate_config(
    config_path: Optional[str] = typer.Option(
        None,
        "--config",
        help="Path to TOML config file (default: config/default.toml).",
    ),
    show_full: bool = typer.Option(
        False,
        "--full",
        help="Print full config including all fields.",
    ),
) -> None:
    """Validate the configuration file and print parsed values.

    Exits with code 1 if the config fails validation.
    """
    config = _load_config_or_exit(config_path)

    typer.echo("Configuration validated successfully.")
    typer.echo("")
    typer.echo(f"  Min confidence:   {config.recommend.min_confidence}")
    typer.echo(f"  Max results:      {config.recommend.max_results}")
    typer.echo(f"  Value sample:     {config.classifier.value_sample_size}")
    typer.echo(
        f"  Size buckets:     <{config.scoring.data_size_small} / "
        f"<{config.scoring.data_size_medium}"
    )
    typer.echo(f"  Log level:        {config.logging.level}")
    typer.echo(f"  Debug mode:       {config.debug}")

    if show_full:
        typer.echo("")
        typer.echo("Full config (JSON):")
        typer.echo(json.dumps(config.model_dump(), indent=2, default=str))

    typer.echo("")
    typer.echo("[OK] Config valid.")


# ── Entry point ───────────────────────────────────────────────────────────────

if __name__ == "__main__":
    app()
