"""
CSV loader: builds a ``Dataset`` from a delimited file with a header row.

Each column keeps the first ``sample_size`` cell values; ``row_count`` is the
total number of data rows. Empty cells (after stripping) become ``None``.

Declared type inference (over the sampled, non-empty values)
------------------------------------------------------------
  numeric → every value parses with ``float()``;
            integral strings are stored as ``int``, others as ``float``
  date    → every value parses with ``date.fromisoformat`` or
            ``datetime.fromisoformat``; values stay strings
  text    → anything else, including an all-empty column

The loader never declares ``categorical``: that decision belongs to the
classifier, which sees cardinality.
"""

from __future__ import annotations

import csv
import logging
import re
from datetime import date, datetime
from pathlib import Path
from typing import Any

from chart_recipes.models.column import Column, Dataset
from chart_recipes.taxonomy.recipe_taxonomy import DeclaredType

logger = logging.getLogger(__name__)

DEFAULT_SAMPLE_SIZE = 1000

_INT_RE = re.compile(r"^[-+]?\d+$")


def load_dataset_csv(path: Path, sample_size: int = DEFAULT_SAMPLE_SIZE) -> Dataset:
    """Parse a CSV file into a :class:`Dataset`.

    Args:
        path:        Path to the CSV file (must exist).
        sample_size: Maximum number of values kept per column.

    Returns:
        Dataset with one ``Column`` per header field, in header order.

    Raises:
        FileNotFoundError: If ``path`` does not exist.
        ValueError: If the file has no header row, a blank or duplicate
            header, or ``sample_size`` < 1.
    """
    if sample_size < 1:
        raise ValueError(f"sample_size must be >= 1, got {sample_size}.")
    if not path.exists():
        raise FileNotFoundError(f"CSV file not found: {path}")

    with open(path, encoding="utf-8", newline="") as f:
        reader = csv.DictReader(f)

        if reader.fieldnames is None:
            raise ValueError(f"CSV file is empty or has no header row: {path}")

        headers = [h.strip() for h in reader.fieldnames]
        if any(not h for h in headers):
            raise ValueError(f"CSV header contains a blank column name: {path}")
        duplicates = sorted({h for h in headers if headers.count(h) > 1})
        if duplicates:
            raise ValueError(f"CSV header has duplicate column names: {duplicates}")

        samples: dict[str, list[str | None]] = {h: [] for h in headers}
        row_count = 0
        for row in reader:
            if row_count < sample_size:
                for raw_name, header in zip(reader.fieldnames, headers):
                    samples[header].append(_cell(row.get(raw_name)))
            row_count += 1

    if row_count == 0:
        logger.warning("CSV has a header but no data rows: %s", path)

    columns = tuple(_build_column(name, raw) for name, raw in samples.items())
    logger.info(
        "Loaded %d columns x %d rows from %s", len(columns), row_count, path.name,
    )
    return Dataset(columns=columns, row_count=row_count)


# ── Private helpers ────────────────────────────────────────────────────────────

def _cell(value: str | None) -> str | None:
    """Strip a raw cell; empty (or missing, for short rows) → None."""
    if value is None:
        return None
    value = value.strip()
    return value or None


def _build_column(name: str, raw: list[str | None]) -> Column:
    present = [v for v in raw if v is not None]
    declared = infer_declared_type(present)
    values: list[Any]
    if declared == DeclaredType.NUMERIC:
        values = [None if v is None else _to_number(v) for v in raw]
    else:
        values = list(raw)
    logger.debug("Column %s declared %s", name, declared)
    return Column(name=name, declared_type=declared, values=tuple(values))


def infer_declared_type(values: list[str]) -> DeclaredType:
    """Declared type for a list of non-empty cell strings."""
    if not values:
        return DeclaredType.TEXT
    if all(_is_number(v) for v in values):
        return DeclaredType.NUMERIC
    if all(_is_iso_date(v) for v in values):
        return DeclaredType.DATE
    return DeclaredType.TEXT


def _is_number(value: str) -> bool:
    try:
        number = float(value)
    except ValueError:
        return False
    # "nan" / "inf" parse but are not data
    return number == number and number not in (float("inf"), float("-inf"))


def _to_number(value: str) -> int | float:
    return int(value) if _INT_RE.match(value) else float(value)


def _is_iso_date(value: str) -> bool:
    for parse in (date.fromisoformat, datetime.fromisoformat):
        try:
            parse(value)
        except ValueError:
            continue
        return True
    return False
