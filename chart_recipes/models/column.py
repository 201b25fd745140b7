"""
Input models — the caller-supplied view of a tabular dataset.

``Column`` is one column with its declared type and a sampled subset of its
values; ``Dataset`` is the ordered collection of columns plus the total row
count. Both are frozen: classification never writes back into its input.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator

from chart_recipes.taxonomy.recipe_taxonomy import DeclaredType


class Column(BaseModel):
    """A single dataset column as supplied by the surrounding application.

    Attributes:
        name: Column header. Must be non-empty after stripping.
        declared_type: Type the source schema (or loader) assigned.
        values: Ordered sample of raw cell values; may contain ``None`` and
            may be empty when the caller only knows the schema.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    declared_type: DeclaredType
    values: tuple[Any, ...] = ()

    @field_validator("name")
    @classmethod
    def validate_name_not_empty(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("Column name must not be empty.")
        return v

    @property
    def non_null_values(self) -> list[Any]:
        return [v for v in self.values if v is not None]

    @property
    def unique_value_count(self) -> int:
        """Distinct sampled values, ``None`` included (it is a distinct value)."""
        return len(set(_hashable(v) for v in self.values))

    @property
    def unique_ratio(self) -> float:
        """``unique_value_count / len(values)``; 0.0 when there are no values."""
        if not self.values:
            return 0.0
        return self.unique_value_count / len(self.values)

    @property
    def non_null_unique_count(self) -> int:
        return len(set(_hashable(v) for v in self.non_null_values))

    @property
    def non_null_unique_ratio(self) -> float:
        """Uniqueness over the non-null sample; 0.0 when every value is missing."""
        present = self.non_null_values
        if not present:
            return 0.0
        return self.non_null_unique_count / len(present)


class Dataset(BaseModel):
    """Ordered columns plus the row count of the full table.

    Attributes:
        columns: Columns in source order.
        row_count: Total rows in the source table (not just the sample).
    """

    model_config = ConfigDict(frozen=True)

    columns: tuple[Column, ...]
    row_count: int = 0

    @field_validator("row_count")
    @classmethod
    def validate_row_count(cls, v: int) -> int:
        if v < 0:
            raise ValueError(f"row_count must be non-negative, got {v}.")
        return v

    @property
    def column_names(self) -> list[str]:
        return [c.name for c in self.columns]

    def column(self, name: str) -> Column:
        """Return the column called ``name``.

        Raises:
            KeyError: If no column has that name.
        """
        for col in self.columns:
            if col.name == name:
                return col
        raise KeyError(f"Unknown column '{name}'. Available: {self.column_names}")


def _hashable(value: Any) -> Any:
    # Lists and dicts from JSON sources are not hashable; compare by repr.
    try:
        hash(value)
    except TypeError:
        return repr(value)
    return value
