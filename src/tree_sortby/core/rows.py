"""Row: one node of the row forest.

Rows are immutable. Ordering never touches ``values``; it builds new Row
objects whose ``sub_rows`` tuple is reordered and shares the value mapping.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Iterable, Mapping, Sequence

import numpy as np
import pandas as pd

from .columns import ColumnDescriptor, columns_from_dataframe


@dataclass(frozen=True, eq=False)
class Row:
    """A row of column values plus its (possibly empty) sub-rows."""

    values: Mapping[str, Any]
    sub_rows: tuple[Row, ...] = ()
    index: int | None = None
    original: Any = None

    @property
    def size(self) -> int:
        """Number of rows in this subtree, including self."""
        return 1 + sum(child.size for child in self.sub_rows)

    def with_sub_rows(self, sub_rows: Sequence[Row]) -> Row:
        return replace(self, sub_rows=tuple(sub_rows))

    def __repr__(self) -> str:
        return f"Row(index={self.index}, values={dict(self.values)}, sub_rows={len(self.sub_rows)})"


def _to_python(value: Any) -> Any:
    # numpy scalars -> builtins; Timestamps and NaT are left alone
    if isinstance(value, np.generic):
        return value.item()
    return value


def rows_from_records(
    records: Iterable[Any],
    columns: Sequence[ColumnDescriptor],
    sub_rows_key: str = "subRows",
) -> tuple[Row, ...]:
    """Build a row forest from (possibly nested) dict records.

    Each record's values are read through the column accessors; children
    are taken from ``record[sub_rows_key]`` when present.
    """
    rows = []
    for i, record in enumerate(records):
        values = {column.id: column.read(record) for column in columns}
        children: Any = ()
        if isinstance(record, dict):
            children = record.get(sub_rows_key) or ()
        rows.append(
            Row(
                values=values,
                sub_rows=rows_from_records(children, columns, sub_rows_key),
                index=i,
                original=record,
            )
        )
    return tuple(rows)


def rows_from_dataframe(
    df: pd.DataFrame,
    columns: Sequence[ColumnDescriptor] | None = None,
) -> tuple[Row, ...]:
    """Build a flat row forest from a DataFrame, one Row per DataFrame row."""
    if not isinstance(df, pd.DataFrame):
        raise TypeError(
            f"Expected a pandas DataFrame, got {type(df).__name__}."
        )
    if columns is None:
        columns = columns_from_dataframe(df)

    rows = []
    for i, (label, series) in enumerate(df.iterrows()):
        values = {column.id: _to_python(column.read(series)) for column in columns}
        rows.append(Row(values=values, index=i, original=label))
    return tuple(rows)


def iter_rows(rows: Sequence[Row], depth: int = 0):
    """Yield ``(depth, row)`` pairs depth-first, parents before children."""
    for row in rows:
        yield depth, row
        yield from iter_rows(row.sub_rows, depth + 1)


def rows_to_dataframe(rows: Sequence[Row], depth_column: str = "depth") -> pd.DataFrame:
    """Flatten a forest depth-first into a DataFrame (for inspection/export)."""
    records = []
    for depth, row in iter_rows(rows):
        record = {depth_column: depth}
        record.update(row.values)
        records.append(record)
    return pd.DataFrame.from_records(records)
