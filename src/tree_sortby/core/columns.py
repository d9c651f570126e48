"""ColumnDescriptor: read-only per-column sorting options."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Sequence

import pandas as pd

Comparator = Callable[[Any, Any, bool], int]


@dataclass(frozen=True)
class ColumnDescriptor:
    """Sorting-related definition of one table column.

    Attributes
    ----------
    id : column identifier, the key into ``Row.values``.
    accessor : record key or callable used when building rows. Defaults to ``id``.
    sort_type : registry name or comparator ``fn(a, b, desc) -> int``.
    sort_desc_first : first activation sorts descending; anchors the removal cycle.
    disable_sorting : per-column override of the table-wide default (None = inherit).
    sort_inverted : flip the direction flag handed to the comparator.
    """

    id: str
    accessor: str | Callable[[Any], Any] | None = None
    sort_type: str | Comparator | None = None
    sort_desc_first: bool = False
    disable_sorting: bool | None = None
    sort_inverted: bool = False

    def read(self, record: Any) -> Any:
        """Extract this column's value from a raw record."""
        accessor = self.id if self.accessor is None else self.accessor
        if callable(accessor):
            return accessor(record)
        return record.get(accessor) if isinstance(record, dict) else record[accessor]


def find_column(columns: Sequence[ColumnDescriptor], column_id: str) -> ColumnDescriptor:
    for column in columns:
        if column.id == column_id:
            return column
    raise KeyError(
        f"Column '{column_id}' is not defined. "
        f"Available: {[c.id for c in columns]}"
    )


def can_sort(column: ColumnDescriptor, disable_sorting: bool = False) -> bool:
    """Column flag wins, then the table-wide default, then sortable."""
    if column.disable_sorting is not None:
        return not column.disable_sorting
    return not disable_sorting


def columns_from_dataframe(
    df: pd.DataFrame,
    **overrides: dict[str, Any],
) -> tuple[ColumnDescriptor, ...]:
    """Build one descriptor per DataFrame column.

    The comparator is picked from the dtype: datetimes use ``"datetime"``,
    numbers ``"basic"``, everything else the alphanumeric default.
    Keyword arguments map a column name to descriptor field overrides,
    e.g. ``columns_from_dataframe(df, score={"sort_desc_first": True})``.
    """
    unknown = set(overrides) - {str(c) for c in df.columns}
    if unknown:
        raise KeyError(
            f"Overrides given for unknown columns: {sorted(unknown)}. "
            f"Available: {[str(c) for c in df.columns]}"
        )

    columns = []
    for name in df.columns:
        series = df[name]
        if pd.api.types.is_datetime64_any_dtype(series):
            sort_type = "datetime"
        elif pd.api.types.is_numeric_dtype(series) and not pd.api.types.is_bool_dtype(series):
            sort_type = "basic"
        else:
            sort_type = None
        fields: dict[str, Any] = {"id": str(name), "accessor": name, "sort_type": sort_type}
        fields.update(overrides.get(str(name), {}))
        columns.append(ColumnDescriptor(**fields))
    return tuple(columns)
