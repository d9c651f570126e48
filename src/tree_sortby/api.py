"""SortableTable: the main user-facing API."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Sequence

import pandas as pd

from .core.columns import ColumnDescriptor, can_sort, columns_from_dataframe, find_column
from .core.config import SortConfig
from .core.criteria import SortCriterion, normalize_sort_by
from .core.rows import Row, rows_from_dataframe, rows_to_dataframe
from .core.validation import check_stage_order, validate_columns, validate_config
from .state.reducer import sort_status, toggle_sort_by
from .state.store import SORT_BY_CHANGE, SortState, SortUpdate
from .transform.order import RowOrderingEngine


@dataclass(frozen=True)
class ColumnSortState:
    """What a header needs to render one column's sort control."""

    id: str
    can_sort: bool
    sorted: SortCriterion | None
    sorted_index: int
    sorted_desc: bool | None


def _shift_pressed(event: Any) -> bool:
    if event is None:
        return False
    if isinstance(event, dict):
        return bool(event.get("shift_key") or event.get("shiftKey"))
    return bool(getattr(event, "shift_key", False) or getattr(event, "shiftKey", False))


_TOGGLE_KEYS = ("Enter", " ", "Spacebar")


def _event_key(event: Any) -> str | None:
    if event is None:
        return None
    if isinstance(event, dict):
        return event.get("key")
    return getattr(event, "key", None)


class SortableTable:
    """Sort controller for a row forest.

    Usage::

        import tree_sortby as ts

        table = ts.SortableTable.from_dataframe(df)
        table.toggle_sort_by("score")               # asc
        table.toggle_sort_by("name", multi=True)    # add secondary key
        table.rows                                  # ordered rows
        table.state.param.watch(lambda e: ..., "sort_by")
    """

    TOGGLE_TITLE = "Toggle SortBy"

    def __init__(
        self,
        columns: Sequence[ColumnDescriptor],
        rows: Sequence[Row] = (),
        config: SortConfig | None = None,
        state: SortState | None = None,
        stages: Sequence[str] | None = None,
    ) -> None:
        self._columns = validate_columns(columns)
        self._config = validate_config(config if config is not None else SortConfig())
        self._rows: tuple[Row, ...] = tuple(rows)
        self.state = state if state is not None else SortState()
        self._engine = RowOrderingEngine()

        if stages is not None:
            check_stage_order(stages)

        # Criteria may be preloaded on a shared state; unknown ids fail here
        for criterion in self.state.criteria:
            find_column(self._columns, criterion.id)

    @classmethod
    def from_dataframe(
        cls,
        df: pd.DataFrame,
        config: SortConfig | None = None,
        **column_overrides: dict[str, Any],
    ) -> SortableTable:
        """Build a table with one column per DataFrame column."""
        columns = columns_from_dataframe(df, **column_overrides)
        return cls(columns, rows_from_dataframe(df, columns), config=config)

    # --- Inputs ---

    @property
    def columns(self) -> tuple[ColumnDescriptor, ...]:
        return self._columns

    @property
    def config(self) -> SortConfig:
        return self._config

    def set_rows(self, rows: Iterable[Row]) -> SortableTable:
        """Replace the unsorted rows."""
        self._rows = tuple(rows)
        return self

    def set_config(self, config: SortConfig) -> SortableTable:
        self._config = validate_config(config)
        return self

    # --- Sort state ---

    @property
    def sort_by(self) -> tuple[SortCriterion, ...]:
        return self.state.criteria

    def toggle_sort_by(
        self,
        column_id: str,
        desc: bool | None = None,
        multi: bool = False,
    ) -> SortUpdate:
        """Toggle sorting on a column and commit the result.

        Raises KeyError for unknown columns and ValueError for columns
        that cannot sort.
        """
        column = find_column(self._columns, column_id)
        if not can_sort(column, self._config.disable_sorting):
            raise ValueError(f"Column '{column_id}' cannot be sorted.")
        return self.state.set_state(
            lambda old: toggle_sort_by(
                old, column_id, desc, multi, columns=self._columns, config=self._config
            ),
            SORT_BY_CHANGE,
        )

    def set_sort_by(self, items: Iterable[Any]) -> SortUpdate:
        """Replace all criteria at once (ids must be known columns)."""
        criteria = normalize_sort_by(items)
        for criterion in criteria:
            find_column(self._columns, criterion.id)
        return self.state.set_state(lambda old: criteria, SORT_BY_CHANGE)

    def clear_sort_by(self) -> SortUpdate:
        return self.set_sort_by(())

    # --- Column status ---

    def column_status(self, column_id: str) -> ColumnSortState:
        column = find_column(self._columns, column_id)
        status = sort_status(self.sort_by, column_id)
        return ColumnSortState(
            id=column.id,
            can_sort=can_sort(column, self._config.disable_sorting),
            sorted=status.sorted,
            sorted_index=status.sorted_index,
            sorted_desc=status.sorted_desc,
        )

    def column_states(self) -> list[ColumnSortState]:
        return [self.column_status(c.id) for c in self._columns]

    def get_sort_by_toggle_props(
        self,
        column_id: str,
        props: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Attributes for a column's toggle control.

        ``on_click(event)`` toggles the column; shift-click (``event.shift_key``)
        adds it as an extra key unless multi-sort is disabled.
        ``on_key_down(event)`` does the same for Enter or Space and ignores
        other keys (returns None). User ``props`` override the defaults;
        ``style`` dicts are merged.
        """
        sortable = self.column_status(column_id).can_sort
        on_click: Callable[[Any], SortUpdate] | None = None
        on_key_down: Callable[[Any], SortUpdate | None] | None = None
        if sortable:
            def on_click(event: Any = None) -> SortUpdate:
                multi = not self._config.disable_multi_sort and _shift_pressed(event)
                return self.toggle_sort_by(column_id, None, multi)

            def on_key_down(event: Any) -> SortUpdate | None:
                if _event_key(event) not in _TOGGLE_KEYS:
                    return None
                return on_click(event)

        merged: dict[str, Any] = {
            "on_click": on_click,
            "on_key_down": on_key_down,
            "tab_index": 0 if sortable else None,
            "style": {"cursor": "pointer" if sortable else None},
            "title": self.TOGGLE_TITLE,
        }
        for key, value in (props or {}).items():
            if key == "style" and isinstance(value, dict):
                merged["style"] = {**merged["style"], **value}
            else:
                merged[key] = value
        return merged

    # --- Outputs ---

    @property
    def pre_sorted_rows(self) -> tuple[Row, ...]:
        """Rows in their original order."""
        return self._rows

    @property
    def rows(self) -> Sequence[Row]:
        """Rows ordered by the active criteria (memoized)."""
        return self._engine.order(self._rows, self.sort_by, self._columns, self._config)

    def to_dataframe(self) -> pd.DataFrame:
        """Ordered rows flattened depth-first into a DataFrame."""
        return rows_to_dataframe(self.rows)

    def __repr__(self) -> str:
        return (
            f"SortableTable(columns={len(self._columns)}, "
            f"rows={len(self._rows)}, sort_by={[(c.id, c.desc) for c in self.sort_by]})"
        )
