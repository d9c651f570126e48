"""Sort state reducer: toggle requests -> next criteria tuple.

Pure functions only. Every call returns a new tuple; the input is never
modified, so downstream caches can key on identity.

For a column with ``sort_desc_first=False`` and removal enabled, repeated
single-sort toggles cycle ``() -> asc -> desc -> ()``. With
``sort_desc_first=True`` the cycle is ``() -> desc -> asc -> ()``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Sequence

from ..core.columns import ColumnDescriptor, find_column
from ..core.config import SortConfig
from ..core.criteria import SortCriterion, criterion_index, find_criterion


class SortAction(str, Enum):
    REPLACE = "replace"
    ADD = "add"
    TOGGLE = "toggle"
    REMOVE = "remove"


@dataclass(frozen=True)
class SortStatus:
    """Derived, read-only sort status of one column."""

    sorted: SortCriterion | None
    sorted_index: int
    sorted_desc: bool | None

    @property
    def is_sorted(self) -> bool:
        return self.sorted is not None


def resolve_action(
    sort_by: tuple[SortCriterion, ...],
    column: ColumnDescriptor,
    desc: bool | None = None,
    multi: bool = False,
    config: SortConfig = SortConfig(),
) -> SortAction:
    """Classify a toggle request into exactly one SortAction."""
    index = criterion_index(sort_by, column.id)
    existing = sort_by[index] if index >= 0 else None

    if not config.disable_multi_sort and multi:
        action = SortAction.TOGGLE if existing is not None else SortAction.ADD
    elif existing is not None and index == len(sort_by) - 1:
        action = SortAction.TOGGLE
    else:
        # Single mode restarts from this column unless it is the last key
        action = SortAction.REPLACE

    if (
        action is SortAction.TOGGLE
        and desc is None
        and not config.disable_sort_remove
        and (not multi or not config.disable_multi_remove)
        and existing.desc != column.sort_desc_first
    ):
        action = SortAction.REMOVE
    return action


def toggle_sort_by(
    sort_by: Sequence[SortCriterion],
    column_id: str,
    desc: bool | None = None,
    multi: bool = False,
    *,
    columns: Sequence[ColumnDescriptor],
    config: SortConfig = SortConfig(),
) -> tuple[SortCriterion, ...]:
    """Compute the next criteria tuple for a toggle on ``column_id``.

    Parameters
    ----------
    sort_by : current criteria, highest priority first.
    column_id : column being toggled. Raises KeyError if not in ``columns``.
    desc : explicit direction. None infers it from the current state.
    multi : add/toggle alongside the existing criteria (e.g. shift-click).
    columns : column descriptors, used for ``sort_desc_first``.
    config : table options (disable_multi_sort, disable_sort_remove, ...).

    Returns
    -------
    New tuple of SortCriterion.
    """
    sort_by = tuple(sort_by)
    column = find_column(columns, column_id)
    action = resolve_action(sort_by, column, desc, multi, config)
    first_desc = column.sort_desc_first if desc is None else desc

    if action is SortAction.REPLACE:
        return (SortCriterion(id=column_id, desc=first_desc),)

    if action is SortAction.ADD:
        return sort_by + (SortCriterion(id=column_id, desc=first_desc),)

    if action is SortAction.TOGGLE:
        return tuple(
            (c.flipped() if desc is None else SortCriterion(id=c.id, desc=desc))
            if c.id == column_id
            else c
            for c in sort_by
        )

    return tuple(c for c in sort_by if c.id != column_id)


def sort_status(sort_by: Sequence[SortCriterion], column_id: str) -> SortStatus:
    """Return sorted / sorted_index / sorted_desc for one column."""
    sort_by = tuple(sort_by)
    criterion = find_criterion(sort_by, column_id)
    if criterion is None:
        return SortStatus(sorted=None, sorted_index=-1, sorted_desc=None)
    return SortStatus(
        sorted=criterion,
        sorted_index=criterion_index(sort_by, column_id),
        sorted_desc=criterion.desc,
    )
