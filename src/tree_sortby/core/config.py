"""SortConfig: immutable table-wide sorting options."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Callable, Mapping

from .columns import Comparator

# fn(rows, sort_fns, directions) -> ordered rows
OrderByFn = Callable[[list, list, list], list]


@dataclass(frozen=True)
class SortConfig:
    """Options that steer the reducer and the ordering engine.

    Passed explicitly to every call; never read from global state.
    """

    manual_sorting: bool = False
    disable_sorting: bool = False
    disable_multi_sort: bool = False
    disable_sort_remove: bool = False
    disable_multi_remove: bool = False
    order_by_fn: OrderByFn | None = None
    sort_types: Mapping[str, Comparator] = field(default_factory=dict)
    debug: bool = False

    def replace(self, **changes: Any) -> SortConfig:
        """Return a copy with the given options changed."""
        return replace(self, **changes)
