"""SortState: reactive container for the active criteria.

Each commit carries a notification tag so observers can tell a sort change
from other updates. Observation is up to the host: watch the ``sort_by``
parameter with ``param`` or register a plain callback with ``on_change``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

import param

from ..core.criteria import SortCriterion, normalize_sort_by

SORT_BY_CHANGE = "sortByChange"


@dataclass(frozen=True)
class SortUpdate:
    """A committed state transition, tagged with the action that caused it."""

    action: str
    previous: tuple[SortCriterion, ...]
    current: tuple[SortCriterion, ...]

    @property
    def changed(self) -> bool:
        return self.previous != self.current


SortUpdateCallback = Callable[[SortUpdate], Any]
Updater = Callable[[tuple[SortCriterion, ...]], tuple[SortCriterion, ...]]


class SortState(param.Parameterized):
    """Holds the active sort criteria and notifies observers on commit."""

    sort_by = param.List(default=[], doc="Active SortCriterion list, highest priority first")
    last_update = param.Parameter(default=None, allow_None=True, doc="Most recent SortUpdate")

    def __init__(self, sort_by=(), **params):
        super().__init__(sort_by=list(normalize_sort_by(sort_by)), **params)
        self._callbacks: list[SortUpdateCallback] = []

    @property
    def criteria(self) -> tuple[SortCriterion, ...]:
        return tuple(self.sort_by)

    def set_state(self, updater: Updater, action: str = SORT_BY_CHANGE) -> SortUpdate:
        """Apply ``updater(previous) -> current`` and notify observers once."""
        previous = self.criteria
        current = tuple(updater(previous))
        update = SortUpdate(action=action, previous=previous, current=current)
        # Both params in one batch so param watchers fire together
        self.param.update(sort_by=list(current), last_update=update)
        for cb in self._callbacks:
            cb(update)
        return update

    def on_change(self, callback: SortUpdateCallback) -> None:
        """Register a callback: fn(update)."""
        self._callbacks.append(callback)

    def __repr__(self) -> str:
        keys = ", ".join(f"{c.id}{' desc' if c.desc else ''}" for c in self.sort_by)
        return f"SortState([{keys}])"
