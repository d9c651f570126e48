"""SortCriterion: one active (column, direction) sort key.

A criteria list is a plain tuple of SortCriterion. Position is priority:
index 0 is the primary key. Immutable: every transition builds a new tuple.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable


@dataclass(frozen=True)
class SortCriterion:
    """A single sort key: which column, and whether it sorts descending."""

    id: str
    desc: bool = False

    def flipped(self) -> SortCriterion:
        return SortCriterion(id=self.id, desc=not self.desc)


def find_criterion(sort_by: tuple[SortCriterion, ...], column_id: str) -> SortCriterion | None:
    """Return the criterion for column_id, or None if the column is not sorted."""
    for criterion in sort_by:
        if criterion.id == column_id:
            return criterion
    return None


def criterion_index(sort_by: tuple[SortCriterion, ...], column_id: str) -> int:
    """Return the priority index of column_id, or -1 if absent."""
    for i, criterion in enumerate(sort_by):
        if criterion.id == column_id:
            return i
    return -1


def normalize_sort_by(items: Iterable[Any]) -> tuple[SortCriterion, ...]:
    """Coerce user input into a validated criteria tuple.

    Accepts SortCriterion instances, ``(id, desc)`` pairs, or
    ``{"id": ..., "desc": ...}`` dicts. Column ids must be unique.
    """
    result: list[SortCriterion] = []
    for item in items:
        if isinstance(item, SortCriterion):
            criterion = item
        elif isinstance(item, dict):
            if "id" not in item:
                raise ValueError(f"Sort criterion dict needs an 'id' key, got {item!r}.")
            criterion = SortCriterion(id=item["id"], desc=bool(item.get("desc", False)))
        elif isinstance(item, (tuple, list)) and len(item) == 2:
            criterion = SortCriterion(id=item[0], desc=bool(item[1]))
        else:
            raise TypeError(
                f"Cannot interpret {item!r} as a sort criterion. "
                "Use SortCriterion(id, desc), (id, desc) or {'id': id, 'desc': desc}."
            )
        result.append(criterion)

    ids = [c.id for c in result]
    if len(set(ids)) != len(ids):
        dupes = sorted({i for i in ids if ids.count(i) > 1}, key=str)
        raise ValueError(f"Sort criteria must have unique column ids. Duplicates: {dupes}")
    return tuple(result)
