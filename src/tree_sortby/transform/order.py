"""Row ordering engine: stable multi-key sort of a row forest."""

from __future__ import annotations

import logging
import time
from functools import cmp_to_key
from typing import Callable, Sequence

from ..core.columns import ColumnDescriptor, Comparator, find_column
from ..core.config import OrderByFn, SortConfig
from ..core.criteria import SortCriterion
from ..core.rows import Row
from .comparators import resolve_comparator

logger = logging.getLogger(__name__)

RowSortFn = Callable[[Row, Row], int]


def default_order_by_fn(
    rows: list[Row],
    sort_fns: list[RowSortFn],
    directions: list[bool],
) -> list[Row]:
    """Stable multi-key composition.

    ``sort_fns[0]`` is the primary key; later keys only break ties.
    ``directions[i]`` is True when key ``i`` sorts descending. Rows that
    tie on every key keep their input order.
    """
    def compare(row_a: Row, row_b: Row) -> int:
        for sort_fn, desc in zip(sort_fns, directions):
            result = sort_fn(row_a, row_b)
            if result:
                return -result if desc else result
        return 0

    return sorted(rows, key=cmp_to_key(compare))


def _row_sort_fn(comparator: Comparator, column_id: str, desc: bool) -> RowSortFn:
    def sort_fn(row_a: Row, row_b: Row) -> int:
        return comparator(row_a.values[column_id], row_b.values[column_id], desc)
    return sort_fn


def _order_level(
    rows: Sequence[Row],
    order_by_fn: OrderByFn,
    sort_fns: list[RowSortFn],
    directions: list[bool],
) -> tuple[Row, ...]:
    ordered = order_by_fn(list(rows), sort_fns, directions)
    return tuple(
        row.with_sub_rows(_order_level(row.sub_rows, order_by_fn, sort_fns, directions))
        if row.sub_rows
        else row
        for row in ordered
    )


def order_rows(
    rows: Sequence[Row],
    sort_by: Sequence[SortCriterion],
    columns: Sequence[ColumnDescriptor],
    config: SortConfig = SortConfig(),
) -> Sequence[Row]:
    """Return ``rows`` ordered by ``sort_by``, sub-rows included.

    Parameters
    ----------
    rows : the row forest. Not modified.
    sort_by : active criteria, highest priority first.
    columns : descriptors for every column referenced by ``sort_by``.
    config : manual_sorting, order_by_fn, sort_types and debug are used.

    Returns
    -------
    ``rows`` itself when sorting is manual or there are no criteria,
    otherwise a new tuple of rows. Each row is positioned by its own
    values; its sub-rows are ordered independently with the same criteria.
    """
    if config.manual_sorting or not sort_by:
        return rows

    sort_fns: list[RowSortFn] = []
    directions: list[bool] = []
    for criterion in sort_by:
        column = find_column(columns, criterion.id)
        comparator = resolve_comparator(column.sort_type, config.sort_types)
        # Inverted columns hand the comparator the opposite direction
        desc = criterion.desc != column.sort_inverted
        sort_fns.append(_row_sort_fn(comparator, criterion.id, desc))
        directions.append(desc)

    order_by_fn = config.order_by_fn or default_order_by_fn

    if not config.debug:
        return _order_level(rows, order_by_fn, sort_fns, directions)

    start = time.perf_counter()
    result = _order_level(rows, order_by_fn, sort_fns, directions)
    logger.debug(
        "order_rows: %d top-level rows by %s in %.3f ms",
        len(result),
        [c.id for c in sort_by],
        (time.perf_counter() - start) * 1000,
    )
    return result


class RowOrderingEngine:
    """Memoizing front end for :func:`order_rows`.

    The cache key is the identity of ``rows``, ``columns`` and ``config``
    plus the value of ``sort_by``, so callers must replace (not mutate)
    those inputs to get a fresh ordering. Oldest entries are evicted first.
    """

    def __init__(self, max_entries: int = 8) -> None:
        if max_entries < 1:
            raise ValueError(f"max_entries must be at least 1, got {max_entries}.")
        self._max_entries = max_entries
        # {key: (rows, columns, config, result)}; inputs kept so ids stay valid
        self._cache: dict[tuple, tuple] = {}
        self.hits = 0
        self.misses = 0

    def order(
        self,
        rows: Sequence[Row],
        sort_by: Sequence[SortCriterion],
        columns: Sequence[ColumnDescriptor],
        config: SortConfig = SortConfig(),
    ) -> Sequence[Row]:
        sort_by = tuple(sort_by)
        key = (id(rows), sort_by, id(columns), id(config))
        entry = self._cache.get(key)
        if entry is not None and entry[0] is rows and entry[1] is columns and entry[2] is config:
            self.hits += 1
            return entry[3]

        self.misses += 1
        result = order_rows(rows, sort_by, columns, config)
        self._cache[key] = (rows, columns, config, result)
        if len(self._cache) > self._max_entries:
            del self._cache[next(iter(self._cache))]
        return result

    def clear(self) -> None:
        self._cache.clear()

    def __len__(self) -> int:
        return len(self._cache)
