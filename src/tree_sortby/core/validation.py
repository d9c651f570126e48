"""Input validation with clear error messages for table integrators."""

from __future__ import annotations

import logging
from typing import Any, Sequence

from .columns import ColumnDescriptor
from .config import SortConfig

logger = logging.getLogger(__name__)

_BOOL_OPTIONS = (
    "manual_sorting",
    "disable_sorting",
    "disable_multi_sort",
    "disable_sort_remove",
    "disable_multi_remove",
    "debug",
)


def validate_columns(columns: Any) -> tuple[ColumnDescriptor, ...]:
    """Validate column descriptors and return them as a tuple.

    Column ids must be unique and ``sort_type`` must be a name or a callable.
    """
    if isinstance(columns, (str, bytes)) or not isinstance(columns, Sequence):
        raise TypeError(
            f"columns must be a sequence of ColumnDescriptor, "
            f"got {type(columns).__name__}."
        )
    columns = tuple(columns)
    for column in columns:
        if not isinstance(column, ColumnDescriptor):
            raise TypeError(
                f"Expected ColumnDescriptor, got {type(column).__name__}. "
                "Wrap column definitions with ColumnDescriptor(id=...)."
            )
        sort_type = column.sort_type
        if sort_type is not None and not isinstance(sort_type, str) and not callable(sort_type):
            raise TypeError(
                f"Column '{column.id}': sort_type must be a name or a callable, "
                f"got {type(sort_type).__name__}."
            )

    ids = [c.id for c in columns]
    if len(set(ids)) != len(ids):
        dupes = sorted({i for i in ids if ids.count(i) > 1}, key=str)
        raise ValueError(
            f"Column ids must be unique. Found duplicates: {dupes[:5]}"
            + (f" (and {len(dupes) - 5} more)" if len(dupes) > 5 else "")
        )
    return columns


def validate_config(config: Any) -> SortConfig:
    """Validate a SortConfig's option types and return it unchanged."""
    if not isinstance(config, SortConfig):
        raise TypeError(
            f"Expected a SortConfig, got {type(config).__name__}. "
            "Build one with SortConfig(disable_multi_sort=..., ...)."
        )
    for name in _BOOL_OPTIONS:
        value = getattr(config, name)
        if not isinstance(value, bool):
            raise TypeError(f"{name} must be a bool, got {type(value).__name__}.")
    if config.order_by_fn is not None and not callable(config.order_by_fn):
        raise TypeError("order_by_fn must be callable.")
    bad = [name for name, fn in config.sort_types.items() if not callable(fn)]
    if bad:
        raise TypeError(f"sort_types entries must be callable. Not callable: {bad}")
    return config


def check_stage_order(
    stages: Sequence[str],
    stage: str = "sort_by",
    after: str = "filters",
) -> bool:
    """Warn when the filtering stage runs after sorting.

    Sorting rows that are about to be filtered away is wasted work, so this
    is only a performance hint: it logs a warning and returns False instead
    of raising. Returns True when the order is fine.
    """
    stages = list(stages)
    if not stages:
        return True
    if stage not in stages:
        raise ValueError(
            f"Stage '{stage}' was not found in the stage list {stages}."
        )
    if after in stages and stages.index(after) > stages.index(stage):
        logger.warning(
            "'%s' should be placed before '%s' in the stage list for better performance "
            "(got %s).",
            after,
            stage,
            stages,
        )
        return False
    return True
