"""Row ordering: comparators and the multi-key ordering engine."""

from .comparators import BUILTIN_SORT_TYPES, resolve_comparator
from .order import RowOrderingEngine, default_order_by_fn, order_rows

__all__ = [
    "BUILTIN_SORT_TYPES",
    "resolve_comparator",
    "RowOrderingEngine",
    "default_order_by_fn",
    "order_rows",
]
