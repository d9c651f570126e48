"""Sort state: the toggle reducer and the tagged state container."""

from .reducer import SortAction, SortStatus, resolve_action, sort_status, toggle_sort_by
from .store import SORT_BY_CHANGE, SortState, SortUpdate

__all__ = [
    "SortAction",
    "SortStatus",
    "resolve_action",
    "sort_status",
    "toggle_sort_by",
    "SORT_BY_CHANGE",
    "SortState",
    "SortUpdate",
]
