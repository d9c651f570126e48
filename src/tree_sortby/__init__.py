"""tree-sortby: multi-column sort state and stable ordering for row trees."""

from ._version import __version__
from .api import ColumnSortState, SortableTable
from .core import ColumnDescriptor, Row, SortConfig, SortCriterion
from .core.rows import rows_from_dataframe, rows_from_records, rows_to_dataframe
from .state import SORT_BY_CHANGE, SortAction, SortState, SortUpdate, toggle_sort_by
from .transform import BUILTIN_SORT_TYPES, RowOrderingEngine, order_rows


__all__ = [
    "__version__",
    "SortableTable",
    "ColumnSortState",
    "ColumnDescriptor",
    "Row",
    "SortConfig",
    "SortCriterion",
    "rows_from_dataframe",
    "rows_from_records",
    "rows_to_dataframe",
    "SORT_BY_CHANGE",
    "SortAction",
    "SortState",
    "SortUpdate",
    "toggle_sort_by",
    "BUILTIN_SORT_TYPES",
    "RowOrderingEngine",
    "order_rows",
]
