"""Data model: criteria, column descriptors, rows and config."""

from .columns import ColumnDescriptor
from .config import SortConfig
from .criteria import SortCriterion
from .rows import Row

__all__ = ["ColumnDescriptor", "SortConfig", "SortCriterion", "Row"]
