"""Built-in comparators and the comparator lookup chain.

A comparator is ``fn(a, b, desc) -> int`` (negative, zero, positive). The
built-ins ignore ``desc``: direction is applied by the order-by composer.
"""

from __future__ import annotations

import re
from typing import Any, Mapping

import numpy as np
import pandas as pd

from ..core.columns import Comparator

_DIGIT_SPLIT = re.compile(r"([0-9]+)")


def _is_missing(value: Any) -> bool:
    if value is None:
        return True
    try:
        return bool(pd.isna(value))
    except (TypeError, ValueError):
        # array-likes: not a scalar missing marker
        return False


def _compare_basic(a: Any, b: Any) -> int:
    if a == b:
        return 0
    return 1 if a > b else -1


def _compare_missing(a: Any, b: Any) -> int | None:
    """Missing values sort first. None when neither side is missing."""
    a_missing, b_missing = _is_missing(a), _is_missing(b)
    if a_missing or b_missing:
        return int(b_missing) - int(a_missing)
    return None


def _as_text(value: Any) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, (bool, np.bool_)):
        return ""
    if isinstance(value, (int, np.integer)):
        return str(value)
    if isinstance(value, (float, np.floating)):
        # NaN and +/-inf compare as empty text
        return str(value) if np.isfinite(value) else ""
    return ""


def _is_digit_chunk(chunk: str) -> bool:
    # same rule as the split: only ASCII 0-9 runs are numeric
    return _DIGIT_SPLIT.fullmatch(chunk) is not None


def alphanumeric(a: Any, b: Any, desc: bool = False) -> int:
    """Natural, case-insensitive comparison of mixed text/number values.

    Values are split into digit and non-digit chunks. Digit chunks compare
    numerically, text chunks case-insensitively; a text chunk sorts before
    a digit chunk. Non-text values (and NaN/inf) compare as empty strings.
    """
    a_parts = [p for p in _DIGIT_SPLIT.split(_as_text(a)) if p]
    b_parts = [p for p in _DIGIT_SPLIT.split(_as_text(b)) if p]

    for aa, bb in zip(a_parts, b_parts):
        a_num, b_num = _is_digit_chunk(aa), _is_digit_chunk(bb)
        if a_num and b_num:
            result = _compare_basic(int(aa), int(bb))
        elif not a_num and not b_num:
            result = _compare_basic(aa.casefold(), bb.casefold())
        else:
            result = 1 if a_num else -1
        if result:
            return result
    return _compare_basic(len(a_parts), len(b_parts))


def datetime(a: Any, b: Any, desc: bool = False) -> int:
    """Compare datetime-like values (datetime, str, np.datetime64, Timestamp)."""
    missing = _compare_missing(a, b)
    if missing is not None:
        return missing
    return _compare_basic(pd.Timestamp(a), pd.Timestamp(b))


def basic(a: Any, b: Any, desc: bool = False) -> int:
    """Plain ``==`` / ``>`` comparison. Missing values sort first."""
    missing = _compare_missing(a, b)
    if missing is not None:
        return missing
    return _compare_basic(a, b)


BUILTIN_SORT_TYPES: dict[str, Comparator] = {
    "alphanumeric": alphanumeric,
    "datetime": datetime,
    "basic": basic,
}

DEFAULT_SORT_TYPE = "alphanumeric"


def resolve_comparator(
    sort_type: str | Comparator | None,
    user_sort_types: Mapping[str, Comparator] | None = None,
) -> Comparator:
    """Pick the comparator for a column.

    Lookup order: the sort_type itself if callable, the user registry,
    the built-in registry, then the alphanumeric default.
    """
    if callable(sort_type):
        return sort_type
    if sort_type is not None:
        if user_sort_types and sort_type in user_sort_types:
            return user_sort_types[sort_type]
        if sort_type in BUILTIN_SORT_TYPES:
            return BUILTIN_SORT_TYPES[sort_type]
    return BUILTIN_SORT_TYPES[DEFAULT_SORT_TYPE]
