"""Shared test fixtures for tree-sortby."""

import pandas as pd
import pytest

from tree_sortby.core.columns import ColumnDescriptor
from tree_sortby.core.rows import Row


@pytest.fixture
def columns():
    """Three sortable columns: name (alphanumeric), score (basic), age (desc-first)."""
    return (
        ColumnDescriptor(id="name"),
        ColumnDescriptor(id="score", sort_type="basic"),
        ColumnDescriptor(id="age", sort_type="basic", sort_desc_first=True),
    )


@pytest.fixture
def flat_rows():
    """Five rows with duplicate scores at different positions."""
    data = [
        {"name": "delta", "score": 2, "age": 40},
        {"name": "alpha", "score": 1, "age": 30},
        {"name": "echo", "score": 2, "age": 30},
        {"name": "bravo", "score": 1, "age": 40},
        {"name": "charlie", "score": 2, "age": 20},
    ]
    return tuple(Row(values=d, index=i) for i, d in enumerate(data))


@pytest.fixture
def tree_rows():
    """Two-level tree where parent and child orders diverge."""
    return (
        Row(
            values={"name": "p2", "score": 2, "age": 1},
            index=0,
            sub_rows=(
                Row(values={"name": "c3", "score": 3, "age": 1}, index=0),
                Row(values={"name": "c1", "score": 1, "age": 1}, index=1),
                Row(values={"name": "c2", "score": 2, "age": 1}, index=2),
            ),
        ),
        Row(
            values={"name": "p1", "score": 1, "age": 1},
            index=1,
            sub_rows=(
                Row(values={"name": "c9", "score": 9, "age": 1}, index=0),
                Row(values={"name": "c5", "score": 5, "age": 1}, index=1),
            ),
        ),
    )


@pytest.fixture
def people_df():
    """Small mixed-dtype DataFrame."""
    return pd.DataFrame(
        {
            "name": ["item10", "item2", "Item1", "item2"],
            "score": [3.5, 1.0, 2.0, 1.0],
            "joined": pd.to_datetime(["2021-03-01", "2020-01-15", "2022-07-30", "2019-05-05"]),
        },
        index=["r0", "r1", "r2", "r3"],
    )
