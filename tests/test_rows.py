"""Tests for Row construction from records and DataFrames."""

import numpy as np
import pandas as pd
import pytest

from tree_sortby.core.columns import ColumnDescriptor, columns_from_dataframe
from tree_sortby.core.rows import (
    Row,
    iter_rows,
    rows_from_dataframe,
    rows_from_records,
    rows_to_dataframe,
)


class TestRowsFromRecords:
    def test_flat(self, columns):
        rows = rows_from_records([{"name": "a", "score": 1, "age": 2}], columns)
        assert len(rows) == 1
        assert rows[0].values == {"name": "a", "score": 1, "age": 2}
        assert rows[0].index == 0
        assert rows[0].sub_rows == ()

    def test_nested(self, columns):
        records = [
            {"name": "p", "score": 1, "age": 1, "subRows": [
                {"name": "c1", "score": 2, "age": 1},
                {"name": "c2", "score": 3, "age": 1},
            ]},
        ]
        rows = rows_from_records(records, columns)
        assert [r.values["name"] for r in rows[0].sub_rows] == ["c1", "c2"]
        assert rows[0].size == 3

    def test_custom_sub_rows_key(self):
        cols = (ColumnDescriptor(id="n"),)
        rows = rows_from_records([{"n": 1, "children": [{"n": 2}]}], cols, sub_rows_key="children")
        assert rows[0].sub_rows[0].values == {"n": 2}

    def test_accessor_key_and_callable(self):
        cols = (
            ColumnDescriptor(id="label", accessor="raw_label"),
            ColumnDescriptor(id="double", accessor=lambda r: r["v"] * 2),
        )
        rows = rows_from_records([{"raw_label": "x", "v": 3}], cols)
        assert rows[0].values == {"label": "x", "double": 6}

    def test_missing_key_is_none(self):
        rows = rows_from_records([{}], (ColumnDescriptor(id="n"),))
        assert rows[0].values == {"n": None}


class TestRowsFromDataFrame:
    def test_builds_one_row_per_record(self, people_df):
        rows = rows_from_dataframe(people_df)
        assert len(rows) == 4
        assert [r.original for r in rows] == ["r0", "r1", "r2", "r3"]
        assert rows[0].values["name"] == "item10"

    def test_numpy_scalars_converted(self, people_df):
        rows = rows_from_dataframe(people_df)
        assert type(rows[0].values["score"]) is float

    def test_timestamps_kept(self, people_df):
        rows = rows_from_dataframe(people_df)
        assert isinstance(rows[0].values["joined"], pd.Timestamp)

    def test_rejects_non_dataframe(self):
        with pytest.raises(TypeError, match="DataFrame"):
            rows_from_dataframe([{"a": 1}])


class TestColumnsFromDataFrame:
    def test_sort_types_from_dtypes(self, people_df):
        cols = {c.id: c for c in columns_from_dataframe(people_df)}
        assert cols["name"].sort_type is None
        assert cols["score"].sort_type == "basic"
        assert cols["joined"].sort_type == "datetime"

    def test_overrides(self, people_df):
        cols = {c.id: c for c in columns_from_dataframe(people_df, score={"sort_desc_first": True})}
        assert cols["score"].sort_desc_first is True

    def test_unknown_override_raises(self, people_df):
        with pytest.raises(KeyError, match="unknown"):
            columns_from_dataframe(people_df, nope={"sort_inverted": True})

    def test_bool_column_uses_default(self):
        df = pd.DataFrame({"flag": np.array([True, False])})
        (col,) = columns_from_dataframe(df)
        assert col.sort_type is None


class TestFlatten:
    def test_iter_rows_depth_first(self, tree_rows):
        order = [(depth, row.values["name"]) for depth, row in iter_rows(tree_rows)]
        assert order == [
            (0, "p2"), (1, "c3"), (1, "c1"), (1, "c2"),
            (0, "p1"), (1, "c9"), (1, "c5"),
        ]

    def test_rows_to_dataframe(self, tree_rows):
        df = rows_to_dataframe(tree_rows)
        assert df["name"].tolist() == ["p2", "c3", "c1", "c2", "p1", "c9", "c5"]
        assert df["depth"].tolist() == [0, 1, 1, 1, 0, 1, 1]

    def test_with_sub_rows_is_new_row(self):
        row = Row(values={"n": 1}, sub_rows=(Row(values={"n": 2}),))
        new = row.with_sub_rows([])
        assert new is not row
        assert new.values is row.values
        assert row.sub_rows != ()
