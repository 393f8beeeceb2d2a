from __future__ import annotations

import numpy as np
import pandas as pd
import pytest

from src.data.prune import count_blank, prune_columns, sparse_column_report
from src.errors import InvalidArgument


def _frame(n=10, missing=0, blank=0):
    num = [np.nan] * missing + list(range(n - missing))
    txt = [""] * blank + ["x"] * (n - blank)
    return pd.DataFrame({
        "id": range(n),
        "ts": ["t"] * n,
        "num": num,
        "txt": txt,
        "full": np.arange(n, dtype=float),
        "label": ["A", "B"] * (n // 2),
    })


def test_leading_columns_removed_by_position():
    out = prune_columns(_frame(), 2, 0.5)
    assert list(out.columns) == ["num", "txt", "full", "label"]


def test_threshold_boundary_keeps_equal_drops_greater():
    kept = prune_columns(_frame(missing=5), 0, 0.5)
    dropped = prune_columns(_frame(missing=6), 0, 0.5)
    assert "num" in kept.columns
    assert "num" not in dropped.columns


@pytest.mark.parametrize("threshold, count", [(0.57, 57), (0.29, 29), (0.58, 58)])
def test_threshold_boundary_with_inexact_product(threshold, count):
    kept = prune_columns(_frame(n=100, missing=count, blank=count), 0, threshold)
    assert list(kept.columns) == ["id", "ts", "num", "txt", "full", "label"]

    dropped = prune_columns(_frame(n=100, missing=count + 1, blank=count + 1), 0, threshold)
    assert list(dropped.columns) == ["id", "ts", "full", "label"]


def test_blank_strings_drop_text_column():
    df = _frame(blank=6)
    assert df["txt"].isna().sum() == 0
    out = prune_columns(df, 0, 0.5)
    assert "txt" not in out.columns
    assert "txt" in prune_columns(_frame(blank=5), 0, 0.5).columns


def test_missing_and_blank_counts_are_not_summed():
    df = pd.DataFrame({
        "mixed": [np.nan] * 4 + [""] * 4 + ["v"] * 2,
        "label": ["A"] * 10,
    })
    out = prune_columns(df, 0, 0.5)
    assert list(out.columns) == ["mixed", "label"]


def test_numeric_column_never_blank():
    assert count_blank(pd.Series([1.0, np.nan, 3.0])) == 0
    assert count_blank(pd.Series(["", "a", None])) == 1


def test_label_column_always_retained():
    df = _frame()
    df["label"] = [np.nan] * 9 + ["A"]
    out = prune_columns(df, 1, 0.1)
    assert out.columns[-1] == "label"
    assert out["label"].isna().sum() == 9


def test_named_label_column_retained():
    df = _frame()
    df["num"] = np.nan
    out = prune_columns(df, 0, 0.5, label_column="num")
    assert "num" in out.columns


def test_rows_and_order_preserved():
    df = _frame(missing=7)
    out = prune_columns(df, 1, 0.5)
    assert len(out) == len(df)
    assert list(out.columns) == ["ts", "txt", "full", "label"]
    assert out["full"].tolist() == df["full"].tolist()
    assert out.shape[1] <= df.shape[1] - 1


def test_input_not_modified():
    df = _frame(missing=8)
    before = df.copy()
    prune_columns(df, 2, 0.5)
    pd.testing.assert_frame_equal(df, before)


def test_pruning_is_idempotent():
    once = prune_columns(_frame(missing=7, blank=9), 1, 0.5)
    twice = prune_columns(once, 0, 0.5)
    pd.testing.assert_frame_equal(once, twice)


def test_duplicate_column_names_handled_by_position():
    df = pd.DataFrame([[1, np.nan, 2, "A"], [1, np.nan, 3, "B"]], columns=["a", "x", "x", "label"])
    out = prune_columns(df, 0, 0.5)
    assert list(out.columns) == ["a", "x", "label"]
    assert out.iloc[:, 1].tolist() == [2, 3]


@pytest.mark.parametrize("threshold", [0, 1, -0.2, 1.5, float("nan"), True, "0.5"])
def test_bad_threshold_rejected(threshold):
    with pytest.raises(InvalidArgument):
        prune_columns(_frame(), 0, threshold)


@pytest.mark.parametrize("leading", [6, 10, -1, 1.5])
def test_bad_leading_drop_rejected(leading):
    with pytest.raises(InvalidArgument):
        prune_columns(_frame(), leading, 0.5)


def test_empty_dataset_rejected():
    with pytest.raises(InvalidArgument):
        prune_columns(_frame().iloc[0:0], 0, 0.5)


def test_label_inside_leading_drop_rejected():
    with pytest.raises(InvalidArgument):
        prune_columns(_frame(), 2, 0.5, label_column="id")


def test_unknown_label_column_rejected():
    with pytest.raises(InvalidArgument):
        prune_columns(_frame(), 0, 0.5, label_column="nope")


def test_invalid_argument_is_a_value_error():
    with pytest.raises(ValueError):
        prune_columns(_frame(), 0, 2.0)


def test_sparse_column_report():
    rep = sparse_column_report(_frame(missing=6, blank=2), 0.5)
    row = rep.set_index("column").loc["num"]
    assert row["missing"] == 6
    assert row["missing_frac"] == pytest.approx(0.6)
    assert bool(row["dropped"])
    assert rep["dropped"].tolist() == [False, False, True, False, False, False]
