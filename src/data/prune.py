# src/data/prune.py
from __future__ import annotations
from numbers import Integral, Real
from typing import Hashable, Optional

import numpy as np
import pandas as pd
from pandas.api.types import is_numeric_dtype

from src.errors import InvalidArgument


def _check_args(df: pd.DataFrame, leading_drop_count, missing_fraction_threshold) -> None:
    if not isinstance(df, pd.DataFrame):
        raise InvalidArgument(f"Expected a pandas DataFrame, got {type(df).__name__}")
    if len(df) == 0:
        raise InvalidArgument("Dataset has zero rows; missing fraction is undefined.")
    if isinstance(leading_drop_count, bool) or not isinstance(leading_drop_count, Integral):
        raise InvalidArgument(f"leading_drop_count must be an integer, got {leading_drop_count!r}")
    if leading_drop_count < 0:
        raise InvalidArgument(f"leading_drop_count must be >= 0, got {leading_drop_count}")
    if leading_drop_count >= df.shape[1]:
        raise InvalidArgument(
            f"leading_drop_count={leading_drop_count} leaves no columns (dataset has {df.shape[1]})"
        )
    if isinstance(missing_fraction_threshold, bool) or not isinstance(missing_fraction_threshold, Real):
        raise InvalidArgument(f"missing_fraction_threshold must be a number, got {missing_fraction_threshold!r}")
    if not 0.0 < float(missing_fraction_threshold) < 1.0:
        raise InvalidArgument(
            f"missing_fraction_threshold must be strictly between 0 and 1, got {missing_fraction_threshold}"
        )


def _label_position(df: pd.DataFrame, label_column: Optional[Hashable]) -> int:
    if label_column is None:
        return df.shape[1] - 1
    positions = np.flatnonzero(df.columns == label_column)
    if len(positions) != 1:
        raise InvalidArgument(f"Label column {label_column!r} must appear exactly once, found {len(positions)}")
    return int(positions[0])


def count_missing(col: pd.Series) -> int:
    """Rows holding the missing marker (NaN / None)."""
    return int(col.isna().sum())


def count_blank(col: pd.Series) -> int:
    """Rows holding the empty string. Numeric columns never contain any."""
    if is_numeric_dtype(col):
        return 0
    return int(col.astype(object).eq("").sum())


def sparse_column_report(
    df: pd.DataFrame,
    missing_fraction_threshold: float,
    label_column: Optional[Hashable] = None,
) -> pd.DataFrame:
    """Per-column missing/blank counts and whether the column is too sparse.

    The label column is reported but never flagged.
    """
    _check_args(df, 0, missing_fraction_threshold)
    label_pos = _label_position(df, label_column)
    n_rows = len(df)

    records = []
    for pos in range(df.shape[1]):
        col = df.iloc[:, pos]
        missing = count_missing(col)
        blank = count_blank(col)
        missing_frac, blank_frac = missing / n_rows, blank / n_rows
        # checked separately, never summed
        too_sparse = missing_frac > missing_fraction_threshold or blank_frac > missing_fraction_threshold
        records.append({
            "column": df.columns[pos],
            "missing": missing,
            "blank": blank,
            "missing_frac": missing_frac,
            "blank_frac": blank_frac,
            "dropped": bool(too_sparse and pos != label_pos),
        })
    return pd.DataFrame.from_records(records, columns=[
        "column", "missing", "blank", "missing_frac", "blank_frac", "dropped",
    ])


def prune_columns(
    df: pd.DataFrame,
    leading_drop_count: int,
    missing_fraction_threshold: float,
    label_column: Optional[Hashable] = None,
) -> pd.DataFrame:
    """Drop leading metadata columns and any column that is too sparse.

    The first ``leading_drop_count`` columns are removed by position. Every
    other column except the label column (the last one unless
    ``label_column`` names it) is removed when its count of missing values,
    or separately its count of blank strings, is a fraction of the rows
    strictly greater than ``missing_fraction_threshold``.

    Returns a new frame; rows and the relative order of the surviving
    columns are unchanged.
    """
    _check_args(df, leading_drop_count, missing_fraction_threshold)
    label_pos = _label_position(df, label_column)
    if label_pos < leading_drop_count:
        raise InvalidArgument(
            f"Label column at position {label_pos} falls inside the first {leading_drop_count} columns"
        )

    trimmed = df.iloc[:, leading_drop_count:]
    report = sparse_column_report(trimmed, missing_fraction_threshold, label_column=label_column)

    keep = ~report["dropped"].to_numpy()
    return trimmed.iloc[:, np.flatnonzero(keep)].copy()
