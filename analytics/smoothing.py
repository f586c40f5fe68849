from __future__ import annotations

"""Smoothing utilities (EWMA by subject)."""

import pandas as pd


def ewma_by_subject(
    df: pd.DataFrame,
    value_col: str,
    span: int,
    group_cols: list[str] | None = None,
) -> pd.DataFrame:
    """Apply EWMA smoothing per group over test order.

    Groups by subject unless ``group_cols`` is given; pass [] to smooth
    the whole series. Returns a copy of df with a new column
    f"{value_col}_smooth" and rows sorted by test_idx.
    """
    group_cols = ["subject"] if group_cols is None else group_cols
    g = df.sort_values("test_idx").copy()
    if not group_cols:
        g[f"{value_col}_smooth"] = g[value_col].astype("float64").ewm(span=span).mean().astype("float32")
        return g
    # SeriesGroupBy.transform keeps g's row index
    smooth = g.groupby(group_cols, observed=True, sort=False)[value_col].transform(
        lambda s: s.astype("float64").ewm(span=span).mean()
    )
    g[f"{value_col}_smooth"] = smooth.astype("float32")
    return g
