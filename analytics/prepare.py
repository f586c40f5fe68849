from __future__ import annotations

"""Turn validated test records into a typed DataFrame."""

from typing import Iterable

import pandas as pd

from lgsstats.records import TestResultRecord

DTYPES = {
    "id": "string",
    "owner_id": "string",
    "subject": "string",
    # timezone-aware UTC timestamps
    "created_at": pd.DatetimeTZDtype(tz="UTC"),
    "correct": "Int64",
    "wrong": "Int64",
    "empty": "Int64",
}


def _empty_df() -> pd.DataFrame:
    return pd.DataFrame({k: pd.Series(dtype=v) for k, v in DTYPES.items()})


def results_frame(records: Iterable[TestResultRecord]) -> pd.DataFrame:
    """Build a DataFrame of test results with consistent dtypes.

    - One row per record; counts as nullable Int64.
    - Sorted stably by created_at (missing timestamps first).
    - Adds a stable test index 'test_idx'.
    """
    rows = [
        {
            "id": r.id,
            "owner_id": r.owner_id,
            "subject": r.subject,
            "created_at": r.created_at,
            "correct": r.score.correct,
            "wrong": r.score.wrong,
            "empty": r.score.empty,
        }
        for r in records
    ]
    df = pd.DataFrame(rows) if rows else _empty_df()
    for col, dt in DTYPES.items():
        df[col] = df[col].astype(dt)
    df = df.sort_values("created_at", kind="stable", na_position="first").reset_index(drop=True)
    df["test_idx"] = range(len(df))
    return df
