from __future__ import annotations

"""Metric computations for per-row analytics."""

import numpy as np
import pandas as pd

from lgsstats.scoring.score import HIGH_BAND_MIN, MEDIUM_BAND_MIN
from .config import AnalyticsConfig


def compute_metrics(df: pd.DataFrame, cfg: AnalyticsConfig) -> pd.DataFrame:
    """Compute totals, net, success rate and band.

    Returns a copy with added columns:
    - total, net, success_rate, band
    """
    out = df.copy()
    correct = out["correct"].astype("float64")
    wrong = out["wrong"].astype("float64")
    out["total"] = out["correct"] + out["wrong"] + out["empty"]
    out["net"] = (correct - wrong / float(cfg.penalty_divisor)).clip(lower=0).astype("float64")

    # Avoid divide by zero; an empty test scores 0%
    total = out["total"].astype("float64")
    rate = np.where(total > 0, correct / total.where(total > 0, 1.0) * 100, 0.0)
    out["success_rate"] = np.floor(rate + 0.5).astype("int64")

    out["band"] = pd.Categorical(
        np.select(
            [out["success_rate"] >= HIGH_BAND_MIN, out["success_rate"] >= MEDIUM_BAND_MIN],
            ["high", "medium"],
            default="low",
        ),
        categories=["low", "medium", "high"],
        ordered=True,
    )
    return out
