from __future__ import annotations

"""Analytics configuration (hyperparameters) using Pydantic."""

from pydantic import BaseModel, Field


class AnalyticsConfig(BaseModel):
    """Hyperparameters for analytics computations and smoothing.

    - penalty_divisor: wrong answers per lost point for practice tests (>0)
    - smoothing_span: EWMA span in tests (>1)
    """

    penalty_divisor: float = Field(4, gt=0)
    smoothing_span: int = Field(5, gt=1)
