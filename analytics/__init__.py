from .config import AnalyticsConfig
from .metrics import compute_metrics
from .prepare import DTYPES, results_frame
from .smoothing import ewma_by_subject
from .plots import plot_trend, plot_subject_distribution, plot_radar_subject, plot_weekly_progress

__all__ = [
    "AnalyticsConfig",
    "compute_metrics",
    "DTYPES",
    "results_frame",
    "ewma_by_subject",
    "plot_trend",
    "plot_subject_distribution",
    "plot_radar_subject",
    "plot_weekly_progress",
]
