from .trend import (
    PRACTICE_PENALTY_DIVISOR,
    ActivityCounts,
    DayProgress,
    TrendComparison,
    average_of_last_n,
    chronological,
    daily_weekly_counts,
    last_net,
    record_time,
    recent_vs_previous,
    streak_weekly_count,
    weekly_progress,
)

__all__ = [
    "PRACTICE_PENALTY_DIVISOR",
    "ActivityCounts",
    "DayProgress",
    "TrendComparison",
    "average_of_last_n",
    "chronological",
    "daily_weekly_counts",
    "last_net",
    "record_time",
    "recent_vs_previous",
    "streak_weekly_count",
    "weekly_progress",
]
