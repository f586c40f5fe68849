"""LGS Stats package initialization.

Scoring and statistics for LGS practice tests and mock exams. The engine
is pure: callers pass record snapshots, configuration and ``now``.
"""

from __future__ import annotations

from .errors import InvalidInput, LGSStatsError, MissingReferenceData
from .records import ExamRecord, SubjectMeta, SubjectScore, TestResultRecord
from .scoring import Band, net, performance_band, subject_max_questions, success_rate, weighted_total
from .trends import average_of_last_n, daily_weekly_counts, recent_vs_previous, streak_weekly_count
from .gamification import BadgeKey, Level, evaluate_badges, level_for
from .views import Scope, filter_by_course, filter_by_scope, paginate, sort_by

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "InvalidInput",
    "LGSStatsError",
    "MissingReferenceData",
    "ExamRecord",
    "SubjectMeta",
    "SubjectScore",
    "TestResultRecord",
    "Band",
    "net",
    "performance_band",
    "subject_max_questions",
    "success_rate",
    "weighted_total",
    "average_of_last_n",
    "daily_weekly_counts",
    "recent_vs_previous",
    "streak_weekly_count",
    "BadgeKey",
    "Level",
    "evaluate_badges",
    "level_for",
    "Scope",
    "filter_by_course",
    "filter_by_scope",
    "paginate",
    "sort_by",
]
