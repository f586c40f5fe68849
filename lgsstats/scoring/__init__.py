from .score import Band, net, performance_band, round_half_up, score_net, score_success_rate, success_rate
from .exam import (
    EXAM_PENALTY_DIVISOR,
    SubjectBreakdown,
    WeightedScore,
    subject_breakdown,
    subject_max_questions,
    total_net_across_subjects,
    total_questions,
    weighted_total,
)

__all__ = [
    "Band",
    "net",
    "performance_band",
    "round_half_up",
    "score_net",
    "score_success_rate",
    "success_rate",
    "EXAM_PENALTY_DIVISOR",
    "SubjectBreakdown",
    "WeightedScore",
    "subject_breakdown",
    "subject_max_questions",
    "total_net_across_subjects",
    "total_questions",
    "weighted_total",
]
