from .stats import (
    ExamSummary,
    ResultSummary,
    exam_summary,
    exam_total_net,
    format_summary,
    radar_profile,
    subject_averages,
    subject_distribution,
    summarize_results,
    weakest_subjects,
)

__all__ = [
    "ExamSummary",
    "ResultSummary",
    "exam_summary",
    "exam_total_net",
    "format_summary",
    "radar_profile",
    "subject_averages",
    "subject_distribution",
    "summarize_results",
    "weakest_subjects",
]
