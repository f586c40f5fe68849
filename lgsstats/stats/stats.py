from __future__ import annotations

"""Dashboard summaries: totals, per-subject averages and exam overviews."""

from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple

from ..records.catalog import LGS_SUBJECTS
from ..records.schema import ExamRecord, field_value
from ..scoring.exam import EXAM_PENALTY_DIVISOR, total_net_across_subjects
from ..scoring.score import Band, performance_band, round_half_up, score_net, score_success_rate, success_rate
from ..trends.trend import PRACTICE_PENALTY_DIVISOR, Order, TrendComparison, recent_vs_previous


@dataclass(frozen=True)
class ResultSummary:
    total_tests: int
    total_questions: int
    total_correct: int
    total_net: float
    average_net: float
    success_rate: int
    band: Band


@dataclass(frozen=True)
class ExamSummary:
    total_exams: int
    average_net: float
    best_net: float
    improvement: TrendComparison


def summarize_results(records: Sequence[Any], penalty_divisor: float = PRACTICE_PENALTY_DIVISOR) -> ResultSummary:
    """Aggregate counts, net and success rate over a set of practice tests."""
    scores = [field_value(r, "score") for r in records]
    correct = sum(s.correct for s in scores)
    wrong = sum(s.wrong for s in scores)
    empty = sum(s.empty for s in scores)
    total_net = sum(score_net(s, penalty_divisor) for s in scores)
    rate = success_rate(correct, wrong, empty)
    return ResultSummary(
        total_tests=len(scores),
        total_questions=correct + wrong + empty,
        total_correct=correct,
        total_net=total_net,
        average_net=total_net / len(scores) if scores else 0.0,
        success_rate=rate,
        band=performance_band(rate),
    )


def subject_averages(records: Iterable[Any], penalty_divisor: float = PRACTICE_PENALTY_DIVISOR) -> Dict[str, float]:
    """Mean net per subject, keyed in first-seen order."""
    sums: Dict[str, List[float]] = {}
    for r in records:
        sums.setdefault(field_value(r, "subject"), []).append(score_net(field_value(r, "score"), penalty_divisor))
    return {subject: sum(nets) / len(nets) for subject, nets in sums.items()}


def weakest_subjects(averages: Dict[str, float], n: int = 3) -> List[Tuple[str, float]]:
    return sorted(averages.items(), key=lambda kv: kv[1])[:n]


def subject_distribution(records: Iterable[Any]) -> Dict[str, int]:
    counts: Dict[str, int] = {}
    for r in records:
        subject = field_value(r, "subject")
        counts[subject] = counts.get(subject, 0) + 1
    return counts


def radar_profile(records: Sequence[Any], subjects: Sequence[str] = LGS_SUBJECTS) -> Dict[str, int]:
    """Mean per-test accuracy (0-100) for each subject; 0 where untested."""
    out = {}
    for subject in subjects:
        rates = [score_success_rate(field_value(r, "score")) for r in records if field_value(r, "subject") == subject]
        out[subject] = int(round_half_up(sum(rates) / len(rates))) if rates else 0
    return out


def exam_total_net(exam: ExamRecord, penalty_divisor: float = EXAM_PENALTY_DIVISOR) -> float:
    return total_net_across_subjects(exam.subjects, penalty_divisor)


def exam_summary(
    exams: Sequence[ExamRecord],
    window_size: int = 3,
    order: Optional[Order] = "descending",
    penalty_divisor: float = EXAM_PENALTY_DIVISOR,
    min_baseline: Optional[int] = None,
) -> ExamSummary:
    """Average and best total net plus the latest-window improvement.

    ``order`` describes how ``exams`` are sorted (newest first by default).
    The improvement stays 0 until the previous window is full, unless
    ``min_baseline`` says otherwise.
    """
    nets = [exam_total_net(e, penalty_divisor) for e in exams]
    improvement = recent_vs_previous(
        exams,
        window_size,
        order=order,
        value=lambda e: exam_total_net(e, penalty_divisor),
        min_baseline=window_size if min_baseline is None else min_baseline,
    )
    return ExamSummary(
        total_exams=len(nets),
        average_net=sum(nets) / len(nets) if nets else 0.0,
        best_net=max(nets) if nets else 0.0,
        improvement=improvement,
    )


def format_summary(summary: ResultSummary, averages: Optional[Dict[str, float]] = None) -> str:
    """Return a human-readable summary of stats."""
    lines = [
        f"Tests: {summary.total_tests}",
        f"Questions: {summary.total_questions} ({summary.total_correct} correct)",
        f"Net: {summary.total_net:.2f} total, {summary.average_net:.2f} average",
        f"Success: {summary.success_rate}% ({summary.band.value})",
    ]
    for subject, avg in (averages or {}).items():
        lines.append(f"{subject}: {avg:.1f} net")
    return "\n".join(lines)
