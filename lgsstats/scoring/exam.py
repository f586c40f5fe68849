from __future__ import annotations

"""Exam-level scoring: weighted composite score and per-subject breakdown."""

import logging
from dataclasses import dataclass
from typing import Iterable, List, Mapping, Optional, Tuple

from ..errors import MissingReferenceData
from ..records.catalog import LGS_SUBJECTS, canonical_subject, default_max_questions
from ..records.schema import SubjectMeta, SubjectScore, default_subject_meta
from .score import round_half_up, score_net

logger = logging.getLogger(__name__)

EXAM_PENALTY_DIVISOR = 3


@dataclass(frozen=True)
class WeightedScore:
    """Composite score plus the subjects that had no reference data."""

    total: float
    skipped: Tuple[str, ...] = ()


@dataclass(frozen=True)
class SubjectBreakdown:
    subject: str
    net: float
    max_questions: int
    net_rate: float


def weighted_total(
    subject_scores: Mapping[str, SubjectScore],
    subject_meta: Mapping[str, SubjectMeta],
    penalty_divisor: float = EXAM_PENALTY_DIVISOR,
) -> WeightedScore:
    """Sum net * weight over subjects present in both mappings.

    The total is rounded half-up to one decimal. Subjects without meta are
    left out of the sum and listed in ``skipped``.
    """
    total = 0.0
    skipped = []
    # Sum in sorted order so the float result does not depend on mapping order.
    for name in sorted(subject_scores):
        meta = subject_meta.get(name)
        if meta is None:
            skipped.append(name)
            continue
        total += score_net(subject_scores[name], penalty_divisor) * meta.weight
    if skipped:
        logger.warning("Skipped subjects without reference data: %s", ", ".join(skipped))
    return WeightedScore(total=round_half_up(total, 1), skipped=tuple(skipped))


def total_net_across_subjects(
    subject_scores: Mapping[str, SubjectScore],
    penalty_divisor: float = EXAM_PENALTY_DIVISOR,
    subjects: Iterable[str] = LGS_SUBJECTS,
) -> float:
    """Unweighted net sum over the fixed subjects; absent subjects count 0."""
    return sum(
        score_net(subject_scores[name], penalty_divisor) for name in subjects if name in subject_scores
    )


def subject_max_questions(name: str, subject_meta: Optional[Mapping[str, SubjectMeta]] = None) -> int:
    subject = canonical_subject(name)
    if subject_meta is not None:
        meta = subject_meta.get(subject)
        if meta is None:
            raise MissingReferenceData(subject)
        return meta.max_questions
    n = default_max_questions(subject)
    if n is None:
        raise MissingReferenceData(subject)
    return n


def total_questions(subject_scores: Mapping[str, SubjectScore]) -> int:
    return sum(s.total for s in subject_scores.values())


def subject_breakdown(
    subject_scores: Mapping[str, SubjectScore],
    subject_meta: Optional[Mapping[str, SubjectMeta]] = None,
    penalty_divisor: float = EXAM_PENALTY_DIVISOR,
) -> List[SubjectBreakdown]:
    """Net and net-over-max rate per subject, in curriculum order.

    Subjects outside the meta table are left out, same as weighted_total.
    """
    meta = subject_meta if subject_meta is not None else default_subject_meta()
    order = [n for n in LGS_SUBJECTS if n in subject_scores]
    order += sorted(n for n in subject_scores if n not in LGS_SUBJECTS)
    out: List[SubjectBreakdown] = []
    for name in order:
        m = meta.get(name)
        if m is None:
            continue
        n = score_net(subject_scores[name], penalty_divisor)
        out.append(SubjectBreakdown(subject=name, net=n, max_questions=m.max_questions, net_rate=n / m.max_questions * 100))
    return out
