from __future__ import annotations

"""Net scores, success rates and performance bands for one subject."""

import math
from enum import Enum
from numbers import Real

from ..errors import InvalidInput
from ..records.schema import SubjectScore

HIGH_BAND_MIN = 75
MEDIUM_BAND_MIN = 50


class Band(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


def round_half_up(x: float, ndigits: int = 0) -> float:
    """Round halves away from zero for non-negative values (0.5 -> 1)."""
    factor = 10 ** ndigits
    return math.floor(x * factor + 0.5) / factor


def _check_count(name: str, value: int) -> None:
    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidInput(f"{name} must be a number, got {value!r}")
    if value < 0:
        raise InvalidInput(f"{name} must be >= 0, got {value}")


def net(correct: int, wrong: int, penalty_divisor: float) -> float:
    """Correct answers minus wrong / penalty_divisor, floored at zero.

    Practice tests use divisor 4, full mock exams divisor 3; callers
    always pass the one that applies.
    """
    _check_count("correct", correct)
    _check_count("wrong", wrong)
    if isinstance(penalty_divisor, bool) or not isinstance(penalty_divisor, Real) or penalty_divisor <= 0:
        raise InvalidInput(f"penalty_divisor must be > 0, got {penalty_divisor!r}")
    return max(0.0, correct - wrong / penalty_divisor)


def success_rate(correct: int, wrong: int, empty: int) -> int:
    """Percentage of correct answers; 0 when nothing was answered."""
    _check_count("correct", correct)
    _check_count("wrong", wrong)
    _check_count("empty", empty)
    total = correct + wrong + empty
    if total == 0:
        return 0
    return int(round_half_up(correct / total * 100))


def performance_band(rate: float) -> Band:
    if isinstance(rate, bool) or not isinstance(rate, Real) or not 0 <= rate <= 100:
        raise InvalidInput(f"success rate must be within [0, 100], got {rate!r}")
    if rate >= HIGH_BAND_MIN:
        return Band.HIGH
    if rate >= MEDIUM_BAND_MIN:
        return Band.MEDIUM
    return Band.LOW


def score_net(score: SubjectScore, penalty_divisor: float) -> float:
    return net(score.correct, score.wrong, penalty_divisor)


def score_success_rate(score: SubjectScore) -> int:
    return success_rate(score.correct, score.wrong, score.empty)
