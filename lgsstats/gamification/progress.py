from __future__ import annotations

"""Points, levels, badges and goal progress.

Everything here is recomputed from counts on every call; remembering which
badges a user has already seen belongs to the caller.
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import FrozenSet, Iterable, List, Optional, Sequence, Tuple

from ..errors import InvalidInput
from ..records.schema import field_value
from ..scoring.score import round_half_up
from ..trends.trend import daily_weekly_counts

POINTS_PER_TEST = 10


class Level(str, Enum):
    ENTRY = "entry"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


class BadgeKey(str, Enum):
    FIRST_TEST = "first_test"
    FIVE_TESTS = "five_tests"
    SEVEN_DAY_STREAK = "seven_day_streak"


# (level, minimum points), ascending; the last band has no upper bound.
DEFAULT_LEVEL_THRESHOLDS: Tuple[Tuple[Level, int], ...] = (
    (Level.ENTRY, 0),
    (Level.INTERMEDIATE, 100),
    (Level.ADVANCED, 200),
)


@dataclass(frozen=True)
class BadgeRules:
    first_test: int = 1
    five_tests: int = 5
    seven_day_streak: int = 7


@dataclass(frozen=True)
class ProgressState:
    test_count: int
    daily_count: int = 0
    weekly_count: int = 0


@dataclass(frozen=True)
class LevelProgress:
    level: Level
    points: int
    band_min: int
    band_max: Optional[int]
    progress_percent: int


@dataclass(frozen=True)
class GoalProgress:
    count: int
    target: int
    shown: int
    percent: float
    met: bool


def points_for(test_count: int, points_per_test: int = POINTS_PER_TEST) -> int:
    if test_count < 0:
        raise InvalidInput(f"test_count must be >= 0, got {test_count}")
    return test_count * points_per_test


def _check_thresholds(thresholds: Sequence[Tuple[Level, int]]) -> None:
    if not thresholds or thresholds[0][1] != 0:
        raise InvalidInput("level thresholds must start at 0 points")
    mins = [m for _, m in thresholds]
    if any(b <= a for a, b in zip(mins, mins[1:])):
        raise InvalidInput(f"level thresholds must be strictly increasing, got {mins}")


def level_for(
    points: int,
    thresholds: Sequence[Tuple[Level, int]] = DEFAULT_LEVEL_THRESHOLDS,
) -> LevelProgress:
    """Resolve the level band for ``points`` and the progress within it."""
    if points < 0:
        raise InvalidInput(f"points must be >= 0, got {points}")
    _check_thresholds(thresholds)
    idx = 0
    for i, (_, minimum) in enumerate(thresholds):
        if points >= minimum:
            idx = i
    level, band_min = thresholds[idx]
    band_max = thresholds[idx + 1][1] if idx + 1 < len(thresholds) else None
    if band_max is None:
        pct = 100
    else:
        span = band_max - band_min
        within = max(0, min(span, points - band_min))
        pct = int(round_half_up(within / span * 100))
    return LevelProgress(level=level, points=points, band_min=band_min, band_max=band_max, progress_percent=pct)


def progress_state(records: Sequence, owner_id: str, now: datetime) -> ProgressState:
    """Cumulative counters for one user from a record snapshot."""
    test_count = sum(1 for r in records if field_value(r, "owner_id") == owner_id)
    counts = daily_weekly_counts(records, owner_id, now)
    return ProgressState(test_count=test_count, daily_count=counts.daily, weekly_count=counts.weekly)


def evaluate_badges(state: ProgressState, rules: BadgeRules = BadgeRules()) -> FrozenSet[BadgeKey]:
    held = set()
    if state.test_count >= rules.first_test:
        held.add(BadgeKey.FIRST_TEST)
    if state.test_count >= rules.five_tests:
        held.add(BadgeKey.FIVE_TESTS)
    if state.weekly_count >= rules.seven_day_streak:
        held.add(BadgeKey.SEVEN_DAY_STREAK)
    return frozenset(held)


def newly_earned(current: Iterable[BadgeKey], previously_earned: Iterable[BadgeKey]) -> List[BadgeKey]:
    """Badges in ``current`` not yet in ``previously_earned``, in declaration order."""
    current = {BadgeKey(b) for b in current}
    seen = {BadgeKey(b) for b in previously_earned}
    return [b for b in BadgeKey if b in current and b not in seen]


def goal_progress(count: int, target: int) -> GoalProgress:
    """Progress toward a daily or weekly test goal, capped at the target."""
    if target < 1:
        raise InvalidInput(f"goal target must be >= 1, got {target}")
    if count < 0:
        raise InvalidInput(f"count must be >= 0, got {count}")
    return GoalProgress(
        count=count,
        target=target,
        shown=min(count, target),
        percent=min(100.0, count / target * 100),
        met=count >= target,
    )
