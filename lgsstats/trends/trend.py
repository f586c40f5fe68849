from __future__ import annotations

"""Rolling activity windows and recent-vs-previous comparisons.

Every function takes ``now`` or an explicit ordering from the caller so
results never depend on the wall clock. Records may be TestResultRecord /
ExamRecord models or plain mappings with the same field names.
"""

from dataclasses import dataclass
from datetime import date, datetime, timedelta, timezone
from typing import Any, Callable, List, Literal, Optional, Sequence

from ..errors import InvalidInput
from ..records.schema import field_value, to_datetime_safe
from ..scoring.score import round_half_up, score_net, score_success_rate

PRACTICE_PENALTY_DIVISOR = 4
WEEK = timedelta(days=7)

Order = Literal["ascending", "descending"]
ValueFn = Callable[[Any], float]


@dataclass(frozen=True)
class ActivityCounts:
    daily: int
    weekly: int


@dataclass(frozen=True)
class TrendComparison:
    """Average value of the latest window against the window before it.

    ``delta_percent`` is relative to the previous average, in percent.
    """

    recent_avg: float
    previous_avg: float
    delta_percent: float
    recent_count: int
    previous_count: int


@dataclass(frozen=True)
class DayProgress:
    day: date
    tests: int
    accuracy: int
    net: float


def record_time(record: Any) -> Optional[datetime]:
    return to_datetime_safe(field_value(record, "created_at"))


def _aware(now: datetime) -> datetime:
    if not isinstance(now, datetime):
        raise InvalidInput(f"now must be a datetime, got {now!r}")
    return now if now.tzinfo is not None else now.replace(tzinfo=timezone.utc)


def _practice_value(penalty_divisor: float) -> ValueFn:
    def value(record: Any) -> float:
        score = field_value(record, "score")
        if score is None:
            raise InvalidInput("record has no score; pass value= for this record type")
        return score_net(score, penalty_divisor)

    return value


def daily_weekly_counts(records: Sequence[Any], owner_id: str, now: datetime) -> ActivityCounts:
    """Count the owner's records since the start of today and in the last 7 days.

    "Today" is ``now``'s calendar day in ``now``'s timezone (UTC if naive).
    Records whose timestamp is missing or unparseable are not counted.
    """
    now = _aware(now)
    start_of_day = now.replace(hour=0, minute=0, second=0, microsecond=0)
    week_ago = now - WEEK
    daily = weekly = 0
    for r in records:
        if field_value(r, "owner_id") != owner_id:
            continue
        ts = record_time(r)
        if ts is None:
            continue
        if ts >= start_of_day:
            daily += 1
        if ts >= week_ago:
            weekly += 1
    return ActivityCounts(daily=daily, weekly=weekly)


def streak_weekly_count(records: Sequence[Any], owner_id: str, now: datetime) -> int:
    return daily_weekly_counts(records, owner_id, now).weekly


def chronological(records: Sequence[Any], order: Optional[Order] = "ascending") -> List[Any]:
    """Return records oldest first.

    ``order`` describes the input: "ascending" (oldest first),
    "descending" (newest first), or None to sort by timestamp; records
    without a timestamp then come first, in input order.
    """
    if order == "ascending":
        return list(records)
    if order == "descending":
        return list(reversed(records))
    if order is None:
        floor = datetime.min.replace(tzinfo=timezone.utc)
        return sorted(records, key=lambda r: record_time(r) or floor)
    raise InvalidInput(f"order must be 'ascending', 'descending' or None, got {order!r}")


def _mean(values: Sequence[float]) -> float:
    return sum(values) / len(values) if values else 0.0


def average_of_last_n(
    records: Sequence[Any],
    n: int,
    order: Optional[Order] = "ascending",
    penalty_divisor: float = PRACTICE_PENALTY_DIVISOR,
    value: Optional[ValueFn] = None,
) -> float:
    """Mean net over the chronological tail of size min(n, len(records))."""
    if n < 0:
        raise InvalidInput(f"n must be >= 0, got {n}")
    if n == 0:
        return 0.0
    value = value or _practice_value(penalty_divisor)
    tail = chronological(records, order)[-n:]
    return _mean([value(r) for r in tail])


def recent_vs_previous(
    records: Sequence[Any],
    window_size: int,
    order: Optional[Order] = "ascending",
    penalty_divisor: float = PRACTICE_PENALTY_DIVISOR,
    value: Optional[ValueFn] = None,
    min_baseline: int = 1,
) -> TrendComparison:
    """Compare the newest ``window_size`` records with the ones just before.

    The delta is 0 when the previous window holds fewer than
    ``min_baseline`` records or averages 0.
    """
    if window_size < 1:
        raise InvalidInput(f"window_size must be >= 1, got {window_size}")
    value = value or _practice_value(penalty_divisor)
    newest_first = chronological(records, order)[::-1]
    recent = [value(r) for r in newest_first[:window_size]]
    previous = [value(r) for r in newest_first[window_size : 2 * window_size]]
    recent_avg = _mean(recent)
    previous_avg = _mean(previous)
    if len(previous) < max(1, min_baseline) or previous_avg == 0:
        delta = 0.0
    else:
        delta = (recent_avg - previous_avg) / previous_avg * 100
    return TrendComparison(
        recent_avg=recent_avg,
        previous_avg=previous_avg,
        delta_percent=delta,
        recent_count=len(recent),
        previous_count=len(previous),
    )


def last_net(
    records: Sequence[Any],
    order: Optional[Order] = "ascending",
    penalty_divisor: float = PRACTICE_PENALTY_DIVISOR,
) -> float:
    """Net of the newest record rounded to two decimals; 0 for no records."""
    ordered = chronological(records, order)
    if not ordered:
        return 0.0
    return round_half_up(_practice_value(penalty_divisor)(ordered[-1]), 2)


def weekly_progress(
    records: Sequence[Any],
    now: datetime,
    penalty_divisor: float = PRACTICE_PENALTY_DIVISOR,
) -> List[DayProgress]:
    """Per-day test count, mean accuracy and summed net for the last 7 days.

    Buckets are calendar days in ``now``'s timezone, oldest first, ending
    with ``now``'s day.
    """
    now = _aware(now)
    tz = now.tzinfo
    days = [(now - timedelta(days=i)).date() for i in range(6, -1, -1)]
    buckets = {d: [] for d in days}
    for r in records:
        ts = record_time(r)
        if ts is None:
            continue
        d = ts.astimezone(tz).date()
        if d in buckets:
            buckets[d].append(r)
    out = []
    for d in days:
        items = buckets[d]
        scores = [field_value(r, "score") for r in items]
        accuracy = _mean([score_success_rate(s) for s in scores]) if scores else 0.0
        out.append(
            DayProgress(
                day=d,
                tests=len(items),
                accuracy=int(round_half_up(accuracy)),
                net=sum(score_net(s, penalty_divisor) for s in scores),
            )
        )
    return out
