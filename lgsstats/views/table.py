from __future__ import annotations

"""Scope/course filters, stable multi-direction sort and page slicing.

These helpers back every table and chart in the dashboard; they work on
any record type that exposes the named fields as attributes or keys.
"""

import math
from dataclasses import dataclass
from datetime import datetime, timedelta
from enum import Enum
from typing import Any, Callable, List, Literal, Optional, Sequence, TypeVar, Union

from ..errors import InvalidInput
from ..records.schema import field_value, to_datetime_safe

T = TypeVar("T")

ALL = "all"

PageSize = Union[int, Literal["all"]]
SortKey = Union[str, Callable[[Any], Any]]


class Scope(str, Enum):
    SELF = "self"
    SCHOOL = "school"


class Direction(str, Enum):
    ASCENDING = "ascending"
    DESCENDING = "descending"


@dataclass(frozen=True)
class SortConfig:
    key: SortKey
    direction: Direction = Direction.ASCENDING


@dataclass(frozen=True)
class Page:
    items: List[Any]
    page: int
    page_size: PageSize
    total: int
    total_pages: int


def filter_by_scope(records: Sequence[T], scope: Union[Scope, str], owner_id: str) -> List[T]:
    scope = Scope(scope)
    if scope is Scope.SCHOOL:
        return list(records)
    return [r for r in records if field_value(r, "owner_id") == owner_id]


def filter_by_course(records: Sequence[T], course: str) -> List[T]:
    if course == ALL:
        return list(records)
    return [r for r in records if field_value(r, "subject") == course]


def filter_by_topic(records: Sequence[T], topic: str) -> List[T]:
    if topic == ALL:
        return list(records)
    return [r for r in records if topic in (field_value(r, "topics") or ())]


def filter_by_status(records: Sequence[T], status: str) -> List[T]:
    if status == ALL:
        return list(records)
    return [r for r in records if field_value(r, "status") == status]


def filter_by_period(records: Sequence[T], days: Union[int, Literal["all"]], now: datetime) -> List[T]:
    """Keep records created within ``days`` days of ``now``.

    Records without a usable timestamp are dropped unless ``days`` is "all".
    """
    if days == ALL:
        return list(records)
    if isinstance(days, bool) or not isinstance(days, int) or days < 1:
        raise InvalidInput(f"days must be a positive integer or 'all', got {days!r}")
    cutoff = to_datetime_safe(now)
    if cutoff is None:
        raise InvalidInput(f"now must be a datetime, got {now!r}")
    cutoff -= timedelta(days=days)
    out = []
    for r in records:
        ts = to_datetime_safe(field_value(r, "created_at"))
        if ts is not None and ts >= cutoff:
            out.append(r)
    return out


def course_options(records: Sequence[Any]) -> List[str]:
    """Return "all" followed by each distinct subject in first-seen order."""
    seen = dict.fromkeys(field_value(r, "subject") for r in records)
    return [ALL] + [s for s in seen if s is not None]


def _key_fn(key: SortKey) -> Callable[[Any], Any]:
    get = key if callable(key) else (lambda r: field_value(r, key))

    def fn(r: Any):
        v = get(r)
        # None sorts before every value when ascending
        return (v is not None, v)

    return fn


def sort_by(records: Sequence[T], key: SortKey, direction: Union[Direction, str] = Direction.ASCENDING) -> List[T]:
    """Stable sort on a field name or key function.

    Ties keep their input order in both directions.
    """
    direction = Direction(direction)
    return sorted(records, key=_key_fn(key), reverse=direction is Direction.DESCENDING)


def next_sort(current: Optional[SortConfig], key: SortKey) -> SortConfig:
    """Clicking the active ascending key flips it; any other key starts ascending."""
    if current is not None and current.key == key and current.direction is Direction.ASCENDING:
        return SortConfig(key, Direction.DESCENDING)
    return SortConfig(key, Direction.ASCENDING)


def _check_page_size(page_size: PageSize) -> None:
    if page_size == ALL:
        return
    if isinstance(page_size, bool) or not isinstance(page_size, int) or page_size < 1:
        raise InvalidInput(f"page_size must be >= 1 or 'all', got {page_size!r}")


def total_pages(total: int, page_size: PageSize) -> int:
    """Number of pages; never less than 1 so an empty table still has page 1."""
    _check_page_size(page_size)
    if page_size == ALL:
        return 1
    return max(1, math.ceil(total / page_size))


def paginate(records: Sequence[T], page_size: PageSize, page_number: int) -> List[T]:
    _check_page_size(page_size)
    if isinstance(page_number, bool) or not isinstance(page_number, int) or page_number < 1:
        raise InvalidInput(f"page_number must be >= 1, got {page_number!r}")
    if page_size == ALL:
        return list(records)
    start = (page_number - 1) * page_size
    return list(records[start : start + page_size])


class TableView:
    """Sort and paging state for one results table.

    Changing the sort or the page size moves back to page 1.
    """

    def __init__(self, page_size: PageSize = 10) -> None:
        _check_page_size(page_size)
        self.sort: Optional[SortConfig] = None
        self.page_size: PageSize = page_size
        self.page = 1

    def request_sort(self, key: SortKey) -> SortConfig:
        self.sort = next_sort(self.sort, key)
        self.page = 1
        return self.sort

    def set_page_size(self, page_size: PageSize) -> None:
        _check_page_size(page_size)
        self.page_size = page_size
        self.page = 1

    def go_to(self, page: int) -> None:
        if page < 1:
            raise InvalidInput(f"page must be >= 1, got {page}")
        self.page = page

    def render(self, records: Sequence[T]) -> Page:
        rows = list(records)
        if self.sort is not None:
            rows = sort_by(rows, self.sort.key, self.sort.direction)
        pages = total_pages(len(rows), self.page_size)
        # a shrinking snapshot can leave the current page past the end
        self.page = min(self.page, pages)
        return Page(
            items=paginate(rows, self.page_size, self.page),
            page=self.page,
            page_size=self.page_size,
            total=len(rows),
            total_pages=pages,
        )
