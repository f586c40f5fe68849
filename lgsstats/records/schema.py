from __future__ import annotations

"""Record models for practice tests, mock exams and the mistake log."""

from datetime import date, datetime, timezone
from typing import Any, Dict, FrozenSet, Literal, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .catalog import DEFAULT_WEIGHT, LGS_SUBJECTS, canonical_subject, default_max_questions

MISTAKE_STATUSES = ("open", "reviewed", "archived")


def to_datetime_safe(value: Any) -> Optional[datetime]:
    """Coerce a store timestamp to an aware UTC datetime, or None.

    Accepts datetimes, dates, epoch milliseconds, ISO-8601 strings and
    store timestamp objects exposing ``to_datetime()`` or ``toDate()``.
    Never raises.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, datetime):
        dt = value
    elif isinstance(value, date):
        dt = datetime(value.year, value.month, value.day)
    elif isinstance(value, (int, float)):
        try:
            dt = datetime.fromtimestamp(value / 1000.0, tz=timezone.utc)
        except (OverflowError, OSError, ValueError):
            return None
    elif isinstance(value, str):
        text = value.strip()
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        try:
            dt = datetime.fromisoformat(text)
        except ValueError:
            return None
    else:
        for attr in ("to_datetime", "toDate"):
            fn = getattr(value, attr, None)
            if callable(fn):
                try:
                    return to_datetime_safe(fn())
                except Exception:
                    return None
        return None
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def _parse_timestamp(v: Any) -> Optional[datetime]:
    if v is None:
        return None
    dt = to_datetime_safe(v)
    if dt is None:
        raise ValueError(f"malformed timestamp: {v!r}")
    return dt


class SubjectScore(BaseModel):
    """Answer counts for one subject. A new score is a new record.

    Building one directly with a bad count raises pydantic's
    ValidationError (a ValueError). Store documents should go through
    ``lgsstats.records.normalize``, which reports the same problem as
    InvalidInput.
    """

    model_config = ConfigDict(frozen=True)

    correct: int = Field(default=0, ge=0)
    wrong: int = Field(default=0, ge=0)
    empty: int = Field(default=0, ge=0)

    @property
    def total(self) -> int:
        return self.correct + self.wrong + self.empty


class SubjectMeta(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    max_questions: int = Field(gt=0)
    weight: float = Field(gt=0)


def default_subject_meta() -> Dict[str, SubjectMeta]:
    """Reference table for the six LGS subjects."""
    return {
        name: SubjectMeta(name=name, max_questions=default_max_questions(name), weight=DEFAULT_WEIGHT)
        for name in LGS_SUBJECTS
    }


class TestResultRecord(BaseModel):
    """One practice test for a single subject."""

    __test__ = False  # keep pytest from collecting this as a test class

    model_config = ConfigDict(frozen=True)

    id: str
    owner_id: str
    subject: str
    score: SubjectScore
    topics: FrozenSet[str] = frozenset()
    created_at: Optional[datetime] = None

    @field_validator("subject")
    def _canonical(cls, v: str) -> str:
        return canonical_subject(v)

    @field_validator("created_at", mode="before")
    def _ensure_utc(cls, v: Any) -> Optional[datetime]:
        return _parse_timestamp(v)

    @property
    def correct(self) -> int:
        return self.score.correct

    @property
    def wrong(self) -> int:
        return self.score.wrong

    @property
    def empty(self) -> int:
        return self.score.empty


class ExamRecord(BaseModel):
    """A full mock exam ("deneme"); always carries every LGS subject."""

    model_config = ConfigDict(frozen=True)

    id: str
    owner_id: str
    name: Optional[str] = None
    publisher: Optional[str] = None
    exam_date: Optional[datetime] = None
    created_at: Optional[datetime] = None
    subjects: Dict[str, SubjectScore] = Field(default_factory=dict, validate_default=True)

    @field_validator("exam_date", "created_at", mode="before")
    def _ensure_utc(cls, v: Any) -> Optional[datetime]:
        return _parse_timestamp(v)

    @field_validator("subjects")
    def _fill_subjects(cls, v: Dict[str, SubjectScore]) -> Dict[str, SubjectScore]:
        filled: Dict[str, SubjectScore] = {}
        for key, score in v.items():
            name = canonical_subject(key)
            if name in filled:
                raise ValueError(f"subject {name!r} given more than once (as {key!r})")
            filled[name] = score
        for name in LGS_SUBJECTS:
            filled.setdefault(name, SubjectScore())
        return filled

    @property
    def when(self) -> Optional[datetime]:
        return self.exam_date or self.created_at


class MistakeEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    owner_id: str
    subject: str
    topics: FrozenSet[str] = frozenset()
    note: Optional[str] = None
    image_url: Optional[str] = None
    status: Literal["open", "reviewed", "archived"] = "open"
    test_result_id: Optional[str] = None
    next_review_at: Optional[datetime] = None
    created_at: Optional[datetime] = None

    @field_validator("subject")
    def _canonical(cls, v: str) -> str:
        return canonical_subject(v)

    @field_validator("next_review_at", "created_at", mode="before")
    def _ensure_utc(cls, v: Any) -> Optional[datetime]:
        return _parse_timestamp(v)


def field_value(record: Any, name: str) -> Any:
    """Read a field from a record model or a plain mapping."""
    if isinstance(record, Mapping):
        return record.get(name)
    return getattr(record, name, None)
