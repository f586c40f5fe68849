from __future__ import annotations

"""Validation boundary: store documents -> immutable records.

Documents arrive in two shapes: the snake_case table layout
(``user_id``, ``course_name``, ``correct_count``, flat ``turkce_correct``
exam columns) and the older document layout (``kullaniciId``, ``dersAdi``,
``dogruSayisi``, nested ``turkce: {dogru, yanlis, bos}`` exam maps).
Missing counts default to 0 and missing topics to empty; negative counts
and malformed timestamps raise InvalidInput.
"""

import logging
from typing import Any, Dict, Iterable, List, Mapping, Sequence

from pydantic import ValidationError

from ..errors import InvalidInput
from .catalog import EXAM_FIELD_PREFIXES, LEGACY_EXAM_PREFIXES
from .schema import ExamRecord, MistakeEntry, SubjectScore, TestResultRecord

logger = logging.getLogger(__name__)

_COUNT_KEYS = {
    "correct": ("correct_count", "dogruSayisi", "correct", "dogru"),
    "wrong": ("wrong_count", "yanlisSayisi", "wrong", "yanlis"),
    "empty": ("empty_count", "bosSayisi", "empty", "bos"),
}


def _first(doc: Mapping[str, Any], keys: Sequence[str], default: Any = None) -> Any:
    for k in keys:
        if k in doc and doc[k] is not None:
            return doc[k]
    return default


def _count(value: Any, field: str) -> int:
    if isinstance(value, bool):
        raise InvalidInput(f"{field} must be an integer, got {value!r}")
    try:
        n = int(value)
    except (TypeError, ValueError, OverflowError) as exc:
        raise InvalidInput(f"{field} must be an integer, got {value!r}") from exc
    if n != value and not isinstance(value, str):
        raise InvalidInput(f"{field} must be a whole number, got {value!r}")
    if n < 0:
        raise InvalidInput(f"{field} must be >= 0, got {n}")
    return n


def score_from_mapping(doc: Mapping[str, Any], prefix: str = "") -> SubjectScore:
    """Read a (correct, wrong, empty) triple from a mapping."""
    values = {}
    for field, keys in _COUNT_KEYS.items():
        raw = _first(doc, [prefix + k for k in keys], 0)
        values[field] = _count(raw, prefix + field)
    return SubjectScore(**values)


def _topics(value: Any) -> frozenset:
    if not value:
        return frozenset()
    if isinstance(value, str):
        return frozenset({value})
    return frozenset(str(t) for t in value)


def _validate(model, data: Dict[str, Any]):
    try:
        return model.model_validate(data)
    except ValidationError as exc:
        logger.debug("Rejected %s document %s: %s", model.__name__, data.get("id"), exc)
        raise InvalidInput(f"invalid {model.__name__}: {exc}") from exc


def result_from_store(doc: Mapping[str, Any]) -> TestResultRecord:
    """Build a TestResultRecord from a store document."""
    data = {
        "id": str(_first(doc, ("id",), "")),
        "owner_id": str(_first(doc, ("user_id", "kullaniciId", "owner_id"), "")),
        "subject": str(_first(doc, ("course_name", "dersAdi", "subject"), "")),
        "score": score_from_mapping(doc),
        "topics": _topics(doc.get("topics")),
        "created_at": _first(doc, ("created_at", "createdAt")),
    }
    return _validate(TestResultRecord, data)


def _exam_subjects(doc: Mapping[str, Any]) -> Dict[str, SubjectScore]:
    subjects: Dict[str, SubjectScore] = {}
    for prefix, name in {**EXAM_FIELD_PREFIXES, **LEGACY_EXAM_PREFIXES}.items():
        nested = doc.get(prefix)
        if isinstance(nested, Mapping):
            score = score_from_mapping(nested)
        elif any(f"{prefix}_{k}" in doc for k in ("correct", "wrong", "empty")):
            score = score_from_mapping(doc, prefix=f"{prefix}_")
        else:
            continue
        if name in subjects:
            raise InvalidInput(f"{name} scores given more than once (under {prefix!r})")
        subjects[name] = score
    return subjects


def exam_from_store(doc: Mapping[str, Any]) -> ExamRecord:
    """Build an ExamRecord; subjects absent from the document score zero."""
    data = {
        "id": str(_first(doc, ("id",), "")),
        "owner_id": str(_first(doc, ("user_id", "kullaniciId", "owner_id"), "")),
        "name": _first(doc, ("exam_name", "ad", "name")),
        "publisher": _first(doc, ("publisher", "yayin")),
        "exam_date": _first(doc, ("exam_date",)),
        "created_at": _first(doc, ("created_at", "createdAt")),
        "subjects": _exam_subjects(doc),
    }
    return _validate(ExamRecord, data)


def mistake_from_store(doc: Mapping[str, Any]) -> MistakeEntry:
    data = {
        "id": str(_first(doc, ("id",), "")),
        "owner_id": str(_first(doc, ("user_id", "kullaniciId", "owner_id"), "")),
        "subject": str(_first(doc, ("course_name", "dersAdi", "subject"), "")),
        "topics": _topics(doc.get("topics")),
        "note": doc.get("note"),
        "image_url": _first(doc, ("image_url", "imageUrl")),
        "status": doc.get("status") or "open",
        "test_result_id": _first(doc, ("test_result_id", "testResultId")),
        "next_review_at": _first(doc, ("next_review_at", "nextReviewAt")),
        "created_at": _first(doc, ("created_at", "createdAt")),
    }
    return _validate(MistakeEntry, data)


def load_test_results(docs: Iterable[Mapping[str, Any]]) -> List[TestResultRecord]:
    """Validate a snapshot of test documents; the first bad document raises."""
    return [result_from_store(d) for d in docs]


def load_exams(docs: Iterable[Mapping[str, Any]]) -> List[ExamRecord]:
    return [exam_from_store(d) for d in docs]

