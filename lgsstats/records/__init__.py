from .catalog import LGS_SUBJECTS, LGS_TOPICS, canonical_subject, default_max_questions, subject_topics
from .schema import (
    MISTAKE_STATUSES,
    ExamRecord,
    MistakeEntry,
    SubjectMeta,
    SubjectScore,
    TestResultRecord,
    default_subject_meta,
    field_value,
    to_datetime_safe,
)
from .normalize import (
    exam_from_store,
    load_exams,
    load_test_results,
    mistake_from_store,
    result_from_store,
    score_from_mapping,
)

__all__ = [
    "LGS_SUBJECTS",
    "LGS_TOPICS",
    "canonical_subject",
    "default_max_questions",
    "subject_topics",
    "MISTAKE_STATUSES",
    "ExamRecord",
    "MistakeEntry",
    "SubjectMeta",
    "SubjectScore",
    "TestResultRecord",
    "default_subject_meta",
    "field_value",
    "to_datetime_safe",
    "exam_from_store",
    "load_exams",
    "load_test_results",
    "mistake_from_store",
    "result_from_store",
    "score_from_mapping",
]
