import unittest
from datetime import date, datetime, timezone

from pydantic import ValidationError

from lgsstats.errors import InvalidInput
from lgsstats.records import (
    LGS_SUBJECTS,
    ExamRecord,
    SubjectScore,
    canonical_subject,
    exam_from_store,
    load_test_results,
    mistake_from_store,
    result_from_store,
    subject_topics,
    to_datetime_safe,
)


class TimestampTests(unittest.TestCase):
    def test_formats(self) -> None:
        expected = datetime(2024, 5, 15, 12, 0, tzinfo=timezone.utc)
        self.assertEqual(to_datetime_safe("2024-05-15T12:00:00Z"), expected)
        self.assertEqual(to_datetime_safe("2024-05-15T15:00:00+03:00"), expected)
        self.assertEqual(to_datetime_safe(int(expected.timestamp() * 1000)), expected)
        self.assertEqual(to_datetime_safe(datetime(2024, 5, 15, 12, 0)), expected)
        self.assertEqual(to_datetime_safe(date(2024, 5, 15)), datetime(2024, 5, 15, tzinfo=timezone.utc))

    def test_store_timestamp_object(self) -> None:
        class FakeTimestamp:
            def toDate(self):
                return datetime(2024, 1, 1, tzinfo=timezone.utc)

        self.assertEqual(to_datetime_safe(FakeTimestamp()), datetime(2024, 1, 1, tzinfo=timezone.utc))

    def test_unparseable_returns_none(self) -> None:
        for value in (None, "yesterday", True, object(), float("inf")):
            self.assertIsNone(to_datetime_safe(value))


class SubjectScoreTests(unittest.TestCase):
    def test_total_and_defaults(self) -> None:
        self.assertEqual(SubjectScore(correct=3, wrong=2).total, 5)

    def test_frozen(self) -> None:
        score = SubjectScore(correct=3)
        with self.assertRaises(ValidationError):
            score.correct = 4

    def test_rejects_negative(self) -> None:
        with self.assertRaises(ValidationError):
            SubjectScore(correct=-1)

    def test_direct_construction_error_is_value_error(self) -> None:
        with self.assertRaises(ValueError):
            SubjectScore(wrong=-1)


class ResultBoundaryTests(unittest.TestCase):
    def test_table_shape(self) -> None:
        rec = result_from_store(
            {
                "id": "r1",
                "user_id": "u1",
                "course_name": "Matematik",
                "correct_count": 12,
                "wrong_count": 4,
                "empty_count": 4,
                "topics": ["Olasılık"],
                "created_at": "2024-05-15T12:00:00Z",
            }
        )
        self.assertEqual(rec.owner_id, "u1")
        self.assertEqual(rec.subject, "Matematik")
        self.assertEqual((rec.correct, rec.wrong, rec.empty), (12, 4, 4))
        self.assertEqual(rec.topics, frozenset({"Olasılık"}))
        self.assertEqual(rec.created_at.tzinfo, timezone.utc)

    def test_legacy_shape_with_defaults(self) -> None:
        rec = result_from_store({"id": "r2", "kullaniciId": "u9", "dersAdi": "Fen Bilimleri", "dogruSayisi": 7})
        self.assertEqual(rec.owner_id, "u9")
        self.assertEqual(rec.subject, "Fen Bilgisi")
        self.assertEqual(rec.score, SubjectScore(correct=7))
        self.assertEqual(rec.topics, frozenset())
        self.assertIsNone(rec.created_at)

    def test_rejects_negative_counts(self) -> None:
        with self.assertRaises(InvalidInput):
            result_from_store({"id": "r", "user_id": "u", "course_name": "Türkçe", "wrong_count": -2})

    def test_rejects_fractional_counts(self) -> None:
        with self.assertRaises(InvalidInput):
            result_from_store({"id": "r", "user_id": "u", "course_name": "Türkçe", "correct_count": 2.5})

    def test_rejects_infinite_counts(self) -> None:
        with self.assertRaises(InvalidInput):
            result_from_store({"id": "r", "user_id": "u", "course_name": "Türkçe", "correct_count": float("inf")})
        with self.assertRaises(InvalidInput):
            exam_from_store({"id": "e", "user_id": "u", "fen_wrong": float("-inf")})

    def test_rejects_malformed_timestamp(self) -> None:
        with self.assertRaises(InvalidInput):
            result_from_store({"id": "r", "user_id": "u", "course_name": "Türkçe", "created_at": "soon"})

    def test_load_many(self) -> None:
        docs = [{"id": str(i), "user_id": "u", "course_name": "Türkçe"} for i in range(3)]
        self.assertEqual([r.id for r in load_test_results(docs)], ["0", "1", "2"])


class ExamBoundaryTests(unittest.TestCase):
    def test_flat_columns(self) -> None:
        exam = exam_from_store(
            {
                "id": "e1",
                "user_id": "u1",
                "exam_name": "Deneme 1",
                "publisher": "Yayın",
                "exam_date": "2024-05-10",
                "turkce_correct": 16,
                "turkce_wrong": 3,
                "turkce_empty": 1,
                "ingilizce_correct": 8,
                "ingilizce_wrong": 2,
            }
        )
        self.assertEqual(exam.name, "Deneme 1")
        self.assertEqual(set(exam.subjects), set(LGS_SUBJECTS))
        self.assertEqual(exam.subjects["Türkçe"], SubjectScore(correct=16, wrong=3, empty=1))
        self.assertEqual(exam.subjects["Matematik"], SubjectScore())
        self.assertEqual(exam.when, datetime(2024, 5, 10, tzinfo=timezone.utc))

    def test_nested_legacy_maps(self) -> None:
        exam = exam_from_store(
            {
                "id": "e2",
                "kullaniciId": "u1",
                "ad": "TG-3",
                "yayin": "X",
                "matematik": {"dogru": 12, "yanlis": 6, "bos": 2},
                "inkilap": {"dogru": 9, "yanlis": 1, "bos": 0},
            }
        )
        self.assertEqual(exam.publisher, "X")
        self.assertEqual(exam.subjects["Matematik"], SubjectScore(correct=12, wrong=6, empty=2))
        self.assertEqual(exam.subjects["Sosyal Bilgiler"], SubjectScore(correct=9, wrong=1))

    def test_rejects_negative(self) -> None:
        with self.assertRaises(InvalidInput):
            exam_from_store({"id": "e", "user_id": "u", "fen_wrong": -1})

    def test_rejects_same_subject_twice(self) -> None:
        with self.assertRaises(InvalidInput):
            exam_from_store(
                {
                    "id": "e",
                    "user_id": "u",
                    "sosyal_correct": 5,
                    "inkilap": {"dogru": 7, "yanlis": 0, "bos": 0},
                }
            )

    def test_model_rejects_alias_and_canonical_name(self) -> None:
        with self.assertRaises(ValidationError):
            ExamRecord(
                id="e",
                owner_id="u",
                subjects={"Fen Bilgisi": SubjectScore(correct=5), "Fen Bilimleri": SubjectScore(correct=7)},
            )


class MistakeBoundaryTests(unittest.TestCase):
    def test_defaults(self) -> None:
        m = mistake_from_store({"id": "m1", "user_id": "u1", "course_name": "Türkçe", "topics": "Yazım Kuralları"})
        self.assertEqual(m.status, "open")
        self.assertEqual(m.topics, frozenset({"Yazım Kuralları"}))

    def test_rejects_unknown_status(self) -> None:
        with self.assertRaises(InvalidInput):
            mistake_from_store({"id": "m1", "user_id": "u1", "course_name": "Türkçe", "status": "done"})


class CatalogTests(unittest.TestCase):
    def test_aliases(self) -> None:
        self.assertEqual(canonical_subject("Din Kültürü"), "Din Kültürü ve Ahlak Bilgisi")
        self.assertEqual(canonical_subject(" Matematik "), "Matematik")
        self.assertEqual(canonical_subject("Tarih"), "Tarih")

    def test_topics(self) -> None:
        self.assertIn("Olasılık", subject_topics("Matematik"))
        self.assertEqual(subject_topics("Tarih"), [])


if __name__ == "__main__":
    unittest.main()
