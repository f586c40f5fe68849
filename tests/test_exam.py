import itertools
import unittest

from lgsstats.errors import MissingReferenceData
from lgsstats.records import SubjectMeta, SubjectScore, default_subject_meta
from lgsstats.scoring import (
    subject_breakdown,
    subject_max_questions,
    total_net_across_subjects,
    total_questions,
    weighted_total,
)


class WeightedTotalTests(unittest.TestCase):
    def setUp(self) -> None:
        self.meta = default_subject_meta()

    def test_worked_example(self) -> None:
        scores = {
            "Türkçe": SubjectScore(correct=16, wrong=3),
            "İngilizce": SubjectScore(correct=8, wrong=2),
        }
        result = weighted_total(scores, self.meta)
        self.assertEqual(result.total, 111.7)
        self.assertEqual(result.skipped, ())

    def test_unknown_subject_is_skipped_and_reported(self) -> None:
        scores = {
            "Türkçe": SubjectScore(correct=10),
            "Tarih": SubjectScore(correct=10),
        }
        with self.assertLogs("lgsstats.scoring.exam", level="WARNING"):
            result = weighted_total(scores, self.meta)
        self.assertEqual(result.total, 50.0)
        self.assertEqual(result.skipped, ("Tarih",))

    def test_order_invariant(self) -> None:
        items = [
            ("Türkçe", SubjectScore(correct=13, wrong=4, empty=3)),
            ("Matematik", SubjectScore(correct=7, wrong=5, empty=8)),
            ("Fen Bilgisi", SubjectScore(correct=11, wrong=7, empty=2)),
            ("İngilizce", SubjectScore(correct=9, wrong=1)),
        ]
        totals = {weighted_total(dict(p), self.meta).total for p in itertools.permutations(items)}
        self.assertEqual(len(totals), 1)

    def test_custom_weights_and_divisor(self) -> None:
        meta = {"A": SubjectMeta(name="A", max_questions=10, weight=2)}
        result = weighted_total({"A": SubjectScore(correct=8, wrong=4)}, meta, penalty_divisor=4)
        self.assertEqual(result.total, 14.0)

    def test_empty_input(self) -> None:
        self.assertEqual(weighted_total({}, self.meta).total, 0.0)


class TotalsTests(unittest.TestCase):
    def test_total_net_across_subjects(self) -> None:
        scores = {
            "Türkçe": SubjectScore(correct=16, wrong=3),
            "Matematik": SubjectScore(correct=10, wrong=6),
            "Tarih": SubjectScore(correct=10),
        }
        self.assertAlmostEqual(total_net_across_subjects(scores), 15 + 8)

    def test_total_net_floors_each_subject(self) -> None:
        scores = {"Türkçe": SubjectScore(correct=0, wrong=9), "Matematik": SubjectScore(correct=5)}
        self.assertAlmostEqual(total_net_across_subjects(scores), 5)

    def test_total_questions(self) -> None:
        scores = {"Türkçe": SubjectScore(correct=1, wrong=2, empty=3), "Matematik": SubjectScore(empty=4)}
        self.assertEqual(total_questions(scores), 10)


class MaxQuestionsTests(unittest.TestCase):
    def test_core_subjects_have_twenty(self) -> None:
        for name in ("Türkçe", "Matematik", "Fen Bilgisi"):
            self.assertEqual(subject_max_questions(name), 20)

    def test_other_subjects_have_ten(self) -> None:
        for name in ("Sosyal Bilgiler", "Din Kültürü ve Ahlak Bilgisi", "İngilizce"):
            self.assertEqual(subject_max_questions(name), 10)

    def test_aliases(self) -> None:
        self.assertEqual(subject_max_questions("Fen Bilimleri"), 20)
        self.assertEqual(subject_max_questions("Din Kültürü"), 10)

    def test_unknown_subject(self) -> None:
        with self.assertRaises(MissingReferenceData) as ctx:
            subject_max_questions("Tarih")
        self.assertEqual(ctx.exception.subject, "Tarih")

    def test_custom_table(self) -> None:
        meta = {"A": SubjectMeta(name="A", max_questions=40, weight=1)}
        self.assertEqual(subject_max_questions("A", meta), 40)
        with self.assertRaises(MissingReferenceData):
            subject_max_questions("Türkçe", meta)


class BreakdownTests(unittest.TestCase):
    def test_curriculum_order_and_rate(self) -> None:
        scores = {
            "İngilizce": SubjectScore(correct=8, wrong=3),
            "Türkçe": SubjectScore(correct=16, wrong=3),
        }
        rows = subject_breakdown(scores)
        self.assertEqual([r.subject for r in rows], ["Türkçe", "İngilizce"])
        self.assertAlmostEqual(rows[0].net, 15)
        self.assertEqual(rows[0].max_questions, 20)
        self.assertAlmostEqual(rows[0].net_rate, 75)
        self.assertAlmostEqual(rows[1].net_rate, 70)


if __name__ == "__main__":
    unittest.main()
