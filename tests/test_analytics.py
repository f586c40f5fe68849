import tempfile
import unittest
from datetime import datetime, timedelta, timezone
from pathlib import Path

import matplotlib

matplotlib.use("Agg")

from analytics import (  # noqa: E402
    AnalyticsConfig,
    compute_metrics,
    ewma_by_subject,
    plot_radar_subject,
    plot_subject_distribution,
    plot_trend,
    plot_weekly_progress,
    results_frame,
)
from lgsstats.records import SubjectScore, TestResultRecord  # noqa: E402
from lgsstats.stats import radar_profile  # noqa: E402
from lgsstats.trends import weekly_progress  # noqa: E402

NOW = datetime(2024, 5, 15, 12, 0, tzinfo=timezone.utc)


def result(i, subject, correct, wrong=0, empty=0, days_ago=0):
    return TestResultRecord(
        id=f"t{i}",
        owner_id="u1",
        subject=subject,
        score=SubjectScore(correct=correct, wrong=wrong, empty=empty),
        created_at=NOW - timedelta(days=days_ago),
    )


class AnalyticsTests(unittest.TestCase):
    def setUp(self) -> None:
        self.records = [
            result(1, "Türkçe", 15, 5, days_ago=1),
            result(2, "Matematik", 5, 5, 10, days_ago=3),
            result(3, "Türkçe", 10, 0, days_ago=0),
            result(4, "Matematik", 0, 0, 0, days_ago=2),
        ]
        self.cfg = AnalyticsConfig()

    def test_frame_sorted_with_index(self) -> None:
        df = results_frame(self.records)
        self.assertEqual(df["id"].tolist(), ["t2", "t4", "t1", "t3"])
        self.assertEqual(df["test_idx"].tolist(), [0, 1, 2, 3])
        self.assertEqual(str(df["correct"].dtype), "Int64")

    def test_large_counts_fit(self) -> None:
        df = compute_metrics(results_frame([result(9, "Türkçe", 70000, 1, days_ago=0)]), self.cfg)
        self.assertEqual(df.loc[0, "correct"], 70000)
        self.assertEqual(df.loc[0, "total"], 70001)

    def test_empty_frame(self) -> None:
        df = compute_metrics(results_frame([]), self.cfg)
        self.assertTrue(df.empty)
        self.assertIn("net", df.columns)

    def test_metrics(self) -> None:
        df = compute_metrics(results_frame(self.records), self.cfg).set_index("id")
        self.assertAlmostEqual(df.loc["t1", "net"], 13.75)
        self.assertEqual(df.loc["t1", "success_rate"], 75)
        self.assertEqual(df.loc["t1", "band"], "high")
        self.assertEqual(df.loc["t2", "success_rate"], 25)
        self.assertEqual(df.loc["t2", "band"], "low")
        self.assertEqual(df.loc["t4", "success_rate"], 0)
        self.assertEqual(df.loc["t4", "total"], 0)

    def test_penalty_from_config(self) -> None:
        df = compute_metrics(results_frame(self.records), AnalyticsConfig(penalty_divisor=3)).set_index("id")
        self.assertAlmostEqual(df.loc["t2", "net"], 5 - 5 / 3)

    def test_ewma_per_subject(self) -> None:
        df = compute_metrics(results_frame(self.records), self.cfg)
        out = ewma_by_subject(df, value_col="net", span=3)
        self.assertIn("net_smooth", out.columns)
        first = out.groupby("subject", observed=True).head(1)
        for _, row in first.iterrows():
            self.assertAlmostEqual(row["net_smooth"], row["net"], places=4)

    def test_plots_write_files(self) -> None:
        df = ewma_by_subject(compute_metrics(results_frame(self.records), self.cfg), value_col="net", span=3)
        with tempfile.TemporaryDirectory() as tmp:
            out = Path(tmp)
            plot_trend(df, subject="Türkçe", save_path=out / "trend.png")
            plot_subject_distribution(df, save_path=out / "dist.png")
            plot_radar_subject(radar_profile(self.records), save_path=out / "radar.png")
            plot_weekly_progress(weekly_progress(self.records, NOW), save_path=out / "week.png")
            for name in ("trend.png", "dist.png", "radar.png", "week.png"):
                self.assertTrue((out / name).exists(), name)

    def test_plot_trend_unknown_subject_is_noop(self) -> None:
        df = compute_metrics(results_frame(self.records), self.cfg)
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "none.png"
            plot_trend(df, subject="Tarih", save_path=path)
            self.assertFalse(path.exists())


if __name__ == "__main__":
    unittest.main()
