from __future__ import annotations

"""Matplotlib plots for net trends, subject distribution, radar and weekly progress."""

import os
from typing import Optional, Sequence, Union

import numpy as np
import pandas as pd
import matplotlib.pyplot as plt

from lgsstats.trends import DayProgress

PathLike = Optional[Union[str, bytes, os.PathLike]]


def plot_trend(
    df: pd.DataFrame,
    *,
    subject: Optional[str] = None,
    value_col: str = "net",
    save_path: PathLike = None,
) -> None:
    g = df.copy()
    if subject is not None:
        g = g[g["subject"].astype("string") == subject]
    if g.empty:
        return
    g = g.sort_values("test_idx")
    plt.figure()
    plt.plot(g["test_idx"], g[value_col].astype("float64"), marker="o", linestyle="", label=value_col)
    smooth_col = f"{value_col}_smooth"
    if smooth_col in g.columns:
        plt.plot(g["test_idx"], g[smooth_col], linewidth=2, label=f"{value_col} (EWMA)")
    plt.xlabel("Test")
    plt.ylabel(value_col)
    plt.title(f"Trend ({subject})" if subject else "Trend")
    plt.legend()
    if save_path:
        plt.savefig(save_path, bbox_inches="tight", dpi=150)
    plt.close()


def plot_subject_distribution(
    df: pd.DataFrame,
    *,
    save_path: PathLike = None,
) -> None:
    counts = df["subject"].astype("string").value_counts(sort=False)
    if counts.empty:
        return
    plt.figure()
    plt.pie(counts.to_numpy(), labels=counts.index.tolist(), autopct="%1.0f%%")
    plt.title("Tests per subject")
    if save_path:
        plt.savefig(save_path, bbox_inches="tight", dpi=150)
    plt.close()


def plot_radar_subject(
    profile: dict[str, int],
    *,
    save_path: PathLike = None,
) -> None:
    """Radar of per-subject accuracy; values are already on a 0-100 scale."""
    if not profile:
        return
    labels = list(profile.keys())
    vals = np.array([float(profile[k]) for k in labels])
    vals = np.concatenate([vals, vals[:1]])
    angles = np.linspace(0, 2 * np.pi, len(labels), endpoint=False)
    angles = np.concatenate([angles, angles[:1]])

    fig = plt.figure()
    ax = fig.add_subplot(111, polar=True)
    ax.plot(angles, vals)
    ax.fill(angles, vals, alpha=0.1)
    ax.set_xticks(angles[:-1])
    ax.set_xticklabels(labels)
    ax.set_ylim(0, 100)
    ax.set_title("Subject profile (accuracy %)")
    if save_path:
        plt.savefig(save_path, bbox_inches="tight", dpi=150)
    plt.close()


def plot_weekly_progress(
    days: Sequence[DayProgress],
    *,
    save_path: PathLike = None,
) -> None:
    if not days:
        return
    x = np.arange(len(days))
    fig, ax = plt.subplots()
    ax.bar(x, [d.tests for d in days], color="tab:blue", alpha=0.6, label="tests")
    ax.set_ylabel("Tests")
    ax.set_xticks(x)
    ax.set_xticklabels([d.day.strftime("%a") for d in days])
    ax2 = ax.twinx()
    ax2.plot(x, [d.accuracy for d in days], color="tab:green", marker="o", label="accuracy %")
    ax2.set_ylim(0, 100)
    ax2.set_ylabel("Accuracy %")
    ax.set_title("Last 7 days")
    if save_path:
        plt.savefig(save_path, bbox_inches="tight", dpi=150)
    plt.close(fig)
