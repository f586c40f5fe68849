from .progress import (
    DEFAULT_LEVEL_THRESHOLDS,
    POINTS_PER_TEST,
    BadgeKey,
    BadgeRules,
    GoalProgress,
    Level,
    LevelProgress,
    ProgressState,
    evaluate_badges,
    goal_progress,
    level_for,
    newly_earned,
    points_for,
    progress_state,
)

__all__ = [
    "DEFAULT_LEVEL_THRESHOLDS",
    "POINTS_PER_TEST",
    "BadgeKey",
    "BadgeRules",
    "GoalProgress",
    "Level",
    "LevelProgress",
    "ProgressState",
    "evaluate_badges",
    "goal_progress",
    "level_for",
    "newly_earned",
    "points_for",
    "progress_state",
]
