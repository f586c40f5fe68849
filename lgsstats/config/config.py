from __future__ import annotations

"""Configuration loading and validation for the scoring engine.

This module loads YAML configuration, applies defaults, and validates the
values the engine takes as explicit parameters: penalty divisors, the
subject table, level and badge thresholds, goals and trend windows.
"""

import copy
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

import yaml
from pydantic import BaseModel, Field, ValidationError

from ..errors import InvalidInput
from ..gamification.progress import BadgeRules, Level
from ..records.schema import SubjectMeta

logger = logging.getLogger(__name__)

DEFAULTS_PATH = Path(__file__).with_name("defaults.yml")


class PenaltyConfig(BaseModel):
    practice: float = Field(4, gt=0)
    exam: float = Field(3, gt=0)


class LevelThreshold(BaseModel):
    level: Level
    min_points: int = Field(ge=0)


class BadgeConfig(BaseModel):
    first_test: int = Field(1, ge=1)
    five_tests: int = Field(5, ge=1)
    seven_day_streak: int = Field(7, ge=1)


class GoalsConfig(BaseModel):
    daily: int = Field(1, ge=1)
    weekly: int = Field(3, ge=1)


class TrendConfig(BaseModel):
    last_n: int = Field(5, ge=1)
    window_size: int = Field(5, ge=1)
    exam_window_size: int = Field(3, ge=1)
    min_baseline: int = Field(3, ge=1)


class EngineConfig(BaseModel):
    penalty: PenaltyConfig = Field(default_factory=PenaltyConfig)
    subjects: List[SubjectMeta]
    levels: List[LevelThreshold]
    points_per_test: int = Field(10, gt=0)
    badges: BadgeConfig = Field(default_factory=BadgeConfig)
    goals: GoalsConfig = Field(default_factory=GoalsConfig)
    trends: TrendConfig = Field(default_factory=TrendConfig)

    def subject_meta(self) -> Dict[str, SubjectMeta]:
        return {s.name: s for s in self.subjects}

    def level_thresholds(self) -> Tuple[Tuple[Level, int], ...]:
        return tuple((t.level, t.min_points) for t in sorted(self.levels, key=lambda t: t.min_points))

    def badge_rules(self) -> BadgeRules:
        return BadgeRules(**self.badges.model_dump())


def _load_yaml(path: Path) -> Dict[str, Any]:
    with path.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise InvalidInput(f"Config file {path} must contain a mapping at the top level")
    return data


def load_config(path: Optional[str] = None) -> Dict[str, Any]:
    """Load configuration from YAML or defaults.

    Args:
        path: Optional path to a YAML config. If None, use package defaults.

    Returns:
        A dictionary with configuration values.
    """
    return _load_yaml(Path(path) if path else DEFAULTS_PATH)


def _positive(section: Dict[str, Any], key: str, fallback: Any) -> None:
    value = section.get(key)
    if isinstance(value, bool) or not isinstance(value, (int, float)) or value <= 0:
        logger.warning("Invalid %s=%r, using %r", key, value, fallback)
        section[key] = fallback


def validate_config(cfg: Dict[str, Any]) -> EngineConfig:
    """Apply defaults and validate configuration values.

    Missing or empty sections come from the packaged defaults; a
    section that is not a mapping raises InvalidInput. Non-positive
    divisors and goal targets fall back to the default with a warning;
    anything else that fails validation raises InvalidInput.

    Args:
        cfg: The raw configuration dictionary.

    Returns:
        The validated EngineConfig.
    """
    defaults = _load_yaml(DEFAULTS_PATH)
    if not isinstance(cfg, dict):
        raise InvalidInput(f"configuration must be a mapping, got {type(cfg).__name__}")
    cfg = copy.deepcopy(cfg)

    # Shallow defaults for missing or empty sections
    for section in ("penalty", "badges", "goals", "trends"):
        if cfg.get(section) is None:
            cfg[section] = {}
        elif not isinstance(cfg[section], dict):
            raise InvalidInput(f"config section {section!r} must be a mapping, got {cfg[section]!r}")
        for key, value in defaults[section].items():
            cfg[section].setdefault(key, value)
    for key in ("subjects", "levels", "points_per_test"):
        if cfg.get(key) is None:
            cfg[key] = defaults[key]

    for key in ("practice", "exam"):
        _positive(cfg["penalty"], key, defaults["penalty"][key])
    for key in ("daily", "weekly"):
        _positive(cfg["goals"], key, defaults["goals"][key])

    levels = cfg["levels"]
    if not isinstance(levels, list):
        raise InvalidInput(f"levels must be a list, got {levels!r}")
    mins = [t.get("min_points") for t in levels if isinstance(t, dict)]
    if not levels or (len(mins) == len(levels) and 0 not in mins):
        logger.warning("Level thresholds must start at 0 points, using defaults")
        cfg["levels"] = defaults["levels"]

    try:
        return EngineConfig.model_validate(cfg)
    except ValidationError as exc:
        raise InvalidInput(f"invalid configuration: {exc}") from exc


def default_config() -> EngineConfig:
    return validate_config(load_config())
