# Area: Engine
"""Scoring functions for a won round."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Dict, TYPE_CHECKING

from .enums import Difficulty

if TYPE_CHECKING:
    from ..settings import GameSettings

BASE_POINTS = 50
LEVEL_POINTS = 5
NO_HINT_BONUS = 20
WRONG_ATTEMPT_POINTS = 5
COMBO_STEP_POINTS = 15
MIN_POINTS = 10


@dataclass(frozen=True)
class ScoreBreakdown:
    """Components of the points awarded for one correct answer."""
    time_bonus: int
    level_bonus: int
    hint_bonus: int
    wrong_penalty: int
    combo_bonus: int
    combo_multiplier: int
    total: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "time_bonus": self.time_bonus,
            "level_bonus": self.level_bonus,
            "hint_bonus": self.hint_bonus,
            "wrong_penalty": self.wrong_penalty,
            "combo_bonus": self.combo_bonus,
            "combo_multiplier": self.combo_multiplier,
            "total": self.total,
        }


def time_limit_for(level: int, difficulty: Difficulty, settings: GameSettings) -> int:
    """Seconds allowed at *level*: one second less every few levels."""
    base = settings.base_time_for(difficulty)
    return max(settings.min_time_limit, base - level // settings.level_step_for_time)


def calculate_score(
    remaining_seconds: float,
    level: int,
    hint_used: bool,
    wrong_attempts: int,
    combo_multiplier: int,
) -> ScoreBreakdown:
    """Points for a correct answer, never less than MIN_POINTS."""
    time_bonus = max(0, math.floor(remaining_seconds * 10))
    level_bonus = level * LEVEL_POINTS
    hint_bonus = 0 if hint_used else NO_HINT_BONUS
    wrong_penalty = wrong_attempts * WRONG_ATTEMPT_POINTS
    combo_bonus = (combo_multiplier - 1) * COMBO_STEP_POINTS

    raw = (
        BASE_POINTS + time_bonus + level_bonus + hint_bonus
        - wrong_penalty + combo_bonus
    ) * combo_multiplier

    return ScoreBreakdown(
        time_bonus=time_bonus,
        level_bonus=level_bonus,
        hint_bonus=hint_bonus,
        wrong_penalty=wrong_penalty,
        combo_bonus=combo_bonus,
        combo_multiplier=combo_multiplier,
        total=max(MIN_POINTS, raw),
    )


def calculate_stars(time_taken: float, time_limit: float) -> int:
    """Rate a won round from 1 to 3 stars by the share of time used."""
    if time_taken <= time_limit * 0.33:
        return 3
    if time_taken <= time_limit * 0.66:
        return 2
    return 1
