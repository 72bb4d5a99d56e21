# Area: Shared
"""
emoji_hunt.settings — Game constants
=====================================

Validated constants controlling level size, timing, penalties and the
combo window. Defaults match the shipped game; every field can be
overridden from a config file or the environment (see ``config.py``).
"""

from __future__ import annotations
from typing import Dict

from pydantic import BaseModel, ConfigDict, Field, model_validator

from ._engine.enums import Difficulty


def _default_time_limits() -> Dict[Difficulty, int]:
    return {Difficulty.EASY: 20, Difficulty.MEDIUM: 14, Difficulty.HARD: 8}


class GameSettings(BaseModel):
    """
    Tunable game constants.

    Attributes:
        base_time_limits:          Seconds per round at level 0, per difficulty
        min_time_limit:            Floor for the per-round time limit (seconds)
        level_step_for_time:       Levels per one-second reduction of the limit
        base_emoji_count:          Candidates shown at level 1
        emoji_increment_per_level: Extra candidates per level
        max_emojis:                Cap on candidates per round
        hint_penalty_seconds:      Time charged for using the hint
        wrong_penalty_seconds:     Time charged for each wrong selection
        max_wrong_attempts:        Wrong selections that lose the round
        max_level:                 Last level; a correct answer here wins
        combo_time_window_ms:      Window for chaining correct answers
        combo_max_multiplier:      Cap on the combo multiplier
        time_warning_seconds:      Remaining time that triggers the warning
    """

    model_config = ConfigDict(frozen=True)

    base_time_limits: Dict[Difficulty, int] = Field(default_factory=_default_time_limits)
    min_time_limit: int = Field(default=5, ge=1)
    level_step_for_time: int = Field(default=5, ge=1)
    base_emoji_count: int = Field(default=6, ge=1)
    emoji_increment_per_level: int = Field(default=2, ge=0)
    max_emojis: int = Field(default=36, ge=1)
    hint_penalty_seconds: float = Field(default=3, ge=0)
    wrong_penalty_seconds: float = Field(default=1, ge=0)
    max_wrong_attempts: int = Field(default=3, ge=1)
    max_level: int = Field(default=50, ge=1)
    combo_time_window_ms: int = Field(default=3000, ge=0)
    combo_max_multiplier: int = Field(default=5, ge=1)
    time_warning_seconds: float = Field(default=5, ge=0)

    @model_validator(mode="after")
    def _check_consistency(self) -> "GameSettings":
        missing = [d.value for d in Difficulty if d not in self.base_time_limits]
        if missing:
            raise ValueError(f"base_time_limits missing difficulties: {missing}")
        for difficulty, seconds in self.base_time_limits.items():
            if seconds < 1:
                raise ValueError(
                    f"base_time_limits[{difficulty.value}] must be positive"
                )
        if self.base_emoji_count > self.max_emojis:
            raise ValueError("base_emoji_count cannot exceed max_emojis")
        return self

    def base_time_for(self, difficulty: Difficulty) -> int:
        return self.base_time_limits.get(
            difficulty, self.base_time_limits[Difficulty.MEDIUM]
        )


DEFAULT_SETTINGS = GameSettings()
