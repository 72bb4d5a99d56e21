# Area: Profile
"""
emoji_hunt.results — End-of-game summary
=========================================

Builds what the result screen shows once a session ends and records a
new high score in the profile store.
"""

from __future__ import annotations

import logging
import random
from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional

from ._engine.enums import Difficulty
from .errors import ProfileStoreError
from .profile_store import ProfileStore, load_difficulty, load_high_score, load_username

logger = logging.getLogger("emoji_hunt.results")

HIGH_SCORE_QUOTES = (
    "A new record! Your eyes are faster than lightning.",
    "Nobody has hunted emojis like this before.",
    "Legendary focus. The leaderboard bows to you.",
    "You just raised the bar. Can you raise it again?",
    "Sharp eyes, quick fingers, new high score!",
)

RETRY_QUOTES = (
    "So close! One more round?",
    "Every hunter misses sometimes. Try again!",
    "Practice makes perfect. Go for another run.",
    "The emojis are hiding, not winning. Try again.",
    "Take a breath and hunt again.",
)


@dataclass(frozen=True)
class ResultSummary:
    """Content of the result screen."""
    username: str
    difficulty: str
    score: int
    level: int
    high_score: int
    is_new_high_score: bool
    quote: str

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def _coerce_int(value: Any, default: int) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


def summarize_result(
    store: ProfileStore,
    score: Any,
    level: Any,
    difficulty: Optional[Difficulty] = None,
    rng: Optional[random.Random] = None,
) -> ResultSummary:
    """
    Summarize a finished session and persist a new high score.

    Args:
        store: Profile store to read and update
        score: Final score (coerced to int, invalid -> 0)
        level: Level reached (coerced to int, invalid -> 1)
        difficulty: Session difficulty; read from the store when omitted
        rng: Random source for the quote

    Returns:
        ResultSummary for the result screen
    """
    rng = rng or random.Random()
    score = max(0, _coerce_int(score, 0))
    level = max(1, _coerce_int(level, 1))
    if difficulty is None:
        difficulty = load_difficulty(store)

    previous_high = load_high_score(store)
    is_new_high_score = score > previous_high
    if is_new_high_score:
        try:
            store.set_high_score(score)
            logger.info(f"New high score: {score} (was {previous_high})")
        except ProfileStoreError as e:
            logger.warning(f"Could not save high score: {e}")

    quotes = HIGH_SCORE_QUOTES if is_new_high_score else RETRY_QUOTES
    return ResultSummary(
        username=load_username(store),
        difficulty=Difficulty.parse(difficulty).value,
        score=score,
        level=level,
        high_score=max(score, previous_high),
        is_new_high_score=is_new_high_score,
        quote=rng.choice(quotes),
    )
