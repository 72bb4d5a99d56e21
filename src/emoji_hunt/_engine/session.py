# Area: Engine
"""
emoji_hunt._engine.session — Session and round state
====================================================

Plain data holders for the session owned by the engine and for the
round currently being played. Only the engine mutates them.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Optional, Tuple
import logging

from .clock import RoundClock
from .enums import Difficulty

logger = logging.getLogger("emoji_hunt.engine.session")


@dataclass
class Round:
    """One "find the target" round at a given level."""
    level: int
    target: str
    candidates: Tuple[str, ...]
    columns: int
    time_limit: int
    clock: RoundClock
    wrong_attempts: int = 0
    hint_used: bool = False
    warning_sent: bool = False
    finished: bool = False

    def contains(self, candidate: str) -> bool:
        return candidate in self.candidates


@dataclass
class Session:
    """
    Full state of one game session.

    The engine maintains this internally; collaborators read it through
    ``GameSessionEngine.snapshot()``.
    """
    level: int = 1
    score: int = 0
    difficulty: Difficulty = Difficulty.MEDIUM
    previous_target: Optional[str] = None
    round: Optional[Round] = field(default=None, repr=False)

    @property
    def wrong_attempts(self) -> int:
        return self.round.wrong_attempts if self.round else 0

    @property
    def hint_used(self) -> bool:
        return self.round.hint_used if self.round else False

    def clear(self) -> None:
        """Reset every field to its default."""
        logger.debug("Session cleared")
        self.level = 1
        self.score = 0
        self.difficulty = Difficulty.MEDIUM
        self.previous_target = None
        self.round = None
