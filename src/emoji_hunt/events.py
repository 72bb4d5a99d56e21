"""
emoji_hunt.events — Session lifecycle events
=============================================

Payloads the engine hands to observers, one per transition. Presentation
shells use them to drive animations, sounds and navigation.
"""

from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional, Tuple


@dataclass(frozen=True)
class RoundStarted:
    """
    A new round is ready to be played.

    Attributes:
        level: Level of the round
        target: Emoji the player must find
        candidates: Candidates in grid order (row-major)
        columns: Number of grid columns
        time_limit: Seconds available for the round
    """

    level: int
    target: str
    candidates: Tuple[str, ...]
    columns: int
    time_limit: int

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["candidates"] = list(self.candidates)
        return data


@dataclass(frozen=True)
class WrongSelection:
    """A decoy was selected."""

    level: int
    selected: str
    wrong_attempts: int
    remaining_seconds: float

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class HintUsed:
    """The hint was revealed for the current round."""

    level: int
    row: int
    column: int
    remaining_seconds: float

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class TimeWarning:
    """Remaining time dropped below the warning threshold."""

    level: int
    remaining_seconds: float

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class PauseChanged:
    """The session was paused or resumed."""

    paused: bool
    remaining_seconds: float

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class RoundWon:
    """
    The target was found below the last level.

    Attributes:
        level: Level that was just completed
        time_taken: Whole seconds used, penalties included
        stars: Rating from 1 to 3
        score: Session score after this round
        score_gained: Points awarded for this round
        combo: Combo multiplier applied
        difficulty: Difficulty of the session
    """

    level: int
    time_taken: int
    stars: int
    score: int
    score_gained: int
    combo: int
    difficulty: str

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class GameComplete:
    """The target was found at the last level; the session is won."""

    level: int
    score: int
    time_taken: int
    combo: int
    difficulty: str

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class RoundLost:
    """
    The round was lost and the session ended.

    Attributes:
        level: Level reached
        score: Final session score
        difficulty: Difficulty of the session
        reason: 'timeout' or 'wrong_attempts'
    """

    level: int
    score: int
    difficulty: str
    reason: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
