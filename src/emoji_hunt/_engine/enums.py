# Area: Engine
"""
emoji_hunt._engine.enums — Session State Machine Enums
======================================================

Defines the states and events for the game session state machine,
and the difficulty presets.
"""

from __future__ import annotations
from enum import Enum
from typing import Any


class SessionState(Enum):
    """
    States of the session state machine.

    State transitions:
    IDLE -> RUNNING (on START)
    RUNNING -> PAUSED (on PAUSE)
    PAUSED -> RUNNING (on RESUME)
    RUNNING -> RUNNING (on ROUND_WON, next level begins)
    RUNNING -> ENDED (on GAME_COMPLETE or ROUND_LOST)
    ENDED -> RUNNING (on START)
    Any state -> IDLE (on RESET)
    """
    IDLE = "IDLE"
    RUNNING = "RUNNING"
    PAUSED = "PAUSED"
    ENDED = "ENDED"


class SessionEvent(Enum):
    """
    Events that trigger session state transitions.

    Events are triggered by:
    - START: start_session() called
    - PAUSE / RESUME: toggle_pause() called
    - ROUND_WON: target selected below the last level
    - GAME_COMPLETE: target selected at the last level
    - ROUND_LOST: time ran out or too many wrong selections
    - RESET: reset_session() called
    """
    START = "START"
    PAUSE = "PAUSE"
    RESUME = "RESUME"
    ROUND_WON = "ROUND_WON"
    GAME_COMPLETE = "GAME_COMPLETE"
    ROUND_LOST = "ROUND_LOST"
    RESET = "RESET"


class Difficulty(Enum):
    """Difficulty presets; each maps to a base time limit per round."""
    EASY = "Easy"
    MEDIUM = "Medium"
    HARD = "Hard"

    @classmethod
    def parse(cls, value: Any) -> "Difficulty":
        """
        Resolve a stored or user-supplied difficulty.

        Accepts enum members and names/values in any case. Anything
        else (None, typos, wrong types) resolves to MEDIUM.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            wanted = value.strip().lower()
            for member in cls:
                if member.value.lower() == wanted:
                    return member
        return cls.MEDIUM


class LossReason(Enum):
    """Why a round was lost."""
    TIMEOUT = "timeout"
    WRONG_ATTEMPTS = "wrong_attempts"
