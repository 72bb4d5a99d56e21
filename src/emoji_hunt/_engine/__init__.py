# Area: Engine
"""
Internals of the game session engine.

This package contains:
- State machine (states, events, transitions)
- Round clock and combo tracking
- Round setup and scoring rules
"""

from .enums import Difficulty, LossReason, SessionEvent, SessionState
from .state_machine import SessionStateMachine, TRANSITIONS
from .clock import RoundClock, monotonic_ms
from .combo import ComboTracker
from .round_builder import (
    HintPosition,
    build_candidate_pool,
    grid_columns,
    locate_target,
    pick_target,
    pool_size_for_level,
)
from .scoring import ScoreBreakdown, calculate_score, calculate_stars, time_limit_for
from .session import Round, Session

__all__ = [
    "Difficulty",
    "LossReason",
    "SessionEvent",
    "SessionState",
    "SessionStateMachine",
    "TRANSITIONS",
    "RoundClock",
    "monotonic_ms",
    "ComboTracker",
    "HintPosition",
    "build_candidate_pool",
    "grid_columns",
    "locate_target",
    "pick_target",
    "pool_size_for_level",
    "ScoreBreakdown",
    "calculate_score",
    "calculate_stars",
    "time_limit_for",
    "Round",
    "Session",
]
