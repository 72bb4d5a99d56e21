"""
emoji_hunt — Emoji Hunt Game Session Engine
============================================

Find the target emoji among decoys before the clock runs out. Levels
grow the grid and shrink the time limit; quick consecutive answers build
a combo multiplier.

Quick Start:
    from emoji_hunt import GameSessionEngine, Difficulty, SessionObserver

    class Screen(SessionObserver):
        def on_round_won(self, event): ...
        def on_round_lost(self, event): ...

    engine = GameSessionEngine(observers=[Screen()])
    engine.start_session(Difficulty.EASY)
    # from the render loop:
    engine.tick()
    # from input handlers:
    engine.select_emoji(emoji)
    engine.use_hint()
    engine.toggle_pause()

Terminal play:
    python -m emoji_hunt
"""

from ._engine.enums import Difficulty, LossReason, SessionState
from ._engine.round_builder import HintPosition
from .engine import GameSessionEngine
from .settings import GameSettings, DEFAULT_SETTINGS
from .config import load_settings
from .observers import SessionObserver, RecordingObserver
from .events import (
    RoundStarted,
    WrongSelection,
    HintUsed,
    TimeWarning,
    PauseChanged,
    RoundWon,
    GameComplete,
    RoundLost,
)
from .profile_store import (
    ProfileStore,
    InMemoryProfileStore,
    JsonFileProfileStore,
    Profile,
)
from .results import ResultSummary, summarize_result
from .vocabulary import DEFAULT_EMOJIS
from .errors import (
    EmojiHuntError,
    ConfigurationError,
    ProfileStoreError,
)

__all__ = [
    # Engine
    "GameSessionEngine",
    "Difficulty",
    "LossReason",
    "SessionState",
    "HintPosition",
    # Settings
    "GameSettings",
    "DEFAULT_SETTINGS",
    "load_settings",
    # Observers and events
    "SessionObserver",
    "RecordingObserver",
    "RoundStarted",
    "WrongSelection",
    "HintUsed",
    "TimeWarning",
    "PauseChanged",
    "RoundWon",
    "GameComplete",
    "RoundLost",
    # Profile and results
    "ProfileStore",
    "InMemoryProfileStore",
    "JsonFileProfileStore",
    "Profile",
    "ResultSummary",
    "summarize_result",
    "DEFAULT_EMOJIS",
    # Errors
    "EmojiHuntError",
    "ConfigurationError",
    "ProfileStoreError",
]
__version__ = "1.0.0"
