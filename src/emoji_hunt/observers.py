# Area: Observers
"""
emoji_hunt.observers — Session observer interface
==================================================

Presentation shells subclass SessionObserver and override the methods
they care about. The engine calls each method synchronously right after
the corresponding transition has been applied.

Observer failures (a sound that cannot play, a broken widget) are logged
and swallowed by ``notify_observers`` so they can never abort a state
transition of the engine.
"""

from __future__ import annotations
from typing import Any, Iterable
import logging

from .events import (
    GameComplete,
    HintUsed,
    PauseChanged,
    RoundLost,
    RoundStarted,
    RoundWon,
    TimeWarning,
    WrongSelection,
)

logger = logging.getLogger("emoji_hunt.observers")


class SessionObserver:
    """
    Base class for session observers. All methods are no-ops.

    Only ``on_round_won``, ``on_game_complete`` and ``on_round_lost``
    mark session transitions; the remaining methods are feedback hooks
    for sounds and visual effects.
    """

    def on_round_started(self, event: RoundStarted) -> None:
        pass

    def on_wrong_selection(self, event: WrongSelection) -> None:
        pass

    def on_hint_used(self, event: HintUsed) -> None:
        pass

    def on_time_warning(self, event: TimeWarning) -> None:
        pass

    def on_pause_changed(self, event: PauseChanged) -> None:
        pass

    def on_round_won(self, event: RoundWon) -> None:
        pass

    def on_game_complete(self, event: GameComplete) -> None:
        pass

    def on_round_lost(self, event: RoundLost) -> None:
        pass


class RecordingObserver(SessionObserver):
    """Observer that keeps every event it receives, in order."""

    def __init__(self) -> None:
        self.events: list = []

    def _record(self, event: Any) -> None:
        self.events.append(event)

    on_round_started = _record
    on_wrong_selection = _record
    on_hint_used = _record
    on_time_warning = _record
    on_pause_changed = _record
    on_round_won = _record
    on_game_complete = _record
    on_round_lost = _record

    def of_type(self, event_type: type) -> list:
        return [e for e in self.events if isinstance(e, event_type)]


def notify_observers(
    observers: Iterable[SessionObserver],
    method_name: str,
    event: Any,
) -> int:
    """
    Deliver *event* to every observer's *method_name*.

    Returns:
        Number of observers that failed while handling the event
    """
    failures = 0
    for observer in list(observers):
        handler = getattr(observer, method_name, None)
        if handler is None:
            continue
        try:
            handler(event)
        except Exception:
            failures += 1
            logger.exception(
                f"Observer {observer.__class__.__name__}.{method_name} failed"
            )
    return failures
