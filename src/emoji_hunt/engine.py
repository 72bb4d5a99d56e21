# Area: Engine
"""
emoji_hunt.engine — Game Session Engine
=======================================

Finite-state controller for one game session: level progression, the
round countdown, scoring with the combo multiplier, hints, pause/resume
and the win/loss transitions.

The engine owns no thread or timer. A scheduler (render loop, fixed
interval, terminal prompt) calls ``tick()``; player commands are plain
synchronous method calls. Calls that do not make sense in the current
state are ignored rather than raising.

Usage:
    engine = GameSessionEngine(observers=[MyShell()])
    engine.start_session(Difficulty.EASY)
    engine.tick()
    engine.select_emoji("🐶")
"""

from __future__ import annotations

import logging
import random
from typing import Any, Callable, Dict, Iterable, List, Optional

from ._engine.clock import RoundClock, monotonic_ms
from ._engine.combo import ComboTracker
from ._engine.enums import Difficulty, LossReason, SessionEvent, SessionState
from ._engine.round_builder import (
    HintPosition,
    build_candidate_pool,
    grid_columns,
    locate_target,
    pick_target,
    pool_size_for_level,
)
from ._engine.scoring import calculate_score, calculate_stars, time_limit_for
from ._engine.session import Round, Session
from ._engine.state_machine import SessionStateMachine
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
from .observers import SessionObserver, notify_observers
from .settings import DEFAULT_SETTINGS, GameSettings
from .vocabulary import normalize_vocabulary

logger = logging.getLogger("emoji_hunt.engine")


class GameSessionEngine:
    """
    Controller for a single game session.

    One engine serves one player at a time; ``start_session`` or
    ``reset_session`` discards whatever round was in flight.

    Args:
        vocabulary: Emoji strings to draw targets and decoys from
        settings: Game constants (defaults to the shipped values)
        observers: Receivers of session events
        clock: Callable returning the current time in milliseconds
        rng: Random source for targets and grid layout
    """

    def __init__(
        self,
        vocabulary: Optional[Iterable[str]] = None,
        settings: Optional[GameSettings] = None,
        observers: Optional[Iterable[SessionObserver]] = None,
        clock: Optional[Callable[[], float]] = None,
        rng: Optional[random.Random] = None,
    ):
        self.vocabulary = normalize_vocabulary(vocabulary)
        self.settings = settings or DEFAULT_SETTINGS
        self._observers: List[SessionObserver] = list(observers or [])
        self._clock = clock or monotonic_ms
        # Time added by tick(elapsed_ms) beyond what the clock reports
        self._offset_ms = 0.0
        self._rng = rng or random.Random()

        self._machine = SessionStateMachine()
        self._session = Session()
        self._combo = ComboTracker(
            window_ms=self.settings.combo_time_window_ms,
            max_multiplier=self.settings.combo_max_multiplier,
        )

    # ── Observers ────────────────────────────────────────────

    def add_observer(self, observer: SessionObserver) -> None:
        if observer not in self._observers:
            self._observers.append(observer)

    def remove_observer(self, observer: SessionObserver) -> None:
        if observer in self._observers:
            self._observers.remove(observer)

    def _notify(self, method_name: str, event: Any) -> None:
        notify_observers(self._observers, method_name, event)

    # ── Read-only state ──────────────────────────────────────

    def _now(self) -> float:
        return float(self._clock()) + self._offset_ms

    def _advance_to(self, timestamp_ms: float) -> float:
        """Move engine time forward to *timestamp_ms*; it never moves back."""
        now = self._now()
        if timestamp_ms > now:
            self._offset_ms += timestamp_ms - now
            return timestamp_ms
        return now

    @property
    def state(self) -> SessionState:
        return self._machine.current_state

    @property
    def level(self) -> int:
        return self._session.level

    @property
    def score(self) -> int:
        return self._session.score

    @property
    def difficulty(self) -> Difficulty:
        return self._session.difficulty

    @property
    def combo_multiplier(self) -> int:
        return self._combo.current(self._now())

    @property
    def wrong_attempts(self) -> int:
        return self._session.wrong_attempts

    @property
    def hint_used(self) -> bool:
        return self._session.hint_used

    @property
    def current_round(self) -> Optional[Round]:
        return self._session.round

    @property
    def target(self) -> Optional[str]:
        return self._session.round.target if self._session.round else None

    @property
    def candidates(self) -> tuple:
        return self._session.round.candidates if self._session.round else ()

    def time_limit(self, level: Optional[int] = None) -> int:
        """Seconds allowed at *level* (defaults to the current level)."""
        return time_limit_for(
            level if level is not None else self._session.level,
            self._session.difficulty,
            self.settings,
        )

    def remaining_seconds(self) -> Optional[float]:
        round_ = self._session.round
        if round_ is None:
            return None
        return max(0.0, round_.clock.remaining_seconds(self._now()))

    # ── Lifecycle ────────────────────────────────────────────

    def start_session(self, difficulty: Any = None) -> Optional[RoundStarted]:
        """
        Start a new session at level 1 and begin its first round.

        Any session in progress is discarded. Unknown difficulties
        resolve to Medium.
        """
        self._combo.reset()
        self._session.clear()
        self._session.difficulty = Difficulty.parse(difficulty)
        self._machine.reset()
        self._machine.transition(SessionEvent.START)
        logger.info(f"Session started ({self._session.difficulty.value})")
        return self.start_round()

    def start_round(self) -> Optional[RoundStarted]:
        """
        Set up the round for the current level and start its countdown.

        Returns:
            The RoundStarted event, or None if the session is not running
        """
        if not self._machine.is_running:
            logger.debug("start_round ignored: session not running")
            return None

        session = self._session
        level = session.level
        previous = session.round.target if session.round else session.previous_target
        target = pick_target(self.vocabulary, previous, self._rng)
        size = pool_size_for_level(level, self.settings)
        candidates = build_candidate_pool(target, self.vocabulary, size, self._rng)
        time_limit = self.time_limit(level)

        session.round = Round(
            level=level,
            target=target,
            candidates=candidates,
            columns=grid_columns(len(candidates)),
            time_limit=time_limit,
            clock=RoundClock(time_limit, self._now()),
        )
        session.previous_target = target

        logger.info(
            f"Round started: level={level} target={target} "
            f"candidates={len(candidates)} limit={time_limit}s"
        )
        event = RoundStarted(
            level=level,
            target=target,
            candidates=candidates,
            columns=session.round.columns,
            time_limit=time_limit,
        )
        self._notify("on_round_started", event)
        return event

    def reset_session(self) -> None:
        """Return to Idle and clear every session field."""
        self._combo.reset()
        self._session.clear()
        self._machine.transition(SessionEvent.RESET)
        logger.info("Session reset")

    # ── Clock ────────────────────────────────────────────────

    def tick(self, elapsed_ms: Optional[float] = None) -> Optional[float]:
        """
        Advance the round clock.

        Args:
            elapsed_ms: Milliseconds since the previous clock reading, as
                reported by a frame scheduler. When omitted the engine
                clock is read instead.

        Returns:
            Remaining seconds of the round (frozen while paused), or None
            when no round is active
        """
        round_ = self._session.round
        if round_ is None or round_.finished:
            return None

        if elapsed_ms is None:
            now = self._now()
        else:
            now = self._advance_to(
                round_.clock.last_timestamp_ms + max(0.0, float(elapsed_ms))
            )
        remaining = round_.clock.remaining_seconds(now)
        if not self._machine.is_running:
            return max(0.0, remaining)

        if remaining <= 0:
            self._lose(LossReason.TIMEOUT, now)
            return 0.0

        if not round_.warning_sent and remaining <= self.settings.time_warning_seconds:
            round_.warning_sent = True
            self._notify(
                "on_time_warning",
                TimeWarning(level=round_.level, remaining_seconds=remaining),
            )
        return remaining

    # ── Player commands ──────────────────────────────────────

    def select_emoji(self, candidate: str) -> Optional[bool]:
        """
        Handle the player picking *candidate*.

        Returns:
            True for the target, False for a decoy, None when ignored
            (paused, not running, or not one of the round's candidates)
        """
        round_ = self._session.round
        if not self._machine.is_running or round_ is None or round_.finished:
            logger.debug("select_emoji ignored: no active round")
            return None
        if not round_.contains(candidate):
            logger.debug(f"select_emoji ignored: {candidate!r} not in the grid")
            return None

        now = self._now()
        if round_.clock.is_expired(now):
            self._lose(LossReason.TIMEOUT, now)
            return None

        if candidate == round_.target:
            self._win_round(round_, now)
            return True

        self._miss(round_, candidate, now)
        return False

    def use_hint(self) -> Optional[HintPosition]:
        """
        Reveal the target's grid position, once per round.

        Charges the hint penalty against the round clock.

        Returns:
            1-based (row, column) of the target, or None when ignored
        """
        round_ = self._session.round
        if not self._machine.is_running or round_ is None or round_.finished:
            return None
        now = self._now()
        if round_.clock.is_expired(now):
            self._lose(LossReason.TIMEOUT, now)
            return None
        if round_.hint_used:
            logger.debug("use_hint ignored: hint already used this round")
            return None

        position = locate_target(round_.candidates, round_.target, round_.columns)
        if position is None:
            return None

        round_.hint_used = True
        round_.clock.add_penalty(self.settings.hint_penalty_seconds)
        remaining = round_.clock.remaining_seconds(now)
        logger.info(
            f"Hint used: level={round_.level} row={position.row} col={position.column}"
        )
        self._notify(
            "on_hint_used",
            HintUsed(
                level=round_.level,
                row=position.row,
                column=position.column,
                remaining_seconds=max(0.0, remaining),
            ),
        )
        return position

    def toggle_pause(self) -> Optional[bool]:
        """
        Pause a running round or resume a paused one.

        Returns:
            True if now paused, False if now running, None when ignored
        """
        round_ = self._session.round
        if round_ is None or round_.finished:
            return None

        now = self._now()
        if self._machine.is_running:
            if round_.clock.is_expired(now):
                self._lose(LossReason.TIMEOUT, now)
                return None
            round_.clock.freeze(now)
            self._machine.transition(SessionEvent.PAUSE)
            paused = True
        elif self._machine.is_paused:
            round_.clock.unfreeze(now)
            self._machine.transition(SessionEvent.RESUME)
            paused = False
        else:
            return None

        remaining = max(0.0, round_.clock.remaining_seconds(now))
        self._notify(
            "on_pause_changed",
            PauseChanged(paused=paused, remaining_seconds=remaining),
        )
        return paused

    # ── Transitions ──────────────────────────────────────────

    def _win_round(self, round_: Round, now: float) -> None:
        session = self._session
        round_.finished = True
        round_.clock.freeze(now)

        remaining = round_.clock.remaining_seconds(now)
        time_taken = int(round_.clock.elapsed_ms(now) // 1000)
        combo = self._combo.register_correct(now)

        breakdown = calculate_score(
            remaining_seconds=remaining,
            level=round_.level,
            hint_used=round_.hint_used,
            wrong_attempts=round_.wrong_attempts,
            combo_multiplier=combo,
        )
        session.score += breakdown.total
        logger.info(
            f"Round won: level={round_.level} +{breakdown.total} "
            f"(x{combo}) score={session.score}"
        )

        if round_.level >= self.settings.max_level:
            self._machine.transition(SessionEvent.GAME_COMPLETE)
            logger.info(f"Game complete: score={session.score}")
            self._notify(
                "on_game_complete",
                GameComplete(
                    level=round_.level,
                    score=session.score,
                    time_taken=time_taken,
                    combo=combo,
                    difficulty=session.difficulty.value,
                ),
            )
            return

        self._machine.transition(SessionEvent.ROUND_WON)
        session.level = round_.level + 1
        self._notify(
            "on_round_won",
            RoundWon(
                level=round_.level,
                time_taken=time_taken,
                stars=calculate_stars(time_taken, round_.time_limit),
                score=session.score,
                score_gained=breakdown.total,
                combo=combo,
                difficulty=session.difficulty.value,
            ),
        )

        # An observer may have reset or restarted the session.
        if self._machine.is_running and session.round is round_:
            self.start_round()

    def _miss(self, round_: Round, candidate: str, now: float) -> None:
        round_.wrong_attempts += 1
        self._combo.break_combo()
        round_.clock.add_penalty(self.settings.wrong_penalty_seconds)
        remaining = round_.clock.remaining_seconds(now)
        logger.info(
            f"Wrong selection: level={round_.level} "
            f"attempt {round_.wrong_attempts}/{self.settings.max_wrong_attempts}"
        )
        self._notify(
            "on_wrong_selection",
            WrongSelection(
                level=round_.level,
                selected=candidate,
                wrong_attempts=round_.wrong_attempts,
                remaining_seconds=max(0.0, remaining),
            ),
        )
        if round_.wrong_attempts >= self.settings.max_wrong_attempts and not round_.finished:
            self._lose(LossReason.WRONG_ATTEMPTS, now)

    def _lose(self, reason: LossReason, now: float) -> None:
        round_ = self._session.round
        if round_ is None or round_.finished:
            return
        round_.finished = True
        round_.clock.freeze(now)
        self._machine.transition(SessionEvent.ROUND_LOST)
        logger.info(
            f"Round lost ({reason.value}): level={round_.level} score={self._session.score}"
        )
        self._notify(
            "on_round_lost",
            RoundLost(
                level=round_.level,
                score=self._session.score,
                difficulty=self._session.difficulty.value,
                reason=reason.value,
            ),
        )

    # ── Introspection ────────────────────────────────────────

    def snapshot(self) -> Dict[str, Any]:
        """Serializable view of the session and the current round."""
        session = self._session
        round_ = session.round
        now = self._now()
        data: Dict[str, Any] = {
            "state": self.state.value,
            "level": session.level,
            "score": session.score,
            "difficulty": session.difficulty.value,
            "combo_multiplier": self._combo.current(now),
            "wrong_attempts": session.wrong_attempts,
            "hint_used": session.hint_used,
            "round": None,
        }
        if round_ is not None:
            remaining = max(0.0, round_.clock.remaining_seconds(now))
            data["round"] = {
                "level": round_.level,
                "target": round_.target,
                "candidates": list(round_.candidates),
                "columns": round_.columns,
                "time_limit": round_.time_limit,
                "remaining_seconds": round(remaining, 3),
                "remaining_fraction": round(remaining / round_.time_limit, 3),
                "finished": round_.finished,
            }
        return data
