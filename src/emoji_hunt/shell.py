# Area: Shell
"""
emoji_hunt.shell — Terminal shell
=================================

Plain-text front end around the engine: a home screen that asks for the
player's name and difficulty, the game screen, and the result screen.

The prompt is blocking, so the round clock is ticked right after every
command is read; a round that ran out while the player was typing is
lost before the command is applied.

Commands on the game screen:
    <number>  pick the emoji at that position
    h         hint (costs time)
    p         pause / resume
    q         quit to the result screen
"""

from __future__ import annotations

import logging
import random
from typing import Callable, List, Optional, Union

from ._engine.enums import Difficulty, SessionState
from .engine import GameSessionEngine
from .errors import ProfileStoreError
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
from .observers import SessionObserver
from .profile_store import ProfileStore, load_difficulty, load_high_score, load_username
from .results import ResultSummary, summarize_result

logger = logging.getLogger("emoji_hunt.shell")

DIFFICULTY_CHOICES = {"1": Difficulty.EASY, "2": Difficulty.MEDIUM, "3": Difficulty.HARD}


class TerminalShell(SessionObserver):
    """Interactive text front end for one engine and one profile."""

    def __init__(
        self,
        engine: GameSessionEngine,
        store: ProfileStore,
        input_fn: Callable[[str], str] = input,
        output: Callable[[str], None] = print,
        rng: Optional[random.Random] = None,
    ):
        self.engine = engine
        self.store = store
        self._input = input_fn
        self._output = output
        self._rng = rng or random.Random()
        self._final: Optional[Union[RoundLost, GameComplete]] = None
        engine.add_observer(self)

    # ── I/O helpers ──────────────────────────────────────────

    def _say(self, text: str = "") -> None:
        self._output(text)

    def _ask(self, prompt: str) -> Optional[str]:
        try:
            return self._input(prompt).strip()
        except EOFError:
            return None

    # ── Screens ──────────────────────────────────────────────

    def run(self) -> int:
        """Home → game → result, repeated while the player wants more."""
        if not self.home():
            return 0
        while True:
            summary = self.play_session()
            if summary is not None:
                self.show_result(summary)
            answer = self._ask("Play again? [y/N] ")
            if not answer or answer.lower() not in ("y", "yes"):
                break
        self._say("Bye!")
        return 0

    def home(self) -> bool:
        """Show the home screen; collect missing profile fields."""
        self._say(f"🏆 HS: {load_high_score(self.store)}   👤 {load_username(self.store)}")
        self._say("Emoji Hunt — The Ultimate Memory Rush!")

        if self._profile_incomplete():
            if not self.ask_profile():
                return False
        return True

    def _profile_incomplete(self) -> bool:
        try:
            return not self.store.get_username() or not self.store.get_difficulty()
        except ProfileStoreError as e:
            logger.warning(f"Profile unavailable: {e}")
            return False

    def ask_profile(self) -> bool:
        """Ask for name and difficulty and store them."""
        name = None
        while not name:
            name = self._ask("Enter your name: ")
            if name is None:
                return False
            if not name:
                self._say("Please enter a name.")

        choice = self._ask("Difficulty: 1) Easy  2) Medium  3) Hard [2]: ")
        if choice is None:
            return False
        difficulty = DIFFICULTY_CHOICES.get(choice, Difficulty.parse(choice or None))

        try:
            self.store.set_username(name)
            self.store.set_difficulty(difficulty)
        except ProfileStoreError as e:
            logger.warning(f"Could not save profile: {e}")
        self._say(f"👤 {name} ({difficulty.value})")
        return True

    def play_session(self) -> Optional[ResultSummary]:
        """Play one session to the end. Returns None if the player quits."""
        self._final = None
        difficulty = load_difficulty(self.store)
        self.engine.start_session(difficulty)

        while self.engine.state in (SessionState.RUNNING, SessionState.PAUSED):
            self.render()
            command = self._ask("> ")
            self.engine.tick()
            if self.engine.state == SessionState.ENDED:
                break
            if command is None or command.lower() == "q":
                level, score = self.engine.level, self.engine.score
                self.engine.reset_session()
                return summarize_result(self.store, score, level, difficulty, self._rng)
            self.handle_command(command)

        final = self._final
        if final is None:
            return None
        return summarize_result(self.store, final.score, final.level, difficulty, self._rng)

    def handle_command(self, command: str) -> None:
        command = command.lower()
        if command == "h":
            if self.engine.use_hint() is None:
                self._say("No hint available.")
        elif command == "p":
            self.engine.toggle_pause()
        elif command.isdigit():
            index = int(command) - 1
            candidates = self.engine.candidates
            if 0 <= index < len(candidates):
                self.engine.select_emoji(candidates[index])
            else:
                self._say("No emoji at that position.")
        elif command:
            self._say("Commands: <number>, h, p, q")

    def render(self) -> None:
        """Draw the game screen."""
        round_ = self.engine.current_round
        if round_ is None:
            return
        remaining = self.engine.remaining_seconds() or 0.0
        crosses = "❌" * round_.wrong_attempts + "·" * max(
            0, self.engine.settings.max_wrong_attempts - round_.wrong_attempts
        )
        paused = "  [PAUSED]" if self.engine.state == SessionState.PAUSED else ""
        self._say()
        self._say(
            f"Find the: {round_.target}   Level: {self.engine.level}   "
            f"Score: {self.engine.score}   Time: {int(remaining)}s   {crosses}{paused}"
        )
        for line in self.grid_lines(round_.candidates, round_.columns):
            self._say(line)

    @staticmethod
    def grid_lines(candidates, columns: int) -> List[str]:
        lines = []
        for start in range(0, len(candidates), columns):
            row = candidates[start:start + columns]
            cells = [f"{start + i + 1:>3} {emoji}" for i, emoji in enumerate(row)]
            lines.append("  ".join(cells))
        return lines

    def show_result(self, summary: ResultSummary) -> None:
        self._say()
        self._say(f"🏆 HS: {summary.high_score}   👤 {summary.username}")
        self._say("New High Score! 🎉" if summary.is_new_high_score else "Game Over!")
        self._say(summary.quote)
        self._say(f"Score: {summary.score}")
        self._say(f"🎯 Difficulty: {summary.difficulty}   📊 Level: {summary.level}")

    # ── Observer hooks ───────────────────────────────────────

    def on_round_started(self, event: RoundStarted) -> None:
        logger.debug(f"Round {event.level} on screen")

    def on_wrong_selection(self, event: WrongSelection) -> None:
        self._say(f"Wrong! ({event.wrong_attempts}/{self.engine.settings.max_wrong_attempts})")

    def on_hint_used(self, event: HintUsed) -> None:
        self._say(f"💡 Row {event.row}, Column {event.column}")

    def on_time_warning(self, event: TimeWarning) -> None:
        self._say("⏰ Hurry up!")

    def on_pause_changed(self, event: PauseChanged) -> None:
        self._say("⏸ Paused" if event.paused else "▶️ Resumed")

    def on_round_won(self, event: RoundWon) -> None:
        stars = "⭐" * event.stars
        combo = f"  Combo x{event.combo}!" if event.combo > 1 else ""
        self._say(
            f"Level {event.level} completed in {event.time_taken}s {stars} "
            f"+{event.score_gained}{combo}"
        )

    def on_game_complete(self, event: GameComplete) -> None:
        self._final = event
        self._say(f"🎉 You finished all {event.level} levels!")

    def on_round_lost(self, event: RoundLost) -> None:
        self._final = event
        if event.reason == "timeout":
            self._say("⌛ Time's up!")
        else:
            self._say("Too many wrong picks!")
