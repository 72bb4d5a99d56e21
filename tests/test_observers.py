# Area: Observer Tests
"""Tests for observer delivery and failure isolation."""

import logging
import random

from conftest import decoy_of
from emoji_hunt import (
    Difficulty,
    GameSessionEngine,
    RecordingObserver,
    RoundLost,
    RoundStarted,
    RoundWon,
    SessionObserver,
    SessionState,
)
from emoji_hunt.observers import notify_observers


class ExplodingObserver(SessionObserver):
    """Raises from every transition hook."""

    def on_round_started(self, event):
        raise RuntimeError("sound device missing")

    def on_round_won(self, event):
        raise RuntimeError("animation failed")

    def on_round_lost(self, event):
        raise RuntimeError("animation failed")


class TestNotifyObservers:
    """Tests for notify_observers()."""

    def test_delivers_in_registration_order(self):
        """Test that observers are called in the order they were added."""
        calls = []

        class Named(SessionObserver):
            def __init__(self, name):
                self.name = name

            def on_round_won(self, event):
                calls.append(self.name)

        observers = [Named("a"), Named("b"), Named("c")]
        assert notify_observers(observers, "on_round_won", object()) == 0
        assert calls == ["a", "b", "c"]

    def test_failure_is_counted_and_logged(self, caplog):
        """Test that a raising observer is logged and the rest still run."""
        recorder = RecordingObserver()
        with caplog.at_level(logging.ERROR, logger="emoji_hunt.observers"):
            failures = notify_observers(
                [ExplodingObserver(), recorder], "on_round_won", "event",
            )
        assert failures == 1
        assert recorder.events == ["event"]
        assert "ExplodingObserver.on_round_won failed" in caplog.text

    def test_missing_method_is_skipped(self):
        """Test that objects without the hook are skipped."""
        class Bare:
            pass

        assert notify_observers([Bare()], "on_round_won", "event") == 0

    def test_base_observer_methods_are_noops(self):
        """Test that every SessionObserver hook does nothing by default."""
        observer = SessionObserver()
        for name in (
            "on_round_started", "on_wrong_selection", "on_hint_used",
            "on_time_warning", "on_pause_changed", "on_round_won",
            "on_game_complete", "on_round_lost",
        ):
            assert getattr(observer, name)(None) is None


class TestEngineObserverIsolation:
    """The engine keeps working when an observer misbehaves."""

    def test_failing_observer_does_not_block_transitions(self, clock):
        """Test that wins and losses proceed despite a raising observer."""
        recorder = RecordingObserver()
        engine = GameSessionEngine(
            observers=[ExplodingObserver(), recorder],
            clock=clock, rng=random.Random(3),
        )
        engine.start_session(Difficulty.EASY)
        assert engine.select_emoji(engine.target) is True
        assert engine.level == 2
        assert len(recorder.of_type(RoundWon)) == 1

        for _ in range(3):
            engine.select_emoji(decoy_of(engine))
        assert engine.state == SessionState.ENDED
        assert len(recorder.of_type(RoundLost)) == 1

    def test_add_and_remove_observer(self, engine):
        """Test that observers can be added once and removed again."""
        extra = RecordingObserver()
        engine.add_observer(extra)
        engine.add_observer(extra)
        engine.start_session(Difficulty.EASY)
        assert len(extra.of_type(RoundStarted)) == 1

        engine.remove_observer(extra)
        engine.select_emoji(engine.target)
        assert extra.of_type(RoundWon) == []


class TestReentrantObservers:
    """Observers may drive the engine from inside a notification."""

    def test_reset_inside_round_won_stops_next_round(self, clock):
        """Test that resetting from on_round_won prevents the next round."""
        class Quitter(SessionObserver):
            def __init__(self):
                self.engine = None

            def on_round_won(self, event):
                self.engine.reset_session()

        quitter = Quitter()
        recorder = RecordingObserver()
        engine = GameSessionEngine(
            observers=[quitter, recorder], clock=clock, rng=random.Random(5),
        )
        quitter.engine = engine

        engine.start_session(Difficulty.EASY)
        engine.select_emoji(engine.target)

        assert engine.state == SessionState.IDLE
        assert engine.current_round is None
        assert len(recorder.of_type(RoundStarted)) == 1

    def test_restart_inside_round_lost(self, clock):
        """Test that starting a session from on_round_lost works."""
        class Retry(SessionObserver):
            def __init__(self):
                self.engine = None
                self.retried = False

            def on_round_lost(self, event):
                if not self.retried:
                    self.retried = True
                    self.engine.start_session(Difficulty.HARD)

        retry = Retry()
        engine = GameSessionEngine(observers=[retry], clock=clock, rng=random.Random(5))
        retry.engine = engine

        engine.start_session(Difficulty.EASY)
        clock.advance(21)
        engine.tick()

        assert engine.state == SessionState.RUNNING
        assert engine.difficulty == Difficulty.HARD
        assert engine.level == 1
