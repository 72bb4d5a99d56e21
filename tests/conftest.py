# Area: Tests
"""Shared fixtures: a controllable clock and a deterministic engine."""

import logging
import random

import pytest

from emoji_hunt import GameSessionEngine, RecordingObserver


@pytest.fixture(autouse=True)
def restore_package_logger():
    """Undo setup_logging() so caplog keeps seeing package records."""
    pkg_logger = logging.getLogger("emoji_hunt")
    level, propagate = pkg_logger.level, pkg_logger.propagate
    yield
    for handler in list(pkg_logger.handlers):
        pkg_logger.removeHandler(handler)
        handler.close()
    pkg_logger.setLevel(level)
    pkg_logger.propagate = propagate


class FakeClock:
    """Millisecond clock advanced by hand."""

    def __init__(self, start: float = 1_000_000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds * 1000.0


SMALL_VOCAB = ["🍎", "🍌", "🍇", "🍓", "🍒", "🍍", "🥝", "🥑", "🌽", "🥕"]


@pytest.fixture()
def clock():
    return FakeClock()


@pytest.fixture()
def recorder():
    return RecordingObserver()


@pytest.fixture()
def engine(clock, recorder):
    return GameSessionEngine(
        observers=[recorder],
        clock=clock,
        rng=random.Random(1234),
    )


def decoy_of(engine) -> str:
    """Any candidate in the current grid that is not the target."""
    return next(c for c in engine.candidates if c != engine.target)
