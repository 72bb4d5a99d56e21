# Area: Engine
"""
emoji_hunt._engine.combo — Combo multiplier tracking
====================================================

Tracks the streak of correct answers given within the combo window.
Expiry is evaluated lazily by comparing timestamps, so no cancellable
timer is needed and a reset simply forgets the last correct answer.
"""

from __future__ import annotations

import logging
from typing import Optional

logger = logging.getLogger("emoji_hunt.engine.combo")


class ComboTracker:
    """
    Combo multiplier bounded to [1, max_multiplier].

    A correct answer within ``window_ms`` of the previous correct answer
    raises the multiplier by one; a slower one restarts it at 1.
    """

    def __init__(self, window_ms: float, max_multiplier: int) -> None:
        self.window_ms = window_ms
        self.max_multiplier = max_multiplier
        self._multiplier = 1
        self._last_correct_ms: Optional[float] = None

    @property
    def last_correct_ms(self) -> Optional[float]:
        return self._last_correct_ms

    def _within_window(self, now_ms: float) -> bool:
        return (
            self._last_correct_ms is not None
            and now_ms - self._last_correct_ms < self.window_ms
        )

    def current(self, now_ms: float) -> int:
        """Multiplier as of *now_ms*, after applying lazy expiry."""
        if self._multiplier > 1 and not self._within_window(now_ms):
            return 1
        return self._multiplier

    def register_correct(self, now_ms: float) -> int:
        """Record a correct answer and return the multiplier it earns."""
        if self._within_window(now_ms):
            self._multiplier = min(self._multiplier + 1, self.max_multiplier)
        else:
            self._multiplier = 1
        self._last_correct_ms = now_ms
        logger.debug("Combo x%d", self._multiplier)
        return self._multiplier

    def break_combo(self) -> None:
        """Drop the multiplier back to 1 after a wrong answer."""
        if self._multiplier > 1:
            logger.debug("Combo broken at x%d", self._multiplier)
        self._multiplier = 1

    def reset(self) -> None:
        self._multiplier = 1
        self._last_correct_ms = None
