# Area: Engine
"""
emoji_hunt._engine.clock — Round countdown
==========================================

Tracks the time budget of a single round. The clock owns no thread or
timer; every reading is computed from timestamps supplied by the caller.

Penalties (wrong selections, hints) are accumulated separately and added
to the elapsed time, so they decay together with the normal countdown.
While paused the elapsed time is frozen and restored on resume.
"""

from __future__ import annotations

import logging
import time
from typing import Optional

logger = logging.getLogger("emoji_hunt.engine.clock")


def monotonic_ms() -> float:
    """Default engine clock: monotonic time in milliseconds."""
    return time.monotonic() * 1000.0


class RoundClock:
    """
    Countdown for one round, measured in milliseconds.

    Attributes:
        time_limit_ms:          Total budget for the round
        start_ms:               Timestamp the round started (shifted on resume)
        accumulated_penalty_ms: Sum of all penalties charged so far
        last_timestamp_ms:      Most recent timestamp seen by the clock
    """

    def __init__(self, time_limit_seconds: float, now_ms: float) -> None:
        self.time_limit_ms = time_limit_seconds * 1000.0
        self.start_ms = now_ms
        self.accumulated_penalty_ms = 0.0
        self.last_timestamp_ms = now_ms
        self._frozen_elapsed_ms: Optional[float] = None

    @property
    def is_frozen(self) -> bool:
        return self._frozen_elapsed_ms is not None

    def _raw_elapsed_ms(self, now_ms: float) -> float:
        if self._frozen_elapsed_ms is not None:
            return self._frozen_elapsed_ms
        self.last_timestamp_ms = now_ms
        return max(0.0, now_ms - self.start_ms)

    def elapsed_ms(self, now_ms: float) -> float:
        """Effective elapsed time, penalties included."""
        return self._raw_elapsed_ms(now_ms) + self.accumulated_penalty_ms

    def remaining_ms(self, now_ms: float) -> float:
        return self.time_limit_ms - self.elapsed_ms(now_ms)

    def remaining_seconds(self, now_ms: float) -> float:
        return self.remaining_ms(now_ms) / 1000.0

    def is_expired(self, now_ms: float) -> bool:
        return self.remaining_ms(now_ms) <= 0

    def add_penalty(self, seconds: float) -> None:
        """Charge a time penalty against the round budget."""
        self.accumulated_penalty_ms += seconds * 1000.0
        logger.debug(
            "Penalty %.1fs applied (total %.1fs)",
            seconds, self.accumulated_penalty_ms / 1000.0,
        )

    def freeze(self, now_ms: float) -> None:
        """Stop the countdown. No-op if already frozen."""
        if self._frozen_elapsed_ms is None:
            self._frozen_elapsed_ms = self._raw_elapsed_ms(now_ms)

    def unfreeze(self, now_ms: float) -> None:
        """Resume the countdown from the frozen reading. No-op if running."""
        if self._frozen_elapsed_ms is not None:
            self.start_ms = now_ms - self._frozen_elapsed_ms
            self.last_timestamp_ms = now_ms
            self._frozen_elapsed_ms = None
