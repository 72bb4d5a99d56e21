# Area: Engine
"""
emoji_hunt._engine.round_builder — Round setup
==============================================

Picks the target emoji, builds the shuffled candidate grid and locates
the target for hints.
"""

from __future__ import annotations

import logging
import math
import random
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple, TYPE_CHECKING

if TYPE_CHECKING:
    from ..settings import GameSettings

logger = logging.getLogger("emoji_hunt.engine.round_builder")


@dataclass(frozen=True)
class HintPosition:
    """1-based grid coordinates of the target."""
    row: int
    column: int


def pool_size_for_level(level: int, settings: GameSettings) -> int:
    """Number of candidates shown at *level*."""
    count = settings.base_emoji_count + (level - 1) * settings.emoji_increment_per_level
    return min(count, settings.max_emojis)


def grid_columns(pool_size: int) -> int:
    """Columns of the square-ish grid the candidates are laid out in."""
    return max(1, math.ceil(math.sqrt(pool_size)))


def pick_target(
    vocabulary: Sequence[str],
    previous: Optional[str],
    rng: random.Random,
) -> str:
    """Pick a target uniformly, avoiding *previous* when possible."""
    available = [emoji for emoji in vocabulary if emoji != previous]
    if not available:
        available = list(vocabulary)
    return rng.choice(available)


def build_candidate_pool(
    target: str,
    vocabulary: Sequence[str],
    size: int,
    rng: random.Random,
) -> Tuple[str, ...]:
    """
    Build a shuffled pool of *size* candidates containing *target*.

    Decoys are unique while the vocabulary allows it. When the vocabulary
    is smaller than the pool, the remaining slots are filled with repeated
    decoys (or the target itself for a single-entry vocabulary).
    """
    decoys = [emoji for emoji in vocabulary if emoji != target]
    pool: List[str] = [target]
    pool.extend(rng.sample(decoys, min(size - 1, len(decoys))))

    if len(pool) < size:
        logger.warning(
            "Vocabulary too small for %d candidates (%d unique); repeating entries",
            size, len(pool),
        )
        filler = decoys or [target]
        while len(pool) < size:
            pool.append(rng.choice(filler))

    rng.shuffle(pool)
    return tuple(pool)


def locate_target(candidates: Sequence[str], target: str, columns: int) -> Optional[HintPosition]:
    """Grid position of the first occurrence of *target*."""
    try:
        index = list(candidates).index(target)
    except ValueError:
        return None
    return HintPosition(row=index // columns + 1, column=index % columns + 1)
