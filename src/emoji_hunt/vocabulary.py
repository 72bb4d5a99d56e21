"""
emoji_hunt.vocabulary — Emoji vocabulary
========================================

Default emoji set and normalisation of caller-supplied vocabularies.
"""

from typing import Iterable, Optional, Tuple
import logging

logger = logging.getLogger("emoji_hunt.vocabulary")

DEFAULT_EMOJIS: Tuple[str, ...] = (
    "😀", "😂", "😍", "😎", "🤔", "😴", "😡", "😱", "🥳", "🤖",
    "👻", "👽", "💩", "🤡", "🎃", "🐶", "🐱", "🐭", "🐹", "🐰",
    "🦊", "🐻", "🐼", "🐨", "🐯", "🦁", "🐮", "🐷", "🐸", "🐵",
    "🐔", "🐧", "🐦", "🐤", "🦆", "🦅", "🦉", "🐺", "🐗", "🐴",
    "🦄", "🐝", "🐛", "🦋", "🐌", "🐞", "🐢", "🐍", "🦖", "🐙",
    "🦑", "🦀", "🐠", "🐬", "🐳", "🦈", "🐊", "🐘", "🦒", "🦘",
    "🍎", "🍌", "🍇", "🍓", "🍒", "🍍", "🥝", "🥑", "🌽", "🥕",
    "🍕", "🍔", "🍟", "🌭", "🍩", "🍪", "🎂", "🍭", "🍦", "☕",
    "⚽", "🏀", "🏈", "⚾", "🎾", "🎱", "🎲", "🎯", "🎸", "🎺",
    "🚗", "🚕", "🚌", "🚑", "🚒", "🚀", "🛸", "🚁", "⛵", "🚲",
)


def normalize_vocabulary(emojis: Optional[Iterable[str]]) -> Tuple[str, ...]:
    """
    Return *emojis* with duplicates and blanks removed, order preserved.

    An empty or missing vocabulary falls back to DEFAULT_EMOJIS.
    """
    if emojis is None:
        return DEFAULT_EMOJIS

    seen = set()
    unique = []
    for emoji in emojis:
        if not isinstance(emoji, str) or not emoji.strip():
            continue
        if emoji not in seen:
            seen.add(emoji)
            unique.append(emoji)

    if not unique:
        logger.warning("Empty emoji vocabulary; using the default set")
        return DEFAULT_EMOJIS
    return tuple(unique)
