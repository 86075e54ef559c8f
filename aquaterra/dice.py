"""Random sources for combat rolls.

The resolver takes any object matching the protocol:

    def roll(self, low: int, high: int) -> int: ...

returning a uniform integer in the inclusive range [low, high].

Two implementations are provided:

    RandomDice    wraps random.Random; seedable for reproducible sessions.
    ScriptedDice  replays a fixed sequence of values. Useful for forcing a
                  specific turn (tests, demos) without touching the resolver.
"""

from __future__ import annotations

import logging
import random
from collections.abc import Iterable
from typing import Protocol

logger = logging.getLogger(__name__)


class Dice(Protocol):
    def roll(self, low: int, high: int) -> int: ...


class RandomDice:
    """Uniform integer rolls backed by random.Random.

    Args:
        seed: Optional seed. None draws from OS entropy.
    """

    def __init__(self, seed: int | None = None) -> None:
        self._rng = random.Random(seed)

    def roll(self, low: int, high: int) -> int:
        return self._rng.randint(low, high)


class ScriptedDice:
    """Returns queued values in order, ignoring the requested range.

    Raises DiceExhausted when asked for more rolls than were scripted, so a
    test that expects no counter-attack fails loudly if one is drawn.
    """

    def __init__(self, values: Iterable[int]) -> None:
        self._values = list(values)
        self.calls: list[tuple[int, int]] = []

    def roll(self, low: int, high: int) -> int:
        self.calls.append((low, high))
        if not self._values:
            raise DiceExhausted(f"No scripted roll left for range [{low}, {high}]")
        value = self._values.pop(0)
        logger.debug("scripted roll [%d, %d] -> %d", low, high, value)
        return value

    @property
    def remaining(self) -> int:
        return len(self._values)


class DiceExhausted(RuntimeError):
    """Raised by ScriptedDice when its queue is empty."""
