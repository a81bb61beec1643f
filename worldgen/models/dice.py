"""Dice rolling on top of an injectable uniform random source."""

from __future__ import annotations

import random
from typing import Protocol, Sequence, TypeVar

T = TypeVar("T")


class RandomSource(Protocol):
    """Anything that yields a uniform integer in ``[0, n)``."""

    def randrange(self, stop: int) -> int: ...


class Dice:
    """Traveller dice (1D, 2D, 1D10, 1D12) driven by a ``RandomSource``.

    Every roll and every uniform pick goes through :meth:`below`, so a
    scripted source replays a whole generation run.
    """

    def __init__(self, source: RandomSource | None = None, seed: int | None = None) -> None:
        self.source: RandomSource = source if source is not None else random.Random(seed)

    def below(self, n: int) -> int:
        """Uniform integer in ``[0, n)``."""
        return self.source.randrange(n)

    def die(self, sides: int) -> int:
        return self.below(sides) + 1

    def d6(self) -> int:
        return self.die(6)

    def roll_2d6(self) -> int:
        return self.d6() + self.d6()

    def d10(self) -> int:
        """Zero-based 1D10 (0–9), as used for stellar subtypes."""
        return self.below(10)

    def d12(self) -> int:
        return self.die(12)

    def choice(self, seq: Sequence[T]) -> T:
        return seq[self.below(len(seq))]
