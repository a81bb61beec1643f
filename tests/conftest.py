"""Shared fixtures: scripted dice and a standard main world."""

from __future__ import annotations

import random

import pytest

from worldgen.models.dice import Dice
from worldgen.models.star import Star, StarSize, StarType
from worldgen.models.system import StarSystem
from worldgen.models.world import World


class ScriptedSource:
    """A RandomSource that replays queued raw values.

    Each value is what ``randrange(n)`` returns, so a die face f is queued
    as f - 1. Once the queue runs dry the optional fallback takes over.
    """

    def __init__(self, values, fallback: random.Random | None = None) -> None:
        self.values = list(values)
        self.fallback = fallback
        self.calls: list[int] = []

    def randrange(self, stop: int) -> int:
        self.calls.append(stop)
        if not self.values:
            if self.fallback is None:
                raise AssertionError("scripted source ran out of values")
            return self.fallback.randrange(stop)
        value = self.values.pop(0)
        assert 0 <= value < stop, f"scripted value {value} outside [0, {stop})"
        return value

    @property
    def exhausted(self) -> bool:
        return not self.values


def faces(*rolls: int) -> list[int]:
    """Raw values for a run of die faces."""
    return [r - 1 for r in rolls]


def scripted(*values: int, fallback_seed: int | None = None) -> Dice:
    fallback = random.Random(fallback_seed) if fallback_seed is not None else None
    return Dice(ScriptedSource(values, fallback))


@pytest.fixture
def main_world() -> World:
    return World.from_upp("Regina", "A788899-A", is_main_world=True)


@pytest.fixture
def g2v() -> Star:
    return Star(StarType.G, 2, StarSize.V)


@pytest.fixture
def g2v_system(g2v) -> StarSystem:
    """G2 V primary with six orbits; habitable orbit 3, inner 2."""
    return StarSystem(name="Sol", star=g2v, max_orbits=6)
