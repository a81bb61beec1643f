"""Government, law, tech, starport and facilities for non-main-world bodies.

Everything here is derived from the main world; subordinate bodies never
roll these digits from scratch.
"""

from __future__ import annotations

from ..constants import BREATHABLE_ATMOSPHERES, MAX_DIGIT
from .dice import Dice
from .tables import ZoneTable
from .trade import TradeClass
from .uwp import PortCode
from .world import Facility, World

MIN_HOSTILE_TECH = 7  # Lowest tech that keeps people alive in a bad atmosphere


def clamp_population(population: int, main_world: World) -> int:
    """Keep a subordinate population in [0, main-world population - 1]."""
    return max(0, min(population, main_world.population - 1))


def _government(dice: Dice, population: int, main_world: World) -> int:
    if population <= 0:
        return 0
    if main_world.government == 6:
        modifier = population
    elif main_world.government >= 7:
        modifier = 1
    else:
        modifier = 0
    roll = dice.d6() + modifier
    if roll <= 1:
        return 0
    if roll <= 4:
        return roll - 1
    return 6


def _law_level(dice: Dice, population: int, main_world: World) -> int:
    if population <= 0:
        return 0
    return min(MAX_DIGIT, max(0, dice.d6() - 3 + main_world.law_level))


def _tech_level(population: int, atmosphere: int, main_world: World) -> int:
    if population <= 0:
        return 0
    tech = max(0, main_world.tech_level - 1)
    if atmosphere not in BREATHABLE_ATMOSPHERES and tech < MIN_HOSTILE_TECH:
        return MIN_HOSTILE_TECH
    return tech


def _port(dice: Dice, population: int) -> PortCode:
    if population <= 0:
        modifier = -3
    elif population == 1:
        modifier = -2
    elif population <= 5:
        modifier = 0
    else:
        modifier = 2
    roll = dice.d6() + modifier
    if roll <= 2:
        return PortCode.Y
    if roll == 3:
        return PortCode.H
    if roll <= 5:
        return PortCode.G
    return PortCode.F


def gen_subordinate_stats(world: World, main_world: World, dice: Dice) -> None:
    """Fill in government, law, tech and port; clears facilities."""
    population = world.population
    world.government = _government(dice, population, main_world)
    world.law_level = _law_level(dice, population, main_world)
    world.tech_level = _tech_level(population, world.atmosphere, main_world)
    world.port = _port(dice, population)
    world.facilities = []


def gen_subordinate_facilities(
    world: World, zones: ZoneTable, main_world: World, dice: Dice
) -> None:
    """Roll facilities for ``world``. Zone checks use its star-relative orbit."""
    position = world.position_in_system

    if main_world.has_trade_class(TradeClass.INDUSTRIAL) and world.population >= 2:
        world.facilities.append(Facility.MINING)

    if (
        position == zones.habitable
        and position > zones.inner
        and 4 <= world.atmosphere <= 9
        and 4 <= world.hydro <= 8
        and world.population >= 2
    ):
        world.facilities.append(Facility.FARMING)

    if world.government == 6 and world.population >= 5:
        world.facilities.append(Facility.COLONY)

    if main_world.population > 0 and main_world.tech_level > 8:
        modifier = 2 if main_world.tech_level >= 10 else 0
        if world.population == 0:
            modifier -= 2
        if dice.roll_2d6() + modifier >= 12:
            world.facilities.append(Facility.LAB)
            # A lab brings its parent world's tech along with it
            if world.tech_level == main_world.tech_level - 1:
                world.tech_level = main_world.tech_level

    if not main_world.has_trade_class(TradeClass.POOR) and world.population > 0:
        modifier = 0
        if main_world.population >= 8:
            modifier += 1
        if main_world.atmosphere == world.atmosphere:
            modifier += 2
        if main_world.has_facility(Facility.NAVAL) or main_world.has_facility(Facility.SCOUT):
            modifier += 1
        if dice.roll_2d6() + modifier >= 12:
            world.facilities.append(Facility.MILITARY)


def finish_subordinate(world: World, zones: ZoneTable, main_world: World, dice: Dice) -> None:
    """Stats, trade classes, then facilities, in the order facilities need them."""
    gen_subordinate_stats(world, main_world, dice)
    world.classify_trade()
    gen_subordinate_facilities(world, zones, main_world, dice)
