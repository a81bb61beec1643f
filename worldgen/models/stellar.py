"""Stellar system builder: the primary star, its orbit slots and companions.

Only stars are placed here. Every other body arrives later through the
population pipeline.
"""

from __future__ import annotations

import logging

from ..constants import CONTACT_ORBIT, FAR_ORBIT, PRIMARY_ORBIT
from .dice import Dice
from .names import generate_system_name
from .star import Star, StarSize, StarType
from .system import StarSystem

logger = logging.getLogger(__name__)

TERTIARY_ORBIT_BONUS = 4
NESTED_COMPANION_PENALTY = -4
MAX_STAR_DEPTH = 2  # Companions of companions never have companions of their own


# ---------------------------------------------------------------------------
# Tables
# ---------------------------------------------------------------------------

def num_stars(dice: Dice) -> int:
    roll = dice.roll_2d6()
    if roll <= 7:
        return 1
    if roll < 12:
        return 2
    return 3


def primary_star_type(roll: int) -> StarType:
    if roll <= 1:
        return StarType.B
    if roll == 2:
        return StarType.A
    if roll <= 7:
        return StarType.M
    if roll == 8:
        return StarType.K
    if roll == 9:
        return StarType.G
    if roll <= 11:
        return StarType.F
    return StarType.G


def primary_star_size(roll: int) -> StarSize:
    if roll == 1:
        return StarSize.IA
    if roll == 2:
        return StarSize.IB
    if roll == 3:
        return StarSize.II
    if roll == 4:
        return StarSize.III
    if roll == 11:
        return StarSize.VI
    if roll == 12:
        return StarSize.D
    # 5-10, and any modified roll off the table, is main sequence
    return StarSize.V


def companion_star_type(roll: int) -> StarType:
    if roll <= 1:
        return StarType.B
    if roll == 2:
        return StarType.A
    if roll <= 4:
        return StarType.F
    if roll <= 6:
        return StarType.G
    if roll <= 8:
        return StarType.K
    return StarType.M


def companion_star_size(roll: int) -> StarSize:
    if roll == 1:
        return StarSize.IA
    if roll == 2:
        return StarSize.IB
    if roll == 3:
        return StarSize.II
    if roll == 4:
        return StarSize.III
    if roll in (7, 8):
        return StarSize.V
    if roll == 9:
        return StarSize.VI
    return StarSize.D


def correct_star_size(size: StarSize, star_type: StarType, subtype: int) -> StarSize:
    """Demote size/type combinations that cannot exist to main sequence."""
    if size is StarSize.IV and (
        (star_type is StarType.K and subtype >= 5) or star_type is StarType.M
    ):
        return StarSize.V
    if size is StarSize.VI and (
        star_type.rank < StarType.F.rank or (star_type is StarType.F and subtype <= 4)
    ):
        return StarSize.V
    return size


def companion_orbit(roll: int, dice: Dice) -> int:
    """Companion separation: CONTACT_ORBIT, a slot index, or FAR_ORBIT.

    Penalised rolls that fall off the bottom of the table land far out.
    """
    if roll <= 0:
        return FAR_ORBIT
    if roll <= 3:
        return CONTACT_ORBIT
    if roll <= 6:
        return roll - 3
    if roll <= 11:
        return roll - 3 + dice.d6()
    return FAR_ORBIT


def max_orbits(star: Star, dice: Dice) -> int:
    if star.size.is_supergiant:
        modifier = 8
    elif star.size is StarSize.III:
        modifier = 4
    else:
        modifier = 0
    if star.star_type is StarType.M:
        modifier -= 4
    elif star.star_type is StarType.K:
        modifier -= 2
    return max(0, dice.roll_2d6() + modifier)


def block_near_companion(system: StarSystem, orbit: int) -> None:
    """A companion destabilises the orbits just inside and just beyond it."""
    for i in range(orbit // 2 + 1, orbit):
        system.mark_empty(i)
    system.mark_empty(orbit + 1)
    system.mark_empty(orbit + 2)


# ---------------------------------------------------------------------------
# Builders
# ---------------------------------------------------------------------------

def _attach_companion(parent: StarSystem, companion: StarSystem, orbit: int) -> StarSystem:
    """Seat a companion in its parent's slots, or make it contact or far.

    An orbit inside the star becomes contact. A numbered orbit past the
    parent's slots keeps its number without taking a slot; one that is
    already decided leaves the companion far out.
    """
    if orbit not in (CONTACT_ORBIT, FAR_ORBIT) and orbit <= parent.zones.inside:
        orbit = CONTACT_ORBIT
    if orbit in (CONTACT_ORBIT, FAR_ORBIT):
        companion.orbit = orbit
    elif not parent.in_range(orbit):
        companion.orbit = orbit
        block_near_companion(parent, orbit)
    elif parent.is_unassigned(orbit):
        parent.place(companion, orbit)
        block_near_companion(parent, orbit)
    else:
        logger.debug(
            "Orbit %d of %s is unavailable; companion %s moves to a far orbit",
            orbit, parent.name, companion.star,
        )
        companion.orbit = FAR_ORBIT
    return companion


def _generate_companion(
    dice: Dice,
    type_roll: int,
    size_roll: int,
    orbit: int,
    depth: int,
) -> tuple[StarSystem, int, int]:
    """Roll a companion star from the running type and size rolls."""
    type_roll += dice.roll_2d6()
    size_roll += dice.roll_2d6()
    star_type = companion_star_type(type_roll)
    subtype = dice.d10()
    size = correct_star_size(companion_star_size(size_roll), star_type, subtype)
    star = Star(star_type, subtype, size)

    capacity = max_orbits(star, dice)
    if depth > 1 and orbit != FAR_ORBIT:
        # Nested companions close to their star get half the room
        capacity //= 2
    companion = StarSystem(
        name=generate_system_name(dice), star=star, orbit=orbit, max_orbits=capacity
    )
    return companion, type_roll, size_roll


def _add_companions(
    system: StarSystem,
    dice: Dice,
    count: int,
    type_roll: int,
    size_roll: int,
    depth: int,
) -> None:
    penalty = NESTED_COMPANION_PENALTY * (depth - 1)
    for index in range(count):
        bonus = TERTIARY_ORBIT_BONUS if index == 1 else 0
        orbit = companion_orbit(dice.roll_2d6() + bonus + penalty, dice)
        companion, companion_type_roll, companion_size_roll = _generate_companion(
            dice, type_roll, size_roll, orbit, depth
        )
        _attach_companion(system, companion, orbit)
        if index == 0:
            system.secondary = companion
        else:
            system.tertiary = companion
        logger.debug(
            "Companion %s (%s) at orbit %d of %s",
            companion.name, companion.star, companion.orbit, system.name,
        )

        if depth < MAX_STAR_DEPTH and companion.is_far and num_stars(dice) > 1:
            _add_companions(
                companion, dice, 1, companion_type_roll, companion_size_roll, depth + 1
            )


def build_system(
    world_population_mod: int,
    companions_allowed: bool,
    dice: Dice,
    name: str | None = None,
) -> StarSystem:
    """Generate the primary star, its slot array and any companion stars."""
    stars = num_stars(dice) if companions_allowed else 1
    type_roll = dice.roll_2d6()
    size_roll = dice.roll_2d6()
    star_type = primary_star_type(type_roll + world_population_mod)
    subtype = dice.d10()
    size = correct_star_size(primary_star_size(size_roll), star_type, subtype)
    star = Star(star_type, subtype, size)

    # The top-level star always has somewhere to put the main world
    capacity = max(1, max_orbits(star, dice))
    system = StarSystem(
        name=name if name is not None else generate_system_name(dice),
        star=star,
        orbit=PRIMARY_ORBIT,
        max_orbits=capacity,
    )
    logger.debug("Primary %s with %d orbits, %d star(s)", star, capacity, stars)

    if stars > 1:
        _add_companions(system, dice, stars - 1, type_roll, size_roll, depth=1)
    return system
