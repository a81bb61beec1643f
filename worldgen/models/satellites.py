"""Satellite generation for worlds and gas giants.

Both body kinds satisfy :class:`SatelliteHost`, so everything here works on
either without caring which one it has.
"""

from __future__ import annotations

import logging
from typing import Protocol

from ..constants import RING_NAME, SATELLITE_RETRY_LIMIT
from ..diagnostics import Category, Diagnostics
from .dice import Dice
from .names import generate_moon_name
from .star import Star
from .subordinate import clamp_population, finish_subordinate
from .tables import ZoneTable
from .world import World, make_ring

logger = logging.getLogger(__name__)

# Population is not penalised for these atmospheres
SETTLED_ATMOSPHERES = (0, 5, 6, 8)


class SatelliteHost(Protocol):
    """What satellite generation needs from the body being orbited."""

    satellites: list[World]

    @property
    def position_in_system(self) -> int: ...

    @property
    def allows_extreme_orbits(self) -> bool: ...

    def roll_satellite_count(self, dice: Dice) -> int: ...

    def roll_satellite_size(self, dice: Dice) -> int: ...

    def satellite_at(self, orbit: int) -> World | None: ...


def num_satellites(host: SatelliteHost, dice: Dice) -> int:
    return host.roll_satellite_count(dice)


def _ring_orbit(dice: Dice) -> int:
    roll = dice.d6()
    if roll <= 3:
        return 1
    if roll <= 5:
        return 2
    return 3


def gen_satellite_orbit(
    host: SatelliteHost,
    is_ring: bool,
    dice: Dice,
    retry_limit: int = SATELLITE_RETRY_LIMIT,
    diagnostics: Diagnostics | None = None,
) -> int:
    """Pick a free satellite orbit around ``host``.

    Collisions step outward one orbit at a time. After ``retry_limit``
    retries the satellite goes just past the host's outermost satellite.
    """
    if is_ring:
        orbit = _ring_orbit(dice)
    else:
        orbit_type = dice.roll_2d6() - len(host.satellites)
        base = dice.d12() + 3
        if orbit_type <= 7:
            orbit = base
        elif orbit_type == 12 and host.allows_extreme_orbits:
            orbit = base * 25
        else:
            orbit = base * 5

    for _ in range(retry_limit):
        if host.satellite_at(orbit) is None:
            return orbit
        logger.debug("Satellite orbit %d taken, bumping", orbit)
        orbit += 1

    fallback = max((s.orbit for s in host.satellites), default=orbit - 1) + 1
    message = f"Satellite orbit search gave up after {retry_limit} tries; using {fallback}"
    if diagnostics is not None:
        diagnostics.warn(Category.ORBIT, message, orbit=fallback, retries=retry_limit)
    else:
        logger.warning(message)
    return fallback


def generate_satellite(
    host: SatelliteHost,
    zones: ZoneTable,
    main_world: World,
    star: Star,
    dice: Dice,
    retry_limit: int = SATELLITE_RETRY_LIMIT,
    diagnostics: Diagnostics | None = None,
) -> World:
    """Generate one satellite and attach it to ``host``."""
    # Anything below zero is an S-class body; zero is a ring
    size = max(-1, host.roll_satellite_size(dice))
    orbit = gen_satellite_orbit(host, size == 0, dice, retry_limit, diagnostics)
    position = host.position_in_system

    if size == 0:
        ring = make_ring(orbit, position)
        host.satellites.append(ring)
        return ring

    inner = position <= zones.inner
    beyond = position > zones.habitable

    roll = dice.roll_2d6()
    atmosphere = roll - 7 + size
    if inner or beyond:
        atmosphere -= 4
    atmosphere = max(0, min(atmosphere, 10))
    if size <= 1:
        atmosphere = 0
    if roll == 12 and beyond:
        atmosphere = 10

    hydro = dice.roll_2d6() - 7 + size
    if beyond:
        hydro -= 4
    if atmosphere <= 1 or atmosphere >= 10:
        hydro -= 4
    hydro = max(0, min(hydro, 10))
    if size <= 0 or inner:
        hydro = 0

    population = dice.roll_2d6() - 2
    if inner:
        population -= 5
    elif beyond:
        population -= 4
    if atmosphere not in SETTLED_ATMOSPHERES:
        population -= 2
    population = clamp_population(population, main_world)

    satellite = World(
        name=generate_moon_name(dice),
        orbit=orbit,
        position_in_system=position,
        size=size,
        atmosphere=atmosphere,
        hydro=hydro,
        population=population,
        is_satellite=True,
    )
    finish_subordinate(satellite, zones, main_world, dice)
    satellite.compute_astro(star, dice)
    host.satellites.append(satellite)
    return satellite


def clean_satellites(host: SatelliteHost) -> None:
    """Sort satellites by orbit and keep only the innermost ring."""
    host.satellites.sort(key=lambda s: s.orbit)
    rings = [s for s in host.satellites if s.size == 0 and not s.is_main_world]
    if not rings:
        return
    rings[0].name = RING_NAME
    extra = {id(ring) for ring in rings[1:]}
    host.satellites[:] = [s for s in host.satellites if id(s) not in extra]


def generate_satellites(
    host: SatelliteHost,
    zones: ZoneTable,
    main_world: World,
    star: Star,
    dice: Dice,
    retry_limit: int = SATELLITE_RETRY_LIMIT,
    diagnostics: Diagnostics | None = None,
) -> list[World]:
    """Roll the satellite count, generate each one, then tidy up rings."""
    for _ in range(num_satellites(host, dice)):
        generate_satellite(host, zones, main_world, star, dice, retry_limit, diagnostics)
    clean_satellites(host)
    return host.satellites
