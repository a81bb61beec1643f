"""Lookup tables for stellar zones and world astrophysics.

Zones are orbit-index thresholds; a value of -1 means the zone does not
exist for that star.
"""

from __future__ import annotations

from typing import NamedTuple

from ..errors import InvalidSubtype
from .dice import Dice
from .star import Star, StarSize, StarType


class ZoneTable(NamedTuple):
    """Orbit-index limits of each zone around one star."""

    inside: int  # Orbits at or below this lie inside the star
    hot: int
    inner: int
    habitable: int
    outer: int


def round_subtype(subtype: int) -> int:
    """Collapse a 0–9 subtype onto the 0/5 table columns."""
    if 0 <= subtype <= 4:
        return 0
    if 5 <= subtype <= 9:
        return 5
    raise InvalidSubtype(f"Stellar subtype must be 0-9, got {subtype}")


# ---------------------------------------------------------------------------
# Zones: size -> type -> (subtype 0 row, subtype 5 row)
# Row order: inside, hot, inner, habitable, outer
# ---------------------------------------------------------------------------

_NO_ZONES = (0, 0, 0, 0, 0)

_ZONES: dict[StarSize, dict[StarType, tuple[tuple[int, ...], tuple[int, ...]]]] = {
    StarSize.IA: {
        StarType.O: (_NO_ZONES, _NO_ZONES),
        StarType.B: ((0, 7, 12, 13, 14), (0, 7, 12, 13, 14)),
        StarType.A: ((1, 6, 11, 12, 14), (1, 6, 11, 12, 14)),
        StarType.F: ((2, 5, 11, 12, 14), (2, 5, 10, 11, 14)),
        StarType.G: ((3, 6, 11, 12, 14), (4, 6, 11, 12, 14)),
        StarType.K: ((5, 6, 11, 12, 14), (5, 6, 11, 12, 14)),
        StarType.M: ((6, 6, 11, 12, 14), (0, 6, 11, 12, 14)),
    },
    StarSize.IB: {
        StarType.O: (_NO_ZONES, _NO_ZONES),
        StarType.B: ((0, 7, 12, 13, 14), (0, 5, 10, 11, 14)),
        StarType.A: ((0, 4, 10, 11, 14), (0, 4, 9, 10, 14)),
        StarType.F: ((0, 4, 9, 10, 14), (0, 3, 9, 10, 14)),
        StarType.G: ((0, 3, 9, 10, 14), (1, 4, 9, 10, 14)),
        StarType.K: ((2, 4, 9, 10, 14), (2, 4, 9, 10, 14)),
        StarType.M: ((3, 4, 9, 10, 14), (3, 4, 9, 10, 14)),
    },
    StarSize.II: {
        StarType.O: (_NO_ZONES, _NO_ZONES),
        StarType.B: ((0, 6, 11, 12, 13), (0, 4, 10, 11, 13)),
        StarType.A: ((0, 2, 8, 9, 13), (0, 1, 7, 8, 13)),
        StarType.F: ((0, 1, 7, 8, 13), (0, 1, 7, 8, 13)),
        StarType.G: ((0, 1, 7, 8, 13), (0, 1, 7, 8, 13)),
        StarType.K: ((0, 1, 8, 9, 13), (1, 2, 8, 9, 13)),
        StarType.M: ((3, 3, 9, 10, 13), (5, 5, 10, 11, 13)),
    },
    StarSize.III: {
        StarType.O: (_NO_ZONES, _NO_ZONES),
        StarType.B: ((0, 6, 11, 12, 13), (0, 4, 9, 10, 13)),
        StarType.A: ((0, 0, 7, 8, 13), (0, 0, 6, 7, 13)),
        StarType.F: ((0, 0, 5, 6, 13), (0, 0, 5, 6, 13)),
        StarType.G: ((0, 0, 5, 6, 13), (0, 0, 6, 7, 13)),
        StarType.K: ((0, 0, 6, 7, 13), (0, 0, 7, 8, 13)),
        StarType.M: ((0, 1, 7, 8, 13), (3, 3, 8, 9, 13)),
    },
    StarSize.IV: {
        StarType.O: (_NO_ZONES, _NO_ZONES),
        StarType.B: ((0, 6, 11, 12, 13), (0, 2, 8, 9, 13)),
        StarType.A: ((0, 0, 6, 7, 13), (-1, -1, 5, 6, 13)),
        StarType.F: ((-1, -1, 4, 5, 13), (-1, -1, 4, 5, 13)),
        StarType.G: ((-1, -1, 4, 5, 13), (-1, -1, 4, 5, 13)),
        StarType.K: ((-1, -1, 3, 4, 13), _NO_ZONES),
        StarType.M: (_NO_ZONES, _NO_ZONES),
    },
    StarSize.V: {
        StarType.O: (_NO_ZONES, _NO_ZONES),
        StarType.B: ((0, 5, 11, 12, 14), (0, 2, 8, 9, 14)),
        StarType.A: ((-1, -1, 6, 7, 14), (-1, -1, 5, 6, 14)),
        StarType.F: ((-1, -1, 4, 5, 14), (-1, -1, 3, 4, 14)),
        StarType.G: ((-1, -1, 2, 3, 14), (-1, -1, 2, 3, 14)),
        StarType.K: ((-1, -1, 1, 2, 14), (-1, -1, -1, 0, 14)),
        StarType.M: ((-1, -1, -1, 0, 14), (-1, -1, -1, -1, 14)),
    },
    StarSize.VI: {
        StarType.O: (_NO_ZONES, _NO_ZONES),
        StarType.B: (_NO_ZONES, _NO_ZONES),
        StarType.A: (_NO_ZONES, _NO_ZONES),
        StarType.F: (_NO_ZONES, (-1, -1, 2, 3, 4)),
        StarType.G: ((-1, -1, 1, 2, 4), (-1, -1, 0, 1, 4)),
        StarType.K: ((-1, -1, 0, 0, 4), (-1, -1, 0, 0, 4)),
        StarType.M: ((-1, -1, 0, 0, 4), (-1, -1, 0, 0, 4)),
    },
    StarSize.D: {
        StarType.O: (_NO_ZONES, _NO_ZONES),
        StarType.B: ((-1, -1, -1, 0, 4), (-1, -1, -1, 0, 4)),
        StarType.A: ((-1, -1, -1, -1, 4), (-1, -1, -1, -1, 4)),
        StarType.F: ((-1, -1, -1, -1, 4), (-1, -1, -1, -1, 4)),
        StarType.G: ((-1, -1, -1, -1, 4), (-1, -1, -1, -1, 4)),
        StarType.K: ((-1, -1, -1, -1, 4), (-1, -1, -1, -1, 4)),
        StarType.M: ((-1, -1, -1, -1, 4), (-1, -1, -1, -1, 4)),
    },
}


def zone_limits(star_type: StarType, subtype: int, star_size: StarSize) -> ZoneTable:
    """Zone thresholds for a star; raises InvalidSubtype for subtypes outside 0–9."""
    column = round_subtype(subtype) // 5
    return ZoneTable(*_ZONES[star_size][star_type][column])


def get_zone(star: Star) -> ZoneTable:
    return zone_limits(star.star_type, star.subtype, star.size)


def habitable_orbit(star: Star) -> int:
    """Habitable orbit index, or -1 when it does not lie beyond the inner zone."""
    zones = get_zone(star)
    return zones.habitable if zones.habitable > zones.inner else -1


# ---------------------------------------------------------------------------
# Stellar luminosity (solar units) and mass (solar masses)
# Row order follows StarSize: Ia, Ib, II, III, IV, V, VI, D
# ---------------------------------------------------------------------------

_LUMINOSITY: dict[tuple[StarType, int], tuple[float, ...]] = {
    (StarType.O, 0): (0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0),
    (StarType.O, 5): (0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0),
    (StarType.B, 0): (560_000.0, 270_000.0, 170_000.0, 107_000.0, 81_000.0, 56_000.0, 0.0, 0.46),
    (StarType.B, 5): (204_000.0, 46_700.0, 18_600.0, 6_700.0, 2_000.0, 1_400.0, 0.0, 0.46),
    (StarType.A, 0): (107_000.0, 15_000.0, 2_200.0, 280.0, 156.0, 90.0, 0.0, 0.005),
    (StarType.A, 5): (81_000.0, 11_700.0, 850.0, 90.0, 37.0, 16.0, 0.0, 0.005),
    (StarType.F, 0): (61_000.0, 7_400.0, 600.0, 53.0, 19.0, 8.1, 0.0, 0.0003),
    (StarType.F, 5): (51_000.0, 5_100.0, 510.0, 43.0, 12.0, 3.5, 0.977, 0.0003),
    (StarType.G, 0): (67_000.0, 6_100.0, 560.0, 50.0, 6.5, 1.21, 0.322, 0.00006),
    (StarType.G, 5): (89_000.0, 8_100.0, 740.0, 75.0, 4.9, 0.67, 0.186, 0.00006),
    (StarType.K, 0): (100_000.0, 11_700.0, 890.0, 95.0, 4.67, 0.42, 0.117, 0.00004),
    (StarType.K, 5): (107_000.0, 20_400.0, 2_450.0, 320.0, 0.0, 0.08, 0.025, 0.00004),
    (StarType.M, 0): (117_000.0, 46_000.0, 4_600.0, 470.0, 0.0, 0.04, 0.011, 0.00003),
    (StarType.M, 5): (129_000.0, 89_000.0, 14_900.0, 2_280.0, 0.0, 0.007, 0.002, 0.00003),
}

_MASS: dict[tuple[StarType, int], tuple[float, ...]] = {
    (StarType.O, 0): (0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0),
    (StarType.O, 5): (0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0),
    (StarType.B, 0): (60.0, 50.0, 30.0, 25.0, 20.0, 18.0, 0.0, 0.26),
    (StarType.B, 5): (30.0, 25.0, 20.0, 15.0, 10.0, 6.5, 0.0, 0.26),
    (StarType.A, 0): (18.0, 16.0, 14.0, 12.0, 6.0, 3.2, 0.0, 0.36),
    (StarType.A, 5): (15.0, 13.0, 11.0, 9.0, 4.0, 2.1, 0.0, 0.36),
    (StarType.F, 0): (13.0, 12.0, 10.0, 8.0, 2.5, 1.7, 0.0, 0.42),
    (StarType.F, 5): (12.0, 10.0, 8.1, 5.0, 2.0, 1.3, 0.8, 0.42),
    (StarType.G, 0): (12.0, 10.0, 8.1, 2.5, 1.75, 1.04, 0.6, 0.63),
    (StarType.G, 5): (13.0, 12.0, 10.0, 3.2, 2.0, 0.94, 0.528, 0.63),
    (StarType.K, 0): (14.0, 13.0, 11.0, 4.0, 2.3, 0.825, 0.43, 0.83),
    (StarType.K, 5): (18.0, 16.0, 14.0, 5.0, 0.0, 0.57, 0.33, 0.83),
    (StarType.M, 0): (20.0, 16.0, 14.0, 6.3, 0.0, 0.489, 0.154, 1.11),
    (StarType.M, 5): (25.0, 20.0, 16.0, 7.4, 0.0, 0.331, 0.104, 1.11),
}


def get_luminosity(star: Star) -> float:
    return _LUMINOSITY[(star.star_type, round_subtype(star.subtype))][star.size.rank]


def get_solar_mass(star: Star) -> float:
    return _MASS[(star.star_type, round_subtype(star.subtype))][star.size.rank]


# ---------------------------------------------------------------------------
# World climate tables
# ---------------------------------------------------------------------------

# Mean orbital radius in millions of km, by orbit index
ORBITAL_DISTANCE: tuple[float, ...] = (
    29.9, 59.8, 104.7, 149.6, 239.3, 418.9, 777.9, 1495.9, 2932.0, 5804.0,
    11548.0, 23038.0, 46016.0, 91972.0, 183885.0, 367711.0, 735363.0,
    1470666.0, 2941274.0, 5882488.0,
)

# Cloud cover percentage by atmosphere code
CLOUDINESS: tuple[int, ...] = (0, 0, 10, 10, 20, 30, 40, 50, 60, 70, 70)

# Greenhouse factor by atmosphere code
GREENHOUSE: tuple[float, ...] = (
    0.0, 0.0, 0.0, 0.0, 0.05, 0.05, 0.1, 0.1, 0.15, 0.15, 0.5, 0.5, 0.5, 0.15, 0.10, 0.0,
)

# Average habitable-zone world temperature (°C) by modified 2D roll
AVG_WORLD_TEMP: tuple[float, ...] = (
    -2.5, 0.0, 2.5, 5.0, 7.5, 10.0, 12.5, 15.0, 17.5, 20.0, 22.5, 25.0, 27.5, 30.0, 32.5, 35.0,
)


def _bounded(table: tuple, index: int):
    return table[max(0, min(index, len(table) - 1))]


def get_orbital_distance(orbit: int) -> float:
    return _bounded(ORBITAL_DISTANCE, orbit)


def get_cloudiness(atmosphere: int) -> int:
    return _bounded(CLOUDINESS, atmosphere)


def get_greenhouse(atmosphere: int) -> float:
    return _bounded(GREENHOUSE, atmosphere)


def get_world_temp(dice: Dice, modifier: int) -> float:
    """Roll a habitable-zone temperature in °C."""
    return _bounded(AVG_WORLD_TEMP, dice.roll_2d6() + modifier)
