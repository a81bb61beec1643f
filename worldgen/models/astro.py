"""Derived astrophysical data for a world: orbit, climate, mass and gravity."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

from .dice import Dice
from .star import Star
from .tables import (
    get_cloudiness,
    get_greenhouse,
    get_luminosity,
    get_orbital_distance,
    get_solar_mass,
    get_world_temp,
    habitable_orbit,
)

if TYPE_CHECKING:
    from .world import World

WATER_ALBEDO = 0.02
LAND_ALBEDO = 0.1
ICE_ALBEDO = 0.85
CLOUD_ALBEDO = 0.5

EARTH_TEMP = 288.0  # Kelvin
KM_PER_AU = 149.6  # Millions of km
TEMP_CONSTANT = 374.02


@dataclass
class AstroData:
    """Astrophysical properties derived from a world and the star it orbits."""

    orbital_period: float = 0.0  # Years
    orbit_distance: float = 0.0  # AU
    albedo: float = 0.0
    temp: float = 0.0  # Kelvin
    gravity: float = 0.0  # Earth g
    mass: float = 0.0  # Earth masses
    ice_cap_percent: float = 0.1  # Fraction of surface, seeded at 10%
    greenhouse: float = 0.0
    luminosity: float = 0.0  # Solar units

    @classmethod
    def compute(cls, star: Star, world: World, dice: Dice) -> AstroData:
        """Derive everything from the world's final digits and star-relative orbit.

        Habitable-zone worlds roll their temperature, hence the dice.
        """
        astro = cls()
        astro._orbit(star, world.position_in_system)
        astro._mass_gravity(world.size)
        astro._albedo_temp(star, world.position_in_system, world.atmosphere, world.hydro, dice)
        # Linear fit: 0.5x hydro as ice at 273K, 2x at 223K
        astro.ice_cap_percent = min(
            1.0, max(0.0, world.hydro / 5.0 * (869.0 / 80.0 - 3.0 / 80.0 * astro.temp))
        )
        return astro

    def _orbit(self, star: Star, position: int) -> None:
        self.orbit_distance = get_orbital_distance(position) / KM_PER_AU
        mass = get_solar_mass(star)
        # Kepler's third law in years, AU and solar masses
        self.orbital_period = math.sqrt(self.orbit_distance ** 3 / mass) if mass > 0 else 0.0

    def _mass_gravity(self, size: int) -> None:
        if size <= 0:
            self.mass = 0.0
            self.gravity = 0.0
        else:
            self.mass = (size / 8.0) ** 3
            self.gravity = size / 8.0

    def _albedo_temp(self, star: Star, position: int, atmosphere: int, hydro: int, dice: Dice) -> None:
        cloud_percent = get_cloudiness(atmosphere) / 100.0
        water_percent = hydro / 10.0
        land_percent = 1.0 - water_percent
        ice_percent = self.ice_cap_percent

        # Ice caps split evenly over land and water where both can take it
        half_ice = ice_percent / 2.0
        if water_percent >= half_ice and land_percent >= half_ice:
            land_percent -= half_ice
            water_percent -= half_ice
        elif water_percent < land_percent:
            land_percent -= half_ice + (half_ice - water_percent)
            water_percent = 0.0
        else:
            water_percent -= half_ice + (half_ice - land_percent)
            land_percent = 0.0

        ice_percent *= cloud_percent
        water_percent *= cloud_percent
        land_percent *= cloud_percent

        self.albedo = (
            cloud_percent * CLOUD_ALBEDO
            + water_percent * WATER_ALBEDO
            + land_percent * LAND_ALBEDO
            + ice_percent * ICE_ALBEDO
        )
        self.greenhouse = 1.0 + get_greenhouse(atmosphere)
        self.luminosity = get_luminosity(star)

        if position == habitable_orbit(star):
            modifier = int((self.greenhouse * (1.0 - self.albedo) - 1.0) / 0.05)
            self.temp = get_world_temp(dice, modifier) + 273.0
        else:
            self.temp = (
                TEMP_CONSTANT
                * self.greenhouse
                * (1.0 - self.albedo)
                * self.luminosity ** 0.25
                / self.orbit_distance ** 0.5
            )

    def describe(self, atmosphere: int) -> str:
        """One-line climate summary; blank for near-vacuum worlds."""
        if atmosphere <= 1:
            return ""
        return (
            f"{self.temp - EARTH_TEMP + 15.0:+0.2f} °C, "
            f"{round(self.ice_cap_percent * 100.0):2.0f}% ice, "
            f"{self.gravity:0.1f}G, {self.orbital_period:0.1f} yrs"
        )
