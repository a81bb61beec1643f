"""Orbital bodies: worlds (planets, belts, moons) and gas giants."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

from ..constants import BELT_NAME, RING_NAME
from ..diagnostics import Diagnostics
from .astro import AstroData
from .dice import Dice
from .star import Star
from .trade import TradeClass, classify
from .uwp import PortCode, UppDigits, format_upp, parse_upp


class Facility(enum.Enum):
    """Installations a body may host."""

    NAVAL = "Naval"
    SCOUT = "Scout"
    FARMING = "Farming"
    MINING = "Mining"
    COLONY = "Colony"
    LAB = "Lab"
    MILITARY = "Military"

    def __str__(self) -> str:
        return self.value


class GasGiantSize(enum.Enum):
    SMALL = "Small"
    LARGE = "Large"

    @property
    def code(self) -> str:
        return "SGG" if self is GasGiantSize.SMALL else "LGG"


# ---------------------------------------------------------------------------
# Worlds
# ---------------------------------------------------------------------------

@dataclass
class World:
    """A planet, planetoid belt or satellite with a full UPP.

    ``orbit`` is local (around a star for planets, around the host body for
    satellites); ``position_in_system`` is always the star-relative orbit
    used for zone checks and astro data.
    """

    name: str
    orbit: int = 0
    position_in_system: int = 0
    size: int = 0  # -1 for S-class small bodies
    atmosphere: int = 0
    hydro: int = 0
    population: int = 0
    government: int = 0
    law_level: int = 0
    tech_level: int = 0
    port: PortCode = PortCode.Y
    is_satellite: bool = False
    is_main_world: bool = False
    satellites: list[World] = field(default_factory=list)
    facilities: list[Facility] = field(default_factory=list)
    trade_classes: list[TradeClass] = field(default_factory=list)
    astro: AstroData | None = field(default=None, compare=False, repr=False)

    # --- UPP ---

    @classmethod
    def from_upp(
        cls,
        name: str,
        upp: str,
        is_satellite: bool = False,
        is_main_world: bool = False,
        diagnostics: Diagnostics | None = None,
    ) -> World:
        """Build a world from a UPP string such as ``A788899-A``."""
        digits = parse_upp(upp, is_satellite=is_satellite, diagnostics=diagnostics)
        return cls(
            name=name,
            size=digits.size,
            atmosphere=digits.atmosphere,
            hydro=digits.hydro,
            population=digits.population,
            government=digits.government,
            law_level=digits.law_level,
            tech_level=digits.tech_level,
            port=digits.port,
            is_satellite=is_satellite,
            is_main_world=is_main_world,
        )

    @property
    def digits(self) -> UppDigits:
        return UppDigits(
            self.port, self.size, self.atmosphere, self.hydro, self.population,
            self.government, self.law_level, self.tech_level,
        )

    def to_upp(self) -> str:
        return format_upp(self.digits, self.name, self.is_satellite, self.is_main_world)

    # --- Classification ---

    @property
    def is_ring(self) -> bool:
        return self.is_satellite and self.size == 0

    @property
    def is_belt(self) -> bool:
        return not self.is_satellite and self.name == BELT_NAME

    def classify_trade(self) -> list[TradeClass]:
        self.trade_classes = classify(self)
        return self.trade_classes

    def has_trade_class(self, trade_class: TradeClass) -> bool:
        return trade_class in self.trade_classes

    def has_facility(self, facility: Facility) -> bool:
        return facility in self.facilities

    def facilities_string(self) -> str:
        return ", ".join(str(f) for f in self.facilities)

    def trade_classes_string(self) -> str:
        return " ".join(str(t) for t in self.trade_classes)

    # --- Astro ---

    def compute_astro(self, star: Star, dice: Dice) -> AstroData:
        self.astro = AstroData.compute(star, self, dice)
        return self.astro

    def astro_description(self) -> str:
        if self.astro is None:
            return ""
        return self.astro.describe(self.atmosphere)

    # --- Satellite host ---

    @property
    def allows_extreme_orbits(self) -> bool:
        return False

    def roll_satellite_count(self, dice: Dice) -> int:
        if self.size <= 0:
            return 0
        return max(0, dice.d6() - 3)

    def roll_satellite_size(self, dice: Dice) -> int:
        return self.size - dice.d6()

    def satellite_at(self, orbit: int) -> World | None:
        for satellite in self.satellites:
            if satellite.orbit == orbit:
                return satellite
        return None


def make_ring(orbit: int, position_in_system: int) -> World:
    """A ring system: a zero-everything satellite with port Y."""
    return World(
        name=RING_NAME,
        orbit=orbit,
        position_in_system=position_in_system,
        port=PortCode.Y,
        is_satellite=True,
    )


# ---------------------------------------------------------------------------
# Gas giants
# ---------------------------------------------------------------------------

@dataclass
class GasGiant:
    """A small or large gas giant. Carries satellites but no UPP."""

    name: str
    size: GasGiantSize
    orbit: int
    satellites: list[World] = field(default_factory=list)

    @property
    def position_in_system(self) -> int:
        return self.orbit

    @property
    def allows_extreme_orbits(self) -> bool:
        return True

    def roll_satellite_count(self, dice: Dice) -> int:
        if self.size is GasGiantSize.SMALL:
            return max(0, dice.roll_2d6() - 4)
        return dice.roll_2d6()

    def roll_satellite_size(self, dice: Dice) -> int:
        if self.size is GasGiantSize.SMALL:
            return dice.roll_2d6() - 6
        return dice.roll_2d6() - 4

    def satellite_at(self, orbit: int) -> World | None:
        for satellite in self.satellites:
            if satellite.orbit == orbit:
                return satellite
        return None
