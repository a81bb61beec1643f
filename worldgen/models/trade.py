"""Trade classifications derived from a finished world's digits."""

from __future__ import annotations

import enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .world import World


class TradeClass(enum.Enum):
    """Standard trade codes."""

    AGRICULTURAL = "Ag"
    ASTEROID = "As"
    BARREN = "Ba"
    DESERT = "De"
    FLUID_OCEANS = "Fl"
    GARDEN = "Ga"
    HIGH_POPULATION = "Hi"
    HIGH_TECH = "Ht"
    ICE_CAPPED = "Ic"
    INDUSTRIAL = "In"
    LOW_TECH = "Lt"
    NON_AGRICULTURAL = "Na"
    NON_INDUSTRIAL = "Ni"
    POOR = "Po"
    RICH = "Ri"
    VACUUM = "Va"
    WATER_WORLD = "Wa"

    @property
    def code(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.value


def classify(world: World) -> list[TradeClass]:
    """All trade classes that apply to ``world``. No dice involved."""
    size = world.size
    atm = world.atmosphere
    hydro = world.hydro
    pop = world.population
    gov = world.government
    law = world.law_level
    tech = world.tech_level

    classes: list[TradeClass] = []
    if 4 <= atm <= 9 and 4 <= hydro <= 8 and 5 <= pop <= 7:
        classes.append(TradeClass.AGRICULTURAL)
    if atm <= 3 and hydro <= 3 and pop >= 6:
        classes.append(TradeClass.NON_AGRICULTURAL)
    if size == 0 and atm == 0 and hydro == 0 and world.is_main_world:
        classes.append(TradeClass.ASTEROID)
    if pop == 0 and gov == 0 and law == 0:
        classes.append(TradeClass.BARREN)
    if atm >= 10 and hydro >= 1:
        classes.append(TradeClass.FLUID_OCEANS)
    if 6 <= size <= 8 and atm in (5, 6, 8) and 5 <= hydro <= 7:
        classes.append(TradeClass.GARDEN)
    if pop >= 9:
        classes.append(TradeClass.HIGH_POPULATION)
    if tech >= 12:
        classes.append(TradeClass.HIGH_TECH)
    if atm in (0, 1, 2, 4, 7, 9) and pop >= 9:
        classes.append(TradeClass.INDUSTRIAL)
    if 1 <= pop <= 6:
        classes.append(TradeClass.NON_INDUSTRIAL)
    if pop >= 1 and tech <= 5:
        classes.append(TradeClass.LOW_TECH)
    if atm in (6, 8) and pop in (6, 7, 8) and 4 <= gov <= 9:
        classes.append(TradeClass.RICH)
    if 2 <= atm <= 5 and hydro <= 3:
        classes.append(TradeClass.POOR)
    if hydro == 10:
        classes.append(TradeClass.WATER_WORLD)
    if hydro == 0 and atm > 1:
        classes.append(TradeClass.DESERT)
    if atm <= 1 and hydro == 10:
        classes.append(TradeClass.ICE_CAPPED)
    if atm == 0 and pop >= 2:
        classes.append(TradeClass.VACUUM)
    return classes
