"""Procedural names for stars, worlds and moons.

Names are strung together from short Vilani-flavoured syllables, the way
Third Imperium charts read: Kashadur, Gimeda, Irlaggur.
"""

from __future__ import annotations

from .dice import Dice

_SYLLABLES = [
    "ka", "gi", "ar", "shu", "lin", "me", "da", "ir", "ku", "ne",
    "zi", "um", "ga", "ri", "sha", "kir", "dur", "an", "lag", "gur",
]

# Imperial survey catalogues
_CATALOGUES = ["IISS", "SPA", "ISR", "KFV"]

_PLANET_ENDINGS = ["a", "on", "ia", "ar", "em", "ys", "ora", "ant", "el", "ide"]

_MOON_PREFIXES = [
    "Ae", "Bri", "Cal", "Dei", "Ely", "Gan", "Hel", "Io", "Lar", "Mne",
    "Nyx", "Pho", "Rhe", "Tet", "Tha", "Umb", "Vex", "Zel",
]

_MOON_SUFFIXES = ["ne", "mos", "ra", "lis", "to", "ope", "da", "tis", "ia", "on"]

_ROMAN = [
    (10, "X"), (9, "IX"), (5, "V"), (4, "IV"), (1, "I"),
]

SUBSECTOR_COLUMNS = 8
SUBSECTOR_ROWS = 10


def arabic_to_roman(num: int) -> str:
    """Roman numeral for 0–20; zero is written "N"."""
    if not 0 <= num <= 20:
        raise ValueError(f"Input ({num}) must be an integer between 0 and 20")
    if num == 0:
        return "N"
    result = ""
    for value, symbol in _ROMAN:
        while num >= value:
            result += symbol
            num -= value
    return result


def _syllables(dice: Dice, count: int) -> str:
    return "".join(dice.choice(_SYLLABLES) for _ in range(count)).capitalize()


def generate_system_name(dice: Dice) -> str:
    """Name a star: a plain name, a name with its subsector hex, or a survey entry."""
    style = dice.below(3)
    if style == 0:
        return _syllables(dice, 2 + dice.below(2))
    if style == 1:
        name = _syllables(dice, 2)
        column = 1 + dice.below(SUBSECTOR_COLUMNS)
        row = 1 + dice.below(SUBSECTOR_ROWS)
        return f"{name} {column:02d}{row:02d}"
    catalogue = dice.choice(_CATALOGUES)
    return f"{catalogue}-{1000 + dice.below(9000)}"


def generate_planet_name(dice: Dice) -> str:
    return _syllables(dice, 1 + dice.below(2)) + dice.choice(_PLANET_ENDINGS)


def generate_moon_name(dice: Dice) -> str:
    return dice.choice(_MOON_PREFIXES) + dice.choice(_MOON_SUFFIXES)


def designation(system_name: str, orbit: int) -> str:
    """Systematic name for an unsettled body, e.g. "Kashadur IV"."""
    return f"{system_name} {arabic_to_roman(orbit + 1)}"
