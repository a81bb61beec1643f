"""UPP string codec: ``A788899-A`` style world profiles.

Layout: port, size, atmosphere, hydrographics, population, government,
law level, a separator, then tech level. Every digit is one hex character
except the size digit, which also knows the special ``S`` (small body) and
``R`` (ring) encodings.
"""

from __future__ import annotations

import enum
import logging
from typing import NamedTuple

from ..constants import MAX_DIGIT
from ..diagnostics import Category, Diagnostics
from ..errors import InvalidDigit, InvalidSize

logger = logging.getLogger(__name__)

UPP_LENGTH = 9
SEPARATOR_INDEX = 7
_SEPARATORS = ("-", " ")
_HEX_DIGITS = "0123456789ABCDEF"


class PortCode(enum.Enum):
    """Starport classes. A–E and X for main worlds, Y/H/G/F for the rest."""

    A = "A"
    B = "B"
    C = "C"
    D = "D"
    E = "E"
    X = "X"
    Y = "Y"
    H = "H"
    G = "G"
    F = "F"

    @classmethod
    def from_char(cls, char: str) -> PortCode:
        """Port for a UPP character; anything unknown is treated as Y."""
        try:
            return cls(char.upper())
        except ValueError:
            return cls.Y

    def __str__(self) -> str:
        return self.value


class UppDigits(NamedTuple):
    port: PortCode
    size: int
    atmosphere: int
    hydro: int
    population: int
    government: int
    law_level: int
    tech_level: int


# ---------------------------------------------------------------------------
# Single digits
# ---------------------------------------------------------------------------

def to_hex(value: int) -> str:
    """Encode 0–15 as one uppercase hex character."""
    if not 0 <= value <= MAX_DIGIT:
        raise InvalidSize(f"{value} does not fit in a single hex digit")
    return _HEX_DIGITS[value]


def from_hex(char: str) -> int:
    """Decode one hex character (either case)."""
    value = _HEX_DIGITS.find(char.upper()) if len(char) == 1 else -1
    if value < 0:
        raise InvalidDigit(f"'{char}' is not a hexadecimal digit")
    return value


def encode_size(size: int, name: str, is_satellite: bool, is_main_world: bool) -> str:
    """Size digit, including the S and R encodings for small bodies and rings."""
    if is_satellite and size == -1:
        return "S"
    if is_satellite and size == 0:
        return "R"
    if size <= 0 and not is_main_world and not is_satellite and "Planetoid" not in name:
        return "S"
    if size == 0:
        return "0"
    return to_hex(size)


def decode_size(char: str, is_satellite: bool) -> int:
    if char.upper() == "S":
        return -1 if is_satellite else 0
    if char.upper() == "R":
        return 0
    return from_hex(char)


# ---------------------------------------------------------------------------
# Whole strings
# ---------------------------------------------------------------------------

def format_upp(
    digits: UppDigits,
    name: str = "",
    is_satellite: bool = False,
    is_main_world: bool = False,
) -> str:
    """Render digits as a nine-character UPP string."""
    return (
        f"{digits.port.value}"
        f"{encode_size(digits.size, name, is_satellite, is_main_world)}"
        f"{to_hex(digits.atmosphere)}{to_hex(digits.hydro)}"
        f"{to_hex(digits.population)}{to_hex(digits.government)}"
        f"{to_hex(digits.law_level)}-{to_hex(digits.tech_level)}"
    )


def parse_upp(
    upp: str,
    is_satellite: bool = False,
    diagnostics: Diagnostics | None = None,
) -> UppDigits:
    """Decode a UPP string.

    Raises InvalidDigit on a short string or a non-hex digit. A separator
    other than '-' or ' ' is reported and otherwise ignored.
    """
    if len(upp) < UPP_LENGTH:
        raise InvalidDigit(f"UPP '{upp}' is shorter than {UPP_LENGTH} characters")

    separator = upp[SEPARATOR_INDEX]
    if separator not in _SEPARATORS:
        message = f"Unexpected separator '{separator}' in UPP '{upp}'"
        if diagnostics is not None:
            diagnostics.warn(Category.INPUT, message, upp=upp, separator=separator)
        else:
            logger.warning(message)

    return UppDigits(
        port=PortCode.from_char(upp[0]),
        size=decode_size(upp[1], is_satellite),
        atmosphere=from_hex(upp[2]),
        hydro=from_hex(upp[3]),
        population=from_hex(upp[4]),
        government=from_hex(upp[5]),
        law_level=from_hex(upp[6]),
        tech_level=from_hex(upp[8]),
    )
