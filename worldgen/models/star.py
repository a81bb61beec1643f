"""Stellar classification: spectral type, subtype and luminosity size."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class StarType(enum.Enum):
    """Spectral classes, hottest first."""

    O = "O"
    B = "B"
    A = "A"
    F = "F"
    G = "G"
    K = "K"
    M = "M"

    @property
    def rank(self) -> int:
        return _TYPE_ORDER.index(self)


class StarSize(enum.Enum):
    """Luminosity classes, most luminous first."""

    IA = "Ia"
    IB = "Ib"
    II = "II"
    III = "III"
    IV = "IV"
    V = "V"
    VI = "VI"
    D = "D"

    @property
    def rank(self) -> int:
        return _SIZE_ORDER.index(self)

    @property
    def is_supergiant(self) -> bool:
        # II is a bright giant but shares the supergiant orbit bonus
        return self in (StarSize.IA, StarSize.IB, StarSize.II)


_TYPE_ORDER = list(StarType)
_SIZE_ORDER = list(StarSize)


@dataclass(frozen=True)
class Star:
    """A fully classified star, e.g. G2 V."""

    star_type: StarType
    subtype: int  # 0–9, lower is hotter
    size: StarSize

    def __str__(self) -> str:
        return f"{self.star_type.value}{self.subtype} {self.size.value}"
