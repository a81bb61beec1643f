"""Exceptions raised by the generator.

Only invariant violations and malformed input digits are raised; soft
problems (missing zones, too few orbits) go through Diagnostics instead.
"""

from __future__ import annotations


class WorldgenError(Exception):
    """Base class for every generator failure."""


class InvalidDigit(WorldgenError, ValueError):
    """A UPP digit is not a hexadecimal character, or the string is too short."""


class InvalidSubtype(WorldgenError, ValueError):
    """A stellar subtype outside 0–9 reached the zone tables."""


class InvalidSize(WorldgenError, ValueError):
    """A value outside [0, 15] was asked to encode as a single hex digit."""


class SlotConflict(WorldgenError):
    """A placement tried to overwrite an Empty or occupied orbit slot."""


class PhaseOrderError(WorldgenError):
    """Population phases ran out of their fixed order."""
