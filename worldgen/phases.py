"""Population phases for a single star's orbit slots."""

from __future__ import annotations

import enum

from .errors import PhaseOrderError


class Phase(enum.Enum):
    """Ordered steps of the orbit population pipeline."""

    EMPTY_SEED = "empty_seed"
    GAS_GIANTS = "gas_giants"
    PLANETOIDS = "planetoids"
    MAIN_WORLD = "main_world"
    FILLER = "filler"
    SATELLITES = "satellites"
    COMPANIONS = "companions"

    @property
    def rank(self) -> int:
        return _PHASE_ORDER.index(self)


_PHASE_ORDER = list(Phase)


def advance(current: Phase | None, nxt: Phase) -> Phase:
    """Return ``nxt`` if it may follow ``current``; raise otherwise.

    Phases may be skipped (companion stars never run MAIN_WORLD) but never
    revisited, since later phases read slot state left by earlier ones.
    """
    if current is not None and nxt.rank <= current.rank:
        raise PhaseOrderError(f"{nxt.value} cannot run after {current.value}")
    return nxt
