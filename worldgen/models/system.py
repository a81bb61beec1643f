"""Star system tree: one star, its fixed array of orbit slots, and companions."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Union

from ..constants import CONTACT_ORBIT, FAR_ORBIT, PRIMARY_ORBIT
from ..errors import SlotConflict
from ..phases import Phase, advance
from .star import Star
from .tables import ZoneTable, get_zone, habitable_orbit
from .world import GasGiant, World


@dataclass(frozen=True)
class EmptyOrbit:
    """An orbit rolled to stay empty for good. Never overwritten by placement."""

    orbit: int


# A slot holds exactly one of these; None means "not decided yet"
Body = Union[World, GasGiant, "StarSystem"]
Slot = Union[World, GasGiant, "StarSystem", EmptyOrbit, None]


@dataclass(eq=False)
class StarSystem:
    """One star node of the system tree.

    ``orbit`` is relative to the parent star: PRIMARY_ORBIT for the
    top-level star, CONTACT_ORBIT for a contact companion, FAR_ORBIT for a
    distant one, otherwise the index of the parent slot it occupies.
    """

    name: str
    star: Star
    orbit: int = PRIMARY_ORBIT
    max_orbits: int = 0
    slots: list[Slot] = field(default_factory=list)
    secondary: StarSystem | None = None
    tertiary: StarSystem | None = None
    main_world: World | None = None
    phase: Phase | None = None

    def __post_init__(self) -> None:
        if not self.slots:
            self.slots = [None] * self.max_orbits

    # --- Zones ---

    @property
    def zones(self) -> ZoneTable:
        return get_zone(self.star)

    @property
    def habitable(self) -> int:
        return habitable_orbit(self.star)

    @property
    def is_contact(self) -> bool:
        return self.orbit == CONTACT_ORBIT

    @property
    def is_far(self) -> bool:
        return self.orbit == FAR_ORBIT

    # --- Slots ---

    def in_range(self, orbit: int) -> bool:
        return 0 <= orbit < self.max_orbits

    def slot(self, orbit: int) -> Slot:
        return self.slots[orbit]

    def is_unassigned(self, orbit: int) -> bool:
        return self.in_range(orbit) and self.slots[orbit] is None

    def unassigned_orbits(self) -> list[int]:
        return [i for i, content in enumerate(self.slots) if content is None]

    def place(self, body: Body, orbit: int) -> None:
        """Put ``body`` into an unassigned slot and stamp its orbit."""
        if not self.is_unassigned(orbit):
            raise SlotConflict(
                f"Orbit {orbit} of {self.name} is {self._describe_slot(orbit)}"
            )
        body.orbit = orbit
        self.slots[orbit] = body

    def force(self, body: Body, orbit: int) -> Slot:
        """Overwrite a slot regardless of contents; returns what was there."""
        if not self.in_range(orbit):
            raise SlotConflict(f"Orbit {orbit} is outside {self.name}'s {self.max_orbits} slots")
        previous = self.slots[orbit]
        body.orbit = orbit
        self.slots[orbit] = body
        return previous

    def mark_empty(self, orbit: int) -> bool:
        """Mark an unassigned slot Empty. Out-of-range or decided slots are left alone."""
        if not self.is_unassigned(orbit):
            return False
        self.slots[orbit] = EmptyOrbit(orbit)
        return True

    def _describe_slot(self, orbit: int) -> str:
        if not self.in_range(orbit):
            return "out of range"
        content = self.slots[orbit]
        if isinstance(content, EmptyOrbit):
            return "marked empty"
        return f"occupied by {content.name}"

    # --- Phases ---

    def enter_phase(self, phase: Phase) -> None:
        self.phase = advance(self.phase, phase)

    # --- Tree ---

    def companions(self) -> Iterator[StarSystem]:
        if self.secondary is not None:
            yield self.secondary
        if self.tertiary is not None:
            yield self.tertiary

    def count_stars(self) -> int:
        return 1 + sum(companion.count_stars() for companion in self.companions())

    def orbits(self, show_empty: bool = False) -> list[Slot]:
        """Slots as a renderer sees them: Empty reads as None unless asked for."""
        if show_empty:
            return list(self.slots)
        return [None if isinstance(s, EmptyOrbit) else s for s in self.slots]

    def bodies(self) -> Iterator[tuple[int, World | GasGiant]]:
        """Worlds and gas giants in slot order."""
        for orbit, content in enumerate(self.slots):
            if isinstance(content, (World, GasGiant)):
                yield orbit, content

    def walk(self) -> Iterator[StarSystem]:
        """This node, then every companion depth-first."""
        yield self
        for companion in self.companions():
            yield from companion.walk()

    def __str__(self) -> str:
        return f"{self.name} ({self.star})"


# ---------------------------------------------------------------------------
# Survey
# ---------------------------------------------------------------------------

@dataclass
class Survey:
    """Body counts for a whole system tree."""

    stars: int = 0
    worlds: int = 0
    gas_giants: int = 0
    satellites: int = 0
    planetoid_belts: int = 0


def survey(system: StarSystem) -> Survey:
    """Count bodies by walking the tree; nothing is cached on the model."""
    counts = Survey()
    for node in system.walk():
        counts.stars += 1
        for _, body in node.bodies():
            if isinstance(body, GasGiant):
                counts.gas_giants += 1
            elif body.is_belt:
                counts.planetoid_belts += 1
            else:
                counts.worlds += 1
            counts.satellites += len(body.satellites)
    return counts
