"""Orbit population pipeline for one star node and, recursively, its companions.

Phases run in a fixed order per node (see :class:`~worldgen.phases.Phase`):
each later phase decides eligibility from the slot state the earlier ones
left behind.
"""

from __future__ import annotations

import logging

from ..constants import BELT_NAME, CONTACT_ORBIT, SATELLITE_RETRY_LIMIT
from ..diagnostics import Category, Diagnostics
from ..phases import Phase
from .dice import Dice
from .names import designation, generate_planet_name
from .satellites import SETTLED_ATMOSPHERES, gen_satellite_orbit, generate_satellites
from .star import StarType
from .subordinate import clamp_population, finish_subordinate
from .system import EmptyOrbit, StarSystem
from .world import GasGiant, GasGiantSize, World

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Rolls
# ---------------------------------------------------------------------------

def roll_blocked_orbits(dice: Dice) -> int:
    if dice.d6() < 5:
        return 0
    roll = dice.d6()
    if roll <= 2:
        return 1
    if roll == 3:
        return 2
    return 3


def roll_gas_giants(dice: Dice) -> int:
    if dice.roll_2d6() >= 10:
        return 0
    roll = dice.roll_2d6()
    if roll <= 3:
        return 1
    if roll <= 5:
        return 2
    if roll <= 7:
        return 3
    if roll <= 10:
        return 4
    return 5


def roll_planetoids(num_giants: int, dice: Dice) -> int:
    if dice.roll_2d6() >= 7:
        return 0
    roll = dice.roll_2d6() - num_giants
    if roll <= 3:
        return 3
    if roll <= 6:
        return 2
    return 1


def requires_habitable(world: World) -> bool:
    """Worlds with a real atmosphere and a surface must sit in the habitable zone."""
    return 1 < world.atmosphere < 10 and world.size > 0


def generate_world(system: StarSystem, orbit: int, main_world: World, dice: Dice) -> World:
    """Roll a filler world for ``orbit`` of ``system``."""
    star = system.star
    zones = system.zones

    modifier = {0: -5, 1: -4, 2: -2}.get(orbit, 0)
    if star.star_type is StarType.M:
        modifier -= 2
    size = max(0, dice.roll_2d6() - 2 + modifier)

    inner = orbit <= zones.inner
    beyond = orbit > zones.habitable

    runaway_roll = dice.roll_2d6()
    atmosphere = dice.roll_2d6() - 7 + size
    if inner:
        atmosphere -= 2
    if beyond:
        atmosphere -= 2
    atmosphere = max(0, min(atmosphere, 10))
    if runaway_roll == 12 and beyond:
        atmosphere = 10

    hydro = dice.roll_2d6() - 7 + size
    if beyond:
        hydro -= 4
    if atmosphere <= 1 or atmosphere >= 10:
        hydro -= 4
    hydro = max(0, min(hydro, 10))
    if size <= 0 or inner:
        hydro = 0

    population = dice.roll_2d6() - 2
    if inner:
        population -= 5
    if beyond:
        population -= 5
    if atmosphere not in SETTLED_ATMOSPHERES:
        population -= 2
    population = clamp_population(population, main_world)

    if population > 0:
        name = generate_planet_name(dice)
    else:
        name = designation(system.name, orbit)

    world = World(
        name=name,
        orbit=orbit,
        position_in_system=orbit,
        size=size,
        atmosphere=atmosphere,
        hydro=hydro,
        population=population,
    )
    finish_subordinate(world, zones, main_world, dice)
    world.compute_astro(star, dice)
    return world


# ---------------------------------------------------------------------------
# Pipeline
# ---------------------------------------------------------------------------

class SystemPopulator:
    """Fills the orbit slots of a system tree around one main world."""

    def __init__(
        self,
        main_world: World,
        dice: Dice,
        diagnostics: Diagnostics | None = None,
        retry_limit: int = SATELLITE_RETRY_LIMIT,
    ) -> None:
        self.main_world = main_world
        self.dice = dice
        self.diagnostics = diagnostics if diagnostics is not None else Diagnostics()
        self.retry_limit = retry_limit

    def populate(self, system: StarSystem, is_primary: bool = True) -> None:
        """Run every phase on ``system`` and recurse into its companions."""
        self.seed_empty_orbits(system)
        giants = self.gen_gas_giants(system)
        self.gen_planetoids(system, giants)
        if is_primary:
            self.place_main_world(system)
        self.fill_worlds(system)
        self.populate_satellites(system)

        system.enter_phase(Phase.COMPANIONS)
        for companion in system.companions():
            # Contact companions share this star's orbits
            if companion.orbit > CONTACT_ORBIT:
                self.populate(companion, is_primary=False)

    # --- Empty orbits ---

    def seed_empty_orbits(self, system: StarSystem) -> int:
        system.enter_phase(Phase.EMPTY_SEED)
        count = roll_blocked_orbits(self.dice)
        marked = 0
        for _ in range(count):
            open_orbits = system.unassigned_orbits()
            if not open_orbits:
                break
            orbit = self.dice.choice(open_orbits)
            system.mark_empty(orbit)
            marked += 1
        logger.debug("%s: %d empty orbit(s) seeded", system.name, marked)
        return marked

    # --- Gas giants ---

    def gen_gas_giants(self, system: StarSystem) -> int:
        system.enter_phase(Phase.GAS_GIANTS)
        wanted = roll_gas_giants(self.dice)
        if wanted == 0:
            return 0
        return self.place_gas_giants(system, wanted)

    def place_gas_giants(self, system: StarSystem, wanted: int) -> int:
        """Place up to ``wanted`` giants, outer orbits first; returns how many fit."""
        habitable = system.zones.habitable
        open_orbits = system.unassigned_orbits()
        outer = [o for o in open_orbits if o >= habitable]
        inner = [o for o in open_orbits if o < habitable]

        placed = 0
        while placed < wanted and (outer or inner):
            candidates = outer if outer else inner
            orbit = candidates.pop(self.dice.below(len(candidates)))
            size = GasGiantSize.SMALL if self.dice.d6() <= 3 else GasGiantSize.LARGE
            giant = GasGiant(name=designation(system.name, orbit), size=size, orbit=orbit)
            system.place(giant, orbit)
            placed += 1

        if placed < wanted:
            self.diagnostics.warn(
                Category.SHORTFALL,
                f"{system.name}: room for {placed} of {wanted} gas giants",
                body="gas giant",
                wanted=wanted,
                placed=placed,
                shortfall=wanted - placed,
            )
        return placed

    # --- Planetoid belts ---

    def gen_planetoids(self, system: StarSystem, num_giants: int) -> int:
        system.enter_phase(Phase.PLANETOIDS)
        wanted = roll_planetoids(num_giants, self.dice)
        if wanted == 0:
            return 0
        return self.place_planetoids(system, wanted)

    def place_planetoids(self, system: StarSystem, wanted: int) -> int:
        """Place belts, preferring the open orbit just inside each gas giant."""
        shadowed = [
            orbit - 1
            for orbit, body in system.bodies()
            if isinstance(body, GasGiant) and system.is_unassigned(orbit - 1)
        ]
        others = [o for o in system.unassigned_orbits() if o not in shadowed]

        placed = 0
        while placed < wanted and (shadowed or others):
            candidates = shadowed if shadowed else others
            orbit = candidates.pop(self.dice.below(len(candidates)))
            system.place(self._planetoid_belt(system, orbit), orbit)
            placed += 1

        if placed < wanted:
            self.diagnostics.warn(
                Category.SHORTFALL,
                f"{system.name}: room for {placed} of {wanted} planetoid belts",
                body="planetoid belt",
                wanted=wanted,
                placed=placed,
                shortfall=wanted - placed,
            )
        return placed

    def _planetoid_belt(self, system: StarSystem, orbit: int) -> World:
        zones = system.zones
        population = self.dice.roll_2d6() - 2
        if orbit <= zones.inner:
            population -= 5
        if orbit > zones.habitable:
            population -= 5
        belt = World(
            name=BELT_NAME,
            orbit=orbit,
            position_in_system=orbit,
            population=clamp_population(population, self.main_world),
        )
        finish_subordinate(belt, zones, self.main_world, self.dice)
        belt.compute_astro(system.star, self.dice)
        return belt

    # --- Main world ---

    def place_main_world(self, system: StarSystem) -> None:
        """Seat the main world, in the habitable zone when it needs one."""
        system.enter_phase(Phase.MAIN_WORLD)
        main_world = self.main_world
        main_world.is_main_world = True
        system.main_world = main_world

        if requires_habitable(main_world):
            self._place_habitable(system, self._habitable_target(system))
        else:
            self._place_anywhere(system)

    def _habitable_target(self, system: StarSystem) -> int:
        target = system.habitable
        if target < 0:
            target = max(system.zones.inner, 0)
            self.diagnostics.warn(
                Category.ZONE,
                f"{system.name} ({system.star}) has no habitable zone; using orbit {target}",
                star=str(system.star),
                orbit=target,
            )
        if target >= system.max_orbits:
            clamped = system.max_orbits - 1
            self.diagnostics.warn(
                Category.ZONE,
                f"Orbit {target} is beyond the {system.max_orbits} orbits of {system.name}; "
                f"using orbit {clamped}",
                star=str(system.star),
                orbit=clamped,
            )
            target = clamped
        return target

    def _place_habitable(self, system: StarSystem, target: int) -> None:
        main_world = self.main_world
        content = system.slot(target)

        if isinstance(content, StarSystem):
            if content.max_orbits == 0:
                self.diagnostics.warn(
                    Category.ZONE,
                    f"Companion {content.name} at orbit {target} has no orbits of its own",
                    star=str(content.star),
                    orbit=target,
                )
                self._place_anywhere(system)
                return
            # The main world orbits the companion, not this star
            self.diagnostics.note(
                Category.PLACEMENT,
                f"{main_world.name} orbits companion {content.name} at orbit {target}",
                host=content.name,
                orbit=target,
            )
            content.main_world = main_world
            self._place_habitable(content, self._habitable_target(content))
        elif isinstance(content, GasGiant):
            main_world.is_satellite = True
            main_world.orbit = gen_satellite_orbit(
                content, main_world.size == 0, self.dice, self.retry_limit, self.diagnostics
            )
            main_world.position_in_system = target
            content.satellites.append(main_world)
            main_world.compute_astro(system.star, self.dice)
            self.diagnostics.note(
                Category.PLACEMENT,
                f"{main_world.name} is satellite {main_world.orbit} of {content.name}",
                host=content.name,
                orbit=target,
            )
        else:
            self._seat(system, target)

    def _place_anywhere(self, system: StarSystem) -> None:
        open_orbits = system.unassigned_orbits()
        if open_orbits:
            orbit = self.dice.choice(open_orbits)
        else:
            # Nowhere free: take any slot, whatever is in it
            orbit = self.dice.below(system.max_orbits)
        self._seat(system, orbit)

    def _seat(self, system: StarSystem, orbit: int) -> None:
        main_world = self.main_world
        main_world.position_in_system = orbit
        previous = system.force(main_world, orbit)
        if previous is not None and not isinstance(previous, EmptyOrbit):
            self.diagnostics.note(
                Category.PLACEMENT,
                f"{main_world.name} replaced {previous.name} at orbit {orbit}",
                replaced=previous.name,
                orbit=orbit,
            )
        main_world.compute_astro(system.star, self.dice)

    # --- Filler worlds ---

    def fill_worlds(self, system: StarSystem) -> int:
        """Close orbits stay empty; every other undecided orbit gets a world."""
        system.enter_phase(Phase.FILLER)
        hot = system.zones.hot
        for orbit in range(0, hot + 1):
            system.mark_empty(orbit)

        created = 0
        for orbit in range(max(0, hot + 1), system.max_orbits):
            if system.is_unassigned(orbit):
                system.place(generate_world(system, orbit, self.main_world, self.dice), orbit)
                created += 1
        return created

    # --- Satellites ---

    def populate_satellites(self, system: StarSystem) -> None:
        system.enter_phase(Phase.SATELLITES)
        zones = system.zones
        for orbit, body in list(system.bodies()):
            generate_satellites(
                body, zones, self.main_world, system.star, self.dice,
                self.retry_limit, self.diagnostics,
            )
            if isinstance(body, GasGiant):
                # Giants with a sizeable settlement among their moons earn a name
                if any(s.population >= 5 for s in body.satellites):
                    body.name = generate_planet_name(self.dice)
                else:
                    body.name = designation(system.name, orbit)
