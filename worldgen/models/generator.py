"""Top-level entry point: build a whole star system around one main world."""

from __future__ import annotations

import logging
import random

from ..config import GeneratorConfig
from ..constants import STAR_BONUS
from ..diagnostics import Diagnostics
from .dice import Dice, RandomSource
from .population import SystemPopulator
from .stellar import build_system
from .system import StarSystem
from .world import World

logger = logging.getLogger(__name__)


def world_population_mod(main_world: World) -> int:
    """Primary-type bonus for main worlds that want a conventional star."""
    if 4 <= main_world.atmosphere <= 9 or main_world.population >= 8:
        return STAR_BONUS
    return 0


class SystemGenerator:
    """Generates one star system, reproducibly from a seed.

    Pass ``source`` to drive the dice from anything with ``randrange``;
    otherwise a ``random.Random`` seeded with ``seed`` is used.
    """

    def __init__(
        self,
        main_world: World,
        seed: int | None = None,
        source: RandomSource | None = None,
        config: GeneratorConfig | None = None,
        diagnostics: Diagnostics | None = None,
    ) -> None:
        self.seed = seed if seed is not None else random.randint(0, 2**32)
        self.dice = Dice(source) if source is not None else Dice(seed=self.seed)
        self.config = config if config is not None else GeneratorConfig()
        self.diagnostics = diagnostics if diagnostics is not None else Diagnostics()
        self.main_world = main_world

        self.system = self._generate()

    def _generate(self) -> StarSystem:
        """Stars first, then the population pipeline from the primary down."""
        main_world = self.main_world
        main_world.is_main_world = True
        main_world.classify_trade()

        system = build_system(world_population_mod(main_world), True, self.dice)
        logger.info(
            "Generating %s around %s (%s), seed %d",
            system.name, main_world.name, main_world.to_upp(), self.seed,
        )

        populator = SystemPopulator(
            main_world,
            self.dice,
            diagnostics=self.diagnostics,
            retry_limit=self.config.satellite_orbit_retry_limit,
        )
        populator.populate(system, is_primary=True)
        return system


def generate_system(
    main_world: World,
    seed: int | None = None,
    source: RandomSource | None = None,
    config: GeneratorConfig | None = None,
) -> StarSystem:
    """Convenience wrapper returning just the generated tree."""
    return SystemGenerator(main_world, seed=seed, source=source, config=config).system
