import pytest

from worldgen.config import GeneratorConfig
from worldgen.diagnostics import Diagnostics
from worldgen.models.generator import SystemGenerator, generate_system, world_population_mod
from worldgen.models.system import StarSystem
from worldgen.models.world import GasGiant, World
from worldgen.report import render_report

SEEDS = range(40)


def _main_world(upp="A788899-A"):
    return World.from_upp("Regina", upp, is_main_world=True)


def _every_world(system):
    """Yield every World in the tree, satellites included."""
    for node in system.walk():
        for _, body in node.bodies():
            if isinstance(body, World):
                yield body
            yield from body.satellites


def test_population_mod():
    assert world_population_mod(_main_world("A788899-A")) == 4
    assert world_population_mod(_main_world("B000853-9")) == 4
    assert world_population_mod(_main_world("B000453-9")) == 0
    assert world_population_mod(_main_world("CAA9400-9")) == 0


@pytest.mark.parametrize("seed", SEEDS)
def test_slots_are_consistent(seed):
    system = generate_system(_main_world(), seed=seed)
    for node in system.walk():
        assert len(node.slots) == node.max_orbits
        for orbit, content in enumerate(node.slots):
            if content is not None:
                assert content.orbit == orbit
    assert 1 <= system.count_stars() <= 5


@pytest.mark.parametrize("seed", SEEDS)
def test_main_world_is_seated_once(seed):
    main_world = _main_world()
    system = generate_system(main_world, seed=seed)
    assert system.main_world is main_world
    assert sum(1 for world in _every_world(system) if world is main_world) == 1


@pytest.mark.parametrize("seed", SEEDS)
def test_habitable_orbit_holds_the_main_world(seed):
    main_world = _main_world()
    system = generate_system(main_world, seed=seed)
    habitable = system.habitable
    if not 0 <= habitable < system.max_orbits:
        pytest.skip("primary has no usable habitable orbit")
    content = system.slot(habitable)
    if isinstance(content, GasGiant):
        assert main_world in content.satellites
    elif isinstance(content, StarSystem):
        # A companion with no orbits of its own sends the main world elsewhere
        assert content.main_world is main_world or content.max_orbits == 0
    else:
        assert content is main_world


@pytest.mark.parametrize("seed", SEEDS)
def test_subordinate_populations_stay_below_main(seed):
    main_world = _main_world()
    system = generate_system(main_world, seed=seed)
    for world in _every_world(system):
        if world is not main_world:
            assert 0 <= world.population < main_world.population


@pytest.mark.parametrize("seed", SEEDS)
def test_satellite_orbits_are_unique(seed):
    system = generate_system(_main_world(), seed=seed)
    for node in system.walk():
        for _, body in node.bodies():
            orbits = [s.orbit for s in body.satellites]
            assert len(orbits) == len(set(orbits))
            assert orbits == sorted(orbits)


@pytest.mark.parametrize("seed", SEEDS)
def test_unpopulated_main_world_leaves_no_population(seed):
    main_world = _main_world("X500000-0")
    system = generate_system(main_world, seed=seed)
    for world in _every_world(system):
        assert world.population == 0


def test_same_seed_same_system():
    first = SystemGenerator(_main_world(), seed=1234)
    second = SystemGenerator(_main_world(), seed=1234)
    assert render_report(first.system, first.diagnostics) == render_report(
        second.system, second.diagnostics
    )


def test_seed_is_recorded_when_not_given():
    generator = SystemGenerator(_main_world())
    assert isinstance(generator.seed, int)
    again = SystemGenerator(_main_world(), seed=generator.seed)
    assert render_report(generator.system) == render_report(again.system)


def test_main_world_is_classified():
    main_world = _main_world()
    SystemGenerator(main_world, seed=5)
    assert main_world.is_main_world
    assert main_world.trade_classes_string() == "Ri"


def test_retry_limit_comes_from_config():
    config = GeneratorConfig(satellite_orbit_retry_limit=1)
    diagnostics = Diagnostics()
    generator = SystemGenerator(_main_world(), seed=7, config=config, diagnostics=diagnostics)
    assert generator.config.satellite_orbit_retry_limit == 1
    for node in generator.system.walk():
        for _, body in node.bodies():
            orbits = [s.orbit for s in body.satellites]
            assert len(orbits) == len(set(orbits))


@pytest.mark.parametrize(
    "upp", ["A788899-A", "B000453-9", "CAA9400-9", "E200000-0", "C566777-7", "X000000-0"]
)
def test_assorted_main_worlds(upp):
    for seed in range(10):
        system = generate_system(_main_world(upp), seed=seed)
        assert render_report(system)
