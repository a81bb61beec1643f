import pytest

from worldgen.constants import BELT_NAME, CONTACT_ORBIT, FAR_ORBIT
from worldgen.errors import SlotConflict
from worldgen.models.star import Star, StarSize, StarType
from worldgen.models.system import EmptyOrbit, StarSystem, survey
from worldgen.models.world import GasGiant, GasGiantSize, World, make_ring


def test_slots_start_unassigned(g2v_system):
    assert g2v_system.slots == [None] * 6
    assert g2v_system.unassigned_orbits() == [0, 1, 2, 3, 4, 5]


def test_place_stamps_orbit(g2v_system):
    world = World("Rock")
    g2v_system.place(world, 2)
    assert g2v_system.slot(2) is world
    assert world.orbit == 2
    assert 2 not in g2v_system.unassigned_orbits()


def test_place_refuses_decided_slots(g2v_system):
    g2v_system.place(World("Rock"), 2)
    g2v_system.mark_empty(3)
    with pytest.raises(SlotConflict, match="occupied by Rock"):
        g2v_system.place(World("Other"), 2)
    with pytest.raises(SlotConflict, match="marked empty"):
        g2v_system.place(World("Other"), 3)
    with pytest.raises(SlotConflict, match="out of range"):
        g2v_system.place(World("Other"), 6)


def test_force_returns_previous(g2v_system):
    rock = World("Rock")
    g2v_system.place(rock, 1)
    previous = g2v_system.force(World("Main"), 1)
    assert previous is rock
    assert g2v_system.slot(1).name == "Main"
    with pytest.raises(SlotConflict):
        g2v_system.force(World("Main"), -1)


def test_mark_empty_only_touches_unassigned(g2v_system):
    g2v_system.place(World("Rock"), 1)
    assert g2v_system.mark_empty(0)
    assert not g2v_system.mark_empty(0)
    assert not g2v_system.mark_empty(1)
    assert not g2v_system.mark_empty(9)
    assert g2v_system.slot(0) == EmptyOrbit(0)
    assert g2v_system.slot(1).name == "Rock"


def test_orbits_hide_empty_unless_asked(g2v_system):
    g2v_system.mark_empty(0)
    assert g2v_system.orbits()[0] is None
    assert isinstance(g2v_system.orbits(show_empty=True)[0], EmptyOrbit)


def test_companion_flags():
    star = Star(StarType.M, 2, StarSize.V)
    assert StarSystem("Close", star, orbit=CONTACT_ORBIT).is_contact
    assert StarSystem("Distant", star, orbit=FAR_ORBIT).is_far
    assert str(StarSystem("Close", star)) == "Close (M2 V)"


def _tree(g2v):
    primary = StarSystem("Sol", g2v, max_orbits=6)
    giant = GasGiant("Jove", GasGiantSize.LARGE, orbit=4)
    giant.satellites.extend([World("Io", is_satellite=True), make_ring(1, 4)])
    primary.place(World("Terra", size=8), 3)
    primary.place(World(BELT_NAME), 2)
    primary.place(giant, 4)

    companion = StarSystem("Twin", Star(StarType.K, 2, StarSize.V), max_orbits=3)
    moon_host = World("Far", size=5)
    moon_host.satellites.append(World("Luna", is_satellite=True))
    companion.place(moon_host, 1)
    primary.place(companion, 5)
    primary.secondary = companion

    distant = StarSystem("Speck", Star(StarType.M, 8, StarSize.D), orbit=FAR_ORBIT)
    companion.secondary = distant
    return primary


def test_tree_walk_and_star_count(g2v):
    primary = _tree(g2v)
    assert [node.name for node in primary.walk()] == ["Sol", "Twin", "Speck"]
    assert primary.count_stars() == 3
    assert list(primary.companions())[0].name == "Twin"


def test_bodies_skip_stars(g2v):
    primary = _tree(g2v)
    assert [orbit for orbit, _ in primary.bodies()] == [2, 3, 4]


def test_survey_counts_whole_tree(g2v):
    counts = survey(_tree(g2v))
    assert counts.stars == 3
    assert counts.worlds == 2
    assert counts.planetoid_belts == 1
    assert counts.gas_giants == 1
    assert counts.satellites == 3
