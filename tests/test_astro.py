import math

import pytest

from conftest import faces, scripted

from worldgen.models.astro import AstroData
from worldgen.models.star import Star, StarSize, StarType
from worldgen.models.world import World


def _world(position, size=8, atmosphere=6, hydro=7):
    return World(
        "Terra", position_in_system=position, size=size, atmosphere=atmosphere, hydro=hydro
    )


def test_mass_and_gravity_scale_with_size(g2v):
    astro = AstroData.compute(g2v, _world(5, size=4, atmosphere=0, hydro=0), scripted())
    assert astro.gravity == pytest.approx(0.5)
    assert astro.mass == pytest.approx(0.125)

    rock = AstroData.compute(g2v, _world(5, size=0, atmosphere=0, hydro=0), scripted())
    assert rock.gravity == 0.0
    assert rock.mass == 0.0


def test_orbit_uses_keplers_third_law(g2v):
    astro = AstroData.compute(g2v, _world(5, atmosphere=0, hydro=0), scripted())
    distance = 418.9 / 149.6
    assert astro.orbit_distance == pytest.approx(distance)
    assert astro.orbital_period == pytest.approx(math.sqrt(distance ** 3 / 1.04))


def test_massless_star_has_no_period():
    star = Star(StarType.K, 5, StarSize.IV)
    astro = AstroData.compute(star, _world(2, atmosphere=0, hydro=0), scripted())
    assert astro.orbital_period == 0.0


def test_temperature_away_from_habitable_zone(g2v):
    astro = AstroData.compute(g2v, _world(5, size=4, atmosphere=0, hydro=0), scripted())
    expected = 374.02 * 1.21 ** 0.25 / math.sqrt(418.9 / 149.6)
    assert astro.albedo == 0.0
    assert astro.greenhouse == 1.0
    assert astro.temp == pytest.approx(expected)
    assert astro.ice_cap_percent == 0.0


def test_habitable_zone_temperature_is_rolled(g2v):
    # Albedo and greenhouse give a -3 modifier; 10 - 3 reads 15 °C
    dice = scripted(*faces(5, 5))
    astro = AstroData.compute(g2v, _world(3), dice)
    assert dice.source.exhausted
    assert astro.albedo == pytest.approx(0.2492)
    assert astro.greenhouse == pytest.approx(1.1)
    assert astro.temp == pytest.approx(288.0)
    assert astro.ice_cap_percent == pytest.approx(0.0875)
    assert astro.orbit_distance == pytest.approx(1.0)


def test_describe(g2v):
    astro = AstroData.compute(g2v, _world(3), scripted(*faces(5, 5)))
    assert astro.describe(6) == "+15.00 °C,  9% ice, 1.0G, 1.0 yrs"


@pytest.mark.parametrize("atmosphere", [0, 1])
def test_describe_is_blank_without_air(g2v, atmosphere):
    astro = AstroData.compute(g2v, _world(3), scripted(*faces(5, 5)))
    assert astro.describe(atmosphere) == ""


def test_world_keeps_its_astro(g2v):
    world = _world(3)
    world.compute_astro(g2v, scripted(*faces(5, 5)))
    assert world.astro_description().startswith("+15.00")
