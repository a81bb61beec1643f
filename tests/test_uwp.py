import pytest

from worldgen.diagnostics import Category, Diagnostics
from worldgen.errors import InvalidDigit, InvalidSize
from worldgen.models.uwp import PortCode, encode_size, from_hex, parse_upp, to_hex
from worldgen.models.world import World


def test_parse_standard_upp():
    digits = parse_upp("A788899-A")
    assert digits.port is PortCode.A
    assert (digits.size, digits.atmosphere, digits.hydro) == (7, 8, 8)
    assert (digits.population, digits.government, digits.law_level) == (8, 9, 9)
    assert digits.tech_level == 10


def test_hex_is_case_insensitive():
    assert parse_upp("b7a8c9f-e").tech_level == 14
    assert parse_upp("b7a8c9f-e").port is PortCode.B


def test_unknown_port_defaults_to_y():
    assert parse_upp("Q788899-A").port is PortCode.Y


def test_space_separator_is_accepted():
    diagnostics = Diagnostics()
    parse_upp("A788899 A", diagnostics=diagnostics)
    assert len(diagnostics) == 0


def test_bad_separator_is_reported_not_fatal():
    diagnostics = Diagnostics()
    digits = parse_upp("A788899xA", diagnostics=diagnostics)
    assert digits.tech_level == 10
    assert [d.category for d in diagnostics] == [Category.INPUT]


@pytest.mark.parametrize("upp", ["A7G8899-A", "A788899-Z", "A78", ""])
def test_bad_digits_fail(upp):
    with pytest.raises(InvalidDigit):
        parse_upp(upp)


@pytest.mark.parametrize("value", [-1, 16])
def test_to_hex_rejects_out_of_range(value):
    with pytest.raises(InvalidSize):
        to_hex(value)


def test_hex_digits():
    assert to_hex(10) == "A"
    assert to_hex(15) == "F"
    assert from_hex("f") == 15


@pytest.mark.parametrize(
    "size, name, is_satellite, is_main_world, expected",
    [
        (-1, "Ganymede", True, False, "S"),
        (0, "Ring System", True, False, "R"),
        (0, "Sol IV", False, False, "S"),
        (0, "Planetoid Belt", False, False, "0"),
        (0, "Ceres", False, True, "0"),
        (10, "Big", False, False, "A"),
    ],
)
def test_size_encoding(size, name, is_satellite, is_main_world, expected):
    assert encode_size(size, name, is_satellite, is_main_world) == expected


def test_size_encoding_rejects_oversize():
    with pytest.raises(InvalidSize):
        encode_size(16, "Huge", False, False)


@pytest.mark.parametrize(
    "world",
    [
        World("Regina", size=7, atmosphere=8, hydro=8, population=8, government=9,
              law_level=9, tech_level=10, port=PortCode.A, is_main_world=True),
        World("Ceres", size=0, population=4, government=2, tech_level=9,
              port=PortCode.C, is_main_world=True),
        World("Planetoid Belt", size=0, population=2, law_level=3, port=PortCode.G),
        World("Sol IX", size=0, atmosphere=0, port=PortCode.Y),
        World("Moonlet", size=-1, port=PortCode.Y, is_satellite=True),
        World("Ring System", size=0, port=PortCode.Y, is_satellite=True),
        World("Titan", size=15, atmosphere=15, hydro=10, population=15, government=15,
              law_level=15, tech_level=15, port=PortCode.F, is_satellite=True),
    ],
    ids=lambda w: w.name,
)
def test_upp_round_trip(world):
    parsed = World.from_upp(
        world.name, world.to_upp(),
        is_satellite=world.is_satellite, is_main_world=world.is_main_world,
    )
    assert parsed == world


def test_ring_upp():
    ring = World("Ring System", size=0, port=PortCode.Y, is_satellite=True)
    assert ring.to_upp() == "YR00000-0"
