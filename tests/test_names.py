import re

import pytest

from conftest import scripted

from worldgen.models.dice import Dice
from worldgen.models.names import (
    arabic_to_roman,
    designation,
    generate_planet_name,
    generate_system_name,
)


@pytest.mark.parametrize(
    "num, numeral",
    [(0, "N"), (1, "I"), (4, "IV"), (9, "IX"), (14, "XIV"), (19, "XIX"), (20, "XX")],
)
def test_arabic_to_roman(num, numeral):
    assert arabic_to_roman(num) == numeral


@pytest.mark.parametrize("num", [-1, 21])
def test_arabic_to_roman_range(num):
    with pytest.raises(ValueError):
        arabic_to_roman(num)


def test_designation():
    assert designation("Kashadur", 3) == "Kashadur IV"


def test_plain_system_name():
    # style, three syllables, ka shu dur
    assert generate_system_name(scripted(0, 1, 0, 3, 16)) == "Kashudur"


def test_system_name_with_subsector_hex():
    # style, ir lag, column 3, row 10
    assert generate_system_name(scripted(1, 7, 18, 2, 9)) == "Irlag 0310"


def test_survey_catalogue_name():
    assert generate_system_name(scripted(2, 0, 3471)) == "IISS-4471"


def test_planet_name():
    # one syllable, me, ending ora
    assert generate_planet_name(scripted(0, 5, 6)) == "Meora"


def test_names_are_capitalised_words():
    dice = Dice(seed=3)
    for _ in range(200):
        name = generate_system_name(dice)
        assert re.fullmatch(r"[A-Z][a-z]+( \d{4})?|[A-Z]{3,4}-\d{4}", name)
