import json
import logging

from worldgen.config import GeneratorConfig, load_config, save_config
from worldgen.constants import INITIAL_UPP, SATELLITE_RETRY_LIMIT


def test_defaults_when_missing(tmp_path):
    config = load_config(tmp_path / "nope.json")
    assert config == GeneratorConfig()
    assert config.satellite_orbit_retry_limit == SATELLITE_RETRY_LIMIT
    assert config.default_upp == INITIAL_UPP


def test_save_and_load(tmp_path):
    path = tmp_path / "nested" / "config.json"
    config = GeneratorConfig(show_empty_orbits=True, log_level="info", default_name="Regina")
    assert save_config(config, path) == path
    assert load_config(path) == config


def test_bad_json_falls_back(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("{not json")
    assert load_config(path) == GeneratorConfig()


def test_non_object_falls_back(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps([1, 2, 3]))
    assert load_config(path) == GeneratorConfig()


def test_unknown_keys_are_ignored(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"show_empty_orbits": True, "colour": "blue"}))
    config = load_config(path)
    assert config.show_empty_orbits
    assert not hasattr(config, "colour")


def test_level():
    assert GeneratorConfig(log_level="debug").level == logging.DEBUG
    assert GeneratorConfig(log_level="INFO").level == logging.INFO
    assert GeneratorConfig(log_level="loud").level == logging.WARNING


def test_undecodable_file_falls_back(tmp_path):
    path = tmp_path / "config.json"
    path.write_bytes(b'{"log_level": "\xff\xfe"}')
    assert load_config(path) == GeneratorConfig()


def test_wrongly_typed_values_keep_defaults(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(
        json.dumps(
            {
                "log_level": 10,
                "show_empty_orbits": 1,
                "satellite_orbit_retry_limit": True,
                "default_name": "Regina",
            }
        )
    )
    config = load_config(path)
    assert config.log_level == "WARNING"
    assert config.level == logging.WARNING
    assert config.show_empty_orbits is False
    assert config.satellite_orbit_retry_limit == SATELLITE_RETRY_LIMIT
    assert config.default_name == "Regina"
