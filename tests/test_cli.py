import pytest

from worldgen import cli
from worldgen.config import GeneratorConfig, load_config


@pytest.fixture(autouse=True)
def default_config(monkeypatch):
    monkeypatch.setattr(cli, "load_config", lambda: GeneratorConfig())


def test_generates_a_report(capsys):
    assert cli.main(["--seed", "1"]) == 0
    out = capsys.readouterr().out
    assert "(Primary)" in out
    assert "A788899-A" in out
    assert "Main World" in out
    assert "star(s)" in out


def test_same_seed_prints_the_same(capsys):
    cli.main(["--seed", "42", "--name", "Regina"])
    first = capsys.readouterr().out
    cli.main(["--seed", "42", "--name", "Regina"])
    assert capsys.readouterr().out == first
    assert "Regina" in first


def test_show_empty(capsys):
    for seed in range(20):
        cli.main(["--seed", str(seed), "--show-empty"])
    assert "Empty" in capsys.readouterr().out


@pytest.mark.parametrize("upp", ["A78", "A7G8899-A"])
def test_bad_upp(capsys, upp):
    assert cli.main(["--upp", upp]) == 2
    assert "invalid UPP" in capsys.readouterr().err


def test_odd_separator_is_reported(capsys):
    assert cli.main(["--seed", "3", "--upp", "A788899/A"]) == 0
    assert "input: Unexpected separator" in capsys.readouterr().out


def test_version(capsys):
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["--version"])
    assert excinfo.value.code == 0
    assert "0.4.0" in capsys.readouterr().out


def test_bad_config_file_does_not_stop_a_run(monkeypatch, tmp_path, capsys):
    path = tmp_path / "config.json"
    path.write_text('{"log_level": 10}')
    monkeypatch.setattr(cli, "load_config", lambda: load_config(path))
    assert cli.main(["--seed", "1"]) == 0
    assert "A788899-A" in capsys.readouterr().out
