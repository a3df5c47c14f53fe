"""
Shell configuration loading and the command line entry point.

Why:
    A bad configuration file must surface as a usage error, and command line
    flags must win over the file only when they are actually given.
"""
import json
import logging

import pytest

from edcentre import main as main_module
from edcentre.config import ShellConfig, load_config
from edcentre.core.exceptions import ConfigurationError, InputClosedError


def test_defaults():
    config = load_config()
    assert config == ShellConfig()
    assert config.log_level == "WARNING"
    assert config.log_level_value == logging.WARNING
    assert config.currency_symbol == "$"
    assert config.clear_screen is True
    assert config.pause_after_action is True
    assert config.seed_demo_data is False


def test_load_from_file(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"log_level": "DEBUG", "currency_symbol": "NZ$", "clear_screen": False}))
    config = load_config(str(path))
    assert config.log_level_value == logging.DEBUG
    assert config.currency_symbol == "NZ$"
    assert config.clear_screen is False


def test_overrides_skip_none(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"log_level": "ERROR"}))
    config = load_config(str(path), {"log_level": None, "seed_demo_data": True})
    assert config.log_level == "ERROR"
    assert config.seed_demo_data is True


def test_missing_file(tmp_path):
    with pytest.raises(ConfigurationError):
        load_config(str(tmp_path / "absent.json"))


@pytest.mark.parametrize("content", ["{not json", "[1, 2]", '{"log_level": "LOUD"}', '{"currency_symbol": ""}'])
def test_invalid_file(tmp_path, content):
    path = tmp_path / "config.json"
    path.write_text(content)
    with pytest.raises(ConfigurationError):
        load_config(str(path))


def test_main_reports_bad_config_as_usage_error(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("{not json")
    with pytest.raises(SystemExit) as excinfo:
        main_module.main(["--config", str(path)])
    assert excinfo.value.code == 2


def test_main_runs_until_input_closes(monkeypatch, capsys):
    answers = iter(["2"])

    def fake_input(prompt=""):
        try:
            return next(answers)
        except StopIteration:
            raise EOFError

    monkeypatch.setattr("builtins.input", fake_input)
    monkeypatch.setattr(main_module.TerminalConsole, "clear", lambda self: None)
    main_module.main(["--demo", "--log-level", "error"])
    out = capsys.readouterr().out
    assert "Name:  Grace Hopper" in out


def test_terminal_console_raises_on_eof(monkeypatch):
    def fake_input(prompt=""):
        raise EOFError

    monkeypatch.setattr("builtins.input", fake_input)
    with pytest.raises(InputClosedError):
        main_module.TerminalConsole().read_line("> ")
