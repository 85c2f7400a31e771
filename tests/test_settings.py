"""Tests for core.settings."""

import logging
from pathlib import Path

import pytest

from core.errors import ConfigurationError
from core.settings import EngineSettings, configure_logging, load_settings


def test_defaults_when_environment_is_empty():
    settings = load_settings({})

    assert settings == EngineSettings()
    assert settings.transition_delay == 0
    assert settings.log_level == "INFO"
    assert settings.seed is None
    assert settings.profile_path is None


def test_values_are_read_from_prefixed_variables():
    settings = load_settings({
        "MATH_DRILL_TRANSITION_DELAY": "0.5",
        "MATH_DRILL_LOG_LEVEL": "debug",
        "MATH_DRILL_SEED": "42",
        "MATH_DRILL_PROFILE_PATH": "/tmp/profiles.json",
        "UNRELATED": "ignored",
    })

    assert settings.transition_delay == 0.5
    assert settings.log_level == "DEBUG"
    assert settings.seed == 42
    assert settings.profile_path == Path("/tmp/profiles.json")


def test_blank_values_count_as_unset():
    assert load_settings({"MATH_DRILL_SEED": "  "}).seed is None


@pytest.mark.parametrize(
    "name, value",
    [
        ("MATH_DRILL_TRANSITION_DELAY", "-1"),
        ("MATH_DRILL_TRANSITION_DELAY", "soon"),
        ("MATH_DRILL_LOG_LEVEL", "LOUD"),
        ("MATH_DRILL_SEED", "abc"),
    ],
)
def test_malformed_values_raise_configuration_error(name, value):
    with pytest.raises(ConfigurationError):
        load_settings({name: value})


def test_load_settings_reads_process_environment(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("MATH_DRILL_SEED", "7")

    assert load_settings().seed == 7


def test_configure_logging_applies_level(monkeypatch):
    calls = {}
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.update(kwargs))

    configure_logging(EngineSettings(log_level="WARNING"))

    assert calls["level"] == logging.WARNING
