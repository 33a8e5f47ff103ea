"""
Tests for Settings loading from the environment.
"""

import pytest
from pydantic import ValidationError

from app.config import Environment, Settings


def test_defaults_are_a_front_door_bin_of_eight(monkeypatch):
    for var in ("STORAGE_CAPACITY", "USE_OPPOSITE_DOOR", "ENVIRONMENT"):
        monkeypatch.delenv(var, raising=False)

    s = Settings(_env_file=None)

    assert s.storage_capacity == 8
    assert s.use_opposite_door is False
    assert s.best_before_max_days == 14
    assert s.is_development()
    assert not s.is_production()


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("STORAGE_CAPACITY", "3")
    monkeypatch.setenv("USE_OPPOSITE_DOOR", "true")
    monkeypatch.setenv("ENVIRONMENT", "PRODUCTION")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    s = Settings(_env_file=None)

    assert s.storage_capacity == 3
    assert s.use_opposite_door is True
    assert s.environment == Environment.PRODUCTION
    assert s.is_production()
    assert s.log_level == "DEBUG"


@pytest.mark.parametrize("var, value", [("STORAGE_CAPACITY", "0"), ("LOG_LEVEL", "chatty")])
def test_invalid_values_rejected(monkeypatch, var, value):
    monkeypatch.setenv(var, value)
    with pytest.raises(ValidationError):
        Settings(_env_file=None)
