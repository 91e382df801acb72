"""Tests for settings loading and validation."""

import pytest
from pydantic import ValidationError

from sharkdash.config.settings import Settings


def test_defaults(settings):
    assert settings.playfield.width == 400
    assert settings.playfield.height == 600
    assert settings.physics.gravity == 0.2125
    assert settings.physics.lift == -7.5
    assert settings.obstacles.gap_height == 232.76
    assert settings.obstacles.spawn_cadence == 100
    assert settings.timing.milestone_interval == 25
    assert settings.timing.celebration_duration_ms == 10000.0
    assert settings.floor_y == 540.0
    assert settings.seed is None


def test_nested_env_override(monkeypatch):
    monkeypatch.setenv("SHARKDASH_PHYSICS__GRAVITY", "0.3")
    monkeypatch.setenv("SHARKDASH_SEED", "42")

    settings = Settings(_env_file=None)
    assert settings.physics.gravity == 0.3
    assert settings.physics.lift == -7.5
    assert settings.seed == 42


def test_unprefixed_env_is_ignored(monkeypatch):
    monkeypatch.setenv("WIDTH", "10")
    settings = Settings(_env_file=None)
    assert settings.playfield.width == 400


def test_gap_that_cannot_fit_is_rejected():
    with pytest.raises(ValidationError):
        Settings(_env_file=None, obstacles={"gap_height": 550.0})


def test_positive_lift_is_rejected():
    with pytest.raises(ValidationError):
        Settings(_env_file=None, physics={"lift": 7.5})


def test_body_taller_than_playfield_is_rejected():
    with pytest.raises(ValidationError):
        Settings(
            _env_file=None,
            playfield={"height": 400},
            physics={"body_height": 500.0},
            obstacles={"gap_height": 100.0},
        )
