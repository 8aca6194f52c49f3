"""Tests for settings loading."""

import pytest
from pydantic import ValidationError

from vegetable_set.config import Settings


def test_defaults() -> None:
    settings = Settings()

    assert settings.log_level == "INFO"
    assert settings.low_calorie_max == 20.0
    assert settings.medium_calorie_max == 35.0


def test_env_overrides(monkeypatch) -> None:
    monkeypatch.setenv("VEGETABLE_SET_LOW_CALORIE_MAX", "10")
    monkeypatch.setenv("VEGETABLE_SET_LOG_LEVEL", "DEBUG")

    settings = Settings()

    assert settings.low_calorie_max == 10.0
    assert settings.log_level == "DEBUG"


def test_negative_bound_rejected(monkeypatch) -> None:
    monkeypatch.setenv("VEGETABLE_SET_MEDIUM_CALORIE_MAX", "-1")

    with pytest.raises(ValidationError):
        Settings()
