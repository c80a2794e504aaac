"""Tests for settings."""

import pytest
from pydantic import ValidationError

from bubbletree.config import Settings, configure, get_settings, reset_settings


def test_defaults():
    settings = get_settings()
    assert settings.on_cycle == "raise"
    assert settings.isolate_listener_errors is False
    assert settings.debug_dispatch is False


def test_get_settings_is_cached():
    assert get_settings() is get_settings()


def test_environment(monkeypatch):
    monkeypatch.setenv("BUBBLETREE_ON_CYCLE", "skip")
    monkeypatch.setenv("BUBBLETREE_ISOLATE_LISTENER_ERRORS", "true")
    reset_settings()
    settings = get_settings()
    assert settings.on_cycle == "skip"
    assert settings.isolate_listener_errors is True


def test_configure_overrides():
    settings = configure(debug_dispatch=True)
    assert get_settings() is settings
    assert settings.debug_dispatch is True


def test_configure_validates():
    with pytest.raises(ValidationError):
        configure(on_cycle="ignore")


def test_reset_returns_to_defaults():
    configure(on_cycle="skip")
    reset_settings()
    assert get_settings().on_cycle == "raise"


def test_settings_is_standalone():
    assert Settings(on_cycle="skip").on_cycle == "skip"
