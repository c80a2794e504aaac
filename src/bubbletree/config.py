"""Runtime settings, read from BUBBLETREE_* environment variables."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

_settings: Settings | None = None


class Settings(BaseSettings):
    """Behaviour switches for injection and dispatch."""

    model_config = SettingsConfigDict(
        env_prefix="BUBBLETREE_",
        extra="ignore",
        validate_default=True,
    )

    on_cycle: Literal["raise", "skip"] = Field(
        default="raise",
        description="What injection does when it meets a reference cycle",
    )
    isolate_listener_errors: bool = Field(
        default=False,
        description="Log listener exceptions and keep dispatching instead of raising",
    )
    debug_dispatch: bool = Field(
        default=False,
        description="Log every injection edge and dispatch hop at DEBUG level",
    )


def get_settings() -> Settings:
    """Return the active settings, loading them from the environment on first use."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def configure(**overrides: Any) -> Settings:
    """Replace the active settings with validated overrides on top of the environment."""
    global _settings
    _settings = Settings(**overrides)
    return _settings


def reset_settings() -> None:
    """Forget the active settings so the next read goes back to the environment."""
    global _settings
    _settings = None
