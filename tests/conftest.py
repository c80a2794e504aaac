"""Shared fixtures."""

import pytest

from bubbletree.config import reset_settings


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch):
    """Each test starts from default settings, ignoring the real environment."""
    for name in ("BUBBLETREE_ON_CYCLE", "BUBBLETREE_ISOLATE_LISTENER_ERRORS", "BUBBLETREE_DEBUG_DISPATCH"):
        monkeypatch.delenv(name, raising=False)
    reset_settings()
    yield
    reset_settings()
