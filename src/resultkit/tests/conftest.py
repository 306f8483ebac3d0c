"""Shared fixtures: fresh settings and logging state per test."""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from resultkit.foundation.config import clear_settings_cache
from resultkit.observability import CollectingRenderer, configure_logging, reset_logging


@pytest.fixture(autouse=True)
def clean_state(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Isolate each test from RESULTKIT_* environment and configured logging."""
    import os
    for key in [k for k in os.environ if k.startswith("RESULTKIT_")]:
        monkeypatch.delenv(key, raising=False)
    clear_settings_cache()
    reset_logging()
    yield
    clear_settings_cache()
    reset_logging()


@pytest.fixture
def captured_logs() -> CollectingRenderer:
    """Route log output into memory at DEBUG level."""
    renderer = CollectingRenderer()
    configure_logging(level="DEBUG", renderer=renderer)
    return renderer
