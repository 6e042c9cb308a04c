"""Test configuration and fixtures for the simulator test suite."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from hexfactory.api.dependencies import get_simulation
from hexfactory.settings import get_settings

if TYPE_CHECKING:
    from collections.abc import Iterator


@pytest.fixture(autouse=True)
def _reset_cached_state(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Ensure settings and the API simulation are rebuilt for every test."""
    for name in (
        "HEXFACTORY_RECIPES_FILE",
        "HEXFACTORY_SEED_DEMO_LAYOUT",
        "HEXFACTORY_CELL_RADIUS",
        "HEXFACTORY_CORS_ORIGINS",
    ):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    get_simulation.cache_clear()
    yield
    get_settings.cache_clear()
    get_simulation.cache_clear()
