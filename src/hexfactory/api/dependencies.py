"""Dependency providers for FastAPI routers."""

from __future__ import annotations

from functools import cache

from hexfactory.production import Simulation
from hexfactory.settings import get_settings


@cache
def get_simulation() -> Simulation:
    """Return the process-wide :class:`Simulation` served by the API."""

    return Simulation.from_settings(get_settings())


__all__ = ["get_simulation"]
