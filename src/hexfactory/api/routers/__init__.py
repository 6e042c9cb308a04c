"""Route definitions for public HTTP endpoints."""

from hexfactory.api.routers.grid import router as grid_router
from hexfactory.api.routers.simulation import router as simulation_router

__all__ = ["grid_router", "simulation_router"]
