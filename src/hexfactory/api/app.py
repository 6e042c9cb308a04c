"""Factory for constructing the FastAPI application."""

from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from hexfactory.api.routers import grid_router, simulation_router
from hexfactory.settings import get_settings


def create_api() -> FastAPI:
    """Instantiate the simulator API.

    Cross-origin requests are only accepted from the origins listed in
    ``HEXFACTORY_CORS_ORIGINS``; with none configured no CORS headers are sent.
    """
    app = FastAPI(title="Hex Factory API")
    origins = get_settings().cors_origins
    if origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )
    app.include_router(grid_router)
    app.include_router(simulation_router)
    return app
