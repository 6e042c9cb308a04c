"""Console entrypoints serving the simulator API with uvicorn."""

from __future__ import annotations

import uvicorn

from hexfactory.settings import get_settings


def _serve(*, reload: bool) -> None:
    # uvicorn calls create_api itself, once per server process.
    settings = get_settings()
    uvicorn.run(
        "hexfactory.api:create_api",
        factory=True,
        host=settings.api_host,
        port=settings.api_port,
        reload=reload,
    )


def run_dev() -> None:
    """Serve with auto-reload for local development."""
    _serve(reload=True)


def run_prod() -> None:
    """Serve without auto-reload."""
    _serve(reload=False)
