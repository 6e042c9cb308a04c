"""HTTP layer exposing placement commands, ticks and read-only queries."""

from hexfactory.api.app import create_api

__all__ = ["create_api"]
