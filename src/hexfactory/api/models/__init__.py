"""Models used for API request and response payloads."""

from hexfactory.api.models.grid import (
    FactoryResponse,
    GridResponse,
    NeighborsResponse,
    PlaceFactoryRequest,
)
from hexfactory.api.models.simulation import (
    AdvanceRequest,
    LedgerResponse,
    StarvedFactoryResponse,
    TickResponse,
)

__all__ = [
    "AdvanceRequest",
    "FactoryResponse",
    "GridResponse",
    "LedgerResponse",
    "NeighborsResponse",
    "PlaceFactoryRequest",
    "StarvedFactoryResponse",
    "TickResponse",
]
