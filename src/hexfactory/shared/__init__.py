"""Shared enums, errors and event records used across the simulator."""

from hexfactory.shared.enums import STAGE_SEQUENCE, FactoryType, ProductionStage
from hexfactory.shared.errors import (
    AlreadyPlacedError,
    GridError,
    InvalidRecipeError,
    NotFoundError,
    OccupiedError,
)
from hexfactory.shared.events import LoggedEvent, StageLog, TickLog

__all__ = [
    "STAGE_SEQUENCE",
    "AlreadyPlacedError",
    "FactoryType",
    "GridError",
    "InvalidRecipeError",
    "LoggedEvent",
    "NotFoundError",
    "OccupiedError",
    "ProductionStage",
    "StageLog",
    "TickLog",
]
