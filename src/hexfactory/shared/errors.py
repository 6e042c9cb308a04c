"""Recoverable error types raised by the grid and recipe layers."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence

    from hexfactory.grid.coordinates import HexCoord


class GridError(LookupError):
    """Base class for placement failures reported by the occupancy store."""

    def __init__(self, coordinate: HexCoord, message: str) -> None:
        super().__init__(message)
        self.coordinate = coordinate


class OccupiedError(GridError):
    """Raised when placing onto a coordinate that already holds a factory."""

    def __init__(self, coordinate: HexCoord) -> None:
        super().__init__(coordinate, f"Hex {coordinate} is already occupied.")


class NotFoundError(GridError):
    """Raised when removing from a coordinate that holds no factory."""

    def __init__(self, coordinate: HexCoord) -> None:
        super().__init__(coordinate, f"No factory placed at hex {coordinate}.")


class AlreadyPlacedError(GridError):
    """Raised when a factory instance already occupies another coordinate."""

    def __init__(self, coordinate: HexCoord) -> None:
        super().__init__(coordinate, f"Factory is already placed at hex {coordinate}.")


class InvalidRecipeError(ValueError):
    """Describes a recipe record that failed structural validation.

    Catalog construction collects these instead of raising them, so a single
    bad record never aborts a load.
    """

    def __init__(self, recipe_id: str, reasons: Sequence[str]) -> None:
        self.recipe_id = recipe_id
        self.reasons = tuple(reasons)
        detail = "; ".join(self.reasons) or "unknown reason"
        super().__init__(f"Invalid recipe '{recipe_id}': {detail}")


__all__ = [
    "AlreadyPlacedError",
    "GridError",
    "InvalidRecipeError",
    "NotFoundError",
    "OccupiedError",
]
