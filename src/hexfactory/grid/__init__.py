"""Hex coordinate algebra, world layout and the occupancy store."""

from hexfactory.grid.coordinates import (
    AXIAL_DIRECTIONS,
    CUBE_DIRECTIONS,
    CubeCoord,
    HexCoord,
    distance,
    is_valid_cube,
    neighbors,
    ring,
    spiral,
    to_axial,
    to_cube,
)
from hexfactory.grid.layout import HexLayout, Point, round_to_hex
from hexfactory.grid.occupancy import HexGrid

__all__ = [
    "AXIAL_DIRECTIONS",
    "CUBE_DIRECTIONS",
    "CubeCoord",
    "HexCoord",
    "HexGrid",
    "HexLayout",
    "Point",
    "distance",
    "is_valid_cube",
    "neighbors",
    "ring",
    "round_to_hex",
    "spiral",
    "to_axial",
    "to_cube",
]
