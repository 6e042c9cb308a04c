"""Axial and cube hex coordinates with adjacency and distance math.

Axial coordinates are the canonical addressing form used as occupancy keys.
Cube coordinates only exist for distance and neighbor arithmetic and are
always derived from axial values with ``x = q, z = r, y = -x - z``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel
from pydantic.config import ConfigDict

if TYPE_CHECKING:
    from collections.abc import Iterator

# East, northeast, northwest, west, southwest, southeast.
CUBE_DIRECTIONS: tuple[tuple[int, int, int], ...] = (
    (1, -1, 0),
    (1, 0, -1),
    (0, 1, -1),
    (-1, 1, 0),
    (-1, 0, 1),
    (0, -1, 1),
)
AXIAL_DIRECTIONS: tuple[tuple[int, int], ...] = tuple(
    (x, z) for x, _y, z in CUBE_DIRECTIONS
)


class HexCoord(BaseModel):
    """Axial ``(q, r)`` coordinate of a grid cell, ordered row-major."""

    model_config = ConfigDict(frozen=True)

    q: int
    r: int

    def __init__(self, q: int, r: int) -> None:
        super().__init__(q=q, r=r)

    def sort_key(self) -> tuple[int, int]:
        """Return the row-major ordering key ``(r, q)``."""
        return (self.r, self.q)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, HexCoord):
            return NotImplemented
        return self.sort_key() < other.sort_key()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, HexCoord):
            return NotImplemented
        return self.sort_key() <= other.sort_key()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, HexCoord):
            return NotImplemented
        return self.sort_key() > other.sort_key()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, HexCoord):
            return NotImplemented
        return self.sort_key() >= other.sort_key()

    def __add__(self, other: object) -> HexCoord:
        if isinstance(other, HexCoord):
            return HexCoord(self.q + other.q, self.r + other.r)
        if isinstance(other, tuple) and len(other) == 2:  # noqa: PLR2004
            return HexCoord(self.q + other[0], self.r + other[1])
        return NotImplemented

    def __repr__(self) -> str:
        return f"HexCoord({self.q}, {self.r})"

    def __str__(self) -> str:
        return f"({self.q}, {self.r})"

    def as_tuple(self) -> tuple[int, int]:
        """Return the coordinate as a plain ``(q, r)`` tuple."""
        return (self.q, self.r)

    def to_cube(self) -> CubeCoord:
        """Convert to the equivalent cube coordinate."""
        x = self.q
        z = self.r
        return CubeCoord(x, -x - z, z)

    def direction(self, index: int) -> HexCoord:
        """Return the neighbor in direction *index* (0 = east, counter-clockwise)."""
        dq, dr = AXIAL_DIRECTIONS[index % len(AXIAL_DIRECTIONS)]
        return HexCoord(self.q + dq, self.r + dr)

    def neighbors(self) -> tuple[HexCoord, ...]:
        """Return the six adjacent coordinates in direction order."""
        return tuple(HexCoord(self.q + dq, self.r + dr) for dq, dr in AXIAL_DIRECTIONS)

    def distance_to(self, other: HexCoord) -> int:
        """Return the hex step distance to *other*."""
        return self.to_cube().distance_to(other.to_cube())


class CubeCoord(BaseModel):
    """Cube ``(x, y, z)`` coordinate; valid only while ``x + y + z == 0``."""

    model_config = ConfigDict(frozen=True)

    x: int
    y: int
    z: int

    def __init__(self, x: int, y: int, z: int) -> None:
        super().__init__(x=x, y=y, z=z)

    def __repr__(self) -> str:
        return f"CubeCoord({self.x}, {self.y}, {self.z})"

    def is_valid(self) -> bool:
        """Return ``True`` when the zero-sum constraint holds."""
        return self.x + self.y + self.z == 0

    def to_axial(self) -> HexCoord:
        """Convert back to the canonical axial form."""
        return HexCoord(self.x, self.z)

    def neighbors(self) -> tuple[CubeCoord, ...]:
        """Return the six adjacent cube coordinates in direction order."""
        return tuple(
            CubeCoord(self.x + dx, self.y + dy, self.z + dz)
            for dx, dy, dz in CUBE_DIRECTIONS
        )

    def distance_to(self, other: CubeCoord) -> int:
        """Return half the Manhattan distance in cube space."""
        return (
            abs(self.x - other.x) + abs(self.y - other.y) + abs(self.z - other.z)
        ) // 2


def to_cube(coord: HexCoord) -> CubeCoord:
    """Convert an axial coordinate into cube form."""
    return coord.to_cube()


def to_axial(cube: CubeCoord) -> HexCoord:
    """Convert a cube coordinate into axial form."""
    return cube.to_axial()


def is_valid_cube(cube: CubeCoord) -> bool:
    """Return whether *cube* satisfies ``x + y + z == 0``."""
    return cube.is_valid()


def neighbors(coord: HexCoord) -> tuple[HexCoord, ...]:
    """Return the six neighbors of *coord* in the fixed direction order."""
    return coord.neighbors()


def distance(a: HexCoord, b: HexCoord) -> int:
    """Return the number of hex steps between *a* and *b*."""
    return a.distance_to(b)


def ring(center: HexCoord, radius: int) -> tuple[HexCoord, ...]:
    """Return the cells at exactly *radius* steps from *center*.

    The walk starts at the cell reached by going ``radius`` steps southwest
    and proceeds around the ring through every direction once.
    """
    if radius < 0:
        msg = "Ring radius must be non-negative."
        raise ValueError(msg)
    if radius == 0:
        return (center,)
    dq, dr = AXIAL_DIRECTIONS[4]
    current = HexCoord(center.q + dq * radius, center.r + dr * radius)
    cells: list[HexCoord] = []
    for side in range(len(AXIAL_DIRECTIONS)):
        for _ in range(radius):
            cells.append(current)
            current = current.direction(side)
    return tuple(cells)


def spiral(center: HexCoord, radius: int) -> Iterator[HexCoord]:
    """Yield every cell within *radius* steps, ring by ring outwards."""
    for step in range(radius + 1):
        yield from ring(center, step)


__all__ = [
    "AXIAL_DIRECTIONS",
    "CUBE_DIRECTIONS",
    "CubeCoord",
    "HexCoord",
    "distance",
    "is_valid_cube",
    "neighbors",
    "ring",
    "spiral",
    "to_axial",
    "to_cube",
]
