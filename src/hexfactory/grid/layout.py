"""Flat-topped hex layout mapping grid cells to planar positions."""

from __future__ import annotations

import math

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

from hexfactory.grid.coordinates import HexCoord

_SQRT3 = math.sqrt(3.0)


class Point(BaseModel):
    """Planar position consumed by the rendering layer."""

    model_config = ConfigDict(frozen=True)

    x: float
    y: float


def round_to_hex(q: float, r: float) -> HexCoord:
    """Round fractional axial coordinates to the nearest cell.

    Each cube component is rounded independently, then the component with the
    largest rounding error is recomputed from the other two so the result
    still satisfies ``x + y + z == 0``.
    """
    s = -q - r
    rq = round(q)
    rr = round(r)
    rs = round(s)

    q_diff = abs(rq - q)
    r_diff = abs(rr - r)
    s_diff = abs(rs - s)

    if q_diff > r_diff and q_diff > s_diff:
        rq = -rr - rs
    elif r_diff > s_diff:
        rr = -rq - rs
    return HexCoord(int(rq), int(rr))


class HexLayout(BaseModel):
    """Flat-topped orientation with a configurable cell radius."""

    model_config = ConfigDict(frozen=True)

    cell_radius: float = Field(default=1.0, gt=0)

    def to_world(self, coord: HexCoord) -> Point:
        """Return the planar centre of *coord*."""
        x = self.cell_radius * (3.0 / 2.0 * coord.q)
        y = self.cell_radius * (_SQRT3 / 2.0 * coord.q + _SQRT3 * coord.r)
        return Point(x=x, y=y)

    def to_hex(self, point: Point) -> HexCoord:
        """Return the cell containing *point*."""
        q = (2.0 / 3.0 * point.x) / self.cell_radius
        r = (-1.0 / 3.0 * point.x + _SQRT3 / 3.0 * point.y) / self.cell_radius
        return round_to_hex(q, r)

    def corners(self, coord: HexCoord) -> tuple[Point, ...]:
        """Return the six outline vertices of *coord*, starting due east."""
        center = self.to_world(coord)
        vertices = []
        for index in range(6):
            angle = math.radians(60.0 * index)
            vertices.append(
                Point(
                    x=center.x + self.cell_radius * math.cos(angle),
                    y=center.y + self.cell_radius * math.sin(angle),
                )
            )
        return tuple(vertices)


__all__ = ["HexLayout", "Point", "round_to_hex"]
