"""Pydantic models for the grid placement endpoints."""

# ruff: noqa: TC001

from __future__ import annotations

from pydantic import BaseModel, Field

from hexfactory.grid import HexLayout, Point
from hexfactory.production import FactoryInfo
from hexfactory.shared import FactoryType


class PlaceFactoryRequest(BaseModel):
    """Client request to build a factory on a hex."""

    factory_type: FactoryType
    product: str | None = Field(default=None, min_length=1)


class FactoryResponse(BaseModel):
    """Description of a placed factory."""

    q: int
    r: int
    factory_type: FactoryType
    product: str | None
    progress: float
    craft_time: float
    tier: int
    max_inputs: int
    max_outputs: int
    world: Point

    @classmethod
    def from_info(cls, info: FactoryInfo, layout: HexLayout) -> FactoryResponse:
        """Build a response from an engine-side :class:`FactoryInfo`."""
        return cls(
            q=info.coordinate.q,
            r=info.coordinate.r,
            factory_type=info.kind,
            product=info.product,
            progress=info.progress,
            craft_time=info.craft_time,
            tier=info.tier,
            max_inputs=info.max_inputs,
            max_outputs=info.max_outputs,
            world=layout.to_world(info.coordinate),
        )


class GridResponse(BaseModel):
    """Every placement on the grid in row-major order."""

    factories: list[FactoryResponse] = Field(default_factory=list)


class NeighborsResponse(BaseModel):
    """Occupied cells adjacent to a coordinate."""

    q: int
    r: int
    neighbors: list[FactoryResponse] = Field(default_factory=list)
