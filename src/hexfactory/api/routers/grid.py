"""Placement and occupancy endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status

from hexfactory.api.dependencies import get_simulation
from hexfactory.api.models import (
    FactoryResponse,
    GridResponse,
    NeighborsResponse,
    PlaceFactoryRequest,
)
from hexfactory.grid import HexCoord
from hexfactory.production import Factory, Simulation
from hexfactory.shared import NotFoundError, OccupiedError

router = APIRouter(prefix="/grid", tags=["grid"])


@router.get("", response_model=GridResponse)
def list_factories(
    simulation: Simulation = Depends(get_simulation),
) -> GridResponse:
    """Return every placed factory in row-major order."""

    return GridResponse(
        factories=[
            FactoryResponse.from_info(info, simulation.layout)
            for info in simulation.placements()
        ]
    )


@router.get("/{q}/{r}", response_model=FactoryResponse)
def get_factory(
    q: int,
    r: int,
    simulation: Simulation = Depends(get_simulation),
) -> FactoryResponse:
    """Return the factory occupying ``(q, r)``."""

    info = simulation.occupancy_at(HexCoord(q, r))
    if info is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Hex is empty"
        )
    return FactoryResponse.from_info(info, simulation.layout)


@router.get("/{q}/{r}/neighbors", response_model=NeighborsResponse)
def get_neighbors(
    q: int,
    r: int,
    simulation: Simulation = Depends(get_simulation),
) -> NeighborsResponse:
    """Return the occupied cells around ``(q, r)``."""

    infos = simulation.neighbors_of(HexCoord(q, r))
    return NeighborsResponse(
        q=q,
        r=r,
        neighbors=[FactoryResponse.from_info(info, simulation.layout) for info in infos],
    )


@router.post(
    "/{q}/{r}",
    response_model=FactoryResponse,
    status_code=status.HTTP_201_CREATED,
)
def place_factory(
    q: int,
    r: int,
    payload: PlaceFactoryRequest,
    simulation: Simulation = Depends(get_simulation),
) -> FactoryResponse:
    """Build a factory on ``(q, r)``."""

    factory = Factory.of(payload.factory_type, payload.product)
    try:
        info = simulation.place(HexCoord(q, r), factory)
    except OccupiedError as exc:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT, detail=str(exc)
        ) from exc
    return FactoryResponse.from_info(info, simulation.layout)


@router.delete("/{q}/{r}", response_model=FactoryResponse)
def remove_factory(
    q: int,
    r: int,
    simulation: Simulation = Depends(get_simulation),
) -> FactoryResponse:
    """Demolish the factory on ``(q, r)``."""

    try:
        info = simulation.remove(HexCoord(q, r))
    except NotFoundError as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)
        ) from exc
    return FactoryResponse.from_info(info, simulation.layout)
