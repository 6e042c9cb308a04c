"""Tick, ledger and recipe endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from hexfactory.api.dependencies import get_simulation
from hexfactory.api.models import AdvanceRequest, LedgerResponse, TickResponse
from hexfactory.production import Recipe, Simulation
from hexfactory.shared import FactoryType

router = APIRouter(tags=["simulation"])


@router.get("/ledger", response_model=LedgerResponse)
def get_ledger(simulation: Simulation = Depends(get_simulation)) -> LedgerResponse:
    """Return the current resource stock."""

    tick_index, resources = simulation.ledger_state()
    return LedgerResponse(tick_index=tick_index, resources=dict(resources))


@router.post("/ticks", response_model=TickResponse)
def advance(
    payload: AdvanceRequest | None = None,
    simulation: Simulation = Depends(get_simulation),
) -> TickResponse:
    """Run one production tick of ``delta_time`` time units."""

    delta_time = payload.delta_time if payload is not None else None
    return TickResponse.from_result(simulation.advance(delta_time))


@router.get("/recipes", response_model=list[Recipe])
def list_recipes(
    factory_type: FactoryType | None = None,
    tier: int | None = None,
    simulation: Simulation = Depends(get_simulation),
) -> list[Recipe]:
    """Return loaded recipes, optionally filtered by factory type and tier."""

    catalog = simulation.catalog
    recipes = (
        catalog.by_factory_type(factory_type)
        if factory_type is not None
        else catalog.recipes()
    )
    if tier is not None:
        recipes = tuple(recipe for recipe in recipes if recipe.tier == tier)
    return list(recipes)
