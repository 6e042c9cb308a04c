"""Pydantic models for tick and ledger endpoints."""

# ruff: noqa: TC001

from __future__ import annotations

from pydantic import BaseModel, Field

from hexfactory.production import StarvedFactory, TickResult
from hexfactory.shared import FactoryType, LoggedEvent


class AdvanceRequest(BaseModel):
    """Request to run one production tick.

    Omitting ``delta_time`` advances by the configured tick interval.
    """

    delta_time: float | None = Field(default=None, ge=0, allow_inf_nan=False)


class LedgerResponse(BaseModel):
    """Snapshot of the resource ledger between ticks."""

    tick_index: int
    resources: dict[str, int]


class StarvedFactoryResponse(BaseModel):
    """A factory that was ready but lacked inputs during a tick."""

    q: int
    r: int
    factory_type: FactoryType
    recipe_id: str
    missing: dict[str, int]

    @classmethod
    def from_starved(cls, starved: StarvedFactory) -> StarvedFactoryResponse:
        return cls(
            q=starved.coordinate.q,
            r=starved.coordinate.r,
            factory_type=starved.kind,
            recipe_id=starved.recipe_id,
            missing=dict(starved.missing),
        )


class TickResponse(BaseModel):
    """Result payload published once a tick finishes."""

    tick_index: int
    delta_time: float
    ledger: dict[str, int]
    starved: list[StarvedFactoryResponse] = Field(default_factory=list)
    events: list[LoggedEvent] = Field(default_factory=list)

    @classmethod
    def from_result(cls, result: TickResult) -> TickResponse:
        return cls(
            tick_index=result.tick_index,
            delta_time=result.delta_time,
            ledger=dict(result.ledger),
            starved=[StarvedFactoryResponse.from_starved(s) for s in result.starved],
            events=list(result.log.events()),
        )
