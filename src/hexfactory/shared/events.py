"""Event logging primitives shared across the simulator."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any

from pydantic import BaseModel, Field, model_validator
from pydantic.config import ConfigDict

from hexfactory.shared.enums import ProductionStage  # noqa: TC001


def _utcnow() -> datetime:
    return datetime.now(tz=UTC)


class LoggedEvent(BaseModel):
    """Represents a single immutable log entry produced by the simulator.

    ``tick_index`` and ``stage`` are empty for events raised outside of a
    production tick, such as placements or catalog loads.
    """

    model_config = ConfigDict(frozen=True)

    event_type: str = Field(..., min_length=1)
    tick_index: int | None = Field(default=None, ge=0)
    stage: ProductionStage | None = None
    message: str | None = None
    coordinate: tuple[int, int] | None = None
    payload: dict[str, Any] = Field(default_factory=dict)
    occurred_at: datetime = Field(default_factory=_utcnow)


class StageLog(BaseModel):
    """Container bundling the events emitted while running one stage."""

    model_config = ConfigDict(frozen=True)

    stage: ProductionStage
    tick_index: int = Field(..., ge=0)
    events: tuple[LoggedEvent, ...] = Field(default_factory=tuple)

    @model_validator(mode="after")
    def _ensure_alignment(self) -> StageLog:
        """Ensure event metadata aligns with the log metadata."""
        for event in self.events:
            if event.stage is not self.stage or event.tick_index != self.tick_index:
                msg = "Event metadata does not match the owning StageLog."
                raise ValueError(msg)
        return self


class TickLog(BaseModel):
    """Aggregated log output produced by one production tick."""

    model_config = ConfigDict(frozen=True)

    tick_index: int = Field(..., ge=0)
    stages: tuple[StageLog, ...] = Field(default_factory=tuple)

    def append(self, log: StageLog) -> TickLog:
        """Return a new :class:`TickLog` with *log* appended."""
        if log.tick_index != self.tick_index:
            msg = "StageLog tick index must match TickLog."
            raise ValueError(msg)
        return TickLog(tick_index=self.tick_index, stages=(*self.stages, log))

    def events(self) -> tuple[LoggedEvent, ...]:
        """Return every event of the tick in stage order."""
        return tuple(event for stage in self.stages for event in stage.events)


__all__ = ["LoggedEvent", "StageLog", "TickLog"]
