"""Tick-driven production engine running the three ordered stages."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

from hexfactory.grid.coordinates import HexCoord  # noqa: TC001
from hexfactory.production.ledger import ResourceLedger
from hexfactory.shared.enums import STAGE_SEQUENCE, FactoryType, ProductionStage
from hexfactory.shared.events import LoggedEvent, StageLog, TickLog

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

    from hexfactory.grid.occupancy import HexGrid
    from hexfactory.production.catalog import RecipeCatalog
    from hexfactory.production.factories import Factory, FactoryInfo
    from hexfactory.production.recipes import Recipe

    TickObserver = Callable[["TickResult"], None]


class StarvedFactory(BaseModel):
    """A ready factory that could not craft because inputs were short.

    This is a steady-state condition, not an error: the factory keeps its
    progress and is checked again on the next tick.
    """

    model_config = ConfigDict(frozen=True)

    tick_index: int = Field(..., ge=0)
    coordinate: HexCoord
    kind: FactoryType
    recipe_id: str
    missing: dict[str, int] = Field(default_factory=dict)


class TickResult(BaseModel):
    """Outcome of one production pass, published to observers."""

    model_config = ConfigDict(frozen=True)

    tick_index: int = Field(..., ge=0)
    delta_time: float = Field(..., ge=0)
    ledger: dict[str, int]
    starved: tuple[StarvedFactory, ...] = Field(default_factory=tuple)
    log: TickLog


class ProductionEngine:
    """Advance the resource ledger once per external tick.

    Every tick first adds ``delta_time / craft_time`` to each placed factory's
    progress, then runs extraction, conversion and assembly in that order.
    Within a stage factories are visited in row-major coordinate order.

    Consumers may only draw on the stock that existed when the tick started,
    less whatever earlier consumers already took during the same tick. Output
    crafted during a tick is credited at once but only becomes consumable on
    the following tick.
    """

    def __init__(
        self,
        grid: HexGrid,
        catalog: RecipeCatalog,
        *,
        ledger: ResourceLedger | None = None,
    ) -> None:
        self._grid = grid
        self._catalog = catalog
        self._ledger = ledger if ledger is not None else ResourceLedger()
        self._tick_index = 0
        self._observers: list[TickObserver] = []

    @property
    def tick_index(self) -> int:
        """Index the next call to :meth:`advance` will use."""
        return self._tick_index

    @property
    def ledger(self) -> ResourceLedger:
        return self._ledger

    @property
    def catalog(self) -> RecipeCatalog:
        return self._catalog

    @property
    def grid(self) -> HexGrid:
        return self._grid

    def reload_catalog(self, catalog: RecipeCatalog) -> None:
        """Swap in a freshly built catalog; used between ticks only."""
        self._catalog = catalog

    def subscribe(self, observer: TickObserver) -> None:
        """Register *observer* to receive every :class:`TickResult`."""
        self._observers.append(observer)

    def unsubscribe(self, observer: TickObserver) -> None:
        self._observers.remove(observer)

    def ledger_snapshot(self) -> Mapping[str, int]:
        """Return a read-only copy of the current stock."""
        return self._ledger.snapshot()

    def occupancy_at(self, coord: HexCoord) -> FactoryInfo | None:
        """Return a description of the factory on *coord*, if any."""
        factory = self._grid.get(coord)
        return factory.info(coord) if factory is not None else None

    def neighbors_of(self, coord: HexCoord) -> tuple[FactoryInfo, ...]:
        """Return descriptions of the factories adjacent to *coord*."""
        return tuple(
            factory.info(neighbor)
            for neighbor in coord.neighbors()
            if (factory := self._grid.get(neighbor)) is not None
        )

    def resolve_recipe(self, factory: Factory) -> Recipe | None:
        """Return the recipe *factory* runs, or ``None`` when it has none."""
        if factory.product is None:
            return None
        recipe = self._catalog.find_producer(factory.kind, factory.product)
        if recipe is None or not factory.accepts(recipe):
            return None
        return recipe

    def advance(self, delta_time: float) -> TickResult:
        """Run one full production pass covering *delta_time* time units."""
        if not math.isfinite(delta_time) or delta_time < 0:
            msg = "Tick delta time must be finite and non-negative."
            raise ValueError(msg)

        tick_index = self._tick_index
        placements = self._grid.occupied()
        for _, factory in placements:
            factory.accumulate(delta_time)

        available = dict(self._ledger.snapshot())
        tick_log = TickLog(tick_index=tick_index)
        starved: list[StarvedFactory] = []

        for stage in STAGE_SEQUENCE:
            events: list[LoggedEvent] = []
            for coord, factory in placements:
                if factory.stage is not stage or not factory.is_ready:
                    continue
                outcome = self._run_factory(
                    tick_index, stage, coord, factory, available
                )
                if isinstance(outcome, StarvedFactory):
                    starved.append(outcome)
                    events.append(self._starved_event(outcome, stage))
                else:
                    events.append(outcome)
            tick_log = tick_log.append(
                StageLog(stage=stage, tick_index=tick_index, events=tuple(events))
            )

        self._tick_index += 1
        result = TickResult(
            tick_index=tick_index,
            delta_time=delta_time,
            ledger=dict(self._ledger.snapshot()),
            starved=tuple(starved),
            log=tick_log,
        )
        for observer in tuple(self._observers):
            observer(result)
        return result

    def _run_factory(
        self,
        tick_index: int,
        stage: ProductionStage,
        coord: HexCoord,
        factory: Factory,
        available: dict[str, int],
    ) -> LoggedEvent | StarvedFactory:
        recipe = self.resolve_recipe(factory)
        if recipe is None or recipe.output is None:
            return LoggedEvent(
                event_type="factory_idle",
                tick_index=tick_index,
                stage=stage,
                coordinate=coord.as_tuple(),
                message=f"{factory.kind.value} at {coord} has no recipe for "
                f"{factory.product!r}",
                payload={"factory_type": factory.kind.value, "product": factory.product},
            )

        requirements = recipe.input_requirements()
        missing = {
            item: amount - available.get(item, 0)
            for item, amount in requirements.items()
            if available.get(item, 0) < amount
        }
        if missing:
            return StarvedFactory(
                tick_index=tick_index,
                coordinate=coord,
                kind=factory.kind,
                recipe_id=recipe.identifier,
                missing=missing,
            )

        for item, amount in requirements.items():
            self._ledger.debit(item, amount)
            available[item] -= amount
        self._ledger.credit(recipe.output.item, recipe.output.count)
        factory.reset_progress()
        return LoggedEvent(
            event_type="factory_crafted",
            tick_index=tick_index,
            stage=stage,
            coordinate=coord.as_tuple(),
            message=f"{factory.kind.value} at {coord} completed {recipe.identifier}",
            payload={
                "recipe_id": recipe.identifier,
                "consumed": requirements,
                "produced": {recipe.output.item: recipe.output.count},
            },
        )

    @staticmethod
    def _starved_event(starved: StarvedFactory, stage: ProductionStage) -> LoggedEvent:
        return LoggedEvent(
            event_type="factory_starved",
            tick_index=starved.tick_index,
            stage=stage,
            coordinate=starved.coordinate.as_tuple(),
            message=f"{starved.kind.value} at {starved.coordinate} is starved",
            payload={"recipe_id": starved.recipe_id, "missing": starved.missing},
        )


__all__ = ["ProductionEngine", "StarvedFactory", "TickResult"]
