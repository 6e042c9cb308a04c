"""High-level façade bundling grid, catalog and engine for external callers.

Hosts that drive the simulation from several threads (the HTTP layer runs
sync endpoints in a worker pool) go through :class:`Simulation`, which
serializes ticks and placement changes behind a single lock.
"""

from __future__ import annotations

from threading import Lock
from typing import TYPE_CHECKING

from hexfactory.grid.coordinates import HexCoord
from hexfactory.grid.layout import HexLayout
from hexfactory.grid.occupancy import HexGrid
from hexfactory.production.catalog import RecipeCatalog
from hexfactory.production.engine import ProductionEngine, TickResult
from hexfactory.production.factories import Factory, FactoryInfo
from hexfactory.production.ledger import ResourceLedger
from hexfactory.production.loader import (
    DEFAULT_RECIPES,
    RecipeBatch,
    load_recipe_records,
)
from hexfactory.shared.enums import FactoryType
from hexfactory.shared.errors import OccupiedError

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from hexfactory.production.recipes import Recipe
    from hexfactory.settings import SimulationSettings

DEMO_LAYOUT: tuple[tuple[HexCoord, FactoryType, str], ...] = (
    (HexCoord(-2, 0), FactoryType.MINE, "iron_ore"),
    (HexCoord(2, -2), FactoryType.MINE, "iron_ore"),
    (HexCoord(0, 2), FactoryType.MINE, "copper_ore"),
    (HexCoord(-1, 0), FactoryType.SMELTER, "iron_ingot"),
    (HexCoord(1, -1), FactoryType.SMELTER, "iron_ingot"),
    (HexCoord(0, 1), FactoryType.SMELTER, "copper_ingot"),
    (HexCoord(0, 0), FactoryType.BASIC_ASSEMBLER, "gear"),
    (HexCoord(1, 0), FactoryType.BASIC_ASSEMBLER, "circuit"),
)


class Simulation:
    """Own one independent production chain and serialize access to it."""

    def __init__(
        self,
        *,
        catalog: RecipeCatalog | None = None,
        layout: HexLayout | None = None,
        initial_stock: Mapping[str, int] | None = None,
        tick_interval: float = 2.0,
    ) -> None:
        self._lock = Lock()
        self.layout = layout or HexLayout()
        self.tick_interval = tick_interval
        self.grid = HexGrid()
        self.engine = ProductionEngine(
            self.grid,
            catalog or RecipeCatalog.build(DEFAULT_RECIPES),
            ledger=ResourceLedger(initial_stock),
        )

    @classmethod
    def from_settings(cls, settings: SimulationSettings) -> Simulation:
        """Build a simulation configured from *settings*."""
        batch = RecipeBatch(records=DEFAULT_RECIPES)
        if settings.recipes_file is not None:
            batch = load_recipe_records(settings.recipes_file)
        simulation = cls(
            catalog=RecipeCatalog.build(batch.records, rejected=batch.rejected),
            layout=HexLayout(cell_radius=settings.cell_radius),
            tick_interval=settings.tick_interval,
        )
        if settings.seed_demo_layout:
            build_demo_layout(simulation)
        return simulation

    @property
    def catalog(self) -> RecipeCatalog:
        return self.engine.catalog

    def place(self, coord: HexCoord, factory: Factory) -> FactoryInfo:
        """Place *factory* on *coord* and return its description."""
        with self._lock:
            self.grid.place(coord, factory)
            return factory.info(coord)

    def remove(self, coord: HexCoord) -> FactoryInfo:
        """Remove the factory on *coord* and return its last description."""
        with self._lock:
            factory = self.grid.remove(coord)
            return factory.info(coord)

    def advance(self, delta_time: float | None = None) -> TickResult:
        """Run one production tick, defaulting to the configured interval."""
        if delta_time is None:
            delta_time = self.tick_interval
        with self._lock:
            return self.engine.advance(delta_time)

    def reload_recipes(self, records: Iterable[Recipe]) -> RecipeCatalog:
        """Rebuild the catalog wholesale from *records*."""
        catalog = RecipeCatalog.build(records)
        with self._lock:
            self.engine.reload_catalog(catalog)
        return catalog

    def ledger_snapshot(self) -> Mapping[str, int]:
        with self._lock:
            return self.engine.ledger_snapshot()

    def ledger_state(self) -> tuple[int, Mapping[str, int]]:
        """Return the next tick index together with the matching stock."""
        with self._lock:
            return self.engine.tick_index, self.engine.ledger_snapshot()

    def occupancy_at(self, coord: HexCoord) -> FactoryInfo | None:
        with self._lock:
            return self.engine.occupancy_at(coord)

    def neighbors_of(self, coord: HexCoord) -> tuple[FactoryInfo, ...]:
        with self._lock:
            return self.engine.neighbors_of(coord)

    def placements(self) -> tuple[FactoryInfo, ...]:
        """Return every placed factory in row-major order."""
        with self._lock:
            return tuple(factory.info(coord) for coord, factory in self.grid.occupied())


def build_demo_layout(simulation: Simulation) -> int:
    """Place the demonstration chain on free cells; return how many were placed."""
    placed = 0
    for coord, kind, product in DEMO_LAYOUT:
        try:
            simulation.place(coord, Factory.of(kind, product))
        except OccupiedError:
            continue
        placed += 1
    return placed


__all__ = ["DEMO_LAYOUT", "Simulation", "build_demo_layout"]
