"""Occupancy store enforcing the one-building-per-hex rule."""

from __future__ import annotations

from typing import TYPE_CHECKING

from hexfactory.shared.errors import AlreadyPlacedError, NotFoundError, OccupiedError
from hexfactory.shared.events import LoggedEvent

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator

    from hexfactory.grid.coordinates import HexCoord
    from hexfactory.production.factories import Factory

    PlacementListener = Callable[[LoggedEvent], None]


class HexGrid:
    """Map axial coordinates to the factory placed on them.

    The store is the only arbiter of placement: a coordinate holds at most one
    factory, and every successful placement or removal is announced to the
    subscribed listeners as a :class:`LoggedEvent`. Opaque handles supplied by
    a presentation layer are kept alongside and never inspected.
    """

    def __init__(self) -> None:
        self._factories: dict[HexCoord, Factory] = {}
        self._handles: dict[HexCoord, object] = {}
        self._listeners: list[PlacementListener] = []

    def __len__(self) -> int:
        return len(self._factories)

    def __contains__(self, coord: object) -> bool:
        return coord in self._factories

    def __iter__(self) -> Iterator[HexCoord]:
        return iter(sorted(self._factories))

    def subscribe(self, listener: PlacementListener) -> None:
        """Register *listener* for placement and removal events."""
        self._listeners.append(listener)

    def unsubscribe(self, listener: PlacementListener) -> None:
        """Stop delivering events to *listener*."""
        self._listeners.remove(listener)

    def is_available(self, coord: HexCoord) -> bool:
        """Return ``True`` when no factory occupies *coord*."""
        return coord not in self._factories

    def place(
        self, coord: HexCoord, factory: Factory, *, handle: object | None = None
    ) -> None:
        """Put *factory* on *coord*.

        Raises :class:`OccupiedError` if *coord* is taken and
        :class:`AlreadyPlacedError` if *factory* already sits on another hex.
        """
        if not self.is_available(coord):
            raise OccupiedError(coord)
        current = self.locate(factory)
        if current is not None:
            raise AlreadyPlacedError(current)
        factory.reset_progress()
        self._factories[coord] = factory
        if handle is not None:
            self._handles[coord] = handle
        self._emit(
            "factory_placed",
            coord,
            factory,
            f"Placed {factory.kind.value} at {coord}",
        )

    def remove(self, coord: HexCoord) -> Factory:
        """Remove and return the factory on *coord*.

        Raises :class:`NotFoundError` when the coordinate is empty.
        """
        factory = self._factories.pop(coord, None)
        if factory is None:
            raise NotFoundError(coord)
        self._handles.pop(coord, None)
        factory.reset_progress()
        self._emit(
            "factory_removed",
            coord,
            factory,
            f"Removed {factory.kind.value} from {coord}",
        )
        return factory

    def get(self, coord: HexCoord) -> Factory | None:
        """Return the factory on *coord*, if any."""
        return self._factories.get(coord)

    def locate(self, factory: Factory) -> HexCoord | None:
        """Return the coordinate holding this exact *factory* instance, if any."""
        for coord, placed in self._factories.items():
            if placed is factory:
                return coord
        return None

    def handle_at(self, coord: HexCoord) -> object | None:
        """Return the external handle registered for *coord*, if any."""
        return self._handles.get(coord)

    def neighbors_of(self, coord: HexCoord) -> tuple[Factory, ...]:
        """Return the factories adjacent to *coord* in direction order."""
        return tuple(
            factory
            for neighbor in coord.neighbors()
            if (factory := self._factories.get(neighbor)) is not None
        )

    def occupied(self) -> tuple[tuple[HexCoord, Factory], ...]:
        """Return every placement in row-major order."""
        return tuple((coord, self._factories[coord]) for coord in sorted(self._factories))

    def clear(self) -> None:
        """Drop every placement and handle without emitting events."""
        for factory in self._factories.values():
            factory.reset_progress()
        self._factories.clear()
        self._handles.clear()

    def _emit(
        self, event_type: str, coord: HexCoord, factory: Factory, message: str
    ) -> None:
        event = LoggedEvent(
            event_type=event_type,
            message=message,
            coordinate=coord.as_tuple(),
            payload={"factory_type": factory.kind.value, "product": factory.product},
        )
        for listener in tuple(self._listeners):
            listener(event)


__all__ = ["HexGrid"]
