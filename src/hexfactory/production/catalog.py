"""Recipe catalog built from externally supplied records."""

from __future__ import annotations

from typing import TYPE_CHECKING

from hexfactory.production.recipes import Recipe, validation_errors
from hexfactory.shared.errors import InvalidRecipeError
from hexfactory.shared.events import LoggedEvent

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from hexfactory.shared.enums import FactoryType


class RecipeCatalog:
    """Index validated recipes by id, factory type and tier.

    A catalog is immutable once built; reloading means building a new one with
    :meth:`build`. Invalid records are kept in :attr:`rejected` and never
    indexed.
    """

    def __init__(
        self,
        recipes: Iterable[Recipe] = (),
        *,
        rejected: Iterable[InvalidRecipeError] = (),
        events: Iterable[LoggedEvent] = (),
    ) -> None:
        self._by_id: dict[str, Recipe] = {}
        for recipe in recipes:
            self._by_id[recipe.identifier] = recipe
        self._rejected = tuple(rejected)
        self._events = tuple(events)

    @classmethod
    def build(
        cls,
        records: Iterable[Recipe],
        *,
        rejected: Iterable[InvalidRecipeError] = (),
    ) -> RecipeCatalog:
        """Validate *records* and index the ones that pass.

        *rejected* carries entries a loader could not turn into records; they
        are reported alongside the records that fail validation. Ids are
        assumed unique; on collision the later record wins.
        """
        accepted: list[Recipe] = []
        failures: list[InvalidRecipeError] = []
        events: list[LoggedEvent] = []
        for error in rejected:
            failures.append(error)
            events.append(_rejected_event(error))
        for record in records:
            errors = validation_errors(record)
            if errors:
                error = InvalidRecipeError(record.identifier, errors)
                failures.append(error)
                events.append(_rejected_event(error))
                continue
            accepted.append(record)
            events.append(
                LoggedEvent(
                    event_type="recipe_loaded",
                    message=f"Loaded recipe: {record.identifier} (Tier {record.tier})",
                    payload={"recipe_id": record.identifier, "tier": record.tier},
                )
            )
        loaded = len({recipe.identifier for recipe in accepted})
        events.append(
            LoggedEvent(
                event_type="catalog_built",
                message=f"Loaded {loaded} valid recipes",
                payload={"loaded": loaded, "rejected": len(failures)},
            )
        )
        return cls(accepted, rejected=failures, events=events)

    def __len__(self) -> int:
        return len(self._by_id)

    def __iter__(self) -> Iterator[Recipe]:
        return iter(self._by_id.values())

    def __contains__(self, recipe_id: object) -> bool:
        return recipe_id in self._by_id

    @property
    def rejected(self) -> tuple[InvalidRecipeError, ...]:
        return self._rejected

    @property
    def events(self) -> tuple[LoggedEvent, ...]:
        return self._events

    def recipes(self) -> tuple[Recipe, ...]:
        """Return every indexed recipe in insertion order."""
        return tuple(self._by_id.values())

    def by_id(self, recipe_id: str) -> Recipe | None:
        return self._by_id.get(recipe_id)

    def by_factory_type(self, factory_type: FactoryType | str) -> tuple[Recipe, ...]:
        """Return recipes targeting *factory_type* in insertion order."""
        tag = str(factory_type)
        return tuple(r for r in self._by_id.values() if r.factory_type == tag)

    def by_tier(self, tier: int) -> tuple[Recipe, ...]:
        """Return recipes of *tier* in insertion order."""
        return tuple(r for r in self._by_id.values() if r.tier == tier)

    def find_producer(self, factory_type: FactoryType | str, item: str) -> Recipe | None:
        """Return the first recipe for *factory_type* whose output is *item*."""
        for recipe in self.by_factory_type(factory_type):
            if recipe.output is not None and recipe.output.item == item:
                return recipe
        return None


def _rejected_event(error: InvalidRecipeError) -> LoggedEvent:
    return LoggedEvent(
        event_type="recipe_rejected",
        message=str(error),
        payload={"recipe_id": error.recipe_id, "reasons": list(error.reasons)},
    )


__all__ = ["RecipeCatalog"]
