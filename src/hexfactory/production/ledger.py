"""Resource ledger owned by a single production engine."""

from __future__ import annotations

from types import MappingProxyType
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator, Mapping


class ResourceLedger:
    """Track non-negative integer stock per item kind.

    The ledger is an explicit object rather than process-wide state, so every
    simulation owns its own. Readers should use :meth:`snapshot`, which returns
    a read-only copy that later mutations do not affect.
    """

    def __init__(self, initial: Mapping[str, int] | None = None) -> None:
        self._stock: dict[str, int] = {}
        for item, amount in (initial or {}).items():
            self.credit(item, amount)

    def __contains__(self, item: object) -> bool:
        return item in self._stock

    def __iter__(self) -> Iterator[str]:
        return iter(self._stock)

    def __len__(self) -> int:
        return len(self._stock)

    def quantity(self, item: str) -> int:
        """Return the stock held for *item* (zero when absent)."""
        return self._stock.get(item, 0)

    def credit(self, item: str, amount: int) -> int:
        """Add *amount* of *item* and return the new quantity."""
        if amount < 0:
            msg = "Credit amount must be non-negative."
            raise ValueError(msg)
        updated = self._stock.get(item, 0) + amount
        self._stock[item] = updated
        return updated

    def debit(self, item: str, amount: int) -> int:
        """Remove *amount* of *item*, refusing to go below zero."""
        if amount < 0:
            msg = "Debit amount must be non-negative."
            raise ValueError(msg)
        updated = self._stock.get(item, 0) - amount
        if updated < 0:
            msg = f"Resource {item} would become negative ({updated})."
            raise ValueError(msg)
        self._stock[item] = updated
        return updated

    def has(self, requirements: Mapping[str, int]) -> bool:
        """Return whether every requirement is covered by current stock."""
        return all(self.quantity(item) >= amount for item, amount in requirements.items())

    def items(self) -> tuple[tuple[str, int], ...]:
        """Return ``(item, quantity)`` pairs in first-seen order."""
        return tuple(self._stock.items())

    def snapshot(self) -> Mapping[str, int]:
        """Return an immutable copy of the current stock."""
        return MappingProxyType(dict(self._stock))


__all__ = ["ResourceLedger"]
