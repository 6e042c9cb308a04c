"""Recipe source adapter and the built-in production chain."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError

from hexfactory.production.recipes import ItemCount, Recipe
from hexfactory.shared.errors import InvalidRecipeError

if TYPE_CHECKING:
    from pathlib import Path


def _recipe(
    identifier: str,
    inputs: tuple[tuple[str, int], ...],
    output: tuple[str, int],
    craft_time: float,
    factory_type: str,
    tier: int,
) -> Recipe:
    return Recipe(
        identifier=identifier,
        inputs=tuple(ItemCount(item=item, count=count) for item, count in inputs),
        output=ItemCount(item=output[0], count=output[1]),
        craft_time=craft_time,
        factory_type=factory_type,
        tier=tier,
    )


DEFAULT_RECIPES: tuple[Recipe, ...] = (
    _recipe("iron_ore", (), ("iron_ore", 1), 4.0, "mine", 0),
    _recipe("copper_ore", (), ("copper_ore", 1), 4.0, "mine", 0),
    _recipe("stone", (), ("stone", 1), 4.0, "mine", 0),
    _recipe("iron_ingot", (("iron_ore", 1),), ("iron_ingot", 1), 4.0, "smelter", 1),
    _recipe(
        "copper_ingot", (("copper_ore", 1),), ("copper_ingot", 1), 4.0, "smelter", 1
    ),
    _recipe("gear", (("iron_ingot", 2),), ("gear", 1), 3.0, "basic_assembler", 2),
    _recipe(
        "circuit",
        (("copper_ingot", 1), ("gear", 1)),
        ("circuit", 1),
        3.0,
        "basic_assembler",
        3,
    ),
)


@dataclass(frozen=True, slots=True)
class RecipeBatch:
    """Records read from a recipe source plus the entries that could not be read."""

    records: tuple[Recipe, ...] = ()
    rejected: tuple[InvalidRecipeError, ...] = ()


def _unreadable(entry: Any, exc: ValidationError) -> InvalidRecipeError:
    recipe_id = entry.get("id") if isinstance(entry, dict) else None
    reasons = [
        f"{'.'.join(str(part) for part in error['loc']) or 'record'}: {error['msg']}"
        for error in exc.errors()
    ]
    return InvalidRecipeError(recipe_id if isinstance(recipe_id, str) else "", reasons)


def parse_recipe_records(raw: Any) -> RecipeBatch:
    """Turn decoded JSON into recipe records.

    Accepts either a bare list of records or an object wrapping them under
    ``"recipes"``. Missing fields fall back to empty defaults so that the
    catalog reports them; entries whose values have the wrong type cannot
    become records and are returned as rejections instead.
    """
    if isinstance(raw, dict):
        raw = raw.get("recipes")
    if not isinstance(raw, list):
        return RecipeBatch()

    records: list[Recipe] = []
    rejected: list[InvalidRecipeError] = []
    for entry in raw:
        try:
            records.append(Recipe.model_validate(entry))
        except ValidationError as exc:
            rejected.append(_unreadable(entry, exc))
    return RecipeBatch(records=tuple(records), rejected=tuple(rejected))


def load_recipe_records(path: Path) -> RecipeBatch:
    """Read recipe records from the JSON file at *path*.

    A missing or unreadable file yields an empty batch, which leaves the
    engine idle rather than failing.
    """
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, OSError, UnicodeDecodeError):
        return RecipeBatch()
    return parse_recipe_records(raw)


__all__ = [
    "DEFAULT_RECIPES",
    "RecipeBatch",
    "load_recipe_records",
    "parse_recipe_records",
]
