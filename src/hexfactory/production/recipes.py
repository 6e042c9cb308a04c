"""Recipe records and the structural validity predicate.

Records are plain data: any shape a loader hands over can be represented,
including structurally broken ones, so that the catalog can report them
instead of silently coercing them.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, field_validator
from pydantic.config import ConfigDict

MAX_RECIPE_INPUTS = 2
MIN_TIER = 0
MAX_TIER = 5


class ItemCount(BaseModel):
    """Quantity of a single item kind."""

    model_config = ConfigDict(frozen=True)

    item: str = ""
    count: int = Field(default=0, strict=True)


class Recipe(BaseModel):
    """Declarative transformation of ordered inputs into a single output."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    identifier: str = Field(default="", alias="id")
    inputs: tuple[ItemCount, ...] = Field(default_factory=tuple)
    output: ItemCount | None = None
    craft_time: float = Field(
        default=0.0, alias="time", strict=True, allow_inf_nan=False
    )
    factory_type: str = Field(default="", alias="factory")
    tier: int = Field(default=0, strict=True)

    @field_validator("inputs", mode="before")
    @classmethod
    def _blank_missing_inputs(cls, value: Any) -> Any:
        """Keep null input slots as empty entries so validation reports them."""
        if isinstance(value, list | tuple):
            return tuple(ItemCount() if entry is None else entry for entry in value)
        return value

    def input_requirements(self) -> dict[str, int]:
        """Return the summed input counts keyed by item kind."""
        required: dict[str, int] = {}
        for entry in self.inputs:
            required[entry.item] = required.get(entry.item, 0) + entry.count
        return required


def validation_errors(recipe: Recipe) -> list[str]:
    """Return a description of every structural rule *recipe* breaks."""
    errors: list[str] = []
    if not recipe.identifier:
        errors.append("id must not be empty")
    if len(recipe.inputs) > MAX_RECIPE_INPUTS:
        errors.append(
            f"has {len(recipe.inputs)} inputs, at most {MAX_RECIPE_INPUTS} allowed"
        )
    output = recipe.output
    if output is None or not output.item or output.count <= 0:
        errors.append("output must name an item with a positive count")
    if recipe.craft_time <= 0:
        errors.append("craft time must be positive")
    if not recipe.factory_type:
        errors.append("factory type must not be empty")
    for index, entry in enumerate(recipe.inputs):
        if not entry.item or entry.count <= 0:
            errors.append(f"input {index} must name an item with a positive count")
    if not MIN_TIER <= recipe.tier <= MAX_TIER:
        errors.append(f"tier {recipe.tier} outside [{MIN_TIER}, {MAX_TIER}]")
    return errors


def is_valid(recipe: Recipe) -> bool:
    """Return ``True`` when *recipe* satisfies every structural rule."""
    return not validation_errors(recipe)


__all__ = [
    "MAX_RECIPE_INPUTS",
    "MAX_TIER",
    "MIN_TIER",
    "ItemCount",
    "Recipe",
    "is_valid",
    "validation_errors",
]
