"""Factory variants, their behavior table and recipe acceptance."""

from __future__ import annotations

from types import MappingProxyType
from typing import ClassVar

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

from hexfactory.grid.coordinates import HexCoord  # noqa: TC001
from hexfactory.production.recipes import MAX_RECIPE_INPUTS, Recipe, is_valid
from hexfactory.shared.enums import FactoryType, ProductionStage


class FactorySpec(BaseModel):
    """Fixed capabilities shared by every instance of a factory variant."""

    model_config = ConfigDict(frozen=True)

    max_inputs: int = Field(..., ge=0, le=MAX_RECIPE_INPUTS)
    min_inputs: int = Field(..., ge=0, le=MAX_RECIPE_INPUTS)
    craft_time: float = Field(..., gt=0)
    tier: int = Field(..., ge=0)
    stage: ProductionStage


FACTORY_SPECS: MappingProxyType[FactoryType, FactorySpec] = MappingProxyType(
    {
        FactoryType.MINE: FactorySpec(
            max_inputs=0,
            min_inputs=0,
            craft_time=4.0,
            tier=0,
            stage=ProductionStage.EXTRACTION,
        ),
        FactoryType.SMELTER: FactorySpec(
            max_inputs=1,
            min_inputs=1,
            craft_time=4.0,
            tier=1,
            stage=ProductionStage.CONVERSION,
        ),
        FactoryType.BASIC_ASSEMBLER: FactorySpec(
            max_inputs=2,
            min_inputs=1,
            craft_time=3.0,
            tier=2,
            stage=ProductionStage.ASSEMBLY,
        ),
    }
)

_missing = [kind.value for kind in FactoryType if kind not in FACTORY_SPECS]
if _missing:  # pragma: no cover - guards edits to the variant table
    msg = f"Factory variants without a behavior entry: {', '.join(_missing)}"
    raise RuntimeError(msg)


class Factory(BaseModel):
    """A production unit placed on a single hex.

    ``product`` names the item kind the instance is configured to make; the
    engine resolves it to a recipe on every tick. ``progress`` counts craft
    cycles completed since the last successful craft.
    """

    model_config = ConfigDict(validate_assignment=True)

    MAX_OUTPUTS: ClassVar[int] = 1

    kind: FactoryType
    product: str | None = None
    progress: float = Field(default=0.0, ge=0)

    @classmethod
    def of(cls, kind: FactoryType | str, product: str | None = None) -> Factory:
        """Create a factory of *kind* configured to make *product*."""
        return cls(kind=FactoryType(kind), product=product)

    @classmethod
    def mine(cls, product: str | None = None) -> Factory:
        """Create an extractor."""
        return cls.of(FactoryType.MINE, product)

    @classmethod
    def smelter(cls, product: str | None = None) -> Factory:
        """Create a converter."""
        return cls.of(FactoryType.SMELTER, product)

    @classmethod
    def basic_assembler(cls, product: str | None = None) -> Factory:
        """Create an assembler."""
        return cls.of(FactoryType.BASIC_ASSEMBLER, product)

    @property
    def spec(self) -> FactorySpec:
        return FACTORY_SPECS[self.kind]

    @property
    def max_inputs(self) -> int:
        return self.spec.max_inputs

    @property
    def max_outputs(self) -> int:
        return self.MAX_OUTPUTS

    @property
    def craft_time(self) -> float:
        return self.spec.craft_time

    @property
    def tier(self) -> int:
        return self.spec.tier

    @property
    def stage(self) -> ProductionStage:
        return self.spec.stage

    @property
    def is_ready(self) -> bool:
        return self.progress >= 1.0

    def accepts(self, recipe: Recipe) -> bool:
        """Return whether this factory is allowed to craft *recipe*.

        The recipe must be structurally valid, target this variant, and fit
        both the shared input ceiling and the variant's own arity bounds.
        """
        if not is_valid(recipe):
            return False
        if recipe.factory_type != self.kind.value:
            return False
        input_count = len(recipe.inputs)
        if input_count > self.max_inputs:
            return False
        return input_count >= self.spec.min_inputs

    def accumulate(self, delta_time: float) -> None:
        """Advance progress by *delta_time* measured in this factory's cycles."""
        self.progress += delta_time / self.craft_time

    def reset_progress(self) -> None:
        self.progress = 0.0

    def info(self, coordinate: HexCoord) -> FactoryInfo:
        """Return an immutable description of this factory at *coordinate*."""
        return FactoryInfo(
            coordinate=coordinate,
            kind=self.kind,
            product=self.product,
            progress=self.progress,
            max_inputs=self.max_inputs,
            max_outputs=self.max_outputs,
            craft_time=self.craft_time,
            tier=self.tier,
        )


class FactoryInfo(BaseModel):
    """Read-only view of a placed factory handed to presentation layers."""

    model_config = ConfigDict(frozen=True)

    coordinate: HexCoord
    kind: FactoryType
    product: str | None
    progress: float
    max_inputs: int
    max_outputs: int
    craft_time: float
    tier: int


__all__ = ["FACTORY_SPECS", "Factory", "FactoryInfo", "FactorySpec"]
