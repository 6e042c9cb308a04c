"""Shared enumerations used across the simulator."""

from enum import StrEnum


class FactoryType(StrEnum):
    """Closed set of production-unit variants that may occupy a hex."""

    MINE = "mine"
    SMELTER = "smelter"
    BASIC_ASSEMBLER = "basic_assembler"


class ProductionStage(StrEnum):
    """Stages executed, in this order, during every production tick."""

    EXTRACTION = "extraction"
    CONVERSION = "conversion"
    ASSEMBLY = "assembly"


STAGE_SEQUENCE: tuple[ProductionStage, ...] = (
    ProductionStage.EXTRACTION,
    ProductionStage.CONVERSION,
    ProductionStage.ASSEMBLY,
)
