"""Factories, recipes and the tick-driven production engine."""

from hexfactory.production.catalog import RecipeCatalog
from hexfactory.production.engine import ProductionEngine, StarvedFactory, TickResult
from hexfactory.production.factories import (
    FACTORY_SPECS,
    Factory,
    FactoryInfo,
    FactorySpec,
)
from hexfactory.production.ledger import ResourceLedger
from hexfactory.production.loader import (
    DEFAULT_RECIPES,
    RecipeBatch,
    load_recipe_records,
    parse_recipe_records,
)
from hexfactory.production.recipes import ItemCount, Recipe, is_valid, validation_errors
from hexfactory.production.simulation import DEMO_LAYOUT, Simulation, build_demo_layout

__all__ = [
    "DEFAULT_RECIPES",
    "DEMO_LAYOUT",
    "FACTORY_SPECS",
    "Factory",
    "FactoryInfo",
    "FactorySpec",
    "ItemCount",
    "ProductionEngine",
    "Recipe",
    "RecipeBatch",
    "RecipeCatalog",
    "ResourceLedger",
    "Simulation",
    "StarvedFactory",
    "TickResult",
    "build_demo_layout",
    "is_valid",
    "load_recipe_records",
    "parse_recipe_records",
    "validation_errors",
]
