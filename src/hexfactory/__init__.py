"""Hex grid production-chain simulator."""

from hexfactory.settings import SimulationSettings, get_settings

__all__ = ["SimulationSettings", "get_settings"]
