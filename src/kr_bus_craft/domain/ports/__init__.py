"""Ports (interfaces) for the ports-and-adapters architecture."""

from kr_bus_craft.domain.ports.display_adapter import DisplayAdapter
from kr_bus_craft.domain.ports.stop_resolver import StopResolver

__all__ = [
    "DisplayAdapter",
    "StopResolver",
]
