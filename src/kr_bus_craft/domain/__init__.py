"""Domain layer - core business logic and models."""

from kr_bus_craft.domain.errors import ResolutionError
from kr_bus_craft.domain.models import (
    ConversionResult,
    GridCoords,
    Origin,
    StopLookup,
    StopRecord,
)
from kr_bus_craft.domain.ports import DisplayAdapter, StopResolver
from kr_bus_craft.domain.projection import convert

__all__ = [
    "ConversionResult",
    "DisplayAdapter",
    "GridCoords",
    "Origin",
    "ResolutionError",
    "StopLookup",
    "StopRecord",
    "StopResolver",
    "convert",
]
