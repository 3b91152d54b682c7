"""Application layer - use cases."""

from kr_bus_craft.application.services import StopConversionService

__all__ = ["StopConversionService"]
