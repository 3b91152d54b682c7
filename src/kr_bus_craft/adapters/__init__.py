"""Adapters layer - external system integrations."""

from kr_bus_craft.adapters.config import AppConfig
from kr_bus_craft.adapters.gemini_api import GeminiStopResolver

__all__ = [
    "AppConfig",
    "GeminiStopResolver",
]
