"""Gemini API adapter for resolving bus stops."""

from kr_bus_craft.adapters.gemini_api.gemini_stop_resolver import GeminiStopResolver
from kr_bus_craft.adapters.gemini_api.response_parser import StopResponseParser

__all__ = ["GeminiStopResolver", "StopResponseParser"]
