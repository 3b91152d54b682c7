"""Formatters for web adapter."""

from kr_bus_craft.adapters.web.formatters.search_formatter import SearchFormatter

__all__ = ["SearchFormatter"]
