"""Broadcasters for web adapter."""

from kr_bus_craft.adapters.web.broadcasters.search_broadcaster import SearchBroadcaster

__all__ = ["SearchBroadcaster"]
