"""Web adapter for the stop search page."""

from kr_bus_craft.adapters.web.pyview_app import PyViewWebAdapter

__all__ = ["PyViewWebAdapter"]
