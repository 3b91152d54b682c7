"""Formatter turning the search state into template data."""

from typing import Any

from kr_bus_craft.adapters.config.app_config import AppConfig
from kr_bus_craft.domain.models import ConversionResult
from kr_bus_craft.domain.models.search_state import Failure, Loading, SearchState, Success

FEATURE_CARDS = [
    {
        "icon": "🗺️",
        "title": "1:1 Projection",
        "desc": "Calculated using precise meters-per-degree values for the Korean Peninsula.",
    },
    {
        "icon": "🤖",
        "title": "Gemini Engine",
        "desc": "Powered by Gemini with Google Search to resolve stop names and coordinates.",
    },
    {
        "icon": "🚉",
        "title": "Central Origin",
        "desc": "All coordinates are projected with the configured origin as the (0,0) point.",
    },
]


class SearchFormatter:
    """Builds the template assigns for each state of the stop search."""

    def __init__(self, config: AppConfig) -> None:
        """Initialize the formatter.

        Args:
            config: Application configuration with display settings.
        """
        self.config = config

    @staticmethod
    def format_coordinate(value: float) -> str:
        """Format a latitude or longitude with six decimals."""
        return f"{value:.6f}"

    def format_result(self, result: ConversionResult) -> dict[str, Any]:
        """Flatten a conversion result into strings for the template."""
        stop = result.stop
        coords = result.coords
        return {
            "stop_name": stop.name,
            "stop_city": stop.city or "",
            "stop_id": stop.id,
            "latitude": self.format_coordinate(stop.latitude),
            "longitude": self.format_coordinate(stop.longitude),
            "x": str(coords.x),
            "y": str(coords.y),
            "z": str(coords.z),
            "teleport_command": coords.teleport_command,
            "origin_name": coords.origin_name,
            "sources": [{"uri": s.uri, "title": s.title} for s in result.sources],
            "has_sources": bool(result.sources),
        }

    def build_assigns(self, search: SearchState, stop_id: str = "") -> dict[str, Any]:
        """Build template assigns for a search state.

        Exactly one of is_idle, is_loading, has_error and has_result is true.
        """
        assigns: dict[str, Any] = {
            "title": self.config.title,
            "theme": self.config.theme,
            "banner_color": self.config.banner_color,
            "stop_id_input": stop_id,
            "is_idle": False,
            "is_loading": False,
            "has_error": False,
            "has_result": False,
            "error_message": "",
            "result": {},
            "feature_cards": FEATURE_CARDS,
            "show_feature_cards": False,
        }
        if isinstance(search, Loading):
            assigns["is_loading"] = True
        elif isinstance(search, Failure):
            assigns["has_error"] = True
            assigns["error_message"] = search.message
        elif isinstance(search, Success):
            assigns["has_result"] = True
            assigns["result"] = self.format_result(search.result)
        else:
            assigns["is_idle"] = True
        assigns["show_feature_cards"] = assigns["is_idle"] or assigns["has_error"]
        return assigns
