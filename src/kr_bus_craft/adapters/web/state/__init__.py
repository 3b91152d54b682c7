"""State for the stop search LiveView."""

from kr_bus_craft.adapters.web.state.stop_search_state import StopSearchState

__all__ = ["StopSearchState"]
