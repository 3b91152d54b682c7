"""Stop search LiveView."""

from kr_bus_craft.adapters.web.views.stop_search.stop_search import (
    StopSearchLiveView,
    create_stop_search_live_view,
)

__all__ = ["StopSearchLiveView", "create_stop_search_live_view"]
