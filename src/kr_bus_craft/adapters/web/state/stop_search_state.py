"""Stop search LiveView state dataclass."""

from dataclasses import dataclass, field

from kr_bus_craft.domain.models.search_state import Idle, SearchState


@dataclass
class StopSearchState:
    """Socket context for one browser connection."""

    search: SearchState = field(default_factory=Idle)
    stop_id: str = ""  # Last submitted input, echoed back into the form
    topic: str = ""  # Per-connection pub/sub topic used to deliver lookup results
