"""Stop resolver port."""

from typing import Protocol

from kr_bus_craft.domain.models.stop_lookup import StopLookup


class StopResolver(Protocol):
    """Port for resolving a bus stop id to a real-world stop."""

    async def resolve(self, stop_id: str) -> StopLookup:
        """Resolve a stop id.

        Raises:
            ResolutionError: On any transport, parse or collaborator failure.
        """
        ...
