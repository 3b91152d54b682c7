"""Application services (use cases) for stop conversion."""

import logging
from typing import TYPE_CHECKING

from kr_bus_craft.domain.models import (
    LAT_TO_METERS,
    LNG_TO_METERS,
    SEOUL_STATION,
    ConversionResult,
    GridCoords,
    Origin,
)
from kr_bus_craft.domain.projection import convert

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from kr_bus_craft.domain.ports import StopResolver


class StopConversionService:
    """Resolves bus stops and projects them onto the block grid."""

    def __init__(
        self,
        resolver: "StopResolver",
        origin: Origin = SEOUL_STATION,
        lat_scale: float = LAT_TO_METERS,
        lng_scale: float = LNG_TO_METERS,
    ) -> None:
        """Initialize the service.

        Args:
            resolver: Port used to look up stops by id.
            origin: Real-world point mapped to the grid origin.
            lat_scale: Blocks per degree of latitude.
            lng_scale: Blocks per degree of longitude.
        """
        self._resolver = resolver
        self.origin = origin
        self.lat_scale = lat_scale
        self.lng_scale = lng_scale

    @staticmethod
    def normalize_stop_id(raw: str) -> str | None:
        """Trim user input, returning None when nothing is left."""
        stop_id = raw.strip()
        return stop_id or None

    def convert_coordinates(self, latitude: float, longitude: float) -> GridCoords:
        """Project raw coordinates using the configured origin and scales."""
        return convert(latitude, longitude, self.origin, self.lat_scale, self.lng_scale)

    async def convert_stop(self, stop_id: str) -> ConversionResult:
        """Resolve a stop id and project it onto the grid.

        Raises:
            ResolutionError: If the resolver fails.
            ValueError: If the stop id is blank.
        """
        normalized = self.normalize_stop_id(stop_id)
        if normalized is None:
            raise ValueError("stop_id must not be blank")

        lookup = await self._resolver.resolve(normalized)
        coords = self.convert_coordinates(lookup.stop.latitude, lookup.stop.longitude)
        logger.info(
            f"Converted stop {normalized} ({lookup.stop.name}) to "
            f"x={coords.x} y={coords.y} z={coords.z}"
        )
        return ConversionResult(stop=lookup.stop, coords=coords, sources=lookup.sources)
