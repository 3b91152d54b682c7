"""Domain models for KR Bus Craft."""

from kr_bus_craft.domain.models.conversion_result import ConversionResult
from kr_bus_craft.domain.models.grid_coords import GridCoords
from kr_bus_craft.domain.models.origin import LAT_TO_METERS, LNG_TO_METERS, SEOUL_STATION, Origin
from kr_bus_craft.domain.models.search_state import (
    Failure,
    Idle,
    Loading,
    SearchState,
    Success,
    complete_search,
    fail_search,
    start_search,
)
from kr_bus_craft.domain.models.source_citation import SourceCitation
from kr_bus_craft.domain.models.stop_lookup import StopLookup
from kr_bus_craft.domain.models.stop_record import StopRecord

__all__ = [
    "LAT_TO_METERS",
    "LNG_TO_METERS",
    "SEOUL_STATION",
    "ConversionResult",
    "Failure",
    "GridCoords",
    "Idle",
    "Loading",
    "Origin",
    "SearchState",
    "SourceCitation",
    "StopLookup",
    "StopRecord",
    "Success",
    "complete_search",
    "fail_search",
    "start_search",
]
