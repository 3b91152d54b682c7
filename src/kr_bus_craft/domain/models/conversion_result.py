"""Conversion result domain model."""

from dataclasses import dataclass

from kr_bus_craft.domain.models.grid_coords import GridCoords
from kr_bus_craft.domain.models.source_citation import SourceCitation
from kr_bus_craft.domain.models.stop_record import StopRecord


@dataclass(frozen=True)
class ConversionResult:
    """A resolved stop together with its grid position."""

    stop: StopRecord
    coords: GridCoords
    sources: tuple[SourceCitation, ...] = ()
