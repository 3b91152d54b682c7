"""Stop lookup domain model."""

from dataclasses import dataclass

from kr_bus_craft.domain.models.source_citation import SourceCitation
from kr_bus_craft.domain.models.stop_record import StopRecord


@dataclass(frozen=True)
class StopLookup:
    """Successful resolver answer: the stop plus the citations backing it."""

    stop: StopRecord
    sources: tuple[SourceCitation, ...] = ()
