"""Stop record domain model."""

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class StopRecord:
    """Resolved real-world bus stop."""

    id: str
    name: str
    latitude: float
    longitude: float
    city: str | None = None
    description: str | None = None

    def __post_init__(self) -> None:
        if not math.isfinite(self.latitude) or not -90 <= self.latitude <= 90:
            raise ValueError(f"Latitude must be between -90 and 90, got {self.latitude}")
        if not math.isfinite(self.longitude) or not -180 <= self.longitude <= 180:
            raise ValueError(f"Longitude must be between -180 and 180, got {self.longitude}")
