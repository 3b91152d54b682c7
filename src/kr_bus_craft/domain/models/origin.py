"""Origin domain model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Origin:
    """Real-world point that maps to grid position (0, altitude, 0)."""

    name: str
    latitude: float
    longitude: float
    altitude: int  # Grid Y for every converted stop

    def __post_init__(self) -> None:
        if not -90 <= self.latitude <= 90:
            raise ValueError(f"Origin latitude must be between -90 and 90, got {self.latitude}")
        if not -180 <= self.longitude <= 180:
            raise ValueError(
                f"Origin longitude must be between -180 and 180, got {self.longitude}"
            )


# Seoul Station is (0, 64, 0) on the South Korea map; 64 is standard sea level Y
SEOUL_STATION = Origin(
    name="Seoul Station (서울역)",
    latitude=37.5547,
    longitude=126.9706,
    altitude=64,
)

# Meters per degree, approximated for the latitude of the Korean peninsula
LAT_TO_METERS = 111320.0
LNG_TO_METERS = 88000.0
