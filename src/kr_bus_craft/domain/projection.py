"""Projection of latitude/longitude onto the block grid.

X grows eastward with longitude. Z grows southward, so latitude (which grows
northward) is negated. Y is fixed at the origin's altitude.
"""

from decimal import ROUND_HALF_UP, Decimal

from kr_bus_craft.domain.models.grid_coords import GridCoords
from kr_bus_craft.domain.models.origin import Origin


def round_half_away_from_zero(value: float) -> int:
    """Round to the nearest integer, ties going away from zero (2.5 -> 3, -2.5 -> -3).

    Decimal's ROUND_HALF_UP rounds ties away from zero and works on the exact
    binary value of the float.
    """
    return int(Decimal(value).quantize(Decimal(1), rounding=ROUND_HALF_UP))


def convert(
    lat: float,
    lng: float,
    origin: Origin,
    lat_scale: float,
    lng_scale: float,
) -> GridCoords:
    """Convert a real-world position to grid coordinates relative to ``origin``.

    Args:
        lat: Latitude in degrees.
        lng: Longitude in degrees.
        origin: Real-world point mapped to (0, origin.altitude, 0).
        lat_scale: Meters (blocks) per degree of latitude.
        lng_scale: Meters (blocks) per degree of longitude.

    Returns:
        The grid position, with ``origin_name`` set to the origin's name.
    """
    delta_lat = lat - origin.latitude
    delta_lng = lng - origin.longitude

    x = round_half_away_from_zero(delta_lng * lng_scale)
    z = round_half_away_from_zero(-delta_lat * lat_scale)

    return GridCoords(x=x, y=origin.altitude, z=z, origin_name=origin.name)
