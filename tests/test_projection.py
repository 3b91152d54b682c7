"""Tests for the latitude/longitude to block grid projection."""

import pytest

from kr_bus_craft.domain.models import LAT_TO_METERS, LNG_TO_METERS, SEOUL_STATION, Origin
from kr_bus_craft.domain.projection import convert, round_half_away_from_zero


def _convert(lat: float, lng: float):
    return convert(lat, lng, SEOUL_STATION, LAT_TO_METERS, LNG_TO_METERS)


def test_origin_maps_to_grid_origin() -> None:
    """Given the origin's own coordinates, when converting, then x and z are 0 and y is the altitude."""
    coords = _convert(SEOUL_STATION.latitude, SEOUL_STATION.longitude)

    assert coords.x == 0
    assert coords.z == 0
    assert coords.y == 64
    assert coords.origin_name == "Seoul Station (서울역)"


def test_origin_maps_to_grid_origin_for_custom_origin() -> None:
    """Given a custom origin, when converting its coordinates, then the result is (0, altitude, 0)."""
    origin = Origin(name="Busan Station", latitude=35.1151, longitude=129.0422, altitude=70)

    coords = convert(origin.latitude, origin.longitude, origin, 111000.0, 91000.0)

    assert (coords.x, coords.y, coords.z) == (0, 70, 0)
    assert coords.origin_name == "Busan Station"


def test_east_of_origin_gives_positive_x() -> None:
    """Given a point 0.001 degrees east, when converting, then x is 88 and z is 0."""
    coords = _convert(37.5547, 126.9706 + 0.001)

    assert coords.x == 88
    assert coords.z == 0
    assert coords.y == 64


def test_south_of_origin_gives_positive_z() -> None:
    """Given a point 0.001 degrees south, when converting, then z is 111 (south is +Z)."""
    coords = _convert(37.5547 - 0.001, 126.9706)

    assert coords.x == 0
    assert coords.z == 111
    assert coords.y == 64


def test_north_of_origin_gives_negative_z() -> None:
    """Given a point 0.001 degrees north, when converting, then z is -111."""
    coords = _convert(37.5547 + 0.001, 126.9706)

    assert coords.z == -111


def test_west_of_origin_gives_negative_x() -> None:
    """Given a point 0.01 degrees west, when converting, then x is -880."""
    coords = _convert(37.5547, 126.9706 - 0.01)

    assert coords.x == -880


def test_z_is_linear_in_latitude() -> None:
    """Given a latitude shift, when converting, then z shifts by the rounded scaled delta."""
    origin = Origin(name="Grid", latitude=0.0, longitude=0.0, altitude=64)
    base = convert(10.0, 20.0, origin, 100.0, 100.0)
    shifted = convert(10.0 + 0.25, 20.0, origin, 100.0, 100.0)

    assert shifted.z == base.z - round_half_away_from_zero(0.25 * 100.0)
    assert shifted.x == base.x


def test_y_never_depends_on_position() -> None:
    """Given points far apart, when converting, then y is always the origin altitude."""
    for lat, lng in [(33.5, 126.5), (38.6, 128.3), (35.1, 129.0)]:
        assert _convert(lat, lng).y == SEOUL_STATION.altitude


def test_result_never_contains_negative_zero() -> None:
    """Given a point on the origin latitude, when converting, then z is a plain integer 0."""
    coords = _convert(SEOUL_STATION.latitude, 127.0)

    assert coords.z == 0
    assert isinstance(coords.z, int)
    assert str(coords.z) == "0"


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (0.5, 1),
        (1.5, 2),
        (2.5, 3),
        (-0.5, -1),
        (-2.5, -3),
        (2.4999, 2),
        (-2.4999, -2),
        (0.0, 0),
        (-0.0, 0),
        (87.9999, 88),
    ],
)
def test_round_half_away_from_zero(value: float, expected: int) -> None:
    """Given values at and near .5 boundaries, when rounding, then ties go away from zero."""
    assert round_half_away_from_zero(value) == expected


def test_rounding_is_not_bankers_rounding() -> None:
    """Given 2.5, when rounding, then the result differs from Python's builtin round."""
    assert round(2.5) == 2
    assert round_half_away_from_zero(2.5) == 3


def test_rounding_uses_exact_float_value() -> None:
    """Given the largest float below 0.5, when rounding, then it rounds down to 0."""
    assert round_half_away_from_zero(0.49999999999999994) == 0
