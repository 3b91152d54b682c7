"""Tests for application services."""

from unittest.mock import AsyncMock

import pytest

from kr_bus_craft.application.services import StopConversionService
from kr_bus_craft.domain.errors import ResolutionError
from kr_bus_craft.domain.models import (
    SEOUL_STATION,
    Origin,
    SourceCitation,
    StopLookup,
    StopRecord,
)


class MockStopResolver:
    """Mock stop resolver for testing."""

    def __init__(self, lookup: StopLookup | None = None, error: Exception | None = None) -> None:
        """Initialize with a lookup to return or an error to raise."""
        self.lookup = lookup
        self.error = error
        self.calls: list[str] = []

    async def resolve(self, stop_id: str) -> StopLookup:
        """Record the call and return the configured lookup."""
        self.calls.append(stop_id)
        if self.error is not None:
            raise self.error
        assert self.lookup is not None
        return self.lookup


@pytest.fixture
def sample_lookup() -> StopLookup:
    """A stop 0.001 degrees east of Seoul Station."""
    return StopLookup(
        stop=StopRecord(
            id="01141",
            name="서울역",
            latitude=37.5547,
            longitude=126.9716,
            city="Seoul",
        ),
        sources=(SourceCitation(uri="https://topis.seoul.go.kr", title="TOPIS"),),
    )


@pytest.mark.asyncio
async def test_convert_stop_resolves_and_converts(sample_lookup: StopLookup) -> None:
    """Given a resolvable stop, when converting, then the result carries stop, coords and sources."""
    resolver = MockStopResolver(lookup=sample_lookup)
    service = StopConversionService(resolver)

    result = await service.convert_stop("01141")

    assert result.stop == sample_lookup.stop
    assert (result.coords.x, result.coords.y, result.coords.z) == (88, 64, 0)
    assert result.coords.origin_name == SEOUL_STATION.name
    assert result.sources == sample_lookup.sources


@pytest.mark.asyncio
async def test_convert_stop_trims_stop_id(sample_lookup: StopLookup) -> None:
    """Given padded input, when converting, then the resolver receives the trimmed id."""
    resolver = MockStopResolver(lookup=sample_lookup)
    service = StopConversionService(resolver)

    await service.convert_stop("  01141  ")

    assert resolver.calls == ["01141"]


@pytest.mark.asyncio
async def test_convert_stop_rejects_blank_input_without_resolving() -> None:
    """Given whitespace input, when converting, then ValueError is raised and nothing is resolved."""
    resolver = AsyncMock()
    service = StopConversionService(resolver)

    with pytest.raises(ValueError, match="blank"):
        await service.convert_stop("   ")

    resolver.resolve.assert_not_called()


@pytest.mark.asyncio
async def test_convert_stop_propagates_resolution_error() -> None:
    """Given a failing resolver, when converting, then ResolutionError propagates unchanged."""
    error = ResolutionError("Failed to fetch bus stop data. Please check the ID.")
    service = StopConversionService(MockStopResolver(error=error))

    with pytest.raises(ResolutionError) as exc_info:
        await service.convert_stop("99999")

    assert exc_info.value is error


@pytest.mark.asyncio
async def test_convert_stop_uses_configured_origin_and_scales(sample_lookup: StopLookup) -> None:
    """Given a custom origin and scales, when converting, then they are applied."""
    origin = Origin(name="Custom", latitude=37.5547, longitude=126.9706, altitude=100)
    service = StopConversionService(
        MockStopResolver(lookup=sample_lookup), origin=origin, lat_scale=1000.0, lng_scale=1000.0
    )

    result = await service.convert_stop("01141")

    assert (result.coords.x, result.coords.y, result.coords.z) == (1, 100, 0)
    assert result.coords.origin_name == "Custom"


def test_convert_coordinates_without_resolution() -> None:
    """Given raw coordinates, when converting directly, then no resolver is needed."""
    service = StopConversionService(AsyncMock())

    coords = service.convert_coordinates(37.5547 - 0.001, 126.9706)

    assert (coords.x, coords.y, coords.z) == (0, 64, 111)


@pytest.mark.parametrize(
    ("raw", "expected"), [("01141", "01141"), (" 1 ", "1"), ("", None), ("  ", None)]
)
def test_normalize_stop_id(raw: str, expected: str | None) -> None:
    """Given raw input, when normalizing, then it is trimmed or None when blank."""
    assert StopConversionService.normalize_stop_id(raw) == expected
