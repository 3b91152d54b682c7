"""End-to-end integration tests against the real Gemini API."""

import os

import pytest

from kr_bus_craft.adapters.gemini_api import GeminiStopResolver
from kr_bus_craft.application.services import StopConversionService

pytestmark = pytest.mark.skipif(
    not os.getenv("GEMINI_API_KEY"), reason="GEMINI_API_KEY is not set"
)


@pytest.mark.integration
@pytest.mark.asyncio
async def test_resolve_seoul_city_hall_stop() -> None:
    """Resolve a central Seoul stop and check it lands within a few km of the origin."""
    import aiohttp

    async with aiohttp.ClientSession() as session:
        resolver = GeminiStopResolver(os.environ["GEMINI_API_KEY"], session=session)
        service = StopConversionService(resolver)

        # 01141 is a stop next to Seoul City Hall
        result = await service.convert_stop("01141")

        assert 37.0 < result.stop.latitude < 38.0
        assert 126.5 < result.stop.longitude < 127.5
        assert abs(result.coords.x) < 10_000
        assert abs(result.coords.z) < 10_000
        assert result.coords.y == 64
