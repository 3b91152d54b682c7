"""Gemini stop resolver adapter.

Calls the Gemini generateContent REST endpoint with Google Search grounding.
API Documentation: https://ai.google.dev/api/generate-content
"""

import asyncio
import logging
from typing import TYPE_CHECKING, Any

import aiohttp

from kr_bus_craft.adapters.api_rate_limiter import ApiRateLimiter
from kr_bus_craft.adapters.api_request_logger import log_api_request
from kr_bus_craft.adapters.gemini_api.constants import (
    GEMINI_API_NAME,
    GEMINI_DEFAULT_BASE_URL,
    GEMINI_DEFAULT_MODEL,
    MISSING_API_KEY_MESSAGE,
    RESOLUTION_FAILED_MESSAGE,
)
from kr_bus_craft.adapters.gemini_api.request_builder import build_request_body
from kr_bus_craft.adapters.gemini_api.response_parser import StopResponseParser
from kr_bus_craft.domain.errors import ResolutionError
from kr_bus_craft.domain.models import StopLookup
from kr_bus_craft.domain.ports.stop_resolver import StopResolver

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from aiohttp import ClientResponse, ClientSession

    from kr_bus_craft.adapters.config import AppConfig


class GeminiStopResolver(StopResolver):
    """Resolves bus stop ids by asking Gemini with search grounding enabled."""

    def __init__(
        self,
        api_key: str | None,
        session: "ClientSession | None" = None,
        model: str = GEMINI_DEFAULT_MODEL,
        base_url: str = GEMINI_DEFAULT_BASE_URL,
        timeout_seconds: float = 30.0,
        rate_limiter: ApiRateLimiter | None = None,
    ) -> None:
        """Initialize the resolver.

        Args:
            api_key: Gemini API key. Lookups fail with ResolutionError when missing.
            session: Optional shared aiohttp session. Without one, a session is
                opened per lookup.
            model: Gemini model name.
            base_url: Base URL of the REST API.
            timeout_seconds: Total timeout for one lookup.
            rate_limiter: Limiter spacing requests; defaults to the shared Gemini limiter.
        """
        self._api_key = api_key
        self._session = session
        self._model = model
        self._base_url = base_url.rstrip("/")
        self._timeout = aiohttp.ClientTimeout(total=timeout_seconds)
        self._rate_limiter = rate_limiter or ApiRateLimiter.shared(GEMINI_API_NAME)

    @classmethod
    def from_config(
        cls, config: "AppConfig", session: "ClientSession | None" = None
    ) -> "GeminiStopResolver":
        """Create a resolver from application configuration."""
        return cls(
            api_key=config.gemini_api_key,
            session=session,
            model=config.gemini_model,
            base_url=config.gemini_base_url,
            timeout_seconds=config.resolver_timeout_seconds,
            rate_limiter=ApiRateLimiter.shared(
                GEMINI_API_NAME, config.resolver_min_delay_seconds
            ),
        )

    @property
    def endpoint(self) -> str:
        """generateContent URL for the configured model."""
        return f"{self._base_url}/models/{self._model}:generateContent"

    async def _read_response(self, response: "ClientResponse") -> dict[str, Any]:
        if response.status != 200:
            response_text = await response.text()
            raise ValueError(
                f"Gemini API returned status {response.status}: {response_text[:200]}"
            )
        data = await response.json(content_type=None)
        if not isinstance(data, dict):
            raise ValueError(f"Unexpected Gemini response type: {type(data).__name__}")
        return data

    async def _post(self, session: "ClientSession", body: dict[str, Any]) -> dict[str, Any]:
        headers = {"Content-Type": "application/json", "x-goog-api-key": self._api_key or ""}
        log_api_request("POST", self.endpoint, headers=headers, payload=body)
        async with self._rate_limiter:
            async with session.post(
                self.endpoint, json=body, headers=headers, timeout=self._timeout
            ) as response:
                return await self._read_response(response)

    async def _generate(self, body: dict[str, Any]) -> dict[str, Any]:
        if self._session is not None:
            return await self._post(self._session, body)
        async with aiohttp.ClientSession() as session:
            return await self._post(session, body)

    async def resolve(self, stop_id: str) -> StopLookup:
        """Resolve a stop id into a stop record and its grounding citations.

        Raises:
            ResolutionError: On missing credentials, transport errors, timeouts,
                non-200 responses or unusable model output.
        """
        if not self._api_key:
            logger.error("Gemini API key is not configured")
            raise ResolutionError(MISSING_API_KEY_MESSAGE)

        body = build_request_body(stop_id)
        try:
            data = await self._generate(body)
            lookup = StopResponseParser.parse(data, stop_id)
        except (aiohttp.ClientError, asyncio.TimeoutError, ValueError) as e:
            logger.error(f"Gemini API Error for stop {stop_id!r}: {e}", exc_info=True)
            raise ResolutionError(RESOLUTION_FAILED_MESSAGE) from e

        logger.info(
            f"Resolved stop {stop_id!r} to {lookup.stop.name} "
            f"({lookup.stop.latitude:.6f}, {lookup.stop.longitude:.6f}) "
            f"with {len(lookup.sources)} source(s)"
        )
        return lookup
