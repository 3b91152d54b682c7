"""Spacing for outgoing Gemini requests.

Every stop lookup costs search-grounded model quota, so lookups from all
connected browsers share one limiter per API and are spaced by a minimum delay.
"""

from __future__ import annotations

import asyncio
import logging
import time
from typing import ClassVar

logger = logging.getLogger(__name__)

DEFAULT_MIN_DELAY_SECONDS = 0.5


class ApiRateLimiter:
    """Enforces a minimum delay between requests to one API."""

    _instances: ClassVar[dict[str, ApiRateLimiter]] = {}

    def __init__(
        self, api_name: str, min_delay_seconds: float = DEFAULT_MIN_DELAY_SECONDS
    ) -> None:
        """Initialize the rate limiter.

        Args:
            api_name: Name of the API (for logging).
            min_delay_seconds: Minimum delay between requests in seconds.
        """
        self.api_name = api_name
        self.min_delay_seconds = min_delay_seconds
        self._next_allowed_at = 0.0
        self._lock = asyncio.Lock()

    @classmethod
    def shared(cls, api_name: str, min_delay_seconds: float | None = None) -> ApiRateLimiter:
        """Return the process-wide limiter for an API, creating it on first use.

        An explicit min_delay_seconds is applied to an existing limiter too; None keeps
        the current delay (0.5s for a new limiter).
        """
        limiter = cls._instances.get(api_name)
        if limiter is None:
            delay = DEFAULT_MIN_DELAY_SECONDS if min_delay_seconds is None else min_delay_seconds
            limiter = cls(api_name, delay)
            cls._instances[api_name] = limiter
            logger.info(f"Created rate limiter for {api_name} with {delay}s minimum delay")
        elif min_delay_seconds is not None and min_delay_seconds != limiter.min_delay_seconds:
            logger.info(
                f"Changing minimum delay for {api_name} from "
                f"{limiter.min_delay_seconds}s to {min_delay_seconds}s"
            )
            limiter.min_delay_seconds = min_delay_seconds
        return limiter

    @classmethod
    def reset(cls) -> None:
        """Forget all shared limiters."""
        cls._instances.clear()

    async def acquire(self) -> None:
        """Wait until the next request to this API is allowed."""
        async with self._lock:
            wait_time = self._next_allowed_at - time.monotonic()
            if wait_time > 0:
                logger.debug(f"{self.api_name}: waiting {wait_time:.2f}s before next request")
                await asyncio.sleep(wait_time)
            self._next_allowed_at = time.monotonic() + self.min_delay_seconds

    async def __aenter__(self) -> ApiRateLimiter:
        await self.acquire()
        return self

    async def __aexit__(
        self, _exc_type: type | None, _exc_val: BaseException | None, _exc_tb: object
    ) -> None:
        return None
