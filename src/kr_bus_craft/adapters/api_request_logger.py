"""Utility for logging outgoing API requests when KBC_LOG_REQUESTS is enabled."""

import json
import logging
import os
from typing import Any

logger = logging.getLogger(__name__)

SENSITIVE_KEYS = frozenset({"authorization", "cookie", "x-api-key", "x-goog-api-key", "key"})
REDACTED = "***REDACTED***"


def should_log_requests() -> bool:
    """Check if request logging is enabled via the KBC_LOG_REQUESTS environment variable."""
    return os.getenv("KBC_LOG_REQUESTS", "").lower() == "true"


def redact(values: dict[str, Any]) -> dict[str, Any]:
    """Replace values of credential-bearing keys (headers or query params)."""
    return {k: REDACTED if k.lower() in SENSITIVE_KEYS else v for k, v in values.items()}


def _format_payload(payload: Any) -> str:
    try:
        return json.dumps(payload, indent=2, ensure_ascii=False)
    except (TypeError, ValueError):
        return str(payload)


def log_api_request(
    method: str,
    url: str,
    params: dict[str, Any] | None = None,
    headers: dict[str, str] | None = None,
    payload: Any = None,
) -> None:
    """Log API request details if KBC_LOG_REQUESTS is enabled.

    Args:
        method: HTTP method (GET, POST, etc.).
        url: Request URL without query string.
        params: Query parameters (optional, credentials are redacted).
        headers: Request headers (optional, credentials are redacted).
        payload: JSON request body (optional).
    """
    if not should_log_requests():
        return

    log_parts = [f"{method} {url}"]
    if params:
        query = "&".join(f"{k}={v}" for k, v in sorted(redact(params).items()))
        log_parts[0] = f"{method} {url}?{query}"
    if headers:
        log_parts.append(f"Headers: {json.dumps(redact(headers), indent=2)}")
    if payload is not None:
        log_parts.append(f"Payload: {_format_payload(payload)}")

    logger.info("API Request:\n" + "\n".join(log_parts))
