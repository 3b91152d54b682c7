"""Builds generateContent requests for stop lookups."""

from typing import Any

from kr_bus_craft.adapters.gemini_api.constants import STOP_PROMPT_TEMPLATE


def build_stop_prompt(stop_id: str) -> str:
    """Natural-language prompt asking for the stop as JSON."""
    return STOP_PROMPT_TEMPLATE.format(stop_id=stop_id)


def build_request_body(stop_id: str) -> dict[str, Any]:
    """Request body with Google Search grounding and a JSON response type."""
    return {
        "contents": [{"role": "user", "parts": [{"text": build_stop_prompt(stop_id)}]}],
        "tools": [{"google_search": {}}],
        "generationConfig": {"responseMimeType": "application/json"},
    }
