"""Parser for Gemini generateContent responses to stop lookups."""

import json
import logging
import math
import re
from typing import Any
from urllib.parse import urlsplit

from kr_bus_craft.adapters.gemini_api.constants import UNKNOWN_CITY, UNKNOWN_STOP_NAME
from kr_bus_craft.domain.models import SourceCitation, StopLookup, StopRecord

logger = logging.getLogger(__name__)

_FENCED_JSON = re.compile(r"^```(?:json)?\s*(.*?)\s*```$", re.DOTALL)
_LINK_SCHEMES = ("http", "https")


def _is_web_link(uri: Any) -> bool:
    if not isinstance(uri, str) or not uri:
        return False
    try:
        scheme = urlsplit(uri.strip()).scheme
    except ValueError:
        return False
    return scheme.lower() in _LINK_SCHEMES


class StopResponseParser:
    """Parses generateContent responses into StopLookup objects.

    Every method raises ValueError when the response cannot be used.
    """

    @staticmethod
    def parse(data: dict[str, Any], stop_id: str) -> StopLookup:
        """Parse a full generateContent response.

        Args:
            data: Decoded JSON body returned by the API.
            stop_id: The id the user searched for, kept as the stop's id.

        Returns:
            The stop and the grounding citations.
        """
        candidate = StopResponseParser._first_candidate(data)
        text = StopResponseParser.extract_text(candidate)
        stop = StopResponseParser.parse_stop_json(text, stop_id)
        sources = StopResponseParser.extract_sources(candidate)
        return StopLookup(stop=stop, sources=sources)

    @staticmethod
    def _first_candidate(data: dict[str, Any]) -> dict[str, Any]:
        candidates = data.get("candidates") if isinstance(data, dict) else None
        if not isinstance(candidates, list) or not candidates:
            raise ValueError("Response contains no candidates")
        if not isinstance(candidates[0], dict):
            raise ValueError("Response contains no candidates")
        return candidates[0]

    @staticmethod
    def extract_text(candidate: dict[str, Any]) -> str:
        """Concatenate the text parts of a candidate."""
        content = candidate.get("content") or {}
        if not isinstance(content, dict):
            raise ValueError(f"Unexpected candidate content: {type(content).__name__}")
        parts = content.get("parts") or []
        if not isinstance(parts, list):
            raise ValueError(f"Unexpected content parts: {type(parts).__name__}")
        texts = [part.get("text", "") for part in parts if isinstance(part, dict)]
        if not all(isinstance(t, str) for t in texts):
            raise ValueError("Candidate part text is not a string")
        text = "".join(texts)
        if not text.strip():
            raise ValueError("Candidate contains no text")
        return text

    @staticmethod
    def extract_sources(candidate: dict[str, Any]) -> tuple[SourceCitation, ...]:
        """Collect web grounding chunks.

        Chunks without a web entry, or whose uri is not an http(s) link, are skipped.
        """
        metadata = candidate.get("groundingMetadata")
        chunks = metadata.get("groundingChunks") if isinstance(metadata, dict) else None
        sources: list[SourceCitation] = []
        for chunk in chunks if isinstance(chunks, list) else []:
            web = chunk.get("web") if isinstance(chunk, dict) else None
            if not isinstance(web, dict) or not _is_web_link(web.get("uri")):
                continue
            sources.append(
                SourceCitation(uri=web["uri"], title=str(web.get("title") or "Source"))
            )
        return tuple(sources)

    @staticmethod
    def _parse_coordinate(value: Any, field_name: str) -> float:
        if isinstance(value, bool) or value is None:
            raise ValueError(f"Missing or invalid {field_name}: {value!r}")
        try:
            number = float(value)
        except (TypeError, ValueError) as e:
            raise ValueError(f"Invalid {field_name}: {value!r}") from e
        if not math.isfinite(number):
            raise ValueError(f"Invalid {field_name}: {value!r}")
        return number

    @staticmethod
    def parse_stop_json(text: str, stop_id: str) -> StopRecord:
        """Parse the model's JSON answer into a StopRecord.

        A ```json fenced block is accepted. Name and city fall back to
        placeholders; coordinates must be finite numbers within range.
        """
        stripped = text.strip()
        fenced = _FENCED_JSON.match(stripped)
        if fenced:
            stripped = fenced.group(1)

        try:
            payload = json.loads(stripped)
        except json.JSONDecodeError as e:
            raise ValueError(f"Model answer is not valid JSON: {text[:200]}") from e

        # The model sometimes wraps a single answer in a list
        if isinstance(payload, list) and payload:
            payload = payload[0]
        if not isinstance(payload, dict):
            raise ValueError(f"Expected a JSON object, got {type(payload).__name__}")

        latitude = StopResponseParser._parse_coordinate(payload.get("latitude"), "latitude")
        longitude = StopResponseParser._parse_coordinate(payload.get("longitude"), "longitude")
        description = payload.get("description")

        return StopRecord(
            id=stop_id,
            name=str(payload.get("name") or UNKNOWN_STOP_NAME),
            latitude=latitude,
            longitude=longitude,
            city=str(payload.get("city") or UNKNOWN_CITY),
            description=str(description) if description else None,
        )
