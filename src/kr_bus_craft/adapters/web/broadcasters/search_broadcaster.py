"""Broadcaster for finished stop lookups."""

from __future__ import annotations

import logging
from typing import Any

from pyview.live_socket import pub_sub_hub
from pyview.vendor.flet.pubsub import PubSub

logger = logging.getLogger(__name__)


class SearchBroadcaster:
    """Delivers lookup outcomes to the connection that asked for them via PubSub."""

    async def broadcast_outcome(self, topic: str, outcome: dict[str, Any]) -> None:
        """Send a lookup outcome to all subscribers on the topic.

        Args:
            topic: The per-connection pub/sub topic.
            outcome: ``{"request_id": int, "result": ConversionResult}`` or
                ``{"request_id": int, "error": str}``.
        """
        try:
            pubsub = PubSub(pub_sub_hub, topic)
            await pubsub.send_all_on_topic_async(topic, outcome)
            logger.debug(f"Broadcasted lookup outcome {outcome.get('request_id')} to {topic}")
        except Exception as e:
            logger.error(f"Failed to broadcast via pubsub: {e}", exc_info=True)
