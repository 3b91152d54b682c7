"""Stop search LiveView: the form that turns a bus stop id into block coordinates."""

from __future__ import annotations

import asyncio
import logging
import os
import uuid
from typing import Any

from pyview import LiveView, LiveViewSocket, is_connected
from pyview.events import InfoEvent
from pyview.template.live_template import LiveRender, LiveTemplate
from pyview.vendor import ibis

from kr_bus_craft.adapters.config import AppConfig
from kr_bus_craft.adapters.web.broadcasters import SearchBroadcaster
from kr_bus_craft.adapters.web.formatters import SearchFormatter
from kr_bus_craft.adapters.web.state import StopSearchState
from kr_bus_craft.application.services import StopConversionService
from kr_bus_craft.domain.errors import ResolutionError
from kr_bus_craft.domain.models.search_state import (
    Loading,
    complete_search,
    fail_search,
    start_search,
)

logger = logging.getLogger(__name__)

UNEXPECTED_ERROR_MESSAGE = "An unexpected error occurred."
TEMPLATE_FILE = os.path.join(os.path.dirname(os.path.abspath(__file__)), "stop_search.html")


def extract_stop_id(payload: Any) -> str:
    """Read the stop id from a form submit payload.

    PyView decodes form values as lists (``{"stop_id": ["01141"]}``); plain
    strings are accepted too.
    """
    if not isinstance(payload, dict):
        return ""
    value = payload.get("stop_id", "")
    if isinstance(value, list):
        value = value[0] if value else ""
    return value if isinstance(value, str) else ""


class StopSearchLiveView(LiveView[StopSearchState]):
    """LiveView for resolving a bus stop and showing its grid coordinates."""

    def __init__(self, conversion_service: StopConversionService, config: AppConfig) -> None:
        """Initialize the LiveView.

        Args:
            conversion_service: Service resolving stops and converting coordinates.
            config: Application configuration.
        """
        super().__init__()
        if not isinstance(config, AppConfig):
            raise TypeError("config must be an AppConfig instance")

        self.conversion_service = conversion_service
        self.config = config
        self.formatter = SearchFormatter(config)
        self.broadcaster = SearchBroadcaster()
        self._pending_lookup: asyncio.Task | None = None

    async def mount(self, socket: LiveViewSocket[StopSearchState], _session: dict) -> None:
        """Mount the LiveView and subscribe to this connection's result topic."""
        socket.context = StopSearchState(topic=f"stop_search:{uuid.uuid4()}")

        if is_connected(socket):
            try:
                await socket.subscribe(socket.context.topic)
                logger.debug(f"Subscribed socket to result topic: {socket.context.topic}")
            except Exception as e:
                logger.error(
                    f"Failed to subscribe to topic {socket.context.topic}: {e}", exc_info=True
                )

    async def handle_event(
        self, event: str, payload: Any, socket: LiveViewSocket[StopSearchState]
    ) -> None:
        """Handle the form submit. Blank input is ignored."""
        if event != "search":
            logger.debug(f"Ignoring unknown event: {event}")
            return

        loading = start_search(socket.context.search, extract_stop_id(payload))
        if loading is None:
            return

        self._cancel_pending_lookup()
        socket.context.search = loading
        socket.context.stop_id = loading.stop_id
        logger.info(f"Search {loading.request_id} started for stop {loading.stop_id!r}")

        self._pending_lookup = asyncio.create_task(
            self._run_lookup(socket.context.topic, loading)
        )

    async def _run_lookup(self, topic: str, loading: Loading) -> None:
        """Resolve and convert in the background, then deliver the outcome via pubsub."""
        outcome: dict[str, Any] = {"request_id": loading.request_id}
        try:
            outcome["result"] = await self.conversion_service.convert_stop(loading.stop_id)
        except ResolutionError as e:
            outcome["error"] = e.message
        except Exception as e:
            logger.error(f"Unexpected error resolving {loading.stop_id!r}: {e}", exc_info=True)
            outcome["error"] = UNEXPECTED_ERROR_MESSAGE

        await self.broadcaster.broadcast_outcome(topic, outcome)

    def _cancel_pending_lookup(self) -> None:
        if self._pending_lookup is not None and not self._pending_lookup.done():
            self._pending_lookup.cancel()
            logger.debug("Cancelled superseded lookup")
        self._pending_lookup = None

    def apply_outcome(self, context: StopSearchState, outcome: dict[str, Any]) -> None:
        """Move the search state forward; outcomes of superseded searches are dropped."""
        request_id = outcome.get("request_id")
        if not isinstance(request_id, int):
            logger.warning(f"Lookup outcome without request id: {outcome}")
            return

        if "result" in outcome:
            new_state = complete_search(context.search, request_id, outcome["result"])
        else:
            message = outcome.get("error") or UNEXPECTED_ERROR_MESSAGE
            new_state = fail_search(context.search, request_id, message)

        if new_state is context.search:
            logger.debug(f"Discarded stale lookup outcome {request_id}")
            return
        context.search = new_state

    async def handle_info(
        self, event: str | InfoEvent, socket: LiveViewSocket[StopSearchState]
    ) -> None:
        """Handle lookup outcomes delivered through pubsub."""
        if isinstance(event, InfoEvent) and event.name == socket.context.topic:
            if isinstance(event.payload, dict):
                self.apply_outcome(socket.context, event.payload)
            else:
                logger.warning(f"Unexpected lookup payload type: {type(event.payload)}")
            return

        logger.debug(f"Ignoring info event: {event}")

    async def unmount(self, socket: LiveViewSocket[StopSearchState]) -> None:
        """Unmount the LiveView and drop any in-flight lookup."""
        self._cancel_pending_lookup()

    async def disconnect(self, socket: LiveViewSocket[StopSearchState]) -> None:
        """Handle socket disconnection - drop any in-flight lookup."""
        self._cancel_pending_lookup()

    async def render(self, assigns: StopSearchState | dict, meta: Any) -> Any:
        """Render the HTML template."""
        state = assigns if isinstance(assigns, StopSearchState) else StopSearchState()
        template_assigns = self.formatter.build_assigns(state.search, state.stop_id)

        with open(TEMPLATE_FILE, encoding="utf-8") as f:
            template_content = f.read()

        live_template = LiveTemplate(ibis.Template(template_content))
        return LiveRender(live_template, template_assigns, meta)


def create_stop_search_live_view(
    conversion_service: StopConversionService, config: AppConfig
) -> type[StopSearchLiveView]:
    """Create a configured StopSearchLiveView class.

    PyView's add_live_view expects a class, not an instance, so the
    dependencies are captured in a subclass.
    """
    captured_service = conversion_service
    captured_config = config

    class ConfiguredStopSearchLiveView(StopSearchLiveView):
        """Configured LiveView for the stop search page."""

        def __init__(self) -> None:
            super().__init__(captured_service, captured_config)

    return ConfiguredStopSearchLiveView
