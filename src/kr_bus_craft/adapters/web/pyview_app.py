"""PyView web adapter for the stop search page."""

from __future__ import annotations

import logging
from typing import Any

from kr_bus_craft.adapters.config import AppConfig
from kr_bus_craft.application.services import StopConversionService
from kr_bus_craft.domain.ports import DisplayAdapter

from .rate_limit_middleware import RateLimitMiddleware
from .views.stop_search import create_stop_search_live_view

logger = logging.getLogger(__name__)


class PyViewWebAdapter(DisplayAdapter):
    """PyView-based web adapter serving the stop search form."""

    def __init__(self, conversion_service: StopConversionService, config: AppConfig) -> None:
        """Initialize the web adapter.

        Args:
            conversion_service: Service resolving stops and converting coordinates.
            config: Application configuration.
        """
        if not isinstance(config, AppConfig):
            raise TypeError("config must be an AppConfig instance")
        if not callable(getattr(conversion_service, "convert_stop", None)):
            raise TypeError("conversion_service must provide convert_stop")

        self.conversion_service = conversion_service
        self.config = config
        self._server: Any | None = None

    def create_app(self) -> Any:
        """Build the PyView application wrapped in rate limiting middleware."""
        from markupsafe import Markup
        from pyview import PyView
        from pyview.playground.favicon import generate_favicon_svg
        from pyview.template import defaultRootTemplate
        from starlette.responses import Response
        from starlette.routing import Route

        app = PyView()

        favicon_svg = generate_favicon_svg(
            self.config.title,
            bg_color=self.config.banner_color,
            text_color="#FFFFFF",
        )

        async def favicon_route(_request: Any) -> Response:
            response = Response(content=favicon_svg, media_type="image/svg+xml")
            response.headers["Cache-Control"] = "public, max-age=60, must-revalidate"
            return response

        app.routes.append(Route("/favicon.svg", favicon_route, methods=["GET"]))

        async def healthz(_request: Any) -> Response:
            """Health check endpoint for load balancers and monitoring."""
            return Response(content="Ok", media_type="text/plain")

        app.routes.append(Route("/healthz", healthz, methods=["GET"]))

        favicon_link = Markup('<link rel="icon" href="/favicon.svg" type="image/svg+xml">')
        app.rootTemplate = defaultRootTemplate(
            title=self.config.title,
            title_suffix="",
            css=favicon_link,
        )

        live_view_class = create_stop_search_live_view(self.conversion_service, self.config)
        app.add_live_view("/", live_view_class)
        logger.info(
            f"Registered stop search at '/' (origin: {self.conversion_service.origin.name})"
        )

        return RateLimitMiddleware(app, requests_per_minute=self.config.rate_limit_per_minute)

    async def start(self) -> None:
        """Start the web server."""
        import uvicorn

        wrapped_app = self.create_app()
        server_config = uvicorn.Config(
            wrapped_app,
            host=self.config.host,
            port=self.config.port,
            log_level="info",
        )
        self._server = uvicorn.Server(server_config)
        await self._server.serve()

    async def stop(self) -> None:
        """Stop the web server."""
        if self._server:
            self._server.should_exit = True
