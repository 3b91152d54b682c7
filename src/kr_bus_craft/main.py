"""Main entry point for the KR Bus Craft web application."""

import asyncio
import logging
import sys

import aiohttp
from pydantic import ValidationError

from kr_bus_craft.adapters.config import AppConfig
from kr_bus_craft.adapters.gemini_api import GeminiStopResolver
from kr_bus_craft.adapters.web import PyViewWebAdapter
from kr_bus_craft.application.services import StopConversionService

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
    stream=sys.stderr,
)

logger = logging.getLogger(__name__)


def load_config() -> AppConfig:
    """Load configuration from env, .env and the optional TOML file, or exit."""
    try:
        config = AppConfig()
        config.load_config_file()
    except (ValidationError, ValueError, FileNotFoundError) as e:
        logger.error(f"Invalid configuration: {e}")
        sys.exit(1)
    return config


async def main() -> None:
    """Main application entry point."""
    config = load_config()
    origin = config.get_origin()
    logger.info(
        f"Projecting relative to {origin.name} ({origin.latitude}, {origin.longitude}), "
        f"Y={origin.altitude}, scales lat={config.lat_to_meters} lng={config.lng_to_meters}"
    )
    if not config.gemini_api_key:
        logger.warning("GEMINI_API_KEY is not set; every lookup will fail until it is configured.")

    # One aiohttp session for all Gemini calls
    async with aiohttp.ClientSession() as session:
        resolver = GeminiStopResolver.from_config(config, session=session)
        conversion_service = StopConversionService(
            resolver,
            origin=origin,
            lat_scale=config.lat_to_meters,
            lng_scale=config.lng_to_meters,
        )
        display_adapter = PyViewWebAdapter(conversion_service, config)

        try:
            await display_adapter.start()
        except KeyboardInterrupt:
            logger.info("Shutting down...")
            await display_adapter.stop()


def run() -> None:
    """Console script entry point."""
    asyncio.run(main())


if __name__ == "__main__":
    run()
