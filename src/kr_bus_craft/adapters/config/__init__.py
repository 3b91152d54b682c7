"""Configuration adapters."""

from kr_bus_craft.adapters.config.app_config import AppConfig

__all__ = ["AppConfig"]
