"""Configuration for Shark Dash."""

from sharkdash.config.settings import Settings, get_settings

__all__ = ["Settings", "get_settings"]
