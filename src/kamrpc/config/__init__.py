"""Configuration package."""

from kamrpc.config.settings import ClientSettings, load_settings

__all__ = ["ClientSettings", "load_settings"]
