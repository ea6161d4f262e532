"""Configuration package."""

from mindpulse.core.config.settings import Settings, get_settings

__all__ = ["Settings", "get_settings"]
