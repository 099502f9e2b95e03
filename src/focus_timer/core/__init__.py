"""Core configuration."""

from focus_timer.core.config import Config, get_config

__all__ = ["Config", "get_config"]
