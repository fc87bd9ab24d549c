"""Configuration for srclink."""

from srclink.config.loader import get_repository, load_config, parse_config
from srclink.config.settings import Settings, get_settings

__all__ = ["Settings", "get_settings", "load_config", "parse_config", "get_repository"]
