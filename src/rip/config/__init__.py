"""Configuration for the rip installer and launcher."""

from rip.config.loader import ConfigError, RipConfig, load_config

__all__ = ["ConfigError", "RipConfig", "load_config"]
