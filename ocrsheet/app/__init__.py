"""Application wiring: configuration shared by the interfaces."""

from .config import AppConfig, ConfigError, load_config

__all__ = ["AppConfig", "ConfigError", "load_config"]
