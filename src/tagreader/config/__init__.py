"""Configuration loading and derived settings."""

from .config import Config
from .paths import ENV_CONFIG_PATH, default_config_path
from .settings import log_level_from_name

__all__ = [
    "Config",
    "ENV_CONFIG_PATH",
    "default_config_path",
    "log_level_from_name",
]
